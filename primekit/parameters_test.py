"""Tests for parameters."""

import dataclasses

from primekit import parameters
from absl.testing import absltest
from absl.testing import parameterized


class PrimalityParametersTest(parameterized.TestCase):

  def test_defaults(self):
    params = parameters.DEFAULT_PRIMALITY_PARAMS
    self.assertEqual(params.rounds, 16)
    self.assertAlmostEqual(params.false_positive_bound, 1 / 4**16)

  def test_false_positive_bound(self):
    self.assertEqual(
        parameters.PrimalityParameters(rounds=2).false_positive_bound, 1 / 16
    )

  @parameterized.parameters(0, -1)
  def test_rounds_must_be_positive(self, rounds):
    with self.assertRaises(ValueError):
      parameters.PrimalityParameters(rounds=rounds)

  @parameterized.parameters(1.5, True, '16')
  def test_rounds_must_be_int(self, rounds):
    with self.assertRaises(TypeError):
      parameters.PrimalityParameters(rounds=rounds)

  def test_frozen(self):
    params = parameters.PrimalityParameters()
    with self.assertRaises(dataclasses.FrozenInstanceError):
      params.rounds = 3


if __name__ == '__main__':
  absltest.main()
