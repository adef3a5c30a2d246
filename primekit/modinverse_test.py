"""Tests for modinverse."""

import math
from unittest import mock

import gmpy2
import hypothesis
from hypothesis import strategies
from primekit import egcd
from primekit import modinverse
from absl.testing import absltest
from absl.testing import parameterized


class ModInverseTest(parameterized.TestCase):

  @parameterized.named_parameters(
      ('crt_coefficient', 53, 61, 38),
      ('rsa_private_exponent', 17, 780, 413),
      ('one', 1, 7, 1),
      ('minus_one', 6, 7, 6),
      ('modulus_two', 5, 2, 1),
  )
  def test_specific_examples(self, a, modulus, expected):
    self.assertEqual(modinverse.mod_inverse(a, modulus), expected)

  def test_negative_a_is_reduced_first(self):
    self.assertEqual(modinverse.mod_inverse(-3, 7), 2)

  def test_a_larger_than_modulus(self):
    self.assertEqual(modinverse.mod_inverse(53 + 61 * 1000, 61), 38)

  def test_large_prime_modulus(self):
    p = 2**521 - 1
    a = 3**300
    s = modinverse.mod_inverse(a, p)
    self.assertEqual(a * s % p, 1)
    self.assertIs(type(s), int)

  @hypothesis.settings(deadline=None)
  @hypothesis.given(
      strategies.integers(), strategies.integers(min_value=2, max_value=2**256)
  )
  def test_inverse_property(self, a: int, modulus: int):
    hypothesis.assume(math.gcd(a, modulus) == 1)
    s = modinverse.mod_inverse(a, modulus)
    self.assertBetween(s, 0, modulus - 1)
    self.assertEqual(a * s % modulus, 1)
    self.assertEqual(s, gmpy2.invert(a, modulus))


class CheckedModInverseTest(parameterized.TestCase):

  def test_coprime_matches_unchecked(self):
    self.assertEqual(modinverse.checked_mod_inverse(17, 780), 413)

  def test_runs_egcd_once(self):
    with mock.patch.object(egcd, 'egcd', wraps=egcd.egcd) as egcd_spy:
      self.assertEqual(modinverse.checked_mod_inverse(-3, 7), 2)
    egcd_spy.assert_called_once_with(4, 7)

  @hypothesis.settings(deadline=None)
  @hypothesis.given(
      strategies.integers(), strategies.integers(min_value=2, max_value=2**128)
  )
  def test_matches_unchecked(self, a: int, modulus: int):
    hypothesis.assume(math.gcd(a, modulus) == 1)
    self.assertEqual(
        modinverse.checked_mod_inverse(a, modulus),
        modinverse.mod_inverse(a, modulus),
    )

  def test_not_coprime_raises(self):
    with self.assertRaises(modinverse.NoInverseError) as cm:
      modinverse.checked_mod_inverse(6, 9)
    self.assertEqual(cm.exception.gcd, 3)
    self.assertEqual(cm.exception.a, 6)
    self.assertEqual(cm.exception.modulus, 9)

  def test_no_inverse_error_is_value_error(self):
    with self.assertRaises(ValueError):
      modinverse.checked_mod_inverse(0, 5)

  @parameterized.parameters(1, 0, -7)
  def test_invalid_modulus_raises(self, modulus):
    with self.assertRaises(ValueError):
      modinverse.checked_mod_inverse(3, modulus)

  def test_rejects_non_integers(self):
    with self.assertRaises(TypeError):
      modinverse.checked_mod_inverse(3.0, 7)


if __name__ == '__main__':
  absltest.main()
