"""Command line front-end for primekit.

Usage:
  primekit egcd A B
  primekit inverse A M
  primekit isprime N [N ...] [--rounds=16] [--seed=1234]

Negative operands such as -3 or -0x1f are read as integers, not flags.
"""

from collections.abc import Sequence
import logging
import re
from typing import Callable, Optional

from absl import app
from absl import flags
from primekit import api
from primekit import parameters
from primekit import random_source

_ROUNDS = flags.DEFINE_integer(
    'rounds',
    parameters.DEFAULT_ROUNDS,
    'Number of Miller-Rabin witness rounds.',
    lower_bound=1,
)
_SEED = flags.DEFINE_integer(
    'seed',
    None,
    'If set, draw witnesses from a reproducible source seeded with this value.',
)

# Matches -3, -0x1f, -0b101. absl would otherwise read these as short flags.
_NEGATIVE_INT = re.compile(r'-\d\w*')

# argv entries are C strings, so no real argument contains a NUL.
_HIDDEN_PREFIX = '\0'


def _parse_int(text: str) -> int:
  try:
    return int(text, 0)
  except ValueError:
    raise app.UsageError(f'Not an integer: {text!r}') from None


def _make_rng(seed: Optional[int]) -> random_source.RandomSource:
  if seed is None:
    return random_source.SystemRandomSource()
  return random_source.PseudorandomSource(seed)


def run_egcd(args: Sequence[str]) -> list[str]:
  if len(args) != 2:
    raise app.UsageError('egcd expects exactly two integers.')
  gcd, x, y = api.egcd(*(_parse_int(arg) for arg in args))
  return [f'{gcd} {x} {y}']


def run_inverse(args: Sequence[str]) -> list[str]:
  if len(args) != 2:
    raise app.UsageError('inverse expects an integer and a modulus.')
  a, modulus = (_parse_int(arg) for arg in args)
  try:
    return [str(api.checked_mod_inverse(a, modulus))]
  except ValueError as e:
    raise app.UsageError(str(e)) from e


def run_isprime(
    args: Sequence[str],
    params: parameters.PrimalityParameters,
    rng: random_source.RandomSource,
) -> list[str]:
  if not args:
    raise app.UsageError('isprime expects at least one integer.')
  lines = []
  for arg in args:
    n = _parse_int(arg)
    if api.is_probably_prime(n, params.rounds, rng):
      lines.append(f'{arg}: probably prime')
    else:
      lines.append(f'{arg}: composite')
  return lines


def main(argv: Sequence[str]) -> None:
  if len(argv) < 2:
    raise app.UsageError('Expected a command: egcd, inverse or isprime.')
  command, args = argv[1], argv[2:]

  params = parameters.PrimalityParameters(rounds=_ROUNDS.value)
  commands: dict[str, Callable[[Sequence[str]], list[str]]] = {
      'egcd': run_egcd,
      'inverse': run_inverse,
      'isprime': lambda a: run_isprime(a, params, _make_rng(_SEED.value)),
  }
  if command not in commands:
    raise app.UsageError(f'Unknown command: {command}')

  logging.info(
      f'{command}: rounds={params.rounds}, seed={_SEED.value}, '
      f'false positive bound={params.false_positive_bound:.3g}'
  )
  for line in commands[command](args):
    print(line)


def parse_flags(argv: Sequence[str]) -> list[str]:
  """Parses flags, keeping negative integer operands as positional args."""
  hidden = {}
  masked = []
  for arg in argv:
    if _NEGATIVE_INT.fullmatch(arg):
      placeholder = f'{_HIDDEN_PREFIX}{len(hidden)}'
      hidden[placeholder] = arg
      arg = placeholder
    masked.append(arg)
  positional = app.parse_flags_with_usage(masked)
  return [hidden.get(arg, arg) for arg in positional]


def run() -> None:
  app.run(main, flags_parser=parse_flags)


if __name__ == '__main__':
  run()
