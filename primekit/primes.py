"""Convenience primality tests for integers of any size."""

from typing import Optional

from primekit import bignum
from primekit import miller_rabin as mr
from primekit import parameters
from primekit import random_source
from primekit import types


def is_probably_prime_unsigned(
    n: types.UnsignedInt,
    rounds: int = parameters.DEFAULT_ROUNDS,
    rng: Optional[random_source.RandomSource] = None,
) -> bool:
  """Checks if a non-negative integer is probably a prime.

  Performs some short-cut tests and proceeds with the Miller-Rabin test if
  needed. See miller_rabin.miller_rabin for the error bound.

  Args:
    n: A non-negative integer.
    rounds: Number of Miller-Rabin rounds. Must be greater than 0.
    rng: The source of witnesses. Defaults to the system CSPRNG.

  Returns:
    True if n is probably a prime, False if n is not a prime.
  """
  n = bignum.to_unsigned(n)
  if rounds < 1:
    raise ValueError(f"rounds must be at least 1, got {rounds}")
  if n < 2:
    return False
  if n < 4:
    return True
  if bignum.is_even(n):
    return False
  return mr.miller_rabin(n, rounds, rng)


def is_probably_prime(
    n: types.SignedInt,
    rounds: int = parameters.DEFAULT_ROUNDS,
    rng: Optional[random_source.RandomSource] = None,
) -> bool:
  """Like is_probably_prime_unsigned, but accepts negative numbers.

  Negative numbers are never prime.
  """
  n = bignum.to_signed(n)
  if n < 0:
    if rounds < 1:
      raise ValueError(f"rounds must be at least 1, got {rounds}")
    return False
  return is_probably_prime_unsigned(n, rounds, rng)
