"""The Miller-Rabin probabilistic primality test.

A composite passes `rounds` independent witness rounds with probability at
most 4 ** -rounds. With 16 rounds that is about one in 4.29e9.
"""

import logging
from typing import Optional

import gmpy2
from primekit import bignum
from primekit import random_source
from primekit import types

# Shared by all callers that do not inject their own source.
_DEFAULT_RNG = random_source.SystemRandomSource()


def _check_candidate(n: gmpy2.mpz) -> None:
  if n <= 3:
    raise ValueError(f"Miller-Rabin requires n > 3, got {n}")
  if not bignum.is_odd(n):
    raise ValueError(f"Miller-Rabin requires an odd n, got {n}")


def factorize(n: types.UnsignedInt) -> tuple[int, int]:
  """Factors out the powers of 2 from n - 1.

  Args:
    n: An odd integer greater than 3.

  Returns:
    (r, d) with d odd and n - 1 == 2 ** r * d. r is at least 1.
  """
  n = bignum.to_unsigned(n)
  _check_candidate(n)
  d = n - 1
  r = 0
  while bignum.is_even(d):
    d //= 2
    r += 1
  return r, int(d)


def pick_witness(
    n: types.UnsignedInt, rng: random_source.RandomSource
) -> int:
  """Draws a uniformly random witness in [2, n - 2].

  Raises:
    RandomSourceError: if the source returns a value outside the range.
  """
  low, high = 2, int(n) - 2
  a = rng.uniform_int(low, high)
  if not low <= a <= high:
    raise random_source.RandomSourceError(
        f"Witness {a} is outside the range [{low}, {high}]"
    )
  return a


def miller_rabin_round(
    n: types.UnsignedInt,
    r: types.UnsignedInt,
    d: types.UnsignedInt,
    a: types.UnsignedInt,
) -> bool:
  """Runs a single Miller-Rabin round with witness a.

  Args:
    n: The odd candidate, greater than 3.
    r: The power of two in n - 1 = 2 ** r * d.
    d: The odd part of n - 1.
    a: The witness, in [2, n - 2].

  Returns:
    True if n behaves like a prime for this witness, False if a proves n
    composite.
  """
  n = bignum.to_unsigned(n)
  d = bignum.to_unsigned(d)
  n_minus_one = n - 1
  x = bignum.powmod(bignum.to_unsigned(a), d, n)
  if x == 1 or x == n_minus_one:
    return True
  for _ in range(int(r) - 1):
    x = bignum.powmod(x, 2, n)
    if x == n_minus_one:
      return True
  return False


def miller_rabin(
    n: types.UnsignedInt,
    rounds: int,
    rng: Optional[random_source.RandomSource] = None,
) -> bool:
  """Checks whether n is probably a prime.

  The arguments are caller-guaranteed invariants rather than user input:
  violating them raises instead of being coerced. Use
  primes.is_probably_prime for arbitrary integers.

  Args:
    n: The number to test. Must be odd and greater than 3.
    rounds: The number of witness rounds. Must be at least 1.
    rng: The source of witnesses. Defaults to the system CSPRNG.

  Returns:
    True if n is probably a prime, False if n is definitely composite.

  Raises:
    ValueError: if n is not odd, n <= 3, or rounds < 1.
  """
  n = bignum.to_unsigned(n)
  _check_candidate(n)
  if rounds < 1:
    raise ValueError(f"rounds must be at least 1, got {rounds}")
  if rng is None:
    rng = _DEFAULT_RNG

  r, d = factorize(n)
  logging.debug(f"n - 1 = 2^{r} * {d}")
  for i in range(rounds):
    a = pick_witness(n, rng)
    if not miller_rabin_round(n, r, d, a):
      logging.debug(f"round {i}: witness {a} proves {n} composite")
      return False
  logging.debug(f"{n} passed {rounds} rounds")
  return True
