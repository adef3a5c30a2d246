"""Arbitrary-precision integer primitives backed by gmpy2."""

import gmpy2
from primekit import types


def to_signed(value: types.SignedInt) -> gmpy2.mpz:
  """Converts an exact integer to an mpz.

  Args:
    value: A Python int or a gmpy2.mpz.

  Returns:
    The value as a gmpy2.mpz.

  Raises:
    TypeError: if the value is not an exact integer (bools and floats are
      rejected).
  """
  if isinstance(value, bool) or not isinstance(value, (int, gmpy2.mpz)):
    raise TypeError(
        f"Unsupported type for big integer: {type(value).__name__}"
    )
  return gmpy2.mpz(value)


def to_unsigned(value: types.UnsignedInt) -> gmpy2.mpz:
  """Like to_signed, but rejects negative values with a ValueError."""
  result = to_signed(value)
  if result < 0:
    raise ValueError(f"Expected a non-negative integer, got {value}")
  return result


def floor_divmod(a: gmpy2.mpz, b: gmpy2.mpz) -> tuple[gmpy2.mpz, gmpy2.mpz]:
  """Floor quotient and remainder; the remainder takes the sign of b."""
  if b == 0:
    raise ZeroDivisionError("division by zero")
  return gmpy2.f_divmod(a, b)


def powmod(base: gmpy2.mpz, exp: gmpy2.mpz, mod: gmpy2.mpz) -> gmpy2.mpz:
  return gmpy2.powmod(base, exp, mod)


def is_even(x: gmpy2.mpz) -> bool:
  return gmpy2.is_even(x)


def is_odd(x: gmpy2.mpz) -> bool:
  return gmpy2.is_odd(x)
