"""Modular multiplicative inverses."""

from primekit import bignum
from primekit import egcd as egcd_lib
from primekit import types


def _positive_residue(s: int, modulus: int) -> int:
  while s <= 0:
    s += modulus
  return int(s)


class NoInverseError(ValueError):
  """Raised when a number has no inverse modulo the given modulus."""

  def __init__(self, a: int, modulus: int, gcd: int) -> None:
    super().__init__(
        f"{a} has no inverse modulo {modulus}: gcd({a}, {modulus}) = {gcd}"
    )
    self.a = a
    self.modulus = modulus
    self.gcd = gcd


def mod_inverse(a: types.SignedInt, modulus: types.SignedInt) -> int:
  """Returns the inverse of a modulo `modulus`, in the range [0, modulus).

  The caller must guarantee that modulus > 1 and gcd(a, modulus) == 1. Neither
  condition is checked; for a non-coprime pair the result is meaningless. Use
  checked_mod_inverse when the inputs are not known to be coprime.

  Args:
    a: The number to invert. Negative values are reduced to their positive
      residue first.
    modulus: The modulus, greater than 1.

  Returns:
    s such that a * s == 1 (mod modulus).
  """
  a = bignum.to_signed(a)
  modulus = bignum.to_signed(modulus)
  _, s, _ = egcd_lib.egcd(bignum.floor_divmod(a, modulus)[1], modulus)
  return _positive_residue(s, modulus)


def checked_mod_inverse(
    a: types.SignedInt, modulus: types.SignedInt
) -> int:
  """Like mod_inverse, but validates its inputs.

  Raises:
    ValueError: if modulus <= 1.
    NoInverseError: if a and modulus are not coprime.
  """
  a = bignum.to_signed(a)
  modulus = bignum.to_signed(modulus)
  if modulus <= 1:
    raise ValueError(f"modulus must be greater than 1, got {modulus}")
  gcd, s, _ = egcd_lib.egcd(bignum.floor_divmod(a, modulus)[1], modulus)
  if gcd != 1:
    raise NoInverseError(int(a), int(modulus), gcd)
  return _positive_residue(s, modulus)
