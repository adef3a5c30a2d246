"""The Extended Euclidean Algorithm."""

from primekit import bignum
from primekit import types


def egcd(a: types.SignedInt, b: types.SignedInt) -> types.EgcdResult:
  """Computes gcd(a, b) and the Bezout coefficients of a and b.

  Iterative; stack depth does not depend on the size of the operands.

  The sign of the returned gcd is not normalized. It is non-negative whenever
  both inputs are non-negative; with negative operands it follows the sign of
  the last non-zero floor remainder. egcd(0, 0) is (0, 0, 1).

  Args:
    a: A signed integer.
    b: A signed integer.

  Returns:
    An EgcdResult (gcd, x, y) such that gcd == a * x + b * y.
  """
  a = bignum.to_signed(a)
  b = bignum.to_signed(b)
  # (x, y) are the coefficients of b, (u, v) those of a.
  x, y = 0, 1
  u, v = 1, 0
  while a != 0:
    q, r = bignum.floor_divmod(b, a)
    x, y, u, v = u, v, x - u * q, y - v * q
    a, b = r, a
  return types.EgcdResult(int(b), int(x), int(y))
