"""A module containing basic types for primekit."""

from typing import NamedTuple, Union

import gmpy2


# Any exact integer accepted at the API boundary. Negative values allowed.
SignedInt = Union[int, gmpy2.mpz]

# Same representation as SignedInt; callers guarantee the value is >= 0.
UnsignedInt = Union[int, gmpy2.mpz]


class EgcdResult(NamedTuple):
  """The result of the Extended Euclidean Algorithm.

  Satisfies gcd == a * x + b * y for the inputs (a, b).
  """

  gcd: int
  x: int
  y: int
