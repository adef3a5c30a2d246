"""Sources of randomness for choosing Miller-Rabin witnesses.

Every primality test draws its witnesses through a RandomSource so that tests
can substitute a deterministic sequence for the system CSPRNG.
"""

import abc
import itertools
import random
import threading
from typing import Iterable, Optional

import gmpy2


class RandomSourceError(RuntimeError):
  """Raised when a source cannot produce a valid value."""


class RandomSource(abc.ABC):
  """An abstract source of uniformly distributed integers."""

  def uniform_int(self, low: int, high: int) -> int:
    """Returns a uniformly chosen integer in the closed range [low, high]."""
    if low > high:
      raise ValueError(f"Empty range [{low}, {high}]")
    return int(self._uniform_int(int(low), int(high)))

  @abc.abstractmethod
  def _uniform_int(self, low: int, high: int) -> int:
    ...


class SystemRandomSource(RandomSource):
  """Draws from the operating system's CSPRNG.

  Seeding has no effect; the underlying generator is safe to share across
  threads.
  """

  def __init__(self) -> None:
    self._rng = random.SystemRandom()

  def _uniform_int(self, low: int, high: int) -> int:
    return self._rng.randint(low, high)


class PseudorandomSource(RandomSource):
  """A reproducible source backed by a gmpy2 random state.

  Not suitable for adversarial inputs; intended for reproducible runs.
  """

  def __init__(self, seed: Optional[int] = None) -> None:
    if seed is None:
      seed = random.SystemRandom().getrandbits(64)
    self.seed = seed
    self._state = gmpy2.random_state(seed)
    # gmpy2 random states are not safe to advance concurrently.
    self._lock = threading.Lock()

  def _uniform_int(self, low: int, high: int) -> int:
    with self._lock:
      offset = gmpy2.mpz_random(self._state, high - low + 1)
    return low + int(offset)


class CycleRng(RandomSource):
  """Returns a fixed sequence of values, repeating it forever.

  Values are returned verbatim; a value outside the requested range is left
  for the caller to reject.
  """

  def __init__(self, values: Iterable[int]) -> None:
    values = list(values)
    if not values:
      raise ValueError("CycleRng requires at least one value")
    self.values = values
    self._iter = itertools.cycle(values)
    self._lock = threading.Lock()

  def _uniform_int(self, low: int, high: int) -> int:
    with self._lock:
      return next(self._iter)


class ConstantUniformRng(CycleRng):
  """Always returns the same value."""

  def __init__(self, const_uniform: int) -> None:
    super().__init__([const_uniform])


class FailingRng(RandomSource):
  """A source that is never able to produce a value."""

  def _uniform_int(self, low: int, high: int) -> int:
    raise RandomSourceError("FailingRng cannot produce values")


ALL_RNGS = [SystemRandomSource, PseudorandomSource]
