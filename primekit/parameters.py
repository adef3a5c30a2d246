"""Class encapsulating params for probabilistic primality testing."""

import dataclasses

DEFAULT_ROUNDS = 16


@dataclasses.dataclass(frozen=True)
class PrimalityParameters:
  """Parameters for the Miller-Rabin primality test."""

  # The number of independent witness rounds. Each round draws a fresh
  # witness, so a composite survives all of them with probability at most
  # 4 ** -rounds.
  rounds: int = DEFAULT_ROUNDS

  # Upper bound on the probability that a composite is reported prime.
  false_positive_bound: float = dataclasses.field(init=False)

  def __post_init__(self) -> None:
    if isinstance(self.rounds, bool) or not isinstance(self.rounds, int):
      raise TypeError(f"rounds must be an int, got {self.rounds!r}")
    if self.rounds < 1:
      raise ValueError(f"rounds must be at least 1, got {self.rounds}")
    object.__setattr__(self, 'false_positive_bound', 4.0**-self.rounds)


DEFAULT_PRIMALITY_PARAMS = PrimalityParameters()
