"""Recommendation Module - Next subject/topic selection and difficulty calibration."""

from typing import NamedTuple, Protocol, Sequence, TypeVar

from kidquiz.shared.models import StrategyType

T = TypeVar("T")


class RandomSource(Protocol):
    """Uniform random generator used by the recommendation strategy.

    ``random.Random`` satisfies this protocol. Tests pass scripted sources
    to force a particular branch.
    """

    def random(self) -> float:
        """Return a float uniformly drawn from [0, 1)."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty sequence."""
        ...


class StrategyDecision(NamedTuple):
    """Subject and topic picked by the strategy, with the policy that chose them."""

    subject: str
    topic: str
    strategy: StrategyType
