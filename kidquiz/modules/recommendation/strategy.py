"""Recommendation Strategy - Picks the next subject and topic.

The policy is evaluated as a sequence of independent draws:

1. With probability ``weak_focus_probability`` practise the weakest
   subject's weakest topic.
2. Otherwise, with probability ``strong_reinforce_probability``, reinforce
   the strongest subject's best topic.
3. Otherwise introduce a subject the child has not tried yet.
4. Fall back to general math.

The second draw only happens when the first misses, so with the default
thresholds the joint probabilities are 0.7 weak focus, 0.3 x 0.67 = 0.201
reinforcement and 0.3 x 0.33 = 0.099 variety.
"""

import logging
import random
from typing import TYPE_CHECKING, Sequence

from kidquiz.modules.recommendation.interface import RandomSource, StrategyDecision
from kidquiz.shared.config import Settings
from kidquiz.shared.exceptions import ConfigurationError
from kidquiz.shared.models import StrategyType, Subject

if TYPE_CHECKING:
    from kidquiz.modules.analytics.interface import SubjectPerformance

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "general"
INTRODUCTION_TOPIC = "introduction"


class RecommendationStrategy:
    """Selects the next subject/topic from weak, strong and variety policies."""

    def __init__(
        self,
        rng: RandomSource | None = None,
        weak_focus_probability: float = 0.7,
        strong_reinforce_probability: float = 0.67,
    ) -> None:
        for name, value in (
            ("weak_focus_probability", weak_focus_probability),
            ("strong_reinforce_probability", strong_reinforce_probability),
        ):
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(name, f"must be between 0 and 1, got {value}")

        self._rng: RandomSource = rng or random.Random()
        self._weak_focus_probability = weak_focus_probability
        self._strong_reinforce_probability = strong_reinforce_probability

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        rng: RandomSource | None = None,
    ) -> "RecommendationStrategy":
        """Build a strategy using the configured thresholds and seed."""
        if rng is None and settings.random_seed is not None:
            rng = random.Random(settings.random_seed)
        return cls(
            rng=rng,
            weak_focus_probability=settings.weak_focus_probability,
            strong_reinforce_probability=settings.strong_reinforce_probability,
        )

    def recommend(
        self,
        weak_subjects: Sequence["SubjectPerformance"],
        strong_subjects: Sequence["SubjectPerformance"],
        all_subjects: Sequence["SubjectPerformance"],
    ) -> tuple[str, str]:
        """Recommend the next (subject, topic).

        Args:
            weak_subjects: Weakest subjects, weakest first
            strong_subjects: Strongest subjects, strongest first
            all_subjects: Every subject the child has attempted

        Returns:
            (subject, topic) tuple
        """
        decision = self.select(weak_subjects, strong_subjects, all_subjects)
        return decision.subject, decision.topic

    def select(
        self,
        weak_subjects: Sequence["SubjectPerformance"],
        strong_subjects: Sequence["SubjectPerformance"],
        all_subjects: Sequence["SubjectPerformance"],
    ) -> StrategyDecision:
        """Run the policy and report which branch produced the pick."""
        if self._rng.random() < self._weak_focus_probability and weak_subjects:
            weakest = weak_subjects[0]
            topic = weakest.topics[0].topic if weakest.topics else DEFAULT_TOPIC
            return self._decide(weakest.subject, topic, StrategyType.WEAK_FOCUS)

        if self._rng.random() < self._strong_reinforce_probability and strong_subjects:
            strongest = strong_subjects[0]
            topics = sorted(strongest.topics, key=lambda t: (-t.average_score, t.topic))
            topic = topics[0].topic if topics else DEFAULT_TOPIC
            return self._decide(strongest.subject, topic, StrategyType.STRONG_REINFORCE)

        seen = {performance.subject for performance in all_subjects}
        new_subjects = [s.value for s in Subject if s.value not in seen]
        if new_subjects:
            subject = self._rng.choice(new_subjects)
            return self._decide(subject, INTRODUCTION_TOPIC, StrategyType.VARIETY)

        return self._decide(Subject.MATH.value, DEFAULT_TOPIC, StrategyType.FALLBACK)

    def _decide(self, subject: str, topic: str, strategy: StrategyType) -> StrategyDecision:
        logger.debug(f"Strategy {strategy.value}: {subject} ({topic})")
        return StrategyDecision(subject=subject, topic=topic, strategy=strategy)
