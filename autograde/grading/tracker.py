from __future__ import annotations

"""Per-learner progress counters."""

from dataclasses import dataclass

from ..config.config import messages_config
from ..results.schema import TrackerSnapshot


@dataclass
class ProgressTracker:
    """Attempted vs. correct exercises for one learner session.

    Owned by the caller and passed explicitly to ``check_answer`` and
    ``validate``; there is no module-level current tracker.
    """

    name: str
    email: str
    correct: int = 0
    total: int = 0

    def __post_init__(self) -> None:
        if self.correct < 0 or self.total < 0:
            raise ValueError(f"Counters must be non-negative, got correct={self.correct} total={self.total}")
        if self.correct > self.total:
            raise ValueError(f"correct ({self.correct}) cannot exceed total ({self.total})")

    def register_attempt(self) -> None:
        self.total += 1

    def register_correct(self) -> None:
        if self.correct >= self.total:
            raise ValueError(
                f"Cannot accept more correct answers ({self.correct + 1}) than attempts ({self.total})"
            )
        self.correct += 1

    def describe(self) -> str:
        template = messages_config()["tracker"]["summary_template"]
        return template.format(name=self.name, email=self.email, correct=self.correct, total=self.total)

    def __str__(self) -> str:
        return self.describe()

    def snapshot(self) -> TrackerSnapshot:
        return TrackerSnapshot(name=self.name, email=self.email, correct=self.correct, total=self.total)

    @classmethod
    def from_snapshot(cls, snap: TrackerSnapshot) -> "ProgressTracker":
        return cls(name=snap.name, email=snap.email, correct=snap.correct, total=snap.total)
