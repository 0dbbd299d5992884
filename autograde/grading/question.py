from __future__ import annotations

"""Structured exercise records a notebook can display."""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .messages import Message, MessageKind, still_missing

DEFAULT_TITLE = "Question 0.: /insert title here/"
DEFAULT_DESCRIPTION = (
    "Complete the function `myclamp(x)` that clamps a number `x` between 0 and 1.\n"
    "Open assignments always return `MISSING`."
)


class Difficulty(str, Enum):
    NO_DIFF = "no_diff"
    EASY = "easy"
    INTERMEDIATE = "intermediate"
    HARD = "hard"


@dataclass
class Question:
    """One exercise: what to do, how it is checked, and where the learner stands.

    ``validators`` is opaque to this package; callers may keep whatever
    they use to build the checks there. ``status`` is replaced by
    ``validate`` on every graded call.
    """

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    validators: Any = None
    hints: List[str] = field(default_factory=list)
    status: Message = field(default_factory=still_missing)

    def summary(self) -> List[str]:
        lines = [self.title, self.description, str(self.status)]
        if self.hints:
            lines.append("Hints:")
            lines.extend(f"- {h}" for h in self.hints)
        return lines


@dataclass
class QuestionOptional(Question):
    """Extra exercise that learners may skip, tagged with a difficulty."""

    difficulty: Difficulty = Difficulty.NO_DIFF

    def summary(self) -> List[str]:
        lines = super().summary()
        if self.difficulty is not Difficulty.NO_DIFF:
            lines[0] = f"{lines[0]} [{self.difficulty.value}]"
        return lines


@dataclass
class QuestionBlock:
    """A group of related questions sharing a title and hints."""

    title: str = ""
    description: str = ""
    questions: List[Question] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)

    def outcome_counts(self) -> Dict[MessageKind, int]:
        return dict(Counter(q.status.kind for q in self.questions))

    @property
    def complete(self) -> bool:
        return bool(self.questions) and all(q.status.kind is MessageKind.CORRECT for q in self.questions)

    def summary(self) -> List[str]:
        lines = [self.title, self.description]
        for q in self.questions:
            lines.extend(q.summary())
        if self.hints:
            lines.append("Hints:")
            lines.extend(f"- {h}" for h in self.hints)
        return lines
