from __future__ import annotations

"""Feedback messages (admonitions) as a closed tagged union.

Every message carries an explicit ``kind`` plus a title and body text.
Titles, categories and default texts come from ``config/defaults.yml``.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config.config import messages_config


class MessageKind(str, Enum):
    STILL_MISSING = "still_missing"
    KEEP_WORKING = "keep_working"
    PARTIALLY_CORRECT = "partially_correct"
    CORRECT = "correct"
    NOT_DEFINED = "not_defined"
    HINT = "hint"
    FYI = "fyi"
    BOMB = "bomb"


OUTCOME_KINDS = frozenset(
    {
        MessageKind.STILL_MISSING,
        MessageKind.KEEP_WORKING,
        MessageKind.PARTIALLY_CORRECT,
        MessageKind.CORRECT,
    }
)


@dataclass(frozen=True)
class Message:
    """A titled block of feedback text."""

    kind: MessageKind
    title: str
    text: str
    category: str

    @property
    def is_outcome(self) -> bool:
        return self.kind in OUTCOME_KINDS

    def __str__(self) -> str:
        return f"{self.title}: {self.text}"


def _make(kind: MessageKind, text: Optional[str], **fmt: str) -> Message:
    section = messages_config()["messages"][kind.value]
    if text is None:
        text = section.get("text", "")
    if fmt:
        text = text.format(**fmt)
    return Message(kind=kind, title=section["title"], text=str(text), category=section["category"])


def still_missing(text: Optional[str] = None) -> Message:
    return _make(MessageKind.STILL_MISSING, text)


def keep_working(text: Optional[str] = None) -> Message:
    return _make(MessageKind.KEEP_WORKING, text)


def partially_correct(text: Optional[str] = None) -> Message:
    """Keep-working variant for answers where some checks already pass."""
    return _make(MessageKind.PARTIALLY_CORRECT, text)


def correct(text: Optional[str] = None, rng: Optional[random.Random] = None) -> Message:
    """Success message; without ``text`` an encouragement is picked uniformly at random."""
    if text is None:
        pool = messages_config()["encouragements"]
        text = (rng or random).choice(pool)
    return _make(MessageKind.CORRECT, text)


def not_defined(variable_name: str) -> Message:
    return _make(MessageKind.NOT_DEFINED, None, name=str(variable_name))


def hint(text: str) -> Message:
    return _make(MessageKind.HINT, text)


def fyi(text: str) -> Message:
    return _make(MessageKind.FYI, text)


def bomb(text: str) -> Message:
    return _make(MessageKind.BOMB, text)
