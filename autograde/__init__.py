"""autograde package initialization.

Re-exports the grading helpers so notebooks can simply
``from autograde import ProgressTracker, check_answer, MISSING``.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .grading import (  # noqa: E402
    MISSING,
    Difficulty,
    InvalidTruthValue,
    Message,
    MessageKind,
    ProgressTracker,
    Question,
    QuestionBlock,
    QuestionOptional,
    Truth,
    bomb,
    check_answer,
    check_defined,
    correct,
    fyi,
    hint,
    keep_working,
    not_defined,
    partially_correct,
    still_missing,
    validate,
)

__all__ = [
    "__version__",
    "MISSING",
    "Difficulty",
    "InvalidTruthValue",
    "Message",
    "MessageKind",
    "ProgressTracker",
    "Question",
    "QuestionBlock",
    "QuestionOptional",
    "Truth",
    "bomb",
    "check_answer",
    "check_defined",
    "correct",
    "fyi",
    "hint",
    "keep_working",
    "not_defined",
    "partially_correct",
    "still_missing",
    "validate",
]
