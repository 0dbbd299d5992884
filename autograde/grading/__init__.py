"""Answer checking, feedback messages and progress tracking for course notebooks."""

from .truth import MISSING, InvalidTruthValue, Truth, all_of, any_of, parse_truth, to_truth  # noqa: F401
from .messages import (  # noqa: F401
    Message,
    MessageKind,
    bomb,
    correct,
    fyi,
    hint,
    keep_working,
    not_defined,
    partially_correct,
    still_missing,
)
from .tracker import ProgressTracker  # noqa: F401
from .question import Difficulty, Question, QuestionBlock, QuestionOptional  # noqa: F401
from .check import check_answer, check_defined, validate  # noqa: F401
