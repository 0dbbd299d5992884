from __future__ import annotations

"""Auto-grading of exercise answers.

A graded exercise is a handful of sub-checks, each TRUE, FALSE or
UNKNOWN (not answered yet). The outcome is decided in a fixed order:

1. one attempt is always registered on the tracker;
2. if the AND of all checks is UNKNOWN, the answer is still missing;
3. if some check passes but not all of them, the learner is getting warmer;
4. if no check passes, keep working;
5. otherwise the answer is correct and the tracker accepts it.
"""

import random
from typing import Any, Mapping, Optional

from ..app.explain import trace as xtrace
from .messages import Message, correct, keep_working, not_defined, partially_correct, still_missing
from .question import Question
from .tracker import ProgressTracker
from .truth import Truth, all_of, any_of, to_truths


def check_answer(tracker: ProgressTracker, *statements: Any, rng: Optional[random.Random] = None) -> Message:
    """Grade one exercise and return the feedback message.

    Unlike a plain AND over an empty sequence, calling it without any
    statement is not a correct answer: it is rejected like any other
    malformed input.

    Raises:
        InvalidTruthValue: a statement is not a bool or MISSING, or no
            statement was given. The tracker is left untouched.
    """
    values = to_truths(statements)
    tracker.register_attempt()

    all_valid = all_of(values)
    if all_valid is Truth.UNKNOWN:
        msg = still_missing()
    else:
        some_valid = any_of(values) is Truth.TRUE
        if some_valid and all_valid is Truth.FALSE:
            msg = partially_correct()
        elif all_valid is Truth.FALSE:
            msg = keep_working()
        else:
            tracker.register_correct()
            msg = correct(rng=rng)

    xtrace(
        "graded",
        {
            "learner": tracker.name,
            "checks": [v.value for v in values],
            "kind": msg.kind.value,
            "correct": tracker.correct,
            "total": tracker.total,
        },
    )
    return msg


def validate(question: Question, tracker: ProgressTracker, *statements: Any, rng: Optional[random.Random] = None) -> Question:
    """Grade ``question``, store the outcome on ``question.status`` and return the question."""
    question.status = check_answer(tracker, *statements, rng=rng)
    return question


def check_defined(namespace: Mapping[str, Any], name: str) -> Optional[Message]:
    """Return a not-defined message when ``name`` is not bound in ``namespace``.

    Typical use in a notebook: ``check_defined(globals(), "myclamp") or check_answer(...)``.
    """
    if name in namespace:
        return None
    return not_defined(name)
