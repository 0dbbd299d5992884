from __future__ import annotations

"""Three-valued logic over TRUE / FALSE / UNKNOWN.

UNKNOWN marks a sub-check that has not been answered yet. It is kept
distinct from FALSE so an unanswered exercise is never graded as wrong.
"""

from enum import Enum
from typing import Any, Iterable, List

import numpy as np


class InvalidTruthValue(ValueError):
    """Raised when a check result is not a boolean or an explicit UNKNOWN."""


class Truth(str, Enum):
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"


# Placeholder for answers the learner still has to fill in.
MISSING = Truth.UNKNOWN

_TEXT_VALUES = {
    "true": Truth.TRUE,
    "t": Truth.TRUE,
    "yes": Truth.TRUE,
    "1": Truth.TRUE,
    "false": Truth.FALSE,
    "f": Truth.FALSE,
    "no": Truth.FALSE,
    "0": Truth.FALSE,
    "missing": Truth.UNKNOWN,
    "unknown": Truth.UNKNOWN,
    "?": Truth.UNKNOWN,
    "-": Truth.UNKNOWN,
}


def to_truth(value: Any, position: int | None = None) -> Truth:
    """Coerce a single check result to Truth.

    Accepts Truth members, ``bool`` and ``numpy.bool_`` (what numpy
    comparisons such as ``np.allclose`` return). Everything else is a
    caller error, ``None`` included.
    """
    if isinstance(value, Truth):
        return value
    if isinstance(value, (bool, np.bool_)):
        return Truth.TRUE if bool(value) else Truth.FALSE
    where = f" at position {position}" if position is not None else ""
    raise InvalidTruthValue(
        f"Check result{where} must be a bool or MISSING, got {value!r} ({type(value).__name__})"
    )


def to_truths(values: Iterable[Any]) -> List[Truth]:
    """Coerce every value; an empty sequence is rejected."""
    out = [to_truth(v, i) for i, v in enumerate(values)]
    if not out:
        raise InvalidTruthValue("At least one check result is required")
    return out


def all_of(values: Iterable[Truth]) -> Truth:
    """Kleene AND: FALSE dominates, then UNKNOWN."""
    seen_unknown = False
    for v in values:
        if v is Truth.FALSE:
            return Truth.FALSE
        if v is Truth.UNKNOWN:
            seen_unknown = True
    return Truth.UNKNOWN if seen_unknown else Truth.TRUE


def any_of(values: Iterable[Truth]) -> Truth:
    """Kleene OR: TRUE dominates, then UNKNOWN."""
    seen_unknown = False
    for v in values:
        if v is Truth.TRUE:
            return Truth.TRUE
        if v is Truth.UNKNOWN:
            seen_unknown = True
    return Truth.UNKNOWN if seen_unknown else Truth.FALSE


def parse_truth(text: str) -> Truth:
    """Parse the textual form used on the command line."""
    key = str(text).strip().lower()
    try:
        return _TEXT_VALUES[key]
    except KeyError:
        raise InvalidTruthValue(
            f"Cannot read {text!r} as a check result; use true/false/missing"
        ) from None
