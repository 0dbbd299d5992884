from __future__ import annotations

"""Explain Mode for grading.

When enabled (``autograde check --explain``), every graded call prints a
single ``[EXPLAIN] graded :: {...}`` line with the check values, the
outcome kind and the tracker counters after the call.
"""

import json
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    # Truth and MessageKind values are str enums; anything else goes through str()
    body = json.dumps(payload or {}, separators=(",", ":"), default=str)
    print(f"[EXPLAIN] {event} :: {body}")
