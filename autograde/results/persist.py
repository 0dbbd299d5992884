from __future__ import annotations

"""JSON persistence of a tracker snapshot between command-line runs.

The file holds exactly one ``TrackerSnapshot``:

    {"name": "Ada", "email": "ada@example.org", "correct": 3, "total": 5}
"""

import json
from pathlib import Path
from typing import Optional

from ..grading.tracker import ProgressTracker
from .schema import TrackerSnapshot


def save_tracker(tracker: ProgressTracker, path: str | Path) -> None:
    """Write the tracker counters to ``path``, creating parent folders."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(tracker.snapshot().model_dump(), f, indent=2, ensure_ascii=False)


def load_tracker(path: str | Path) -> Optional[ProgressTracker]:
    """Read a tracker back; ``None`` when the file does not exist yet.

    A file that exists but does not hold a valid snapshot raises
    ``json.JSONDecodeError`` or ``pydantic.ValidationError``.
    """
    p = Path(path)
    if not p.exists():
        return None
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return ProgressTracker.from_snapshot(TrackerSnapshot.model_validate(data))
