from __future__ import annotations

"""Randomness helpers for encouragement selection and seeding."""

import os
import random
from typing import Optional


def seed_if_needed() -> None:
    """Seed the global RNG if the SEED env var is set."""
    seed = os.environ.get("SEED")
    if seed is not None:
        try:
            s = int(seed)
        except ValueError:
            return
        random.seed(s)


def make_rng(seed: Optional[int] = None) -> Optional[random.Random]:
    """Private RNG for reproducible feedback; ``None`` means use the global one."""
    if seed is None:
        return None
    return random.Random(seed)
