from __future__ import annotations

"""Configuration loading and validation for autograde.

This module loads YAML configuration, applies defaults, and repairs
values the message constructors cannot work with.
"""

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import sys

import yaml


ALLOWED_CATEGORIES = {"warning", "danger", "correct", "hint", "info", "bomb"}

# kind -> (title, category, default text)
MESSAGE_DEFAULTS: Dict[str, tuple] = {
    "still_missing": ("Here we go!", "warning", "Replace `MISSING` with your answer."),
    "keep_working": ("Keep working on it!", "danger", "The answer is not quite right."),
    "partially_correct": (
        "Keep working on it!",
        "danger",
        "You are not quite there, but getting warmer!",
    ),
    "correct": ("Got it!", "correct", None),
    "not_defined": ("Oopsie!", "danger", "Make sure that you define a variable called `{name}`"),
    "hint": ("Hint", "hint", None),
    "fyi": ("Additional info", "info", None),
    "bomb": ("Self destruct warning", "bomb", None),
}

DEFAULT_ENCOURAGEMENTS = ["Great!", "Well done!", "Good job!"]
DEFAULT_SUMMARY_TEMPLATE = "Notebook of {name} with a completion of {correct} out of {total} question(s)."


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unknown message kinds are dropped, unknown categories fall back to the
    kind's default, and an empty encouragement pool is refilled.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    cfg.setdefault("messages", {})
    cfg.setdefault("encouragements", [])
    cfg.setdefault("tracker", {})

    messages = cfg["messages"]
    for kind in list(messages.keys()):
        if kind not in MESSAGE_DEFAULTS:
            print(f"WARNING: Unknown message kind '{kind}' in config, ignoring it.")
            del messages[kind]

    for kind, (title, category, text) in MESSAGE_DEFAULTS.items():
        section = messages.get(kind)
        if section is None:
            section = {}
        elif not isinstance(section, dict):
            print(f"WARNING: Message section '{kind}' must be a mapping, got {section!r}; using defaults.")
            section = {}
        messages[kind] = section
        section.setdefault("title", title)
        section.setdefault("category", category)
        if text is not None:
            section.setdefault("text", text)
        if section["category"] not in ALLOWED_CATEGORIES:
            print(f"WARNING: Unsupported category '{section['category']}' for '{kind}', using '{category}'.")
            section["category"] = category

    pool = [str(s) for s in (cfg.get("encouragements") or []) if str(s).strip()]
    if not pool:
        print("WARNING: Empty encouragement pool, using built-in defaults.")
        pool = list(DEFAULT_ENCOURAGEMENTS)
    cfg["encouragements"] = pool

    tracker = cfg["tracker"]
    tracker.setdefault("summary_template", DEFAULT_SUMMARY_TEMPLATE)

    return cfg


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


@lru_cache(maxsize=1)
def messages_config() -> Mapping[str, Any]:
    """Validated package defaults, loaded once and shared read-only."""
    return _freeze(validate_config(load_config()))
