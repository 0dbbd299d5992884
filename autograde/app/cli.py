from __future__ import annotations

"""CLI for autograde: grade checks against a saved progress file."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..config.config import messages_config
from ..grading.check import check_answer
from ..grading.messages import MessageKind
from ..grading.tracker import ProgressTracker
from ..grading.truth import InvalidTruthValue, parse_truth
from ..results.persist import load_tracker, save_tracker
from ..results.result_manager import ResultManager
from ..util.randomness import make_rng, seed_if_needed
from .explain import enable as explain_enable


def _load_or_create(progress: str, name: str | None, email: str | None) -> ProgressTracker:
    tracker = load_tracker(progress)
    if tracker is None:
        if not name or not email:
            raise ValueError(f"No progress file at '{progress}'; pass --name and --email to start one")
        return ProgressTracker(name, email)
    if name and name != tracker.name:
        print(f"WARNING: '{progress}' belongs to {tracker.name}, ignoring --name {name}.")
    return tracker


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="autograde")
    p.add_argument("--version", action="version", version=f"autograde {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("messages")

    cp = sub.add_parser("check")
    cp.add_argument("--progress", required=True, help="Path to the learner's progress JSON")
    cp.add_argument("--name", default=None, help="Learner name (needed for a new progress file)")
    cp.add_argument("--email", default=None, help="Learner email (needed for a new progress file)")
    cp.add_argument("--question", default=None, help="Question label stored in the attempt log")
    cp.add_argument("--log-dir", dest="log_dir", default=None, help="Append the attempt to this Parquet log")
    cp.add_argument("--seed", type=int, default=None, help="Seed for the encouragement message")
    cp.add_argument("--explain", action="store_true")
    cp.add_argument("values", nargs="+", help="Check results: true/false/missing")

    sp = sub.add_parser("summary")
    sp.add_argument("--progress", required=True)

    rp = sub.add_parser("report")
    rp.add_argument("--log-dir", dest="log_dir", required=True)
    rp.add_argument("--ndjson", default=None, help="Also export the raw log as NDJSON")

    args = p.parse_args(argv)

    if args.cmd == "messages":
        cfg = messages_config()
        for kind in MessageKind:
            section = cfg["messages"][kind.value]
            print(f"{kind.value}: {section['title']} ({section['category']})")
        return 0

    if args.cmd == "check":
        seed_if_needed()
        if args.explain:
            explain_enable(True)
        try:
            values = [parse_truth(v) for v in args.values]
            tracker = _load_or_create(args.progress, args.name, args.email)
        except (InvalidTruthValue, ValueError, ValidationError, json.JSONDecodeError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2

        msg = check_answer(tracker, *values, rng=make_rng(args.seed))

        # The log is written first; the progress file is only saved once it succeeded.
        if args.log_dir:
            from storage.store import append_attempts, validate_records

            rm = ResultManager()
            rm.record(tracker, msg, question=args.question)
            try:
                append_attempts(validate_records(rm.records()), Path(args.log_dir))
            except OSError as e:
                print(f"ERROR: Cannot write attempt log to '{args.log_dir}': {e}", file=sys.stderr)
                return 2

        save_tracker(tracker, args.progress)
        print(msg)
        print(tracker.describe())
        return 0

    if args.cmd == "summary":
        try:
            tracker = load_tracker(args.progress)
        except (ValidationError, json.JSONDecodeError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 2
        if tracker is None:
            print(f"ERROR: No progress file at '{args.progress}'", file=sys.stderr)
            return 2
        print(tracker.describe())
        return 0

    if args.cmd == "report":
        from analytics.metrics import compute_metrics, format_report
        from storage.store import export_ndjson, load_all

        df = load_all(Path(args.log_dir))
        print(format_report(compute_metrics(df)))
        if args.ndjson:
            export_ndjson(df, Path(args.ndjson))
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
