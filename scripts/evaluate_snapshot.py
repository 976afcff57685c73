"""
Evaluate a client environment snapshot from the command line

Exit codes: 0 no bot detected, 1 bot detected, 2 invalid input
"""

import argparse
import json
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# pylint: disable=wrong-import-position
# ruff: noqa: E402
from pydantic import ValidationError

from botsense.detection import DetectionService, Snapshot
from botsense.logging_config import setup_logging

EXIT_CLEAN = 0
EXIT_BOT = 1
EXIT_INVALID = 2


def load_snapshot(source: str) -> Snapshot:
    """Load a snapshot from a JSON file path, or stdin when source is '-'"""
    if source == "-":
        raw = sys.stdin.read()
    else:
        with open(source, "rb") as f:
            raw = f.read()
    return Snapshot.model_validate_json(raw)


def main(argv: list[str] | None = None) -> int:
    """Snapshot evaluation script"""
    parser = argparse.ArgumentParser(description="Evaluate a BotSense snapshot")
    parser.add_argument("snapshot", help="Path to snapshot JSON file, or '-' for stdin")
    parser.add_argument(
        "--fail-safe",
        action="store_true",
        help="Treat a failing detector as fired (overrides FAIL_POLICY)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Application log level",
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        snapshot = load_snapshot(args.snapshot)
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        print(f"❌ Invalid snapshot: {e}", file=sys.stderr)
        return EXIT_INVALID

    service = DetectionService(fail_safe=True if args.fail_safe else None)
    report = service.check(snapshot)
    print(json.dumps(report.to_dict(), indent=2))
    return EXIT_BOT if report.verdict else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
