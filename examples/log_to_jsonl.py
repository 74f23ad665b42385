"""Recognize gestures from landmark lines and persist results as JSON Lines.

Example:
    uv run python examples/log_to_jsonl.py --input runs/hands.csv --path runs/gestures.jsonl
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from time import time_ns
from typing import Any

from hand_gesture_sdk import (
    ErrorPolicy,
    Gesture,
    HandGestureRecognizer,
    HandGestureRecognizerConfig,
    RecognitionResult,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Log recognition results to JSONL.")
    parser.add_argument("--input", required=True, help="Input file with rect/landmarks lines.")
    parser.add_argument(
        "--error-policy",
        choices=[value.value for value in ErrorPolicy],
        default=ErrorPolicy.TOLERANT.value,
        help="Behavior for unparsable lines and invalid frames.",
    )
    parser.add_argument(
        "--path",
        default="runs/gestures.jsonl",
        help="Output JSONL file path.",
    )
    parser.add_argument(
        "--skip-idle",
        action="store_true",
        help="Only write results with a gesture or motion label.",
    )
    return parser.parse_args()


def _result_to_dict(result: RecognitionResult) -> dict[str, Any]:
    return {
        "event_type": "result",
        "logged_at_unix_ns": time_ns(),
        "data": result.to_dict(),
    }


def _is_idle(result: RecognitionResult) -> bool:
    return result.gesture == Gesture.NONE and result.motion.is_idle()


def _main() -> int:
    args = _parse_args()
    path = Path(args.path)
    path.parent.mkdir(parents=True, exist_ok=True)

    recognizer = HandGestureRecognizer(
        HandGestureRecognizerConfig(error_policy=ErrorPolicy(args.error_policy))
    )

    written = 0
    with (
        Path(args.input).open(encoding="utf-8") as source,
        path.open("w", encoding="utf-8") as sink,
    ):
        for result in recognizer.iter_results(source):
            if args.skip_idle and _is_idle(result):
                continue
            sink.write(json.dumps(_result_to_dict(result), separators=(",", ":")) + "\n")
            written += 1

    stats = recognizer.get_stats()
    print(
        f"wrote {written} result(s) to {path}"
        f" results_emitted={stats.results_emitted}"
        f" parse_errors={stats.parse_errors}"
        f" dropped_lines={stats.dropped_lines}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
