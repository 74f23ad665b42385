"""Recognize gestures from a landmark line file and print a concise summary.

Example:
    uv run python examples/recognize_lines.py --path runs/hands.csv --error-policy tolerant
    cat runs/hands.csv | uv run python examples/recognize_lines.py
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from pathlib import Path

from hand_gesture_sdk import (
    ErrorPolicy,
    HandFilter,
    HandGestureRecognizer,
    HandGestureRecognizerConfig,
    RecognizerLogEvent,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recognize hand gestures from landmark lines.")
    parser.add_argument(
        "--path",
        default="-",
        help="Input file with rect/landmarks lines. Use '-' for stdin.",
    )
    parser.add_argument(
        "--hand-filter",
        choices=[value.value for value in HandFilter],
        default=HandFilter.BOTH.value,
        help="Filter for processed hand side.",
    )
    parser.add_argument(
        "--error-policy",
        choices=[value.value for value in ErrorPolicy],
        default=ErrorPolicy.STRICT.value,
        help="Behavior for unparsable lines and invalid frames.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print structured recognizer log events to stderr.",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=0,
        help="Stop after N results. Use 0 to process the whole input.",
    )
    return parser.parse_args()


def _read_lines(path: str) -> Iterator[str]:
    if path == "-":
        yield from sys.stdin
        return
    with Path(path).open(encoding="utf-8") as handle:
        yield from handle


def _print_log_event(event: RecognizerLogEvent) -> None:
    print(f"[{event.kind.value}] {event.message}", file=sys.stderr)


def _main() -> int:
    args = _parse_args()
    max_results = args.max_results if args.max_results > 0 else None

    recognizer = HandGestureRecognizer(
        HandGestureRecognizerConfig(
            hand_filter=HandFilter(args.hand_filter),
            error_policy=ErrorPolicy(args.error_policy),
            log_hook=_print_log_event if args.verbose else None,
        )
    )

    emitted = 0
    for result in recognizer.iter_results(_read_lines(args.path)):
        emitted += 1
        print(
            "result"
            f" seq={result.sequence_id}"
            f" track={result.track_id}"
            f" gesture={result.gesture.value}"
            f" scroll={result.scroll.value!r}"
            f" zoom={result.zoom.value!r}"
            f" slide={result.slide.value!r}"
        )
        if max_results is not None and emitted >= max_results:
            break

    stats = recognizer.get_stats()
    print(
        "done"
        f" results_emitted={stats.results_emitted}"
        f" parse_errors={stats.parse_errors}"
        f" invalid_frames={stats.invalid_frames}"
        f" stale_frames={stats.stale_frames}"
        f" dropped_lines={stats.dropped_lines}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
