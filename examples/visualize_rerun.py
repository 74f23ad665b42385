"""Replay landmark lines into rerun with recognized gesture labels.

Example:
    uv run --with rerun-sdk python examples/visualize_rerun.py --path runs/hands.csv
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from pathlib import Path

from hand_gesture_sdk import (
    ErrorPolicy,
    HandFrameAssembler,
    HandGestureRecognizer,
    HandGestureRecognizerConfig,
    ParseError,
    RerunVisualizer,
    RerunVisualizerConfig,
    parse_line,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Visualize hand landmarks and gestures in rerun.")
    parser.add_argument(
        "--path",
        default="-",
        help="Input file with rect/landmarks lines. Use '-' for stdin.",
    )
    parser.add_argument(
        "--application-id",
        default="hand-gesture-sdk",
        help="Rerun application id.",
    )
    parser.add_argument(
        "--no-spawn",
        action="store_true",
        help="Do not auto-spawn rerun viewer.",
    )
    parser.add_argument(
        "--image-size",
        default="640,480",
        help="Pixel canvas size as WIDTH,HEIGHT used to scale normalized coordinates.",
    )
    parser.add_argument(
        "--landmark-radius",
        type=float,
        default=3.0,
        help="Rerun point radius for landmark markers (pixels).",
    )
    parser.add_argument(
        "--background-color",
        default="18,22,30",
        help=(
            "Rerun 2D background RGB as comma-separated values "
            "(e.g. 18,22,30). Use 'none' to disable."
        ),
    )
    return parser.parse_args()


def _read_lines(path: str) -> Iterator[str]:
    if path == "-":
        yield from sys.stdin
        return
    with Path(path).open(encoding="utf-8") as handle:
        yield from handle


def _main() -> int:
    args = _parse_args()
    width, height = _parse_size(args.image_size)

    assembler = HandFrameAssembler()
    recognizer = HandGestureRecognizer(
        HandGestureRecognizerConfig(error_policy=ErrorPolicy.TOLERANT)
    )
    visualizer = RerunVisualizer(
        RerunVisualizerConfig(
            application_id=args.application_id,
            spawn=not args.no_spawn,
            image_size=(width, height),
            landmark_radius=args.landmark_radius,
            background_color=_parse_rgb_or_none(args.background_color),
        )
    )

    for line in _read_lines(args.path):
        try:
            packet = parse_line(line)
        except ParseError:
            continue
        frame = assembler.push_packet(packet)
        if frame is None:
            continue

        visualizer.log_frame(frame)
        result = recognizer.process_frame(frame)
        if result is not None:
            visualizer.log_result(result)

    return 0


def _parse_size(value: str) -> tuple[int, int]:
    chunks = [chunk.strip() for chunk in value.split(",")]
    if len(chunks) != 2:
        raise ValueError("--image-size expects WIDTH,HEIGHT.")
    width, height = (int(chunk) for chunk in chunks)
    if width <= 0 or height <= 0:
        raise ValueError("--image-size values must be positive.")
    return width, height


def _parse_rgb_or_none(value: str) -> tuple[int, int, int] | None:
    if value.lower() == "none":
        return None

    chunks = [chunk.strip() for chunk in value.split(",")]
    if len(chunks) != 3:
        msg = "--background-color expects 3 comma-separated integers or 'none'."
        raise ValueError(msg)

    red, green, blue = (int(chunk) for chunk in chunks)
    if any(channel < 0 or channel > 255 for channel in (red, green, blue)):
        raise ValueError("--background-color values must be in range [0, 255].")
    return red, green, blue


if __name__ == "__main__":
    raise SystemExit(_main())
