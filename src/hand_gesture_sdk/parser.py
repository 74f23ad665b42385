"""Parsing helpers for UTF-8 CSV landmark and rectangle lines."""

import math

from hand_gesture_sdk.constants import (
    LANDMARK_COUNT,
    LANDMARK_VALUE_COUNT,
    LANDMARK_VALUE_COUNT_3D,
    RECT_VALUE_COUNT,
)
from hand_gesture_sdk.exceptions import ParseError
from hand_gesture_sdk.models import (
    HandLandmarks,
    HandSide,
    LandmarksPacket,
    NormalizedRect,
    PacketType,
    ParsedPacket,
    RectPacket,
)


def parse_line(line: str) -> ParsedPacket:
    """Parse one CSV line into a typed packet object.

    The input line must use one of the supported labels:
    ``Left landmarks:``, ``Right landmarks:``, ``Left rect:``, or
    ``Right rect:``. Landmark lines carry 21 ``x, y`` pairs, or 21
    ``x, y, z`` triplets whose depth is dropped. Rectangle lines carry
    ``x_center, y_center, width, height``.

    :param line:
        Raw UTF-8 decoded line from the upstream detector.
    :returns:
        A parsed packet instance for landmark or rectangle data.
    :rtype:
        ParsedPacket
    :raises ParseError:
        If the line is empty, malformed, has unsupported labels, includes
        non-float or non-finite values, or does not match expected value counts.
    """
    stripped = line.strip()
    if not stripped:
        raise ParseError("Empty line.")

    head, sep, tail = stripped.partition(":")
    if not sep:
        raise ParseError("Missing ':' separator.")

    side, kind = _parse_label(head.strip())
    payload = _parse_floats(tail)

    if kind == PacketType.RECT:
        return _parse_rect(side=side, values=payload)
    return _parse_landmarks(side=side, values=payload)


def _parse_label(label: str) -> tuple[HandSide, PacketType]:
    """Parse packet label into hand side and packet type.

    :param label:
        Label segment before ``:`` (for example ``"Right rect"``).
    :returns:
        Parsed hand side and packet type tuple.
    :raises ParseError:
        If label format, side, or packet type is unsupported.
    """
    parts = label.split()
    if len(parts) != 2:
        raise ParseError(f"Invalid label: {label!r}")

    side_raw, kind_raw = parts

    try:
        side = HandSide(side_raw)
    except ValueError as exc:
        raise ParseError(f"Unsupported hand side: {side_raw!r}") from exc

    try:
        kind = PacketType(kind_raw.lower())
    except ValueError as exc:
        raise ParseError(f"Unsupported packet type: {kind_raw!r}") from exc
    return side, kind


def _parse_floats(payload: str) -> list[float]:
    """Parse comma-separated numeric payload into floats.

    :raises ParseError:
        If any value cannot be parsed as ``float`` or is NaN or infinite.
    """
    chunks = [chunk.strip() for chunk in payload.split(",") if chunk.strip()]
    try:
        values = [float(value) for value in chunks]
    except ValueError as exc:
        raise ParseError("Payload contains non-float values.") from exc

    if not all(math.isfinite(value) for value in values):
        raise ParseError("Payload contains non-finite values.")
    return values


def _parse_rect(side: HandSide, values: list[float]) -> RectPacket:
    if len(values) != RECT_VALUE_COUNT:
        raise ParseError(f"Rect packet must contain {RECT_VALUE_COUNT} values, got {len(values)}")

    return RectPacket(side=side, kind=PacketType.RECT, data=NormalizedRect(*values))


def _parse_landmarks(side: HandSide, values: list[float]) -> LandmarksPacket:
    """Validate and map landmark values into a typed packet.

    :param side:
        Hand side of the packet.
    :param values:
        Parsed float values expected to contain 42 or 63 elements.
    :returns:
        Typed landmark packet with 21 ``(x, y)`` points.
    :raises ParseError:
        If value count does not match the landmarks contract.
    """
    if len(values) == LANDMARK_VALUE_COUNT:
        stride = 2
    elif len(values) == LANDMARK_VALUE_COUNT_3D:
        stride = 3
    else:
        raise ParseError(
            f"Landmarks packet must contain {LANDMARK_VALUE_COUNT} or "
            f"{LANDMARK_VALUE_COUNT_3D} values, got {len(values)}"
        )

    points = tuple(
        (values[i], values[i + 1]) for i in range(0, LANDMARK_COUNT * stride, stride)
    )
    return LandmarksPacket(side=side, kind=PacketType.LANDMARKS, data=HandLandmarks(points=points))
