"""Typed models for hand landmarks, rectangles, finger states, and labels."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from hand_gesture_sdk.constants import LANDMARK_COUNT, LANDMARK_JOINT_NAMES, MIN_HAND_RECT_SIZE
from hand_gesture_sdk.exceptions import InvalidInputError

Point2 = tuple[float, float]
"""Normalized ``(x, y)`` image-relative point."""


class HandSide(StrEnum):
    """Logical side for a tracked hand."""

    LEFT = "Left"
    RIGHT = "Right"


class PacketType(StrEnum):
    """Input packet category emitted by the upstream detector."""

    LANDMARKS = "landmarks"
    RECT = "rect"


class JointName(StrEnum):
    """Canonical joint names matching the 21-landmark hand order."""

    WRIST = "Wrist"
    THUMB_CMC = "ThumbCmc"
    THUMB_MCP = "ThumbMcp"
    THUMB_IP = "ThumbIp"
    THUMB_TIP = "ThumbTip"
    INDEX_MCP = "IndexMcp"
    INDEX_PIP = "IndexPip"
    INDEX_DIP = "IndexDip"
    INDEX_TIP = "IndexTip"
    MIDDLE_MCP = "MiddleMcp"
    MIDDLE_PIP = "MiddlePip"
    MIDDLE_DIP = "MiddleDip"
    MIDDLE_TIP = "MiddleTip"
    RING_MCP = "RingMcp"
    RING_PIP = "RingPip"
    RING_DIP = "RingDip"
    RING_TIP = "RingTip"
    PINKY_MCP = "PinkyMcp"
    PINKY_PIP = "PinkyPip"
    PINKY_DIP = "PinkyDip"
    PINKY_TIP = "PinkyTip"


class FingerName(StrEnum):
    """Supported finger groups for convenience accessors."""

    WRIST = "wrist"
    THUMB = "thumb"
    INDEX = "index"
    MIDDLE = "middle"
    RING = "ring"
    PINKY = "pinky"


class FingerState(StrEnum):
    """Per-frame flexion state of one finger."""

    UNKNOWN = "unknown"
    OPEN = "open"
    CLOSE = "close"


class Gesture(StrEnum):
    """Static hand-shape labels. ``NONE`` is the no-match sentinel."""

    FIVE = "FIVE"
    FOUR = "FOUR"
    TREE = "TREE"
    TWO = "TWO"
    ONE = "ONE"
    YEAH = "YEAH"
    ROCK = "ROCK"
    SPIDERMAN = "SPIDERMAN"
    FIST = "FIST"
    OK = "OK"
    NONE = "___"


class ScrollDirection(StrEnum):
    """Scroll labels derived from rectangle center movement."""

    RIGHT = "Scrolling right"
    UP = "Scrolling up"
    LEFT = "Scrolling left"
    DOWN = "Scrolling down"
    NONE = "___"


class ZoomDirection(StrEnum):
    """Zoom labels derived from rectangle height changes."""

    IN = "Zoom in"
    OUT = "Zoom out"
    NONE = "___"


class SlideDirection(StrEnum):
    """Slide labels derived from wrist-to-palm angle changes."""

    LEFT = "Slide left"
    RIGHT = "Slide right"
    NONE = "___"


_JOINT_INDEX_BY_NAME: dict[str, int] = {
    name: index for index, name in enumerate(LANDMARK_JOINT_NAMES)
}


@dataclass(frozen=True, slots=True)
class HandLandmarks:
    """Ordered set of hand landmarks as normalized ``(x, y)`` points.

    A complete hand holds exactly 21 points in the canonical joint order
    (``0`` is the wrist, each finger takes 4 consecutive indices).
    """

    points: tuple[Point2, ...]

    def require_complete(self) -> None:
        """Check that every landmark index used by the classifiers exists.

        :raises InvalidInputError:
            If fewer than 21 points are present (including an empty sequence).
        """
        if not self.points:
            raise InvalidInputError("Input landmark vector is empty.")
        if len(self.points) < LANDMARK_COUNT:
            raise InvalidInputError(
                f"Input landmark vector must contain {LANDMARK_COUNT} points, "
                f"got {len(self.points)}"
            )

    def get_joint(self, joint: JointName | str) -> Point2:
        """Return one joint point by name.

        :param joint:
            Joint to query, either as :class:`JointName` or canonical joint string
            (for example ``"IndexTip"``).
        :returns:
            Joint ``(x, y)`` tuple.
        :raises ValueError:
            If the joint name is unknown.
        """
        joint_name = joint.value if isinstance(joint, JointName) else joint
        index = _JOINT_INDEX_BY_NAME.get(joint_name)
        if index is None:
            raise ValueError(f"Unknown joint name: {joint_name!r}")
        return self.points[index]

    def get_finger(self, finger: FingerName | str) -> dict[JointName, Point2]:
        """Return all joint points for one finger group.

        :param finger:
            Finger group to query. Accepts :class:`FingerName` or one of
            ``wrist``, ``thumb``, ``index``, ``middle``, ``ring``, ``pinky``.
        :returns:
            Dictionary mapping :class:`JointName` to ``(x, y)`` points for the
            selected finger group, ordered from base to tip.
        :raises ValueError:
            If the finger group is unknown.
        """
        finger_name = finger.value if isinstance(finger, FingerName) else finger.lower()
        if finger_name == FingerName.WRIST.value:
            return {JointName.WRIST: self.get_joint(JointName.WRIST)}

        try:
            group = FingerName(finger_name)
        except ValueError as exc:
            raise ValueError(f"Unknown finger name: {finger_name!r}") from exc

        prefix = group.value.capitalize()
        return {
            joint: self.get_joint(joint)
            for joint in JointName
            if joint.value.startswith(prefix)
        }

    def to_dict(self) -> dict[str, list[list[float]]]:
        """Serialize landmarks into a mapping-friendly dictionary.

        :returns:
            Dictionary with ordered ``points`` list.
        """
        return {"points": [[x, y] for x, y in self.points]}

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> HandLandmarks:
        """Build :class:`HandLandmarks` from serialized mapping data.

        :param values:
            Mapping containing ``points`` as nested coordinate lists. Extra
            coordinates beyond ``x, y`` (such as depth) are ignored.
        :returns:
            Parsed landmarks instance preserving point order.
        """
        raw_points = values["points"]
        return cls(points=tuple((float(point[0]), float(point[1])) for point in raw_points))


@dataclass(frozen=True, slots=True)
class NormalizedRect:
    """Axis-aligned hand bounding rectangle in normalized image coordinates."""

    x_center: float
    y_center: float
    width: float
    height: float

    @property
    def center(self) -> Point2:
        return (self.x_center, self.y_center)

    def has_hand(self) -> bool:
        """Return whether the rectangle is large enough to hold a detected hand."""
        return self.width >= MIN_HAND_RECT_SIZE and self.height >= MIN_HAND_RECT_SIZE

    def to_dict(self) -> dict[str, float]:
        return {
            "x_center": self.x_center,
            "y_center": self.y_center,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> NormalizedRect:
        return cls(
            x_center=float(values["x_center"]),
            y_center=float(values["y_center"]),
            width=float(values["width"]),
            height=float(values["height"]),
        )


@dataclass(frozen=True, slots=True)
class FingerStates:
    """Finger states for one frame, thumb to pinky."""

    thumb: FingerState
    index: FingerState
    middle: FingerState
    ring: FingerState
    pinky: FingerState

    def as_tuple(self) -> tuple[FingerState, ...]:
        return (self.thumb, self.index, self.middle, self.ring, self.pinky)


@dataclass(frozen=True, slots=True)
class MotionLabels:
    """Independent motion labels produced by one motion tracker update."""

    scroll: ScrollDirection = ScrollDirection.NONE
    zoom: ZoomDirection = ZoomDirection.NONE
    slide: SlideDirection = SlideDirection.NONE

    def is_idle(self) -> bool:
        """Return whether every motion label is the sentinel value."""
        return (
            self.scroll is ScrollDirection.NONE
            and self.zoom is ZoomDirection.NONE
            and self.slide is SlideDirection.NONE
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "scroll": self.scroll.value,
            "zoom": self.zoom.value,
            "slide": self.slide.value,
        }


@dataclass(frozen=True, slots=True)
class LandmarksPacket:
    """Parsed landmark packet for one hand side."""

    side: HandSide
    kind: PacketType
    data: HandLandmarks


@dataclass(frozen=True, slots=True)
class RectPacket:
    """Parsed hand rectangle packet for one hand side."""

    side: HandSide
    kind: PacketType
    data: NormalizedRect


ParsedPacket = LandmarksPacket | RectPacket
