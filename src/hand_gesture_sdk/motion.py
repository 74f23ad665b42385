"""Stateful motion recognition across consecutive frames of one hand.

A :class:`MotionTracker` keeps the previous rectangle center, rectangle height
and wrist-to-palm angle of a single hand track. Each update reads that history,
classifies scroll, zoom and slide independently, and then overwrites it. Frames
must therefore arrive in timestamp order, and a tracker must never be shared
between hands.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from hand_gesture_sdk.constants import (
    MIDDLE_MCP_INDEX,
    REFERENCE_VECTOR_LENGTH,
    SCROLL_DISTANCE_FACTOR,
    SLIDE_ANGLE_THRESHOLD_DEG,
    SLIDE_REFERENCE_ANGLE_RANGE_DEG,
    WRIST_INDEX,
    ZOOM_HEIGHT_FACTOR,
)
from hand_gesture_sdk.geometry import angle, distance
from hand_gesture_sdk.models import (
    HandLandmarks,
    MotionLabels,
    NormalizedRect,
    Point2,
    ScrollDirection,
    SlideDirection,
    ZoomDirection,
)


@dataclass(slots=True)
class MotionTrackerState:
    """Previous-frame history of one tracker. ``None`` means not yet recorded."""

    previous_center: Point2 | None = None
    previous_angle: int | None = None
    previous_height: float | None = None


def scroll_direction_for_angle(degrees: int) -> ScrollDirection:
    """Bucket a movement angle into one of four 90 degree compass sectors."""
    if -45 <= degrees < 45:
        return ScrollDirection.RIGHT
    if 45 <= degrees < 135:
        return ScrollDirection.UP
    if -135 <= degrees < -45:
        return ScrollDirection.DOWN
    return ScrollDirection.LEFT


def hand_angle(landmarks: HandLandmarks) -> int:
    """Return the angle in degrees between the wrist-to-palm axis and the x-axis.

    An upright hand (middle finger MCP straight above the wrist) gives ``90``.
    """
    wrist = landmarks.points[WRIST_INDEX]
    middle_mcp = landmarks.points[MIDDLE_MCP_INDEX]
    return angle(middle_mcp, wrist, (wrist[0] + REFERENCE_VECTOR_LENGTH, wrist[1]))


class MotionTracker:
    """Classify scroll, zoom and slide motions for one hand track.

    Slide detection only samples every second frame (even frame counts) to
    reduce angle jitter; skipped frames report :attr:`SlideDirection.NONE` and
    leave the stored angle untouched.
    """

    def __init__(self) -> None:
        self._state = MotionTrackerState()
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        """Number of frames processed so far."""
        return self._frame_count

    @property
    def state(self) -> MotionTrackerState:
        """Snapshot of the current previous-frame history."""
        return replace(self._state)

    def update(self, landmarks: HandLandmarks, rect: NormalizedRect) -> MotionLabels:
        """Process one frame and return its motion labels.

        :param landmarks:
            Complete 21-point landmarks for the current frame.
        :param rect:
            Hand rectangle for the current frame.
        :returns:
            Scroll, zoom and slide labels for this frame.
        :raises InvalidInputError:
            If the landmark sequence is shorter than 21 points. The tracker
            state and frame counter are left unchanged in that case.
        """
        landmarks.require_complete()
        self._frame_count += 1

        scroll = self._update_scroll(rect)
        zoom = self._update_zoom(rect.height)
        slide = SlideDirection.NONE
        if self._frame_count % 2 == 0:
            slide = self._update_slide(landmarks)
        return MotionLabels(scroll=scroll, zoom=zoom, slide=slide)

    def _update_scroll(self, rect: NormalizedRect) -> ScrollDirection:
        center = rect.center
        previous = self._state.previous_center
        self._state.previous_center = center
        if previous is None:
            return ScrollDirection.NONE

        # Scaled by hand size so sensitivity does not depend on camera distance.
        threshold = SCROLL_DISTANCE_FACTOR * rect.height
        if distance(center, previous) <= threshold:
            return ScrollDirection.NONE

        reference = (previous[0] + REFERENCE_VECTOR_LENGTH, previous[1])
        return scroll_direction_for_angle(angle(center, previous, reference))

    def _update_zoom(self, height: float) -> ZoomDirection:
        previous = self._state.previous_height
        self._state.previous_height = height
        if previous is None:
            return ZoomDirection.NONE

        threshold = ZOOM_HEIGHT_FACTOR * height
        if height < previous - threshold:
            return ZoomDirection.OUT
        if height > previous + threshold:
            return ZoomDirection.IN
        return ZoomDirection.NONE

    def _update_slide(self, landmarks: HandLandmarks) -> SlideDirection:
        current = hand_angle(landmarks)
        previous = self._state.previous_angle
        self._state.previous_angle = current
        if previous is None:
            return SlideDirection.NONE

        low, high = SLIDE_REFERENCE_ANGLE_RANGE_DEG
        if not low <= previous <= high:
            return SlideDirection.NONE
        if current > previous + SLIDE_ANGLE_THRESHOLD_DEG:
            return SlideDirection.LEFT
        if current < previous - SLIDE_ANGLE_THRESHOLD_DEG:
            return SlideDirection.RIGHT
        return SlideDirection.NONE
