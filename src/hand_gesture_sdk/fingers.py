"""Finger state classification from three landmarks along each finger."""

from __future__ import annotations

from hand_gesture_sdk.constants import (
    FINGER_STATE_MARGIN,
    INDEX_TRIPLET,
    MIDDLE_TRIPLET,
    PINKY_TRIPLET,
    RING_TRIPLET,
    THUMB_TRIPLET,
)
from hand_gesture_sdk.models import FingerState, FingerStates, HandLandmarks


def classify_finger(base: float, mid: float, tip: float) -> FingerState:
    """Classify one finger from three coordinates along a single axis.

    A finger is ``OPEN`` when the coordinate strictly decreases from base to
    tip and ``CLOSE`` when it strictly increases, each step by more than the
    margin. Anything in between is ``UNKNOWN``.

    :param base:
        Coordinate of the base landmark.
    :param mid:
        Coordinate of the middle landmark.
    :param tip:
        Coordinate of the tip landmark.
    :returns:
        Finger state for the current frame.
    """
    if mid + FINGER_STATE_MARGIN < base and tip + FINGER_STATE_MARGIN < mid:
        return FingerState.OPEN
    if base + FINGER_STATE_MARGIN < mid and mid + FINGER_STATE_MARGIN < tip:
        return FingerState.CLOSE
    return FingerState.UNKNOWN


def classify_fingers(landmarks: HandLandmarks) -> FingerStates:
    """Classify all five fingers of one hand.

    The thumb flexes roughly horizontally and is tested on ``x``; the other
    fingers are tested on ``y``.

    :param landmarks:
        Complete 21-point hand landmarks.
    :returns:
        Independent finger states, thumb to pinky.
    :raises InvalidInputError:
        If the landmark sequence is shorter than 21 points.
    """
    landmarks.require_complete()
    points = landmarks.points

    def _along(triplet: tuple[int, int, int], axis: int) -> FingerState:
        base, mid, tip = (points[index][axis] for index in triplet)
        return classify_finger(base, mid, tip)

    return FingerStates(
        thumb=_along(THUMB_TRIPLET, 0),
        index=_along(INDEX_TRIPLET, 1),
        middle=_along(MIDDLE_TRIPLET, 1),
        ring=_along(RING_TRIPLET, 1),
        pinky=_along(PINKY_TRIPLET, 1),
    )
