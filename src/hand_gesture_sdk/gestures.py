"""Static hand-shape recognition from finger states.

Rules are evaluated in order and the first match wins. Several patterns
overlap, so the order of :data:`GESTURE_RULES` is part of the behavior.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hand_gesture_sdk.constants import INDEX_TIP_INDEX, THUMB_NEAR_INDEX_DISTANCE, THUMB_TIP_INDEX
from hand_gesture_sdk.fingers import classify_fingers
from hand_gesture_sdk.geometry import distance
from hand_gesture_sdk.models import (
    FingerState,
    FingerStates,
    Gesture,
    HandLandmarks,
    NormalizedRect,
)

_O = FingerState.OPEN
_C = FingerState.CLOSE

GesturePredicate = Callable[[FingerStates, HandLandmarks], bool]


@dataclass(frozen=True, slots=True)
class GestureRule:
    """One entry of the ordered gesture table."""

    label: Gesture
    predicate: GesturePredicate

    def matches(self, states: FingerStates, landmarks: HandLandmarks) -> bool:
        return self.predicate(states, landmarks)


def _pattern(*expected: FingerState) -> GesturePredicate:
    """Build a predicate matching the exact thumb-to-pinky state pattern."""

    def _predicate(states: FingerStates, _: HandLandmarks) -> bool:
        return states.as_tuple() == expected

    return _predicate


def is_thumb_near_index(landmarks: HandLandmarks) -> bool:
    """Return whether the thumb tip touches the index tip."""
    points = landmarks.points
    return distance(points[THUMB_TIP_INDEX], points[INDEX_TIP_INDEX]) < THUMB_NEAR_INDEX_DISTANCE


def _ok_sign(states: FingerStates, landmarks: HandLandmarks) -> bool:
    # Thumb state is ignored; the thumb-index proximity decides instead.
    return (
        states.index is _C
        and states.middle is _O
        and states.ring is _O
        and states.pinky is _O
        and is_thumb_near_index(landmarks)
    )


GESTURE_RULES: tuple[GestureRule, ...] = (
    GestureRule(Gesture.FIVE, _pattern(_O, _O, _O, _O, _O)),
    GestureRule(Gesture.FOUR, _pattern(_C, _O, _O, _O, _O)),
    GestureRule(Gesture.TREE, _pattern(_O, _O, _O, _C, _C)),
    GestureRule(Gesture.TWO, _pattern(_O, _O, _C, _C, _C)),
    GestureRule(Gesture.ONE, _pattern(_C, _O, _C, _C, _C)),
    GestureRule(Gesture.YEAH, _pattern(_C, _O, _O, _C, _C)),
    GestureRule(Gesture.ROCK, _pattern(_C, _O, _C, _C, _O)),
    GestureRule(Gesture.SPIDERMAN, _pattern(_O, _O, _C, _C, _O)),
    GestureRule(Gesture.FIST, _pattern(_C, _C, _C, _C, _C)),
    GestureRule(Gesture.OK, _ok_sign),
)
"""Ordered gesture table, evaluated first-match-wins."""


def match_gesture(states: FingerStates, landmarks: HandLandmarks) -> Gesture:
    """Return the label of the first rule matching the given finger states.

    :param states:
        Finger states for the current frame.
    :param landmarks:
        Landmarks of the same frame, used by proximity-based rules.
    :returns:
        Matched gesture, or :attr:`Gesture.NONE` when no rule matches.
    """
    for rule in GESTURE_RULES:
        if rule.matches(states, landmarks):
            return rule.label
    return Gesture.NONE


def recognize_gesture(landmarks: HandLandmarks, rect: NormalizedRect) -> Gesture:
    """Recognize the static gesture of one hand for one frame.

    A rectangle narrower or shorter than ``0.01`` means no hand was detected
    and short-circuits to :attr:`Gesture.NONE` before landmarks are read.

    :param landmarks:
        Hand landmarks for the current frame.
    :param rect:
        Hand bounding rectangle for the current frame.
    :returns:
        Recognized gesture label.
    :raises InvalidInputError:
        If a hand is present and the landmark sequence has fewer than 21 points.
    """
    if not rect.has_hand():
        return Gesture.NONE
    return match_gesture(classify_fingers(landmarks), landmarks)
