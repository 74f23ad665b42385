import itertools

import pytest

from hand_gesture_sdk import (
    GESTURE_RULES,
    FingerState,
    FingerStates,
    Gesture,
    HandLandmarks,
    InvalidInputError,
    NormalizedRect,
    match_gesture,
    recognize_gesture,
)
from hand_builders import make_landmarks, make_rect

O = FingerState.OPEN
C = FingerState.CLOSE
U = FingerState.UNKNOWN

# Thumb-index tips 0.02 apart with the index finger curled.
_PINCH = {4: (0.5, 0.58)}


@pytest.mark.parametrize(
    ("states", "expected"),
    [
        ((O, O, O, O, O), Gesture.FIVE),
        ((C, O, O, O, O), Gesture.FOUR),
        ((O, O, O, C, C), Gesture.TREE),
        ((O, O, C, C, C), Gesture.TWO),
        ((C, O, C, C, C), Gesture.ONE),
        ((C, O, O, C, C), Gesture.YEAH),
        ((C, O, C, C, O), Gesture.ROCK),
        ((O, O, C, C, O), Gesture.SPIDERMAN),
        ((C, C, C, C, C), Gesture.FIST),
        ((U, U, U, U, U), Gesture.NONE),
        ((O, C, O, C, O), Gesture.NONE),
    ],
)
def test_recognize_gesture_from_hand_geometry(
    states: tuple[FingerState, ...], expected: Gesture
) -> None:
    landmarks = make_landmarks(*states)

    assert recognize_gesture(landmarks, make_rect()) is expected


@pytest.mark.parametrize("thumb", [O, C, U])
def test_ok_ignores_thumb_state_and_requires_pinch(thumb: FingerState) -> None:
    pinched = make_landmarks(thumb, C, O, O, O, overrides={4: (_thumb_x(thumb), 0.58)})
    apart = make_landmarks(thumb, C, O, O, O, overrides={4: (_thumb_x(thumb), 0.3)})

    assert recognize_gesture(pinched, make_rect()) is Gesture.OK
    assert recognize_gesture(apart, make_rect()) is Gesture.NONE


def _thumb_x(thumb: FingerState) -> float:
    # Keeps the thumb tip x on the side that preserves the thumb state.
    return {O: 0.48, C: 0.52, U: 0.5}[thumb]


@pytest.mark.parametrize(
    "rect",
    [make_rect(width=0.005), make_rect(height=0.009), make_rect(width=0.0, height=0.0)],
)
def test_small_rect_short_circuits_to_sentinel(rect: NormalizedRect) -> None:
    assert recognize_gesture(make_landmarks(O, O, O, O, O), rect) is Gesture.NONE
    assert recognize_gesture(HandLandmarks(points=()), rect) is Gesture.NONE


def test_empty_landmarks_with_hand_present_raise() -> None:
    with pytest.raises(InvalidInputError):
        recognize_gesture(HandLandmarks(points=()), make_rect())


def test_rule_precedence_first_match_wins() -> None:
    landmarks = make_landmarks(overrides=_PINCH)
    for states in itertools.product((O, C, U), repeat=5):
        finger_states = FingerStates(*states)
        matching = [rule for rule in GESTURE_RULES if rule.matches(finger_states, landmarks)]
        expected = matching[0].label if matching else Gesture.NONE

        assert match_gesture(finger_states, landmarks) is expected


def test_rule_table_order_is_stable() -> None:
    assert [rule.label for rule in GESTURE_RULES] == [
        Gesture.FIVE,
        Gesture.FOUR,
        Gesture.TREE,
        Gesture.TWO,
        Gesture.ONE,
        Gesture.YEAH,
        Gesture.ROCK,
        Gesture.SPIDERMAN,
        Gesture.FIST,
        Gesture.OK,
    ]


def test_recognize_gesture_is_repeatable() -> None:
    landmarks = make_landmarks(C, O, O, C, C)
    rect = make_rect()

    assert recognize_gesture(landmarks, rect) == recognize_gesture(landmarks, rect)


def test_sentinel_value() -> None:
    assert Gesture.NONE == "___"
