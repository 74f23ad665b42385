import pytest

from hand_gesture_sdk import (
    HandLandmarks,
    InvalidInputError,
    MotionLabels,
    MotionTracker,
    ScrollDirection,
    SlideDirection,
    ZoomDirection,
    hand_angle,
    scroll_direction_for_angle,
)
from hand_builders import landmarks_at_angle, make_landmarks, make_rect


def test_first_update_emits_sentinels() -> None:
    tracker = MotionTracker()

    labels = tracker.update(make_landmarks(), make_rect())

    assert labels == MotionLabels()
    assert labels.is_idle()
    assert tracker.frame_count == 1


@pytest.mark.parametrize(
    ("dx", "dy", "expected"),
    [
        (0.05, 0.0, ScrollDirection.RIGHT),
        (-0.05, 0.0, ScrollDirection.LEFT),
        (0.0, -0.05, ScrollDirection.UP),
        (0.0, 0.05, ScrollDirection.DOWN),
    ],
)
def test_scroll_direction(dx: float, dy: float, expected: ScrollDirection) -> None:
    tracker = MotionTracker()
    landmarks = make_landmarks()

    tracker.update(landmarks, make_rect(x_center=0.5, y_center=0.5, height=1.0))
    labels = tracker.update(landmarks, make_rect(x_center=0.5 + dx, y_center=0.5 + dy, height=1.0))

    assert labels.scroll is expected


def test_scroll_below_threshold_is_idle() -> None:
    tracker = MotionTracker()
    landmarks = make_landmarks()

    tracker.update(landmarks, make_rect(x_center=0.5, height=1.0))
    labels = tracker.update(landmarks, make_rect(x_center=0.515, height=1.0))

    assert labels.scroll is ScrollDirection.NONE


def test_scroll_threshold_scales_with_hand_height() -> None:
    tracker = MotionTracker()
    landmarks = make_landmarks()

    # 0.015 is below 0.02 * 1.0 but above 0.02 * 0.5.
    tracker.update(landmarks, make_rect(x_center=0.5, height=0.5))
    labels = tracker.update(landmarks, make_rect(x_center=0.515, height=0.5))

    assert labels.scroll is ScrollDirection.RIGHT


def test_zero_center_is_a_valid_previous_value() -> None:
    tracker = MotionTracker()
    landmarks = make_landmarks()

    tracker.update(landmarks, make_rect(x_center=0.0, y_center=0.0, height=1.0))
    labels = tracker.update(landmarks, make_rect(x_center=0.05, y_center=0.0, height=1.0))

    assert labels.scroll is ScrollDirection.RIGHT


@pytest.mark.parametrize(
    ("degrees", "expected"),
    [
        (0, ScrollDirection.RIGHT),
        (-45, ScrollDirection.RIGHT),
        (44, ScrollDirection.RIGHT),
        (45, ScrollDirection.UP),
        (134, ScrollDirection.UP),
        (135, ScrollDirection.LEFT),
        (180, ScrollDirection.LEFT),
        (-180, ScrollDirection.LEFT),
        (-136, ScrollDirection.LEFT),
        (-135, ScrollDirection.DOWN),
        (-46, ScrollDirection.DOWN),
    ],
)
def test_scroll_sector_boundaries(degrees: int, expected: ScrollDirection) -> None:
    assert scroll_direction_for_angle(degrees) is expected


def test_zoom_out_when_height_shrinks() -> None:
    tracker = MotionTracker()
    landmarks = make_landmarks()

    tracker.update(landmarks, make_rect(height=0.5))
    labels = tracker.update(landmarks, make_rect(height=0.40))

    assert labels.zoom is ZoomDirection.OUT


def test_zoom_in_when_height_grows() -> None:
    tracker = MotionTracker()
    landmarks = make_landmarks()

    tracker.update(landmarks, make_rect(height=0.40))
    labels = tracker.update(landmarks, make_rect(height=0.5))

    assert labels.zoom is ZoomDirection.IN


def test_zoom_small_change_is_idle() -> None:
    tracker = MotionTracker()
    landmarks = make_landmarks()

    tracker.update(landmarks, make_rect(height=0.5))
    labels = tracker.update(landmarks, make_rect(height=0.49))

    assert labels.zoom is ZoomDirection.NONE
    assert tracker.state.previous_height == 0.49


def test_hand_angle_of_upright_hand() -> None:
    assert hand_angle(landmarks_at_angle(90)) == 90
    assert hand_angle(landmarks_at_angle(105)) == 105
    assert hand_angle(landmarks_at_angle(0)) == 0


def test_slide_left_on_even_frame_then_odd_frame_skips() -> None:
    tracker = MotionTracker()
    rect = make_rect()

    # Frame 1 is odd and never samples the angle.
    assert tracker.update(landmarks_at_angle(60), rect).slide is SlideDirection.NONE
    assert tracker.state.previous_angle is None

    assert tracker.update(landmarks_at_angle(90), rect).slide is SlideDirection.NONE
    assert tracker.state.previous_angle == 90

    assert tracker.update(landmarks_at_angle(140), rect).slide is SlideDirection.NONE
    assert tracker.state.previous_angle == 90

    assert tracker.update(landmarks_at_angle(105), rect).slide is SlideDirection.LEFT
    assert tracker.state.previous_angle == 105

    assert tracker.update(landmarks_at_angle(60), rect).slide is SlideDirection.NONE
    assert tracker.state.previous_angle == 105


def test_slide_right() -> None:
    tracker = MotionTracker()
    rect = make_rect()

    tracker.update(landmarks_at_angle(90), rect)
    tracker.update(landmarks_at_angle(90), rect)
    tracker.update(landmarks_at_angle(90), rect)
    labels = tracker.update(landmarks_at_angle(75), rect)

    assert labels.slide is SlideDirection.RIGHT


@pytest.mark.parametrize(("previous", "current"), [(90, 100), (70, 100), (110, 90)])
def test_slide_requires_upright_reference_and_large_change(previous: int, current: int) -> None:
    tracker = MotionTracker()
    rect = make_rect()

    tracker.update(landmarks_at_angle(previous), rect)
    tracker.update(landmarks_at_angle(previous), rect)
    tracker.update(landmarks_at_angle(previous), rect)
    labels = tracker.update(landmarks_at_angle(current), rect)

    assert labels.slide is SlideDirection.NONE


def test_invalid_landmarks_leave_state_untouched() -> None:
    tracker = MotionTracker()
    tracker.update(make_landmarks(), make_rect(height=0.5))
    before = tracker.state

    with pytest.raises(InvalidInputError):
        tracker.update(HandLandmarks(points=()), make_rect(height=0.2))

    assert tracker.state == before
    assert tracker.frame_count == 1


def test_trackers_do_not_share_history() -> None:
    first = MotionTracker()
    second = MotionTracker()
    landmarks = make_landmarks()

    first.update(landmarks, make_rect(height=0.5))
    labels = second.update(landmarks, make_rect(height=0.2))

    assert labels.zoom is ZoomDirection.NONE
    assert first.state.previous_height == 0.5
    assert second.state.previous_height == 0.2
