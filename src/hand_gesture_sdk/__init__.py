"""Public API surface for the Hand Gesture SDK."""

from hand_gesture_sdk.__about__ import __version__
from hand_gesture_sdk.exceptions import (
    HGSError,
    InvalidInputError,
    ParseError,
    RecognizerCallbackError,
    RecognizerConfigurationError,
    RecognizerError,
    VisualizationDependencyError,
)
from hand_gesture_sdk.fingers import classify_finger, classify_fingers
from hand_gesture_sdk.frame import HandFrame, HandFrameAssembler
from hand_gesture_sdk.geometry import angle, distance, radians_to_degrees
from hand_gesture_sdk.gestures import (
    GESTURE_RULES,
    GestureRule,
    is_thumb_near_index,
    match_gesture,
    recognize_gesture,
)
from hand_gesture_sdk.models import (
    FingerName,
    FingerState,
    FingerStates,
    Gesture,
    HandLandmarks,
    HandSide,
    JointName,
    LandmarksPacket,
    MotionLabels,
    NormalizedRect,
    PacketType,
    ParsedPacket,
    RectPacket,
    ScrollDirection,
    SlideDirection,
    ZoomDirection,
)
from hand_gesture_sdk.motion import (
    MotionTracker,
    MotionTrackerState,
    hand_angle,
    scroll_direction_for_angle,
)
from hand_gesture_sdk.parser import parse_line
from hand_gesture_sdk.recognizer import (
    ErrorPolicy,
    HandFilter,
    HandGestureRecognizer,
    HandGestureRecognizerConfig,
    LogEventKind,
    RecognitionResult,
    RecognizerLogEvent,
    RecognizerStats,
)
from hand_gesture_sdk.visualization import RerunVisualizer, RerunVisualizerConfig

__all__ = [
    "GESTURE_RULES",
    "ErrorPolicy",
    "FingerName",
    "FingerState",
    "FingerStates",
    "Gesture",
    "GestureRule",
    "HGSError",
    "HandFilter",
    "HandFrame",
    "HandFrameAssembler",
    "HandGestureRecognizer",
    "HandGestureRecognizerConfig",
    "HandLandmarks",
    "HandSide",
    "InvalidInputError",
    "JointName",
    "LandmarksPacket",
    "LogEventKind",
    "MotionLabels",
    "MotionTracker",
    "MotionTrackerState",
    "NormalizedRect",
    "PacketType",
    "ParseError",
    "ParsedPacket",
    "RecognitionResult",
    "RecognizerCallbackError",
    "RecognizerConfigurationError",
    "RecognizerError",
    "RecognizerLogEvent",
    "RecognizerStats",
    "RectPacket",
    "RerunVisualizer",
    "RerunVisualizerConfig",
    "ScrollDirection",
    "SlideDirection",
    "VisualizationDependencyError",
    "ZoomDirection",
    "__version__",
    "angle",
    "classify_finger",
    "classify_fingers",
    "distance",
    "hand_angle",
    "is_thumb_near_index",
    "match_gesture",
    "parse_line",
    "radians_to_degrees",
    "recognize_gesture",
    "scroll_direction_for_angle",
]
