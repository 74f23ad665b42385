LANDMARK_COUNT = 21
LANDMARK_VALUE_COUNT = LANDMARK_COUNT * 2
LANDMARK_VALUE_COUNT_3D = LANDMARK_COUNT * 3
RECT_VALUE_COUNT = 4

WRIST_INDEX = 0
THUMB_TIP_INDEX = 4
INDEX_TIP_INDEX = 8
MIDDLE_MCP_INDEX = 9

# (base, mid, tip) landmark triplets used for finger state classification.
THUMB_TRIPLET = (2, 3, 4)
INDEX_TRIPLET = (6, 7, 8)
MIDDLE_TRIPLET = (10, 11, 12)
RING_TRIPLET = (14, 15, 16)
PINKY_TRIPLET = (18, 19, 20)

FINGER_STATE_MARGIN = 0.01
MIN_HAND_RECT_SIZE = 0.01
THUMB_NEAR_INDEX_DISTANCE = 0.1

SCROLL_DISTANCE_FACTOR = 0.02
ZOOM_HEIGHT_FACTOR = 0.03
SLIDE_ANGLE_THRESHOLD_DEG = 12
SLIDE_REFERENCE_ANGLE_RANGE_DEG = (80, 100)
REFERENCE_VECTOR_LENGTH = 0.1

LANDMARK_JOINT_NAMES: tuple[str, ...] = (
    "Wrist",
    "ThumbCmc",
    "ThumbMcp",
    "ThumbIp",
    "ThumbTip",
    "IndexMcp",
    "IndexPip",
    "IndexDip",
    "IndexTip",
    "MiddleMcp",
    "MiddlePip",
    "MiddleDip",
    "MiddleTip",
    "RingMcp",
    "RingPip",
    "RingDip",
    "RingTip",
    "PinkyMcp",
    "PinkyPip",
    "PinkyDip",
    "PinkyTip",
)
