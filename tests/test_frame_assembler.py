from hand_gesture_sdk import HandFrameAssembler, HandSide, parse_line

_LANDMARKS = ", ".join(str(i / 100.0) for i in range(42))


def _rect(side: str, x_center: float = 0.5) -> str:
    return f"{side} rect:, {x_center}, 0.5, 0.3, 0.4"


def _landmarks(side: str) -> str:
    return f"{side} landmarks:, {_LANDMARKS}"


def test_frame_emits_once_both_components_arrive() -> None:
    assembler = HandFrameAssembler()

    assert assembler.push_packet(parse_line(_rect("Right")), recv_ts_ns=100) is None
    assert assembler.has_pending(HandSide.RIGHT)

    frame = assembler.push_packet(
        parse_line(_landmarks("Right")), recv_ts_ns=120, recv_time_unix_ns=1_020
    )

    assert frame is not None
    assert frame.side == HandSide.RIGHT
    assert frame.track_id == "right_hand"
    assert frame.sequence_id == 0
    assert frame.timestamp_ns == 120
    assert frame.rect_recv_ts_ns == 100
    assert frame.landmarks_recv_ts_ns == 120
    assert frame.recv_time_unix_ns == 1_020
    assert not assembler.has_pending(HandSide.RIGHT)


def test_landmarks_may_arrive_before_rect() -> None:
    assembler = HandFrameAssembler()

    assert assembler.push_packet(parse_line(_landmarks("Left")), recv_ts_ns=10) is None
    frame = assembler.push_packet(parse_line(_rect("Left", 0.7)), recv_ts_ns=20)

    assert frame is not None
    assert frame.rect.x_center == 0.7
    assert frame.timestamp_ns == 20


def test_each_detection_yields_exactly_one_frame() -> None:
    assembler = HandFrameAssembler()
    frames = []

    for index in range(4):
        for line in (_rect("Right", 0.5 + index / 10), _landmarks("Right")):
            frame = assembler.push_packet(parse_line(line), recv_ts_ns=10 * index)
            if frame is not None:
                frames.append(frame)

    assert [frame.sequence_id for frame in frames] == [0, 1, 2, 3]
    assert [frame.rect.x_center for frame in frames] == [0.5, 0.6, 0.7, 0.8]


def test_component_without_partner_is_replaced() -> None:
    assembler = HandFrameAssembler()

    assembler.push_packet(parse_line(_rect("Right", 0.2)), recv_ts_ns=10)
    assembler.push_packet(parse_line(_rect("Right", 0.9)), recv_ts_ns=20)
    frame = assembler.push_packet(parse_line(_landmarks("Right")), recv_ts_ns=30)

    assert frame is not None
    assert frame.rect.x_center == 0.9
    assert frame.rect_recv_ts_ns == 20
    assert assembler.replaced_components == 1


def test_sides_pair_independently() -> None:
    assembler = HandFrameAssembler(
        track_id_by_side={HandSide.LEFT: "player_one", HandSide.RIGHT: "player_two"}
    )

    assert assembler.push_packet(parse_line(_rect("Left")), recv_ts_ns=10) is None
    assert assembler.push_packet(parse_line(_landmarks("Right")), recv_ts_ns=11) is None
    left_frame = assembler.push_packet(parse_line(_landmarks("Left")), recv_ts_ns=12)
    right_frame = assembler.push_packet(parse_line(_rect("Right")), recv_ts_ns=13)

    assert left_frame is not None
    assert right_frame is not None
    assert left_frame.sequence_id == 0
    assert right_frame.sequence_id == 0
    assert left_frame.track_id == "player_one"
    assert right_frame.track_id == "player_two"


def test_reset_clears_one_side() -> None:
    assembler = HandFrameAssembler()

    assembler.push_packet(parse_line(_rect("Left")), recv_ts_ns=10)
    assembler.push_packet(parse_line(_rect("Right")), recv_ts_ns=10)
    assembler.reset(HandSide.LEFT)

    assert assembler.push_packet(parse_line(_landmarks("Left")), recv_ts_ns=20) is None
    assert assembler.push_packet(parse_line(_landmarks("Right")), recv_ts_ns=20) is not None


def test_default_timestamps_are_generated() -> None:
    assembler = HandFrameAssembler(include_wall_time=True)

    assembler.push_packet(parse_line(_rect("Left")))
    frame = assembler.push_packet(parse_line(_landmarks("Left")))

    assert frame is not None
    assert frame.timestamp_ns > 0
    assert frame.recv_time_unix_ns is not None
    assert frame.recv_time_unix_ns > 0


def test_wall_time_can_be_disabled() -> None:
    assembler = HandFrameAssembler(include_wall_time=False)

    assembler.push_packet(parse_line(_rect("Left")), recv_ts_ns=1)
    frame = assembler.push_packet(parse_line(_landmarks("Left")), recv_ts_ns=2)

    assert frame is not None
    assert frame.recv_time_unix_ns is None
