"""Pairing of landmark and rectangle packets into one frame per detection."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from time import monotonic_ns, time_ns
from typing import Any

from hand_gesture_sdk.models import (
    HandLandmarks,
    HandSide,
    LandmarksPacket,
    NormalizedRect,
    ParsedPacket,
)


@dataclass(frozen=True, slots=True)
class HandFrame:
    """Landmarks and rectangle of one hand from the same upstream detection.

    :param side:
        Hand side reported by the detector.
    :param track_id:
        Hand track owning the motion history this frame feeds.
    :param landmarks:
        Landmarks of the detection.
    :param rect:
        Bounding rectangle of the detection.
    :param sequence_id:
        Zero-based count of frames paired so far for this side.
    :param timestamp_ns:
        Later of the two component receive times.
    :param recv_time_unix_ns:
        Optional wall-clock time of completion in Unix nanoseconds.
    :param landmarks_recv_ts_ns:
        Monotonic receive time of the landmarks packet.
    :param rect_recv_ts_ns:
        Monotonic receive time of the rectangle packet.
    """

    side: HandSide
    track_id: str
    landmarks: HandLandmarks
    rect: NormalizedRect
    sequence_id: int
    timestamp_ns: int
    recv_time_unix_ns: int | None = None
    landmarks_recv_ts_ns: int | None = None
    rect_recv_ts_ns: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "side": self.side.value,
            "track_id": self.track_id,
            "landmarks": self.landmarks.to_dict(),
            "rect": self.rect.to_dict(),
            "sequence_id": self.sequence_id,
            "timestamp_ns": self.timestamp_ns,
            "recv_time_unix_ns": self.recv_time_unix_ns,
            "landmarks_recv_ts_ns": self.landmarks_recv_ts_ns,
            "rect_recv_ts_ns": self.rect_recv_ts_ns,
        }

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> HandFrame:
        """Inverse of :meth:`to_dict`. Missing receive times become ``None``."""
        return cls(
            side=HandSide(str(values["side"])),
            track_id=str(values["track_id"]),
            landmarks=HandLandmarks.from_dict(values["landmarks"]),
            rect=NormalizedRect.from_dict(values["rect"]),
            sequence_id=int(values["sequence_id"]),
            timestamp_ns=int(values["timestamp_ns"]),
            recv_time_unix_ns=_optional_int(values.get("recv_time_unix_ns")),
            landmarks_recv_ts_ns=_optional_int(values.get("landmarks_recv_ts_ns")),
            rect_recv_ts_ns=_optional_int(values.get("rect_recv_ts_ns")),
        )


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass(slots=True)
class _PendingPair:
    """Components of the detection currently waiting for its partner."""

    landmarks: HandLandmarks | None = None
    landmarks_ts_ns: int | None = None
    rect: NormalizedRect | None = None
    rect_ts_ns: int | None = None

    def is_empty(self) -> bool:
        return self.landmarks is None and self.rect is None


class HandFrameAssembler:
    """Pair the landmarks and rectangle of each detection into one :class:`HandFrame`.

    The detector publishes one landmarks packet and one rect packet per hand
    and detection, in either order. A component is held until its partner
    arrives, then the pair is emitted once and the pending slot is cleared, so
    each detection yields exactly one frame. A component arriving again before
    its partner replaces the held one; the older detection is then incomplete
    and never emitted.
    """

    def __init__(
        self,
        *,
        include_wall_time: bool = True,
        track_id_by_side: Mapping[HandSide, str] | None = None,
    ) -> None:
        """Create an assembler.

        :param include_wall_time:
            Stamp frames with ``time.time_ns()`` when no wall-clock time is given.
        :param track_id_by_side:
            Track ids for emitted frames. Defaults to ``left_hand``/``right_hand``.
        """
        self._include_wall_time = include_wall_time
        self._track_ids = {HandSide.LEFT: "left_hand", HandSide.RIGHT: "right_hand"}
        self._track_ids.update(track_id_by_side or {})
        self._pending = {side: _PendingPair() for side in HandSide}
        self._next_sequence = dict.fromkeys(HandSide, 0)
        self._replaced = 0

    @property
    def replaced_components(self) -> int:
        """Number of held components overwritten before their partner arrived."""
        return self._replaced

    def has_pending(self, side: HandSide) -> bool:
        """Return whether ``side`` holds a component still waiting for its partner."""
        return not self._pending[side].is_empty()

    def reset(self, side: HandSide | None = None) -> None:
        """Discard pending components and restart sequence ids for one or both sides."""
        for item in HandSide if side is None else (side,):
            self._pending[item] = _PendingPair()
            self._next_sequence[item] = 0

    def push_packet(
        self,
        packet: ParsedPacket,
        *,
        recv_ts_ns: int | None = None,
        recv_time_unix_ns: int | None = None,
    ) -> HandFrame | None:
        """Add one parsed packet, returning a frame when it completes a pair.

        :param packet:
            Landmarks or rect packet.
        :param recv_ts_ns:
            Monotonic receive time. Defaults to ``time.monotonic_ns()``.
        :param recv_time_unix_ns:
            Wall-clock receive time, used for the emitted frame.
        :returns:
            The completed frame, or ``None`` while the partner is missing.
        """
        ts_ns = monotonic_ns() if recv_ts_ns is None else recv_ts_ns
        pending = self._pending[packet.side]

        if isinstance(packet, LandmarksPacket):
            if pending.landmarks is not None:
                self._replaced += 1
            pending.landmarks = packet.data
            pending.landmarks_ts_ns = ts_ns
        else:
            if pending.rect is not None:
                self._replaced += 1
            pending.rect = packet.data
            pending.rect_ts_ns = ts_ns

        if (
            pending.landmarks is None
            or pending.landmarks_ts_ns is None
            or pending.rect is None
            or pending.rect_ts_ns is None
        ):
            return None

        if recv_time_unix_ns is None and self._include_wall_time:
            recv_time_unix_ns = time_ns()
        sequence_id = self._next_sequence[packet.side]
        self._next_sequence[packet.side] = sequence_id + 1
        self._pending[packet.side] = _PendingPair()

        return HandFrame(
            side=packet.side,
            track_id=self._track_ids[packet.side],
            landmarks=pending.landmarks,
            rect=pending.rect,
            sequence_id=sequence_id,
            timestamp_ns=max(pending.landmarks_ts_ns, pending.rect_ts_ns),
            recv_time_unix_ns=recv_time_unix_ns,
            landmarks_recv_ts_ns=pending.landmarks_ts_ns,
            rect_recv_ts_ns=pending.rect_ts_ns,
        )
