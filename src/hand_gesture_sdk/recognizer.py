"""High-level recognizer turning hand frames into gesture and motion labels."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from hand_gesture_sdk.exceptions import (
    InvalidInputError,
    ParseError,
    RecognizerCallbackError,
    RecognizerConfigurationError,
)
from hand_gesture_sdk.frame import HandFrame, HandFrameAssembler
from hand_gesture_sdk.gestures import recognize_gesture
from hand_gesture_sdk.models import (
    Gesture,
    HandSide,
    MotionLabels,
    ParsedPacket,
    ScrollDirection,
    SlideDirection,
    ZoomDirection,
)
from hand_gesture_sdk.motion import MotionTracker
from hand_gesture_sdk.parser import parse_line


class HandFilter(StrEnum):
    """Hand-side filter applied before frame assembly."""

    BOTH = "both"
    LEFT = "left"
    RIGHT = "right"


class ErrorPolicy(StrEnum):
    """Policy applied to parse failures and invalid frames."""

    STRICT = "strict"
    TOLERANT = "tolerant"


class LogEventKind(StrEnum):
    """Structured log event kinds emitted by :class:`HandGestureRecognizer`."""

    RECEIVED_LINE = "received_line"
    PARSE_ERROR = "parse_error"
    FILTERED_PACKET = "filtered_packet"
    STALE_FRAME = "stale_frame"
    INVALID_FRAME = "invalid_frame"
    EMITTED_RESULT = "emitted_result"
    MOTION_DETECTED = "motion_detected"
    MOTION_SKIPPED = "motion_skipped"
    CALLBACK_ERROR = "callback_error"


@dataclass(frozen=True, slots=True)
class RecognizerLogEvent:
    """Structured recognizer log event for observability hooks.

    :param kind:
        Event kind discriminator.
    :param message:
        Human-readable event message.
    :param side:
        Optional hand side associated with the event.
    :param track_id:
        Optional hand track associated with the event.
    :param line:
        Optional raw input line associated with the event.
    :param exception:
        Optional exception associated with the event.
    """

    kind: LogEventKind
    message: str
    side: HandSide | None = None
    track_id: str | None = None
    line: str | None = None
    exception: Exception | None = None


@dataclass(frozen=True, slots=True)
class RecognizerStats:
    """Observable counters for :class:`HandGestureRecognizer` runtime behavior."""

    lines_received: int = 0
    parse_errors: int = 0
    dropped_lines: int = 0
    packets_filtered: int = 0
    frames_received: int = 0
    stale_frames: int = 0
    invalid_frames: int = 0
    motion_skipped: int = 0
    results_emitted: int = 0
    callbacks_invoked: int = 0
    callback_errors: int = 0


@dataclass(frozen=True, slots=True)
class HandGestureRecognizerConfig:
    """Configuration for :class:`HandGestureRecognizer`.

    Classification thresholds are fixed and intentionally not part of this
    configuration.

    :param hand_filter:
        Hand-side filter for line input.
    :param error_policy:
        Handling of unparsable lines and frames with invalid landmarks.
        ``strict`` re-raises, ``tolerant`` drops the line or frame.
    :param include_wall_time:
        Whether assembled frames include ``recv_time_unix_ns`` by default.
    :param max_tracks:
        Maximum number of distinct hand tracks, each owning one motion tracker.
    :param log_hook:
        Optional structured log callback invoked for recognizer events.
    """

    hand_filter: HandFilter = HandFilter.BOTH
    error_policy: ErrorPolicy = ErrorPolicy.STRICT
    include_wall_time: bool = True
    max_tracks: int = 2
    log_hook: Callable[[RecognizerLogEvent], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration constraints.

        :raises RecognizerConfigurationError:
            If one or more fields are invalid for runtime operation.
        """
        if self.max_tracks < 1:
            raise RecognizerConfigurationError("max_tracks must be at least 1.")


@dataclass(frozen=True, slots=True)
class RecognitionResult:
    """Labels recognized for one hand frame.

    :param side:
        Hand side of the source frame.
    :param track_id:
        Hand track of the source frame.
    :param sequence_id:
        Sequence id of the source frame.
    :param timestamp_ns:
        Timestamp of the source frame.
    :param gesture:
        Static gesture label.
    :param scroll:
        Scroll direction label.
    :param zoom:
        Zoom direction label.
    :param slide:
        Slide direction label.
    """

    side: HandSide
    track_id: str
    sequence_id: int
    timestamp_ns: int
    gesture: Gesture
    scroll: ScrollDirection
    zoom: ZoomDirection
    slide: SlideDirection

    @property
    def motion(self) -> MotionLabels:
        return MotionLabels(scroll=self.scroll, zoom=self.zoom, slide=self.slide)

    def to_dict(self) -> dict[str, Any]:
        """Serialize result into a deterministic mapping-friendly dictionary."""
        return {
            "side": self.side.value,
            "track_id": self.track_id,
            "sequence_id": self.sequence_id,
            "timestamp_ns": self.timestamp_ns,
            "gesture": self.gesture.value,
            "scroll": self.scroll.value,
            "zoom": self.zoom.value,
            "slide": self.slide.value,
        }

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> RecognitionResult:
        """Build :class:`RecognitionResult` from serialized mapping data."""
        return cls(
            side=HandSide(str(values["side"])),
            track_id=str(values["track_id"]),
            sequence_id=int(values["sequence_id"]),
            timestamp_ns=int(values["timestamp_ns"]),
            gesture=Gesture(values["gesture"]),
            scroll=ScrollDirection(values["scroll"]),
            zoom=ZoomDirection(values["zoom"]),
            slide=SlideDirection(values["slide"]),
        )


class HandGestureRecognizer:
    """Recognize gestures and motions for one or more hand tracks.

    Every track id gets its own :class:`MotionTracker`, created on the first
    frame of that track and kept for the lifetime of the recognizer. Frames
    of one track must arrive in non-decreasing timestamp order; older frames
    are dropped instead of corrupting the motion history.
    """

    def __init__(self, config: HandGestureRecognizerConfig | None = None) -> None:
        """Create a recognizer.

        :param config:
            Optional recognizer configuration.
        """
        self._config = config or HandGestureRecognizerConfig()
        self._frame_assembler = HandFrameAssembler(
            include_wall_time=self._config.include_wall_time
        )
        self._trackers: dict[str, MotionTracker] = {}
        self._last_timestamp_by_track: dict[str, int] = {}
        self._stats = RecognizerStats()

    @property
    def track_ids(self) -> tuple[str, ...]:
        """Track ids that currently own a motion tracker."""
        return tuple(self._trackers)

    def tracker_for(self, track_id: str) -> MotionTracker | None:
        """Return the motion tracker owned by ``track_id``, if any."""
        return self._trackers.get(track_id)

    def process_frame(self, frame: HandFrame) -> RecognitionResult | None:
        """Recognize gesture and motion labels for one frame.

        :param frame:
            Assembled hand frame.
        :returns:
            Recognition result, or ``None`` if the frame was stale or, under
            the tolerant policy, invalid. A frame whose rectangle reports no
            hand still yields the ``___`` gesture with idle motion labels even
            when its landmarks are incomplete; its tracker is left untouched.
        :raises InvalidInputError:
            When ``error_policy=strict`` and a frame with a detected hand has
            fewer than 21 landmarks.
        :raises RecognizerConfigurationError:
            If the frame would start a track beyond ``max_tracks``.
        """
        self._stats = replace(self._stats, frames_received=self._stats.frames_received + 1)

        last_timestamp = self._last_timestamp_by_track.get(frame.track_id)
        if last_timestamp is not None and frame.timestamp_ns < last_timestamp:
            self._stats = replace(self._stats, stale_frames=self._stats.stale_frames + 1)
            self._emit_log(
                RecognizerLogEvent(
                    kind=LogEventKind.STALE_FRAME,
                    message="Frame dropped because it is older than the last processed frame.",
                    side=frame.side,
                    track_id=frame.track_id,
                )
            )
            return None

        try:
            frame.landmarks.require_complete()
        except InvalidInputError as exc:
            if not frame.rect.has_hand():
                return self._emit_without_motion(frame, exc)

            self._stats = replace(self._stats, invalid_frames=self._stats.invalid_frames + 1)
            self._emit_log(
                RecognizerLogEvent(
                    kind=LogEventKind.INVALID_FRAME,
                    message="Frame rejected due to invalid landmarks.",
                    side=frame.side,
                    track_id=frame.track_id,
                    exception=exc,
                )
            )
            if self._config.error_policy == ErrorPolicy.STRICT:
                raise
            return None

        tracker = self._tracker_for_frame(frame)
        gesture = recognize_gesture(frame.landmarks, frame.rect)
        motion = tracker.update(frame.landmarks, frame.rect)
        if not motion.is_idle():
            self._emit_log(
                RecognizerLogEvent(
                    kind=LogEventKind.MOTION_DETECTED,
                    message=(
                        f"Motion detected: scroll={motion.scroll.value!r}"
                        f" zoom={motion.zoom.value!r} slide={motion.slide.value!r}"
                    ),
                    side=frame.side,
                    track_id=frame.track_id,
                )
            )
        return self._emit_result(frame, gesture, motion)

    def _emit_without_motion(
        self, frame: HandFrame, exc: InvalidInputError
    ) -> RecognitionResult:
        """Report the no-hand gesture for a frame whose landmarks cannot drive motion."""
        self._stats = replace(self._stats, motion_skipped=self._stats.motion_skipped + 1)
        self._emit_log(
            RecognizerLogEvent(
                kind=LogEventKind.MOTION_SKIPPED,
                message="No hand detected and landmarks incomplete; motion tracking skipped.",
                side=frame.side,
                track_id=frame.track_id,
                exception=exc,
            )
        )
        return self._emit_result(
            frame, recognize_gesture(frame.landmarks, frame.rect), MotionLabels()
        )

    def _emit_result(
        self, frame: HandFrame, gesture: Gesture, motion: MotionLabels
    ) -> RecognitionResult:
        self._last_timestamp_by_track[frame.track_id] = frame.timestamp_ns
        self._stats = replace(self._stats, results_emitted=self._stats.results_emitted + 1)
        self._emit_log(
            RecognizerLogEvent(
                kind=LogEventKind.EMITTED_RESULT,
                message=f"Emitted result with gesture {gesture.value!r}.",
                side=frame.side,
                track_id=frame.track_id,
            )
        )
        return RecognitionResult(
            side=frame.side,
            track_id=frame.track_id,
            sequence_id=frame.sequence_id,
            timestamp_ns=frame.timestamp_ns,
            gesture=gesture,
            scroll=motion.scroll,
            zoom=motion.zoom,
            slide=motion.slide,
        )

    def iter_results(self, lines: Iterable[str]) -> Iterator[RecognitionResult]:
        """Parse input lines, assemble frames, and yield recognition results.

        :param lines:
            Raw landmark and rectangle lines, in arrival order.
        :returns:
            Iterator yielding one result per assembled, accepted frame.
        :raises ParseError:
            When ``error_policy=strict`` and an incoming line cannot be parsed.
        :raises InvalidInputError:
            When ``error_policy=strict`` and a frame violates the landmark contract.
        """
        for line in lines:
            self._stats = replace(self._stats, lines_received=self._stats.lines_received + 1)
            self._emit_log(
                RecognizerLogEvent(
                    kind=LogEventKind.RECEIVED_LINE,
                    message="Received input line.",
                    line=line,
                )
            )

            packet = self._parse_with_policy(line)
            if packet is None:
                continue

            if not self._matches_hand_filter(packet.side):
                self._stats = replace(
                    self._stats,
                    packets_filtered=self._stats.packets_filtered + 1,
                    dropped_lines=self._stats.dropped_lines + 1,
                )
                self._emit_log(
                    RecognizerLogEvent(
                        kind=LogEventKind.FILTERED_PACKET,
                        message="Packet dropped due to hand filter.",
                        side=packet.side,
                    )
                )
                continue

            frame = self._frame_assembler.push_packet(packet)
            if frame is None:
                continue

            result = self.process_frame(frame)
            if result is not None:
                yield result

    def run(
        self,
        callback: Callable[[RecognitionResult], None],
        lines: Iterable[str],
        *,
        max_results: int | None = None,
        wrap_callback_exceptions: bool = False,
    ) -> int:
        """Run the recognition loop and invoke callback for each result.

        :param callback:
            Function called for each recognition result.
        :param lines:
            Raw landmark and rectangle lines.
        :param max_results:
            Optional cap on processed results.
        :param wrap_callback_exceptions:
            If ``True``, callback exceptions are re-raised as
            :class:`RecognizerCallbackError`.
        :returns:
            Number of callback invocations performed.
        :raises RecognizerCallbackError:
            When callback raises and wrapping is enabled.
        """
        processed = 0
        for result in self.iter_results(lines):
            try:
                callback(result)
            except Exception as exc:
                self._stats = replace(self._stats, callback_errors=self._stats.callback_errors + 1)
                self._emit_log(
                    RecognizerLogEvent(
                        kind=LogEventKind.CALLBACK_ERROR,
                        message="Callback raised an exception.",
                        side=result.side,
                        track_id=result.track_id,
                        exception=exc,
                    )
                )
                if wrap_callback_exceptions:
                    raise RecognizerCallbackError("Callback failed during recognition.") from exc
                raise

            processed += 1
            self._stats = replace(self._stats, callbacks_invoked=self._stats.callbacks_invoked + 1)
            if max_results is not None and processed >= max_results:
                return processed
        return processed

    def get_stats(self) -> RecognizerStats:
        """Return a snapshot of current recognizer counters."""
        return self._stats

    def reset_stats(self) -> None:
        """Reset recognizer counters to zero values."""
        self._stats = RecognizerStats()

    def _tracker_for_frame(self, frame: HandFrame) -> MotionTracker:
        tracker = self._trackers.get(frame.track_id)
        if tracker is not None:
            return tracker

        if len(self._trackers) >= self._config.max_tracks:
            raise RecognizerConfigurationError(
                f"Cannot start track {frame.track_id!r}: "
                f"max_tracks={self._config.max_tracks} already in use."
            )
        tracker = MotionTracker()
        self._trackers[frame.track_id] = tracker
        return tracker

    def _parse_with_policy(self, line: str) -> ParsedPacket | None:
        """Parse one line according to configured strict/tolerant policy."""
        try:
            return parse_line(line)
        except ParseError as exc:
            self._stats = replace(
                self._stats,
                parse_errors=self._stats.parse_errors + 1,
                dropped_lines=self._stats.dropped_lines + 1,
            )
            self._emit_log(
                RecognizerLogEvent(
                    kind=LogEventKind.PARSE_ERROR,
                    message="Failed to parse input line.",
                    line=line,
                    exception=exc,
                )
            )
            if self._config.error_policy == ErrorPolicy.STRICT:
                raise
            return None

    def _matches_hand_filter(self, side: HandSide) -> bool:
        """Return whether a packet side passes the configured hand filter."""
        if self._config.hand_filter == HandFilter.BOTH:
            return True
        if self._config.hand_filter == HandFilter.LEFT:
            return side == HandSide.LEFT
        return side == HandSide.RIGHT

    def _emit_log(self, event: RecognizerLogEvent) -> None:
        """Emit one structured log event if a hook is configured."""
        if self._config.log_hook is not None:
            self._config.log_hook(event)
