"""Optional real-time visualization helpers."""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from types import ModuleType

from hand_gesture_sdk.exceptions import VisualizationDependencyError
from hand_gesture_sdk.frame import HandFrame
from hand_gesture_sdk.models import HandSide, Point2
from hand_gesture_sdk.recognizer import RecognitionResult


@dataclass(frozen=True, slots=True)
class RerunVisualizerConfig:
    """Configuration for :class:`RerunVisualizer`.

    :param application_id:
        Application identifier displayed in Rerun.
    :param spawn:
        If ``True``, spawn a local Rerun viewer on initialization.
    :param image_size:
        ``(width, height)`` in pixels used to scale normalized coordinates.
    :param landmark_radius:
        Point radius for landmark markers in pixels.
    :param left_landmark_color:
        RGB color for left-hand landmark markers.
    :param right_landmark_color:
        RGB color for right-hand landmark markers.
    :param rect_color:
        RGB color for the hand rectangle.
    :param background_color:
        Optional RGB background color for the Rerun 2D view.
    """

    application_id: str = "hand-gesture-sdk"
    spawn: bool = True
    image_size: tuple[int, int] = (640, 480)
    landmark_radius: float = 3.0
    left_landmark_color: tuple[int, int, int] = (64, 128, 255)
    right_landmark_color: tuple[int, int, int] = (255, 64, 64)
    rect_color: tuple[int, int, int] = (255, 220, 0)
    background_color: tuple[int, int, int] | None = (18, 22, 30)


class RerunVisualizer:
    """Visualizer that logs hand frames and recognized labels to `rerun`.

    This component is optional and requires installing the visualization extra.
    """

    def __init__(self, config: RerunVisualizerConfig | None = None) -> None:
        """Create a Rerun visualizer.

        :param config:
            Optional visualizer configuration.
        :raises VisualizationDependencyError:
            If `rerun-sdk` is not installed.
        """
        self._config = config or RerunVisualizerConfig()
        self._rr = self._import_rerun()
        self._rr.init(self._config.application_id, spawn=self._config.spawn)
        self._apply_view_background()

    def log_frame(self, frame: HandFrame) -> None:
        """Log landmarks and hand rectangle of one frame.

        :param frame:
            Assembled hand frame.
        """
        base = f"hands/{frame.track_id}"
        points = [self._to_pixels(point) for point in frame.landmarks.points]
        color = self._landmark_color(frame.side)
        self._rr.log(
            f"{base}/landmarks",
            self._rr.Points2D(
                [list(point) for point in points],
                radii=[self._config.landmark_radius] * len(points),
                colors=[list(color)] * len(points),
            ),
        )

        rect = frame.rect
        width_px, height_px = self._config.image_size
        self._rr.log(
            f"{base}/rect",
            self._rr.Boxes2D(
                centers=[list(self._to_pixels(rect.center))],
                sizes=[[rect.width * width_px, rect.height * height_px]],
                colors=[list(self._config.rect_color)],
            ),
        )

    def log_result(self, result: RecognitionResult) -> None:
        """Log recognized labels of one frame as a text entry.

        :param result:
            Recognition result for a frame of the same track.
        """
        self._rr.log(
            f"hands/{result.track_id}/labels",
            self._rr.TextLog(
                f"gesture={result.gesture.value}"
                f" scroll={result.scroll.value}"
                f" zoom={result.zoom.value}"
                f" slide={result.slide.value}"
            ),
        )

    def _to_pixels(self, point: Point2) -> tuple[float, float]:
        width_px, height_px = self._config.image_size
        return (point[0] * width_px, point[1] * height_px)

    def _import_rerun(self) -> ModuleType:
        try:
            module = importlib.import_module("rerun")
        except ModuleNotFoundError as exc:
            raise VisualizationDependencyError(
                "rerun is not installed. Install with: pip install hand-gesture-sdk[visualization]"
            ) from exc

        return module

    def _apply_view_background(self) -> None:
        """Apply optional background color to the default 2D view."""
        if self._config.background_color is None:
            return

        if not hasattr(self._rr, "send_blueprint"):
            return

        try:
            blueprint_module = importlib.import_module("rerun.blueprint")
        except ModuleNotFoundError:
            return

        blueprint = blueprint_module.Blueprint(
            blueprint_module.Spatial2DView(
                origin="/",
                name="Hands",
                background=list(self._config.background_color),
            )
        )
        self._rr.send_blueprint(blueprint)

    def _landmark_color(self, side: HandSide) -> tuple[int, int, int]:
        if side == HandSide.LEFT:
            return self._config.left_landmark_color
        return self._config.right_landmark_color
