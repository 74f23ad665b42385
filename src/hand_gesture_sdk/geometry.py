"""Planar geometry primitives shared by the gesture and motion classifiers."""

from __future__ import annotations

import math

from hand_gesture_sdk.models import Point2


def distance(a: Point2, b: Point2) -> float:
    """Return the Euclidean distance between two normalized points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def radians_to_degrees(radians: float) -> int:
    """Convert radians to whole degrees, rounding halves up."""
    return math.floor(radians * 180.0 / math.pi + 0.5)


def angle(point: Point2, vertex: Point2, reference: Point2) -> int:
    """Return the signed angle at ``vertex`` between ``point`` and ``reference``.

    Both vectors are taken as pointing into ``vertex`` (``vertex - point`` and
    ``vertex - reference``) and the angle is ``atan2(cross, dot)`` in whole
    degrees within ``(-180, 180]``. Positive values are counter-clockwise as
    seen in image coordinates, where ``y`` grows downwards.

    :param point:
        Moving point, for example the current rectangle center.
    :param vertex:
        Common anchor of both vectors.
    :param reference:
        Point defining the reference direction, usually ``vertex + (0.1, 0)``.
    :returns:
        Signed angle in degrees.
    """
    ab_x = vertex[0] - point[0]
    ab_y = vertex[1] - point[1]
    cb_x = vertex[0] - reference[0]
    cb_y = vertex[1] - reference[1]

    dot = ab_x * cb_x + ab_y * cb_y
    cross = ab_x * cb_y - ab_y * cb_x
    degrees = radians_to_degrees(math.atan2(cross, dot))
    return 180 if degrees == -180 else degrees
