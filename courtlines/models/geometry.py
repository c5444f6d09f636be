"""
Geometry primitives: image points, polar lines, angle helpers.

Polar lines use the angle convention of the Hough accumulator: the stored
angle is the accumulator's angle bucket (degrees, not offset by -90) and the
line is  X·cos(angle) + Y·sin(angle) = distance  with X = -column, Y = row.
Horizontal image lines therefore sit near 90°, vertical ones near 180°.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import math

import config


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def angle_difference(a: float, b: float) -> float:
    """Smallest angle between two directions in degrees, wrapping at 360."""
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


@dataclass(frozen=True)
class Cartesian:
    """Integer image coordinate: x = column, y = row."""
    x: int
    y: int

    def __add__(self, other: "Cartesian") -> "Cartesian":
        return Cartesian(self.x + other.x, self.y + other.y)

    def midpoint(self, other: "Cartesian") -> "Cartesian":
        """Integer midpoint, truncated toward zero."""
        total = self + other
        return Cartesian(int(total.x / 2), int(total.y / 2))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PolarLine:
    """Infinite line as (perpendicular distance, angle in degrees)."""
    distance: float
    angle: float

    @property
    def theta(self) -> float:
        return deg_to_rad(self.angle)

    @property
    def is_vertical(self) -> bool:
        return not (config.HORIZONTAL_ANGLE_MIN < self.angle
                    < config.HORIZONTAL_ANGLE_MAX)

    @property
    def is_horizontal(self) -> bool:
        return not self.is_vertical

    def averaged_with(self, other: "PolarLine") -> "PolarLine":
        return PolarLine((self.distance + other.distance) / 2.0,
                         (self.angle + other.angle) / 2.0)

    def is_similar(
        self, other: "PolarLine",
        angle_tol: float = config.PRUNE_ANGLE_TOLERANCE,
        distance_tol: float = config.PRUNE_DISTANCE_TOLERANCE,
    ) -> bool:
        """
        Crude closeness test used to collapse Hough duplicates.

        Fine for a roughly axis-aligned court; a rotated court will see
        unrelated lines merged.
        """
        return (angle_difference(self.angle, other.angle) < angle_tol and
                abs(self.distance - other.distance) < distance_tol)

    def project(self, point: Cartesian) -> float:
        """Signed distance of an image point along this line's normal."""
        t = self.theta
        return -point.x * math.cos(t) + point.y * math.sin(t)

    def to_segment(
        self, half_length: float = config.DEBUG_LINE_LENGTH,
    ) -> Tuple[Cartesian, Cartesian]:
        """Two far-apart image points on the line, for drawing."""
        t = self.theta
        c, s = math.cos(t), math.sin(t)
        x0, y0 = -self.distance * c, self.distance * s
        return (Cartesian(int(round(x0 - half_length * s)),
                          int(round(y0 - half_length * c))),
                Cartesian(int(round(x0 + half_length * s)),
                          int(round(y0 + half_length * c))))
