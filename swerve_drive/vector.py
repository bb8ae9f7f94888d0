from math import atan2, cos, degrees, hypot, radians, sin
from typing import Iterable


def wrap_degrees(angle: float) -> float:
    """Wrap an angle in degrees to [-180, 180)."""
    return ((angle + 180.0) % 360.0) - 180.0


class Vector:
    """2D vector kept in polar form (magnitude, angle in degrees).

    Keeping the polar form means a zero-magnitude vector still carries a
    heading, which the idle policy of the kinematics solver relies on.
    """

    __slots__ = ("_magnitude", "_angle")

    def __init__(self, magnitude: float = 0.0, angle: float = 0.0) -> None:
        if magnitude < 0:
            magnitude = -magnitude
            angle += 180.0
        self._magnitude = float(magnitude)
        self._angle = wrap_degrees(float(angle))

    @classmethod
    def from_point(cls, x: float, y: float) -> "Vector":
        magnitude = hypot(x, y)
        angle = degrees(atan2(y, x)) if magnitude > 0 else 0.0
        return cls(magnitude, angle)

    @classmethod
    def from_list(cls, point: Iterable[float]) -> "Vector":
        x, y = point
        return cls.from_point(x, y)

    def magnitude(self) -> float:
        return self._magnitude

    def angle(self) -> float:
        return self._angle

    @property
    def x(self) -> float:
        return self._magnitude * cos(radians(self._angle))

    @property
    def y(self) -> float:
        return self._magnitude * sin(radians(self._angle))

    def add(self, other: "Vector") -> "Vector":
        return Vector.from_point(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector") -> "Vector":
        return Vector.from_point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vector":
        # a negative factor points the vector the other way
        return Vector(self._magnitude * factor, self._angle)

    def rotate(self, angle: float) -> "Vector":
        return Vector(self._magnitude, self._angle + angle)

    def normalize(self) -> "Vector":
        if self._magnitude == 0.0:
            raise ValueError("Cannot normalize a zero vector")
        return Vector(1.0, self._angle)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._magnitude == other._magnitude and self._angle == other._angle

    def __repr__(self) -> str:
        return f"Vector(magnitude={self._magnitude:.4f}, angle={self._angle:.2f})"
