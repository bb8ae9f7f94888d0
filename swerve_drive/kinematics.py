from enum import Enum
from math import cos, radians
from typing import List, Optional, Sequence

import numpy as np

from .config import IdleHeadingPolicy
from .vector import Vector


class AutoScaleMode(Enum):
    SCALE_LARGEST_DOWN = "scale_largest_down"
    SCALE_LARGEST_UP_OR_DOWN = "scale_largest_up_or_down"


def autoscale(vectors: Sequence[Vector], mode: AutoScaleMode = AutoScaleMode.SCALE_LARGEST_DOWN,
              limit: float = 1.0) -> List[Vector]:
    """Scale every vector by the same factor so the largest magnitude fits ``limit``.

    SCALE_LARGEST_DOWN only ever shrinks; SCALE_LARGEST_UP_OR_DOWN stretches
    or shrinks so the largest magnitude equals ``limit``. Relative module
    speeds are preserved in both modes.
    """
    vectors = list(vectors)
    if not vectors:
        return vectors

    largest = float(np.max([v.magnitude() for v in vectors]))
    if largest == 0.0:
        return vectors
    if mode is AutoScaleMode.SCALE_LARGEST_DOWN and largest <= limit:
        return vectors

    factor = limit / largest
    return [v.scale(factor) for v in vectors]


def direction_scalar(target_angle: float, current_angle: float) -> float:
    """cos^3 of the heading error; negative when the wheel should flip instead."""
    return cos(radians(target_angle - current_angle)) ** 3


def solve_module(current_angle: float, translation: Vector, rotation_direction: Vector,
                 rotation_scalar: float,
                 idle_heading_policy: IdleHeadingPolicy = IdleHeadingPolicy.ALIGN_TO_ROTATION_DIRECTION) -> Vector:
    """Compute one module's command vector.

    Args:
        current_angle {float} -- measured wheel angle [deg]
        translation {Vector} -- robot-centric translation command
        rotation_direction {Vector} -- module's spin-in-place direction
        rotation_scalar {float} -- rotation command in [-1, 1]
        idle_heading_policy {IdleHeadingPolicy} -- where to aim an idle wheel

    Returns:
        Vector -- magnitude is the drive speed (>= 0), angle the steering angle [deg]
    """
    target = translation.add(rotation_direction.scale(rotation_scalar))

    # Pre-aim idle wheels so the next command needs as little steering as possible
    if target.magnitude() == 0.0:
        if idle_heading_policy is IdleHeadingPolicy.ZERO:
            target = Vector(0.0, 0.0)
        else:
            target = Vector(0.0, rotation_direction.angle())

    # More than 90 deg away: steer to the opposite heading and drive the other way.
    # Cubing the cosine keeps the wheel slow until it is nearly on heading.
    scalar = direction_scalar(target.angle(), current_angle)
    if scalar < 0:
        target = target.rotate(180)

    return target.scale(abs(scalar))


class SwerveKinematics:
    """Per-cycle swerve inverse kinematics for a fixed module layout."""

    def __init__(self, geometry, idle_heading_policy: IdleHeadingPolicy = IdleHeadingPolicy.ALIGN_TO_ROTATION_DIRECTION) -> None:
        self.geometry = geometry
        self.idle_heading_policy = idle_heading_policy
        self.module_vectors: List[Vector] = [Vector() for _ in range(len(geometry))]

    def reset(self) -> None:
        self.module_vectors = [Vector() for _ in range(len(self.geometry))]

    def compute(self, translation: Vector, rotation: float, measured_angles: Sequence[float],
                rotation_directions: Optional[Sequence[Vector]] = None):
        """
        Compute the module commands for one control cycle.

        Args:
            translation {Vector} -- robot-centric translation command
            rotation {float} -- rotation command in [-1, 1]
            measured_angles {Sequence[float]} -- measured wheel angles [deg], module order
            rotation_directions {Sequence[Vector]} -- overrides the geometry's rotation directions

        Returns:
            (np.ndarray, np.ndarray) -- wheel angles [deg] and wheel speeds [0, 1]
        """
        if rotation_directions is None:
            rotation_directions = self.geometry.rotation_directions
        if len(measured_angles) != len(self.module_vectors) or len(rotation_directions) != len(self.module_vectors):
            raise ValueError(f"Expected {len(self.module_vectors)} module values")

        module_vectors = []
        for i, last in enumerate(self.module_vectors):
            # The current vector uses the wheel angle read back from the encoder
            current = Vector(last.magnitude(), measured_angles[i])
            module_vectors.append(
                solve_module(current.angle(), translation, rotation_directions[i], rotation, self.idle_heading_policy)
            )

        self.module_vectors = autoscale(module_vectors, AutoScaleMode.SCALE_LARGEST_DOWN, 1.0)

        wheel_angles = np.array([v.angle() for v in self.module_vectors])
        wheel_speeds = np.array([v.magnitude() for v in self.module_vectors])
        return wheel_angles, wheel_speeds
