from typing import List, Sequence, Tuple

from .kinematics import AutoScaleMode, autoscale
from .vector import Vector


class ModuleGeometry:
    """Fixed layout of the drive modules relative to the robot center.

    Module order is front-right, front-left, back-left, back-right and is
    shared by every per-module table in the package. Positions are checked
    by ``RobotConfig`` before they get here.
    """

    def __init__(self, positions: Sequence[Tuple[float, float]]) -> None:
        self.positions: List[Vector] = [Vector.from_list(p) for p in positions]

        # Direction each module has to drive to spin the robot in place
        self.rotation_directions: List[Vector] = [p.normalize().rotate(90) for p in self.positions]

    def __len__(self) -> int:
        return len(self.positions)

    def rotation_directions_about(self, center: Vector) -> List[Vector]:
        """Rotation directions for spinning about ``center`` instead of the robot center.

        The module farthest from ``center`` gets magnitude 1, the rest keep
        their speed ratio so the whole robot turns about the same point.
        """
        directions = [p.subtract(center).rotate(90) for p in self.positions]
        return autoscale(directions, AutoScaleMode.SCALE_LARGEST_UP_OR_DOWN, 1.0)
