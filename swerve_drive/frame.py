from .vector import Vector


def translation_from_axes(x_axis: float, y_axis: float, heading: float = 0.0,
                          field_centric: bool = False, field_centric_offset: float = 0.0) -> Vector:
    """Turn joystick axes into a robot-centric translation vector.

    The controller uses Y for forward/backward and X for left/right while the
    robot drives forward along X, so the axes are swapped. In field-centric
    mode the measured heading is taken off so forward always means "towards
    the far end of the field".
    """
    robot_orientation = 0.0
    if field_centric:
        robot_orientation = -heading + field_centric_offset

    return Vector.from_point(y_axis, x_axis).rotate(robot_orientation)


class FieldCentricToggle:
    """Owns the field-centric flag; flips on each rising edge of its button."""

    def __init__(self, enabled: bool = True) -> None:
        self._default = enabled
        self.enabled = enabled

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def update(self, rising_edge: bool) -> bool:
        if rising_edge:
            self.toggle()
        return self.enabled

    def reset(self) -> None:
        self.enabled = self._default
