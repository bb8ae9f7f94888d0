import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import IdleHeadingPolicy, RobotConfig
from .frame import FieldCentricToggle, translation_from_axes
from .geometry import ModuleGeometry
from .kinematics import SwerveKinematics
from .signals import InputValues, OutputKind, OutputValues
from .vector import Vector

logger = logging.getLogger(__name__)

FIELD_CENTRIC_FLAG = "ipb_swerve_field_centric"


@dataclass
class DriveCommand:
    translation: Vector
    rotation: float
    rotation_directions: Optional[List[Vector]] = None


class SwerveDriveBehavior:
    """Drives the robot in swerve mode from the joystick values on the signal bus."""

    def __init__(
        self,
        inputs: InputValues,
        outputs: OutputValues,
        config: RobotConfig,
        toggle: Optional[FieldCentricToggle] = None,
        idle_heading_policy: Optional[IdleHeadingPolicy] = None,
        pivot_enabled: bool = False,
    ) -> None:
        """
        Build the drive behavior and its kinematics core.

        Args:
            inputs {InputValues} -- sensor side of the signal bus
            outputs {OutputValues} -- actuator side of the signal bus
            config {RobotConfig} -- module layout and channel names
            toggle {FieldCentricToggle} -- shared field-centric flag, kept across mode changes
            idle_heading_policy {IdleHeadingPolicy} -- overrides the configured idle policy
            pivot_enabled {bool} -- spin about the configured pivot point while the pivot button is held

        """
        self._inputs = inputs
        self._outputs = outputs
        self._modules = config.modules
        self._driver = config.driver
        self.field_centric_offset = config.drive.field_centric_offset_degrees
        self.pivot_enabled = pivot_enabled
        self.pivot_center = Vector.from_list(config.drive.pivot_center)

        self.geometry = ModuleGeometry(config.drive.module_positions)
        self.kinematics = SwerveKinematics(
            self.geometry,
            idle_heading_policy if idle_heading_policy is not None else config.drive.idle_heading_policy,
        )
        self._pivot_directions = self.geometry.rotation_directions_about(self.pivot_center)

        self.toggle = toggle if toggle is not None else FieldCentricToggle(config.drive.field_centric_default)
        self._inputs.set_boolean(FIELD_CENTRIC_FLAG, self.toggle.enabled)
        self._state_name = "Unknown"

    def initialize(self, state_name: str = "st_drivetrain_swerve") -> None:
        logger.debug("Entering state %s", state_name)
        self.kinematics.reset()
        self._state_name = state_name

    def read_command(self) -> DriveCommand:
        """Resolve this cycle's translation and rotation from the driver inputs."""
        if self.pivot_enabled and self._inputs.get_boolean(self._driver.pivot_button):
            return DriveCommand(Vector(), 1.0, self._pivot_directions)

        self.toggle.update(self._inputs.get_boolean_rising_edge(self._driver.field_centric_button))
        self._inputs.set_boolean(FIELD_CENTRIC_FLAG, self.toggle.enabled)

        heading = self._inputs.get_vector(self._driver.heading).get("angle", 0.0)
        translation = translation_from_axes(
            self._inputs.get_numeric(self._driver.swerve_x),
            self._inputs.get_numeric(self._driver.swerve_y),
            heading,
            self.toggle.enabled,
            self.field_centric_offset,
        )
        return DriveCommand(translation, self._inputs.get_numeric(self._driver.swerve_rotate))

    def apply(self, command: DriveCommand):
        measured_angles = [self._inputs.get_numeric(name) for name in self._modules.input_angle_names]
        wheel_angles, wheel_speeds = self.kinematics.compute(
            command.translation, command.rotation, measured_angles, command.rotation_directions
        )

        for i in range(len(self.geometry)):
            self._outputs.set_numeric(self._modules.output_angle_names[i], OutputKind.POSITION, wheel_angles[i])
            self._outputs.set_numeric(self._modules.output_speed_names[i], OutputKind.PERCENT, wheel_speeds[i])
            self._inputs.set_numeric(self._modules.input_speed_names[i], wheel_speeds[i])

        return wheel_angles, wheel_speeds

    def advance(self, dt: float = 0.0):
        """
        Run one control cycle: read the driver, solve the modules, write the outputs.

        Argument:
        dt {float} -- control-loop time step [s], unused by the kinematics

        """
        return self.apply(self.read_command())

    def dispose(self) -> None:
        logger.debug("Leaving state %s", self._state_name)

        # Turn drive motors off, leave the wheels where they are
        for i in range(len(self.geometry)):
            self._outputs.set_numeric(self._modules.output_angle_names[i], OutputKind.PERCENT, 0.0)
            self._outputs.set_numeric(self._modules.output_speed_names[i], OutputKind.PERCENT, 0.0)
            self._inputs.set_numeric(self._modules.input_speed_names[i], 0.0)
        self.kinematics.reset()

    def is_done(self) -> bool:
        return True
