import logging
from enum import Enum
from typing import Dict, Optional

from .behavior import SwerveDriveBehavior
from .config import IdleHeadingPolicy, RobotConfig
from .frame import FieldCentricToggle
from .signals import InputValues, OutputValues
from .zeroing import ZEROED_FLAG, ZeroingBehavior

logger = logging.getLogger(__name__)

ZERO_STATE = "st_drivetrain_zero"


class DriveMode(Enum):
    """Drive variants cycled by the mode button, in cycling order."""
    VECTOR = "st_drivetrain_swerve_vector"
    ZERO_IDLE = "st_drivetrain_swerve_zero_idle"
    PIVOT = "st_drivetrain_swerve_pivot"


class TeleopModeLogic:
    """Decides which drivetrain state may run: zeroing first, then the selected drive mode."""

    def __init__(self, inputs: InputValues, config: RobotConfig) -> None:
        self._inputs = inputs
        self._mode_button = config.driver.mode_button
        self.mode = DriveMode.VECTOR

    def initialize(self) -> None:
        logger.info("***** TELEOP *****")
        self.mode = DriveMode.VECTOR

    def update(self) -> None:
        if self._inputs.get_boolean_falling_edge(self._mode_button):
            modes = list(DriveMode)
            self.mode = modes[(modes.index(self.mode) + 1) % len(modes)]
            logger.info("Drive mode -> %s", self.mode.name)

    def is_ready(self, name: str) -> bool:
        if name == ZERO_STATE:
            return not self._inputs.get_boolean(ZEROED_FLAG)
        return name == self.mode.value


class Teleop:
    """Runs the drivetrain states for one control loop, one call per tick."""

    def __init__(self, inputs: InputValues, outputs: OutputValues, config: RobotConfig) -> None:
        self._inputs = inputs
        self._outputs = outputs
        self.logic = TeleopModeLogic(inputs, config)
        # one toggle so field-centric survives mode changes
        toggle = FieldCentricToggle(config.drive.field_centric_default)

        self.states: Dict[str, object] = {
            ZERO_STATE: ZeroingBehavior(inputs, outputs, config),
            DriveMode.VECTOR.value: SwerveDriveBehavior(inputs, outputs, config, toggle),
            DriveMode.ZERO_IDLE.value: SwerveDriveBehavior(
                inputs, outputs, config, toggle, idle_heading_policy=IdleHeadingPolicy.ZERO
            ),
            DriveMode.PIVOT.value: SwerveDriveBehavior(inputs, outputs, config, toggle, pivot_enabled=True),
        }
        self.toggle = toggle
        self.active_name: Optional[str] = None

    @property
    def active(self):
        return self.states.get(self.active_name)

    def initialize(self) -> None:
        self.logic.initialize()
        self.active_name = None

    def advance(self, dt: float):
        # output flags only last one tick
        self._outputs.clear_output_flags()
        self.logic.update()

        if self.active_name == ZERO_STATE and not self.active.is_done():
            name = ZERO_STATE
        else:
            name = next(n for n in self.states if self.logic.is_ready(n))

        if name != self.active_name:
            if self.active is not None:
                self.active.dispose()
            self.active_name = name
            self.active.initialize(name)

        result = self.active.advance(dt)
        self._inputs.end_cycle()
        return result

    def dispose(self) -> None:
        if self.active is not None:
            self.active.dispose()
        self.active_name = None
