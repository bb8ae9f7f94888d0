import logging
from enum import Enum

from .config import RobotConfig
from .signals import InputValues, OutputKind, OutputValues

logger = logging.getLogger(__name__)

ZEROED_FLAG = "ipb_drivetrain_has_been_zeroed"


class Timer:
    """Countdown driven by the caller's control-loop time step."""

    def __init__(self) -> None:
        self.duration = None
        self.elapsed = 0.0

    def start(self, duration: float) -> None:
        self.duration = duration
        self.elapsed = 0.0

    def reset(self) -> None:
        self.duration = None
        self.elapsed = 0.0

    def advance(self, dt: float) -> None:
        if self.duration is not None:
            self.elapsed += dt

    def is_started(self) -> bool:
        return self.duration is not None

    def is_done(self) -> bool:
        # tolerance for accumulated float time steps
        return self.duration is not None and self.elapsed >= self.duration - 1e-9


class ZeroingState(Enum):
    ZEROING = "zeroing"
    ZEROED = "zeroed"
    TIMED_OUT = "timed_out"


class ZeroingBehavior:
    """Holds the drivetrain until every steering encoder reports zero, or gives up after a timeout."""

    def __init__(self, inputs: InputValues, outputs: OutputValues, config: RobotConfig) -> None:
        """
        Args:
            inputs {InputValues} -- sensor side of the signal bus
            outputs {OutputValues} -- actuator side of the signal bus
            config {RobotConfig} -- channel names, timeout and threshold
        """
        self._inputs = inputs
        self._outputs = outputs
        self._channels = config.modules
        self.timeout = config.zeroing.timeout
        self.threshold = config.zeroing.threshold

        self._timer = Timer()
        self._entry_tick = False
        self.state = ZeroingState.ZEROING
        self.zeroed = False

    def initialize(self, state_name: str = "st_drivetrain_zero") -> None:
        logger.debug("Entering state %s", state_name)
        self._timer.reset()
        self._timer.start(self.timeout)
        self._entry_tick = True
        self.zeroed = self._inputs.get_boolean(ZEROED_FLAG)
        self.state = ZeroingState.ZEROED if self.zeroed else ZeroingState.ZEROING
        self._stop_modules()

    def advance(self, dt: float) -> None:
        # no time has passed in this state on the tick it is entered
        if self._entry_tick:
            self._entry_tick = False
        else:
            self._timer.advance(dt)
        if self.zeroed:
            return

        for name in self._channels.output_angle_names:
            self._outputs.set_output_flag(name, "zero")

        if all(abs(self._inputs.get_numeric(name)) < self.threshold
               for name in self._channels.input_angle_position_names):
            logger.debug("Drivetrain Zero -> Zeroed")
            self._mark_zeroed(ZeroingState.ZEROED)
            return

        if self._timer.is_done():
            # fail open: a single bad encoder must not strand the robot
            logger.error("Drivetrain Zero -> Timed Out")
            self._timer.reset()
            self._mark_zeroed(ZeroingState.TIMED_OUT)

    def dispose(self) -> None:
        logger.debug("Leaving state zeroing (%s)", self.state.value)
        self._stop_modules()

    def is_done(self) -> bool:
        return self.zeroed or self._timer.is_done()

    def _mark_zeroed(self, state: ZeroingState) -> None:
        self.state = state
        self.zeroed = True
        self._inputs.set_boolean(ZEROED_FLAG, True)

    def _stop_modules(self) -> None:
        for name in self._channels.output_speed_names + self._channels.output_angle_names:
            self._outputs.set_numeric(name, OutputKind.PERCENT, 0.0)
