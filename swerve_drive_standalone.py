import argparse
import logging
import sys

import numpy as np

from swerve_drive.config import ConfigurationError, RobotConfig, load_config
from swerve_drive.mode_logic import Teleop
from swerve_drive.signals import InputValues, OutputValues
from swerve_drive.vector import wrap_degrees

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("swerve_drive_standalone")


class ModuleSim:
    """Crude stand-in for the steering motors: slews toward the commanded angle."""

    def __init__(self, inputs: InputValues, outputs: OutputValues, config: RobotConfig, slew_rate=720.0):
        self.inputs = inputs
        self.outputs = outputs
        self.channels = config.modules
        self.slew_rate = slew_rate  # [deg/s]
        # encoders start somewhere away from zero
        self.angle_positions = np.linspace(0.5, 2.0, config.module_count)

    def step(self, dt):
        for i, name in enumerate(self.channels.output_angle_names):
            if self.outputs.get_output_flag(name, "zero"):
                self.angle_positions[i] *= 0.5
            self.inputs.set_numeric(self.channels.input_angle_position_names[i], self.angle_positions[i])

            measured = self.inputs.get_numeric(self.channels.input_angle_names[i])
            error = wrap_degrees(self.outputs.get_numeric(name) - measured)
            max_step = self.slew_rate * dt
            self.inputs.set_numeric(
                self.channels.input_angle_names[i],
                wrap_degrees(measured + float(np.clip(error, -max_step, max_step))),
            )


def run_simulation(config: RobotConfig, args):
    inputs = InputValues()
    outputs = OutputValues()
    sim = ModuleSim(inputs, outputs, config)
    teleop = Teleop(inputs, outputs, config)
    teleop.initialize()

    driver = config.driver
    inputs.set_numeric(driver.swerve_x, args.x)
    inputs.set_numeric(driver.swerve_y, args.y)
    inputs.set_numeric(driver.swerve_rotate, args.rotate)
    inputs.set_vector(driver.heading, {"angle": args.heading})
    if args.robot_centric:
        teleop.toggle.enabled = False

    result = None
    for _ in range(args.cycles):
        sim.step(args.dt)
        result = teleop.advance(args.dt)
    teleop.dispose()
    return result


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="Robot configuration JSON file.")
    parser.add_argument("--cycles", type=int, default=50, help="Number of control cycles to run.")
    parser.add_argument("--dt", type=float, default=0.02, help="Control loop period [s].")
    parser.add_argument("--x", type=float, default=0.0, help="Joystick x axis [-1, 1].")
    parser.add_argument("--y", type=float, default=1.0, help="Joystick y axis [-1, 1].")
    parser.add_argument("--rotate", type=float, default=0.0, help="Rotation axis [-1, 1].")
    parser.add_argument("--heading", type=float, default=0.0, help="Measured robot heading [deg].")
    parser.add_argument("--robot-centric", action="store_true", help="Start with field-centric off.")
    args, _ = parser.parse_known_args()

    try:
        config = load_config(args.config) if args.config else RobotConfig()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    result = run_simulation(config, args)
    if result is None:
        logger.warning("Drivetrain still zeroing, no drive command issued")
        sys.exit(0)

    angles, speeds = result
    print("Wheel Angles (deg):", np.round(angles, 2))
    print("Wheel Speeds:", np.round(speeds, 3))
