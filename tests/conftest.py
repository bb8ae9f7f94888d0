import pytest

from swerve_drive.config import DriveConfig, RobotConfig
from swerve_drive.signals import InputValues, OutputValues

# front-right, front-left, back-left, back-right on a square chassis
SQUARE = [(1.0, -1.0), (1.0, 1.0), (-1.0, 1.0), (-1.0, -1.0)]


@pytest.fixture
def config():
    return RobotConfig(drive=DriveConfig(module_positions=SQUARE))


@pytest.fixture
def inputs():
    return InputValues()


@pytest.fixture
def outputs():
    return OutputValues()


@pytest.fixture
def square():
    return list(SQUARE)
