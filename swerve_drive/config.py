import json
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Tuple

MODULE_NAMES = ("front_right", "front_left", "back_left", "back_right")


class ConfigurationError(ValueError):
    """Raised at startup when the robot configuration is inconsistent."""


class IdleHeadingPolicy(str, Enum):
    ALIGN_TO_ROTATION_DIRECTION = "align_to_rotation_direction"
    ZERO = "zero"


def _names(template: str) -> List[str]:
    return [template.format(module=name) for name in MODULE_NAMES]


@dataclass(frozen=True)
class ModuleChannels:
    input_angle_names: List[str] = field(default_factory=lambda: _names("ipn_drivetrain_{module}_angle"))
    input_angle_position_names: List[str] = field(default_factory=lambda: _names("ipn_drivetrain_{module}_angle_position"))
    input_speed_names: List[str] = field(default_factory=lambda: _names("ipn_drivetrain_{module}_speed"))
    output_angle_names: List[str] = field(default_factory=lambda: _names("opn_drivetrain_{module}_angle"))
    output_speed_names: List[str] = field(default_factory=lambda: _names("opn_drivetrain_{module}_speed"))

    def tables(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class DriverChannels:
    swerve_x: str = "ipn_driver_left_x"
    swerve_y: str = "ipn_driver_left_y"
    swerve_rotate: str = "ipn_driver_right_x"
    field_centric_button: str = "ipb_driver_left_stick_button"
    mode_button: str = "ipb_driver_back"
    pivot_button: str = "ipb_driver_a"
    heading: str = "ipv_navx"


@dataclass(frozen=True)
class DriveConfig:
    # front-right, front-left, back-left, back-right
    module_positions: List[Tuple[float, float]] = field(
        default_factory=lambda: [(1.0, -1.0), (1.0, 1.0), (-1.0, 1.0), (-1.0, -1.0)]
    )
    field_centric_offset_degrees: float = 0.0
    idle_heading_policy: IdleHeadingPolicy = IdleHeadingPolicy.ALIGN_TO_ROTATION_DIRECTION
    field_centric_default: bool = True
    pivot_center: Tuple[float, float] = (60.0, 0.0)


@dataclass(frozen=True)
class ZeroingConfig:
    timeout: float = 0.5     # [s]
    threshold: float = 0.1   # angle position units from zero


@dataclass(frozen=True)
class RobotConfig:
    drive: DriveConfig = field(default_factory=DriveConfig)
    zeroing: ZeroingConfig = field(default_factory=ZeroingConfig)
    modules: ModuleChannels = field(default_factory=ModuleChannels)
    driver: DriverChannels = field(default_factory=DriverChannels)

    def __post_init__(self):
        count = len(self.drive.module_positions)
        if count < 1:
            raise ConfigurationError("At least one swerve module is required")
        for name, table in self.modules.tables().items():
            if len(table) != count:
                raise ConfigurationError(
                    f"{name} has {len(table)} entries but {count} module positions are configured"
                )
        for position in self.drive.module_positions:
            if len(position) != 2:
                raise ConfigurationError(f"Module position {position!r} is not an (x, y) pair")
            if position[0] == 0 and position[1] == 0:
                raise ConfigurationError("A module cannot sit at the robot center")
        if not isinstance(self.drive.idle_heading_policy, IdleHeadingPolicy):
            raise ConfigurationError(f"Unknown idle heading policy {self.drive.idle_heading_policy!r}")
        if self.zeroing.timeout <= 0 or self.zeroing.threshold <= 0:
            raise ConfigurationError("Zeroing timeout and threshold must be positive")

    @property
    def module_count(self) -> int:
        return len(self.drive.module_positions)


def _section(cls, data):
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ConfigurationError(f"Unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**data)


def config_from_dict(data: dict) -> RobotConfig:
    drive = dict(data.get("drive", {}))
    if "module_positions" in drive:
        drive["module_positions"] = [tuple(p) for p in drive["module_positions"]]
    if "pivot_center" in drive:
        drive["pivot_center"] = tuple(drive["pivot_center"])
    if "idle_heading_policy" in drive:
        try:
            drive["idle_heading_policy"] = IdleHeadingPolicy(drive["idle_heading_policy"])
        except ValueError:
            raise ConfigurationError(f"Unknown idle heading policy {drive['idle_heading_policy']!r}") from None

    return RobotConfig(
        drive=_section(DriveConfig, drive),
        zeroing=_section(ZeroingConfig, data.get("zeroing", {})),
        modules=_section(ModuleChannels, data.get("modules", {})),
        driver=_section(DriverChannels, data.get("driver", {})),
    )


def load_config(path) -> RobotConfig:
    with open(path, "r") as f:
        return config_from_dict(json.load(f))
