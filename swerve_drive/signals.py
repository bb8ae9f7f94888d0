from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Set


class OutputKind(str, Enum):
    PERCENT = "percent"
    POSITION = "position"


class InputValues:
    """Named inputs: booleans with edge detection, numerics and component vectors.

    Edges are measured against the values latched by the last ``end_cycle()``.
    """

    def __init__(self) -> None:
        self._booleans: Dict[str, bool] = {}
        self._previous_booleans: Dict[str, bool] = {}
        self._numerics: Dict[str, float] = {}
        self._vectors: Dict[str, Dict[str, float]] = {}

    def set_boolean(self, name: str, value: bool) -> None:
        self._booleans[name] = bool(value)

    def get_boolean(self, name: str) -> bool:
        return self._booleans.get(name, False)

    def get_boolean_rising_edge(self, name: str) -> bool:
        return self.get_boolean(name) and not self._previous_booleans.get(name, False)

    def get_boolean_falling_edge(self, name: str) -> bool:
        return not self.get_boolean(name) and self._previous_booleans.get(name, False)

    def set_numeric(self, name: str, value: float) -> None:
        self._numerics[name] = float(value)

    def get_numeric(self, name: str) -> float:
        return self._numerics.get(name, 0.0)

    def set_vector(self, name: str, components: Dict[str, float]) -> None:
        self._vectors[name] = {k: float(v) for k, v in components.items()}

    def get_vector(self, name: str) -> Dict[str, float]:
        return dict(self._vectors.get(name, {}))

    def end_cycle(self) -> None:
        self._previous_booleans = dict(self._booleans)


@dataclass
class OutputCommand:
    kind: OutputKind
    value: float


class OutputValues:
    """Named actuator commands tagged with how the value is to be applied."""

    def __init__(self) -> None:
        self._commands: Dict[str, OutputCommand] = {}
        self._flags: Dict[str, Set[str]] = {}

    def set_numeric(self, name: str, kind: OutputKind, value: float) -> None:
        self._commands[name] = OutputCommand(OutputKind(kind), float(value))

    def get_numeric(self, name: str) -> float:
        command = self._commands.get(name)
        return command.value if command is not None else 0.0

    def get_kind(self, name: str) -> Optional[OutputKind]:
        command = self._commands.get(name)
        return command.kind if command is not None else None

    def set_output_flag(self, name: str, flag: str) -> None:
        self._flags.setdefault(name, set()).add(flag)

    def get_output_flag(self, name: str, flag: str) -> bool:
        return flag in self._flags.get(name, set())

    def clear_output_flags(self) -> None:
        self._flags.clear()
