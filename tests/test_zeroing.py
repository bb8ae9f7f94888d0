import logging

import pytest

from swerve_drive.signals import OutputKind
from swerve_drive.zeroing import ZEROED_FLAG, Timer, ZeroingBehavior, ZeroingState


def set_angle_positions(inputs, config, positions):
    for name, value in zip(config.modules.input_angle_position_names, positions):
        inputs.set_numeric(name, value)


@pytest.fixture
def gate(config, inputs, outputs):
    behavior = ZeroingBehavior(inputs, outputs, config)
    behavior.initialize()
    return behavior


def test_timer():
    timer = Timer()
    assert not timer.is_done()
    timer.start(0.5)
    timer.advance(0.3)
    assert not timer.is_done()
    timer.advance(0.2)
    assert timer.is_done()
    timer.reset()
    assert not timer.is_started()
    assert not timer.is_done()


def test_initialize_stops_modules(config, outputs, gate):
    for name in config.modules.output_speed_names + config.modules.output_angle_names:
        assert outputs.get_kind(name) is OutputKind.PERCENT
        assert outputs.get_numeric(name) == 0.0


def test_zeroes_as_soon_as_every_module_is_near_zero(config, inputs, outputs, gate):
    set_angle_positions(inputs, config, [0.05, -0.02, 0.0, 0.09])
    gate.advance(0.02)
    assert gate.zeroed
    assert gate.state is ZeroingState.ZEROED
    assert gate.is_done()
    assert inputs.get_boolean(ZEROED_FLAG)


def test_asserts_zero_flag_while_waiting(config, inputs, outputs, gate):
    set_angle_positions(inputs, config, [1.0] * 4)
    gate.advance(0.02)
    assert not gate.zeroed
    assert all(outputs.get_output_flag(name, "zero") for name in config.modules.output_angle_names)


def test_back_right_module_is_checked(config, inputs, gate):
    set_angle_positions(inputs, config, [0.0, 0.0, 0.0, 1.0])
    gate.advance(0.02)
    assert not gate.zeroed


def test_times_out_open_and_logs(config, inputs, gate, caplog):
    set_angle_positions(inputs, config, [1.0] * 4)
    dt = 0.1
    with caplog.at_level(logging.DEBUG, logger="swerve_drive.zeroing"):
        # tick 0 is the entry tick, no time has passed in the state yet
        for tick in range(5):
            gate.advance(dt)
            assert not gate.zeroed, f"zeroed after only {tick * dt:.1f} s"
        gate.advance(dt)

    assert gate.zeroed
    assert gate.state is ZeroingState.TIMED_OUT
    assert inputs.get_boolean(ZEROED_FLAG)
    assert any(r.levelno == logging.ERROR and "Timed Out" in r.getMessage() for r in caplog.records)

def test_no_more_flags_once_zeroed(config, inputs, outputs, gate):
    set_angle_positions(inputs, config, [0.0] * 4)
    gate.advance(0.02)
    outputs.clear_output_flags()
    gate.advance(0.02)
    assert not any(outputs.get_output_flag(name, "zero") for name in config.modules.output_angle_names)


def test_dispose_stops_modules_after_timeout(config, inputs, outputs, gate):
    set_angle_positions(inputs, config, [1.0] * 4)
    for _ in range(30):
        gate.advance(0.02)
    for name in config.modules.output_speed_names:
        outputs.set_numeric(name, OutputKind.PERCENT, 0.7)

    gate.dispose()

    for name in config.modules.output_speed_names + config.modules.output_angle_names:
        assert outputs.get_numeric(name) == 0.0
