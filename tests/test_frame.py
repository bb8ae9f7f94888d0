import pytest

from swerve_drive.frame import FieldCentricToggle, translation_from_axes


def test_controller_axes_are_swapped():
    # stick forward drives along the robot's x axis
    forward = translation_from_axes(0.0, 1.0)
    assert forward.angle() == pytest.approx(0.0)
    assert forward.magnitude() == pytest.approx(1.0)

    sideways = translation_from_axes(1.0, 0.0)
    assert sideways.angle() == pytest.approx(90.0)


def test_field_centric_takes_off_heading():
    translation = translation_from_axes(0.0, 1.0, heading=30.0, field_centric=True)
    assert translation.angle() == pytest.approx(-30.0)


def test_robot_centric_ignores_heading():
    translation = translation_from_axes(0.0, 1.0, heading=30.0, field_centric=False)
    assert translation.angle() == pytest.approx(0.0)


@pytest.mark.parametrize("offset", [0.0, 90.0, -90.0])
def test_field_centric_offset(offset):
    translation = translation_from_axes(0.0, 1.0, heading=10.0, field_centric=True, field_centric_offset=offset)
    assert translation.angle() == pytest.approx(offset - 10.0)


def test_toggle_flips_on_rising_edge_only():
    toggle = FieldCentricToggle(True)
    assert toggle.update(False) is True
    assert toggle.update(True) is False
    assert toggle.update(False) is False
    assert toggle.update(True) is True


def test_toggle_reset_restores_default():
    toggle = FieldCentricToggle(False)
    toggle.toggle()
    assert toggle.enabled
    toggle.reset()
    assert not toggle.enabled
