import pytest

from swerve_drive.vector import Vector, wrap_degrees


def test_from_point_gives_polar_form():
    v = Vector.from_point(0.0, 2.0)
    assert v.magnitude() == pytest.approx(2.0)
    assert v.angle() == pytest.approx(90.0)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(2.0)


def test_add_and_subtract():
    a = Vector.from_point(1.0, 0.0)
    b = Vector.from_point(0.0, 1.0)
    s = a.add(b)
    assert s.magnitude() == pytest.approx(2 ** 0.5)
    assert s.angle() == pytest.approx(45.0)
    d = s.subtract(b)
    assert d.x == pytest.approx(1.0)
    assert d.y == pytest.approx(0.0, abs=1e-12)


def test_rotate_keeps_magnitude():
    v = Vector(3.0, 10.0).rotate(90)
    assert v.magnitude() == pytest.approx(3.0)
    assert v.angle() == pytest.approx(100.0)


def test_scale_by_negative_reverses_direction():
    v = Vector(2.0, 30.0).scale(-0.5)
    assert v.magnitude() == pytest.approx(1.0)
    assert v.angle() == pytest.approx(-150.0)


def test_zero_vector_keeps_its_angle():
    v = Vector(0.0, 135.0)
    assert v.magnitude() == 0.0
    assert v.angle() == pytest.approx(135.0)
    assert v.scale(0.3).angle() == pytest.approx(135.0)


def test_normalize():
    v = Vector.from_point(3.0, 4.0).normalize()
    assert v.magnitude() == pytest.approx(1.0)
    assert v.angle() == pytest.approx(Vector.from_point(3.0, 4.0).angle())


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector().normalize()


@pytest.mark.parametrize("angle, expected", [(0, 0), (180, -180), (-180, -180), (270, -90), (-450, -90), (725, 5)])
def test_wrap_degrees(angle, expected):
    assert wrap_degrees(angle) == pytest.approx(expected)
