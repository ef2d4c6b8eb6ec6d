import dataclasses
import math

import pytest

from asciisphere.vector import Vec2, Vec3, add, dot, length, normalize, scale, squared_length, sub


def test_arithmetic_returns_new_values() -> None:
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-1.0, 0.5, 2.0)

    assert add(a, b) == Vec3(0.0, 2.5, 5.0)
    assert sub(a, b) == Vec3(2.0, 1.5, 1.0)
    assert scale(a, 2.0) == Vec3(2.0, 4.0, 6.0)
    assert scale(a, b) == Vec3(-1.0, 1.0, 6.0)
    assert -a == Vec3(-1.0, -2.0, -3.0)
    assert a == Vec3(1.0, 2.0, 3.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        a.x = 5.0  # type: ignore[misc]


def test_dot_and_lengths() -> None:
    v = Vec3(2.0, 3.0, 6.0)
    assert dot(v, Vec3(1.0, 0.0, 0.0)) == 2.0
    assert squared_length(v) == 49.0
    assert length(v) == 7.0
    assert length(Vec2(3.0, 4.0)) == 5.0


def test_normalize_gives_unit_length() -> None:
    for v in (Vec3(0.5, 1.0, -1.0), Vec3(0.0, 0.0, 2.0), Vec2(-3.0, 4.0)):
        assert length(normalize(v)) == pytest.approx(1.0)

    n = normalize(Vec3(0.5, 1.0, -1.0))
    assert n.x == pytest.approx(1.0 / 3.0)
    assert n.y == pytest.approx(2.0 / 3.0)
    assert n.z == pytest.approx(-2.0 / 3.0)


def test_normalize_zero_vector_is_an_error() -> None:
    with pytest.raises(ZeroDivisionError):
        normalize(Vec3(0.0, 0.0, 0.0))


def test_vec2_component_wise_scale() -> None:
    v = Vec2(1.0, -2.0) * Vec2(0.98, -0.98)
    assert v.x == pytest.approx(0.98)
    assert v.y == pytest.approx(1.96)
    assert math.isclose((2.0 * Vec2(1.0, 1.0)).x, 2.0)
