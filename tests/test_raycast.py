import math

import pytest

from asciisphere.constants import ASPECT, NO_HIT, PIXEL_ASPECT
from asciisphere.models import Sphere
from asciisphere.raycast import (
    diffuse,
    discriminant,
    screen_coordinates,
    sphere_intersection,
    sphere_intersection_general,
)
from asciisphere.vector import Vec3, normalize

ORIGIN = Vec3(0.0, 0.0, 0.0)


def test_hits_near_pole_from_outside() -> None:
    t = sphere_intersection(Vec3(-2.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), ORIGIN, 1.0)
    assert t == pytest.approx(1.0)


def test_pointing_away_is_not_a_visible_hit() -> None:
    t = sphere_intersection(Vec3(-2.0, 0.0, 0.0), Vec3(-1.0, 0.0, 0.0), ORIGIN, 1.0)
    assert t <= 0.0
    assert diffuse(Vec3(-2.0, 0.0, 0.0), Vec3(-1.0, 0.0, 0.0), Sphere(), Vec3(1.0, 0.0, 0.0)) == 0.0


def test_miss_returns_sentinel() -> None:
    t = sphere_intersection(Vec3(-2.0, 3.0, 0.0), Vec3(1.0, 0.0, 0.0), ORIGIN, 1.0)
    assert t == NO_HIT


@pytest.mark.parametrize(
    "direction",
    [Vec3(1.0, 0.0, 0.0), Vec3(0.0, -1.0, 0.0), Vec3(1.0, 2.0, -2.0), Vec3(-0.3, 0.4, 0.9)],
)
@pytest.mark.parametrize("dist", [1.5, 2.0, 7.25])
@pytest.mark.parametrize("radius", [0.5, 1.0])
def test_ray_towards_center_hits_at_distance_minus_radius(direction: Vec3, dist: float, radius: float) -> None:
    n = normalize(direction)
    center = Vec3(0.25, -1.0, 3.0)
    o = center - n * dist
    assert sphere_intersection(o, n, center, radius) == pytest.approx(dist - radius)


@pytest.mark.parametrize("direction", [Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), Vec3(1.0, 1.0, 1.0)])
def test_ray_leaving_the_sphere_never_hits(direction: Vec3) -> None:
    n = normalize(direction)
    o = n * 2.5
    assert sphere_intersection(o, n, ORIGIN, 1.0) <= 0.0


def test_tangent_ray_has_single_root() -> None:
    o = Vec3(-2.0, 1.0, 0.0)
    n = Vec3(1.0, 0.0, 0.0)
    assert discriminant(o, n, ORIGIN, 1.0) == pytest.approx(0.0)
    assert sphere_intersection(o, n, ORIGIN, 1.0) == pytest.approx(2.0)


def test_origin_inside_sphere_gives_negative_near_root() -> None:
    assert sphere_intersection(ORIGIN, Vec3(0.0, 0.0, 1.0), ORIGIN, 1.0) == pytest.approx(-1.0)


def test_general_solver_handles_unnormalized_directions() -> None:
    o = Vec3(-2.0, 0.0, 0.0)
    assert sphere_intersection_general(o, Vec3(2.0, 0.0, 0.0), ORIGIN, 1.0) == pytest.approx(0.5)
    assert sphere_intersection_general(o, Vec3(1.0, 0.0, 0.0), ORIGIN, 1.0) == pytest.approx(1.0)


def test_diffuse_is_lambert_term_of_hit_normal() -> None:
    o = Vec3(-2.0, 0.0, 0.0)
    n = Vec3(1.0, 0.0, 0.0)
    assert diffuse(o, n, Sphere(), Vec3(-1.0, 0.0, 0.0)) == pytest.approx(1.0)
    assert diffuse(o, n, Sphere(), Vec3(0.0, 1.0, 0.0)) == pytest.approx(0.0)


def test_screen_coordinates_cover_the_grid() -> None:
    top_left = screen_coordinates(0, 0, 64, 32, ASPECT, PIXEL_ASPECT)
    assert top_left.x == pytest.approx(-ASPECT * PIXEL_ASPECT)
    assert top_left.y == pytest.approx(1.0)

    middle = screen_coordinates(32, 16, 64, 32, ASPECT, PIXEL_ASPECT)
    assert middle.x == pytest.approx(0.0)
    assert middle.y == pytest.approx(0.0)

    # row 0 is the top unless flipped back
    assert screen_coordinates(0, 0, 64, 32, 1.0, 1.0, flip_y=False).y == pytest.approx(-1.0)
    assert math.isclose(ASPECT, 2.0)
