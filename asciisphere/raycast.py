# -*- coding: utf-8 -*-
"""Ray/sphere intersection and diffuse lighting helpers."""
from __future__ import annotations

import math

from .constants import NO_HIT
from .models import Sphere
from .vector import Vec2, Vec3, dot, normalize


def sphere_intersection(o: Vec3, n: Vec3, c: Vec3, r: float) -> float:
    """Nearest root of ``|o + n*t - c| = r`` for a unit direction ``n``.

    With ``n`` normalized the quadratic's leading coefficient is 1, so
    ``t = -p - sqrt(p*p - q)`` with ``p = (o-c).n`` and ``q = |o-c|^2 - r^2``.
    Returns ``NO_HIT`` when the discriminant is negative. The root is returned
    as is; a non-positive value means the sphere is behind the origin.
    """
    oc = o - c
    p = dot(oc, n)
    q = dot(oc, oc) - r * r
    d = p * p - q
    if d < 0.0:
        return NO_HIT
    return -p - math.sqrt(d)


def sphere_intersection_general(o: Vec3, n: Vec3, c: Vec3, r: float) -> float:
    """Same as :func:`sphere_intersection` but ``n`` need not be unit length."""
    a = dot(n, n)
    p = dot(o, n) - dot(n, c)
    q = dot(o, o) + dot(c, c) - 2.0 * dot(o, c) - r * r
    d = p * p - a * q
    if d < 0.0:
        return NO_HIT
    return -p / a - math.sqrt(d) / a


def discriminant(o: Vec3, n: Vec3, c: Vec3, r: float) -> float:
    oc = o - c
    p = dot(oc, n)
    return p * p - (dot(oc, oc) - r * r)


def intersect(o: Vec3, n: Vec3, sphere: Sphere) -> float:
    return sphere_intersection(o, n, sphere.center, sphere.radius)


def hit_point(o: Vec3, n: Vec3, t: float) -> Vec3:
    return o + n * t


def diffuse(o: Vec3, n: Vec3, sphere: Sphere, light: Vec3) -> float:
    """Lambert term at the visible hit, or 0.0 when the ray misses."""
    t = intersect(o, n, sphere)
    if t <= 0.0:
        return 0.0
    normal = normalize(hit_point(o, n, t) - sphere.center)
    return dot(normal, light)


def screen_coordinates(
    i: int,
    j: int,
    width: int,
    height: int,
    aspect: float,
    pixel_aspect: float,
    flip_y: bool = True,
) -> Vec2:
    """Map cell ``(i, j)`` to roughly [-1, 1]^2; row 0 is the top when flipped."""
    x = i / width * 2.0 - 1.0
    if flip_y:
        y = j / height * (-2.0) + 1.0
    else:
        y = j / height * 2.0 - 1.0
    return Vec2(x * aspect * pixel_aspect, y)
