# -*- coding: utf-8 -*-
"""2D/3D vector values and the handful of operations the renderer needs."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: Union[float, "Vec2"]) -> "Vec2":
        return scale(self, k)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: Union[float, "Vec3"]) -> "Vec3":
        return scale(self, k)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)


Vec = Union[Vec2, Vec3]

V3_ZERO = Vec3(0.0, 0.0, 0.0)


def vec3(t: tuple[float, float, float]) -> Vec3:
    return Vec3(float(t[0]), float(t[1]), float(t[2]))


def add(a: Vec, b: Vec) -> Vec:
    return a + b


def sub(a: Vec, b: Vec) -> Vec:
    return a - b


def scale(v: Vec, k: Union[float, Vec]) -> Vec:
    """Multiply by a scalar, or component-wise by a vector of the same kind."""
    if isinstance(v, Vec3):
        if isinstance(k, Vec3):
            return Vec3(v.x * k.x, v.y * k.y, v.z * k.z)
        return Vec3(v.x * k, v.y * k, v.z * k)
    if isinstance(k, Vec2):
        return Vec2(v.x * k.x, v.y * k.y)
    return Vec2(v.x * k, v.y * k)


def dot(a: Vec, b: Vec) -> float:
    if isinstance(a, Vec3):
        return a.x * b.x + a.y * b.y + a.z * b.z
    return a.x * b.x + a.y * b.y


def squared_length(v: Vec) -> float:
    return dot(v, v)


def length(v: Vec) -> float:
    return math.sqrt(squared_length(v))


def normalize(v: Vec) -> Vec:
    # Zero-length input raises ZeroDivisionError; callers never pass one.
    n = length(v)
    if isinstance(v, Vec3):
        return Vec3(v.x / n, v.y / n, v.z / n)
    return Vec2(v.x / n, v.y / n)
