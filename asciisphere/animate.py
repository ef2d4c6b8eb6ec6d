# -*- coding: utf-8 -*-
"""Non-interactive front-ends: orbiting-light sphere and bouncing ball."""
from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from .constants import (
    BALL_BLANK,
    BALL_BOUNDARY,
    BALL_DT,
    BALL_FPS,
    BALL_FRICTION,
    BALL_HEIGHT,
    BALL_PIXEL_ASPECT,
    BALL_RADIUS,
    BALL_WIDTH,
    GRAVITY,
    HEIGHT,
    RADIUS,
    SPHERE_CENTER,
    SPIN_FPS,
    SPIN_ORIGIN,
    SPIN_PIXEL_ASPECT,
    SPIN_STEP,
    TAU,
    WIDTH,
)
from .models import Settings
from .raycast import hit_point, screen_coordinates, sphere_intersection_general
from .screen import FrameBuffer
from .style import SPIN_SPHERE_GRADIENT, Gradient, disc_char
from .vector import Vec2, Vec3, dot, normalize, squared_length, vec3

Sleep = Callable[[float], None]


def orbit_light(t: float) -> Vec3:
    return normalize(Vec3(math.sin(3.0 * t), math.cos(3.0 * t), -0.5))


def spin_pixel(uv: Vec2, origin: Vec3, center: Vec3, light: Vec3, gradient: Gradient) -> str:
    n = normalize(Vec3(1.0, uv.x, uv.y))
    diff = 0.0
    t = sphere_intersection_general(origin, n, center, RADIUS)
    if t > 0.0:
        v = normalize(hit_point(origin, n, t))
        diff = dot(v, light)
    return gradient.shade(diff, truncate=True)


def spin_frame(screen: FrameBuffer, light: Vec3, gradient: Gradient = SPIN_SPHERE_GRADIENT) -> None:
    origin = vec3(SPIN_ORIGIN)
    center = vec3(SPHERE_CENTER)
    aspect = screen.width / screen.height
    for i in range(screen.width):
        for j in range(screen.height):
            uv = screen_coordinates(i, j, screen.width, screen.height, aspect, SPIN_PIXEL_ASPECT, flip_y=False)
            screen.put(i, j, spin_pixel(uv, origin, center, light, gradient))
        screen.flush()
        screen.reposition()


def run_spin(stream: TextIO, settings: Settings, sleep: Sleep = time.sleep) -> int:
    """One full turn of the light around the sphere. Returns frames drawn."""
    screen = FrameBuffer(WIDTH, HEIGHT, SPIN_SPHERE_GRADIENT.blank, stream)
    frames = 0
    t = 0.0
    while t < TAU:
        if settings.max_frames and frames >= settings.max_frames:
            break
        spin_frame(screen, orbit_light(t))
        frames += 1
        t += SPIN_STEP
        sleep(1.0 / SPIN_FPS)
    return frames


@dataclass
class Ball:
    pos: Vec2
    vel: Vec2
    radius: float = BALL_RADIUS


def new_ball() -> Ball:
    return Ball(pos=Vec2(-0.4, 0.6), vel=Vec2(1.0, 0.0))


def ball_step(ball: Ball, dt: float = BALL_DT) -> None:
    """Gravity, a lossy floor bounce and wrap-around past the right wall."""
    ball.vel = ball.vel + Vec2(0.0, -GRAVITY * dt)
    ball.pos = ball.pos + ball.vel * dt

    bottom = -BALL_BOUNDARY + ball.radius
    right = BALL_BOUNDARY + ball.radius

    if ball.pos.y < bottom:
        ball.vel = ball.vel * Vec2(BALL_FRICTION, -BALL_FRICTION)
        ball.pos = Vec2(ball.pos.x, bottom)

    if ball.pos.x > right:
        ball.pos = Vec2(-BALL_BOUNDARY - ball.radius, ball.pos.y)


def draw_disc(screen: FrameBuffer, center: Vec2, r: float) -> None:
    aspect = screen.width / screen.height
    for i in range(screen.width):
        for j in range(screen.height):
            uv = screen_coordinates(i, j, screen.width, screen.height, aspect, BALL_PIXEL_ASPECT)
            screen.put(i, j, disc_char(squared_length(uv - center) < r * r))


def run_ball(stream: TextIO, settings: Settings, sleep: Sleep = time.sleep) -> int:
    screen = FrameBuffer(BALL_WIDTH, BALL_HEIGHT, BALL_BLANK, stream)
    ball = new_ball()
    frames = 0
    while not settings.max_frames or frames < settings.max_frames:
        ball_step(ball)
        draw_disc(screen, ball.pos, ball.radius)
        screen.flush()
        screen.reposition()
        frames += 1
        sleep(1.0 / BALL_FPS)
    return frames
