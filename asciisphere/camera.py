# -*- coding: utf-8 -*-
"""Camera rotation transforms and keyboard controls."""
from __future__ import annotations

import logging
import math
from typing import Optional

from .constants import (
    GO_BACKWARD,
    GO_DOWN,
    GO_FORWARD,
    GO_LEFT,
    GO_RIGHT,
    GO_UP,
    MOVE_STEP,
    ORBIT_STEP,
    ROT_LEFT,
    ROT_RIGHT,
    TURN_OFF,
    W,
    ZOOM_STEP,
    ZOOM_IN,
    ZOOM_OUT,
    Action,
)
from .models import Camera, Settings
from .vector import Vec3

log = logging.getLogger(__name__)

# key -> (dx, dy, dz) applied to the camera origin
_MOVES = {
    GO_FORWARD: (0.0, 0.0, MOVE_STEP),
    GO_BACKWARD: (0.0, 0.0, -MOVE_STEP),
    GO_LEFT: (-MOVE_STEP, 0.0, 0.0),
    GO_RIGHT: (MOVE_STEP, 0.0, 0.0),
    GO_UP: (0.0, MOVE_STEP, 0.0),
    GO_DOWN: (0.0, -MOVE_STEP, 0.0),
}


def rotate_right(v: Vec3, theta: float) -> Vec3:
    c, s = math.cos(theta), math.sin(theta)
    return Vec3(v.x * c - v.z * s, v.y, v.z * c + v.x * s)


def rotate_left(v: Vec3, theta: float) -> Vec3:
    c, s = math.cos(theta), math.sin(theta)
    return Vec3(v.x * c + v.z * s, v.y, v.z * c - v.x * s)


def apply_control(
    camera: Camera, key: Optional[str], frame_index: int, settings: Settings
) -> Action:
    """Mutate ``camera`` for one key press.

    The rotate keys orbit the origin by a fixed step and turn the direction
    by ``frame_index * W``, so a press late in the session turns further than
    an early one. ``settings.rotation_drift = False`` pins that factor to 1.
    """
    if key is None:
        return "continue"

    if key == TURN_OFF:
        log.info("exit key pressed on frame %d", frame_index)
        return "quit"

    if key == ZOOM_IN:
        camera.zoom += ZOOM_STEP
        return "continue"
    if key == ZOOM_OUT:
        camera.zoom -= ZOOM_STEP
        return "continue"

    delta = _MOVES.get(key)
    if delta is not None:
        o = camera.origin
        camera.origin = Vec3(o.x + delta[0], o.y + delta[1], o.z + delta[2])
        return "continue"

    turn = (frame_index if settings.rotation_drift else 1) * W
    if key == ROT_RIGHT:
        camera.origin = rotate_right(camera.origin, ORBIT_STEP)
        camera.direction = rotate_right(camera.direction, turn)
    elif key == ROT_LEFT:
        camera.origin = rotate_left(camera.origin, ORBIT_STEP)
        camera.direction = rotate_left(camera.direction, turn)
    return "continue"
