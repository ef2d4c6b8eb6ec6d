# -*- coding: utf-8 -*-
"""Core data models (camera, sphere, configuration)."""
from __future__ import annotations

from dataclasses import dataclass, field

from .constants import CAMERA_POS, RADIUS, SPHERE_CENTER, Mode, PollMode, RawScope
from .vector import V3_ZERO, Vec3, vec3


@dataclass
class Camera:
    origin: Vec3 = field(default_factory=lambda: vec3(CAMERA_POS))
    direction: Vec3 = V3_ZERO
    zoom: float = 1.0


@dataclass(frozen=True)
class Sphere:
    center: Vec3 = field(default_factory=lambda: vec3(SPHERE_CENTER))
    radius: float = RADIUS


@dataclass
class Settings:
    mode: Mode = "interactive"
    poll: PollMode = "frame"          # frame: once per frame, pixel: once per cell
    raw_scope: RawScope = "poll"      # poll: raw mode around every read
    rotation_drift: bool = True       # rotate keys scale with the frame index
    max_frames: int = 0               # 0 = run until the exit key
