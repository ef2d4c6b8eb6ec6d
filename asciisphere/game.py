# -*- coding: utf-8 -*-
"""Render loop and terminal entrypoint.

Every frame walks the grid column by column:
- input: poll one key (per frame or per pixel) and steer the camera
- trace: cast the camera ray for the cell and shade the sphere hit
- output: after each column, flush the whole buffer and move the cursor back
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Optional, Protocol, TextIO

from .animate import run_ball, run_spin
from .camera import apply_control
from .constants import ASPECT, HEIGHT, LIGHT_DIR, PIXEL_ASPECT, WIDTH, Action
from .keys import KeyPoller
from .models import Camera, Settings, Sphere
from .raycast import diffuse, screen_coordinates
from .screen import FrameBuffer
from .style import SPHERE_GRADIENT, Gradient
from .vector import Vec3, normalize, vec3

log = logging.getLogger(__name__)


class KeySource(Protocol):
    def poll(self) -> Optional[str]: ...

    def restore(self) -> None: ...


@dataclass
class RenderContext:
    """Everything one interactive session owns."""

    screen: FrameBuffer
    keys: KeySource
    settings: Settings = field(default_factory=Settings)
    camera: Camera = field(default_factory=Camera)
    sphere: Sphere = field(default_factory=Sphere)
    light: Vec3 = field(default_factory=lambda: normalize(vec3(LIGHT_DIR)))
    gradient: Gradient = SPHERE_GRADIENT
    aspect: float = ASPECT
    pixel_aspect: float = PIXEL_ASPECT
    frame: int = 0


def _steer(ctx: RenderContext) -> Action:
    key = ctx.keys.poll()
    return apply_control(ctx.camera, key, ctx.frame, ctx.settings)


def render_pixel(ctx: RenderContext, i: int, j: int) -> Action:
    screen = ctx.screen
    cam = ctx.camera
    uv = screen_coordinates(i, j, screen.width, screen.height, ctx.aspect, ctx.pixel_aspect)
    cam.direction = normalize(Vec3(uv.x, uv.y, cam.zoom))

    if ctx.settings.poll == "pixel" and _steer(ctx) == "quit":
        return "quit"

    diff = diffuse(cam.origin, cam.direction, ctx.sphere, ctx.light)
    screen.put(i, j, ctx.gradient.shade(diff))
    return "continue"


def render_frame(ctx: RenderContext) -> Action:
    if ctx.settings.poll == "frame" and _steer(ctx) == "quit":
        return "quit"

    screen = ctx.screen
    for i in range(screen.width):
        for j in range(screen.height):
            if render_pixel(ctx, i, j) == "quit":
                return "quit"
        screen.flush()
        screen.reposition()
    return "continue"


def run_interactive(ctx: RenderContext) -> Action:
    limit = ctx.settings.max_frames
    while limit <= 0 or ctx.frame < limit:
        if render_frame(ctx) == "quit":
            return "quit"
        ctx.frame += 1
    return "continue"


def shutdown(ctx: RenderContext) -> None:
    """Restore the terminal, blank the buffer and show the cursor again."""
    ctx.keys.restore()
    ctx.screen.fill(ctx.gradient.blank)
    ctx.screen.show_cursor()


def new_context(settings: Settings, keys: KeySource, stream: Optional[TextIO] = None) -> RenderContext:
    screen = FrameBuffer(WIDTH, HEIGHT, SPHERE_GRADIENT.blank, stream)
    return RenderContext(screen=screen, keys=keys, settings=settings)


def run(settings: Settings, stdout: Optional[TextIO] = None, stdin: Optional[TextIO] = None) -> int:
    """Run the selected front-end and return the process exit status."""
    stdout = stdout if stdout is not None else sys.stdout
    log.info("starting %s mode: %s", settings.mode, settings)

    with KeyPoller(stdin, scope=settings.raw_scope) as keys:
        ctx = new_context(settings, keys, stdout)
        ctx.screen.hide_cursor()
        try:
            if settings.mode == "spin":
                run_spin(stdout, settings)
            elif settings.mode == "ball":
                run_ball(stdout, settings)
            else:
                action = run_interactive(ctx)
                log.info("interactive loop ended after %d frames (%s)", ctx.frame, action)
        except KeyboardInterrupt:
            log.info("interrupted")
            return 130
        finally:
            shutdown(ctx)
    return 0
