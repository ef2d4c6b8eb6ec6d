# -*- coding: utf-8 -*-
"""Luminance gradients: quantize a diffuse term into a glyph."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import BALL_BLANK, BALL_COLOR, DIFF_SCALER, GRADIENT, SPIN_GRADIENT
from .util import clampi


@dataclass(frozen=True)
class Gradient:
    """Characters ordered from blank to brightest.

    The last glyph is never produced by :meth:`shade`; it only pads the
    string, so the highest reachable index is ``len(chars) - 2``.
    """

    chars: str = GRADIENT
    scaler: float = DIFF_SCALER

    def __post_init__(self) -> None:
        if len(self.chars) < 2:
            raise ValueError("gradient needs at least two characters")

    @property
    def usable_size(self) -> int:
        return len(self.chars) - 2

    @property
    def blank(self) -> str:
        return self.chars[0]

    def index(self, diff: float, truncate: bool = False) -> int:
        # halves round up: 2.5 -> 3, -0.5 -> 0
        scaled = diff * self.scaler
        color = int(scaled) if truncate else math.floor(scaled + 0.5)
        return clampi(color, 0, self.usable_size)

    def shade(self, diff: float, truncate: bool = False) -> str:
        return self.chars[self.index(diff, truncate)]


SPHERE_GRADIENT = Gradient(GRADIENT)
SPIN_SPHERE_GRADIENT = Gradient(SPIN_GRADIENT)


def disc_char(inside: bool) -> str:
    return BALL_COLOR if inside else BALL_BLANK
