# -*- coding: utf-8 -*-
"""Small helpers used across modules."""
from __future__ import annotations


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def clampi(v: int, lo: int, hi: int) -> int:
    return int(clamp(v, lo, hi))
