# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the ASCII sphere renderer."""
from __future__ import annotations

import math
from typing import Literal

# ----- Display -----
WIDTH = 64
HEIGHT = 32

ASPECT = float(WIDTH // HEIGHT)
PIXEL_ASPECT = 11.0 / 24.0  # width/height of a console glyph

ESC = "\x1b"
CSI = ESC + "["
HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"

# ----- Shading -----
GRADIENT = " .:!/(l146ZH9W8$@"
DIFF_SCALER = 18.0  # scale the diffuse term onto gradient indices

# ----- Scene -----
RADIUS = 1.0
SPHERE_CENTER = (0.0, 0.0, 0.0)
CAMERA_POS = (0.0, 0.0, -2.0)
LIGHT_DIR = (0.5, 1.0, -1.0)  # normalized at startup

NO_HIT = -1.0

# ----- Camera controls -----
MOVE_STEP = 0.1
ZOOM_STEP = 0.1
ORBIT_STEP = 0.35  # radians per key press, applied to the camera origin
W = 0.04           # angular velocity, scaled by the frame index

GO_FORWARD = "w"
GO_BACKWARD = "s"
GO_RIGHT = "d"
GO_LEFT = "a"
GO_DOWN = "j"
GO_UP = "k"
ROT_RIGHT = "l"
ROT_LEFT = "h"
ZOOM_IN = "z"
ZOOM_OUT = "x"
TURN_OFF = ESC

# ----- Spinning sphere -----
SPIN_GRADIENT = " .:!/r(l1Z4H9W8$@"
SPIN_PIXEL_ASPECT = 11.0 / 24.0
SPIN_ORIGIN = (-2.0, 0.0, 0.0)
SPIN_STEP = 0.01
SPIN_FPS = 60

# ----- Bouncing ball -----
BALL_WIDTH = 64
BALL_HEIGHT = 30
BALL_PIXEL_ASPECT = 11.0 / 26.0
BALL_COLOR = "@"
BALL_BLANK = " "
BALL_FPS = 120
BALL_BOUNDARY = 1.0
BALL_FRICTION = 0.98
BALL_RADIUS = 0.32
BALL_DT = 0.01
GRAVITY = 9.81

TAU = 2.0 * math.pi

Mode = Literal["interactive", "spin", "ball"]
PollMode = Literal["frame", "pixel"]
RawScope = Literal["poll", "session"]
Action = Literal["continue", "quit"]
