#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASCII sphere in the terminal (ray tracing).

Controls (interactive mode):
  w/s   move forward/back      a/d   move left/right
  k/j   move up/down           l/h   rotate right/left
  z/x   zoom in/out            ESC   quit

Run:
  python3 main.py [--mode interactive|spin|ball]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from asciisphere.game import run
from asciisphere.log import setup_logging
from asciisphere.models import Settings


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ray-traced ASCII sphere for your terminal")
    parser.add_argument(
        "--mode",
        choices=["interactive", "spin", "ball"],
        default="interactive",
        help="Which animation to run (default: interactive)",
    )
    parser.add_argument(
        "--poll",
        choices=["frame", "pixel"],
        default="frame",
        help="Read a key once per frame or once per rendered cell (default: frame)",
    )
    parser.add_argument(
        "--raw-scope",
        choices=["poll", "session"],
        default="poll",
        help="Hold the terminal in cbreak mode per key read or for the whole run (default: poll)",
    )
    parser.add_argument(
        "--no-drift",
        action="store_true",
        help="Rotate keys turn by a constant step instead of growing with the frame count",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Stop after this many frames (0 = infinite)",
    )
    parser.add_argument("--log-file", default=None, help="Write log records to this file")
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings(
        mode=args.mode,
        poll=args.poll,
        raw_scope=args.raw_scope,
        rotation_drift=not args.no_drift,
        max_frames=max(0, args.frames),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_file, args.log_level)
    return run(settings_from_args(args))


if __name__ == "__main__":
    sys.exit(main())
