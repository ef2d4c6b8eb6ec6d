# -*- coding: utf-8 -*-
"""Logging setup. Frames own stdout, so records only go to a file."""
from __future__ import annotations

import logging
from typing import Optional

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger("asciisphere").addHandler(logging.NullHandler())


def setup_logging(path: Optional[str], level: str = "INFO") -> Optional[logging.Handler]:
    if not path:
        return None
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FORMAT))
    root = logging.getLogger("asciisphere")
    root.addHandler(handler)
    root.setLevel(level.upper())
    return handler
