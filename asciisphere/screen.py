# -*- coding: utf-8 -*-
"""Character frame buffer and the ANSI stream it is flushed to."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from .constants import CSI, HIDE_CURSOR, SHOW_CURSOR


class FrameBuffer:
    """Fixed ``width`` x ``height`` grid of glyphs, repainted in place."""

    def __init__(self, width: int, height: int, fill: str = " ", stream: Optional[TextIO] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer needs a positive size")
        self.width = width
        self.height = height
        self.stream = stream if stream is not None else sys.stdout
        self._cells = [[fill] * width for _ in range(height)]

    def put(self, col: int, row: int, ch: str) -> None:
        self._cells[row][col] = ch

    def get(self, col: int, row: int) -> str:
        return self._cells[row][col]

    def fill(self, ch: str) -> None:
        for row in self._cells:
            row[:] = [ch] * self.width

    def rows(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def flush(self) -> None:
        out = self.stream
        for row in self.rows():
            out.write(row)
            out.write("\n")
        out.flush()

    def reposition(self) -> None:
        # back to the top-left corner of the frame just printed
        self.stream.write(f"{CSI}{self.width}D")
        self.stream.write(f"{CSI}{self.height}A")

    def hide_cursor(self) -> None:
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()

    def show_cursor(self) -> None:
        self.stream.write(SHOW_CURSOR)
        self.stream.flush()
