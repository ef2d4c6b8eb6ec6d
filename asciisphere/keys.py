# -*- coding: utf-8 -*-
"""Non-blocking single key reads from the controlling terminal."""
from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from .constants import RawScope

log = logging.getLogger(__name__)

TermiosAttr = List[int | List[bytes | int]]


class KeyPoller:
    """Reads at most one pending key per :meth:`poll` without blocking.

    With ``scope="poll"`` the terminal is switched to cbreak/no-echo around
    every read and restored right after. With ``scope="session"`` it is
    switched once when the poller is entered as a context manager and
    restored on exit. Either way the saved mode is put back on every exit
    path.
    """

    def __init__(self, stream: Optional[TextIO] = None, scope: RawScope = "poll") -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.scope = scope
        self._fd: Optional[int] = None
        self._saved: Optional[TermiosAttr] = None
        self._session = False

        try:
            if self.stream.isatty():
                self._fd = self.stream.fileno()
        except (AttributeError, ValueError, OSError):
            self._fd = None
        if self._fd is None:
            log.debug("stdin is not a terminal, key polling disabled")

    @property
    def enabled(self) -> bool:
        return self._fd is not None

    @property
    def raw(self) -> bool:
        return self._saved is not None

    def __enter__(self) -> "KeyPoller":
        if self.scope == "session":
            self._acquire()
            self._session = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def _acquire(self) -> None:
        if self._fd is None or self._saved is not None:
            return
        try:
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd, termios.TCSANOW)  # keep keys typed while cooked
        except termios.error as err:
            log.debug("could not switch terminal to cbreak mode: %s", err)
            self._saved = None
            self._fd = None

    def restore(self) -> None:
        if self._fd is not None and self._saved is not None:
            try:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            except termios.error as err:
                log.debug("could not restore terminal mode: %s", err)
        self._saved = None
        self._session = False

    @contextmanager
    def _raw_mode(self) -> Iterator[None]:
        if self._session:
            yield
            return
        self._acquire()
        try:
            yield
        finally:
            self.restore()

    def poll(self) -> Optional[str]:
        if self._fd is None:
            return None
        with self._raw_mode():
            readable, _, _ = select.select([self._fd], [], [], 0)
            if not readable:
                return None
            data = os.read(self._fd, 1)
        if not data:
            return None
        return data.decode("utf-8", errors="ignore") or None

