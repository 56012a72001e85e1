"""Terminal helpers: colours, separator lines, screen clearing and pauses."""

from __future__ import annotations

import os
import subprocess
import sys
from enum import IntEnum
from typing import Callable, Optional, TextIO

SEPARATOR = "-" * 40


class Color(IntEnum):
    """Console colour attributes used by the menu and the operations."""

    WHITE = 7
    LIGHT_BLUE = 11
    LIGHT_GREEN = 10
    LIGHT_YELLOW = 14
    LIGHT_PURPLE = 13
    LIGHT_RED = 12

    @property
    def ansi(self) -> str:
        """The ANSI escape sequence selecting this colour."""
        return _ANSI[self]


_ANSI = {
    Color.WHITE: "\033[0m",
    Color.LIGHT_BLUE: "\033[96m",
    Color.LIGHT_GREEN: "\033[92m",
    Color.LIGHT_YELLOW: "\033[93m",
    Color.LIGHT_PURPLE: "\033[95m",
    Color.LIGHT_RED: "\033[91m",
}


def set_color(color: Color, stream: Optional[TextIO] = None) -> None:
    """Switch the text colour of *stream* when it is a terminal."""
    stream = stream if stream is not None else sys.stdout
    if stream.isatty():
        stream.write(Color(color).ansi)


def draw_line(ch: str = "-", length: int = 52, stream: Optional[TextIO] = None) -> None:
    """Write a horizontal line of *length* copies of *ch*."""
    stream = stream if stream is not None else sys.stdout
    stream.write(ch * length + "\n")


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def wait_for_key_press(
    input_func: Optional[Callable[[], str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Prompt the user and wait until a line is entered."""
    stream = stream if stream is not None else sys.stdout
    input_func = input_func if input_func is not None else input
    stream.write("\n[Press Enter to return]")
    stream.flush()
    input_func()