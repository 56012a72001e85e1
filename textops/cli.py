"""Interactive menu for the text operations."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Optional, TextIO

from textops.console import (
    SEPARATOR,
    Color,
    clear_screen,
    draw_line,
    set_color,
    wait_for_key_press,
)
from textops.operations import OperationError, TextBuffer, ascii_code, guess_gender

_MENU = (
    " 1) Replace text       - Replace part of the text\n"
    " 2) Find text          - Search for specific text\n"
    " 3) Remove text        - Delete part of the text\n"
    " 4) Gender by name     - Guess gender by name\n"
    " 5) Reverse text       - Reverse the text\n"
    " 6) Concatenate        - Join two texts\n"
    " 7) Insert text        - Add text at a position\n"
    " 8) Copy text          - Copy part of the text\n"
    " 9) ASCII converter    - Char → ASCII code\n"
    "10) To uppercase       - Convert to UPPERCASE\n"
    "11) To lowercase       - Convert to lowercase\n"
    "12) Save to file       - Save current text\n"
    "13) Load from file     - Load text from file\n"
    "14) Help               - Show detailed help\n"
    "15) Exit               - Quit program\n"
)

_HELP = (
    "1) Replace:      repl[pos,len] = new_text\n"
    "2) Find:         search substring\n"
    "3) Remove:       erase(pos,len)\n"
    "4) Gender:       last-letter rule\n"
    "5) Reverse:      reverse text\n"
    "6) Concat:       append text\n"
    "7) Insert:       insert at pos\n"
    "8) Copy:         substr(pos,len)\n"
    "9) ASCII:        char → code\n"
    "10) Uppercase:   toupper()\n"
    "11) Lowercase:   tolower()\n"
    "12) Save:        write to file\n"
    "13) Load:        read from file\n"
    "14) Help:        this screen\n"
    "15) Exit:        quit program\n"
)

EXIT_CHOICE = 15


def display_header(stream: Optional[TextIO] = None) -> None:
    """Write the program banner."""
    stream = stream if stream is not None else sys.stdout
    set_color(Color.LIGHT_PURPLE, stream)
    stream.write(
        "****************************************************\n"
        "*           String Operations Program              *\n"
        "****************************************************\n\n"
    )
    set_color(Color.WHITE, stream)


def display_menu(stream: Optional[TextIO] = None) -> None:
    """Write the list of menu choices."""
    stream = stream if stream is not None else sys.stdout
    set_color(Color.LIGHT_BLUE, stream)
    stream.write(_MENU)
    set_color(Color.WHITE, stream)


def display_help(stream: Optional[TextIO] = None) -> None:
    """Write the detailed help screen."""
    stream = stream if stream is not None else sys.stdout
    set_color(Color.LIGHT_YELLOW, stream)
    stream.write("\nDetailed Help:\n")
    draw_line(stream=stream)
    stream.write(_HELP)
    set_color(Color.WHITE, stream)


class _Reader:
    """Reads words, characters and lines from a line-based input function."""

    def __init__(self, input_func: Callable[[], str]) -> None:
        self._input = input_func
        self._pending = ""

    def _fill(self) -> None:
        while not self._pending.strip():
            self._pending = self._input()
        self._pending = self._pending.lstrip()

    def word(self) -> str:
        self._fill()
        parts = self._pending.split(None, 1)
        self._pending = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def char(self) -> str:
        self._fill()
        ch, self._pending = self._pending[0], self._pending[1:]
        return ch

    def line(self) -> str:
        self._fill()
        text, self._pending = self._pending, ""
        return text

    def integer(self) -> int:
        try:
            return int(self.word())
        except ValueError:
            raise OperationError("Please enter a number") from None

    def discard(self) -> None:
        self._pending = ""


class Session:
    """Runs menu choices against a text buffer."""

    def __init__(
        self,
        buffer: Optional[TextBuffer] = None,
        input_func: Optional[Callable[[], str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.buffer = buffer if buffer is not None else TextBuffer()
        self._input = input_func if input_func is not None else input
        self._reader = _Reader(self._input)
        self._stream = stream if stream is not None else sys.stdout
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._replace,
            2: self._find,
            3: self._remove,
            4: self._gender,
            5: self._reverse,
            6: self._concat,
            7: self._insert,
            8: self._copy,
            9: self._ascii,
            10: self._upper,
            11: self._lower,
            12: self._save,
            13: self._load,
            14: lambda: display_help(self._stream),
        }

    def _write(self, text: str) -> None:
        self._stream.write(text)

    def _prompt(self, title: str) -> None:
        set_color(Color.LIGHT_GREEN, self._stream)
        self._write(f"\n{title}\n{SEPARATOR}\n")
        set_color(Color.WHITE, self._stream)
        self._stream.flush()

    def _ensure_text(self, title: str) -> None:
        if not self.buffer.text:
            self._prompt(title)
            self.buffer.text = self._reader.line()

    def _show_current(self, label: str = "Current text") -> None:
        self._write(f'\n{label}: "{self.buffer.text}"')

    def _replace(self) -> None:
        self._prompt("[Replace] Enter the text to operate on:")
        self.buffer.text = self._reader.line()
        self._prompt("Enter start pos, length, and new text:")
        pos = self._reader.integer()
        length = self._reader.integer()
        new_text = self._reader.line()
        self._write(f"\nResult: {self.buffer.replace(pos, length, new_text)}\n")

    def _find(self) -> None:
        self._ensure_text("[Find] Enter the text to search in:")
        self._show_current("Searching in")
        self._prompt("[Find] Enter substring to search:")
        found = self.buffer.find(self._reader.word())
        if found is None:
            self._write("\nNot found\n")
        else:
            self._write(f"\nFound at position: {found}\n")

    def _remove(self) -> None:
        self._ensure_text("[Remove] Enter the text to operate on:")
        self._show_current()
        self._prompt("[Remove] Enter start pos and length:")
        pos = self._reader.integer()
        length = self._reader.integer()
        self._write(f"\nResult: {self.buffer.remove(pos, length)}\n")

    def _gender(self) -> None:
        self._prompt("[Gender] Enter a Polish name:")
        self._write(f"\nGuessed: {guess_gender(self._reader.word())}\n")

    def _reverse(self) -> None:
        self._ensure_text("[Reverse] Enter the text to reverse:")
        self._write(f"\nOriginal: {self.buffer.text}\n")
        self._write(f"Reversed: {self.buffer.reverse()}\n")

    def _concat(self) -> None:
        self._ensure_text("[Concat] Enter the base text:")
        self._show_current()
        self._prompt("[Concat] Enter text to append:")
        self._write(f"\nResult: {self.buffer.concat(self._reader.line())}\n")

    def _insert(self) -> None:
        self._ensure_text("[Insert] Enter the base text:")
        self._show_current()
        self._prompt("[Insert] Enter pos and text:")
        pos = self._reader.integer()
        addition = self._reader.line()
        self._write(f"\nResult: {self.buffer.insert(pos, addition)}\n")

    def _copy(self) -> None:
        self._ensure_text("[Copy] Enter the text to copy from:")
        self._show_current()
        self._prompt("[Copy] Enter start pos and length:")
        pos = self._reader.integer()
        length = self._reader.integer()
        self._write(f"\nCopied: {self.buffer.copy(pos, length)}\n")

    def _ascii(self) -> None:
        self._prompt("[ASCII] Enter a character:")
        self._write(f"\nCode: {ascii_code(self._reader.char())}\n")

    def _upper(self) -> None:
        self._ensure_text("[Uppercase] Enter the text to convert:")
        self._write(f"\n{self.buffer.to_upper()}\n")

    def _lower(self) -> None:
        self._ensure_text("[Lowercase] Enter the text to convert:")
        self._write(f"\n{self.buffer.to_lower()}\n")

    def _save(self) -> None:
        self._ensure_text("[Save] Enter the text to save:")
        self._show_current()
        self._prompt("[Save] Enter filename:")
        self.buffer.save(self._reader.word())
        self._write("\nSaved successfully\n")

    def _load(self) -> None:
        self._prompt("[Load] Enter filename:")
        self._write(f"\nLoaded text:\n{self.buffer.load(self._reader.word())}\n")

    def run_choice(self, choice: int) -> bool:
        """Carry out one menu choice; return False when the choice is exit."""
        if choice == EXIT_CHOICE:
            return False
        action = self._actions.get(choice)
        if action is None:
            raise OperationError("Invalid option")
        action()
        return True

    def _clear(self) -> None:
        if self._stream.isatty():
            clear_screen()

    def _pause(self) -> None:
        self._reader.discard()
        wait_for_key_press(self._input, self._stream)

    def _step(self) -> bool:
        self._clear()
        display_header(self._stream)
        draw_line("=", 52, self._stream)
        self._write("\nMENU:\n")
        draw_line("-", 52, self._stream)
        display_menu(self._stream)
        draw_line("-", 52, self._stream)
        self._write("\nEnter choice [1-15]: ")
        self._stream.flush()
        token = self._reader.word()
        try:
            choice = int(token)
        except ValueError:
            self._reader.discard()
            raise OperationError("Please enter a number") from None
        self._clear()
        if not self.run_choice(choice):
            return False
        self._pause()
        return True

    def _report(self, exc: Exception) -> None:
        err = sys.stderr
        set_color(Color.LIGHT_RED, err)
        err.write(f"\nError: {exc}\n")
        set_color(Color.WHITE, err)
        err.flush()

    def loop(self) -> int:
        """Show the menu repeatedly until exit or end of input; return 0."""
        while True:
            try:
                if not self._step():
                    return 0
            except EOFError:
                return 0
            except Exception as exc:  # every failure returns to the menu
                self._report(exc)
                try:
                    self._pause()
                except EOFError:
                    return 0


def main(argv: Optional[list] = None) -> int:
    """Start the interactive text operations menu."""
    parser = argparse.ArgumentParser(
        prog="textops", description="Interactive string operations."
    )
    parser.parse_args(argv)
    try:
        return Session().loop()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())