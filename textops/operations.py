"""Editable text buffer with positional string operations."""

from __future__ import annotations

import string
import time
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_PATH = "string_operations.log"

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

PathLike = Union[str, Path]


class OperationError(RuntimeError):
    """Raised when a text operation cannot be carried out."""


class TextBuffer:
    """Holds the current text; positions are 1-based."""

    def __init__(self, text: str = "", log_path: Optional[PathLike] = DEFAULT_LOG_PATH) -> None:
        self.text = text
        self.log_path = Path(log_path) if log_path is not None else None

    def log_error(self, message: str) -> None:
        """Append a timestamped error line to the log file, if any."""
        if self.log_path is None:
            return
        stamp = time.strftime("%Y-%m-%d %H:%M:%S")
        try:
            with self.log_path.open("a", encoding="utf-8") as log:
                log.write(f"{stamp} | ERROR: {message}\n")
        except OSError:
            pass

    def _span_ok(self, pos: int, length: int) -> bool:
        size = len(self.text)
        return 1 <= pos <= size and length >= 0 and pos - 1 + length <= size

    def replace(self, pos: int, length: int, new_text: str) -> str:
        """Replace *length* characters starting at *pos* with *new_text*."""
        if not self._span_ok(pos, length):
            self.log_error("Replace failed: invalid position or length")
            self.log_error("Replace failed")
            raise OperationError("Replace operation error") from OperationError(
                "Invalid position or length for replace"
            )
        start = pos - 1
        self.text = self.text[:start] + new_text + self.text[start + length:]
        return self.text

    def find(self, sub: str) -> Optional[int]:
        """Return the 1-based position of *sub*, or None when absent."""
        idx = self.text.find(sub)
        return idx + 1 if idx >= 0 else None

    def remove(self, pos: int, length: int) -> str:
        """Delete *length* characters starting at *pos*."""
        if not self._span_ok(pos, length):
            self.log_error("Remove failed: invalid position or length")
            self.log_error("Remove failed")
            raise OperationError("Remove operation error") from OperationError(
                "Invalid position or length for remove"
            )
        start = pos - 1
        self.text = self.text[:start] + self.text[start + length:]
        return self.text

    def reverse(self) -> str:
        """Reverse the text in place."""
        self.text = self.text[::-1]
        return self.text

    def concat(self, extra: str) -> str:
        """Append *extra* to the text."""
        self.text += extra
        return self.text

    def insert(self, pos: int, addition: str) -> str:
        """Insert *addition* before position *pos* (up to one past the end)."""
        if not 1 <= pos <= len(self.text) + 1:
            self.log_error("Insert failed: invalid position")
            self.log_error("Insert failed")
            raise OperationError("Insert operation error") from OperationError(
                "Invalid position for insert"
            )
        start = pos - 1
        self.text = self.text[:start] + addition + self.text[start:]
        return self.text

    def copy(self, pos: int, length: int) -> str:
        """Return *length* characters starting at *pos*."""
        if not self._span_ok(pos, length):
            self.log_error("Copy failed: invalid position or length")
            raise OperationError("Invalid position or length for copy")
        start = pos - 1
        return self.text[start:start + length]

    def to_upper(self) -> str:
        """Convert ASCII letters to upper case."""
        self.text = self.text.translate(_TO_UPPER)
        return self.text

    def to_lower(self) -> str:
        """Convert ASCII letters to lower case."""
        self.text = self.text.translate(_TO_LOWER)
        return self.text

    def save(self, filename: PathLike) -> None:
        """Write the text to *filename*, replacing its contents."""
        try:
            with open(filename, "w", encoding="utf-8") as f:
                f.write(self.text)
        except OSError as exc:
            raise OperationError("Cannot open file") from exc

    def load(self, filename: PathLike) -> str:
        """Read *filename* up to the first NUL character into the buffer."""
        try:
            with open(filename, encoding="utf-8") as f:
                content = f.read()
        except OSError as exc:
            raise OperationError("Cannot open file") from exc
        self.text = content.split("\0", 1)[0]
        return self.text


def guess_gender(name: str) -> str:
    """Guess the gender of a Polish first name from its last letter."""
    if not name:
        raise OperationError("Name must not be empty")
    return "Female" if name[-1].lower() == "a" else "Male"


def ascii_code(char: str) -> int:
    """Return the character code of a single character."""
    if len(char) != 1:
        raise OperationError("Expected exactly one character")
    return ord(char)