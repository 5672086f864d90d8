"""Text input and output on top of the display."""

import sys
from collections.abc import Callable

from .colors import TRANSPARENT
from .conv import int_to_str, uint32_to_hex, uint32_to_str
from .display import Display


def _read_stdin_char() -> str:
    character = sys.stdin.read(1)
    if not character:
        raise EOFError("end of input")
    return character


class Console:
    """Prints text and numbers to a display and reads lines of typed input.

    ``read_char`` returns one typed character per call; it may signal the end
    of input with EOFError or StopIteration.
    """

    def __init__(self, display: Display, read_char: Callable[[], str] | None = None) -> None:
        self.display = display
        self._read_char = read_char or _read_stdin_char

    def cputs(self, text: str, color: int) -> None:
        """Print ``text`` in ``color``, stopping at the first NUL character."""
        self.display.put(text.split("\x00", 1)[0], color)

    def puts(self, text: str) -> None:
        """Print ``text`` keeping the colours already on screen."""
        self.cputs(text, TRANSPARENT)

    def putc(self, character: str) -> None:
        """Print one character."""
        self.display.put_char(character, TRANSPARENT)

    def puti(self, number: int) -> None:
        """Print a signed decimal number."""
        self.puts(int_to_str(number))

    def putu(self, number: int) -> None:
        """Print a number as an unsigned 32-bit decimal."""
        self.puts(uint32_to_str(number))

    def puthex(self, number: int) -> None:
        """Print a number as unsigned 32-bit hexadecimal."""
        self.puts(uint32_to_hex(number))

    def scan(self) -> str:
        """Read and echo a line until Enter; backspace erases the last character."""
        chars: list[str] = []
        while True:
            try:
                character = self._read_char()
            except StopIteration:
                raise EOFError("end of input") from None
            if character == "\n":
                break
            if character == "\b":
                if chars:
                    chars.pop()
                    self.display.delete_char()
                continue
            self.putc(character)
            chars.append(character)
        self.putc("\n")
        return "".join(chars)