"""Text-mode display: a grid of (character, attribute) cells with a cursor."""

from .colors import GREEN_ON_BLACK, TRANSPARENT

DISPLAY_WIDTH = 80
DISPLAY_HEIGHT = 25


class Display:
    """An in-memory text screen laid out like VGA text memory.

    ``memory`` holds two bytes per cell, character then attribute, row by row.
    The cursor is kept as a cell index.
    """

    def __init__(
        self,
        width: int = DISPLAY_WIDTH,
        height: int = DISPLAY_HEIGHT,
        theme: int = GREEN_ON_BLACK,
    ) -> None:
        if width < 1 or height < 2:
            raise ValueError("display needs at least one column and two rows")
        self.width = width
        self.height = height
        self.memory = bytearray(2 * width * height)
        self._cursor = 0
        self.theme = theme
        self.set_theme(theme)

    @staticmethod
    def _encode(character: str) -> int:
        if len(character) != 1:
            raise ValueError(f"expected a single character, got {character!r}")
        return character.encode("latin-1")[0]

    def _cell_count(self) -> int:
        return self.width * self.height

    def put_char(self, character: str, color: int = TRANSPARENT) -> None:
        """Draw one character at the cursor and advance it.

        A newline moves to the next row. The last cell of the screen is never
        written; reaching it starts a new line instead and drops the character.
        A transparent colour leaves the cell's attribute untouched.
        """
        if character == "\n":
            self.newline()
            return
        code = self._encode(character)
        if self._cursor <= self._cell_count() - 2:
            self.memory[2 * self._cursor] = code
            if color != TRANSPARENT:
                self.memory[2 * self._cursor + 1] = color
            self._cursor += 1
        else:
            self.newline()

    def put(self, text: str, color: int = TRANSPARENT) -> None:
        """Draw every character of ``text``."""
        for character in text:
            self.put_char(character, color)

    def newline(self) -> None:
        """Move the cursor to the start of the next row, scrolling at the bottom."""
        row = self._cursor // self.width
        self._cursor = (row + 1) * self.width
        if row > self.height - 2:
            self.scroll()

    def scroll(self) -> None:
        """Move every row up by one, clear the bottom row and lift the cursor."""
        row_bytes = 2 * self.width
        self.memory[:-row_bytes] = self.memory[row_bytes:]
        self.memory[-row_bytes:] = bytes([0, self.theme & 0xFF]) * self.width
        row = self._cursor // self.width
        self._cursor = max(row - 1, 0) * self.width

    def clear(self) -> None:
        """Blank the screen, home the cursor and repaint the current theme."""
        self.memory[:] = bytes(len(self.memory))
        self._cursor = 0
        self.set_theme(self.theme)

    def set_theme(self, color: int) -> None:
        """Paint ``color`` as the attribute of every cell."""
        self.theme = color
        self.memory[1::2] = bytes([color & 0xFF]) * self._cell_count()

    def delete_char(self) -> None:
        """Step the cursor back one cell and blank the character there."""
        if self._cursor == 0:
            return
        self._cursor -= 1
        self.memory[2 * self._cursor] = 0

    def set_cursor_position(self, column: int, row: int) -> None:
        """Place the cursor at ``column``, ``row``."""
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise ValueError(f"cursor position out of range: ({column}, {row})")
        self._cursor = row * self.width + column

    def cursor_position(self) -> tuple[int, int]:
        """Return the cursor as ``(column, row)``."""
        return self._cursor % self.width, self._cursor // self.width

    def row_text(self, row: int) -> str:
        """Return the characters of one row, trailing blanks dropped."""
        if not 0 <= row < self.height:
            raise IndexError(f"row out of range: {row}")
        start = 2 * row * self.width
        chars = self.memory[start:start + 2 * self.width:2]
        return chars.decode("latin-1").rstrip("\x00").replace("\x00", " ")

    def text(self) -> str:
        """Return the whole screen, rows separated by newlines."""
        return "\n".join(self.row_text(row) for row in range(self.height))