"""PS/2 keyboard scancode decoding (scancode set 1)."""

from collections.abc import Iterable

KEYBOARD_DATA_PORT = 0x60
LED_COMMAND = 0xED
EXTENDED_PREFIX = 0xE0
RELEASE_BIT = 0x80
KEY_STATES = 384

_FUNCTION_KEYS = "".join(chr(code) for code in range(0x80, 0x8A))


def _keymap(text: str) -> str:
    return text.ljust(128, "\x00")


_KEYMAP_LOWER = _keymap(
    "\x1b1234567890-=\b\tqwertyuiop[]\n\x00asdfghjkl;'`\x00\\zxcvbnm,./\x00*\x00 \x00"
    + _FUNCTION_KEYS
    + "\x00\x00789-456+1230.\x00\x00\x00\x8a\x8b"
)

_KEYMAP_UPPER = _keymap(
    "\x1b!@#$%^&*()_+\b\tQWERTYUIOP{}\n\x00ASDFGHJKL:\"~\x00|ZXCVBNM<>?\x00*\x00 \x00"
    + _FUNCTION_KEYS
    + "\x00\x00789-456+1230.\x00\x00\x00\x8a\x8b"
)

_KEYMAP_ASCII = _keymap(
    "\x1b1234567890-=\b\t\x11\x17\x05\x12\x14\x19\x15\x09\x0f\x10[]\r\x00"
    "\x01\x13\x04\x06\x07\x08\x0a\x0b\x0c;'`\x00\\\x1a\x18\x03\x16\x02\x0e\x0d,./\x00*\x00 \x00"
    + _FUNCTION_KEYS
    + "\x8a\x00789-456+1230.\x00\x00\x00\x8a\x8b"
)

_SPECIAL = {
    27: "\n", 52: "/", 70: "\x90", 71: "\x8c", 72: "\x92", 74: "\x8d",
    76: "\x8e", 78: "\x91", 79: "\x8f", 80: "\x93", 81: "\x94", 82: "\x7f",
    90: "\x95", 91: "\x96",
}
_KEYMAP_SPECIAL = "".join(_SPECIAL.get(index, "\x00") for index in range(128))

_LEFT_CTRL = 0x1D
_LEFT_SHIFT = 0x2A
_RIGHT_SHIFT = 0x36
_ALT = 0x38
_CAPS_LOCK = 0x3A
_NUM_LOCK = 0x45
_SCROLL_LOCK = 0x46
_KEYPAD = range(0x47, 0x53)


def _lookup(table: str, code: int) -> int:
    return ord(table[code - 1]) if code else 0


class Keyboard:
    """Decodes scancodes into characters, tracking modifiers and lock keys.

    Holding Alt and typing up to three digits on the keypad produces the
    character with that decimal code when Alt is released. Bytes that would go
    to the keyboard controller (LED updates) are recorded in ``commands``.
    """

    def __init__(self) -> None:
        self.caps_lock = False
        self.num_lock = True
        self.scroll_lock = False
        self.left_shift = self.right_shift = False
        self.left_ctrl = self.right_ctrl = False
        self.left_alt = self.right_alt = False
        self.alt_char = False
        self.commands: list[int] = []
        self._keydown = [False] * KEY_STATES
        self._extended = False
        self._alt_digits = ""
        self._last_scancode = 0
        self._char = 0
        self._previous = 0
        self._update_leds()

    def leds(self) -> int:
        """Return the LED bits: scroll lock, num lock, caps lock from bit 0."""
        return int(self.scroll_lock) | int(self.num_lock) << 1 | int(self.caps_lock) << 2

    def _update_leds(self) -> None:
        self.commands.extend((LED_COMMAND, self.leds()))

    def is_down(self, index: int) -> bool:
        """Whether the key with this state index is held.

        Plain keys use ``scancode - 1``; extended keys use ``scancode + 127``.
        """
        return self._keydown[index]

    def _set_down(self, index: int, value: bool) -> None:
        if index >= 0:
            self._keydown[index] = value

    def handle(self, scancode: int) -> str | None:
        """Process one scancode and return the character it produced, if any."""
        if not 0 <= scancode <= 0xFF:
            raise ValueError(f"scancode out of range: {scancode!r}")
        self.alt_char = False
        self._char = 0
        self._last_scancode = scancode
        if scancode == EXTENDED_PREFIX:
            self._extended = True
            return None
        if scancode < RELEASE_BIT:
            self._press(scancode)
        else:
            self._release(scancode - RELEASE_BIT)
        return chr(self._char) if self._char else None

    def _press(self, code: int) -> None:
        if not self.num_lock and code in _KEYPAD:
            self._extended = True
        if self._extended:
            self._extended = False
            if code == _LEFT_CTRL:
                self.right_ctrl = True
            elif code == _ALT:
                self.right_alt = True
            else:
                self._char = _lookup(_KEYMAP_SPECIAL, code)
                self._keydown[code + 127] = True
            return
        if code == _LEFT_CTRL:
            self.left_ctrl = True
        elif code == _LEFT_SHIFT:
            self.left_shift = True
        elif code == _RIGHT_SHIFT:
            self.right_shift = True
        elif code == _ALT:
            self.left_alt = True
        elif code == _CAPS_LOCK:
            self.caps_lock = not self.caps_lock
            self._update_leds()
        elif code == _NUM_LOCK:
            self.num_lock = not self.num_lock
            self._update_leds()
        elif code == _SCROLL_LOCK:
            self.scroll_lock = not self.scroll_lock
            self._update_leds()
        elif self.left_alt or self.right_alt:
            digit = chr(_lookup(_KEYMAP_LOWER, code))
            if "0" <= digit <= "9" and len(self._alt_digits) < 3 and code in _KEYPAD:
                self._alt_digits += digit
        else:
            self._char = _lookup(self._active_map(), code)
            self._set_down(code - 1, True)

    def _active_map(self) -> str:
        if self.left_ctrl or self.right_ctrl:
            return _KEYMAP_ASCII
        shifted = self.left_shift or self.right_shift
        return _KEYMAP_UPPER if shifted != self.caps_lock else _KEYMAP_LOWER

    def _release(self, code: int) -> None:
        if not self.num_lock and code in _KEYPAD:
            self._extended = True
        if self._extended:
            self._extended = False
            self._last_scancode = code
            if code == _LEFT_CTRL:
                self.right_ctrl = False
            elif code == _ALT:
                self.right_alt = False
            else:
                self._keydown[code + 127] = False
        elif code == _LEFT_CTRL:
            self.left_ctrl = False
        elif code == _LEFT_SHIFT:
            self.left_shift = False
        elif code == _RIGHT_SHIFT:
            self.right_shift = False
        elif code == _ALT:
            self.left_alt = False
        elif code not in (_CAPS_LOCK, _NUM_LOCK, _SCROLL_LOCK):
            self._set_down(code - 1, False)
        if not (self.left_alt or self.right_alt) and self._alt_digits:
            self._char = int(self._alt_digits) % 256
            self._alt_digits = ""
            self.alt_char = True

    def read_char(self, scancodes: Iterable[int]) -> str:
        """Consume scancodes until a new character is typed and return it.

        A key that keeps repeating the same character yields it once until a
        key is released. Raises EOFError if the scancodes run out first.
        """
        codes = iter(scancodes)
        while True:
            if self._last_scancode >= RELEASE_BIT or self._last_scancode == EXTENDED_PREFIX:
                self._previous = 0
            try:
                code = next(codes)
            except StopIteration:
                raise EOFError("no more scancodes") from None
            self.handle(code)
            if self._char != self._previous and self._last_scancode < RELEASE_BIT:
                break
        self._previous = self._char
        return chr(self._char)