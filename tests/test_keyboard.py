import pytest

from pearlkernel.keyboard import LED_COMMAND, Keyboard

KEY_A = 0x1E
KEY_C = 0x2E
LEFT_SHIFT = 0x2A
LEFT_CTRL = 0x1D
LEFT_ALT = 0x38
CAPS = 0x3A
NUM = 0x45
RELEASE = 0x80


def test_plain_letter():
    keyboard = Keyboard()
    assert keyboard.handle(KEY_A) == "a"


def test_shift_gives_upper_case():
    plain = Keyboard().handle(KEY_A)
    keyboard = Keyboard()
    keyboard.handle(LEFT_SHIFT)
    assert keyboard.handle(KEY_A) == plain.upper()
    keyboard.handle(LEFT_SHIFT | RELEASE)
    assert keyboard.handle(KEY_A) == plain


def test_caps_lock_inverts_shift():
    keyboard = Keyboard()
    shifted = Keyboard()
    shifted.handle(LEFT_SHIFT)
    upper = shifted.handle(KEY_A)
    keyboard.handle(CAPS)
    assert keyboard.handle(KEY_A) == upper
    keyboard.handle(LEFT_SHIFT)
    assert keyboard.handle(KEY_A) == Keyboard().handle(KEY_A)


def test_ctrl_gives_control_code():
    keyboard = Keyboard()
    keyboard.handle(LEFT_CTRL)
    assert keyboard.handle(KEY_C) == "\x03"


def test_modifier_press_produces_nothing():
    keyboard = Keyboard()
    assert keyboard.handle(LEFT_SHIFT) is None
    assert keyboard.left_shift is True


def test_alt_keypad_code():
    keyboard = Keyboard()
    keyboard.handle(LEFT_ALT)
    for code in (0x4D, 0x4D | RELEASE, 0x4C, 0x4C | RELEASE):
        assert keyboard.handle(code) is None
    assert keyboard.handle(LEFT_ALT | RELEASE) == chr(65)
    assert keyboard.alt_char is True


def test_is_down_tracks_press_and_release():
    keyboard = Keyboard()
    keyboard.handle(KEY_A)
    assert keyboard.is_down(KEY_A - 1) is True
    keyboard.handle(KEY_A | RELEASE)
    assert keyboard.is_down(KEY_A - 1) is False


def test_extended_key_uses_special_map():
    keyboard = Keyboard()
    keyboard.handle(0xE0)
    arrow = keyboard.handle(0x48)
    assert arrow == "\x8c"
    assert keyboard.is_down(0x48 + 127) is True
    keyboard.handle(0xE0)
    keyboard.handle(0x48 | RELEASE)
    assert keyboard.is_down(0x48 + 127) is False


def test_keypad_without_num_lock_acts_extended():
    extended = Keyboard()
    extended.handle(0xE0)
    expected = extended.handle(0x48)
    keyboard = Keyboard()
    keyboard.handle(NUM)
    assert keyboard.num_lock is False
    assert keyboard.handle(0x48) == expected


def test_keypad_with_num_lock_gives_digit():
    keyboard = Keyboard()
    assert keyboard.handle(0x48) == "8"


def test_leds_follow_locks_and_are_sent():
    keyboard = Keyboard()
    initial = keyboard.leds()
    assert keyboard.commands == [LED_COMMAND, initial]
    keyboard.handle(CAPS)
    assert keyboard.leds() == initial | 4
    assert keyboard.commands[-2:] == [LED_COMMAND, keyboard.leds()]
    keyboard.handle(CAPS | RELEASE)
    keyboard.handle(CAPS)
    assert keyboard.leds() == initial


def test_read_char_suppresses_repeat_until_release():
    keyboard = Keyboard()
    codes = iter([KEY_A, KEY_A, KEY_A, KEY_A | RELEASE, KEY_A])
    first = keyboard.read_char(codes)
    second = keyboard.read_char(codes)
    assert first == second == Keyboard().handle(KEY_A)
    assert list(codes) == []


def test_read_char_raises_when_exhausted():
    keyboard = Keyboard()
    codes = iter([KEY_A, KEY_A])
    keyboard.read_char(codes)
    with pytest.raises(EOFError):
        keyboard.read_char(codes)


def test_read_char_skips_modifiers():
    keyboard = Keyboard()
    shifted = Keyboard()
    shifted.handle(LEFT_SHIFT)
    expected = shifted.handle(KEY_A)
    assert keyboard.read_char([LEFT_SHIFT, KEY_A]) == expected


@pytest.mark.parametrize("scancode", [-1, 256])
def test_handle_rejects_out_of_range(scancode):
    with pytest.raises(ValueError):
        Keyboard().handle(scancode)