"""Number and string conversion helpers used throughout the kernel."""

import math

INF = 0x7FFFFFFF
PHI = 1.61803398874989
PI = 3.14159265358979
E = 2.71828182845904

_DECIMAL_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF


def _to_base(number: int, digits: str) -> str:
    base = len(digits)
    out = []
    while True:
        number, remains = divmod(number, base)
        out.append(digits[remains])
        if number == 0:
            break
    return "".join(reversed(out))


def uint32_to_str(number: int) -> str:
    """Render an unsigned 32-bit number in decimal (wrapping like uint32)."""
    return _to_base(number & _UINT32_MASK, _DECIMAL_DIGITS)


def uint32_to_hex(number: int) -> str:
    """Render an unsigned 32-bit number in upper-case hexadecimal, no prefix."""
    return _to_base(number & _UINT32_MASK, _HEX_DIGITS)


def int_to_str(number: int) -> str:
    """Render a signed integer in decimal."""
    if number < 0:
        return "-" + _to_base(-number, _DECIMAL_DIGITS)
    return _to_base(number, _DECIMAL_DIGITS)


def digit_char(number: int) -> str:
    """Return the character for a single decimal digit, or '?' otherwise."""
    if 0 <= number <= 9:
        return _DECIMAL_DIGITS[number]
    return "?"


def is_int_char(character: str) -> bool:
    """Return False for ASCII letters, True for anything else."""
    return not ("a" <= character <= "z" or "A" <= character <= "Z")


def str_to_int(text: str) -> int:
    """Parse the last integer found in ``text``, scanning from the end.

    Raises ValueError if a letter is met before a number is complete.
    """
    number = 0
    mult = 1
    for character in reversed(text):
        if not is_int_char(character):
            raise ValueError(f"invalid integer: {text!r}")
        if character == "-":
            if number:
                return -number
            continue
        if not "0" <= character <= "9":
            if number:
                break
            continue
        number += (ord(character) - ord("0")) * mult
        mult *= 10
    return number


def char_to_hex(character: str) -> int:
    """Return the value of one hexadecimal digit."""
    if len(character) == 1 and character in "0123456789abcdefABCDEF":
        return int(character, 16)
    raise ValueError(f"not a hexadecimal digit: {character!r}")


def power(base: float, exponent: float) -> float:
    """Multiply ``base`` together while the exponent stays above zero."""
    result = 1.0
    while exponent > 0:
        result *= base
        exponent -= 1
    return result


def absolute(number: float) -> float:
    """Return the absolute value of ``number``."""
    return -number if number < 0 else number


def factorial(number: float) -> float:
    """Return the factorial of a positive whole number as a float."""
    if number < 1 or number != int(number):
        raise ValueError(f"factorial needs a positive whole number, got {number!r}")
    return float(math.factorial(int(number)))


def char_to_upper(character: str) -> str:
    """Upper-case an ASCII letter; other characters are returned unchanged."""
    if "a" <= character <= "z":
        return chr(ord(character) - ord("a") + ord("A"))
    return character


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return "".join(char_to_upper(character) for character in text)