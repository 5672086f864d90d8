"""Locating the SMBIOS entry point and reading the BIOS strings."""

import struct
from dataclasses import dataclass

SMBIOS_SEARCH_START = 0xF0000
SMBIOS_SEARCH_END = 0x100000
ENTRY_ANCHOR = b"_SM_"
FIRMWARE_ERROR_SMBIOS_ENTRY_MISSING = "Could not find SMBIOS entry\n"

_ENTRY = struct.Struct("<4sBBBBHB5s5sBHIHB")


class SmbiosError(Exception):
    """Raised when SMBIOS data cannot be found or is malformed."""


@dataclass(frozen=True)
class BiosInfo:
    """BIOS details read from the first SMBIOS structure."""

    name: str
    version: str
    major_version: int
    minor_version: int
    table_address: int


def table_length(data: bytes, offset: int) -> int:
    """Length of the structure at ``offset``, its string table included."""
    length = data[offset + 1]
    strings = offset + length
    end = data.find(b"\x00\x00", strings)
    if end < 0:
        raise SmbiosError("unterminated string table")
    return length + end - strings + 2


def next_string(data: bytes, offset: int) -> int:
    """Offset of the string that follows the one starting at ``offset``."""
    end = data.find(b"\x00", offset)
    if end < 0:
        raise SmbiosError("unterminated string")
    return end + 1


def _read_string(data: bytes, offset: int) -> str:
    return bytes(data[offset:next_string(data, offset) - 1]).decode("latin-1")


def find_entry_point(memory: bytes, base: int = SMBIOS_SEARCH_START) -> int:
    """Address of the first valid entry point on a 16-byte boundary.

    ``memory`` holds the bytes found at addresses from ``base`` upward.
    """
    for address in range(base, SMBIOS_SEARCH_END, 16):
        offset = address - base
        if offset + 6 > len(memory):
            break
        if memory[offset:offset + 4] != ENTRY_ANCHOR:
            continue
        length = memory[offset + 5]
        entry = memory[offset:offset + length]
        if len(entry) == length and sum(entry) & 0xFF == 0:
            return address
    raise SmbiosError(FIRMWARE_ERROR_SMBIOS_ENTRY_MISSING.strip())


def read_bios_info(memory: bytes, base: int = SMBIOS_SEARCH_START) -> BiosInfo:
    """Read the BIOS strings from the structure the entry point points at.

    The first string of that structure is reported as the version and the
    second as the name.
    """
    address = find_entry_point(memory, base)
    offset = address - base
    if offset + _ENTRY.size > len(memory):
        raise SmbiosError("entry point is truncated")
    fields = _ENTRY.unpack_from(memory, offset)
    major, minor, table_address = fields[3], fields[4], fields[11]
    header = table_address - base
    if not 0 <= header < len(memory) - 4:
        raise SmbiosError(f"structure table at {table_address:#x} lies outside memory")
    strings = header + memory[header + 1]
    version = _read_string(memory, strings)
    name = _read_string(memory, next_string(memory, strings))
    return BiosInfo(
        name=name,
        version=version,
        major_version=major,
        minor_version=minor,
        table_address=table_address,
    )