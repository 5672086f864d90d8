"""A simulated hobby kernel: display, keyboard, memory, SMBIOS, file system and shell."""

__version__ = "0.1.0"