"""Kernel messages, version, shell settings and the kernel log."""

import sys
from collections.abc import Callable

from .colors import GREEN_ON_BLACK, RED_ON_BLACK, TRANSPARENT

OS_VERSION = "NET/4-proto"

DEFAULT_THEME = GREEN_ON_BLACK
KSH_PROMPT = "*"
KSH_COMMENT = "#"

KERNEL_INFO_ENTERED = "Booting...\n"
KERNEL_INFO_INIT_START = "Initializing...\n"
KERNEL_INFO_INIT_DONE = "Done!\n"
KERNEL_INFO_WELCOME = "Welcome to pearlOS!\n"
KERNEL_INFO_SHELL_WELCOME = (
    "                                         /$$  /$$$$$$   /$$$$$$ \n"
    "                                        | $$ /$$__  $$ /$$__  $$\n"
    "  /$$$$$$   /$$$$$$   /$$$$$$   /$$$$$$ | $$| $$  \\ $$| $$  \\__/\n"
    " /$$__  $$ /$$__  $$ |____  $$ /$$__  $$| $$| $$  | $$|  $$$$$$ \n"
    "| $$  \\ $$| $$$$$$$$  /$$$$$$$| $$  \\__/| $$| $$  | $$ \\____  $$\n"
    "| $$  | $$| $$_____/ /$$__  $$| $$      | $$| $$  | $$ /$$  \\ $$\n"
    "| $$$$$$$/|  $$$$$$$|  $$$$$$$| $$      | $$|  $$$$$$/|  $$$$$$/\n"
    "| $$____/  \\_______/ \\_______/|__/      |__/ \\______/  \\______/ \n"
    "| $$                                                            \n"
    "| $$                                                            \n"
    "|__/                                                            \n"
)
KERNEL_INFO_MANUAL_HELP = 'Type "help" to open ksh manual.\n'
KERNEL_INFO_SHELL_UNKNOWN_COMMAND = "Unknown command\n"
KERNEL_PANIC_MEMORY_INDEX_FULL = "Kernel index is full!\nCAUSE: Too many kmalloc() calls...\n"
KERNEL_PANIC_MEMORY_FULL = "Kernel memory is full!\nCAUSE: The system ran out of RAM..."
FIRMWARE_ERROR_ISR_EXCEPTION = "isr expection: "
FIRMWARE_ERROR_SMBIOS_ENTRY_MISSING = "Could not find SMBIOS entry\n"

Writer = Callable[[str, int], None]


class KernelPanic(Exception):
    """Raised when the kernel hits a fatal problem and must stop."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def _write_stdout(text: str, color: int = TRANSPARENT) -> None:
    sys.stdout.write(text)


class KernelLog:
    """Writes labelled kernel messages through ``write(text, color)``."""

    def __init__(self, write: Writer | None = None) -> None:
        self._write = write or _write_stdout

    def _emit(self, label: str, message: str, color: int = TRANSPARENT) -> None:
        self._write(f"[{label}] ", color)
        self._write(message, color)

    def info(self, message: str) -> None:
        """Log regular information."""
        self._emit("INFO", message)

    def warning(self, message: str) -> None:
        """Log a possible problem."""
        self._emit("WARNING", message)

    def error(self, message: str) -> None:
        """Log a non-fatal problem."""
        self._emit("ERROR", message)

    def panic(self, message: str) -> None:
        """Log a fatal problem in red and raise KernelPanic."""
        self._emit("PANIC", message, RED_ON_BLACK)
        raise KernelPanic(message)