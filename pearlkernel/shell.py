"""The kernel shell and the boot sequence that starts it."""

import argparse
import sys
from collections.abc import Callable
from enum import IntEnum
from typing import TextIO

from .colors import (
    BLACK_ON_WHITE,
    GREEN_ON_BLACK,
    RED_ON_BLACK,
    TRANSPARENT,
    WHITE_ON_BLACK,
    WHITE_ON_BLUE,
)
from .console import Console
from .conv import power, str_to_int
from .display import Display
from .fs import (
    FS_FILE_NAME_VALID_CHARS,
    FileAlreadyExistsError,
    FileCountExceededError,
    FileMissingError,
    FileNameInvalidError,
    FileSystem,
    install_defaults,
)
from .memory import KernelMemory
from .messages import (
    DEFAULT_THEME,
    KERNEL_INFO_ENTERED,
    KERNEL_INFO_INIT_DONE,
    KERNEL_INFO_INIT_START,
    KERNEL_INFO_MANUAL_HELP,
    KERNEL_INFO_SHELL_UNKNOWN_COMMAND,
    KERNEL_INFO_SHELL_WELCOME,
    KERNEL_INFO_WELCOME,
    KSH_COMMENT,
    KSH_PROMPT,
    KernelLog,
    KernelPanic,
    OS_VERSION,
)
from .rand import Random
from .smbios import BiosInfo

SCRATCH_SIZE = 255
FILE_NAME_SCRATCH = 256
MAKE_FILE_SCRATCH = 512
LOOP_COMMANDS = 10
DEFAULT_THEME_NAME = "Hacker >:D"

HELP_TEXT = (
    "help           prints this message\n"
    'echo           prints "X" to the display\n'
    "wipe           clears screen\n"
    'loop           loop command "X" times\n'
    "exit           exit kernel shell\n"
    "fortune        digital fortune cookie\n"
    "version        get kernel version\n"
    "pearlfetch     show info about your system\n"
    "calc           simple calculator\n"
    "theme-light    changes the theme to a light theme\n"
    "theme-dark     changes the theme to a dark theme\n"
    "theme-pascal   changes the theme to pascal\n"
    "hacker         changes the theme back to hacker >:D\n"
    "memstat        get allocated memory usage\n"
    "memalloc       allocate memory for test\n"
    "random         get random number between 0-100\n"
    "panic          invoke debug kernel panic\n"
    "ls             list all files\n"
    "mk             create new file\n"
    "rm             delete file\n"
    "cat            read file content\n"
    "to             write to file\n"
)

FORTUNES = (
    "Pohl's Law: Nothing is so good that somebody, somewhere, will not hate it.\n",
    "You either die a smart fella, or live long enough to become a fart smella\n",
    "Everyone asked you about your favorite dinosaur as a kid, now, nobody cares\n",
    "3rd Law of Computing:\n"
    "    Anything that can go wr\n"
    "fortune: Segmentation violation -- Core dumped\n",
    "Experience, n.:\n"
    "    Something you don't get until just after you need it.\n"
    "        -- Olivier\n",
    "Famous quotations:\n\n"
    '    " "\n'
    "        -- Charlie Chaplin\n\n"
    '    " "\n'
    "        -- Harpo Marx\n\n"
    '    " "\n'
    "        -- Marcel Marceau\n",
    "Ginsberg's Theorem:\n"
    "   (1) You can't win.\n"
    "   (2) You can't break even.\n"
    "   (3) You can't even quit the game.\n\n"
    "Freeman's Commentary on Ginsberg's theorem:\n"
    "   Every major philosophy that attempts to make life seem\n"
    "   meaningful is based on the negation of one part of Ginsberg's\n"
    "   Theorem. To wit:\n\n"
    "   (1) Capitalism is based on the assumption that you can win.\n"
    "   (2) Socialism is based on the assumption that you can break even.\n"
    "   (3) Mysticism is based on the assumption that you can quit the game.\n",
)

PEARL_ART = (
    "           _.-''|''-._\n"
    "        .-'     |     `-.\n"
    "      .'\\       |       /`.\n"
    "    .'   \\      |      /   `.\n"
    "    \\     \\     |     /     /\n"
    "     `\\    \\    |    /    /'\n"
    "       `\\   \\   |   /   /'\n"
    "         `\\  \\  |  /  /'\n"
    "        _.-`\\ \\ | / /'-._\n"
    "       {_____`\\\\|//'_____}\n"
    "               `-'\n"
)


class ShellStatus(IntEnum):
    """What a command asks the shell to do next."""

    OK = 0
    EXIT = 1


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class Shell:
    """The kernel's interactive command interpreter."""

    def __init__(
        self,
        console: Console,
        filesystem: FileSystem | None = None,
        memory: KernelMemory | None = None,
        random: Random | None = None,
        bios: BiosInfo | None = None,
    ) -> None:
        self.console = console
        self.filesystem = filesystem if filesystem is not None else FileSystem()
        self.memory = memory if memory is not None else KernelMemory()
        self.random = random if random is not None else Random()
        self.bios = bios
        self.theme = DEFAULT_THEME_NAME
        self._log = KernelLog(console.cputs)
        self._commands: dict[str, Callable[[], ShellStatus | None]] = {
            "help": self._help,
            "echo": self._echo,
            "loop": self._loop,
            "wipe": self._wipe,
            "version": self._version,
            "memstat": self._memstat,
            "theme-light": lambda: self._set_theme(BLACK_ON_WHITE, "Generic light"),
            "theme-dark": lambda: self._set_theme(WHITE_ON_BLACK, "Generic dark"),
            "hacker": self._hacker,
            "exit": self._exit,
            "fortune": self._fortune,
            "calc": self._calc,
            "memalloc": self._memalloc,
            "theme-pascal": lambda: self._set_theme(WHITE_ON_BLUE, "Generic pascal"),
            "pearlfetch": self._pearlfetch,
            "ls": self._list_files,
            "mk": self._make_file,
            "rm": self._remove_file,
            "cat": self._read_file,
            "to": self._write_to_file,
            "random": self._random,
            "panic": self._panic,
        }

    # helpers

    def _allocate(self, size: int) -> int:
        try:
            return self.memory.kmalloc(size)
        except MemoryError as error:
            self._log.panic(str(error))
            raise  # unreachable: panic always raises

    def _prompt(self, prompt: str) -> str:
        self.console.puts(prompt)
        return self.console.scan()

    def _invalid_number(self) -> None:
        self.console.puts("Invalid number.")
        self.console.putc("\n")

    def _parse_number(self, text: str) -> int | None:
        try:
            return str_to_int(text)
        except ValueError:
            return None

    # commands

    def _help(self) -> None:
        self.console.puts(HELP_TEXT)

    def _echo(self) -> None:
        self._allocate(SCRATCH_SIZE)
        text = self._prompt("> ")
        self.console.puts(text)
        self.console.putc("\n")

    def _loop(self) -> ShellStatus | None:
        """Read ten commands and run each once plus the given number of repeats."""
        self._allocate(SCRATCH_SIZE)
        times = self._parse_number(self._prompt("t> "))
        if times is None:
            self._invalid_number()
            return None
        commands = []
        for _ in range(LOOP_COMMANDS):
            self._allocate(SCRATCH_SIZE)
            commands.append(self._prompt("c> "))
        for command in commands:
            self.console.puts(command)
            for _ in range(max(times, 0) + 1):
                if self.interpret(command) is ShellStatus.EXIT:
                    return ShellStatus.EXIT
        return None

    def _wipe(self) -> None:
        self.console.display.clear()

    def _version(self) -> None:
        self.console.puts("pearlOS\n")
        self.console.puts("Version: ")
        self.console.puts(OS_VERSION)
        self.console.putc("\n")

    def _memstat(self) -> None:
        self.console.puts("Memory usage:")
        self.console.puts("\ntotal: ")
        self.console.putu(self.memory.usage())
        self.console.puts("\neffective: ")
        self.console.putu(self.memory.usage_effective())
        self.console.putc("\n")

    def _set_theme(self, color: int, name: str) -> None:
        self.console.display.set_theme(color)
        self.theme = name

    def _hacker(self) -> None:
        self._set_theme(GREEN_ON_BLACK, DEFAULT_THEME_NAME)
        self.console.cputs("You are a hacker now! >:D\n", RED_ON_BLACK)

    def _exit(self) -> ShellStatus:
        self.console.display.clear()
        return ShellStatus.EXIT

    def _fortune(self) -> None:
        self.console.puts(FORTUNES[self.random.rand() % len(FORTUNES)])

    def _calc(self) -> None:
        for _ in range(3):
            self._allocate(SCRATCH_SIZE)
        first = self._prompt("num> ")
        second = self._prompt("num> ")
        operator = self._prompt("op> ")
        n1 = self._parse_number(first)
        n2 = self._parse_number(second)
        if n1 is None or n2 is None:
            self._invalid_number()
            return
        if operator == "+":
            result = n1 + n2
        elif operator == "-":
            result = n1 - n2
        elif operator == "*":
            result = n1 * n2
        elif operator == "/":
            if n2 == 0:
                self.console.puts("Division by zero.\n")
                return
            result = _truncating_divide(n1, n2)
        elif operator == "^":
            result = int(power(n1, n2))
        else:
            self.console.puts("Invalid operator.")
            self.console.putc("\n")
            return
        self.console.putu(result)
        self.console.putc("\n")

    def _memalloc(self) -> None:
        self._allocate(SCRATCH_SIZE)
        size = self._parse_number(self._prompt("> "))
        if size is None or size < 0:
            self._invalid_number()
            return
        self._allocate(size)

    def _pearlfetch(self) -> None:
        puts = self.console.puts
        self.console.putc("\n")
        puts(PEARL_ART)
        puts("OS: pearlOS ")
        puts(OS_VERSION)
        self.console.putc("\n")
        puts("BIOS name: ")
        puts(self.bios.name if self.bios else "unknown")
        self.console.putc("\n")
        puts("BIOS version:")
        puts(self.bios.version if self.bios else "unknown")
        self.console.putc("\n")
        puts("Memory: ")
        self.console.putu(self.memory.usage())
        puts("/")
        self.console.putu(self.memory.total())
        self.console.putc("\n")
        puts("Theme: ")
        puts(self.theme)
        self.console.putc("\n")

    def _list_files(self) -> None:
        for name in self.filesystem.names():
            self.console.puts(name)
            self.console.putc("\n")

    def _make_file(self) -> None:
        scratch = self._allocate(MAKE_FILE_SCRATCH)
        name = self._prompt("> ")
        try:
            self.filesystem.make(name)
        except FileAlreadyExistsError:
            self.console.puts("File already exists!\n")
        except FileNameInvalidError:
            self.console.puts("File name can only contain the following characters:\n")
            self.console.puts(FS_FILE_NAME_VALID_CHARS)
            self.console.putc("\n")
        except FileCountExceededError:
            self.console.puts("There are too many files!\n")
        self.memory.kfree(scratch)

    def _remove_file(self) -> None:
        name = self._prompt("> ")
        try:
            self.filesystem.remove(name)
        except FileMissingError:
            self.console.puts("File not found!")
            self.console.putc("\n")

    def _read_file(self) -> None:
        scratch = self._allocate(FILE_NAME_SCRATCH)
        name = self._prompt("> ")
        if not self.filesystem.exists(name):
            self.console.puts("File not found\n")
        else:
            buffer = self._allocate(self.filesystem.size(name))
            self.console.puts(self.filesystem.read(name).decode("latin-1"))
            self.memory.kfree(buffer)
        self.memory.kfree(scratch)

    def _write_to_file(self) -> None:
        name_scratch = self._allocate(FILE_NAME_SCRATCH)
        name = self._prompt("> ")
        data_scratch = self._allocate(FILE_NAME_SCRATCH)
        data = self._prompt("> ") + "\n"
        try:
            self.filesystem.clean(name)
            self.filesystem.write(name, data)
        except FileMissingError:
            self.console.puts("File not found!\n")
        self.memory.kfree(name_scratch)
        self.memory.kfree(data_scratch)

    def _random(self) -> None:
        self.console.putu(self.random.rand() % 100)
        self.console.putc("\n")

    def _panic(self) -> None:
        self._allocate(SCRATCH_SIZE)
        message = self._prompt("> ")
        self._log.panic(message)

    # public interface

    def interpret(self, command: str) -> ShellStatus:
        """Run one command line and report whether the shell should go on."""
        if not command or command.startswith(KSH_COMMENT):
            return ShellStatus.OK
        handler = self._commands.get(command)
        if handler is None:
            self.console.puts(KERNEL_INFO_SHELL_UNKNOWN_COMMAND)
            return ShellStatus.OK
        return handler() or ShellStatus.OK

    def start(self) -> None:
        """Greet the user and run commands until ``exit`` or the end of input."""
        self.theme = DEFAULT_THEME_NAME
        self.console.puts(KERNEL_INFO_SHELL_WELCOME)
        self.console.puts(KERNEL_INFO_MANUAL_HELP)
        while True:
            self.console.puts(KSH_PROMPT + " ")
            try:
                command = self.console.scan()
            except EOFError:
                return
            if self.interpret(command) is ShellStatus.EXIT:
                return


def boot(console: Console, bios: BiosInfo | None = None) -> Shell:
    """Initialise the kernel's subsystems and return the shell ready to start."""
    log = KernelLog(console.cputs)
    log.info(KERNEL_INFO_ENTERED)
    log.info(KERNEL_INFO_INIT_START)
    console.display.set_theme(DEFAULT_THEME)
    memory = KernelMemory()
    filesystem = FileSystem()
    install_defaults(filesystem)
    shell = Shell(console, filesystem, memory, Random(), bios)
    log.info(KERNEL_INFO_INIT_DONE)
    log.info(KERNEL_INFO_WELCOME)
    return shell


class _MirroredDisplay(Display):
    """A display that also streams what is drawn to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        super().__init__()

    def put_char(self, character: str, color: int = TRANSPARENT) -> None:
        self._stream.write(character)
        super().put_char(character, color)

    def delete_char(self) -> None:
        self._stream.write("\b \b")
        super().delete_char()


def main(argv: list[str] | None = None) -> int:
    """Boot the kernel and run its shell on standard input and output."""
    parser = argparse.ArgumentParser(prog="pearlkernel", description="Run the kernel shell.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    stdout = sys.stdout

    def read_char() -> str:
        stdout.flush()
        character = sys.stdin.read(1)
        if not character:
            raise EOFError("end of input")
        return character

    console = Console(_MirroredDisplay(stdout), read_char)
    try:
        shell = boot(console, None)
        if args.seed is not None:
            shell.random = Random(args.seed)
        shell.start()
    except KernelPanic:
        stdout.write("\n")
        stdout.flush()
        return 1
    stdout.flush()
    return 0