# pearlkernel

A small hobby kernel that runs inside Python. It models an 80×25 text-mode
display, a scancode-driven keyboard decoder, a first-fit kernel memory
allocator, SMBIOS entry-point parsing, an in-memory sector file system and the
kernel shell that ties them together. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Running the shell

```
pearlkernel
pearlkernel --seed 42
```

This boots the kernel, prints the boot messages and the banner, and leaves you
at the `*` prompt. Input is read from standard input one character at a time
and everything drawn on the simulated screen is also written to standard
output. `--seed` fixes the seed of the random generator used by `random` and
`fortune`.

Type `help` for the list of commands:

- `echo`, `calc`, `random`, `fortune`, `loop`
- `ls`, `mk`, `rm`, `cat`, `to` for the file system
- `memstat`, `memalloc` for the kernel allocator
- `theme-light`, `theme-dark`, `theme-pascal`, `hacker`
- `version`, `pearlfetch`, `panic`, `wipe`, `exit`

Lines starting with `#` are ignored. The shell stops on `exit` or at the end
of input (exit status 0); `panic` stops it with a kernel panic (exit status 1).
The file system starts with the files `os-release` and `readme`.

## Using the pieces

Each module can be used on its own:

```python
from pearlkernel.colors import GREEN_ON_BLACK, Color, attribute
from pearlkernel.display import Display
from pearlkernel.fs import FileSystem
from pearlkernel.memory import KernelMemory

fs = FileSystem()
fs.make("notes")
fs.write("notes", b"hello\n")
print(fs.read("notes")[:6])        # b'hello\n'

memory = KernelMemory()
address = memory.kmalloc(255)
print(memory.usage())              # 255
memory.kfree(address)

screen = Display()
screen.put("hello", GREEN_ON_BLACK)
print(screen.row_text(0))          # hello
print(attribute(Color.WHITE, Color.BLUE))  # 31
```

Modules:

- `pearlkernel.conv` – number/string conversions (`uint32_to_str`,
  `uint32_to_hex`, `int_to_str`, `str_to_int`, `char_to_hex`, `to_upper`, …)
  and `power`, `absolute`, `factorial`.
- `pearlkernel.rand` – `lcg` and the seeded `Random` generator.
- `pearlkernel.colors` – the `Color` enum and `attribute(foreground, background)`.
- `pearlkernel.memory` – `KernelMemory` with `kmalloc`, `kfree`, `usage`,
  `usage_effective` and `total`.
- `pearlkernel.display` – `Display`, a text screen with cursor, scrolling and themes.
- `pearlkernel.keyboard` – `Keyboard`, which turns set-1 scancodes into
  characters (`handle`, `read_char`), tracking modifiers, lock keys and
  Alt+keypad codes; LED updates are recorded in `Keyboard.commands`.
- `pearlkernel.smbios` – `find_entry_point` and `read_bios_info` over a byte
  image of firmware memory, returning a `BiosInfo`.
- `pearlkernel.fs` – `FileSystem` with `make`, `remove`, `exists`, `names`,
  `size`, `read`, `write`, `clean`, plus `is_valid_name` and `install_defaults`.
- `pearlkernel.messages` – kernel message texts, `OS_VERSION` and `KernelLog`.
- `pearlkernel.console` – `Console`, line input and text/number output on a display.
- `pearlkernel.shell` – `Shell`, `boot` and the `main` command.

Errors are raised as exceptions: `FileMissingError`, `FileAlreadyExistsError`,
`FileNameInvalidError` and `FileCountExceededError` (all `FileSystemError`)
from `pearlkernel.fs`, `MemoryFullError` and `MemoryIndexFullError` from
`pearlkernel.memory`, `SmbiosError` from `pearlkernel.smbios`, and
`KernelPanic` from `pearlkernel.messages`.

## What it does not do

Nothing here touches real hardware. The display is an in-memory buffer, the
keyboard decoder only sees scancodes you pass to it, and the `pearlkernel`
command reads ordinary characters from standard input rather than scancodes.
It does not scan firmware memory, so `pearlfetch` reports the BIOS name and
version as `unknown` unless a `Shell` is built with a `BiosInfo`. Files live
only in memory and are lost when the program ends.