"""A small in-memory file system made of fixed-size sectors."""

from dataclasses import dataclass, field

from .messages import OS_VERSION

FS_SECTOR_SIZE = 512
FS_MAX_FILE_COUNT = 1000
FS_FILE_NAME_BUFFER = 512
FS_FILE_TAGS_BUFFER = 512
FS_FILE_NAME_VALID_CHARS = (
    "qwertyuiopasdfghjklzxcvbnm1234567890QWERTYUIOPASDFGHJKLZXCVBNM.-_"
)

# Each sector keeps a 32-bit link to the next one; the rest holds data.
_SECTOR_LINK_SIZE = 4
FS_SECTOR_DATA_SIZE = FS_SECTOR_SIZE - _SECTOR_LINK_SIZE


class FileSystemError(Exception):
    """Base class for file system failures."""


class FileMissingError(FileSystemError):
    """Raised when a named file does not exist."""


class FileAlreadyExistsError(FileSystemError):
    """Raised when creating a file whose name is taken."""


class FileNameInvalidError(FileSystemError):
    """Raised when a file name holds characters outside the allowed set."""


class FileCountExceededError(FileSystemError):
    """Raised when no more files can be created."""


def is_valid_name(name: str) -> bool:
    """Whether every character of ``name`` is allowed in a file name."""
    return all(character in FS_FILE_NAME_VALID_CHARS for character in name)


def _new_sector() -> bytearray:
    return bytearray(FS_SECTOR_DATA_SIZE)


@dataclass
class _File:
    name: str
    tags: str = ""
    sectors: list[bytearray] = field(default_factory=lambda: [_new_sector()])


class FileSystem:
    """Files kept as chains of sectors, listed in the order they were made.

    Slots of removed files are not reused, so the limit on the number of
    files counts every file ever made.
    """

    def __init__(self) -> None:
        self._files: dict[str, _File] = {}
        self._slots_used = 0

    def _get(self, name: str) -> _File:
        try:
            return self._files[name]
        except KeyError:
            raise FileMissingError(f"file not found: {name!r}") from None

    def make(self, name: str) -> None:
        """Create an empty file called ``name``."""
        if self._slots_used > FS_MAX_FILE_COUNT:
            raise FileCountExceededError("There are too many files!")
        if name in self._files:
            raise FileAlreadyExistsError(f"file already exists: {name!r}")
        if not is_valid_name(name) or len(name) >= FS_FILE_NAME_BUFFER:
            raise FileNameInvalidError(f"invalid file name: {name!r}")
        self._files[name] = _File(name)
        self._slots_used += 1

    def remove(self, name: str) -> None:
        """Delete the file called ``name`` and its sectors."""
        self._get(name)
        del self._files[name]

    def exists(self, name: str) -> bool:
        """Whether a file called ``name`` exists."""
        return name in self._files

    def names(self) -> list[str]:
        """Names of all files, oldest first."""
        return list(self._files)

    def size(self, name: str) -> int:
        """Storage taken by the file: the data size of all its sectors."""
        return len(self._get(name).sectors) * FS_SECTOR_DATA_SIZE

    def read(self, name: str) -> bytes:
        """Return the full contents of every sector of the file."""
        return b"".join(bytes(sector) for sector in self._get(name).sectors)

    def write(self, name: str, data: bytes | str) -> None:
        """Write ``data`` from the start of the file, adding sectors as needed.

        Bytes past the end of ``data`` are left as they were.
        """
        file = self._get(name)
        payload = data.encode("latin-1") if isinstance(data, str) else bytes(data)
        for index, start in enumerate(range(0, len(payload), FS_SECTOR_DATA_SIZE)):
            chunk = payload[start:start + FS_SECTOR_DATA_SIZE]
            if index >= len(file.sectors):
                file.sectors.append(_new_sector())
            file.sectors[index][:len(chunk)] = chunk

    def clean(self, name: str) -> None:
        """Zero every sector of the file."""
        for sector in self._get(name).sectors:
            sector[:] = bytes(FS_SECTOR_DATA_SIZE)


def install_defaults(filesystem: FileSystem) -> None:
    """Create the files every fresh system starts with."""
    filesystem.make("os-release")
    filesystem.write(
        "os-release",
        'NAME="pearlOS"\n'
        f'VERSION="{OS_VERSION}"\n'
        f'PRETTY_NAME="pearlOS {OS_VERSION}"\n',
    )
    filesystem.make("readme")
    filesystem.write(
        "readme",
        "Thank you for using pearlOS! Many, many thanks!\n"
        'If you\'ve got any questions, type "help" to open\n'
        "the KSH manual.\n"
        "And with that, enjoy the OS!\n",
    )