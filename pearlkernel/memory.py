"""The kernel's page-index memory allocator.

The index holds pairs of (page start, page end); the first pair marks the
start of the heap and is never handed out or freed.
"""

KERNEL_MEMORY_OFFSET_START = 0xFFFFFF
KERNEL_MEMORY_OFFSET_END = 0xFFFFFFFF
MEMORY_INDEX_BASE_SIZE = 10000
MEMORY_EMPTY = 0

KERNEL_PANIC_MEMORY_INDEX_FULL = "Kernel index is full!\nCAUSE: Too many kmalloc() calls...\n"
KERNEL_PANIC_MEMORY_FULL = "Kernel memory is full!\nCAUSE: The system ran out of RAM..."


class MemoryFullError(MemoryError):
    """Raised when no gap in the heap is large enough."""


class MemoryIndexFullError(MemoryError):
    """Raised when the page index has no free slot left."""


class KernelMemory:
    """First-fit allocator over an address range, tracked in a fixed index."""

    def __init__(
        self,
        start: int = KERNEL_MEMORY_OFFSET_START,
        end: int = KERNEL_MEMORY_OFFSET_END,
        index_size: int = MEMORY_INDEX_BASE_SIZE,
    ) -> None:
        if end <= start:
            raise ValueError("memory end must lie above its start")
        if index_size < 2:
            raise ValueError("index needs room for at least one pair")
        self.start = start
        self.end = end
        self._index = [MEMORY_EMPTY] * index_size
        self._index[0] = start
        self._index[1] = start

    def _page_slots(self) -> range:
        return range(2, len(self._index) - 1, 2)

    def _used_slots(self):
        return (slot for slot in self._page_slots() if self._index[slot] != MEMORY_EMPTY)

    def _next_free_slot(self, slot: int) -> int:
        for candidate in range(slot, len(self._index) - 1, 2):
            if self._index[candidate] == MEMORY_EMPTY:
                return candidate
        raise MemoryIndexFullError(KERNEL_PANIC_MEMORY_INDEX_FULL)

    def _next_used_slot(self, slot: int) -> int | None:
        for candidate in range(slot + 2, len(self._index) - 1, 2):
            if self._index[candidate] != MEMORY_EMPTY:
                return candidate
        return None

    def kmalloc(self, size: int) -> int:
        """Reserve ``size`` bytes and return the address of the new page."""
        if size < 0:
            raise ValueError("size must not be negative")
        slot = 2
        while True:
            slot = self._next_free_slot(slot)
            last_end = self._index[slot - 1]
            next_slot = self._next_used_slot(slot)
            next_start = self.end if next_slot is None else self._index[next_slot]
            if next_start - last_end > size:
                address = last_end + 1
                if address + size >= self.end:
                    raise MemoryFullError(KERNEL_PANIC_MEMORY_FULL)
                self._index[slot] = address
                self._index[slot + 1] = address + size
                return address
            if next_slot is None:
                raise MemoryFullError(KERNEL_PANIC_MEMORY_FULL)
            slot = next_slot

    def kfree(self, address: int) -> None:
        """Release the page that starts at ``address``."""
        if address != MEMORY_EMPTY:
            for slot in self._used_slots():
                if self._index[slot] == address:
                    self._index[slot] = MEMORY_EMPTY
                    self._index[slot + 1] = MEMORY_EMPTY
                    return
        raise ValueError(f"no page starts at {address:#x}")

    def usage(self) -> int:
        """Total size of the pages currently allocated."""
        return sum(self._index[slot + 1] - self._index[slot] for slot in self._used_slots())

    def usage_effective(self) -> int:
        """Extent of the heap in use, up to the highest page end, freed gaps included."""
        highest = max(
            (self._index[slot + 1] for slot in self._used_slots()),
            default=self.start + 1,
        )
        return highest - (self.start + 1)

    def total(self) -> int:
        """Size of the whole managed range."""
        return self.end - self.start