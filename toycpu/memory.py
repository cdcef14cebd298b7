"""Byte-addressed memory shared by the processor and the test bench."""

from __future__ import annotations

from toycpu.isa import WORD_BYTES, WORD_MASK

MEMORY_SIZE = 1024


class MemoryAccessError(IndexError):
    """Raised when an access falls outside the memory."""


class Memory:
    """Zero-initialised memory holding big-endian words."""

    def __init__(self, size: int = MEMORY_SIZE) -> None:
        self._cells = bytearray(size)

    @property
    def size(self) -> int:
        return len(self._cells)

    def _check(self, address: int, length: int) -> None:
        # An access whose end reaches the last cell is rejected as well.
        if address < 0 or length < 0 or address + length >= len(self._cells):
            raise MemoryAccessError(
                f"address out of range: {address:#x} (+{length} bytes)"
            )

    def read(self, address: int, length: int) -> bytes:
        """Return ``length`` bytes starting at ``address``."""
        self._check(address, length)
        return bytes(self._cells[address : address + length])

    def write(self, address: int, data: bytes) -> None:
        """Store ``data`` starting at ``address``."""
        self._check(address, len(data))
        self._cells[address : address + len(data)] = data

    def read_word(self, address: int) -> int:
        """Read a big-endian 32-bit word."""
        return int.from_bytes(self.read(address, WORD_BYTES), "big")

    def write_word(self, address: int, value: int) -> None:
        """Write a big-endian 32-bit word, truncating ``value`` to 32 bits."""
        self.write(address, (value & WORD_MASK).to_bytes(WORD_BYTES, "big"))