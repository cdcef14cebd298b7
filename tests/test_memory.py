import pytest

from toycpu.memory import MEMORY_SIZE, Memory, MemoryAccessError


def test_fresh_memory_is_zeroed():
    memory = Memory()
    assert memory.read(0, 8) == bytes(8)
    assert memory.size == MEMORY_SIZE


def test_write_then_read_word():
    memory = Memory()
    memory.write_word(0, 0xAAAAA)
    assert memory.read_word(0) == 0xAAAAA


def test_words_are_big_endian():
    memory = Memory()
    memory.write_word(0, 0x01020304)
    assert memory.read(0, 4) == b"\x01\x02\x03\x04"


def test_raw_bytes_round_trip():
    memory = Memory()
    memory.write(100, b"hello")
    assert memory.read(100, 5) == b"hello"


def test_read_past_end_raises():
    memory = Memory()
    with pytest.raises(MemoryAccessError):
        memory.read(MEMORY_SIZE + 1, 4)


def test_access_error_is_index_error():
    memory = Memory()
    with pytest.raises(IndexError):
        memory.read_word(MEMORY_SIZE + 1)


def test_access_reaching_last_cell_is_rejected():
    memory = Memory()
    with pytest.raises(MemoryAccessError):
        memory.read(MEMORY_SIZE - 4, 4)
    assert memory.read(MEMORY_SIZE - 5, 4) == bytes(4)


def test_negative_address_rejected():
    memory = Memory()
    with pytest.raises(MemoryAccessError):
        memory.write(-1, b"\x01")


def test_failed_write_leaves_memory_unchanged():
    memory = Memory()
    with pytest.raises(MemoryAccessError):
        memory.write(MEMORY_SIZE - 2, b"\xff\xff\xff")
    assert memory.read(MEMORY_SIZE - 3, 2) == bytes(2)


def test_write_word_truncates_to_32_bits():
    memory = Memory()
    memory.write_word(8, (1 << 32) | 5)
    assert memory.read_word(8) == 5


def test_custom_size():
    memory = Memory(size=16)
    memory.write_word(4, 7)
    assert memory.read_word(4) == 7
    with pytest.raises(MemoryAccessError):
        memory.read_word(12)