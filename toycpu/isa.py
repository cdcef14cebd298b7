"""Instruction set of the toy CPU: opcodes, field layout, encoding and decoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WORD_BITS = 32
WORD_BYTES = WORD_BITS // 8
WORD_MASK = (1 << WORD_BITS) - 1

OPCODE_BITS = 4
REG_BITS = 4
ADDR_BITS = 16
ADDR_MASK = (1 << ADDR_BITS) - 1
REGISTER_COUNT = 4

_REG_MASK = (1 << REG_BITS) - 1
# Decoding keeps only the low twelve bits of an address field.
_DECODED_ADDR_MASK = 0xFFF

_OPCODE_SHIFT = WORD_BITS - OPCODE_BITS
_LOAD_REG_SHIFT = _OPCODE_SHIFT - REG_BITS
_LOAD_ADDR_SHIFT = _LOAD_REG_SHIFT - ADDR_BITS
_STORE_ADDR_SHIFT = _OPCODE_SHIFT - ADDR_BITS
_STORE_REG_SHIFT = _STORE_ADDR_SHIFT - REG_BITS
_ADD_DST_SHIFT = _OPCODE_SHIFT - REG_BITS
_ADD_SRC_SHIFT = _ADD_DST_SHIFT - REG_BITS
_ADD_SRC2_SHIFT = _ADD_SRC_SHIFT - REG_BITS


class Opcode(IntEnum):
    """Operation held in the top four bits of an instruction word."""

    LOAD = 0
    STORE = 1
    ADD = 2
    HALT = 3


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction; fields an opcode does not use stay zero."""

    opcode: Opcode
    reg_dst: int = 0
    reg_src: int = 0
    reg_src2: int = 0
    address: int = 0

    def __post_init__(self) -> None:
        try:
            opcode = Opcode(self.opcode)
        except ValueError:
            raise ValueError(f"unknown instruction opcode {self.opcode!r}") from None
        object.__setattr__(self, "opcode", opcode)

    def encode(self) -> int:
        """Pack the instruction into a 32-bit word."""
        word = int(self.opcode) << _OPCODE_SHIFT
        dst = self.reg_dst & _REG_MASK
        src = self.reg_src & _REG_MASK
        src2 = self.reg_src2 & _REG_MASK
        address = self.address & ADDR_MASK
        if self.opcode is Opcode.LOAD:
            word |= dst << _LOAD_REG_SHIFT
            word |= address << _LOAD_ADDR_SHIFT
        elif self.opcode is Opcode.STORE:
            word |= address << _STORE_ADDR_SHIFT
            word |= src << _STORE_REG_SHIFT
        elif self.opcode is Opcode.ADD:
            word |= dst << _ADD_DST_SHIFT
            word |= src << _ADD_SRC_SHIFT
            word |= src2 << _ADD_SRC2_SHIFT
        return word & WORD_MASK

    @classmethod
    def decode(cls, word: int) -> Instruction:
        """Unpack a 32-bit instruction word; unknown opcodes raise ValueError."""
        word &= WORD_MASK
        code = word >> _OPCODE_SHIFT
        try:
            opcode = Opcode(code)
        except ValueError:
            raise ValueError(f"unknown instruction opcode {code}") from None

        if opcode is Opcode.ADD:
            return cls(
                opcode,
                reg_dst=(word >> _ADD_DST_SHIFT) & _REG_MASK,
                reg_src=(word >> _ADD_SRC_SHIFT) & _REG_MASK,
                reg_src2=(word >> _ADD_SRC2_SHIFT) & _REG_MASK,
            )
        if opcode is Opcode.STORE:
            return cls(
                opcode,
                reg_src=(word >> _STORE_REG_SHIFT) & _REG_MASK,
                address=(word >> _STORE_ADDR_SHIFT) & _DECODED_ADDR_MASK,
            )
        if opcode is Opcode.LOAD:
            return cls(
                opcode,
                reg_dst=(word >> _LOAD_REG_SHIFT) & _REG_MASK,
                address=(word >> _LOAD_ADDR_SHIFT) & _DECODED_ADDR_MASK,
            )
        return cls(opcode)