"""A four-register processor fetching instructions from memory."""

from __future__ import annotations

from typing import Callable

from toycpu.isa import ADDR_MASK, REGISTER_COUNT, WORD_BYTES, WORD_MASK, Instruction, Opcode
from toycpu.memory import Memory

DEFAULT_CYCLES = 12_500


class Processor:
    """Executes one instruction per clock cycle while running."""

    def __init__(self, memory: Memory, trace: Callable[[str], object] | None = None) -> None:
        self.memory = memory
        self.registers = [0] * REGISTER_COUNT
        self.pc = 0
        self.running = False
        self._trace = trace

    def reset(self) -> None:
        """Stop execution and clear the program counter; registers are kept."""
        self.running = False
        self.pc = 0

    def start(self, address: int) -> None:
        """Begin execution at ``address``."""
        self.pc = address & ADDR_MASK
        self.running = True

    def _register(self, index: int) -> int:
        if not 0 <= index < len(self.registers):
            raise IndexError(f"register R{index} does not exist")
        return index

    def step(self) -> bool:
        """Run one clock cycle; return whether an instruction was executed."""
        if not self.running:
            return False

        word = self.memory.read_word(self.pc)
        try:
            inst = Instruction.decode(word)
        except ValueError:
            self.running = False
            raise
        self.pc = (self.pc + WORD_BYTES) & ADDR_MASK

        if inst.opcode is Opcode.LOAD:
            dst = self._register(inst.reg_dst)
            self.registers[dst] = self.memory.read_word(inst.address)
        elif inst.opcode is Opcode.STORE:
            if self._trace is not None:
                self._trace(self.format_registers())
            src = self._register(inst.reg_src)
            self.memory.write_word(inst.address, self.registers[src])
        elif inst.opcode is Opcode.ADD:
            dst = self._register(inst.reg_dst)
            src = self._register(inst.reg_src)
            src2 = self._register(inst.reg_src2)
            self.registers[dst] = (self.registers[src] + self.registers[src2]) & WORD_MASK
        else:
            self.running = False
        return True

    def run(self, max_cycles: int = DEFAULT_CYCLES) -> int:
        """Clock the processor until it halts or ``max_cycles`` pass.

        Returns the number of instructions executed.
        """
        executed = 0
        for _ in range(max_cycles):
            if not self.step():
                break
            executed += 1
        return executed

    def format_registers(self) -> str:
        """Describe the register file in one line."""
        values = " ".join(f"R{i}: {value}" for i, value in enumerate(self.registers))
        return f"Registers: {values}"