"""Demonstration run: load a Fibonacci program and execute it."""

from __future__ import annotations

import argparse

from toycpu.isa import WORD_BYTES, Instruction, Opcode
from toycpu.memory import Memory
from toycpu.processor import DEFAULT_CYCLES, Processor

DATA_LOCATION = 0x100
PROGRAM_ITERATIONS = 10


def build_program() -> list[Instruction]:
    """Program that extends the sequence stored at ``DATA_LOCATION`` by summing pairs."""
    program: list[Instruction] = []
    for i in range(PROGRAM_ITERATIONS):
        base = DATA_LOCATION + i * WORD_BYTES
        program += [
            Instruction(Opcode.LOAD, reg_dst=0, address=base),
            Instruction(Opcode.LOAD, reg_dst=1, address=base + WORD_BYTES),
            Instruction(Opcode.ADD, reg_dst=2, reg_src=0, reg_src2=1),
            Instruction(Opcode.STORE, reg_src=2, address=base + 2 * WORD_BYTES),
        ]
    program.append(Instruction(Opcode.HALT))
    return program


def load_program(memory: Memory, program: list[Instruction], start_address: int = 0) -> None:
    """Write the encoded program into memory, one word per instruction."""
    for offset, inst in enumerate(program):
        memory.write_word(start_address + offset * WORD_BYTES, inst.encode())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the toy CPU demonstration program.")
    parser.add_argument(
        "--cycles", type=int, default=DEFAULT_CYCLES, help="clock cycles to simulate"
    )
    parser.add_argument(
        "--start", type=lambda text: int(text, 0), default=0, help="program load address"
    )
    args = parser.parse_args(argv)

    memory = Memory()
    processor = Processor(memory, trace=print)

    print("Asserting reset...")
    processor.reset()
    print("Deasserting reset.")

    load_program(memory, build_program(), args.start)
    memory.write_word(DATA_LOCATION, 1)
    memory.write_word(DATA_LOCATION + WORD_BYTES, 1)

    print(f"Sending start signal (address {args.start:#x})...")
    processor.start(args.start)
    executed = processor.run(args.cycles)

    if processor.running:
        print(f"Processor still running after {args.cycles} cycles.")
    else:
        print(f"Processor halted after {executed} instructions.")
    print("Simulation finished.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())