# toycpu

toycpu simulates a small processor. The processor has these parts:

- a 32-bit instruction word
- four 32-bit registers
- 1 KiB of byte-addressed memory

It comes with a demo program that fills memory with a Fibonacci sequence. The program adds neighbouring words and stores each sum in the next word.

## Instruction set

Each instruction is one 32-bit big-endian word. The top 4 bits hold the opcode (`toycpu.isa.Opcode`).

| Opcode  | Value | Layout after the opcode                          |
|---------|-------|--------------------------------------------------|
| `LOAD`  | 0     | 4-bit destination register, 16-bit address       |
| `STORE` | 1     | 16-bit address, 4-bit source register            |
| `ADD`   | 2     | destination, source, second source (4 bits each) |
| `HALT`  | 3     | nothing                                          |

When a word is decoded, only the low 12 bits of an address field are kept. `Instruction.decode` raises `ValueError` for an opcode outside the table, and so does creating an `Instruction` with one.

## Installing

```
pip install .
```

## Running the demo

```
toycpu [--cycles N] [--start ADDRESS]
```

The command takes these steps:

1. Resets the processor.
2. Writes the demo program at the start address. The default is `0`. `--start` takes decimal, or hex with a `0x` prefix.
3. Seeds the data area at `0x100` with two ones.
4. Starts the processor.
5. Clocks the processor until it halts, or until `--cycles` cycles have passed. The default is 12500 cycles.

Before each `STORE`, the processor prints its registers. At the end the command reports one of two things:

- how many instructions ran before the halt (41 for the demo program)
- that the processor is still running

## Using it from Python

```python
from toycpu.isa import Instruction, Opcode
from toycpu.memory import Memory
from toycpu.processor import Processor
from toycpu.simulation import build_program, load_program

memory = Memory()
load_program(memory, build_program(), 0)
memory.write_word(0x100, 1)
memory.write_word(0x104, 1)

cpu = Processor(memory)          # pass trace=print to see registers before each STORE
cpu.reset()
cpu.start(0)
cpu.run(1000)                    # returns the number of instructions executed
print(cpu.format_registers())
print(memory.read_word(0x100 + 11 * 4))   # 144
```

`Processor.step()` runs a single clock cycle. It returns `False` when the processor is not running.

An instruction that names a register other than R0 to R3 raises `IndexError`. Executing an unknown opcode stops the processor and raises `ValueError`.

You can also encode and decode single instructions:

```python
word = Instruction(Opcode.ADD, reg_dst=1, reg_src=0, reg_src2=2).encode()
assert Instruction.decode(word).opcode is Opcode.ADD
```

## Memory

`Memory` stores words big-endian. `write_word` truncates a value to 32 bits.

`Memory` raises `MemoryAccessError` (a subclass of `IndexError`) in these cases:

- a negative address
- a negative length
- an access whose end reaches the last cell of memory or goes past it

## What it does not do

The processor is stepped one instruction per call. The package does not model the following:

- clock signals
- bus transactions
- access delays
- simulated time

## Running the tests

```
pip install ".[test]"
pytest
```