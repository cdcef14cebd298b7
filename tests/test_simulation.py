from toycpu.isa import Instruction, Opcode
from toycpu.memory import Memory
from toycpu.processor import Processor
from toycpu.simulation import DATA_LOCATION, PROGRAM_ITERATIONS, build_program, load_program, main


def test_program_ends_with_single_halt():
    program = build_program()
    assert program[-1] == Instruction(Opcode.HALT)
    assert [inst.opcode for inst in program].count(Opcode.HALT) == 1
    assert [inst.opcode for inst in program].count(Opcode.STORE) == PROGRAM_ITERATIONS


def test_load_program_round_trip():
    memory = Memory()
    program = build_program()
    load_program(memory, program, 0x20)
    decoded = [Instruction.decode(memory.read_word(0x20 + 4 * i)) for i in range(len(program))]
    assert decoded == program


def test_program_computes_fibonacci():
    memory = Memory()
    program = build_program()
    load_program(memory, program, 0)
    memory.write_word(DATA_LOCATION, 1)
    memory.write_word(DATA_LOCATION + 4, 1)
    processor = Processor(memory)
    processor.start(0)
    assert processor.run() == len(program)
    values = [memory.read_word(DATA_LOCATION + 4 * k) for k in range(PROGRAM_ITERATIONS + 2)]
    assert values[:2] == [1, 1]
    for k in range(PROGRAM_ITERATIONS):
        assert values[k + 2] == values[k] + values[k + 1]


def test_main_runs_to_halt(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Registers:") == PROGRAM_ITERATIONS
    assert "halted" in out


def test_main_with_few_cycles(capsys):
    assert main(["--cycles", "2"]) == 0
    out = capsys.readouterr().out
    assert "still running" in out
    assert "Registers:" not in out