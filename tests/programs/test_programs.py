import time

import pytest

import ls8.common.ops as ops
import ls8.runtime.emulator as emulator
from ls8.loader.program import ProgramError
from ls8.runtime.errors import DivisionByZero, InvalidOpcode

from unit_utils import execute_program_file, execute_asm_file, load_file, run_capturing


@pytest.mark.parametrize('name', ['print8', 'mult', 'stack', 'call', 'sctest', 'compare'])
def test_sample_program(name, capsys):
    proc = execute_program_file(f'testdata/programs/{name}.ls8')

    assert not proc.running
    assert proc.fault is None
    assert capsys.readouterr().out == load_file(f'testdata/programs/{name}.log')


@pytest.mark.parametrize('name', ['countdown', 'greeting'])
def test_assembled_program(name, capsys):
    execute_asm_file(f'testdata/asm/{name}.asm')

    assert capsys.readouterr().out == load_file(f'testdata/asm/{name}.log')


def test_output_sink():
    proc, output = run_capturing(bytes([ops.LDI, 0, 5, ops.LDI, 1, 3, ops.ADD, 0, 1, ops.PRN, 0, ops.HLT]))

    assert output == '8\n'
    assert proc.cycles == 5


def test_invalid_opcode_is_raised():
    with pytest.raises(InvalidOpcode) as e:
        emulator.execute(bytes([ops.NOP, 0x02]))

    assert e.value.address == 1


def test_division_by_zero_is_raised():
    with pytest.raises(DivisionByZero):
        emulator.execute(bytes([ops.LDI, 0, 1, ops.DIV, 0, 1, ops.HLT]))


def test_cycle_limit():
    with pytest.raises(emulator.CycleLimitExceeded) as e:
        emulator.execute(bytes([ops.LDI, 0, 3, ops.JMP, 0]), max_cycles=10)

    assert e.value.cycles == 10


def test_clock_frequency(monkeypatch):
    sleeps = []
    monkeypatch.setattr(time, 'sleep', sleeps.append)

    emulator.execute(bytes([ops.NOP, ops.NOP, ops.HLT]), hz=100)

    assert sleeps == [pytest.approx(0.01)] * 3


def test_program_too_large():
    with pytest.raises(ProgramError):
        emulator.execute(bytes(257))


def test_v2_encodings_are_not_supported():
    # v2.0 skeleton: LDI=0b10011001, PRN=0b01000011
    with pytest.raises(InvalidOpcode) as e:
        emulator.execute(bytes([0b10011001, 0, 8, 0b01000011, 0, ops.HLT]))

    assert e.value.opcode == 0b10011001
    assert e.value.address == 0


def test_v2_add_byte_decodes_as_and():
    # v2.0 skeleton ADD=0b10101000
    _, output = run_capturing(bytes([ops.LDI, 0, 5, ops.LDI, 1, 3, 0b10101000, 0, 1, ops.PRN, 0, ops.HLT]))

    assert output == '1\n'
