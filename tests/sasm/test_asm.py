import pytest

import ls8.common.ops as ops
import ls8.sasm.asm as asm
from ls8.sasm.fpp import AssemblerError, parse_number

import unit_utils
from unit_utils import assemble


def test_countdown():
    code = asm.compile_file(unit_utils.find_file('testdata/asm/countdown.asm'))

    assert code == bytes([
        ops.LDI, 0, 3,
        ops.LDI, 1, 0,
        ops.LDI, 2, 9,
        ops.PRN, 0,
        ops.DEC, 0,
        ops.CMP, 0, 1,
        ops.JNE, 2,
        ops.HLT,
    ])


def test_instruction_sizes_match_opcodes():
    code = assemble('ret', 'push r1', 'add r2, r3')

    assert code == bytes([ops.RET, ops.PUSH, 1, ops.ADD, 2, 3])
    assert ops.instruction_size(ops.RET) == 1
    assert ops.instruction_size(ops.PUSH) == 2
    assert ops.instruction_size(ops.ADD) == 3


def test_immediates():
    code = assemble('LDI R0, 0x1F', 'LDI R1, 0b101', 'LDI R2, 255')

    assert code == bytes([ops.LDI, 0, 0x1F, ops.LDI, 1, 0b101, ops.LDI, 2, 255])


def test_labels_and_comments():
    code = assemble(
        '# leading comment',
        'start: LDI R0, end ; forward reference',
        'end:',
        '    JMP R0',
        'tail: ; trailing label',
    )

    assert code == bytes([ops.LDI, 0, 3, ops.JMP, 0])


def test_data():
    assert assemble('DB 7', 'ds "ok"', 'DB 0x00') == bytes([7, ord('o'), ord('k'), 0])


def test_empty_source():
    assert assemble('; nothing') == b''


def test_undefined_label():
    with pytest.raises(AssemblerError, match='Undefined label nowhere'):
        assemble('LDI R0, nowhere')


def test_duplicate_label():
    with pytest.raises(AssemblerError, match='Duplicate label twice'):
        assemble('twice: NOP', 'twice: HLT')


@pytest.mark.parametrize('line', ['FOO R1', 'ADD R1', 'PRN R8', 'LDI R0'])
def test_unknown_command(line):
    with pytest.raises(AssemblerError, match='Unknown command'):
        assemble('NOP', line)


def test_value_out_of_range():
    with pytest.raises(AssemblerError, match='does not fit'):
        assemble('LDI R0, 256')


@pytest.mark.parametrize('text, value', [('10', 10), ('0x0a', 10), ('0XFF', 255), ('0b11', 3)])
def test_parse_number(text, value):
    assert parse_number(text) == value
