import logging as lg
from typing import Callable

from ls8.common.hwconf import FL_EQ, FL_GT, FL_LT, WORD_MASK
from ls8.runtime.errors import DivisionByZero
from ls8.runtime.registers import RegisterFile


def div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero('DIV')

    return a // b


def mod(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero('MOD')

    return a % b


# Results are masked on register write
OPERATIONS: dict[str, Callable[[int, int], int]] = {
    'ADD': lambda a, b: a + b,
    'SUB': lambda a, b: a - b,
    'MUL': lambda a, b: a * b,
    'DIV': div,
    'MOD': mod,
    'AND': lambda a, b: a & b,
    'OR': lambda a, b: a | b,
    'XOR': lambda a, b: a ^ b,
    'SHL': lambda a, b: (a << b) & WORD_MASK,
    'SHR': lambda a, b: a >> b,

    # Unary, second operand ignored
    'NOT': lambda a, _: ~a,
    'INC': lambda a, _: a + 1,
    'DEC': lambda a, _: a - 1,
}


def compare(a: int, b: int) -> int:
    if a == b:
        return FL_EQ

    if a > b:
        return FL_GT

    return FL_LT


def apply(reg: RegisterFile, op: str, reg_a: int, reg_b: int):
    a = reg[reg_a]
    b = reg[reg_b]

    if op == 'CMP':
        reg.fl = compare(a, b)
        return

    func = OPERATIONS.get(op)

    if func is None:
        lg.warning(f'Unsupported ALU operation {op} ignored')
        return

    reg[reg_a] = func(a, b)
