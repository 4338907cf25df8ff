# type: ignore
''' Assembly grammar '''

import pyparsing as pp

import ls8.common.ops as ops
from ls8.sasm.fpp import FPP


def g_cmd(mnemonic):
    op = ops.MNEMONICS[mnemonic]
    return pp.CaselessKeyword(mnemonic).setParseAction(lambda _: (FPP.issue_op, op))


def g_id():
    return pp.Word(pp.alphas + '_', pp.alphanums + '_')


comment = pp.Suppress(pp.Regex('[;#].*'))
label = (g_id() + pp.Suppress(':')).setParseAction(lambda r: (FPP.on_label, r))

reg_op = pp.Regex('[Rr][0-7](?![0-9A-Za-z_])').setParseAction(lambda r: (FPP.on_reg, int(r[0][1])))
sep = pp.Suppress(',')

const = pp.Regex('0[xX][0-9a-fA-F]+|0[bB][01]+|[0-9]+').setParseAction(lambda r: (FPP.on_const, r))
ref = g_id().setParseAction(lambda r: (FPP.on_ref, r))
string = pp.QuotedString('"', esc_char='\\').setParseAction(lambda r: (FPP.on_string, r))


def g_cmd_0(mnemonic):
    return g_cmd(mnemonic)


def g_cmd_1(mnemonic):
    return g_cmd(mnemonic) + reg_op


def g_cmd_2(mnemonic):
    return g_cmd(mnemonic) + reg_op + sep + reg_op


# Instructions grouped by operand count
NO_OPERANDS = ['NOP', 'HLT', 'RET']
ONE_REGISTER = [
    'PUSH', 'POP', 'PRN', 'PRA',
    'CALL', 'JMP', 'JEQ', 'JNE', 'JGT', 'JLT', 'JLE', 'JGE',
    'INC', 'DEC', 'NOT'
]
TWO_REGISTERS = [
    'LD', 'ST',
    'ADD', 'SUB', 'MUL', 'DIV', 'MOD', 'CMP',
    'AND', 'OR', 'XOR', 'SHL', 'SHR'
]

ldi_cmd = g_cmd('LDI') + reg_op + sep + (const ^ ref)

asm_cmd = pp.Or(
    [g_cmd_0(m) for m in NO_OPERANDS]
    + [g_cmd_1(m) for m in ONE_REGISTER]
    + [g_cmd_2(m) for m in TWO_REGISTERS]
    + [ldi_cmd]
)

# Data
db = pp.Suppress(pp.CaselessKeyword('DB')) + const
ds = pp.Suppress(pp.CaselessKeyword('DS')) + string

cmd = asm_cmd ^ db ^ ds

# Fail on unknown command
unknown = pp.Regex('.+').setParseAction(lambda r: (FPP.on_fail, r))

statement = pp.Optional(label) + pp.Optional(comment) + cmd + pp.Optional(comment)
bare_label = label + pp.Optional(comment)

program = pp.ZeroOrMore(statement ^ bare_label ^ comment ^ unknown)
