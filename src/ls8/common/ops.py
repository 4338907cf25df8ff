# Instruction layout: AABCDDDD
#   AA   - number of operands
#   B    - ALU operation
#   C    - sets PC
#   DDDD - instruction identifier
#
# Values follow the later LS-8 table, v2.0 skeleton programs do not run

# Basic
NOP = 0b00000000
HLT = 0b00000001
RET = 0b00010001  # pop PC
PUSH = 0b01000101  # R1 -> [--SP]
POP = 0b01000110  # [SP++] -> R1
PRN = 0b01000111  # print R1 as decimal
PRA = 0b01001000  # print R1 as character
LDI = 0b10000010  # U2 -> R1
LD = 0b10000011  # M[R2] -> R1
ST = 0b10000100  # R2 -> M[R1]

# Control flow
CALL = 0b01010000  # push PC + 2; goto R1
JMP = 0b01010100  # goto R1
JEQ = 0b01010101  # if E goto R1
JNE = 0b01010110  # if not E goto R1
JGT = 0b01010111  # if G goto R1
JLT = 0b01011000  # if L goto R1
JLE = 0b01011001  # if L or E goto R1
JGE = 0b01011010  # if G or E goto R1

# Arithmetic
INC = 0b01100101  # R1 + 1 -> R1
DEC = 0b01100110  # R1 - 1 -> R1
NOT = 0b01101001  # ~R1 -> R1
ADD = 0b10100000  # R1 +  R2 -> R1
SUB = 0b10100001  # R1 -  R2 -> R1
MUL = 0b10100010  # R1 *  R2 -> R1
DIV = 0b10100011  # R1 // R2 -> R1
MOD = 0b10100100  # R1 %  R2 -> R1
CMP = 0b10100111  # R1 ? R2 -> FL
AND = 0b10101000  # R1 &  R2 -> R1
OR = 0b10101010  # R1 |  R2 -> R1
XOR = 0b10101011  # R1 ^  R2 -> R1
SHL = 0b10101100  # R1 << R2 -> R1
SHR = 0b10101101  # R1 >> R2 -> R1

MNEMONICS = {
    'NOP': NOP,
    'HLT': HLT,
    'RET': RET,
    'PUSH': PUSH,
    'POP': POP,
    'PRN': PRN,
    'PRA': PRA,
    'LDI': LDI,
    'LD': LD,
    'ST': ST,

    'CALL': CALL,
    'JMP': JMP,
    'JEQ': JEQ,
    'JNE': JNE,
    'JGT': JGT,
    'JLT': JLT,
    'JLE': JLE,
    'JGE': JGE,

    'INC': INC,
    'DEC': DEC,
    'NOT': NOT,
    'ADD': ADD,
    'SUB': SUB,
    'MUL': MUL,
    'DIV': DIV,
    'MOD': MOD,
    'CMP': CMP,
    'AND': AND,
    'OR': OR,
    'XOR': XOR,
    'SHL': SHL,
    'SHR': SHR,
}

NAMES = {op: name for name, op in MNEMONICS.items()}


def operand_count(op: int) -> int:
    return (op >> 6) & 0b11


def instruction_size(op: int) -> int:
    return operand_count(op) + 1


def is_alu(op: int) -> bool:
    return bool(op & 0b00100000)


def sets_pc(op: int) -> bool:
    return bool(op & 0b00010000)


def name(op: int) -> str:
    return NAMES.get(op, f'0x{op:02X}')
