import logging as lg
from typing import List, Tuple, Dict, Any

from ls8.common.hwconf import WORD_MASK

Tokens = List[Any]


class AssemblerError(Exception):
    pass


def parse_number(text: str) -> int:
    lowered = text.lower()

    if lowered.startswith('0x'):
        return int(lowered[2:], 16)

    if lowered.startswith('0b'):
        return int(lowered[2:], 2)

    return int(lowered, 10)


class FPP:
    ''' First pass processor '''
    cmd_list: List[Tuple[str, int | str]]
    label_dict: Dict[str, int]

    def __init__(self):
        self.cmd_list = list()
        self.offset = 0
        self.label_dict = dict()

    # Handlers
    def issue_byte(self, value: int):
        if value < 0 or value > WORD_MASK:
            raise AssemblerError(f'Value {value} does not fit in a byte')

        self.cmd_list.append(('byte', value))
        self.offset += 1

    def issue_op(self, op: int):
        lg.debug(f'Issuing command 0x{op:02X} @ 0x{self.offset:02X}')
        self.issue_byte(op)

    def on_reg(self, index: int):
        self.issue_byte(index)

    def on_const(self, tokens: Tokens):
        self.issue_byte(parse_number(tokens[0]))

    def on_string(self, tokens: Tokens):
        for char in tokens[0]:
            self.issue_byte(ord(char))

    def on_label(self, tokens: Tokens):
        labelname = tokens[0]

        if labelname in self.label_dict:
            raise AssemblerError(f'Duplicate label {labelname}')

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ 0x{self.offset:02X}')

    def on_ref(self, tokens: Tokens):
        labelname = tokens[0]
        lg.debug(f'Ref {labelname}')

        self.cmd_list.append(('ref', labelname))
        self.offset += 1  # placeholder-byte

    def on_fail(self, tokens: Tokens):
        raise AssemblerError(f'Unknown command {tokens[0]}')
