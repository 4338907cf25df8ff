import logging as lg

from ls8.common.hwconf import GP_REGISTERS, SP_REGISTER, STACK_TOP, WORD_MASK
from ls8.common.hwconf import FL_EQ, FL_GT, FL_LT
from ls8.runtime.errors import InvalidRegister


class RegisterFile:
    pc: int  # Program counter
    ir: int  # Instruction register
    fl: int  # Flags, 00000LGE
    gp: list[int]  # General purpose registers, R7 is SP

    def __init__(self):
        self.pc = 0
        self.ir = 0
        self.fl = 0

        self.gp = [0] * GP_REGISTERS
        self.gp[SP_REGISTER] = STACK_TOP

    def check(self, index: int):
        if index < 0 or index >= len(self.gp):
            raise InvalidRegister(index)

    def __getitem__(self, index: int) -> int:
        self.check(index)
        return self.gp[index]

    def __setitem__(self, index: int, value: int):
        self.check(index)
        self.gp[index] = value & WORD_MASK

    @property
    def sp(self) -> int:
        return self.gp[SP_REGISTER]

    @sp.setter
    def sp(self, value: int):
        self.gp[SP_REGISTER] = value & WORD_MASK

    @property
    def eq(self) -> bool:
        return bool(self.fl & FL_EQ)

    @property
    def gt(self) -> bool:
        return bool(self.fl & FL_GT)

    @property
    def lt(self) -> bool:
        return bool(self.fl & FL_LT)

    def debug_dump(self):
        state = [f'{k}:{v:02X}' for k, v in {
            'PC': self.pc,
            'IR': self.ir,
            'FL': self.fl,
        }.items()]

        state.extend([f'R{i}:{self.gp[i]:02X}' for i in range(len(self.gp))])

        lg.debug(' '.join(state))
