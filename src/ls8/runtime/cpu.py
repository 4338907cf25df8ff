import logging as lg
from typing import Callable, TextIO

import ls8.common.ops as ops
import ls8.runtime.alu as alu
from ls8.runtime.errors import CPUError, InvalidOpcode
from ls8.runtime.flow import ControlFlow, Continue, JumpTo, Stop, CONTINUE, STOP
from ls8.runtime.memory import RAM
from ls8.runtime.registers import RegisterFile

from ls8.common.hwconf import ADDRESS_MASK, PROGRAM_BASE


class CPU():
    reg: RegisterFile
    running: bool
    fault: CPUError | None  # Error that halted the engine
    cycles: int
    tracing: bool

    def __init__(self, ram: RAM, output: TextIO | None = None):
        self.ram = ram          # Ref. to memory
        self.output = output    # PRN/PRA sink, stdout if None

        self.reg = RegisterFile()
        self.running = True
        self.fault = None
        self.cycles = 0
        self.tracing = False

    # - Helpers - #

    def poke(self, address: int, value: int):
        self.ram.write(address, value)

    def peek(self, address: int) -> int:
        return self.ram.read(address)

    def load(self, program: bytes, base: int = PROGRAM_BASE):
        for offset, value in enumerate(program):
            self.poke(base + offset, value)

    def fetch(self, address: int) -> int:
        return self.ram.read(address & ADDRESS_MASK)

    def trace(self) -> str:
        pc = self.reg.pc
        code = ' '.join(f'{self.fetch(pc + i):02X}' for i in range(3))
        regs = ' '.join(f'{v:02X}' for v in self.reg.gp)
        op = ops.name(self.fetch(pc))
        return f'TRACE: {pc:02X} | {code} | {regs} | FL:{self.reg.fl:03b} | {op}'

    def do_push(self, val: int):
        self.reg.sp -= 1
        self.ram.write(self.reg.sp, val)

    def do_pop(self) -> int:
        v = self.ram.read(self.reg.sp)
        self.reg.sp += 1
        return v

    def alu(self, op: str, reg_a: int, reg_b: int) -> ControlFlow:
        alu.apply(self.reg, op, reg_a, reg_b)
        return CONTINUE

    def jump_if(self, condition: bool, reg_num: int) -> ControlFlow:
        if condition:
            return JumpTo(self.reg[reg_num])

        return CONTINUE

    def halt(self, fault: CPUError | None = None):
        self.running = False
        self.fault = fault

    # - Operations - #

    def nop(self, _a: int, _b: int) -> ControlFlow:
        return CONTINUE

    def hlt(self, _a: int, _b: int) -> ControlFlow:
        return STOP

    def ldi(self, reg_num: int, value: int) -> ControlFlow:
        self.reg[reg_num] = value
        return CONTINUE

    def ld(self, reg_a: int, reg_b: int) -> ControlFlow:
        self.reg[reg_a] = self.ram.read(self.reg[reg_b])
        return CONTINUE

    def st(self, reg_a: int, reg_b: int) -> ControlFlow:
        self.ram.write(self.reg[reg_a], self.reg[reg_b])
        return CONTINUE

    def prn(self, reg_num: int, _b: int) -> ControlFlow:
        print(self.reg[reg_num], file=self.output)
        return CONTINUE

    def pra(self, reg_num: int, _b: int) -> ControlFlow:
        print(chr(self.reg[reg_num]), end='', file=self.output)
        return CONTINUE

    def push(self, reg_num: int, _b: int) -> ControlFlow:
        self.do_push(self.reg[reg_num])
        return CONTINUE

    def pop(self, reg_num: int, _b: int) -> ControlFlow:
        v = self.do_pop()
        self.reg[reg_num] = v
        return CONTINUE

    def call(self, reg_num: int, _b: int) -> ControlFlow:
        addr = self.reg[reg_num]
        ret_addr = (self.reg.pc + 2) & ADDRESS_MASK
        self.do_push(ret_addr)
        return JumpTo(addr)

    def ret(self, _a: int, _b: int) -> ControlFlow:
        return JumpTo(self.do_pop())

    def jmp(self, reg_num: int, _b: int) -> ControlFlow:
        return JumpTo(self.reg[reg_num])

    def jeq(self, reg_num: int, _b: int) -> ControlFlow:
        return self.jump_if(self.reg.eq, reg_num)

    def jne(self, reg_num: int, _b: int) -> ControlFlow:
        return self.jump_if(not self.reg.eq, reg_num)

    def jgt(self, reg_num: int, _b: int) -> ControlFlow:
        return self.jump_if(self.reg.gt, reg_num)

    def jlt(self, reg_num: int, _b: int) -> ControlFlow:
        return self.jump_if(self.reg.lt, reg_num)

    def jle(self, reg_num: int, _b: int) -> ControlFlow:
        return self.jump_if(self.reg.lt or self.reg.eq, reg_num)

    def jge(self, reg_num: int, _b: int) -> ControlFlow:
        return self.jump_if(self.reg.gt or self.reg.eq, reg_num)

    # - Arithmetic - #

    def inc(self, reg_a: int, _b: int) -> ControlFlow:
        return self.alu('INC', reg_a, reg_a)

    def dec(self, reg_a: int, _b: int) -> ControlFlow:
        return self.alu('DEC', reg_a, reg_a)

    def bnot(self, reg_a: int, _b: int) -> ControlFlow:
        return self.alu('NOT', reg_a, reg_a)

    def add(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('ADD', reg_a, reg_b)

    def sub(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('SUB', reg_a, reg_b)

    def mul(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('MUL', reg_a, reg_b)

    def div(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('DIV', reg_a, reg_b)

    def mod(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('MOD', reg_a, reg_b)

    def cmp(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('CMP', reg_a, reg_b)

    def band(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('AND', reg_a, reg_b)

    def bor(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('OR', reg_a, reg_b)

    def xor(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('XOR', reg_a, reg_b)

    def shl(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('SHL', reg_a, reg_b)

    def shr(self, reg_a: int, reg_b: int) -> ControlFlow:
        return self.alu('SHR', reg_a, reg_b)

    HANDLERS: dict[int, Callable[['CPU', int, int], ControlFlow]] = {
        ops.NOP: nop,
        ops.HLT: hlt,
        ops.RET: ret,
        ops.PUSH: push,
        ops.POP: pop,
        ops.PRN: prn,
        ops.PRA: pra,
        ops.LDI: ldi,
        ops.LD: ld,
        ops.ST: st,

        ops.CALL: call,
        ops.JMP: jmp,
        ops.JEQ: jeq,
        ops.JNE: jne,
        ops.JGT: jgt,
        ops.JLT: jlt,
        ops.JLE: jle,
        ops.JGE: jge,

        ops.INC: inc,
        ops.DEC: dec,
        ops.NOT: bnot,
        ops.ADD: add,
        ops.SUB: sub,
        ops.MUL: mul,
        ops.DIV: div,
        ops.MOD: mod,
        ops.CMP: cmp,
        ops.AND: band,
        ops.OR: bor,
        ops.XOR: xor,
        ops.SHL: shl,
        ops.SHR: shr,
    }

    # -- Implementation -- #

    def tick(self):
        if not self.running:
            lg.debug('Tick ignored, CPU is halted')
            return

        pc = self.reg.pc

        try:
            if self.tracing:
                lg.debug(self.trace())

            self.reg.ir = self.fetch(pc)
            handler = self.HANDLERS.get(self.reg.ir)

            if handler is None:
                raise InvalidOpcode(self.reg.ir, pc)

            # Both operand bytes are always read
            operand_a = self.fetch(pc + 1)
            operand_b = self.fetch(pc + 2)

            flow = handler(self, operand_a, operand_b)

        except CPUError as e:
            lg.error(f'Execution fault: {e}')
            self.reg.debug_dump()
            self.halt(e)
            return

        self.cycles += 1

        match flow:
            case JumpTo(address):
                self.reg.pc = address & ADDRESS_MASK
            case Stop():
                lg.debug(f'HLT at 0x{pc:02X}')
                self.halt()
            case Continue():
                self.reg.pc = (pc + ops.instruction_size(self.reg.ir)) & ADDRESS_MASK
