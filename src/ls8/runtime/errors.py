class CPUError(Exception):
    ''' Fatal condition that halts the engine '''
    pass


class InvalidOpcode(CPUError):
    opcode: int
    address: int

    def __init__(self, opcode: int, address: int):
        super().__init__(f'Unknown opcode 0x{opcode:02X} at address 0x{address:02X}')
        self.opcode = opcode
        self.address = address


class InvalidRegister(CPUError):
    index: int

    def __init__(self, index: int):
        super().__init__(f'Invalid register R{index}')
        self.index = index


class MemoryAccessError(CPUError):
    address: int

    def __init__(self, address: int):
        super().__init__(f'Memory access out of range at 0x{address:X}')
        self.address = address


class DivisionByZero(CPUError):
    def __init__(self, operation: str):
        super().__init__(f'{operation} by zero')
