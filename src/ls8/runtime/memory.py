# Emulated RAM

from ls8.common.hwconf import MEMORY_SIZE, WORD_MASK
from ls8.runtime.errors import MemoryAccessError


class RAM:
    memory: bytearray

    def __init__(self, size: int = MEMORY_SIZE):
        self.memory = bytearray(size)

    def __len__(self) -> int:
        return len(self.memory)

    def check(self, address: int):
        if address < 0 or address >= len(self.memory):
            raise MemoryAccessError(address)

    def read(self, address: int) -> int:
        self.check(address)
        return self.memory[address]

    def write(self, address: int, value: int):
        self.check(address)
        self.memory[address] = value & WORD_MASK
