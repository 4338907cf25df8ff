MEMORY_SIZE      = 0x100
ADDRESS_MASK     = MEMORY_SIZE - 1
WORD_MASK        = 0xFF        # 8-bit registers and memory cells
PROGRAM_BASE     = 0x00

GP_REGISTERS     = 8
SP_REGISTER      = 7
STACK_TOP        = 0xF4        # Empty stack, grows downward

# FL register: 00000LGE
FL_EQ = 0b001
FL_GT = 0b010
FL_LT = 0b100
