import io
from pathlib import Path

import ls8.loader.program as program
import ls8.runtime.emulator as emulator
import ls8.sasm.asm as asm
from ls8.runtime.cpu import CPU


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def execute_program_file(filename: str) -> CPU:
    code = program.read_program(find_file(filename))
    return emulator.execute(code)


def execute_asm_file(filename: str) -> CPU:
    code = asm.compile_file(find_file(filename))
    return emulator.execute(code)


def run_capturing(code: bytes) -> tuple[CPU, str]:
    sink = io.StringIO()
    proc = emulator.execute(code, output=sink)
    return proc, sink.getvalue()


def assemble(*lines: str) -> bytes:
    return asm.compile_source('\n'.join(lines) + '\n')
