''' LS-8 program files: text (.ls8) and raw binary images '''

import logging as lg
from pathlib import Path

import pyparsing as pp

from ls8.common.hwconf import PROGRAM_BASE
from ls8.runtime.cpu import CPU


LS8_SUFFIX = '.ls8'


class ProgramError(Exception):
    pass


# One byte per line written as eight binary digits, '#' starts a comment
byte_literal = pp.Regex('[01]{8}(?![0-9A-Za-z_])').setParseAction(lambda r: int(r[0], 2))
comment = pp.Suppress(pp.Regex('#.*'))
program = pp.ZeroOrMore(byte_literal | comment)


def parse_ls8(text: str) -> bytes:
    try:
        values = program.parse_string(text, parse_all=True)
    except pp.ParseException as e:
        raise ProgramError(f'Malformed program at line {e.lineno}: {e.line.strip()!r}') from e

    return bytes(values.as_list())


def dump_ls8(code: bytes) -> str:
    return ''.join(f'{value:08b}\n' for value in code)


def read_program(filepath: str | Path) -> bytes:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Reading program {filepath}')

    if filepath.suffix == LS8_SUFFIX:
        return parse_ls8(filepath.read_text())

    return filepath.read_bytes()


def load(proc: CPU, code: bytes, base: int = PROGRAM_BASE):
    if base < 0 or base + len(code) > len(proc.ram):
        raise ProgramError(f'Program of {len(code)} bytes does not fit at 0x{base:02X}')

    lg.info(f'Loading {len(code)} bytes at 0x{base:02X}')
    proc.load(code, base)
