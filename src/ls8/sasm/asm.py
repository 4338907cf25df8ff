from pathlib import Path
import logging as lg

import click

from ls8.common.hwconf import WORD_MASK
from ls8.loader.program import dump_ls8, LS8_SUFFIX
from ls8.sasm.fpp import FPP, AssemblerError
import ls8.sasm.grammar as grammar


def compile_source(contents: str) -> bytes:
    # First pass
    first_pass = FPP()
    actions = grammar.program.parse_string(contents, parse_all=True)

    for (func, arg) in actions:  # type: ignore
        func(first_pass, arg)

    # Second pass
    bytestr = bytearray()

    for (t, d) in first_pass.cmd_list:
        if t == 'byte':
            bytestr.append(d)

        if t == 'ref':
            if d not in first_pass.label_dict:
                raise AssemblerError(f'Undefined label {d}')

            address = first_pass.label_dict[d]

            if address > WORD_MASK:
                raise AssemblerError(f'Label {d} at 0x{address:X} is out of address space')

            bytestr.append(address)

    lg.info(f'Assembled {len(bytestr)} bytes, {len(first_pass.label_dict)} labels')
    return bytes(bytestr)


def compile_file(filepath: Path) -> bytes:
    lg.debug(f'Compiling file {filepath}')
    return compile_source(filepath.read_text())


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option(
    '-f', '--format', 'fmt',
    type=click.Choice(['ls8', 'bin']),
    help='Output format, taken from the output suffix if omitted'
)
@click.argument('source', type=Path)
@click.argument('binary', type=Path)
def assemble(verbose: bool, fmt: str | None, source: Path, binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("LS-8 ASM")

    try:
        code = compile_file(source)
    except AssemblerError as e:
        raise click.ClickException(str(e))

    if fmt is None:
        fmt = 'ls8' if binary.suffix == LS8_SUFFIX else 'bin'

    binary.parent.mkdir(parents=True, exist_ok=True)

    if fmt == 'ls8':
        binary.write_text(dump_ls8(code))
    else:
        binary.write_bytes(code)


if __name__ == "__main__":
    assemble()
