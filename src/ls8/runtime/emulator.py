import sys
import time
from pathlib import Path
import logging as lg
import traceback
from typing import TextIO

import click

import ls8.runtime.cpu as cpu
import ls8.loader.program as program
from ls8.runtime.errors import CPUError
from ls8.runtime.memory import RAM


EXIT_HALT = 0
EXIT_CPU_FAULT = 1
EXIT_PROGRAM_ERROR = 2
EXIT_KEYBOARD = 3
EXIT_CYCLE_LIMIT = 4
EXIT_EXEC_ERROR = 100


class CycleLimitExceeded(Exception):
    cycles: int

    def __init__(self, cycles: int):
        super().__init__(f'No HLT after {cycles} cycles')
        self.cycles = cycles


def execute(
    code: bytes,
    output: TextIO | None = None,
    trace: bool = False,
    hz: float | None = None,
    max_cycles: int | None = None
) -> cpu.CPU:
    proc = cpu.CPU(RAM(), output)
    proc.tracing = trace
    program.load(proc, code)

    period = 1.0 / hz if hz else None

    while proc.running:
        if max_cycles is not None and proc.cycles >= max_cycles:
            raise CycleLimitExceeded(proc.cycles)

        proc.tick()

        if period is not None:
            time.sleep(period)

    if proc.fault is not None:
        raise proc.fault

    lg.debug(f'Halted after {proc.cycles} cycles')
    return proc


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--trace', is_flag=True, help='Logs machine state before every instruction')
@click.option('--hz', type=click.FloatRange(min=0, min_open=True), help='Clock frequency, unthrottled if omitted')
@click.option('--max-cycles', type=click.IntRange(min=1), help='Stops a program that does not halt')
@click.argument('program_filename', type=Path)
def run(verbose: bool, trace: bool, hz: float | None, max_cycles: int | None, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info("LS-8")

    try:
        code = program.read_program(program_filename)
        execute(code, trace=trace, hz=hz, max_cycles=max_cycles)
        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except (OSError, program.ProgramError) as e:
        lg.error(f'Cannot load program: {e}')
        sys.exit(EXIT_PROGRAM_ERROR)

    except CPUError as e:
        lg.info(f'Execution halted on fault: {e}')
        sys.exit(EXIT_CPU_FAULT)

    except CycleLimitExceeded as e:
        lg.info(f'Execution stopped: {e}')
        sys.exit(EXIT_CYCLE_LIMIT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
