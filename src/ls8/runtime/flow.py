''' Handler results: how the engine updates PC after an instruction '''

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class JumpTo:
    address: int


@dataclass(frozen=True)
class Stop:
    pass


ControlFlow: TypeAlias = Continue | JumpTo | Stop

CONTINUE = Continue()
STOP = Stop()
