# type: ignore
import io

import pytest

from ls8.runtime.cpu import CPU
from ls8.runtime.memory import RAM


@pytest.fixture
def with_output():
    yield io.StringIO()


@pytest.fixture
def with_cpu(with_output):
    yield CPU(RAM(), with_output)
