from __future__ import annotations

import io
import itertools

import pytest

from choice_selector import ChoiceSelector
from console_io import ConsoleIO
from input_validator import InputValidator


class Scripted:
    """Консоль со сценарием ввода и перехваченным выводом."""

    def __init__(self, script: str, max_attempts: int | None = 10) -> None:
        self.stdin = io.StringIO(script)
        self.stdout = io.StringIO()
        self.console = ConsoleIO(self.stdin, self.stdout)
        self.validator = InputValidator(self.console, max_attempts=max_attempts)
        self.selector = ChoiceSelector(self.validator)

    @property
    def output(self) -> str:
        return self.stdout.getvalue()

    def remaining(self) -> str:
        return self.stdin.read()


@pytest.fixture
def scripted():
    def make(script: str, max_attempts: int | None = 10) -> Scripted:
        return Scripted(script, max_attempts)

    return make


@pytest.fixture
def id_factory():
    """Предсказуемые id: prefix + 1, 2, 3..."""

    def make(prefix: str):
        counter = itertools.count(1)
        return lambda: f"{prefix}{next(counter)}"

    return make
