# input_validator.py
from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable, TypeVar

from console_io import ConsoleIO
from errors import MalformedInput, OutOfRange, RetryLimitExceeded
from validators import Validator

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class InputKind(Enum):
    STRING = "string"
    TIMESTAMP = "timestamp"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    ENUM_MEMBER = "enum_member"
    INTEGER = "integer"


class InputValidator:
    """
    Спрашивает у оператора одно типизированное значение и переспрашивает,
    пока не получит корректное. На каждую неудачную попытку ровно одно
    сообщение об ошибке.

    max_attempts=None означает "без ограничения" (так работает консоль).
    Конечный лимит нужен только тестам, чтобы сценарий не зациклился.
    """

    def __init__(self, console: ConsoleIO, *, max_attempts: int | None = None) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts должен быть положительным или None")
        self.console = console
        self.max_attempts = max_attempts

    # ---------- общий цикл "спрашиваем, пока не ответят правильно" ----------

    def read_until_valid(
        self,
        prompt: str,
        parse: Callable[[str], T],
        error_message: str | None = None,
    ) -> T:
        """
        MalformedInput -> печатаем error_message (если передан) или текст парсера.
        OutOfRange     -> печатаем конкретное сообщение парсера.
        """
        attempts = 0
        while True:
            raw = self.console.ask(prompt)
            try:
                return parse(raw)
            except OutOfRange as exc:
                self.console.say(str(exc))
            except MalformedInput as exc:
                self.console.say(error_message or str(exc))
            attempts += 1
            logger.debug("Отклонён ввод на вопрос %r (попытка %d)", prompt, attempts)
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise RetryLimitExceeded(prompt, attempts)

    # ------------------------------ примитивы ------------------------------

    def prompt_string(self, prompt: str, error_message: str | None = None) -> str:
        return self.read_until_valid(prompt, Validator.require_non_empty, error_message)

    def prompt_text(self, prompt: str) -> str:
        """Свободный текст, пустая строка допустима."""
        return self.console.ask(prompt).strip()

    def prompt_timestamp(self, prompt: str) -> datetime:
        # Сообщение всегда про формат, чужое не подставляем
        return self.read_until_valid(prompt, Validator.timestamp)

    def prompt_decimal(
        self,
        prompt: str,
        error_message: str | None = None,
        *,
        minimum: float | None = None,
    ) -> float:
        return self.read_until_valid(
            prompt, lambda raw: Validator.decimal(raw, minimum), error_message
        )

    def prompt_boolean(self, prompt: str, error_message: str | None = None) -> bool:
        return self.read_until_valid(prompt, Validator.boolean, error_message)

    def prompt_enum_member(
        self, prompt: str, enum_type: type[E], error_message: str | None = None
    ) -> E:
        return self.read_until_valid(
            prompt, lambda raw: Validator.enum_member(raw, enum_type), error_message
        )

    def prompt_int(
        self, prompt: str, lo: int, hi: int, error_message: str | None = None
    ) -> int:
        return self.read_until_valid(
            prompt, lambda raw: Validator.int_in_range(raw, lo, hi), error_message
        )

    def prompt_and_read(
        self,
        kind: InputKind,
        prompt: str,
        error_message: str | None = None,
        **constraints: Any,
    ) -> Any:
        """
        Единая точка входа: вид значения + текст вопроса + ограничения.
          DECIMAL     -> minimum=
          ENUM_MEMBER -> enum_type= (обязательно)
          INTEGER     -> lo=, hi= (обязательно)
        """
        if kind is InputKind.STRING:
            return self.prompt_string(prompt, error_message)
        if kind is InputKind.TIMESTAMP:
            return self.prompt_timestamp(prompt)
        if kind is InputKind.DECIMAL:
            return self.prompt_decimal(prompt, error_message, minimum=constraints.get("minimum"))
        if kind is InputKind.BOOLEAN:
            return self.prompt_boolean(prompt, error_message)
        if kind is InputKind.ENUM_MEMBER:
            return self.prompt_enum_member(prompt, constraints["enum_type"], error_message)
        if kind is InputKind.INTEGER:
            return self.prompt_int(prompt, constraints["lo"], constraints["hi"], error_message)
        raise TypeError(f"Неизвестный вид ввода: {kind!r}")
