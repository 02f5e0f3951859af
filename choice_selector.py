# choice_selector.py
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TypeVar

from errors import ConfigurationError, MalformedInput, OutOfRange
from input_validator import InputValidator
from validators import Validator

E = TypeVar("E", bound=Enum)


class ChoiceSelector:
    """
    Нумерованный список вариантов. На экране нумерация с 1,
    внутри — индекс с 0.
    """

    def __init__(self, validator: InputValidator) -> None:
        self.validator = validator
        self.console = validator.console

    def choose(self, labels: Sequence[str], *, header: str = "Выберите пункт:") -> int:
        """Возвращает индекс выбранного пункта (с 0)."""
        if not labels:
            # Это ошибка программиста, а не оператора: не крутимся в цикле
            raise ConfigurationError("Список вариантов должен содержать хотя бы один пункт")

        count = len(labels)
        self.console.say(header)
        for i, label in enumerate(labels, start=1):
            self.console.say(f"{i} - {label}")

        def parse(raw: str) -> int:
            try:
                return Validator.int_in_range(raw, 1, count) - 1
            except MalformedInput:
                raise MalformedInput("Некорректный ввод. Введите число.") from None
            except OutOfRange:
                raise OutOfRange(f"Некорректный выбор. Введите число от 1 до {count}") from None

        # Читаем строку целиком: хвост строки не достанется следующему вопросу
        return self.validator.read_until_valid("> ", parse)

    def choose_enum(self, enum_type: type[E], *, header: str = "Выберите пункт:") -> E:
        members = list(enum_type)
        if not members:
            raise ConfigurationError(
                f"Перечисление {enum_type.__name__} должно содержать хотя бы один элемент"
            )
        return members[self.choose([m.name for m in members], header=header)]
