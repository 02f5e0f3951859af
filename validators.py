import re
from datetime import datetime
from enum import Enum
from typing import TypeVar

from errors import MalformedInput, OutOfRange

E = TypeVar("E", bound=Enum)

TIMESTAMP_PATTERN = "yyyy-MM-dd HH:mm:ss"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Десятичная запись: знак, цифры, дробная часть, экспонента. Без "_", nan и inf.
# Только ASCII-цифры.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


class Validator:
    """Общий класс валидации для всего, что оператор вводит с консоли."""

    # Валидация

    @staticmethod
    def require_non_empty(value: str | None) -> str:
        """Строка не None и не пустая после strip()."""
        if value is None:
            raise MalformedInput("Значение обязательно и не может быть пустым.")
        v = str(value).strip()
        if not v:
            raise MalformedInput("Значение обязательно и не может быть пустым.")
        return v

    @staticmethod
    def timestamp(value: str) -> datetime:
        """
        Строго 'yyyy-MM-dd HH:mm:ss'. Переполнение полей (13-й месяц, 30 февраля,
        25 часов) не прощаем.
        """
        v = str(value).strip()
        try:
            return datetime.strptime(v, TIMESTAMP_FORMAT)
        except ValueError:
            raise MalformedInput(
                f"Неверный формат даты. Введите дату в формате {TIMESTAMP_PATTERN}."
            ) from None

    @staticmethod
    def decimal(value: str, minimum: float | None = None) -> float:
        """
        Десятичное число с плавающей точкой. Диапазон здесь не проверяем,
        если вызывающий не передал minimum.
        """
        v = str(value).strip()
        if not _DECIMAL_RE.fullmatch(v):
            raise MalformedInput(f"'{v}' не является числом.")
        number = float(v)
        if minimum is not None and number < minimum:
            raise OutOfRange(f"Значение должно быть не меньше {minimum:g}.")
        return number

    @staticmethod
    def boolean(value: str) -> bool:
        """Только 'true' или 'false' (регистр не важен)."""
        v = str(value).strip().lower()
        if v == "true":
            return True
        if v == "false":
            return False
        raise MalformedInput("Введите 'true' или 'false'.")

    @staticmethod
    def enum_member(value: str, enum_type: type[E]) -> E:
        """Имя элемента перечисления. Оператор пишет в любом регистре, сравниваем в верхнем."""
        v = str(value).strip().upper()
        member = enum_type.__members__.get(v)
        if member is None:
            raise MalformedInput("Некорректный ввод. Введите значение из списка.")
        return member

    @staticmethod
    def int_in_range(value: str, lo: int, hi: int) -> int:
        v = str(value).strip()
        if not _INT_RE.fullmatch(v):
            raise MalformedInput("Некорректный ввод. Введите целое число.")
        number = int(v)
        if number < lo or number > hi:
            raise OutOfRange(f"Число вне диапазона. Введите число от {lo} до {hi}.")
        return number
