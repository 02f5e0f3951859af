# errors.py
from __future__ import annotations


class MalformedInput(ValueError):
    """Неверный тип или формат ввода. Лечится повторным вопросом."""


class OutOfRange(ValueError):
    """Тип верный, но значение вне допустимой области. Тоже повторяем вопрос."""


class ConfigurationError(Exception):
    """
    Ошибка конфигурации (например, пустое перечисление для меню).
    Циклы ввода её НЕ ловят: операция прерывается, ошибка уходит наверх.
    """


class RetryLimitExceeded(RuntimeError):
    """Исчерпан лимит попыток. Лимит задаётся только в тестах."""

    def __init__(self, prompt: str, attempts: int) -> None:
        super().__init__(f"Не получено корректное значение за {attempts} попыток: {prompt!r}")
        self.prompt = prompt
        self.attempts = attempts
