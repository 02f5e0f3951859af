# credentials.py
from __future__ import annotations

from typing import Protocol


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool: ...


class StaticCredentialVerifier:
    """
    Заглушка хранилища учётных записей: одна пара логин/пароль из конфигурации.
    Настоящее хранилище подключается через тот же verify().
    """

    def __init__(self, username: str = "admin", password: str = "1234") -> None:
        self._username = username
        self._password = password

    def verify(self, username: str, password: str) -> bool:
        return username == self._username and password == self._password
