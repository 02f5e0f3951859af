# console_io.py
from __future__ import annotations

import sys
from typing import TextIO


class ConsoleIO:
    """
    Единственный дескриптор консоли. Создаётся один раз при старте и явно
    передаётся всем, кто задаёт вопросы оператору. В тестах вместо stdin
    подставляется io.StringIO со сценарием ввода.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        self._out.write(f"{text}\n")
        self._out.flush()

    def ask(self, prompt: str) -> str:
        """
        Печатает приглашение и читает ровно одну строку (без перевода строки).
        Больше одной строки не читаем: следующий вопрос начинается с новой строки.
        """
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            raise EOFError("Поток ввода закрыт")
        return line.rstrip("\r\n")
