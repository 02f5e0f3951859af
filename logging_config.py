# logging_config.py
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Журнал пишем в файл, чтобы не мешать вопросам в консоли.
    log_file=None -> stderr.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Неизвестный уровень логирования: {level}")

    kwargs: dict = {"level": numeric, "format": LOG_FORMAT, "force": True}
    if log_file:
        kwargs["filename"] = log_file
        kwargs["encoding"] = "utf-8"
    logging.basicConfig(**kwargs)
