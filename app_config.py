# app_config.py
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

import yaml  # type: ignore[import-untyped]

from errors import ConfigurationError

# Значения по умолчанию. Файл конфигурации (YAML) может переопределить любое из них.
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "1234"
LOG_LEVEL = "INFO"
LOG_FILE = "transport_admin.log"

CONFIG_ENV_VAR = "TRANSPORT_CONFIG"
DEFAULT_CONFIG_PATH = "transport.yaml"


@dataclass
class AppConfig:
    admin_username: str = ADMIN_USERNAME
    admin_password: str = ADMIN_PASSWORD
    log_level: str = LOG_LEVEL
    log_file: str | None = LOG_FILE
    # None -> переспрашиваем без ограничения. Число задают только тестовые стенды.
    max_attempts: int | None = None


def _read_mapping(path: str) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Не удалось прочитать файл конфигурации {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Файл конфигурации {path} должен быть словарём (mapping).")
    return data


def load_config(path: str | None = None) -> AppConfig:
    """
    Путь берём из аргумента, потом из TRANSPORT_CONFIG, потом transport.yaml.
    Файла нет -> значения по умолчанию (если путь не задан явно).
    Любая проблема с файлом -> ConfigurationError.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    candidate = explicit or DEFAULT_CONFIG_PATH
    if not os.path.exists(candidate):
        if explicit:
            raise ConfigurationError(
                f"Файл конфигурации не найден: {candidate}"
            ) from FileNotFoundError(candidate)
        return AppConfig()

    data = _read_mapping(candidate)
    known = {f.name for f in fields(AppConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Неизвестные ключи в {candidate}: {', '.join(unknown)}")

    max_attempts = data.get("max_attempts")
    if max_attempts is not None and (
        isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1
    ):
        raise ConfigurationError("max_attempts должен быть положительным целым числом или null")
    # admin_password: 1234 без кавычек YAML прочитает как int
    for key in ("admin_username", "admin_password"):
        if key in data and data[key] is not None:
            data[key] = str(data[key])
    return AppConfig(**data)
