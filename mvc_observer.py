# mvc_observer.py
from __future__ import annotations

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Observer(Protocol):
    def update(self, event: str, payload: Any) -> None: ...


class Subject:
    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def attach(self, obs: Observer) -> None:
        if obs not in self._observers:
            self._observers.append(obs)

    def detach(self, obs: Observer) -> None:
        if obs in self._observers:
            self._observers.remove(obs)

    def notify(self, event: str, payload: Any) -> None:
        for obs in list(self._observers):
            obs.update(event, payload)


class AuditLogObserver:
    """
    Пишет события репозиториев в журнал. Сущности пишем через to_string(),
    неудачное удаление (ok=False) идёт с уровнем WARNING.
    """

    def update(self, event: str, payload: Any) -> None:
        if isinstance(payload, dict) and not payload.get("ok", True):
            logger.warning(
                "Событие %s: id=%s, ошибки: %s", event, payload.get("id"), payload.get("errors")
            )
            return
        render = getattr(payload, "to_string", None)
        logger.info("Событие %s: %s", event, render() if callable(render) else payload)
