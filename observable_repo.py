# observable_repo.py
from __future__ import annotations

from typing import Any, Generic, TypeVar

from base_entity_repo import BaseEntityRepo
from mvc_observer import Subject

T = TypeVar("T")


class ObservableEntityRepo(Subject, Generic[T]):
    """
    Обёртка-Subject над любым BaseEntityRepo.
    Делегирует вызовы внутрь базового репозитория и шлёт события наблюдателям.

    События (prefix = entity_name базового репозитория):
      - "<prefix>_added"    payload: сущность
      - "<prefix>_updated"  payload: сущность
      - "<prefix>_deleted"  payload: dict(id=..., ok=bool, errors=list)
    """

    def __init__(self, base: BaseEntityRepo[T]) -> None:
        super().__init__()
        self._base = base

    # ===== служебные =====
    def base_repo(self) -> BaseEntityRepo[T]:
        """Возвращает исходный (ненаблюдаемый) репозиторий."""
        return self._base

    @property
    def entity_name(self) -> str:
        return self._base.entity_name

    # ===== Чтение =====
    def get_all(self) -> list[T]:
        return self._base.get_all()

    def get_count(self) -> int:
        return self._base.get_count()

    def get_by_id(self, target_id: str) -> tuple[T | None, list[dict[str, Any]]]:
        return self._base.get_by_id(target_id)

    # ===== CRUD =====
    def add(self, entity: T) -> T:
        obj = self._base.add(entity)
        self.notify(f"{self.entity_name}_added", obj)
        return obj

    def replace_by_id(self, target_id: str, entity: T) -> T:
        obj = self._base.replace_by_id(target_id, entity)
        self.notify(f"{self.entity_name}_updated", obj)
        return obj

    def delete_by_id(self, target_id: str) -> tuple[T | None, list[dict[str, Any]]]:
        deleted, errors = self._base.delete_by_id(target_id)
        self.notify(
            f"{self.entity_name}_deleted",
            {"id": target_id, "ok": deleted is not None, "errors": errors},
        )
        return deleted, errors
