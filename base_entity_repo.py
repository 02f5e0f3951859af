# base_entity_repo.py
from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class BaseEntityRepo(ABC, Generic[T]):
    """
    Базовый репозиторий с общей логикой CRUD над набором сущностей.
    Конкретные реализации (сейчас только в памяти) переопределяют
    методы _read_array/_write_array.

    id_attr — имя атрибута-идентификатора ("contract_id", "partner_id", ...).
    id_factory — генератор новых id; по умолчанию uuid4.
    """

    def __init__(
        self,
        id_attr: str,
        *,
        entity_name: str = "entity",
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.id_attr = id_attr
        self.entity_name = entity_name
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    # ---------- НИЗКИЙ УРОВЕНЬ: абстракции хранилища ----------

    @abstractmethod
    def _read_array(self) -> list[T]:
        """Прочитать весь набор сущностей в порядке добавления."""
        raise NotImplementedError

    @abstractmethod
    def _write_array(self, records: list[T]) -> None:
        """Записать весь набор сущностей."""
        raise NotImplementedError

    # ---------------------- Утилиты ----------------------

    def id_of(self, entity: T) -> str | None:
        return getattr(entity, self.id_attr, None)

    def _indexes_of(self, records: list[T], target_id: str) -> list[int]:
        return [i for i, rec in enumerate(records) if self.id_of(rec) == target_id]

    def _not_found(self, target_id: str) -> dict[str, Any]:
        return {
            "id": target_id,
            "error_type": "NotFound",
            "message": f"{self.entity_name} с id={target_id} не найден",
        }

    # -------------------------- Чтение ------------------------

    def get_all(self) -> list[T]:
        return list(self._read_array())

    def get_count(self) -> int:
        return len(self._read_array())

    def get_by_id(self, target_id: str) -> tuple[T | None, list[dict[str, Any]]]:
        """Возвращает (сущность | None, errors)."""
        records = self._read_array()
        idxs = self._indexes_of(records, target_id)
        if not idxs:
            return None, [self._not_found(target_id)]
        errors: list[dict[str, Any]] = []
        if len(idxs) > 1:
            errors.append(
                {
                    "id": target_id,
                    "error_type": "DuplicateId",
                    "message": f"Несколько записей с id={target_id}; возвращаю первую",
                }
            )
        return records[idxs[0]], errors

    # -------------------------- Мутации набора -------------------------

    def add(self, entity: T) -> T:
        """Назначает новый id и сохраняет. Сущность к этому моменту полностью собрана."""
        records = self._read_array()
        existing = {self.id_of(r) for r in records}
        new_id = self._id_factory()
        while new_id in existing:
            new_id = self._id_factory()
        setattr(entity, self.id_attr, new_id)
        records.append(entity)
        self._write_array(records)
        return entity

    def replace_by_id(self, target_id: str, entity: T) -> T:
        current_id = self.id_of(entity)
        if current_id is not None and current_id != target_id:
            raise ValueError(f"MismatchedId: payload id={current_id} != target id={target_id}")

        records = self._read_array()
        idxs = self._indexes_of(records, target_id)
        if not idxs:
            raise ValueError(f"NotFound: {self.entity_name} с id={target_id} не найден")
        if len(idxs) > 1:
            raise ValueError(
                f"DuplicateId: найдено несколько записей с id={target_id}; обновление отменено"
            )

        if current_id is None:
            setattr(entity, self.id_attr, target_id)
        records[idxs[0]] = entity
        self._write_array(records)
        return entity

    def delete_by_id(self, target_id: str) -> tuple[T | None, list[dict[str, Any]]]:
        """Возвращает (удалённая сущность | None, errors)."""
        records = self._read_array()
        idxs = self._indexes_of(records, target_id)
        if not idxs:
            return None, [self._not_found(target_id)]
        if len(idxs) > 1:
            return None, [
                {
                    "id": target_id,
                    "error_type": "DuplicateId",
                    "message": f"Найдено несколько записей с id={target_id}; удаление отменено",
                }
            ]
        deleted = records.pop(idxs[0])
        self._write_array(records)
        return deleted, []


class InMemoryEntityRepo(BaseEntityRepo[T]):
    """Хранение в памяти процесса. Между запусками ничего не сохраняется."""

    def __init__(
        self,
        id_attr: str,
        *,
        entity_name: str = "entity",
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        super().__init__(id_attr, entity_name=entity_name, id_factory=id_factory)
        self._records: list[T] = []

    def _read_array(self) -> list[T]:
        return list(self._records)

    def _write_array(self, records: list[T]) -> None:
        self._records = list(records)
