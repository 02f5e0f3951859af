# crud_controller.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from choice_selector import ChoiceSelector
from errors import MalformedInput
from input_validator import InputValidator
from menu_node import MenuAction, MenuNode
from observable_repo import ObservableEntityRepo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CrudController(ABC, Generic[T]):
    """
    Общий контроллер подменю сущности: добавить / показать все / найти / изменить / удалить.
    Поля собираются в _collect() в фиксированном порядке; сущность создаётся
    только когда все поля уже корректны, и лишь потом уходит в репозиторий.
    """

    title: str = ""
    entity_label: str = ""

    def __init__(
        self,
        repo: ObservableEntityRepo[T],
        validator: InputValidator,
        selector: ChoiceSelector,
        *,
        contracts: ObservableEntityRepo | None = None,
    ) -> None:
        self.repo = repo
        self.validator = validator
        self.selector = selector
        self.console = validator.console
        # Договоры, которые могут ссылаться на сущности этого контроллера
        self.contracts = contracts

    # --- то, что определяют наследники ---

    @abstractmethod
    def _collect(self, current: T | None) -> T | None:
        """
        Спрашивает все поля и возвращает готовую сущность.
        current != None -> режим изменения (id сохраняется).
        None в ответ -> операция отменена (сообщение уже выведено).
        """
        raise NotImplementedError

    def _render_full(self, entity: T) -> str:
        return getattr(entity, "to_full_string", getattr(entity, "to_string"))()

    def _release(self, entity: T) -> bool:
        """
        Вызывается перед удалением. False -> удалять нельзя (сообщение уже выведено).
        """
        return True

    # --- helpers ---

    def _find(self) -> T | None:
        target_id = self.validator.prompt_string(
            f"Введите id ({self.entity_label}): ", "id не может быть пустым."
        )
        entity, errors = self.repo.get_by_id(target_id)
        if entity is None:
            self.console.say(errors[0]["message"] if errors else f"id={target_id} не найден")
        return entity

    def pick_existing(self, repo: ObservableEntityRepo, label: str):
        """
        Спрашивает id существующей записи из repo, пока такая не найдётся.
        Пустой repo -> None (спрашивать нечего).
        """
        items = repo.get_all()
        if not items:
            self.console.say(f"Нет ни одной записи ({label}). Сначала добавьте её.")
            return None
        self.console.say(f"Доступные записи ({label}):")
        for item in items:
            self.console.say(f"- {item.to_string()}")

        def parse(raw: str):
            v = raw.strip()
            found, _ = repo.get_by_id(v)
            if found is None:
                raise MalformedInput(f"Запись ({label}) с id='{v}' не найдена. Повторите ввод.")
            return found

        return self.validator.read_until_valid(f"Введите id ({label}): ", parse)

    # --- actions ---

    def add(self) -> None:
        entity = self._collect(None)
        if entity is None:
            return
        created = self.repo.add(entity)
        self.console.say(f"✓ Добавлено: {created.to_string()}")

    def list_all(self) -> None:
        items = self.repo.get_all()
        if not items:
            self.console.say("Список пуст.")
            return
        self.console.say(f"Всего записей: {len(items)}")
        for item in items:
            self.console.say(f"- {item.to_string()}")

    def show(self) -> None:
        entity = self._find()
        if entity is not None:
            self.console.say(self._render_full(entity))

    def update(self) -> None:
        entity = self._find()
        if entity is None:
            return
        target_id = self.repo.base_repo().id_of(entity)
        updated = self._collect(entity)
        if updated is None:
            return
        try:
            saved = self.repo.replace_by_id(target_id, updated)
        except ValueError as exc:
            logger.warning("Не удалось обновить %s id=%s: %s", self.entity_label, target_id, exc)
            self.console.say(f"✗ {exc}")
            return
        self.console.say(f"✓ Обновлено: {saved.to_string()}")

    def delete(self) -> None:
        target_id = self.validator.prompt_string(
            f"Введите id ({self.entity_label}) для удаления: ", "id не может быть пустым."
        )
        entity, errors = self.repo.get_by_id(target_id)
        if entity is None:
            self.console.say(f"✗ {errors[0]['message'] if errors else 'Не удалось удалить'}")
            return
        if not self._release(entity):
            return
        deleted, errors = self.repo.delete_by_id(target_id)
        if deleted is None:
            self.console.say(f"✗ {errors[0]['message'] if errors else 'Не удалось удалить'}")
            return
        self.console.say(f"✓ Удалено: {deleted.to_string()}")

    # --- меню ---

    def menu_actions(self) -> list[MenuAction]:
        return [
            ("Добавить", self.add),
            ("Показать все", self.list_all),
            ("Найти по id", self.show),
            ("Изменить", self.update),
            ("Удалить", self.delete),
        ]

    def menu(self) -> MenuNode:
        return MenuNode(self.title, self.menu_actions(), self.selector, self.console)
