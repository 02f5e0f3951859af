# menu_node.py
from __future__ import annotations

import logging
from typing import Callable

from choice_selector import ChoiceSelector
from console_io import ConsoleIO

logger = logging.getLogger(__name__)

MenuAction = tuple[str, Callable[[], object]]


class MenuNode:
    """
    Узел дерева меню: заголовок + объявленный список пар (название, обработчик).
    Последним пунктом всегда идёт "назад". После каждого действия возвращаемся
    в этот же узел, пока оператор не выберет "назад".
    """

    def __init__(
        self,
        title: str,
        actions: list[MenuAction],
        selector: ChoiceSelector,
        console: ConsoleIO,
        *,
        back_label: str = "Назад",
    ) -> None:
        self.title = title
        self.actions = list(actions)
        self.selector = selector
        self.console = console
        self.back_label = back_label

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.actions] + [self.back_label]

    def run(self) -> None:
        while True:
            self.console.say(f"\n================== {self.title} ==================")
            idx = self.selector.choose(self.labels)
            if idx == len(self.actions):
                logger.debug("Выход из меню '%s'", self.title)
                return
            label, handler = self.actions[idx]
            logger.debug("Меню '%s': выбран пункт '%s'", self.title, label)
            handler()
