# admin_menu.py
from __future__ import annotations

from choice_selector import ChoiceSelector
from console_io import ConsoleIO
from menu_node import MenuNode
from crud_controller import CrudController


def build_admin_menu(
    partners: CrudController,
    contracts: CrudController,
    tickets: CrudController,
    offers: CrudController,
    selector: ChoiceSelector,
    console: ConsoleIO,
) -> MenuNode:
    """Поддерево администратора: по подменю на каждую сущность, выход через "Выйти"."""
    return MenuNode(
        "Меню администратора",
        [
            ("Партнёры", partners.menu().run),
            ("Договоры", contracts.menu().run),
            ("Билеты", tickets.menu().run),
            ("Спецпредложения", offers.menu().run),
        ],
        selector,
        console,
        back_label="Выйти из аккаунта",
    )
