# session.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from console_io import ConsoleIO
from credentials import CredentialVerifier
from errors import RetryLimitExceeded
from input_validator import InputValidator
from menu_node import MenuNode

logger = logging.getLogger(__name__)


class SessionState(Enum):
    UNAUTHENTICATED = "unauthenticated"
    ADMIN_SESSION = "admin_session"
    CUSTOMER_SESSION = "customer_session"
    REGISTERING = "registering"
    TERMINATED = "terminated"


class Role(Enum):
    NONE = "none"
    ADMIN = "admin"
    CUSTOMER = "customer"


# Обработчик клиентского поддерева. True -> клиент вошёл.
CustomerHandler = Callable[["Session"], Optional[bool]]


def _customer_login_placeholder(session: Session) -> bool:
    session.console.say(" Вход клиента: пока недоступен.")
    return False


def _customer_register_placeholder(session: Session) -> bool:
    session.console.say(" Регистрация клиента: пока недоступна.")
    return False


class Session:
    """
    Корневой автомат консоли.

    UNAUTHENTICATED --1 + верный логин--> ADMIN_SESSION --выход--> UNAUTHENTICATED
    UNAUTHENTICATED --2--> CUSTOMER_SESSION --> UNAUTHENTICATED
    UNAUTHENTICATED --3--> REGISTERING --> UNAUTHENTICATED
    UNAUTHENTICATED --0--> TERMINATED

    authenticated_role живёт весь процесс: при выходе из поддерева не сбрасывается.
    Попытки входа не ограничены (блокировки нет).
    """

    ROOT_MIN = 0
    ROOT_MAX = 3

    def __init__(
        self,
        console: ConsoleIO,
        validator: InputValidator,
        credentials: CredentialVerifier,
        admin_menu: MenuNode,
        *,
        customer_login: CustomerHandler | None = None,
        customer_register: CustomerHandler | None = None,
    ) -> None:
        self.console = console
        self.validator = validator
        self.credentials = credentials
        self.admin_menu = admin_menu
        self.customer_login = customer_login or _customer_login_placeholder
        self.customer_register = customer_register or _customer_register_placeholder

        self.state = SessionState.UNAUTHENTICATED
        self.current_choice: int | None = None
        self.authenticated_role = Role.NONE
        self.history: list[SessionState] = [self.state]

        # Объявленный список пунктов корневого меню: (номер, название, обработчик)
        self.root_options: list[tuple[int, str, Callable[[], None]]] = [
            (1, "Войти как администратор", self._login_admin),
            (2, "Войти как клиент", self._login_customer),
            (3, "Зарегистрироваться как клиент", self._register_customer),
            (0, "Выход", self._terminate),
        ]

    # ===== переходы =====

    def _transition(self, new_state: SessionState) -> None:
        logger.info("Сессия: %s -> %s", self.state.name, new_state.name)
        self.state = new_state
        self.history.append(new_state)

    def _login_admin(self) -> None:
        attempts = 0
        while True:
            username = self.console.ask("Введите имя пользователя : ").strip()
            password = self.console.ask("Введите пароль : ").strip()
            if self.credentials.verify(username, password):
                break
            attempts += 1
            logger.warning("Неудачная попытка входа администратора (пользователь %r)", username)
            self.console.say("Неверное имя пользователя или пароль, попробуйте ещё раз")
            max_attempts = self.validator.max_attempts
            if max_attempts is not None and attempts >= max_attempts:
                raise RetryLimitExceeded("login", attempts)

        self.authenticated_role = Role.ADMIN
        self._transition(SessionState.ADMIN_SESSION)
        try:
            self.admin_menu.run()
        finally:
            if self.state is SessionState.ADMIN_SESSION:
                self._transition(SessionState.UNAUTHENTICATED)

    def _login_customer(self) -> None:
        self._transition(SessionState.CUSTOMER_SESSION)
        if self.customer_login(self):
            self.authenticated_role = Role.CUSTOMER
        self._transition(SessionState.UNAUTHENTICATED)

    def _register_customer(self) -> None:
        self._transition(SessionState.REGISTERING)
        if self.customer_register(self):
            self.authenticated_role = Role.CUSTOMER
        self._transition(SessionState.UNAUTHENTICATED)

    def _terminate(self) -> None:
        self._transition(SessionState.TERMINATED)

    # ===== корневой цикл =====

    def render_root(self) -> None:
        self.console.say("\n================== Транспорт: меню ==================")
        for number, label, _ in self.root_options:
            self.console.say(f"{number}. {label}")
        self.console.say("================== Транспорт: меню ==================\n")

    def step(self) -> None:
        """Одна итерация корневого меню: показать, прочитать выбор, выполнить."""
        self.render_root()
        choice = self.validator.prompt_int(
            "Выберите пункт : ",
            self.ROOT_MIN,
            self.ROOT_MAX,
            f"Некорректный ввод. Введите число от {self.ROOT_MIN} до {self.ROOT_MAX}.",
        )
        self.current_choice = choice
        for number, _, handler in self.root_options:
            if number == choice:
                handler()
                return

    def start(self) -> Session:
        while self.state is not SessionState.TERMINATED:
            self.step()
        return self
