"""
Session state machine tests
===========================

Сквозные сценарии: корневое меню -> вход -> поддерево администратора -> выход.
"""

from enum import Enum

import pytest

from app_config import AppConfig
from credentials import StaticCredentialVerifier
from errors import ConfigurationError
from main import build_session
from menu_node import MenuNode
from session import Role, Session, SessionState

U = SessionState.UNAUTHENTICATED
BAD_LOGIN = "Неверное имя пользователя или пароль"
# В меню администратора 4 подменю, пятый пункт — выход из аккаунта
ADMIN_LOGOUT = "5"


def make_session(scripted, script, **kwargs):
    s = scripted(script, max_attempts=20)
    session = build_session(s.console, AppConfig(max_attempts=20), **kwargs)
    return s, session


class TestRootLoop:

    def test_exit(self, scripted):
        s, session = make_session(scripted, "0\n")
        session.start()
        assert session.state is SessionState.TERMINATED
        assert session.history == [U, SessionState.TERMINATED]
        assert session.current_choice == 0
        assert session.authenticated_role is Role.NONE

    def test_invalid_root_choices_reprompt(self, scripted):
        s, session = make_session(scripted, "abc\n7\n-1\n0\n")
        session.start()
        assert session.history == [U, SessionState.TERMINATED]
        assert s.output.count("Некорректный ввод. Введите число от 0 до 3.") == 1
        assert s.output.count("Число вне диапазона. Введите число от 0 до 3.") == 2

    def test_step_handles_one_choice(self, scripted):
        s, session = make_session(scripted, "2\n")
        session.step()
        assert session.state is U
        assert session.current_choice == 2


class TestAdminLogin:

    def test_valid_credentials_enter_admin_session(self, scripted):
        s, session = make_session(scripted, f"1\nadmin\n1234\n{ADMIN_LOGOUT}\n0\n")
        session.start()
        assert session.history == [U, SessionState.ADMIN_SESSION, U, SessionState.TERMINATED]
        assert session.authenticated_role is Role.ADMIN
        assert "Меню администратора" in s.output

    def test_wrong_password_repeats_credential_prompt(self, scripted):
        s, session = make_session(scripted, "1\nadmin\nwrong\n")
        with pytest.raises(EOFError):
            session.start()
        assert session.state is U
        assert SessionState.ADMIN_SESSION not in session.history
        assert s.output.count(BAD_LOGIN) == 1
        assert s.output.count("Введите имя пользователя") == 2

    def test_retry_after_mismatch(self, scripted):
        s, session = make_session(
            scripted, f"1\nadmin\nwrong\nroot\n1234\n admin \n 1234 \n{ADMIN_LOGOUT}\n0\n"
        )
        session.start()
        assert s.output.count(BAD_LOGIN) == 2
        assert session.authenticated_role is Role.ADMIN
        assert session.state is SessionState.TERMINATED

    def test_role_survives_logout(self, scripted):
        s, session = make_session(scripted, f"1\nadmin\n1234\n{ADMIN_LOGOUT}\n2\n0\n")
        session.start()
        assert session.authenticated_role is Role.ADMIN
        assert SessionState.CUSTOMER_SESSION in session.history

    def test_custom_credentials_from_config(self, scripted):
        s = scripted(f"1\nadmin\n1234\nops\ns3cret\n{ADMIN_LOGOUT}\n0\n", max_attempts=20)
        config = AppConfig(admin_username="ops", admin_password="s3cret", max_attempts=20)
        session = build_session(s.console, config)
        session.start()
        assert s.output.count(BAD_LOGIN) == 1
        assert SessionState.ADMIN_SESSION in session.history


class TestCustomerSubtrees:

    def test_login_and_register_return_to_root(self, scripted):
        s, session = make_session(scripted, "2\n3\n0\n")
        session.start()
        assert session.history == [
            U, SessionState.CUSTOMER_SESSION, U, SessionState.REGISTERING, U,
            SessionState.TERMINATED,
        ]
        assert session.authenticated_role is Role.NONE

    def test_customer_handler_can_authenticate(self, scripted):
        s = scripted("2\n0\n", max_attempts=20)
        menu = MenuNode("Пусто", [], s.selector, s.console)
        session = Session(
            s.console, s.validator, StaticCredentialVerifier(), menu,
            customer_login=lambda sess: True,
        )
        session.start()
        assert session.authenticated_role is Role.CUSTOMER


class TestConfigurationError:

    def test_empty_enum_in_admin_subtree_aborts(self, scripted):
        class Empty(Enum):
            pass

        s = scripted("1\nadmin\n1234\n1\n", max_attempts=20)
        menu = MenuNode(
            "Админ", [("Сломано", lambda: s.selector.choose_enum(Empty))], s.selector, s.console
        )
        session = Session(s.console, s.validator, StaticCredentialVerifier(), menu)
        with pytest.raises(ConfigurationError):
            session.start()
        assert session.state is U


class TestIdempotence:

    SCRIPT = f"x\n9\n1\nadmin\nbad\nadmin\n1234\n{ADMIN_LOGOUT}\n3\n2\n0\n"

    def test_same_script_same_result(self, scripted):
        s1, first = make_session(scripted, self.SCRIPT)
        s2, second = make_session(scripted, self.SCRIPT)
        first.start()
        second.start()
        assert first.history == second.history
        assert first.state is second.state is SessionState.TERMINATED
        assert first.current_choice == second.current_choice == 0
        assert first.authenticated_role is second.authenticated_role
        assert s1.output == s2.output
