"""
InputValidator tests
====================

Цикл "спрашиваем, пока не ответят правильно" поверх сценария ввода.
На каждую неудачную попытку ровно одно сообщение, после успеха поток
стоит в начале следующей строки.
"""

from datetime import datetime

import pytest

from errors import RetryLimitExceeded
from input_validator import InputKind
from transport_enums import ContractStatus

STRING_ERROR = "Строка не может быть пустой."
BOOL_ERROR = "Введите true или false."


class TestPromptString:

    def test_blank_lines_are_reprompted(self, scripted):
        s = scripted("\n   \nhello\nnext\n")
        assert s.validator.prompt_string("Имя: ", STRING_ERROR) == "hello"
        assert s.output.count(STRING_ERROR) == 2
        assert s.output.count("Имя: ") == 3
        assert s.remaining() == "next\n"

    def test_value_is_trimmed(self, scripted):
        s = scripted("  Casablanca  \n")
        assert s.validator.prompt_string("Город: ", STRING_ERROR) == "Casablanca"
        assert STRING_ERROR not in s.output


class TestPromptBoolean:

    @pytest.mark.parametrize(
        "line, expected", [("true", True), ("True", True), ("FALSE", False), ("false", False)]
    )
    def test_accepts(self, scripted, line, expected):
        s = scripted(f"{line}\n")
        assert s.validator.prompt_boolean("? ", BOOL_ERROR) is expected

    def test_yes_is_rejected_then_reprompted(self, scripted):
        s = scripted("yes\ntrue\n")
        assert s.validator.prompt_boolean("? ", BOOL_ERROR) is True
        assert s.output.count(BOOL_ERROR) == 1


class TestPromptTimestamp:

    def test_invalid_month_then_valid(self, scripted):
        s = scripted("2024-13-01 00:00:00\n2024-01-15 10:30:00\n")
        value = s.validator.prompt_timestamp("Дата: ")
        assert value == datetime(2024, 1, 15, 10, 30, 0)
        assert s.output.count("yyyy-MM-dd HH:mm:ss") == 1


class TestPromptDecimal:

    def test_malformed_uses_caller_message_range_uses_specific(self, scripted):
        s = scripted("-1\nabc\n2.5\n")
        value = s.validator.prompt_decimal("Тариф: ", "Введите число.", minimum=0)
        assert value == 2.5
        assert s.output.count("Введите число.") == 1
        assert s.output.count("не меньше 0") == 1

    def test_no_range_check_by_default(self, scripted):
        s = scripted("-7.25\n")
        assert s.validator.prompt_decimal("x: ") == -7.25


class TestPromptEnumMember:

    def test_case_insensitive(self, scripted):
        s = scripted("inactive_typo\nactive\n")
        assert s.validator.prompt_enum_member("Статус: ", ContractStatus) is ContractStatus.ACTIVE
        assert s.output.count("Некорректный ввод. Введите значение из списка.") == 1


class TestPromptText:

    def test_empty_is_allowed(self, scripted):
        s = scripted("\nnext\n")
        assert s.validator.prompt_text("Условия: ") == ""
        assert s.remaining() == "next\n"


class TestPromptAndRead:

    def test_dispatches_every_kind(self, scripted):
        s = scripted("abc\n2024-01-15 10:30:00\n3.5\nFALSE\nsuspended\n2\n")
        v = s.validator
        assert v.prompt_and_read(InputKind.STRING, "s: ") == "abc"
        assert v.prompt_and_read(InputKind.TIMESTAMP, "t: ") == datetime(2024, 1, 15, 10, 30)
        assert v.prompt_and_read(InputKind.DECIMAL, "d: ", minimum=0) == 3.5
        assert v.prompt_and_read(InputKind.BOOLEAN, "b: ") is False
        assert (
            v.prompt_and_read(InputKind.ENUM_MEMBER, "e: ", enum_type=ContractStatus)
            is ContractStatus.SUSPENDED
        )
        assert v.prompt_and_read(InputKind.INTEGER, "i: ", lo=0, hi=3) == 2


class TestRetryBound:

    def test_limit_is_only_for_harness(self, scripted):
        s = scripted("\n\n\n\n", max_attempts=3)
        with pytest.raises(RetryLimitExceeded) as exc:
            s.validator.prompt_string("Имя: ", STRING_ERROR)
        assert exc.value.attempts == 3
        assert s.output.count(STRING_ERROR) == 3
        assert s.remaining() == "\n"

    def test_unbounded_keeps_asking(self, scripted):
        s = scripted("\n" * 50 + "ok\n", max_attempts=None)
        assert s.validator.prompt_string("Имя: ", STRING_ERROR) == "ok"
        assert s.output.count(STRING_ERROR) == 50

    def test_end_of_input(self, scripted):
        s = scripted("")
        with pytest.raises(EOFError):
            s.validator.prompt_string("Имя: ", STRING_ERROR)
