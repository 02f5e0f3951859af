# main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from admin_menu import build_admin_menu
from app_config import AppConfig, load_config
from base_entity_repo import InMemoryEntityRepo
from choice_selector import ChoiceSelector
from console_io import ConsoleIO
from contract_controller import ContractController
from credentials import StaticCredentialVerifier
from errors import ConfigurationError
from input_validator import InputValidator
from logging_config import configure_logging
from mvc_observer import AuditLogObserver
from observable_repo import ObservableEntityRepo
from partner_controller import PartnerController
from session import Session
from special_offer_controller import SpecialOfferController
from ticket_controller import TicketController

logger = logging.getLogger(__name__)


def make_repo(
    id_attr: str, entity_name: str, id_factory: Callable[[], str] | None = None
) -> ObservableEntityRepo:
    repo = ObservableEntityRepo(
        InMemoryEntityRepo(id_attr, entity_name=entity_name, id_factory=id_factory)
    )
    repo.attach(AuditLogObserver())
    return repo


def build_session(
    console: ConsoleIO,
    config: AppConfig,
    *,
    id_factory: Callable[[], str] | None = None,
) -> Session:
    """Собирает всё дерево: репозитории -> контроллеры -> меню администратора -> сессия."""
    validator = InputValidator(console, max_attempts=config.max_attempts)
    selector = ChoiceSelector(validator)

    partners = make_repo("partner_id", "partner", id_factory)
    contracts = make_repo("contract_id", "contract", id_factory)
    tickets = make_repo("ticket_id", "ticket", id_factory)
    offers = make_repo("offer_id", "special_offer", id_factory)

    admin_menu = build_admin_menu(
        PartnerController(partners, validator, selector, contracts=contracts),
        ContractController(contracts, partners, tickets, offers, validator, selector),
        TicketController(tickets, validator, selector, contracts=contracts),
        SpecialOfferController(offers, validator, selector, contracts=contracts),
        selector,
        console,
    )
    credentials = StaticCredentialVerifier(config.admin_username, config.admin_password)
    return Session(console, validator, credentials, admin_menu)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Консоль администратора транспорта.")
    parser.add_argument("--config", help="Путь к YAML-файлу настроек (по умолчанию transport.yaml).")
    args = parser.parse_args(argv)

    console = ConsoleIO()
    try:
        config = load_config(args.config)
        configure_logging(config.log_level, config.log_file)
    except (ConfigurationError, ValueError) as exc:
        # ValueError: неизвестный уровень логирования
        logger.error("Ошибка конфигурации: %s", exc)
        console.say(f"Ошибка конфигурации: {exc}")
        return 2

    session = build_session(console, config)
    logger.info("Консоль запущена")
    try:
        session.start()
    except ConfigurationError as exc:
        logger.error("Ошибка конфигурации: %s", exc)
        console.say(f"Ошибка конфигурации: {exc}")
        return 2
    except (EOFError, KeyboardInterrupt):
        console.say("\nВвод завершён. До свидания.")
        logger.info("Консоль закрыта: конец ввода")
        return 0
    console.say("До свидания.")
    logger.info("Консоль закрыта")
    return 0


if __name__ == "__main__":
    sys.exit(main())
