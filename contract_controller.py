# contract_controller.py
from __future__ import annotations

import logging
from typing import Any

from choice_selector import ChoiceSelector
from contract import Contract
from crud_controller import CrudController
from input_validator import InputValidator
from menu_node import MenuAction
from observable_repo import ObservableEntityRepo
from transport_domain import Partner, SpecialOffer, Ticket
from transport_enums import ContractStatus

logger = logging.getLogger(__name__)


class ContractController(CrudController[Contract]):
    """
    Подменю договоров. Кроме обычного CRUD умеет привязывать и отвязывать
    билеты и спецпредложения (договор владеет только членством в списках).

    Порядок вопросов при создании и изменении один и тот же:
    партнёр, начало, окончание, спец. тариф, условия, продлеваемость, статус.
    """

    title = "Договоры"
    entity_label = "договор"

    def __init__(
        self,
        repo: ObservableEntityRepo[Contract],
        partners: ObservableEntityRepo[Partner],
        tickets: ObservableEntityRepo[Ticket],
        offers: ObservableEntityRepo[SpecialOffer],
        validator: InputValidator,
        selector: ChoiceSelector,
    ) -> None:
        super().__init__(repo, validator, selector)
        self.partners = partners
        self.tickets = tickets
        self.offers = offers

    def _collect(self, current: Contract | None) -> Contract | None:
        partner = self.pick_existing(self.partners, "партнёр")
        if partner is None:
            return None

        v = self.validator
        fields: dict[str, Any] = {"partner": partner}
        fields["starting_date"] = v.prompt_timestamp("Дата начала (yyyy-MM-dd HH:mm:ss): ")
        fields["end_date"] = v.prompt_timestamp("Дата окончания (yyyy-MM-dd HH:mm:ss): ")
        fields["special_rate"] = v.prompt_decimal(
            "Специальный тариф: ", "Введите число, например 12.5.", minimum=0
        )
        fields["agreement_conditions"] = v.prompt_text("Условия соглашения (можно пусто): ")
        fields["renewable"] = v.prompt_boolean(
            "Продлеваемый (true/false): ", "Введите 'true' или 'false'."
        )
        self.console.say("Статус договора:")
        fields["contract_status"] = self.selector.choose_enum(ContractStatus)

        if current is not None:
            fields["contract_id"] = current.contract_id
            fields["tickets"] = current.tickets
            fields["special_offers"] = current.special_offers
        return Contract.from_fields(fields)

    # --- связи ---

    def _save(self, contract: Contract) -> None:
        self.repo.replace_by_id(contract.contract_id, contract)

    def link_ticket(self) -> None:
        contract = self._find()
        if contract is None:
            return
        ticket = self.pick_existing(self.tickets, "билет")
        if ticket is None:
            return
        if not contract.add_ticket(ticket):
            self.console.say("Этот билет уже привязан к договору.")
            return
        self._save(contract)
        self.console.say(f"✓ Билет {ticket.ticket_id} привязан к договору {contract.contract_id}")

    def unlink_ticket(self) -> None:
        contract = self._find()
        if contract is None:
            return
        ticket_id = self.validator.prompt_string("Введите id билета: ", "id не может быть пустым.")
        if contract.remove_ticket(ticket_id) is None:
            self.console.say(f"Билет {ticket_id} не привязан к договору.")
            return
        self._save(contract)
        self.console.say(f"✓ Билет {ticket_id} отвязан от договора {contract.contract_id}")

    def link_special_offer(self) -> None:
        contract = self._find()
        if contract is None:
            return
        offer = self.pick_existing(self.offers, "спецпредложение")
        if offer is None:
            return
        if not contract.add_special_offer(offer):
            self.console.say("Это спецпредложение уже привязано к договору.")
            return
        self._save(contract)
        self.console.say(
            f"✓ Спецпредложение {offer.offer_id} привязано к договору {contract.contract_id}"
        )

    def unlink_special_offer(self) -> None:
        contract = self._find()
        if contract is None:
            return
        offer_id = self.validator.prompt_string(
            "Введите id спецпредложения: ", "id не может быть пустым."
        )
        if contract.remove_special_offer(offer_id) is None:
            self.console.say(f"Спецпредложение {offer_id} не привязано к договору.")
            return
        self._save(contract)
        self.console.say(f"✓ Спецпредложение {offer_id} отвязано от договора {contract.contract_id}")

    def menu_actions(self) -> list[MenuAction]:
        return super().menu_actions() + [
            ("Привязать билет", self.link_ticket),
            ("Отвязать билет", self.unlink_ticket),
            ("Привязать спецпредложение", self.link_special_offer),
            ("Отвязать спецпредложение", self.unlink_special_offer),
        ]
