# ticket_controller.py
from __future__ import annotations

from crud_controller import CrudController
from transport_domain import Ticket
from transport_enums import TicketStatus, TransportType


class TicketController(CrudController[Ticket]):
    title = "Билеты"
    entity_label = "билет"

    def _collect(self, current: Ticket | None) -> Ticket:
        v = self.validator
        self.console.say("Тип транспорта:")
        transport_type = self.selector.choose_enum(TransportType)
        purchase_price = v.prompt_decimal(
            "Цена закупки: ", "Введите число, например 120.50.", minimum=0
        )
        sale_price = v.prompt_decimal(
            "Цена продажи: ", "Введите число, например 150.00.", minimum=0
        )
        sale_date = v.prompt_timestamp("Дата продажи (yyyy-MM-dd HH:mm:ss): ")
        self.console.say("Статус билета:")
        ticket_status = self.selector.choose_enum(TicketStatus)

        fields = dict(
            transport_type=transport_type,
            purchase_price=purchase_price,
            sale_price=sale_price,
            sale_date=sale_date,
            ticket_status=ticket_status,
        )
        if current is None:
            return Ticket(ticket_id=None, **fields)
        for name, value in fields.items():
            setattr(current, name, value)
        return current

    def _release(self, ticket: Ticket) -> bool:
        """Перед удалением отвязываем билет от всех договоров."""
        if self.contracts is None:
            return True
        for contract in self.contracts.get_all():
            if contract.remove_ticket(ticket.ticket_id) is not None:
                self.contracts.replace_by_id(contract.contract_id, contract)
                self.console.say(f"Билет отвязан от договора {contract.contract_id}")
        return True
