# contract.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from errors import OutOfRange
from transport_domain import Partner, SpecialOffer, Ticket
from transport_enums import ContractStatus

logger = logging.getLogger(__name__)


class Contract:
    """
    Договор с партнёром-перевозчиком. Единственная сущность со своими правилами:
    - contract_id назначает хранилище, после этого он неизменен;
    - special_rate не может быть отрицательным;
    - partner обязателен (ссылка, договор партнёром не владеет);
    - tickets/special_offers: договор владеет только членством в списках.

    end_date раньше starting_date сейчас НЕ запрещено: пишем предупреждение в лог
    и принимаем как есть.
    """

    def __init__(
        self,
        *,
        partner: Partner,
        starting_date: datetime,
        end_date: datetime,
        special_rate: float,
        agreement_conditions: str = "",
        renewable: bool = False,
        contract_status: ContractStatus = ContractStatus.ACTIVE,
        contract_id: str | None = None,
        tickets: list[Ticket] | None = None,
        special_offers: list[SpecialOffer] | None = None,
    ) -> None:
        self.__contract_id: str | None = None
        if contract_id is not None:
            self.contract_id = contract_id

        self.partner = partner
        self.__starting_date = starting_date
        self.__end_date = end_date
        self._check_dates()
        self.special_rate = special_rate
        self.agreement_conditions = agreement_conditions
        self.renewable = renewable
        self.contract_status = contract_status

        self.__tickets: list[Ticket] = []
        self.__special_offers: list[SpecialOffer] = []
        for t in tickets or []:
            self.add_ticket(t)
        for o in special_offers or []:
            self.add_special_offer(o)

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> Contract:
        """Собирает договор из уже провалидированных полей (ключи = имена атрибутов)."""
        return cls(**fields)

    # ===== Свойства =====
    @property
    def contract_id(self) -> str | None:
        return self.__contract_id

    @contract_id.setter
    def contract_id(self, value: str) -> None:
        if self.__contract_id is not None and value != self.__contract_id:
            raise ValueError(
                f"ImmutableId: contract_id уже назначен ({self.__contract_id}) и не меняется"
            )
        if not str(value).strip():
            raise ValueError("contract_id не может быть пустым")
        self.__contract_id = str(value)

    @property
    def partner(self) -> Partner:
        return self.__partner

    @partner.setter
    def partner(self, value: Partner) -> None:
        if not isinstance(value, Partner):
            raise TypeError("partner должен быть Partner")
        self.__partner = value

    @property
    def starting_date(self) -> datetime:
        return self.__starting_date

    @starting_date.setter
    def starting_date(self, value: datetime) -> None:
        self.__starting_date = value
        self._check_dates()

    @property
    def end_date(self) -> datetime:
        return self.__end_date

    @end_date.setter
    def end_date(self, value: datetime) -> None:
        self.__end_date = value
        self._check_dates()

    @property
    def special_rate(self) -> float:
        return self.__special_rate

    @special_rate.setter
    def special_rate(self, value: float) -> None:
        rate = float(value)
        if rate < 0:
            raise OutOfRange("special_rate не может быть отрицательным")
        self.__special_rate = rate

    @property
    def agreement_conditions(self) -> str:
        return self.__agreement_conditions

    @agreement_conditions.setter
    def agreement_conditions(self, value: str | None) -> None:
        self.__agreement_conditions = "" if value is None else str(value)

    @property
    def renewable(self) -> bool:
        return self.__renewable

    @renewable.setter
    def renewable(self, value: bool) -> None:
        self.__renewable = bool(value)

    @property
    def contract_status(self) -> ContractStatus:
        return self.__contract_status

    @contract_status.setter
    def contract_status(self, value: ContractStatus) -> None:
        if not isinstance(value, ContractStatus):
            raise TypeError("contract_status должен быть ContractStatus")
        self.__contract_status = value

    # ===== Связанные сущности =====
    @property
    def tickets(self) -> list[Ticket]:
        return list(self.__tickets)

    @property
    def special_offers(self) -> list[SpecialOffer]:
        return list(self.__special_offers)

    def add_ticket(self, ticket: Ticket) -> bool:
        """False, если такой билет уже привязан."""
        if any(t is ticket or (t.ticket_id and t.ticket_id == ticket.ticket_id)
               for t in self.__tickets):
            return False
        self.__tickets.append(ticket)
        return True

    def remove_ticket(self, ticket_id: str) -> Ticket | None:
        for i, t in enumerate(self.__tickets):
            if t.ticket_id == ticket_id:
                return self.__tickets.pop(i)
        return None

    def add_special_offer(self, offer: SpecialOffer) -> bool:
        if any(o is offer or (o.offer_id and o.offer_id == offer.offer_id)
               for o in self.__special_offers):
            return False
        self.__special_offers.append(offer)
        return True

    def remove_special_offer(self, offer_id: str) -> SpecialOffer | None:
        for i, o in enumerate(self.__special_offers):
            if o.offer_id == offer_id:
                return self.__special_offers.pop(i)
        return None

    # ===== Служебное =====
    def _check_dates(self) -> None:
        start, end = self.__starting_date, self.__end_date
        if end < start:
            logger.warning(
                "Договор %s: end_date %s раньше starting_date %s", self.contract_id, end, start
            )

    # ===== Вывод =====
    def to_full_string(self) -> str:
        return (
            f"id:               {self.contract_id}\n"
            f"Партнёр:          {self.partner.company_name} ({self.partner.partner_id})\n"
            f"Начало:           {self.starting_date:%Y-%m-%d %H:%M:%S}\n"
            f"Окончание:        {self.end_date:%Y-%m-%d %H:%M:%S}\n"
            f"Спец. тариф:      {self.special_rate:g}\n"
            f"Условия:          {self.agreement_conditions or '—'}\n"
            f"Продлеваемый:     {'да' if self.renewable else 'нет'}\n"
            f"Статус:           {self.contract_status.name}\n"
            f"Билетов:          {len(self.__tickets)}\n"
            f"Спецпредложений:  {len(self.__special_offers)}"
        )

    def to_string(self) -> str:
        return (
            f"[{self.contract_id}] {self.partner.company_name}: "
            f"{self.starting_date:%Y-%m-%d} .. {self.end_date:%Y-%m-%d}, "
            f"тариф {self.special_rate:g}, {self.contract_status.name}"
        )

    def __str__(self) -> str:
        return self.to_string()
