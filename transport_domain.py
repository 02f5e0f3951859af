from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from transport_enums import (
    DiscountType, OfferStatus, PartnerStatus, TicketStatus, TransportType,
)

# Простые носители данных: только атрибуты, без собственной логики.

@dataclass(slots=True)
class Partner:
    partner_id: Optional[str]
    company_name: str
    commercial_contact: str
    transport_type: TransportType
    geographical_zone: str
    special_conditions: str
    partner_status: PartnerStatus
    creation_date: datetime = field(default_factory=datetime.now)

    def to_string(self) -> str:
        return (f"[{self.partner_id}] {self.company_name} ({self.transport_type.name}), "
                f"{self.geographical_zone}, статус {self.partner_status.name}")


@dataclass(slots=True)
class Ticket:
    ticket_id: Optional[str]
    transport_type: TransportType
    purchase_price: float
    sale_price: float
    sale_date: datetime
    ticket_status: TicketStatus

    def to_string(self) -> str:
        return (f"[{self.ticket_id}] {self.transport_type.name}: "
                f"{self.purchase_price:.2f} -> {self.sale_price:.2f}, "
                f"{self.sale_date:%Y-%m-%d %H:%M:%S}, {self.ticket_status.name}")


@dataclass(slots=True)
class SpecialOffer:
    offer_id: Optional[str]
    offer_name: str
    description: str
    start_date: datetime
    end_date: datetime
    discount_type: DiscountType
    discount_value: float
    conditions: str
    offer_status: OfferStatus

    def to_string(self) -> str:
        unit = "%" if self.discount_type is DiscountType.PERCENTAGE else ""
        return (f"[{self.offer_id}] {self.offer_name}: -{self.discount_value:g}{unit}, "
                f"{self.start_date:%Y-%m-%d} .. {self.end_date:%Y-%m-%d}, {self.offer_status.name}")
