# transport_enums.py
from __future__ import annotations

from enum import Enum


class ContractStatus(Enum):
    ACTIVE = "active"
    TERMINATED = "terminated"
    SUSPENDED = "suspended"


class PartnerStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class TransportType(Enum):
    AIRPLANE = "airplane"
    TRAIN = "train"
    BUS = "bus"


class TicketStatus(Enum):
    SOLD = "sold"
    CANCELED = "canceled"
    PENDING = "pending"


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"


class OfferStatus(Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    SUSPENDED = "suspended"
