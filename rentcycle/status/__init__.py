"""Payment status classification public API."""

from .classifier import assess_rent_status, classify_payment_status, days_until_due
from .enums import PaymentStatus, PaymentType
from .types import RentStatus, StatusInfo

__all__ = [
    "PaymentStatus",
    "PaymentType",
    "StatusInfo",
    "RentStatus",
    "classify_payment_status",
    "days_until_due",
    "assess_rent_status",
]
