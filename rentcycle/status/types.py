"""Result types for payment status classification."""

from dataclasses import dataclass, field
from typing import List

from rentcycle.period.types import BillingPeriod, PaymentRecord
from rentcycle.status.enums import PaymentStatus


@dataclass(frozen=True)
class StatusInfo:
    """Status of a billing period with its display label and style hints."""

    status: PaymentStatus
    label: str
    color_class: str
    bg_color_class: str


@dataclass
class RentStatus:
    """Rent standing of a tenant for the period containing the reference date.

    Attributes:
        period: Current billing period
        status_info: Classified status of that period
        covering_payments: Payments whose explicit period overlaps it
        total_paid: Sum of the covering payments' amounts
        remaining_amount: Balance left by the latest partial payment
        is_fully_paid: Whether the covering payments settle the period
    """

    period: BillingPeriod
    status_info: StatusInfo
    covering_payments: List[PaymentRecord] = field(default_factory=list)
    total_paid: float = 0.0
    remaining_amount: float = 0.0
    is_fully_paid: bool = False

    @property
    def status(self) -> PaymentStatus:
        return self.status_info.status

    @property
    def label(self) -> str:
        return self.status_info.label
