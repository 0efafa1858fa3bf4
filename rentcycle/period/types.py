"""Value types for rent period calculations.

All types are immutable; calculators build new instances rather than editing
the ones they are given.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from rentcycle.utils.date import DateLike, to_date


@dataclass(frozen=True)
class BillingPeriod:
    """A tenant's billing cycle.

    Attributes:
        start_date: First day of the cycle
        end_date: Last day of the cycle (inclusive)
        next_period_start: First day of the following cycle
    """

    start_date: date
    end_date: date
    next_period_start: date

    def contains(self, day: DateLike) -> bool:
        """True if ``day`` falls inside [start_date, end_date]."""
        day = to_date(day)
        return self.start_date <= day <= self.end_date

    @property
    def days(self) -> int:
        """Number of calendar days in the cycle, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def as_tuple(self) -> tuple[date, date, date]:
        return self.start_date, self.end_date, self.next_period_start


@dataclass(frozen=True)
class ManualPeriod:
    """A cycle projected from an explicit period end."""

    start_date: date
    end_date: date


def _optional_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    return to_date(value)


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class PaymentRecord:
    """A recorded payment, optionally tagged with the period it was applied to.

    ``payment_period_start``/``payment_period_end`` are set when an admin fixed
    the period by hand; the latest such period re-anchors every later cycle.
    """

    amount: float
    payment_date: date
    payment_period_start: Optional[date] = None
    payment_period_end: Optional[date] = None
    payment_type: Optional[str] = None
    remaining_amount: Optional[float] = None

    def __post_init__(self):
        # Dates are stored without time-of-day so records compare with each other
        object.__setattr__(self, "payment_date", to_date(self.payment_date))
        object.__setattr__(
            self, "payment_period_start", _optional_date(self.payment_period_start)
        )
        object.__setattr__(
            self, "payment_period_end", _optional_date(self.payment_period_end)
        )

    @property
    def has_period(self) -> bool:
        return (
            self.payment_period_start is not None
            and self.payment_period_end is not None
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PaymentRecord":
        """Build a record from an API payload (camelCase) or snake_case mapping."""
        payment_date = _pick(data, "paymentDate", "payment_date")
        if payment_date is None:
            raise ValueError("payment record must include a payment date")
        remaining = _pick(data, "remainingAmount", "remaining_amount")
        return cls(
            amount=float(_pick(data, "amount") or 0.0),
            payment_date=to_date(payment_date),
            payment_period_start=_optional_date(
                _pick(data, "paymentPeriodStart", "payment_period_start")
            ),
            payment_period_end=_optional_date(
                _pick(data, "paymentPeriodEnd", "payment_period_end")
            ),
            payment_type=_pick(data, "paymentType", "payment_type"),
            remaining_amount=float(remaining) if remaining is not None else None,
        )


def as_payment_record(payment: Any) -> PaymentRecord:
    if isinstance(payment, PaymentRecord):
        return payment
    if isinstance(payment, Mapping):
        return PaymentRecord.from_dict(payment)
    raise TypeError(f"Unsupported payment record: {payment!r}")
