"""Payment coverage of billing periods."""

from __future__ import annotations

from typing import Any, Iterable, List

from rentcycle.period.types import BillingPeriod, PaymentRecord, as_payment_record
from rentcycle.utils.date import DateLike, normalize_date


def periods_overlap(
    payment_start: DateLike,
    payment_end: DateLike,
    cycle_start: DateLike,
    cycle_end: DateLike,
) -> bool:
    """True if the two closed date intervals share at least one day."""
    return normalize_date(payment_start) <= normalize_date(cycle_end) and (
        normalize_date(payment_end) >= normalize_date(cycle_start)
    )


def covering_payments(
    payments: Iterable[Any], period: BillingPeriod
) -> List[PaymentRecord]:
    """Payments whose explicit period overlaps ``period``, in input order."""
    return [
        p
        for p in map(as_payment_record, payments)
        if p.has_period
        and periods_overlap(
            p.payment_period_start,
            p.payment_period_end,
            period.start_date,
            period.end_date,
        )
    ]


def has_covering_payment(payments: Iterable[Any], period: BillingPeriod) -> bool:
    return bool(covering_payments(payments, period))
