"""Payment status classification for billing periods."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List, Optional, Tuple

from rentcycle import config
from rentcycle.period.calculator import compute_current_period_with_history
from rentcycle.period.coverage import covering_payments
from rentcycle.period.types import PaymentRecord
from rentcycle.status.enums import PaymentStatus, PaymentType
from rentcycle.status.types import RentStatus, StatusInfo
from rentcycle.utils.date import DateLike, normalize_date

logger = logging.getLogger(__name__)

PAID = StatusInfo(PaymentStatus.PAID, "Paid", "text-green-700", "bg-green-100")
OVERDUE = StatusInfo(PaymentStatus.OVERDUE, "Overdue", "text-red-700", "bg-red-100")
DUE_SOON = StatusInfo(PaymentStatus.DUE_SOON, "Due Soon", "text-amber-700", "bg-amber-100")
PENDING = StatusInfo(PaymentStatus.DUE_SOON, "Pending", "text-gray-700", "bg-gray-100")
PARTIAL = StatusInfo(PaymentStatus.PARTIAL, "Partial", "text-yellow-700", "bg-yellow-100")


def days_until_due(cycle_end: DateLike, today: Optional[DateLike] = None) -> int:
    """Whole days from ``today`` until ``cycle_end`` (negative once past)."""
    today = date.today() if today is None else normalize_date(today)
    return (normalize_date(cycle_end) - today).days


def classify_payment_status(
    cycle_start: DateLike,
    cycle_end: DateLike,
    has_covering_payment: bool,
    today: Optional[DateLike] = None,
) -> StatusInfo:
    """Classify a billing period.

    First match wins: paid, overdue (today after cycle end), due soon (at most
    ``config.DUE_SOON_DAYS`` days left), otherwise pending. Due soon and
    pending share ``PaymentStatus.DUE_SOON`` and differ only in label.
    """
    today = date.today() if today is None else normalize_date(today)
    if has_covering_payment:
        return PAID
    if today > normalize_date(cycle_end):
        return OVERDUE
    if 0 <= days_until_due(cycle_end, today) <= config.get_due_soon_days():
        return DUE_SOON
    return PENDING


def _settlement(payments: List[PaymentRecord]) -> Tuple[bool, float]:
    """Return (is_fully_paid, remaining) for the payments covering one period.

    Untyped payments count as full payments.
    """
    if not payments:
        return False, 0.0
    ordered = sorted(payments, key=lambda p: p.payment_date)
    partials = [p for p in ordered if p.payment_type == PaymentType.PARTIAL.value]
    remaining = (partials[-1].remaining_amount or 0.0) if partials else 0.0
    latest_type = ordered[-1].payment_type
    if latest_type is None or latest_type == PaymentType.FULL.value:
        return True, remaining
    return bool(partials) and remaining == 0, remaining


def assess_rent_status(
    check_in_date: DateLike,
    payments: Iterable[Any] = (),
    today: Optional[DateLike] = None,
) -> RentStatus:
    """Summarise a tenant's rent standing for the period containing ``today``.

    Raises:
        InvalidPeriodError: If the current period cannot be resolved.
    """
    today = date.today() if today is None else normalize_date(today)
    payments = list(payments)
    period = compute_current_period_with_history(check_in_date, payments, today)
    covering = covering_payments(payments, period)
    total_paid = sum(p.amount for p in covering)
    is_fully_paid, remaining = _settlement(covering)

    status_info = classify_payment_status(
        period.start_date, period.end_date, is_fully_paid, today
    )
    if covering and not is_fully_paid and remaining > 0:
        status_info = PARTIAL
    logger.debug(
        "Rent status for period %s - %s: %s (paid %s, remaining %s)",
        period.start_date,
        period.end_date,
        status_info.label,
        total_paid,
        remaining,
    )
    return RentStatus(
        period=period,
        status_info=status_info,
        covering_payments=covering,
        total_paid=total_paid,
        remaining_amount=remaining,
        is_fully_paid=is_fully_paid,
    )
