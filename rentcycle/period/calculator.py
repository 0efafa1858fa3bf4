"""Rolling rent period calculator.

A tenant's rent cycle is anchored on the day-of-month of their check-in:

- Check-in on the 1st: the cycle is the calendar month.
- Check-in on day D: the cycle runs from D to D-1 of the following month
  (e.g. 13th -> 12th), with month-end days clamped to the target month.

A payment recorded with an explicit period replaces the check-in anchor: the
latest such period is projected forward month by month until it reaches the
reference date.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional

from rentcycle import config
from rentcycle.period.types import (
    BillingPeriod,
    ManualPeriod,
    PaymentRecord,
    as_payment_record,
)
from rentcycle.utils.date import (
    DateLike,
    add_days,
    clamp_to_valid_date,
    days_in_month,
    normalize_date,
)

logger = logging.getLogger(__name__)


class InvalidPeriodError(ValueError):
    """Raised when no billing period containing the reference date can be found."""


def _reference(reference_date: Optional[DateLike]) -> date:
    if reference_date is None:
        return date.today()
    return normalize_date(reference_date)


def _anchored_period(year: int, month: int, anchor_day: int) -> BillingPeriod:
    """The cycle whose start falls in (year, month) for the given anchor day."""
    start = clamp_to_valid_date(year, month, anchor_day)
    next_start = clamp_to_valid_date(year, month + 1, anchor_day)
    return BillingPeriod(start, add_days(next_start, -1), next_start)


def calendar_month_period(reference_date: DateLike) -> BillingPeriod:
    """Return the calendar month containing ``reference_date``."""
    ref = normalize_date(reference_date)
    start = date(ref.year, ref.month, 1)
    end = date(ref.year, ref.month, days_in_month(ref.year, ref.month))
    return BillingPeriod(start, end, clamp_to_valid_date(ref.year, ref.month + 1, 1))


def compute_current_period(
    check_in_date: DateLike, reference_date: Optional[DateLike] = None
) -> BillingPeriod:
    """Return the billing period containing ``reference_date``.

    Args:
        check_in_date: Date the tenancy began; its day-of-month is the anchor
        reference_date: Day to locate (defaults to today)

    Returns:
        BillingPeriod whose [start_date, end_date] contains the reference date

    Raises:
        InvalidPeriodError: If the check-in date lies after the reference date
            in the rolling regime, or no period is found within
            ``config.MAX_CYCLES`` cycles.
    """
    check_in = normalize_date(check_in_date)
    ref = _reference(reference_date)
    anchor_day = check_in.day

    if anchor_day == 1:
        logger.debug("Calendar month period for check-in %s at %s", check_in, ref)
        return calendar_month_period(ref)

    if ref < check_in:
        logger.error("Check-in %s is after reference date %s", check_in, ref)
        raise InvalidPeriodError(
            f"Check-in date {check_in} is after reference date {ref}"
        )

    year, month = check_in.year, check_in.month
    period = _anchored_period(year, month, anchor_day)
    max_cycles = config.get_max_cycles()
    for _ in range(max_cycles):
        if period.end_date >= ref:
            return period
        month += 1
        period = _anchored_period(year, month, anchor_day)
        logger.debug("Advanced to period %s - %s", period.start_date, period.end_date)

    logger.error(
        "No period containing %s within %s cycles of check-in %s",
        ref,
        max_cycles,
        check_in,
    )
    raise InvalidPeriodError(
        f"No billing period containing {ref} within {max_cycles} cycles of {check_in}"
    )


def next_period_from_manual_end(period_end: DateLike) -> ManualPeriod:
    """Project the cycle that follows an explicitly set period end.

    The new cycle starts the next day and lasts one month minus a day, keeping
    the new start's day-of-month:

        period end 2025-10-31 -> 2025-11-01 .. 2025-11-30
    """
    start = add_days(period_end, 1)
    end = add_days(clamp_to_valid_date(start.year, start.month + 1, start.day), -1)
    return ManualPeriod(start, end)


def next_period_start_from_manual_end(period_end: DateLike) -> date:
    return next_period_from_manual_end(period_end).start_date


def compute_current_period_from_last_payment(
    last_period_start: DateLike,
    last_period_end: DateLike,
    reference_date: Optional[DateLike] = None,
) -> BillingPeriod:
    """Return the current period by rolling forward from the last paid period.

    Args:
        last_period_start: Start of the most recent manually set period
        last_period_end: End of the most recent manually set period
        reference_date: Day to locate (defaults to today)

    Raises:
        InvalidPeriodError: If the period ends before it starts, or the
            reference date is not reached within ``config.MAX_CYCLES`` cycles.
    """
    start = normalize_date(last_period_start)
    end = normalize_date(last_period_end)
    ref = _reference(reference_date)

    if end < start:
        logger.error("Payment period ends (%s) before it starts (%s)", end, start)
        raise InvalidPeriodError(f"Payment period {start} - {end} ends before it starts")

    if ref < start:
        logger.warning(
            "Reference date %s precedes last payment period %s - %s; using that period",
            ref,
            start,
            end,
        )
    if ref <= end:
        return BillingPeriod(start, end, next_period_start_from_manual_end(end))

    current = next_period_from_manual_end(end)
    max_cycles = config.get_max_cycles()
    for _ in range(max_cycles):
        if current.end_date >= ref:
            return BillingPeriod(
                current.start_date,
                current.end_date,
                next_period_start_from_manual_end(current.end_date),
            )
        current = next_period_from_manual_end(current.end_date)
        logger.debug("Advanced to period %s - %s", current.start_date, current.end_date)

    logger.error(
        "No period containing %s within %s cycles of payment period end %s",
        ref,
        max_cycles,
        end,
    )
    raise InvalidPeriodError(
        f"No billing period containing {ref} within {max_cycles} cycles of {end}"
    )


def latest_manual_period(payments: Iterable[Any]) -> Optional[PaymentRecord]:
    """Return the payment with the latest explicit period end, if any."""
    with_periods = [p for p in map(as_payment_record, payments) if p.has_period]
    if not with_periods:
        return None
    with_periods.sort(key=lambda p: p.payment_period_end, reverse=True)
    return with_periods[0]


def compute_current_period_with_history(
    check_in_date: DateLike,
    payments: Iterable[Any] = (),
    reference_date: Optional[DateLike] = None,
) -> BillingPeriod:
    """Return the current period, preferring payment history over check-in.

    When any payment carries an explicit period, the latest one (by period
    end) anchors the cycle; otherwise the check-in date does.
    """
    last = latest_manual_period(payments)
    if last is not None:
        logger.debug(
            "Using manual payment period %s - %s",
            last.payment_period_start,
            last.payment_period_end,
        )
        return compute_current_period_from_last_payment(
            last.payment_period_start, last.payment_period_end, reference_date
        )
    return compute_current_period(check_in_date, reference_date)
