"""Rent period sequences and their tabular view."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Iterator, List, Optional

import pandas as pd

from rentcycle import config
from rentcycle.period.calculator import (
    InvalidPeriodError,
    compute_current_period,
    latest_manual_period,
    next_period_from_manual_end,
    next_period_start_from_manual_end,
)
from rentcycle.period.coverage import covering_payments
from rentcycle.period.types import BillingPeriod, as_payment_record
from rentcycle.status.classifier import classify_payment_status
from rentcycle.utils.date import DateLike, add_days, normalize_date

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = [
    "start_date",
    "end_date",
    "next_period_start",
    "days",
    "paid_amount",
    "status",
    "label",
]


def iter_periods(
    check_in_date: DateLike,
    until: Optional[DateLike] = None,
    payments: Iterable[Any] = (),
) -> Iterator[BillingPeriod]:
    """Yield consecutive billing periods up to the one containing ``until``.

    Starts from the first cycle of the tenancy, or from the latest manually set
    payment period when one exists.

    Raises:
        InvalidPeriodError: If ``until`` is not reached within ``config.MAX_CYCLES``
            periods.
    """
    until = date.today() if until is None else normalize_date(until)
    last = latest_manual_period(payments)

    if last is not None:
        end = last.payment_period_end
        period = BillingPeriod(
            last.payment_period_start, end, next_period_start_from_manual_end(end)
        )

        def advance(current: BillingPeriod) -> BillingPeriod:
            nxt = next_period_from_manual_end(current.end_date)
            return BillingPeriod(
                nxt.start_date,
                nxt.end_date,
                next_period_start_from_manual_end(nxt.end_date),
            )

    else:
        check_in = normalize_date(check_in_date)
        period = compute_current_period(check_in, check_in)

        def advance(current: BillingPeriod) -> BillingPeriod:
            return compute_current_period(check_in, current.next_period_start)

    max_cycles = config.get_max_cycles()
    for _ in range(max_cycles):
        yield period
        if period.end_date >= until:
            return
        period = advance(period)

    logger.error("Schedule did not reach %s within %s periods", until, max_cycles)
    raise InvalidPeriodError(f"Schedule did not reach {until} within {max_cycles} periods")


def rent_schedule(
    check_in_date: DateLike,
    until: Optional[DateLike] = None,
    payments: Iterable[Any] = (),
) -> List[BillingPeriod]:
    return list(iter_periods(check_in_date, until, payments))


def schedule_frame(
    periods: Iterable[BillingPeriod],
    payments: Iterable[Any] = (),
    today: Optional[DateLike] = None,
) -> pd.DataFrame:
    """Tabulate periods with the amount paid against each and its status.

    Args:
        periods: Billing periods to report, one row each
        payments: Payment records; those with explicit periods are matched by overlap
        today: Classification date (defaults to today)

    Returns:
        DataFrame with columns ``SCHEDULE_COLUMNS``
    """
    today = date.today() if today is None else normalize_date(today)
    records = [as_payment_record(p) for p in payments]
    rows = []
    for period in periods:
        covering = covering_payments(records, period)
        info = classify_payment_status(
            period.start_date, period.end_date, bool(covering), today
        )
        rows.append(
            {
                "start_date": period.start_date,
                "end_date": period.end_date,
                "next_period_start": period.next_period_start,
                "days": period.days,
                "paid_amount": float(sum(p.amount for p in covering)),
                "status": info.status.value,
                "label": info.label,
            }
        )
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def is_contiguous(periods: Iterable[BillingPeriod]) -> bool:
    """True if every period starts the day after the previous one ends."""
    periods = list(periods)
    return all(
        add_days(prev.end_date, 1) == cur.start_date
        for prev, cur in zip(periods, periods[1:])
    )
