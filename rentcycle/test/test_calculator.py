"""Current rent period resolution from check-in dates and payment history."""

from datetime import date, timedelta

import pytest

from rentcycle import config
from rentcycle.period.calculator import (
    InvalidPeriodError,
    compute_current_period,
    compute_current_period_from_last_payment,
    compute_current_period_with_history,
    latest_manual_period,
    next_period_from_manual_end,
    next_period_start_from_manual_end,
)
from rentcycle.period.types import BillingPeriod, PaymentRecord
from rentcycle.utils.date import clamp_to_valid_date


def manual_payment(start, end, amount=5000.0, paid_on=None):
    return PaymentRecord(
        amount=amount,
        payment_date=paid_on or start,
        payment_period_start=start,
        payment_period_end=end,
    )


# Calendar month regime


def test_check_in_on_first_uses_calendar_month():
    period = compute_current_period(date(2024, 3, 1), date(2024, 3, 20))
    assert period == BillingPeriod(date(2024, 3, 1), date(2024, 3, 31), date(2024, 4, 1))


def test_calendar_month_ignores_check_in_month():
    period = compute_current_period(date(2023, 6, 1), date(2024, 2, 10))
    assert period.as_tuple() == (date(2024, 2, 1), date(2024, 2, 29), date(2024, 3, 1))


def test_calendar_month_december_rolls_year():
    period = compute_current_period(date(2024, 1, 1), date(2024, 12, 15))
    assert period.end_date == date(2024, 12, 31)
    assert period.next_period_start == date(2025, 1, 1)


# Rolling regime


def test_mid_month_check_in_rolls_to_day_before_anchor():
    period = compute_current_period(date(2024, 1, 13), date(2024, 3, 5))
    assert period == BillingPeriod(date(2024, 2, 13), date(2024, 3, 12), date(2024, 3, 13))


def test_month_end_anchor_clamps_into_february():
    period = compute_current_period(date(2024, 1, 31), date(2024, 2, 15))
    assert period == BillingPeriod(date(2024, 1, 31), date(2024, 2, 28), date(2024, 2, 29))


def test_rolling_period_crosses_year_end():
    period = compute_current_period(date(2023, 11, 20), date(2024, 1, 5))
    assert period == BillingPeriod(date(2023, 12, 20), date(2024, 1, 19), date(2024, 1, 20))


def test_period_boundaries_are_inclusive():
    check_in = date(2024, 1, 13)
    on_end = compute_current_period(check_in, date(2024, 2, 12))
    on_start = compute_current_period(check_in, date(2024, 2, 13))
    assert on_end.start_date == date(2024, 1, 13)
    assert on_end.end_date == date(2024, 2, 12)
    assert on_start.start_date == date(2024, 2, 13)


def test_reference_on_check_in_returns_first_period():
    period = compute_current_period(date(2024, 5, 20), date(2024, 5, 20))
    assert period.start_date == date(2024, 5, 20)
    assert period.end_date == date(2024, 6, 19)


@pytest.mark.parametrize("anchor", [2, 13, 28, 29, 30, 31])
@pytest.mark.parametrize(
    "reference",
    [date(2024, 2, 29), date(2024, 3, 1), date(2025, 2, 28), date(2025, 12, 31), date(2026, 7, 15)],
)
def test_rolling_period_invariants(anchor, reference):
    period = compute_current_period(date(2024, 1, anchor), reference)
    assert period.start_date <= reference <= period.end_date
    assert period.end_date + timedelta(days=1) == period.next_period_start
    nxt = period.next_period_start
    assert nxt.day == clamp_to_valid_date(nxt.year, nxt.month, anchor).day


def test_check_in_after_reference_raises():
    with pytest.raises(InvalidPeriodError):
        compute_current_period(date(2030, 1, 15), date(2024, 1, 1))


def test_cycle_cap_raises(monkeypatch):
    monkeypatch.setattr(config, "MAX_CYCLES", 3)
    with pytest.raises(InvalidPeriodError):
        compute_current_period(date(2020, 1, 15), date(2024, 1, 1))


def test_accepts_date_strings():
    period = compute_current_period("2024-01-13", "2024-03-05T09:00:00Z")
    assert period.start_date == date(2024, 2, 13)


# Manual period projection


@pytest.mark.parametrize(
    "period_end, expected_start, expected_end",
    [
        (date(2025, 10, 31), date(2025, 11, 1), date(2025, 11, 30)),
        (date(2024, 12, 31), date(2025, 1, 1), date(2025, 1, 31)),
        (date(2024, 2, 12), date(2024, 2, 13), date(2024, 3, 12)),
        (date(2024, 1, 30), date(2024, 1, 31), date(2024, 2, 28)),
    ],
)
def test_next_period_from_manual_end(period_end, expected_start, expected_end):
    nxt = next_period_from_manual_end(period_end)
    assert (nxt.start_date, nxt.end_date) == (expected_start, expected_end)
    assert next_period_start_from_manual_end(period_end) == expected_start


# History-aware resolution


def test_last_payment_period_is_current_when_reference_inside():
    period = compute_current_period_from_last_payment(
        date(2024, 1, 1), date(2024, 1, 31), date(2024, 1, 31)
    )
    assert period == BillingPeriod(date(2024, 1, 1), date(2024, 1, 31), date(2024, 2, 1))


def test_reference_before_last_payment_returns_it_unchanged():
    period = compute_current_period_from_last_payment(
        date(2024, 5, 10), date(2024, 6, 9), date(2024, 4, 1)
    )
    assert (period.start_date, period.end_date) == (date(2024, 5, 10), date(2024, 6, 9))


def test_catch_up_from_last_payment():
    period = compute_current_period_from_last_payment(
        date(2024, 1, 1), date(2024, 1, 31), date(2024, 4, 10)
    )
    assert period == BillingPeriod(date(2024, 4, 1), date(2024, 4, 30), date(2024, 5, 1))


def test_inverted_payment_period_raises():
    with pytest.raises(InvalidPeriodError):
        compute_current_period_from_last_payment(
            date(2024, 2, 1), date(2024, 1, 1), date(2024, 3, 1)
        )


def test_catch_up_cap_raises(monkeypatch):
    monkeypatch.setattr(config, "MAX_CYCLES", 2)
    with pytest.raises(InvalidPeriodError):
        compute_current_period_from_last_payment(
            date(2020, 1, 1), date(2020, 1, 31), date(2024, 1, 1)
        )


def test_manual_period_is_honoured_verbatim():
    payments = [manual_payment(date(2024, 2, 10), date(2024, 3, 9))]
    period = compute_current_period_with_history(date(2024, 1, 1), payments, date(2024, 2, 20))
    assert (period.start_date, period.end_date) == (date(2024, 2, 10), date(2024, 3, 9))


def test_latest_period_end_wins_regardless_of_order():
    payments = [
        manual_payment(date(2024, 3, 10), date(2024, 4, 9)),
        PaymentRecord(amount=100.0, payment_date=date(2024, 5, 1)),
        manual_payment(date(2024, 2, 10), date(2024, 3, 9)),
    ]
    assert latest_manual_period(payments).payment_period_end == date(2024, 4, 9)
    period = compute_current_period_with_history(date(2024, 1, 1), payments, date(2024, 4, 20))
    assert (period.start_date, period.end_date) == (date(2024, 4, 10), date(2024, 5, 9))


def test_history_without_periods_falls_back_to_check_in():
    payments = [PaymentRecord(amount=5000.0, payment_date=date(2024, 2, 14))]
    period = compute_current_period_with_history(date(2024, 1, 13), payments, date(2024, 3, 5))
    assert period.start_date == date(2024, 2, 13)
    assert latest_manual_period(payments) is None


def test_history_accepts_api_payloads():
    payments = [
        {
            "amount": 6000,
            "paymentDate": "2024-01-05T10:00:00.000Z",
            "paymentPeriodStart": "2024-01-01",
            "paymentPeriodEnd": "2024-01-31",
        },
        {"amount": 500, "paymentDate": "2024-01-20", "paymentPeriodStart": None},
    ]
    period = compute_current_period_with_history(date(2023, 12, 15), payments, date(2024, 4, 10))
    assert period == BillingPeriod(date(2024, 4, 1), date(2024, 4, 30), date(2024, 5, 1))
