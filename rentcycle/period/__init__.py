"""
Billing period calculation: value types, cycle resolution, and coverage tests.

Schedules built on top of these live in ``rentcycle.period.schedule``.
"""

from .calculator import (
    InvalidPeriodError,
    calendar_month_period,
    compute_current_period,
    compute_current_period_from_last_payment,
    compute_current_period_with_history,
    latest_manual_period,
    next_period_from_manual_end,
    next_period_start_from_manual_end,
)
from .coverage import covering_payments, has_covering_payment, periods_overlap
from .types import BillingPeriod, ManualPeriod, PaymentRecord, as_payment_record

__all__ = [
    # Types
    "BillingPeriod",
    "ManualPeriod",
    "PaymentRecord",
    "as_payment_record",
    # Calculator
    "InvalidPeriodError",
    "calendar_month_period",
    "compute_current_period",
    "compute_current_period_from_last_payment",
    "compute_current_period_with_history",
    "latest_manual_period",
    "next_period_from_manual_end",
    "next_period_start_from_manual_end",
    # Coverage
    "periods_overlap",
    "covering_payments",
    "has_covering_payment",
]
