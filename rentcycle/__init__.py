"""Rolling rent period calculations for hostel/PG tenancies.

This package determines a tenant's current billing period from their check-in
date or manually set payment periods, and classifies payment status against
a reference date.

Key modules:
- period: Billing period types, cycle resolution, coverage and schedules
- status: Payment status classification and rent status summaries
- utils: Date coercion and calendar clamping
"""

from rentcycle.period import (
    BillingPeriod,
    InvalidPeriodError,
    ManualPeriod,
    PaymentRecord,
    compute_current_period,
    compute_current_period_from_last_payment,
    compute_current_period_with_history,
    covering_payments,
    has_covering_payment,
    next_period_from_manual_end,
    periods_overlap,
)
from rentcycle.status import (
    PaymentStatus,
    RentStatus,
    StatusInfo,
    assess_rent_status,
    classify_payment_status,
)
from rentcycle.period.schedule import rent_schedule, schedule_frame
from rentcycle.utils.date import clamp_to_valid_date, days_in_month, normalize_date

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BillingPeriod",
    "ManualPeriod",
    "PaymentRecord",
    "InvalidPeriodError",
    "days_in_month",
    "clamp_to_valid_date",
    "normalize_date",
    "compute_current_period",
    "next_period_from_manual_end",
    "compute_current_period_from_last_payment",
    "compute_current_period_with_history",
    "periods_overlap",
    "covering_payments",
    "has_covering_payment",
    "PaymentStatus",
    "StatusInfo",
    "RentStatus",
    "classify_payment_status",
    "assess_rent_status",
    "rent_schedule",
    "schedule_frame",
]
