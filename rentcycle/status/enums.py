"""
Payment status enumeration types.
"""

from enum import Enum


class PaymentStatus(Enum):
    """Payment status of a billing period."""

    PAID = "paid"
    DUE_SOON = "due_soon"  # Also carries the "Pending" label
    OVERDUE = "overdue"
    PARTIAL = "partial"  # Rent status summary only


class PaymentType(Enum):
    """How a recorded payment relates to the period's rent."""

    FULL = "full"
    PARTIAL = "partial"
