"""
Library-wide defaults for rent period calculations.

Values can be seeded from the environment and changed at runtime through the
setters below. Calculations read them at call time.
"""

import os

# Upper bound on single-cycle advances (600 monthly cycles = 50 years)
MAX_CYCLES = int(os.getenv("RENTCYCLE_MAX_CYCLES", "600"))

# Unpaid periods ending within this many days are labelled "Due Soon"
DUE_SOON_DAYS = int(os.getenv("RENTCYCLE_DUE_SOON_DAYS", "7"))


def set_max_cycles(max_cycles: int) -> None:
    """Set the maximum number of cycles a period search may advance."""
    global MAX_CYCLES
    if max_cycles <= 0:
        raise ValueError("max_cycles must be positive")
    MAX_CYCLES = int(max_cycles)


def set_due_soon_days(days: int) -> None:
    """Set the window (in days) before period end that counts as due soon."""
    global DUE_SOON_DAYS
    if days < 0:
        raise ValueError("due soon window must be non-negative")
    DUE_SOON_DAYS = int(days)


def get_max_cycles() -> int:
    """Return the current cap on cycles a period search may advance."""
    return MAX_CYCLES


def get_due_soon_days() -> int:
    """Return the current due soon window in days."""
    return DUE_SOON_DAYS
