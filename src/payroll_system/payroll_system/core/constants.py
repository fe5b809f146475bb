"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DAYS_PER_MONTH = 30
HOURS_PER_DAY = 8

FIRST_CUTOFF_DAY = 15
SECOND_CUTOFF_DAY = 30
MAX_INSTALLMENTS = 24

MONEY_PLACES = Decimal("0.01")

CASH_ADVANCE = "cashAdvance"
