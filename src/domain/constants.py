"""Domain constants for Open Finance balance and ledger data."""

CREDIT = "Credit"
DEBIT = "Debit"
CREDIT_DEBIT_INDICATORS = (CREDIT, DEBIT)

# Most trustworthy balance type first.
BALANCE_TYPE_PRIORITY = (
    "ClosingAvailable",
    "ClosingBooked",
    "ClosingCleared",
    "InterimAvailable",
    "ForwardAvailable",
    "OpeningAvailable",
    "OpeningBooked",
    "OpeningCleared",
    "Expected",
    "PreviouslyClosedBooked",
    "Information",
)

BOOKED_STATUS = "Booked"

DEFAULT_QUALIFYING_STATUSES = (BOOKED_STATUS,)

DEFAULT_QUALIFYING_SUB_TYPES = (
    "Purchase",
    "Deposit",
)

LIABILITY_ACCOUNT_SUB_TYPES = (
    "CreditCard",
    "Loan",
    "Mortgage",
    "Finance",
)

DEFAULT_NET_WORTH_WINDOW_MONTHS = 6

DEFAULT_CURRENCY = "AED"

UNCATEGORIZED = "Uncategorized"

ACTIVE_STATUS = "Active"
RECURRING_STATUS_FILTERS = ("all", "active", "inactive")

DEFAULT_PROJECTION_COUNT = 12

DIRECT_DEBIT_KIND = "debit"
STANDING_ORDER_KIND = "standing"

# Frequency code -> (unit, step) for the fixed Open Finance frequencies.
FIXED_FREQUENCIES = {
    "EveryDay": ("days", 1),
    "Daily": ("days", 1),
    "Weekly": ("days", 7),
    "Fortnightly": ("days", 14),
    "Monthly": ("months", 1),
    "Quarterly": ("months", 3),
    "HalfYearly": ("months", 6),
    "Annual": ("months", 12),
}

# Prefix of "IntervalXxx:N[:...]" codes -> (unit, multiplier of N).
INTERVAL_FREQUENCIES = {
    "IntervalDay": ("days", 1),
    "IntervalWeekDay": ("days", 7),
    "IntervalMonthDay": ("months", 1),
}


__all__ = [
    "ACTIVE_STATUS",
    "BALANCE_TYPE_PRIORITY",
    "BOOKED_STATUS",
    "CREDIT",
    "CREDIT_DEBIT_INDICATORS",
    "DEBIT",
    "DEFAULT_CURRENCY",
    "DEFAULT_NET_WORTH_WINDOW_MONTHS",
    "DEFAULT_PROJECTION_COUNT",
    "DIRECT_DEBIT_KIND",
    "FIXED_FREQUENCIES",
    "INTERVAL_FREQUENCIES",
    "RECURRING_STATUS_FILTERS",
    "STANDING_ORDER_KIND",
    "UNCATEGORIZED",
    "DEFAULT_QUALIFYING_STATUSES",
    "DEFAULT_QUALIFYING_SUB_TYPES",
    "LIABILITY_ACCOUNT_SUB_TYPES",
]
