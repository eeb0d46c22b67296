"""Domain services for standing orders and direct debits.

Projections are anchored on the first known payment day and step forward by
the instruction's frequency. Month steps are always taken from the anchor,
so a payment on the 31st lands on the last day of shorter months and returns
to the 31st afterwards.
"""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import TypeVar

from src.domain.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_PROJECTION_COUNT,
    DIRECT_DEBIT_KIND,
    FIXED_FREQUENCIES,
    INTERVAL_FREQUENCIES,
    RECURRING_STATUS_FILTERS,
    STANDING_ORDER_KIND,
)
from src.domain.models import (
    DirectDebit,
    RecurringPaymentsOverview,
    StandingOrder,
    UpcomingPayment,
)
from src.utils.date_utils import add_months, months_between, utc_day, utc_today

RecurringT = TypeVar("RecurringT", DirectDebit, StandingOrder)


def parse_frequency(frequency: str) -> tuple[str, int] | None:
    """Translate an Open Finance frequency code into a step.

    Args:
        frequency: Code such as ``Monthly`` or ``IntervalWeekDay:2:03``.

    Returns:
        tuple[str, int] | None: ``("days", n)`` or ``("months", n)``, or None
        when the code is unknown or its interval is not a positive integer.
    """
    if frequency in FIXED_FREQUENCIES:
        return FIXED_FREQUENCIES[frequency]
    prefix, _, rest = frequency.partition(":")
    if prefix not in INTERVAL_FREQUENCIES or not rest:
        return None
    unit, multiplier = INTERVAL_FREQUENCIES[prefix]
    interval = rest.split(":")[0]
    if not interval.isdigit() or int(interval) <= 0:
        return None
    return unit, int(interval) * multiplier


def project_next_payments(
    first: date,
    frequency: str,
    count: int = DEFAULT_PROJECTION_COUNT,
    today: date | None = None,
) -> list[date]:
    """Return the next ``count`` payment days on or after today.

    Args:
        first: Anchor payment day of the schedule.
        frequency: Open Finance frequency code.
        count: Number of payment days to return.
        today: Reference day; defaults to the current UTC day.

    Returns:
        list[date]: Ascending payment days, empty for unknown frequencies.
    """
    rule = parse_frequency(frequency)
    if rule is None or count <= 0:
        return []
    end = today or utc_today()
    unit, step = rule

    if unit == "days":
        elapsed = (end - first).days
        skipped = max(0, -(-elapsed // step))
        return [
            first + timedelta(days=step * index)
            for index in range(skipped, skipped + count)
        ]

    payments: list[date] = []
    index = max(0, months_between(first, end) // step - 1)
    while len(payments) < count:
        candidate = add_months(first, step * index)
        if candidate >= end:
            payments.append(candidate)
        index += 1
    return payments


def filter_by_status(
    items: Iterable[RecurringT],
    status_filter: str = "all",
) -> list[RecurringT]:
    """Keep instructions matching ``all``, ``active`` or ``inactive``.

    Raises:
        ValueError: If the filter is not one of the supported values.
    """
    if status_filter not in RECURRING_STATUS_FILTERS:
        raise ValueError(f"Unsupported status filter: {status_filter!r}")
    if status_filter == "all":
        return list(items)
    return [item for item in items if item.status.lower() == status_filter]


def order_active_first(items: Iterable[RecurringT]) -> list[RecurringT]:
    """Return active instructions first, keeping the input order otherwise."""
    return sorted(items, key=lambda item: not item.is_active)


def build_upcoming_payments(
    direct_debits: Iterable[DirectDebit],
    standing_orders: Iterable[StandingOrder],
    *,
    today: date | None = None,
    count: int = DEFAULT_PROJECTION_COUNT,
) -> list[UpcomingPayment]:
    """Project active direct debits and standing orders onto a calendar.

    Direct debits are anchored on their previous payment and standing orders
    on their next payment, which must not lie in the past.

    Args:
        direct_debits: Direct debits of every status.
        standing_orders: Standing orders of every status.
        today: Reference day; defaults to the current UTC day.
        count: Payment days projected per instruction.

    Returns:
        list[UpcomingPayment]: Payments sorted by day, earliest first.
    """
    end = today or utc_today()
    payments: list[UpcomingPayment] = []

    for debit in direct_debits:
        if not debit.is_active or debit.previous_payment_date_time is None:
            continue
        anchor = utc_day(debit.previous_payment_date_time)
        for day in project_next_payments(anchor, debit.frequency, count, end):
            payments.append(
                UpcomingPayment(
                    payment_id=debit.direct_debit_id,
                    name=debit.name,
                    account_id=debit.account_id,
                    day=day,
                    amount=debit.previous_payment_amount,
                    currency=debit.currency or DEFAULT_CURRENCY,
                    kind=DIRECT_DEBIT_KIND,
                    frequency=debit.frequency,
                )
            )

    for order in standing_orders:
        if not order.is_active or order.next_payment_date_time is None:
            continue
        anchor = utc_day(order.next_payment_date_time)
        if anchor < end:
            continue
        for day in project_next_payments(anchor, order.frequency, count, end):
            payments.append(
                UpcomingPayment(
                    payment_id=order.standing_order_id,
                    name=order.display_name,
                    account_id=order.account_id,
                    day=day,
                    amount=order.amount,
                    currency=order.currency or DEFAULT_CURRENCY,
                    kind=STANDING_ORDER_KIND,
                    frequency=order.frequency,
                )
            )

    return sorted(payments, key=lambda payment: payment.day)


def summarize_recurring_payments(
    direct_debits: Sequence[DirectDebit],
    standing_orders: Sequence[StandingOrder],
    *,
    status_filter: str = "all",
    today: date | None = None,
    count: int = DEFAULT_PROJECTION_COUNT,
) -> RecurringPaymentsOverview:
    """Filter, order and count recurring instructions and project them.

    Active counts and projections ignore ``status_filter``; only the listed
    instructions are filtered.
    """
    return RecurringPaymentsOverview(
        direct_debits=order_active_first(
            filter_by_status(direct_debits, status_filter)
        ),
        standing_orders=order_active_first(
            filter_by_status(standing_orders, status_filter)
        ),
        active_direct_debits=sum(1 for debit in direct_debits if debit.is_active),
        total_direct_debits=len(direct_debits),
        active_standing_orders=sum(
            1 for order in standing_orders if order.is_active
        ),
        total_standing_orders=len(standing_orders),
        upcoming=build_upcoming_payments(
            direct_debits, standing_orders, today=today, count=count
        ),
    )


__all__ = [
    "build_upcoming_payments",
    "filter_by_status",
    "order_active_first",
    "parse_frequency",
    "project_next_payments",
    "summarize_recurring_payments",
]
