"""Calendar month helpers for revenue windows."""

from datetime import date, datetime, time

from django.utils import timezone


def shift_month(day: date, months: int) -> date:
    """First day of the month ``months`` away from ``day``'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_window(today: date, months: int) -> list[date]:
    """
    First days of the trailing ``months`` months, current month included.

    Example:
        >>> month_window(date(2025, 2, 14), 3)
        [date(2024, 12, 1), date(2025, 1, 1), date(2025, 2, 1)]
    """
    if months < 1:
        raise ValueError(f"months must be at least 1, got {months}")
    return [shift_month(today, offset) for offset in range(-(months - 1), 1)]


def month_bounds(first_month: date, last_month: date) -> tuple[datetime, datetime]:
    """Aware datetimes covering [first_month, end of last_month) in the active time zone."""
    tz = timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(first_month, time.min), tz)
    end = timezone.make_aware(datetime.combine(shift_month(last_month, 1), time.min), tz)
    return start, end


def month_label(month: date) -> str:
    return month.strftime("%b %Y")


def month_key(value) -> date:
    """Normalise a truncated month (date or datetime) to the first day of the month."""
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        value = value.date()
    return value.replace(day=1)
