"""
Display formatting helpers (currency, percentages, labels)
"""

import re
from typing import Optional

from vowsync.core.config import DisplayConfig, DEFAULT_DISPLAY_CONFIG


def format_currency(amount: Optional[float], config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> str:
    """Format an amount as e.g. "R 1,234.56"; None renders as "-" """
    if amount is None:
        return "-"
    sign = "-" if amount < 0 else ""
    return f"{sign}{config.currency.symbol} {abs(amount):,.2f}"


def format_variance(variance: float, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> str:
    """Positive variance is over budget and gets a "+" prefix"""
    if variance == 0:
        return format_currency(0, config)
    prefix = "+" if variance > 0 else ""
    return f"{prefix}{format_currency(variance, config)}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def format_enum_label(value: str) -> str:
    """snake_case enum value to a title-cased label"""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), value.replace("_", " "))


def format_time(time_str: Optional[str]) -> str:
    """HH:MM[:SS] to "h:MM AM/PM"; missing times show as TBD.

    Anything that is not hour:minute is shown as stored.
    """
    if not time_str:
        return "TBD"
    parts = time_str.split(":")
    if len(parts) < 2:
        return time_str
    hours, minutes = parts[:2]
    try:
        hour = int(hours)
    except ValueError:
        return time_str
    ampm = "PM" if hour >= 12 else "AM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minutes} {ampm}"


def format_units(units: int, unit_name: str = "unit") -> str:
    return f"{units} {unit_name if units == 1 else unit_name + 's'}"


def format_duration(hours: float) -> str:
    whole_hours = int(hours)
    minutes = round((hours - whole_hours) * 60)
    if minutes == 0:
        return f"{whole_hours}h"
    return f"{whole_hours}h {minutes}m"
