"""
Formatting of night records for display.

The history view renders as a small HTML document: a title, then one
block per night. Open nights only show their start time; finished
nights also show the end time, quality and time slept.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from sleep_tracker.core.constants import SleepQuality, TimeConstants, TimeFormat
from sleep_tracker.core.dataclasses import SleepNight


@dataclass(frozen=True)
class NightStrings:
    """Display strings used when rendering nights (the "resources" context)."""

    title: str = "<b>Here is your sleep data</b>"
    start_time: str = "Start:"
    end_time: str = "End:"
    quality: str = "Quality:"
    hours_slept: str = "Hours:Minutes:Seconds"
    date_format: str = TimeFormat.NIGHT_START
    empty_value: str = TimeFormat.EMPTY_VALUE
    quality_names: tuple[str, ...] = (
        "Very bad",
        "Poor",
        "So-so",
        "OK",
        "Pretty good",
        "Excellent!",
    )


DEFAULT_STRINGS = NightStrings()


def convert_numeric_quality_to_string(quality: int, resources: NightStrings = DEFAULT_STRINGS) -> str:
    """Return the display name for a 0-5 quality rating, ``--`` otherwise."""
    if SleepQuality.VERY_BAD <= quality <= SleepQuality.EXCELLENT:
        return resources.quality_names[quality]
    return resources.empty_value


def convert_long_to_date_string(time_milli: int, resources: NightStrings = DEFAULT_STRINGS) -> str:
    """Render epoch milliseconds in local time."""
    return datetime.fromtimestamp(time_milli / TimeConstants.MILLIS_PER_SECOND).strftime(resources.date_format)


def format_duration(duration_milli: int) -> str:
    """Render a duration as ``H:MM:SS``."""
    total_seconds = max(duration_milli, 0) // TimeConstants.MILLIS_PER_SECOND
    hours, remainder = divmod(total_seconds, TimeConstants.SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, TimeConstants.SECONDS_PER_MINUTE)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def format_nights(nights: Iterable[SleepNight], resources: NightStrings = DEFAULT_STRINGS) -> str:
    """Render the night history as HTML, in the order given."""
    parts = [resources.title]
    for night in nights:
        parts.append("<br>")
        parts.append(f"{resources.start_time}\t{convert_long_to_date_string(night.start_time_milli, resources)}<br>")
        if not night.is_open:
            parts.append(f"{resources.end_time}\t{convert_long_to_date_string(night.end_time_milli, resources)}<br>")
            parts.append(f"{resources.quality}\t{convert_numeric_quality_to_string(night.sleep_quality, resources)}<br>")
            parts.append(f"{resources.hours_slept}\t {format_duration(night.duration_milli)}<br><br>")
    return "".join(parts)
