"""
Opening-hours normalization for the detail page.

Upstream weekday descriptions are free text such as ``"Monday: 11:00 AM – 10:00 PM"``,
in whatever order and for whichever days upstream chooses to report. They
are folded into a fixed Monday..Sunday table.
"""
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

PLACEHOLDER = "—"

WEEK_ORDER = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

# English tokens only; the first alias the token starts with wins
DAY_ALIASES = {
    "mon": "Monday",
    "monday": "Monday",
    "tue": "Tuesday",
    "tuesday": "Tuesday",
    "tues": "Tuesday",
    "wed": "Wednesday",
    "wednesday": "Wednesday",
    "weds": "Wednesday",
    "thu": "Thursday",
    "thursday": "Thursday",
    "thur": "Thursday",
    "thurs": "Thursday",
    "fri": "Friday",
    "friday": "Friday",
    "sat": "Saturday",
    "saturday": "Saturday",
    "sun": "Sunday",
    "sunday": "Sunday",
}


class HoursRow(BaseModel):
    """One row of the weekly hours table."""
    day: str
    hours: str
    is_today: bool = False


def normalize_day(token: str) -> Optional[str]:
    """Map a day token like ``"Tues"`` to its canonical weekday name."""
    clean = token.replace(":", "", 1).strip().lower()
    for alias, day in DAY_ALIASES.items():
        if clean.startswith(alias):
            return day
    return None


def parse_opening_hours(lines: Optional[Iterable[str]]) -> Dict[str, str]:
    """
    Parse weekday descriptions into ``{canonical day: hours text}``.

    Lines without a colon and unrecognized day tokens are dropped.
    """
    parsed: Dict[str, str] = {}
    for line in lines or []:
        day_token, sep, hours = line.partition(":")
        if not sep:
            continue
        day = normalize_day(day_token)
        if day:
            parsed[day] = hours.strip() or PLACEHOLDER
    return parsed


def today_name(now: Optional[datetime] = None) -> str:
    """Full weekday name for ``now`` in the current locale."""
    return (now or datetime.now()).strftime("%A")


def build_hours_table(
    lines: Optional[Iterable[str]], today: Optional[str] = None
) -> List[HoursRow]:
    """Render parsed hours against the canonical week, flagging today."""
    hours_by_day = parse_opening_hours(lines)
    today = (today or today_name()).lower()
    return [
        HoursRow(
            day=day,
            hours=hours_by_day.get(day, PLACEHOLDER),
            is_today=day.lower() == today,
        )
        for day in WEEK_ORDER
    ]
