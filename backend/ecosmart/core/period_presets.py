"""Period Presets — resolve named dashboard windows into concrete date bounds.

Invariants:
    - Unknown or missing preset → 6months (dashboard default)
    - Current window is [start, today], both ends inclusive
    - Previous window ends the day before the current window starts
    - Day presets subtract days; month presets subtract calendar months
    - today is always passed in (no clock reads here)
"""

from dataclasses import dataclass
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from ecosmart.core.domain_types import PeriodPreset

DEFAULT_PRESET = PeriodPreset.SIX_MONTHS

_SPANS: dict[PeriodPreset, relativedelta] = {
    PeriodPreset.SEVEN_DAYS: relativedelta(days=7),
    PeriodPreset.THIRTY_DAYS: relativedelta(days=30),
    PeriodPreset.THREE_MONTHS: relativedelta(months=3),
    PeriodPreset.SIX_MONTHS: relativedelta(months=6),
    PeriodPreset.ONE_YEAR: relativedelta(months=12),
}

# Purchase list filter uses flat day counts
_LIST_DAYS: dict[PeriodPreset, int] = {
    PeriodPreset.SEVEN_DAYS: 7,
    PeriodPreset.THIRTY_DAYS: 30,
    PeriodPreset.THREE_MONTHS: 90,
    PeriodPreset.SIX_MONTHS: 180,
    PeriodPreset.ONE_YEAR: 365,
}


@dataclass(frozen=True)
class ReportWindows:
    """Current and previous windows for one summary request."""
    current_start: date
    current_end: date
    previous_start: date
    previous_end: date


def parse_preset(raw: str | None) -> PeriodPreset:
    """Map a query-string value to a preset, falling back to the default."""
    try:
        return PeriodPreset(raw)
    except ValueError:
        return DEFAULT_PRESET


def resolve_windows(preset: PeriodPreset, today: date) -> ReportWindows:
    """Current window ending today, previous window of the same span before it."""
    span = _SPANS[preset]
    current_start = today - span
    previous_end = current_start - timedelta(days=1)
    previous_start = current_start - span
    return ReportWindows(
        current_start=current_start,
        current_end=today,
        previous_start=previous_start,
        previous_end=previous_end,
    )


def list_since(raw: str | None, today: date) -> date | None:
    """Lower bound for the purchase list filter. None means no bound ("all")."""
    if raw is None or raw == "all":
        return None
    try:
        preset = PeriodPreset(raw)
    except ValueError:
        return None
    return today - timedelta(days=_LIST_DAYS[preset])
