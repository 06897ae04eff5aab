"""Period Presets — window resolution and purchase list bounds."""

from datetime import date

from ecosmart.core.domain_types import PeriodPreset
from ecosmart.core.period_presets import (
    list_since, parse_preset, resolve_windows,
)

TODAY = date(2026, 10, 18)


def test_unknown_or_missing_preset_defaults_to_six_months():
    assert parse_preset(None) is PeriodPreset.SIX_MONTHS
    assert parse_preset("fortnight") is PeriodPreset.SIX_MONTHS
    assert parse_preset("7days") is PeriodPreset.SEVEN_DAYS


def test_seven_day_windows_are_adjacent():
    w = resolve_windows(PeriodPreset.SEVEN_DAYS, TODAY)
    assert w.current_start == date(2026, 10, 11)
    assert w.current_end == TODAY
    assert w.previous_end == date(2026, 10, 10)
    assert w.previous_start == date(2026, 10, 4)


def test_month_presets_use_calendar_months():
    w = resolve_windows(PeriodPreset.THREE_MONTHS, TODAY)
    assert w.current_start == date(2026, 7, 18)
    assert w.previous_start == date(2026, 4, 18)
    assert w.previous_end == date(2026, 7, 17)


def test_one_year_window():
    w = resolve_windows(PeriodPreset.ONE_YEAR, TODAY)
    assert w.current_start == date(2025, 10, 18)
    assert w.previous_start == date(2024, 10, 18)


def test_month_end_clamps():
    w = resolve_windows(PeriodPreset.SIX_MONTHS, date(2026, 8, 31))
    assert w.current_start == date(2026, 2, 28)


def test_list_since_uses_flat_day_counts():
    assert list_since("3months", TODAY) == date(2026, 7, 20)
    assert list_since("7days", TODAY) == date(2026, 10, 11)


def test_list_since_all_or_unknown_is_unbounded():
    assert list_since(None, TODAY) is None
    assert list_since("all", TODAY) is None
    assert list_since("forever", TODAY) is None
