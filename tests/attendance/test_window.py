from datetime import date, timedelta

from src.attendance_register.attendance_register.attendance.window import DateWindow


def test_edit_window_is_inclusive_of_day_thirty():
    today = date(2026, 3, 16)
    window = DateWindow()

    assert window.is_editable(today, today)
    assert window.is_editable(today - timedelta(days=30), today)
    assert not window.is_editable(today - timedelta(days=31), today)


def test_future_dates_are_not_editable():
    today = date(2026, 3, 16)
    window = DateWindow()
    tomorrow = today + timedelta(days=1)

    assert not window.is_editable(tomorrow, today)


def test_view_window_reaches_back_180_days():
    today = date(2026, 3, 16)
    window = DateWindow()

    assert window.view_from(today) == today - timedelta(days=180)
    # Viewable but read-only
    assert not window.is_editable(today - timedelta(days=90), today)


def test_describe_uses_iso_dates():
    info = DateWindow().describe(date(2026, 3, 16))
    assert info["today"] == "2026-03-16"
    assert info["edit_from"] == "2026-02-14"
    assert info["view_from"] == "2025-09-17"
