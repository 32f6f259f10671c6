from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from ..core.constants import EDIT_WINDOW_DAYS, VIEW_WINDOW_DAYS


@dataclass(frozen=True)
class DateWindow:
    """Which dates may be marked (last 30 days) or viewed (last 180 days).

    Both bounds are inclusive and future dates are outside both windows.
    """

    edit_days: int = EDIT_WINDOW_DAYS
    view_days: int = VIEW_WINDOW_DAYS

    def edit_from(self, today: date) -> date:
        return today - timedelta(days=self.edit_days)

    def view_from(self, today: date) -> date:
        return today - timedelta(days=self.view_days)

    def is_editable(self, day: date, today: date) -> bool:
        return self.edit_from(today) <= day <= today

    def describe(self, today: date) -> dict:
        return {
            "today": today.strftime("%Y-%m-%d"),
            "edit_from": self.edit_from(today).strftime("%Y-%m-%d"),
            "view_from": self.view_from(today).strftime("%Y-%m-%d"),
            "edit_days": self.edit_days,
            "view_days": self.view_days,
        }
