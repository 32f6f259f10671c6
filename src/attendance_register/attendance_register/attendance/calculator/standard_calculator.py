from __future__ import annotations

from ...core.constants import PERCENTAGE_DECIMALS
from ..model import AttendanceTally
from .base import PercentageCalculator


class StandardPercentageCalculator(PercentageCalculator):
    """Standard rule: present / total * 100 over the full history.

    A student with no records is 0.0, never NaN.
    """

    def __init__(self, decimals: int = PERCENTAGE_DECIMALS):
        self._decimals = int(decimals)

    def percentage(self, tally: AttendanceTally) -> float:
        if tally.total <= 0:
            return 0.0
        return round(tally.present * 100.0 / tally.total, self._decimals)
