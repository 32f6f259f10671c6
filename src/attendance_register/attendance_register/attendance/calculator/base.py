from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceTally


class PercentageCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance percentage)."""

    @abstractmethod
    def percentage(self, tally: AttendanceTally) -> float:
        raise NotImplementedError
