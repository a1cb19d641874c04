from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayCountingMode
from .strategies.base import DayCountingStrategy
from .strategies.exclusive_strategy import ExclusiveCountingStrategy
from .strategies.overlapping_strategy import OverlappingCountingStrategy


@dataclass
class DayCountingFactory:
    """Factory Pattern: choose the day counting strategy from configuration."""

    def for_mode(self, mode: DayCountingMode | str) -> DayCountingStrategy:
        mode = DayCountingMode(mode)
        if mode == DayCountingMode.EXCLUSIVE:
            return ExclusiveCountingStrategy()
        return OverlappingCountingStrategy()
