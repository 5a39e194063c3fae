"""Output filters applied to every timestamp a clock produces."""

import math
from abc import ABC, abstractmethod

from typing_extensions import override


class OutputFilter(ABC):

    @property
    @abstractmethod
    def rounds(self) -> bool:
        pass

    @abstractmethod
    def apply(self, time: float) -> float:
        """Return the timestamp as it should be handed back to the caller."""
        pass


class Unrounded(OutputFilter):
    @property
    @override
    def rounds(self) -> bool:
        return False

    @override
    def apply(self, time: float) -> float:
        return time


class NearestSecond(OutputFilter):
    """Round to the nearest whole second.

    Uses the built-in ``round()``: ties go to the even second
    (``round(0.5) == 0``, ``round(1.5) == 2``) and the result is an int.
    Infinite and NaN timestamps are returned unchanged.
    """

    @property
    @override
    def rounds(self) -> bool:
        return True

    @override
    def apply(self, time: float) -> float:
        if isinstance(time, float) and not math.isfinite(time):
            return time
        return round(time)


UNROUNDED = Unrounded()
NEAREST_SECOND = NearestSecond()


def filter_for(enabled: bool) -> OutputFilter:
    return NEAREST_SECOND if enabled else UNROUNDED
