"""Segments: one aligned token position across all logs of a cluster."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from logpattern import config as app_config


class Segment(ABC):
    """Base class for fixed and variable segments."""

    @abstractmethod
    def text(self) -> str:
        """Display text, also the segment's token in the shape hash."""
        pass

    @abstractmethod
    def fixed(self) -> bool:
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of observations this segment has accepted."""
        pass

    @abstractmethod
    def merge(self, value: str) -> bool:
        """Record an observed token. Returns False if the segment rejects it."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict:
        pass


class FixedSegment(Segment):
    """A position where every observed token has been the same literal."""

    def __init__(self, data: str, total: int = 0):
        self.data = data
        self.total = total

    def text(self) -> str:
        return self.data

    def fixed(self) -> bool:
        return True

    def count(self) -> int:
        return self.total

    def merge(self, value: str) -> bool:
        # Mismatch leaves state untouched; the owning format promotes the slot.
        if value != self.data:
            return False

        self.total += 1
        return True

    def to_dict(self) -> Dict:
        return {"text": self.data}

    def __repr__(self):
        return f"FixedSegment({self.data!r}, total={self.total})"


class VariableSegment(Segment):
    """A position that has seen at least two distinct tokens."""

    def __init__(self, values: Optional[Dict[str, int]] = None):
        self._values: Dict[str, int] = dict(values or {})

    @classmethod
    def promote(cls, segment: Segment) -> "VariableSegment":
        """Build a variable segment that keeps the history of ``segment``."""
        variable = cls()
        if segment.count() > 0:
            variable._values[segment.text()] = segment.count()
        return variable

    def text(self) -> str:
        return app_config.WILDCARD

    def fixed(self) -> bool:
        return False

    def count(self) -> int:
        return sum(self._values.values())

    def merge(self, value: str) -> bool:
        self._values[value] = self._values.get(value, 0) + 1
        return True

    def values(self, sort: Optional[bool] = None) -> Dict[str, int]:
        """
        Observed value -> occurrence count.

        Args:
            sort (bool): Sort by value. Defaults to ``config.SORT_VARIABLE_VALUES``,
                otherwise values keep the order they were first seen in.
        """
        if sort is None:
            sort = app_config.SORT_VARIABLE_VALUES
        if sort:
            return dict(sorted(self._values.items()))
        return dict(self._values)

    def to_dict(self) -> Dict:
        return {"values": self.values()}

    def __repr__(self):
        return f"VariableSegment({self._values!r})"
