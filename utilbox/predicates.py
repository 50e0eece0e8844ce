"""Generic value predicates and value conversion helpers."""

from __future__ import annotations

import math
import operator as _operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable

__all__ = [
    "Predicate",
    "WithinPredicate",
    "BetweenPredicate",
    "InPredicate",
    "NumericComparablePredicate",
    "StringComparablePredicate",
    "NilPredicate",
    "LikePredicate",
    "true_provider",
    "new_within_predicate",
    "new_between_predicate",
    "new_in_predicate",
    "new_comparable_predicate",
    "new_nil_predicate",
    "new_like_predicate",
]


def _format_float(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def _as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _can_convert_to_float(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return True


def _as_int(value: Any) -> int:
    if isinstance(value, int):
        return int(value)
    try:
        if isinstance(value, float):
            return int(value)
        if isinstance(value, (str, bytes, bytearray)):
            try:
                return int(value)
            except ValueError:
                return int(float(value))
    except (ValueError, OverflowError):
        return 0
    return 0


def _as_time(value: Any, layout: str = "") -> datetime | None:
    """Convert value to a datetime; layout is a strptime format, empty for ISO."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            if layout:
                return datetime.strptime(value, layout)
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _nanoseconds(delta: timedelta) -> int:
    return delta // timedelta(microseconds=1) * 1000


def true_provider(value: Any) -> bool:
    """Return True for any value, marking it as present in a membership map."""
    return value is value


class Predicate(ABC):
    """A condition that a value either meets or not."""

    @abstractmethod
    def apply(self, value: Any) -> bool:
        """Return True if value satisfies the predicate."""

    def __call__(self, value: Any) -> bool:
        return self.apply(value)


class WithinPredicate(Predicate):
    """True for times no further than a number of seconds from a base time."""

    def __init__(self, base_time: datetime, delta_in_seconds: int, date_layout: str = "") -> None:
        self.base_time = base_time
        self.delta_in_seconds = delta_in_seconds
        self.date_layout = date_layout
        self.elapsed = timedelta(0)
        self.max_allowed_delay = timedelta(0)

    def apply(self, value: Any) -> bool:
        moment = _as_time(value, self.date_layout)
        if moment is None:
            return False
        try:
            elapsed = abs(moment - self.base_time)
        except TypeError:
            return False
        max_allowed_delay = timedelta(seconds=self.delta_in_seconds)
        passed = max_allowed_delay >= elapsed
        if not passed:
            self.elapsed = elapsed
            self.max_allowed_delay = max_allowed_delay
        return passed

    def __str__(self) -> str:
        return (
            f"(elapsed: {_nanoseconds(self.elapsed)}, "
            f"max allowed delay: {_nanoseconds(self.max_allowed_delay)})\n"
        )


@dataclass(frozen=True)
class BetweenPredicate(Predicate):
    """True for numbers in the closed range [low, high]."""

    low: float
    high: float

    def apply(self, value: Any) -> bool:
        number = _as_float(value)
        return self.low <= number <= self.high

    def __str__(self) -> str:
        return f"x BETWEEN {_format_float(self.low)} AND {_format_float(self.high)}"


class InPredicate(Predicate):
    """True for values that, once converted, belong to a fixed set."""

    def __init__(self, values: Any, convert: Callable[[Any], Any] = _as_string) -> None:
        self._convert = convert
        self._members = {convert(item): true_provider(item) for item in values}
        self.values = frozenset(self._members)

    def apply(self, value: Any) -> bool:
        return self._members.get(self._convert(value), False)


_NUMERIC_OPERATORS: dict[str, Callable[[float, float], bool]] = {
    ">": _operator.gt,
    ">=": _operator.ge,
    "<": _operator.lt,
    "<=": _operator.le,
    "=": _operator.eq,
    "!=": _operator.ne,
}

_STRING_OPERATORS: dict[str, Callable[[str, str], bool]] = {
    "=": _operator.eq,
    "!=": _operator.ne,
}


@dataclass(frozen=True)
class NumericComparablePredicate(Predicate):
    """Compares a value, as a number, with a fixed right operand."""

    operand: float
    operator: str

    def apply(self, value: Any) -> bool:
        compare = _NUMERIC_OPERATORS.get(self.operator)
        return compare is not None and compare(_as_float(value), self.operand)


@dataclass(frozen=True)
class StringComparablePredicate(Predicate):
    """Compares a value, as text, with a fixed right operand using = or !=."""

    operand: str
    operator: str

    def apply(self, value: Any) -> bool:
        compare = _STRING_OPERATORS.get(self.operator)
        return compare is not None and compare(_as_string(value), self.operand)


class NilPredicate(Predicate):
    """True for None."""

    def apply(self, value: Any) -> bool:
        return value is None


class LikePredicate(Predicate):
    """Case-insensitive SQL LIKE style match where % separates fragments."""

    def __init__(self, matching: str) -> None:
        self.matching_fragments = matching.lower().split("%")

    def apply(self, value: Any) -> bool:
        text = _as_string(value).lower()
        for fragment in self.matching_fragments:
            index = text.find(fragment)
            if index == -1:
                return False
            text = text[index:]
        return True


def new_within_predicate(base_time: datetime, delta_in_seconds: int, date_layout: str = "") -> Predicate:
    """Create a predicate true for times within delta seconds of base_time."""
    return WithinPredicate(base_time, delta_in_seconds, date_layout)


def new_between_predicate(low: Any, high: Any) -> Predicate:
    """Create a BETWEEN predicate."""
    return BetweenPredicate(_as_float(low), _as_float(high))


def _is_int_like(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        try:
            int(value)
        except ValueError:
            return False
        return True
    return False


def new_in_predicate(*values: Any) -> Predicate:
    """Create an IN predicate; values compare as ints, floats or text by their common kind."""
    if values and all(_is_int_like(item) for item in values):
        return InPredicate(values, _as_int)
    if values and all(_can_convert_to_float(item) for item in values):
        return InPredicate(values, _as_float)
    return InPredicate(values, _as_string)


def new_comparable_predicate(operator: str, operand: Any) -> Predicate:
    """Create a predicate for =, !=, >, >=, <, <= against operand."""
    if _can_convert_to_float(operand):
        return NumericComparablePredicate(_as_float(operand), operator)
    return StringComparablePredicate(_as_string(operand), operator)


def new_nil_predicate() -> Predicate:
    """Create a predicate true for None."""
    return NilPredicate()


def new_like_predicate(matching: str) -> Predicate:
    """Create a LIKE predicate."""
    return LikePredicate(matching)