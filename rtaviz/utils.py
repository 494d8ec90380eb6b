"""Value wrappers, shared-reference helpers and duration formatting."""

from __future__ import annotations

import enum
import math
import weakref
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_SUFFIXES = ("ns", "μs", "ms", "s", "min", "h")
_FACTORS = (1000, 1000, 1000, 60, 60)

_IMPRECISE_SUFFIXES = ("ns", "μs", "ms", "s", "min", "h", "days", "years")
_IMPRECISE_FACTORS = (1000, 1000, 1000, 60, 60, 24, 365)


class UnknownValueError(ValueError):
    """Raised when the value of an unknown or dropped wrapper is requested."""


class Known(Generic[T]):
    """A value that is either known or unknown."""

    __slots__ = ("_value", "_known")

    def __init__(self, value: T) -> None:
        self._value = value
        self._known = True

    @classmethod
    def unknown(cls) -> "Known[Any]":
        """Return the unknown value."""
        obj = cls.__new__(cls)
        obj._value = None
        obj._known = False
        return obj

    @classmethod
    def from_optional(cls, value: Optional[T]) -> "Known[T]":
        """Wrap ``value``, treating ``None`` as unknown."""
        return cls.unknown() if value is None else cls(value)

    def is_known(self) -> bool:
        return self._known

    def is_unknown(self) -> bool:
        return not self._known

    def unwrap(self) -> T:
        return self.expect("unwrap() called on an Unknown value")

    def unwrap_or(self, default: T) -> T:
        return self._value if self._known else default

    def eq_inner(self, other: T) -> bool:
        """Return True if the value is known and equal to ``other``."""
        return self._known and self._value == other

    def map(self, func: Callable[[T], U]) -> "Known[U]":
        return Known(func(self._value)) if self._known else Known.unknown()

    def map_or(self, default: U, func: Callable[[T], U]) -> U:
        return func(self._value) if self._known else default

    def is_unknown_or_eq(self, other: Any) -> bool:
        """Return True if the value is unknown or equal to ``other``."""
        return not self._known or self._value == other

    def expect(self, msg: str) -> T:
        if not self._known:
            raise UnknownValueError(msg)
        return self._value

    def to_optional(self) -> Optional[T]:
        return self._value if self._known else None

    def hex(self) -> str:
        """Lower-case hexadecimal form of the value, or ``Unknown``."""
        return format(self._value, "x") if self._known else "Unknown"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Known):
            return NotImplemented
        if self._known != other._known:
            return False
        return not self._known or self._value == other._value

    def __hash__(self) -> int:
        return hash((self._known, self._value))

    def __str__(self) -> str:
        return str(self._value) if self._known else "Unknown"

    def __repr__(self) -> str:
        return f"Known({self._value!r})" if self._known else "Known.unknown()"


class _WeakState(enum.Enum):
    KNOWN = "Known"
    UNKNOWN = "Unknown"
    DROPPED = "Dropped"


class WeakKnown(Generic[T]):
    """A value that is known, unknown, or known once but since dropped."""

    __slots__ = ("_value", "_state")

    def __init__(self, value: T) -> None:
        self._value = value
        self._state = _WeakState.KNOWN

    @classmethod
    def _without_value(cls, state: _WeakState) -> "WeakKnown[Any]":
        obj = cls.__new__(cls)
        obj._value = None
        obj._state = state
        return obj

    @classmethod
    def unknown(cls) -> "WeakKnown[Any]":
        return cls._without_value(_WeakState.UNKNOWN)

    @classmethod
    def dropped(cls) -> "WeakKnown[Any]":
        return cls._without_value(_WeakState.DROPPED)

    @classmethod
    def from_known(cls, known: Known[T]) -> "WeakKnown[T]":
        return cls(known.unwrap()) if known.is_known() else cls.unknown()

    def is_known(self) -> bool:
        return self._state is _WeakState.KNOWN

    def is_unknown(self) -> bool:
        return self._state is _WeakState.UNKNOWN

    def is_dropped(self) -> bool:
        return self._state is _WeakState.DROPPED

    def unwrap(self) -> T:
        if self._state is _WeakState.UNKNOWN:
            raise UnknownValueError("unwrap() called on an Unknown value")
        if self._state is _WeakState.DROPPED:
            raise UnknownValueError("unwrap() called on a Dropped value")
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value if self.is_known() else default

    def eq_inner(self, other: T) -> bool:
        return self.is_known() and self._value == other

    def map(self, func: Callable[[T], U]) -> "WeakKnown[U]":
        if self.is_known():
            return WeakKnown(func(self._value))
        return WeakKnown._without_value(self._state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeakKnown):
            return NotImplemented
        if self._state is not other._state:
            return False
        return not self.is_known() or self._value == other._value

    def __hash__(self) -> int:
        return hash((self._state, self._value))

    def __str__(self) -> str:
        return str(self._value) if self.is_known() else self._state.value

    def __repr__(self) -> str:
        if self.is_known():
            return f"WeakKnown({self._value!r})"
        return f"WeakKnown.{self._state.name.lower()}()"


class ArcWeak(Generic[T]):
    """A reference that is either strong or weak and can switch between the two."""

    __slots__ = ("_strong", "_weak")

    def __init__(self, target: Any) -> None:
        if isinstance(target, weakref.ref):
            self._strong = None
            self._weak = target
        else:
            self._strong = target
            self._weak = None

    def get(self) -> Optional[T]:
        """Return the referenced object, or None if it no longer exists."""
        if self._strong is not None:
            return self._strong
        return self._weak()

    def upgrade_in_place(self) -> bool:
        """Make the reference strong; return False if the object is gone."""
        if self._strong is not None:
            return True
        obj = self._weak()
        if obj is None:
            return False
        self._strong = obj
        self._weak = None
        return True

    def downgrade_in_place(self) -> None:
        """Make the reference weak."""
        if self._strong is not None:
            self._weak = weakref.ref(self._strong)
            self._strong = None

    def get_weak(self) -> "weakref.ref[T]":
        if self._strong is not None:
            return weakref.ref(self._strong)
        return self._weak

    def is_strong(self) -> bool:
        return self._strong is not None

    def __copy__(self) -> "ArcWeak[T]":
        return ArcWeak(self._strong if self._strong is not None else self._weak)

    def __repr__(self) -> str:
        kind = "strong" if self.is_strong() else "weak"
        return f"ArcWeak({kind}, {self.get()!r})"


class CyclicDependency(ABC):
    """An object whose strong reference cycle can be broken and restored."""

    @abstractmethod
    def break_cycle(self) -> None:
        """Turn the cycle's strong references into weak ones."""

    @abstractmethod
    def create_cycle(self) -> bool:
        """Restore the strong references; return False if that is impossible."""


def display_shared(obj: Any, skip: bool) -> str:
    """Display a shared object, or ``...`` when skipped."""
    return "..." if skip else str(obj)


def display_arc_weak(ref: ArcWeak[Any], skip: bool) -> str:
    """Display the object behind ``ref``, ``...`` when skipped, ``DROPPED`` if gone."""
    if skip:
        return "..."
    obj = ref.get()
    return "DROPPED" if obj is None else str(obj)


def display_arc_weak_mapped(ref: ArcWeak[T], func: Callable[[T], str]) -> str:
    """Display the object behind ``ref`` with ``func``, or ``DROPPED`` if gone."""
    obj = ref.get()
    return "DROPPED" if obj is None else func(obj)


def format_duration(nanos: int) -> str:
    """Format an exact duration in nanoseconds using the largest exact unit."""
    value = nanos
    suffix = 0
    while suffix < len(_FACTORS) and value % _FACTORS[suffix] == 0:
        value //= _FACTORS[suffix]
        suffix += 1
    return f"{value} {_SUFFIXES[suffix]}"


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _format_float(x: float) -> str:
    if x.is_integer():
        return str(int(x))
    return repr(x)


def format_duration_imprecise(nanos: int) -> str:
    """Format a duration in nanoseconds to three significant digits.

    Years are taken as 365 days.
    """
    if nanos == 0:
        return f"0 {_IMPRECISE_SUFFIXES[0]}"

    remaining = abs(nanos)
    suffix = 0
    total_factor = 1
    while suffix < len(_IMPRECISE_FACTORS) and remaining >= _IMPRECISE_FACTORS[suffix]:
        remaining //= _IMPRECISE_FACTORS[suffix]
        total_factor *= _IMPRECISE_FACTORS[suffix]
        suffix += 1

    value = float(nanos) / float(total_factor)
    shift = 3 - math.ceil(math.log10(abs(value)))
    shift_factor = 10.0**shift
    rounded = _round_half_away(value * shift_factor) / shift_factor
    return f"{_format_float(rounded)} {_IMPRECISE_SUFFIXES[suffix]}"


def debug_option_hex(value: Optional[int]) -> str:
    """Debug form of an optional integer with the value in hexadecimal."""
    if value is None:
        return "None"
    return f"Some({value:#x})"