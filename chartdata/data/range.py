"""
Immutable closed interval over the real numbers.

A Range is a value type: every operation that would change its bounds
returns a new Range (or, where noted, the original one when nothing needs
to change).
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from ..errors import InvalidArgumentError
from ..errors.arguments import require


@dataclass(frozen=True)
class Range:
    """Closed interval ``[lower, upper]`` with ``lower <= upper``."""
    lower: float
    upper: float

    def __post_init__(self):
        if self.lower > self.upper:
            raise InvalidArgumentError(
                f"Range(double, double): require lower ({self.lower}) <= upper ({self.upper}).",
                argument="lower",
                value=self.lower,
                context={"upper": self.upper},
            )

    def __str__(self) -> str:
        return f"Range[{self.lower},{self.upper}]"

    @property
    def lower_bound(self) -> float:
        """Lower bound of the range."""
        return self.lower

    @property
    def upper_bound(self) -> float:
        """Upper bound of the range."""
        return self.upper

    @property
    def length(self) -> float:
        """Distance between the bounds."""
        return self.upper - self.lower

    @property
    def central_value(self) -> float:
        """Midpoint of the range."""
        return (self.lower + self.upper) / 2.0

    def contains(self, value: float) -> bool:
        """True when ``lower <= value <= upper``."""
        return self.lower <= value <= self.upper

    def __contains__(self, value: float) -> bool:
        return self.contains(value)

    def intersects(self, lower: Union[float, "Range"], upper: Optional[float] = None) -> bool:
        """
        Check whether the closed interval ``[lower, upper]`` overlaps this range.

        Bounds are taken literally: reversed bounds never intersect. Intervals
        that only touch at a boundary count as intersecting.

        Args:
            lower: Lower bound of the other interval, or a Range
            upper: Upper bound of the other interval (omitted for a Range)

        Returns:
            True if the intervals share at least one point
        """
        if isinstance(lower, Range):
            if upper is not None:
                raise InvalidArgumentError(
                    "Cannot pass an upper bound together with a Range",
                    argument="upper",
                    value=upper,
                )
            lower, upper = lower.lower, lower.upper
        elif upper is None:
            raise InvalidArgumentError("Null 'upper' argument", argument="upper")

        if lower > upper:
            return False
        return not (upper < self.lower or lower > self.upper)

    def constrain(self, value: float) -> float:
        """Clamp ``value`` into the range."""
        if value < self.lower:
            return self.lower
        if value > self.upper:
            return self.upper
        return value

    def is_nan_range(self) -> bool:
        """True when both bounds are NaN."""
        return math.isnan(self.lower) and math.isnan(self.upper)

    @staticmethod
    def combine(range1: Optional["Range"], range2: Optional["Range"]) -> Optional["Range"]:
        """
        Null-safe union of two ranges.

        Returns None when both are absent, the other range when exactly one
        is absent, and the smallest range spanning both otherwise.
        """
        if range1 is None:
            return range2
        if range2 is None:
            return range1
        return Range(min(range1.lower, range2.lower), max(range1.upper, range2.upper))

    @staticmethod
    def combine_ignoring_nan(range1: Optional["Range"],
                             range2: Optional["Range"]) -> Optional["Range"]:
        """
        Union of two ranges where a NaN bound on one side never wins.

        Returns None when the combined range would have NaN for both bounds.
        """
        if range1 is None:
            if range2 is not None and range2.is_nan_range():
                return None
            return range2
        if range2 is None:
            if range1.is_nan_range():
                return None
            return range1

        lower = _min_ignoring_nan(range1.lower, range2.lower)
        upper = _max_ignoring_nan(range1.upper, range2.upper)
        if math.isnan(lower) and math.isnan(upper):
            return None
        return Range(lower, upper)

    @staticmethod
    def expand_to_include(rng: Optional["Range"], value: float) -> "Range":
        """
        Extend a range so that it contains ``value``.

        An absent range becomes the single-point range ``[value, value]``.
        A range that already contains the value is returned unchanged.
        """
        if rng is None:
            return Range(value, value)
        if value < rng.lower:
            return Range(value, rng.upper)
        if value > rng.upper:
            return Range(rng.lower, value)
        return rng

    @staticmethod
    def expand(rng: "Range", lower_margin: float, upper_margin: float) -> "Range":
        """
        Grow a range by margins expressed as fractions of its length.

        Args:
            rng: Range to expand
            lower_margin: Fraction of the length subtracted from the lower bound
            upper_margin: Fraction of the length added to the upper bound

        Returns:
            Expanded range

        Raises:
            InvalidArgumentError: If range is None or the margins would invert the bounds
        """
        require(rng, "range")
        length = rng.length
        lower = rng.lower - length * lower_margin
        upper = rng.upper + length * upper_margin
        if lower > upper:
            raise InvalidArgumentError(
                f"Margins ({lower_margin}, {upper_margin}) invert {rng}: "
                f"lower ({lower}) > upper ({upper})",
                argument="lower_margin",
                value=lower_margin,
                context={"upper_margin": upper_margin, "range": str(rng)},
            )
        return Range(lower, upper)

    @staticmethod
    def shift(rng: "Range", delta: float, allow_zero_crossing: bool = True) -> "Range":
        """
        Translate both bounds by ``delta``.

        When ``allow_zero_crossing`` is False, a bound that starts on one
        side of zero stops at zero instead of crossing it.
        """
        require(rng, "range")
        if allow_zero_crossing:
            return Range(rng.lower + delta, rng.upper + delta)
        return Range(_shift_with_no_zero_crossing(rng.lower, delta),
                     _shift_with_no_zero_crossing(rng.upper, delta))

    @staticmethod
    def scale(rng: "Range", factor: float) -> "Range":
        """Multiply both bounds by a non-negative ``factor``."""
        require(rng, "range")
        if factor < 0:
            raise InvalidArgumentError(
                f"Negative 'factor' argument: {factor}",
                argument="factor",
                value=factor,
            )
        return Range(rng.lower * factor, rng.upper * factor)


def _shift_with_no_zero_crossing(value: float, delta: float) -> float:
    if value > 0.0:
        return max(value + delta, 0.0)
    if value < 0.0:
        return min(value + delta, 0.0)
    return value + delta


def _min_ignoring_nan(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _max_ignoring_nan(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)
