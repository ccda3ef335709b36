# streams/checks.py

"""
Runtime type tests for stream options.

Each predicate takes an arbitrary value and answers a single question
(is it a boolean? a nonnegative number? ...). They never raise.

NumPy scalars are treated like their builtin counterparts, so options
computed with NumPy (e.g. `np.int64(10)` for `siter`) are accepted. `bool`
is never a number here, even though it subclasses `int`. Numbers are
anything registered as `numbers.Real` (so `Fraction` counts, `Decimal`
does not).

`OPTION_RULES` ties the predicates to option names in the fixed order
the validator walks them.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

import numpy as np

from core_types import OptionName


_BOOL_TYPES = (bool, np.bool_)


def _to_float(value: Any) -> Optional[float]:
    # Exact rationals (Fraction) can be finite yet too large for a float
    try:
        return float(value)
    except OverflowError:
        return None


def is_boolean(value: Any) -> bool:
    return isinstance(value, _BOOL_TYPES)


def is_number(value: Any) -> bool:
    """
    True for real numbers (NaN included), False for bools and everything else.
    """
    return isinstance(value, numbers.Real) and not isinstance(value, _BOOL_TYPES)


def is_nonnegative_number(value: Any) -> bool:
    """
    Finite real number >= 0. NaN and +inf are rejected.
    """
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return int(value) >= 0
    v = _to_float(value)
    if v is None:
        return value >= 0
    return math.isfinite(v) and v >= 0.0


def is_positive_integer(value: Any) -> bool:
    """
    Integer-valued real number > 0.

    Integral floats such as 10.0 count; 3.14, NaN and inf do not.
    """
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return int(value) > 0
    v = _to_float(value)
    if v is None:
        return value > 0 and value == math.floor(value)
    return math.isfinite(v) and v.is_integer() and v > 0.0


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_string_or_null(value: Any) -> bool:
    return value is None or isinstance(value, str)


def is_options_object(value: Any) -> bool:
    # Mappings only: lists, callables and plain objects are not option records
    return isinstance(value, Mapping)


# -------------------------------------------------------------------
# Per-option rules
# -------------------------------------------------------------------


@dataclass(frozen=True)
class OptionRule:
    """
    Constraint attached to one recognized option.

    `check` is None for pass-through options (any value accepted).
    """

    name: OptionName
    check: Optional[Callable[[Any], bool]]
    constraint: str = ""

    def accepts(self, value: Any) -> bool:
        if self.check is None:
            return True
        return self.check(value)


OPTION_RULES: Tuple[OptionRule, ...] = (
    OptionRule("objectMode", is_boolean, "a boolean"),
    OptionRule("highWaterMark", is_nonnegative_number, "a nonnegative number"),
    OptionRule("encoding", is_string_or_null, "either a string or null"),
    OptionRule("sep", is_string, "a string"),
    OptionRule("siter", is_positive_integer, "a positive integer"),
    # iter / state / seed / prng belong to the PRNG layer and are not inspected
    OptionRule("iter", None),
    OptionRule("state", None),
    OptionRule("seed", None),
    OptionRule("prng", None),
    OptionRule("copy", is_boolean, "a boolean"),
)
