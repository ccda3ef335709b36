# core_types.py

"""
Shared type definitions for the random-streams-options project.

This module is intentionally small and dependency-free so it can be imported
from anywhere (streams/, utils/, main.py, tests) without risk of circular
imports.
"""

from __future__ import annotations

from typing import Any, Dict, MutableMapping, Tuple


# ---------- Basic aliases ----------

OptionName = str

# Validated options as handed to a stream constructor
StreamOptions = Dict[OptionName, Any]

# Caller-owned record the validator writes into
OptionsDestination = MutableMapping[OptionName, Any]


# Recognized option names, in the order they are checked.
# The first invalid field in this order is the one reported.
RECOGNIZED_OPTIONS: Tuple[OptionName, ...] = (
    "objectMode",
    "highWaterMark",
    "encoding",
    "sep",
    "siter",
    "iter",
    "state",
    "seed",
    "prng",
    "copy",
)


# ---------- Sentinel ----------


class _Unset:
    """
    Marker for "no options were supplied".

    Distinct from None: None is a real (invalid) options value, UNSET
    means the caller passed nothing.
    """

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


# ---------- Errors ----------


def safe_repr(value: Any) -> str:
    """
    repr() that never raises.

    Some values cannot be rendered (e.g. ints past the interpreter's
    digit limit, or objects with a broken __repr__); those fall back to
    `<TypeName object>`.
    """
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__} object>"


class OptionsTypeError(TypeError):
    """
    An option (or the options argument itself) failed its type/range check.

    Attributes:
        option:
            Name of the offending field, or "options" when the candidate
            itself is not a mapping.
        constraint:
            Human-readable description of what was expected.
        value:
            The value that was received.
    """

    def __init__(self, option: OptionName, constraint: str, value: Any) -> None:
        self.option = option
        self.constraint = constraint
        self.value = value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.option == "options":
            return (
                f"invalid argument. Options argument must be {self.constraint}. "
                f"Value: `{safe_repr(self.value)}`."
            )
        return (
            f"invalid option. `{self.option}` option must be {self.constraint}. "
            f"Option: `{safe_repr(self.value)}`."
        )
