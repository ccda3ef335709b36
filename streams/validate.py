# streams/validate.py

"""
Options validation for random number streams.

`validate` is the single entry point. It takes:
    - a destination mapping (owned by the caller),
    - an arbitrary candidate options value,

checks every recognized option present on the candidate, and either:

    - copies the accepted values into the destination and returns None, or
    - returns (does not raise) an OptionsTypeError for the first invalid
      option, leaving the destination untouched.

Typical usage in a stream constructor:

    opts = dict(STREAM_DEFAULTS)
    err = validate(opts, options)
    if err is not None:
        raise err

Unrecognized keys are ignored. Values are copied verbatim; nothing is
coerced, so `opts["prng"] is options["prng"]` after a successful call.
"""

from __future__ import annotations

from typing import Any, Optional

from core_types import UNSET, OptionsDestination, OptionsTypeError, StreamOptions
from .checks import OPTION_RULES, is_options_object


def validate(
    opts: OptionsDestination,
    options: Any = UNSET,
) -> Optional[OptionsTypeError]:
    """
    Validate stream options and merge them into `opts`.

    Args:
        opts:
            Destination mapping. Only written to when every present option
            is valid.
        options:
            Candidate options. Omit it (or pass UNSET) for "no options";
            anything else must be a mapping.

    Returns:
        None on success, otherwise an OptionsTypeError describing the first
        invalid option in RECOGNIZED_OPTIONS order.
    """
    if options is UNSET:
        return None
    if not is_options_object(options):
        return OptionsTypeError("options", "an object", options)

    accepted: StreamOptions = {}
    for rule in OPTION_RULES:
        if rule.name not in options:
            continue
        value = options[rule.name]
        if not rule.accepts(value):
            return OptionsTypeError(rule.name, rule.constraint, value)
        accepted[rule.name] = value

    opts.update(accepted)
    return None
