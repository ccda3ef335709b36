# streams/options.py

"""
Resolve user-supplied stream options against the project defaults.

This is how a stream constructor consumes the validator: start from a
copy of `config.STREAM_DEFAULTS`, merge validated user options on top, and
fail fast if anything is invalid.
"""

from __future__ import annotations

from typing import Any

from config import STREAM_DEFAULTS
from core_types import UNSET, StreamOptions
from utils.logging_utils import get_logger
from .validate import validate


logger = get_logger(__name__)


def default_options() -> StreamOptions:
    """
    Fresh copy of the stream defaults (safe to mutate).
    """
    return dict(STREAM_DEFAULTS)


def resolve_options(options: Any = UNSET) -> StreamOptions:
    """
    Merge `options` onto the stream defaults.

    Args:
        options:
            Candidate options mapping. Omit it to get the defaults.

    Returns:
        A new dict: defaults overridden by every recognized option present
        on `options`.

    Raises:
        OptionsTypeError:
            If `options` is not a mapping or any recognized option is invalid.
    """
    opts = default_options()
    err = validate(opts, options)
    if err is not None:
        logger.debug("Rejected stream options: %s", err)
        raise err

    logger.debug("Resolved stream options: %s", sorted(opts))
    return opts
