"""Tests for resolving stream options against the defaults."""

import logging
from typing import Any, Dict

import pytest

from config import STREAM_DEFAULTS
from core_types import OptionsTypeError
from streams.options import default_options, resolve_options


class TestDefaultOptions:
    def test_matches_config(self) -> None:
        assert default_options() == STREAM_DEFAULTS

    def test_returns_fresh_copy(self) -> None:
        opts = default_options()
        opts["sep"] = ","
        assert STREAM_DEFAULTS["sep"] == "\n"


class TestResolveOptions:
    def test_no_options_gives_defaults(self) -> None:
        assert resolve_options() == STREAM_DEFAULTS

    def test_overrides_defaults(self, prng_opts: Dict[str, Any]) -> None:
        opts = resolve_options({"objectMode": True, "highWaterMark": 8, **prng_opts})
        assert opts["objectMode"] is True
        assert opts["highWaterMark"] == 8
        assert opts["sep"] == "\n"
        assert opts["prng"] == prng_opts["prng"]
        assert opts["state"] is prng_opts["state"]
        assert opts["seed"] == 1234

    def test_ignores_unrecognized(self) -> None:
        assert resolve_options({"beep": True}) == STREAM_DEFAULTS

    def test_raises_on_invalid_option(self) -> None:
        with pytest.raises(OptionsTypeError, match="`siter` option must be a positive integer"):
            resolve_options({"siter": 3.14})

    def test_raises_on_non_mapping(self) -> None:
        with pytest.raises(TypeError, match="Options argument must be an object"):
            resolve_options(None)

    def test_does_not_leak_into_defaults(self) -> None:
        resolve_options({"sep": "\t"})
        assert STREAM_DEFAULTS["sep"] == "\n"

    def test_logs_resolution(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="streams.options"):
            resolve_options({"sep": ","})
        assert "Resolved stream options" in caplog.text

    def test_logs_rejection(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="streams.options"):
            with pytest.raises(OptionsTypeError):
                resolve_options({"copy": "yes"})
        assert "Rejected stream options" in caplog.text
