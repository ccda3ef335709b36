"""Shared fixtures for stream options tests."""

from typing import Any, Dict

import numpy as np
import pytest

from utils.rng import make_rng, prng_options


@pytest.fixture
def rng() -> np.random.Generator:
    return make_rng(1234)


@pytest.fixture
def prng_opts(rng: np.random.Generator) -> Dict[str, Any]:
    """prng / seed / state values as a stream would receive them."""
    return prng_options(rng, seed=1234)
