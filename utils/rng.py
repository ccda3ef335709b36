# utils/rng.py

"""
Random number generator utilities.

We use NumPy's Generator API as the PRNG behind a stream. The options
validator treats `prng`, `seed` and `state` as opaque, so this module is
the one place that knows what those values look like:

    rng = make_rng(42)
    options.update(prng_options(rng, seed=42))
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create a NumPy random Generator.

    Args:
        seed:
            If provided, used to seed the Generator deterministically.
            If None, we use NumPy's default seeding (OS entropy).

    Returns:
        np.random.Generator instance.
    """
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(int(seed))


def prng_options(
    rng: np.random.Generator,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Stream options describing `rng`.

    Returns:
        {"prng": <bound uniform sampler>, "state": <bit generator state>}
        plus "seed" when one is given. The state dict is a snapshot; later
        draws from `rng` do not change it.
    """
    out: Dict[str, Any] = {
        "prng": rng.random,
        "state": rng.bit_generator.state,
    }
    if seed is not None:
        out["seed"] = seed
    return out
