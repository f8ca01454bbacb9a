"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import numpy as np

from vomarkov import config

_rng = np.random.default_rng(config.RANDOM_SEED)


def _draw(rng, low, high):
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    # numpy returns np.int64, callers compare and index with plain ints
    return int(rng.integers(low, high, endpoint=True))


def random_number_between(low, high):
    """Uniform int in [low, high], both ends included."""
    return _draw(_rng, low, high)


def make_sampler(seed=None):
    """Returns a sampler with its own generator, so that walks can be replayed from a seed."""
    rng = np.random.default_rng(seed)

    def sampler(low, high):
        return _draw(rng, low, high)

    return sampler
