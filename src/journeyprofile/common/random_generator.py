# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Global, hierarchically seeded random number generation.

Every component that needs randomness derives its own generator from a single
global seed using a stable identifier, so adding a new consumer never shifts the
sequence seen by an existing one::

    from journeyprofile.common import random_generator as rng

    rng.init(42)
    selection_rng = rng.derive("profile.weighted.selection")
    u = selection_rng.uniform(0.0, total_weight)

If the global seed is never set (or set to None), derived generators are seeded
from OS entropy and runs are not reproducible.
"""

import hashlib
import random
import threading

import numpy as np

from journeyprofile.common.exceptions import InvalidStateError

__all__ = ["RandomGenerator", "derive", "from_seed", "init", "is_initialized", "reset"]

_base_seed: int | None = None
_initialized: bool = False
_lock = threading.Lock()


class RandomGenerator:
    """Pair of Python and NumPy generators sharing one seed.

    Not thread-safe. Create one instance per consumer via derive().
    """

    def __init__(self, seed: int | None, *, _internal: bool = False) -> None:
        if not _internal:
            raise InvalidStateError(
                "RandomGenerator must be created via random_generator.derive()"
            )
        self.seed = seed
        self._python_rng = random.Random(seed)
        self._numpy_rng = np.random.default_rng(seed)

    @property
    def numpy(self) -> np.random.Generator:
        """The NumPy generator, for vectorized draws."""
        return self._numpy_rng

    def random(self) -> float:
        return self._python_rng.random()

    def uniform(self, a: float, b: float) -> float:
        return self._python_rng.uniform(a, b)

    def randrange(self, start: int, stop: int | None = None) -> int:
        return self._python_rng.randrange(start, stop)

    def choice(self, seq):
        return self._python_rng.choice(seq)

    def shuffle(self, seq: list) -> None:
        self._python_rng.shuffle(seq)

    def __repr__(self) -> str:
        return f"RandomGenerator(seed={self.seed})"


def _derive_seed(identifier: str) -> int | None:
    if _base_seed is None:
        return None
    seed_string = f"{_base_seed}:{identifier}"
    hash_bytes = hashlib.sha256(seed_string.encode("utf-8")).digest()
    return int.from_bytes(hash_bytes[:8], byteorder="big")


def init(seed: int | None) -> None:
    """Set the global seed. May only be called once until reset().

    Raises:
        InvalidStateError: If the global generator is already initialized.
    """
    global _base_seed, _initialized
    with _lock:
        if _initialized:
            raise InvalidStateError("Random generator already initialized")
        _base_seed = seed
        _initialized = True


def reset() -> None:
    """Forget the global seed. Intended for tests."""
    global _base_seed, _initialized
    with _lock:
        _base_seed = None
        _initialized = False


def is_initialized() -> bool:
    return _initialized


def derive(identifier: str) -> RandomGenerator:
    """Create a generator whose seed is a stable function of the global seed and identifier."""
    return RandomGenerator(_derive_seed(identifier), _internal=True)


def from_seed(seed: int) -> RandomGenerator:
    """Create a generator from an explicit seed, independent of the global seed."""
    return RandomGenerator(seed, _internal=True)
