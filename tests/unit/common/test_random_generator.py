# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from journeyprofile.common import random_generator as rng
from journeyprofile.common.exceptions import InvalidStateError


class TestRandomGenerator:
    def test_init_twice_raises(self):
        with pytest.raises(InvalidStateError, match="already initialized"):
            rng.init(7)

    def test_reset_allows_reinit(self):
        rng.reset()
        assert not rng.is_initialized()
        rng.init(7)
        assert rng.is_initialized()

    def test_derive_is_stable_for_same_identifier(self):
        first = rng.derive("component.a")
        second = rng.derive("component.a")
        assert first.seed == second.seed
        assert [first.random() for _ in range(5)] == [
            second.random() for _ in range(5)
        ]

    def test_derive_differs_between_identifiers(self):
        assert rng.derive("component.a").seed != rng.derive("component.b").seed

    def test_derive_depends_on_global_seed(self):
        seed_42 = rng.derive("component.a").seed
        rng.reset()
        rng.init(43)
        assert rng.derive("component.a").seed != seed_42

    def test_derive_without_global_seed_uses_entropy(self):
        rng.reset()
        rng.init(None)
        assert rng.derive("component.a").seed is None

    def test_from_seed_ignores_global_seed(self):
        before = rng.from_seed(5).random()
        rng.reset()
        rng.init(1234)
        assert rng.from_seed(5).random() == before

    def test_direct_construction_is_rejected(self):
        with pytest.raises(InvalidStateError):
            rng.RandomGenerator(1)

    def test_numpy_generator_is_seeded(self):
        a = rng.from_seed(3).numpy.random(4)
        b = rng.from_seed(3).numpy.random(4)
        assert list(a) == list(b)

    def test_uniform_range(self):
        generator = rng.from_seed(11)
        values = [generator.uniform(2.0, 3.0) for _ in range(100)]
        assert all(2.0 <= v <= 3.0 for v in values)
