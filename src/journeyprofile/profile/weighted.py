# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Weighted random journey selection for open-ended (soak style) profiles.

Each draw is independent: journey ``i`` is selected with probability
``weight_i / sum(weights)``. Weights are normalized once per configuration into a
cumulative table; a draw takes a uniform variate ``u`` in ``[0, total_weight)``
and selects the first scenario whose cumulative weight exceeds ``u``. Scenarios
with zero weight are never selected.

The stream is unbounded. The consumer decides when to stop.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import NamedTuple

import numpy as np

from journeyprofile.common import random_generator as rng
from journeyprofile.common.exceptions import InvalidStateError
from journeyprofile.common.mixins import ProfileLoggerMixin
from journeyprofile.common.models import Configuration, Scenario
from journeyprofile.profile.journey_pool import JourneyPool, JourneyProtocol

_RNG_IDENTIFIER = "profile.weighted.selection"


class WeightedDraw(NamedTuple):
    """One selection from a weighted stream."""

    index: int
    """Declaration index of the selected scenario."""
    journey: JourneyProtocol
    scenario: Scenario


class WeightedScheduler(ProfileLoggerMixin):
    """Selection distribution of a validated, fully weighted configuration.

    Iterating the scheduler starts a fresh WeightedJourneyStream each time. With a
    fixed ``seed`` every stream repeats the same values; otherwise streams are drawn
    from generators derived from the global random generator, so they share the
    distribution but not the values (and are reproducible when the global seed is set).
    """

    def __init__(
        self,
        configuration: Configuration,
        pool: JourneyPool,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        scenarios = configuration.scenarios
        if not scenarios or any(not s.has_weight for s in scenarios):
            raise InvalidStateError(
                "Weighted scheduling requires every scenario to have a weight; "
                "validate the configuration before scheduling"
            )

        self._scenarios: tuple[Scenario, ...] = scenarios
        self._journeys: tuple[JourneyProtocol, ...] = tuple(
            pool[s.journey] for s in scenarios
        )
        weights = np.asarray([s.weight for s in scenarios], dtype=np.float64)
        self._cumulative: np.ndarray = np.cumsum(weights)
        self._total_weight: float = float(self._cumulative[-1])
        if not self._total_weight > 0:
            raise InvalidStateError("Weighted scheduling requires a positive total weight")
        self._probabilities: np.ndarray = weights / self._total_weight
        # Guards the (rounding-only) case where u lands exactly on the total weight.
        self._last_selectable: int = int(np.flatnonzero(weights > 0)[-1])

        self._seed = seed
        self._stream_counter = itertools.count()

        self.info(
            lambda: f"Weighted selection over {len(self._scenarios)} scenario(s), "
            f"total weight {self._total_weight:g}"
        )

    @property
    def total_weight(self) -> float:
        return self._total_weight

    @property
    def probabilities(self) -> dict[str, float]:
        """Selection probability per journey name. Repeated journeys are summed."""
        result: dict[str, float] = {}
        for scenario, probability in zip(
            self._scenarios, self._probabilities, strict=True
        ):
            result[scenario.journey] = result.get(scenario.journey, 0.0) + float(
                probability
            )
        return result

    def select(self, u: float) -> int:
        """Map a variate in [0, total_weight) to a scenario index."""
        index = int(np.searchsorted(self._cumulative, u, side="right"))
        return min(index, self._last_selectable)

    def stream(self) -> WeightedJourneyStream:
        """Start a new, independent stream of draws."""
        if self._seed is not None:
            generator = rng.from_seed(self._seed)
        else:
            generator = rng.derive(f"{_RNG_IDENTIFIER}.{next(self._stream_counter)}")
        return WeightedJourneyStream(self, generator)

    def __iter__(self) -> WeightedJourneyStream:
        return self.stream()

    def take(self, count: int) -> list[JourneyProtocol]:
        """Materialize ``count`` draws from a fresh stream."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return list(itertools.islice(self.stream(), count))

    def _draw(self, generator: rng.RandomGenerator) -> WeightedDraw:
        index = self.select(generator.random() * self._total_weight)
        return WeightedDraw(index, self._journeys[index], self._scenarios[index])


class WeightedJourneyStream(Iterator[JourneyProtocol]):
    """Unbounded iterator of weighted draws. Single consumer only."""

    def __init__(
        self, scheduler: WeightedScheduler, generator: rng.RandomGenerator
    ) -> None:
        self._scheduler = scheduler
        self._generator = generator
        self.draws: int = 0

    def next_draw(self) -> WeightedDraw:
        """Draw the next selection, including its scenario."""
        draw = self._scheduler._draw(self._generator)
        self.draws += 1
        self._scheduler.trace(
            lambda: f"Draw {self.draws}: {draw.journey.display_name} (scenario #{draw.index})"
        )
        return draw

    def __next__(self) -> JourneyProtocol:
        return self.next_draw().journey

    def __iter__(self) -> WeightedJourneyStream:
        return self
