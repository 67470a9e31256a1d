# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""The set of executable journeys a profile can reference.

The harness owns the journeys. The scheduler only needs to look them up by
their stable display name, so anything exposing ``display_name`` is accepted.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from journeyprofile.common.profile_logger import ProfileLogger

_logger = ProfileLogger(__name__)


@runtime_checkable
class JourneyProtocol(Protocol):
    """An executable test unit identified by a stable display name."""

    @property
    def display_name(self) -> str: ...


@dataclass(frozen=True)
class Journey:
    """Minimal journey: a display name plus an opaque payload for the executor."""

    display_name: str
    payload: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.display_name


class JourneyPool(Mapping[str, JourneyProtocol]):
    """Read-only lookup of journeys by display name.

    Declaration order is preserved. When two journeys share a display name the
    first one wins and the duplicate is logged, since a profile can only ever
    address one of them.
    """

    def __init__(self, journeys: Iterable[JourneyProtocol] = ()) -> None:
        self._journeys: dict[str, JourneyProtocol] = {}
        for journey in journeys:
            if not isinstance(journey, JourneyProtocol):
                raise TypeError(
                    f"Journey pool entries must expose a display_name, got {type(journey).__name__}"
                )
            name = journey.display_name
            if name in self._journeys:
                _logger.warning(
                    f"Duplicate journey display name {name!r} in pool, keeping the first"
                )
                continue
            self._journeys[name] = journey

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "JourneyPool":
        """Build a pool of plain Journey objects from display names."""
        return cls(Journey(name) for name in names)

    @classmethod
    def coerce(cls, pool: "JourneyPool | Iterable[JourneyProtocol]") -> "JourneyPool":
        """Return the pool unchanged, or wrap an iterable of journeys."""
        if isinstance(pool, JourneyPool):
            return pool
        return cls(pool)

    def __getitem__(self, name: str) -> JourneyProtocol:
        return self._journeys[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._journeys)

    def __len__(self) -> int:
        return len(self._journeys)

    def __repr__(self) -> str:
        return f"JourneyPool({list(self._journeys)})"
