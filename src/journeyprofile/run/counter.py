# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Journey counting for a single run.

All methods are non-async, so updates are atomic under asyncio.
"""


class JourneyCounter:
    """Tracks journeys started, completed and failed during a run."""

    def __init__(self) -> None:
        self._started: int = 0
        self._completed: int = 0
        self._failed: int = 0

    @property
    def started(self) -> int:
        return self._started

    @property
    def completed(self) -> int:
        """Journeys whose executor returned normally."""
        return self._completed

    @property
    def failed(self) -> int:
        """Journeys whose executor raised."""
        return self._failed

    @property
    def in_flight(self) -> int:
        return self._started - self._completed - self._failed

    def increment_started(self) -> int:
        """Record a journey start. Returns its 1-based sequence number."""
        self._started += 1
        return self._started

    def increment_completed(self) -> None:
        self._completed += 1

    def increment_failed(self) -> None:
        self._failed += 1

    def __repr__(self) -> str:
        return (
            f"JourneyCounter(started={self._started}, completed={self._completed}, "
            f"failed={self._failed})"
        )
