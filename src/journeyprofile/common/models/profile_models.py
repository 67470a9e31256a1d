# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Declarative profile configuration.

A profile is a `Configuration` holding an ordered list of `Scenario` entries and an
optional `Scheduled` policy. The models only describe structure; consistency between
scenarios and against the available journeys is checked afterwards by
`journeyprofile.profile.validator.ScenarioValidator`.
"""

from pydantic import Field

from journeyprofile.common.enums import IfEarly, IfLate, SchedulingMode
from journeyprofile.common.models.base_models import ProfileBaseModel


class Scenario(ProfileBaseModel):
    """One profile entry binding a journey to a timestamp or a weight."""

    journey: str = Field(
        ...,
        description="Display name of the journey to run, matched against the journey pool.",
    )
    at: str | None = Field(
        default=None,
        description="Offset from run start in HH:MM:SS form. Used by scheduled profiles.",
    )
    weight: float | None = Field(
        default=None,
        description="Relative selection weight. Used by weighted profiles; "
        "only meaningful relative to the other weights in the profile.",
    )
    extras: dict[str, str] = Field(
        default_factory=dict,
        description="Free-form arguments passed along to the journey when it runs.",
    )

    @property
    def has_timestamp(self) -> bool:
        return self.at is not None

    @property
    def has_weight(self) -> bool:
        return self.weight is not None


class Scheduled(ProfileBaseModel):
    """Boundary policy for scheduled profiles."""

    if_early: IfEarly = Field(
        default=IfEarly.SLEEP,
        description="Action when a journey is reached before its timestamp.",
    )
    if_late: IfLate = Field(
        default=IfLate.END,
        description="Action when a journey's timestamp has already passed.",
    )


class Configuration(ProfileBaseModel):
    """Root of a profile: the scenarios to run and how to schedule them."""

    scheduled: Scheduled | None = Field(
        default=None,
        description="Boundary policy. Present only for scheduled profiles.",
    )
    scenarios: tuple[Scenario, ...] = Field(
        default=(),
        description="Scenarios in declaration order.",
    )

    @property
    def is_scheduled(self) -> bool:
        """True if the profile declares a scheduled policy."""
        return self.scheduled is not None

    @property
    def scheduling_mode(self) -> SchedulingMode | None:
        """The mode implied by the populated scenario fields.

        None when the profile is empty or its scenarios are not uniformly
        timestamped or uniformly weighted.
        """
        if not self.scenarios:
            return None
        if all(s.has_timestamp and not s.has_weight for s in self.scenarios):
            return SchedulingMode.SCHEDULED
        if all(s.has_weight and not s.has_timestamp for s in self.scenarios):
            return SchedulingMode.WEIGHTED
        return None

    @property
    def journey_names(self) -> list[str]:
        """Journey names referenced by the scenarios, in declaration order."""
        return [scenario.journey for scenario in self.scenarios]
