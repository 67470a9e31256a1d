# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Validation of a profile configuration against the available journeys.

A configuration is accepted only if every scenario references a journey in the
pool and the scenarios agree on one scheduling mode: all timestamped (scheduled)
or all weighted. Nothing is planned for a configuration that fails, so callers
never see a partial plan.
"""

import math

from journeyprofile.common.enums import SchedulingMode
from journeyprofile.common.exceptions import (
    FormatError,
    InconsistentSchedulingModeError,
    InvalidTimestampError,
    InvalidWeightError,
    ProfileMultiError,
    ProfileValidationError,
    UnknownJourneyError,
)
from journeyprofile.common.mixins import ProfileLoggerMixin
from journeyprofile.common.models import Configuration, Scenario
from journeyprofile.profile.duration_codec import parse_timestamp
from journeyprofile.profile.journey_pool import JourneyPool


class ScenarioValidator(ProfileLoggerMixin):
    """Checks a Configuration against a JourneyPool. Never mutates either.

    Violations are reported in declaration order: per-scenario problems first,
    scenario by scenario, then problems that concern the profile as a whole.
    """

    def __init__(self, configuration: Configuration, pool: JourneyPool) -> None:
        super().__init__()
        self._configuration = configuration
        self._pool = pool

    def find_violations(self) -> list[ProfileValidationError]:
        """Return every violation found, without raising."""
        scenarios = self._configuration.scenarios
        if not scenarios:
            return [
                InconsistentSchedulingModeError(
                    "Profile must declare at least one scenario"
                )
            ]

        violations: list[ProfileValidationError] = []
        for index, scenario in enumerate(scenarios):
            if scenario.journey not in self._pool:
                violations.append(UnknownJourneyError(scenario.journey, index))
            violations.extend(self._check_schedule_fields(index, scenario))

        violations.extend(self._check_profile_mode())
        return violations

    def validate(self) -> SchedulingMode:
        """Validate the configuration, failing fast on the first violation.

        Returns:
            The scheduling mode implied by the scenarios.

        Raises:
            ProfileValidationError: The first violation found.
        """
        violations = self.find_violations()
        if violations:
            self.debug(
                lambda: f"Profile rejected with {len(violations)} violation(s), "
                f"first: {violations[0]}"
            )
            raise violations[0]
        return self._accepted_mode()

    def validate_all(self) -> SchedulingMode:
        """Validate the configuration, reporting every violation at once.

        Raises:
            ProfileValidationError: The only violation, if there is exactly one.
            ProfileMultiError: All violations, if there are several.
        """
        violations = self.find_violations()
        if len(violations) == 1:
            raise violations[0]
        if violations:
            raise ProfileMultiError("Invalid profile", violations)
        return self._accepted_mode()

    def _accepted_mode(self) -> SchedulingMode:
        mode = self._configuration.scheduling_mode
        if mode is None:
            raise InconsistentSchedulingModeError("Unable to resolve scheduling mode")
        self.debug(
            lambda: f"Profile accepted: {len(self._configuration.scenarios)} "
            f"{mode} scenario(s)"
        )
        return mode

    def _check_schedule_fields(
        self, index: int, scenario: Scenario
    ) -> list[ProfileValidationError]:
        label = f"Scenario #{index} ({scenario.journey})"
        violations: list[ProfileValidationError] = []

        if scenario.has_timestamp and scenario.has_weight:
            violations.append(
                InconsistentSchedulingModeError(
                    f"{label} must have either a timestamp or a weight, not both"
                )
            )
        elif not scenario.has_timestamp and self._configuration.is_scheduled:
            violations.append(
                InconsistentSchedulingModeError(
                    f"{label} has no timestamp: all scenarios of scheduled profiles "
                    "must have timestamps"
                )
            )
        elif not scenario.has_timestamp and not scenario.has_weight:
            violations.append(
                InconsistentSchedulingModeError(
                    f"{label} must have either a timestamp or a weight"
                )
            )

        if scenario.has_timestamp:
            try:
                parse_timestamp(scenario.at)
            except FormatError as e:
                violations.append(
                    InvalidTimestampError(scenario.journey, index, scenario.at, e)
                )

        if scenario.has_weight and not (
            math.isfinite(scenario.weight) and scenario.weight >= 0
        ):
            violations.append(
                InvalidWeightError(
                    f"{label} has weight {scenario.weight}; weights must be finite "
                    "and non-negative"
                )
            )
        return violations

    def _check_profile_mode(self) -> list[ProfileValidationError]:
        scenarios = self._configuration.scenarios
        timestamped = sum(1 for s in scenarios if s.has_timestamp)
        weighted = sum(1 for s in scenarios if s.has_weight)

        # Scheduled profiles already flag each scenario lacking a timestamp.
        if not self._configuration.is_scheduled and timestamped and weighted:
            return [
                InconsistentSchedulingModeError(
                    "Profile mixes timestamped and weighted scenarios: scenarios must "
                    "either all have timestamps or all have weights"
                )
            ]

        if self._configuration.scheduling_mode != SchedulingMode.WEIGHTED:
            return []

        weights = [s.weight for s in scenarios]
        # Individually invalid weights are already flagged per scenario.
        if not all(math.isfinite(w) and w >= 0 for w in weights):
            return []
        try:
            total = math.fsum(weights)
        except OverflowError:
            total = math.inf
        if not math.isfinite(total):
            return [InvalidWeightError("Weighted profile total weight is not finite")]
        if total <= 0:
            return [
                InvalidWeightError(
                    "Weighted profile has a total weight of zero; at least one "
                    "scenario must have a positive weight"
                )
            ]
        return []


def validate_configuration(
    configuration: Configuration, pool: JourneyPool
) -> SchedulingMode:
    """Validate a configuration against a pool, failing fast. See ScenarioValidator.validate."""
    return ScenarioValidator(configuration, pool).validate()
