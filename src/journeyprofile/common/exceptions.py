# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class JourneyProfileError(Exception):
    """Base class for all exceptions raised by journeyprofile."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class ConfigurationError(JourneyProfileError):
    """Exception raised when a profile document cannot be loaded into a configuration."""


class FormatError(JourneyProfileError, ValueError):
    """Exception raised when a timestamp string is malformed."""


class InvalidStateError(JourneyProfileError):
    """Exception raised when something is in an invalid state."""


class ProfileValidationError(JourneyProfileError, ValueError):
    """Exception raised when a profile configuration is rejected against a journey pool."""


class UnknownJourneyError(ProfileValidationError):
    """Exception raised when a scenario references a journey missing from the pool."""

    def __init__(self, journey: str, scenario_index: int) -> None:
        self.journey = journey
        self.scenario_index = scenario_index
        super().__init__(
            f"Journey {journey} not found in the available journeys "
            f"(scenario #{scenario_index})"
        )


class InconsistentSchedulingModeError(ProfileValidationError):
    """Exception raised when scenarios mix timestamps and weights, or a scheduled
    profile contains a scenario without a timestamp."""


class InvalidTimestampError(ProfileValidationError):
    """Exception raised when a scenario's timestamp cannot be decoded."""

    def __init__(
        self, journey: str, scenario_index: int, value: str, cause: FormatError
    ) -> None:
        self.journey = journey
        self.scenario_index = scenario_index
        self.value = value
        super().__init__(
            f"Scenario #{scenario_index} ({journey}) has an invalid 'at' timestamp "
            f"{value!r}: {cause}"
        )


class InvalidWeightError(ProfileValidationError):
    """Exception raised when scenario weights cannot form a probability distribution."""


class ProfileMultiError(ProfileValidationError):
    """Exception raised when validation collects more than one violation."""

    def __init__(self, message: str | None, exceptions: list[Exception]) -> None:
        self.exceptions = exceptions

        err_strings = [str(e) for e in exceptions]
        if message:
            super().__init__(f"{message}: {','.join(err_strings)}")
        else:
            super().__init__(",".join(err_strings))
