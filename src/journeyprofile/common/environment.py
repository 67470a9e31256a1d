# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings.

Each concern gets its own settings class with a dedicated prefix, and all of
them hang off the `Environment` namespace::

    JOURNEYPROFILE_LOGGING_LEVEL=DEBUG
    JOURNEYPROFILE_SCHEDULING_RANDOM_SEED=1234
    JOURNEYPROFILE_SCHEDULING_ON_TIME_TOLERANCE_SEC=0.5

Values are read once at import time.
"""

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="JOURNEYPROFILE_LOGGING_",
        case_sensitive=False,
        extra="ignore",
    )

    LEVEL: Annotated[
        str,
        Field(description="Root log level used by the CLI (TRACE, DEBUG, INFO, ...)."),
    ] = "INFO"

    RICH_TRACEBACKS: Annotated[
        bool,
        Field(description="Render exception tracebacks with Rich."),
    ] = True


class _SchedulingSettings(BaseSettings):
    """Scheduling settings."""

    model_config = SettingsConfigDict(
        env_prefix="JOURNEYPROFILE_SCHEDULING_",
        case_sensitive=False,
        extra="ignore",
    )

    RANDOM_SEED: Annotated[
        int | None,
        Field(
            description="Global seed for weighted selection. Unset means non-reproducible draws."
        ),
    ] = None

    ON_TIME_TOLERANCE_SEC: Annotated[
        float,
        Field(
            ge=0.0,
            description="Elapsed run time up to this many seconds past a journey's "
            "timestamp still counts as on time rather than late.",
        ),
    ] = 1.0


class Environment:
    """Namespace for all environment-driven settings."""

    LOGGING = _LoggingSettings()
    SCHEDULING = _SchedulingSettings()
