# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for journeyprofile."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from cyclopts import App

from journeyprofile.cli_utils import exit_on_error

if TYPE_CHECKING:
    from rich.table import Table

    from journeyprofile.profile import JourneyPool, ScheduledPlan, WeightedScheduler

app = App(name="journeyprofile", help="Plan journey runs from a test profile")


def _build_pool(profile_path: Path, journeys: list[str] | None) -> JourneyPool:
    from journeyprofile.profile import JourneyPool, load_configuration

    if journeys:
        return JourneyPool.from_names(journeys)
    # Without an explicit pool, assume every referenced journey exists.
    return JourneyPool.from_names(load_configuration(profile_path).journey_names)


def _scheduled_table(plan: ScheduledPlan) -> Table:
    from rich.table import Table

    table = Table(title="Scheduled Plan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("At", justify="right", style="cyan", no_wrap=True)
    table.add_column("Journey", style="green")
    table.add_column("Extras", style="dim")
    for index, entry in enumerate(plan.entries):
        extras = ", ".join(f"{k}={v}" for k, v in entry.scenario.extras.items())
        table.add_row(str(index + 1), entry.timestamp, entry.display_name, extras)
    if plan.policy is not None:
        table.caption = (
            f"if_early={plan.policy.scheduled.if_early}, "
            f"if_late={plan.policy.scheduled.if_late}"
        )
    return table


def _weighted_tables(scheduler: WeightedScheduler, count: int) -> list[Table]:
    from collections import Counter

    from rich.table import Table

    probabilities = Table(title="Selection Probabilities")
    probabilities.add_column("Journey", style="green")
    probabilities.add_column("Probability", justify="right", style="cyan")
    for name, probability in scheduler.probabilities.items():
        probabilities.add_row(name, f"{probability:.2%}")

    tables = [probabilities]
    if count > 0:
        drawn = Counter(journey.display_name for journey in scheduler.take(count))
        sample = Table(title=f"Sample of {count} Draws")
        sample.add_column("Journey", style="green")
        sample.add_column("Draws", justify="right", style="cyan")
        for name, draws in drawn.most_common():
            sample.add_row(name, f"{draws:,}")
        tables.append(sample)
    return tables


@app.command(name="plan")
def plan(
    profile: Path,
    /,
    *,
    journeys: list[str] | None = None,
    count: int = 10,
    seed: int | None = None,
    log_level: str | None = None,
) -> None:
    """Validate a profile and print its plan.

    Scheduled profiles print journeys in execution order. Weighted profiles print
    each journey's selection probability and a sample of draws.

    Args:
        profile: Path to a JSON or YAML profile document.
        journeys: Display names of the available journeys. Defaults to every journey
            the profile references.
        count: Number of sample draws for weighted profiles.
        seed: Seed for the sample draws. Defaults to JOURNEYPROFILE_SCHEDULING_RANDOM_SEED.
        log_level: Log level (TRACE, DEBUG, INFO, ...).
    """
    with exit_on_error(title="Error Planning Profile"):
        from rich.console import Console

        from journeyprofile.common import random_generator as rng
        from journeyprofile.common.environment import Environment
        from journeyprofile.common.logging import setup_rich_logging
        from journeyprofile.profile import Profile, ScheduledPlan

        setup_rich_logging(log_level)
        if not rng.is_initialized():
            rng.init(seed if seed is not None else Environment.SCHEDULING.RANDOM_SEED)

        result = Profile.from_file(profile).apply(_build_pool(profile, journeys))

        console = Console()
        if isinstance(result, ScheduledPlan):
            console.print(_scheduled_table(result))
        else:
            for table in _weighted_tables(result, count):
                console.print(table)


@app.command(name="validate")
def validate(
    profile: Path,
    /,
    *,
    journeys: list[str] | None = None,
    log_level: str | None = None,
) -> None:
    """Check a profile against the available journeys, reporting every problem found.

    Args:
        profile: Path to a JSON or YAML profile document.
        journeys: Display names of the available journeys. Defaults to every journey
            the profile references.
        log_level: Log level (TRACE, DEBUG, INFO, ...).
    """
    with exit_on_error(title="Invalid Profile"):
        from rich.console import Console

        from journeyprofile.common.logging import setup_rich_logging
        from journeyprofile.profile import ScenarioValidator, load_configuration

        setup_rich_logging(log_level)
        configuration = load_configuration(profile)
        mode = ScenarioValidator(
            configuration, _build_pool(profile, journeys)
        ).validate_all()
        Console().print(
            f"[green]{profile}[/green] is a valid {mode} profile with "
            f"{len(configuration.scenarios)} scenario(s)",
            soft_wrap=True,
        )
