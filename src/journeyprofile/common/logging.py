# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console logging for command line use.

Library code only creates loggers; handlers are installed by the entry point::

    from journeyprofile.common.logging import setup_rich_logging

    setup_rich_logging("DEBUG")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from journeyprofile.common.environment import Environment
from journeyprofile.common.profile_logger import _TRACE, ProfileLogger

_logger = ProfileLogger(__name__)

_LEVEL_NAMES = {"TRACE": _TRACE}


def resolve_log_level(level: str | int) -> int:
    """Translate a level name (including TRACE) or number to a logging level.

    Raises:
        ValueError: If the name is not a known level.
    """
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name in _LEVEL_NAMES:
        return _LEVEL_NAMES[name]
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_rich_logging(
    level: str | int | None = None, console: Console | None = None
) -> RichHandler:
    """Install a RichHandler on the root logger, replacing any existing handlers.

    Args:
        level: Log level name or number. Defaults to Environment.LOGGING.LEVEL.
        console: Console to render to. Defaults to stderr.

    Returns:
        The installed handler.
    """
    resolved = resolve_log_level(level if level is not None else Environment.LOGGING.LEVEL)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=Environment.LOGGING.RICH_TRACEBACKS,
        show_path=resolved <= logging.DEBUG,
        log_time_format="%H:%M:%S.%f",
    )
    handler.setLevel(resolved)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved)

    _logger.debug(lambda: f"Rich logging configured at {logging.getLevelName(resolved)}")
    return handler
