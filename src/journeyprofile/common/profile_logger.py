# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger with lazy message evaluation.

Messages may be passed either as strings or as zero-argument callables. A
callable is only invoked when the level is enabled, which keeps f-string
formatting off the hot path of per-draw logging::

    _logger = ProfileLogger(__name__)
    _logger.trace(lambda: f"Drew {journey.display_name} (u={u:.4f})")
"""

import logging
from collections.abc import Callable
from typing import Any

from journeyprofile.common.constants import TRACE_LEVEL

_TRACE = TRACE_LEVEL
_DEBUG = logging.DEBUG

logging.addLevelName(_TRACE, "TRACE")

MessageT = str | Callable[[], str]


class ProfileLogger:
    """Wrapper around a stdlib logger that accepts lazily evaluated messages."""

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        """The underlying stdlib logger."""
        return self._logger

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def log(self, level: int, message: MessageT, *args: Any, **kwargs: Any) -> None:
        """Log a message at the given level, evaluating it only if enabled."""
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        self._logger.log(level, message, *args, **kwargs)

    def trace(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_TRACE, message, *args, **kwargs)

    def debug(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(_DEBUG, message, *args, **kwargs)

    def info(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, message, *args, **kwargs)
