# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

from journeyprofile.common.profile_logger import _TRACE, MessageT, ProfileLogger


class ProfileLoggerMixin:
    """Mixin that gives a class its own ProfileLogger and level shortcuts.

    The logger is named after the class unless `logger_name` is given.
    """

    def __init__(self, logger_name: str | None = None, **kwargs: Any) -> None:
        self.logger = ProfileLogger(logger_name or self.__class__.__name__)
        super().__init__(**kwargs)

    def is_trace_enabled(self) -> bool:
        return self.logger.is_enabled_for(_TRACE)

    def trace(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.logger.trace(message, *args, **kwargs)

    def debug(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.logger.info(message, *args, **kwargs)

    def warning(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.logger.warning(message, *args, **kwargs)

    def error(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: MessageT, *args: Any, **kwargs: Any) -> None:
        self.logger.exception(message, *args, **kwargs)
