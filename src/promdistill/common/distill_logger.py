# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper with a TRACE level and lazily evaluated messages.

Messages may be passed as a callable. The callable is only invoked when the
level is enabled, which keeps expensive f-strings out of hot loops::

    _logger = DistillLogger(__name__)
    _logger.debug(lambda: f"Grouped {len(groups)} label sets for {family.name}")
"""

import logging
from collections.abc import Callable
from typing import Any

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG
_INFO = logging.INFO
_WARNING = logging.WARNING
_ERROR = logging.ERROR
_CRITICAL = logging.CRITICAL

logging.addLevelName(_TRACE, "TRACE")

MessageT = str | Callable[..., str]


class DistillLogger:
    """Thin wrapper around `logging.Logger` that supports lazy messages and TRACE."""

    def __init__(self, logger_name: str | None = None) -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def logger_name(self) -> str:
        return self._logger.name

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(_TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(_DEBUG)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(
        self, level: int, message: MessageT, args: tuple, kwargs: dict[str, Any]
    ) -> None:
        # Must be called directly from the public logging method so that
        # stacklevel points at the caller of that method.
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message(*args)
            args = ()
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def log(self, level: int, message: MessageT, *args, **kwargs) -> None:
        self._log(level, message, args, kwargs)

    def trace(self, message: MessageT, *args, **kwargs) -> None:
        self._log(_TRACE, message, args, kwargs)

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self._log(_DEBUG, message, args, kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self._log(_INFO, message, args, kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self._log(_WARNING, message, args, kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self._log(_ERROR, message, args, kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(_ERROR, message, args, kwargs)

    def critical(self, message: MessageT, *args, **kwargs) -> None:
        self._log(_CRITICAL, message, args, kwargs)
