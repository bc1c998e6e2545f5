# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promdistill.common.distill_logger import (
    _CRITICAL,
    _DEBUG,
    _ERROR,
    _INFO,
    _TRACE,
    _WARNING,
    DistillLogger,
    MessageT,
)


class DistillLoggerMixin:
    """Mixin that gives a class its own `DistillLogger` and logging shortcuts.

    The logger is named after the class unless `logger_name` is given.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.logger = DistillLogger(logger_name or self.__class__.__name__)

    @property
    def is_trace_enabled(self) -> bool:
        return self.logger.is_trace_enabled

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.is_debug_enabled

    def trace(self, message: MessageT, *args, **kwargs) -> None:
        self.logger._log(_TRACE, message, args, kwargs)

    def debug(self, message: MessageT, *args, **kwargs) -> None:
        self.logger._log(_DEBUG, message, args, kwargs)

    def info(self, message: MessageT, *args, **kwargs) -> None:
        self.logger._log(_INFO, message, args, kwargs)

    def warning(self, message: MessageT, *args, **kwargs) -> None:
        self.logger._log(_WARNING, message, args, kwargs)

    def error(self, message: MessageT, *args, **kwargs) -> None:
        self.logger._log(_ERROR, message, args, kwargs)

    def exception(self, message: MessageT, *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.logger._log(_ERROR, message, args, kwargs)

    def critical(self, message: MessageT, *args, **kwargs) -> None:
        self.logger._log(_CRITICAL, message, args, kwargs)
