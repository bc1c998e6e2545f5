# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console logging for the promdistill CLI.

Log lines are rendered as::

    12:26:52.092 ERROR    Prometheus metric type not supported: summary (MetricDistiller:141)
"""

import logging
from datetime import datetime

from rich.console import Console, ConsoleRenderable, Group
from rich.logging import RichHandler
from rich.text import Text
from rich.traceback import Traceback

from promdistill.common.distill_logger import DistillLogger
from promdistill.common.environment import Environment

_logger = DistillLogger(__name__)


class CustomRichHandler(RichHandler):
    """Rich logging handler with a compact single-line format.

    Each record renders as a millisecond timestamp, a colored level name, the
    message, and a dim `(logger_name:lineno)` suffix. Messages longer than
    `Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH` are truncated.
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")
        message = record.getMessage()[: Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH]

        formatted_log = Text.assemble(
            Text(f"{timestamp} ", style="log.time"),
            Text(f"{record.levelname:<8} ", style=level_style),
            Text(message),
            Text(f" ({record.name}:{record.lineno})", style="dim italic"),
        )
        return Group(formatted_log, traceback) if traceback else formatted_log

    def emit(self, record: logging.LogRecord) -> None:
        traceback = None
        if (
            self.rich_tracebacks
            and record.exc_info
            and record.exc_info != (None, None, None)
        ):
            traceback = Traceback.from_exception(*record.exc_info)

        log_renderable = self.render(
            record=record, traceback=traceback, message_renderable=Text("")
        )
        self.console.print(log_renderable)


def setup_rich_logging(level: str | int | None = None) -> CustomRichHandler:
    """Install a single CustomRichHandler on the root logger.

    Any CustomRichHandler installed by an earlier call is replaced, so calling
    this more than once does not duplicate output.

    Args:
        level: Log level name or number. Defaults to Environment.LOGGING.LEVEL.

    Returns:
        The installed handler.
    """
    if level is None:
        level = Environment.LOGGING.LEVEL
    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing_handler in root_logger.handlers[:]:
        if isinstance(existing_handler, CustomRichHandler):
            root_logger.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=Console(stderr=True, width=Environment.LOGGING.DEFAULT_CONSOLE_WIDTH),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    _logger.debug(lambda: f"Logging initialized with level: {level}")
    return rich_handler
