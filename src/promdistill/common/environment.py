# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for promdistill.

Each settings group reads its own `PROMDISTILL_<GROUP>_` prefixed environment
variables. The groups are exposed through the `Environment` singleton::

    from promdistill.common.environment import Environment

    if Environment.DISTILL.LOG_UNSUPPORTED:
        ...
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Environment"]


class _DistillSettings(BaseSettings):
    """Settings for the metric distiller."""

    model_config = SettingsConfigDict(
        env_prefix="PROMDISTILL_DISTILL_",
        case_sensitive=False,
    )

    LOG_UNSUPPORTED: bool = Field(
        default=True,
        description="Log an error for every metric instance whose family type cannot be distilled",
    )


class _LoggingSettings(BaseSettings):
    """Settings for console logging."""

    model_config = SettingsConfigDict(
        env_prefix="PROMDISTILL_LOGGING_",
        case_sensitive=False,
    )

    LEVEL: str = Field(
        default="INFO",
        description="Default log level used by the CLI",
    )
    MAX_CONSOLE_MESSAGE_LENGTH: int = Field(
        default=2000,
        ge=1,
        description="Messages longer than this are truncated on the console",
    )
    DEFAULT_CONSOLE_WIDTH: int = Field(
        default=120,
        ge=40,
        description="Console width used when the handler has no console attached",
    )


class _ReportSettings(BaseSettings):
    """Settings for the family report."""

    model_config = SettingsConfigDict(
        env_prefix="PROMDISTILL_REPORT_",
        case_sensitive=False,
    )

    FLOAT_PRECISION: int = Field(
        default=4,
        ge=0,
        le=17,
        description="Decimal places used to display sums in the report table",
    )
    CONSOLE_WIDTH: int = Field(
        default=120,
        ge=40,
        description="Width of the console the report table is printed to",
    )


class _Environment(BaseSettings):
    """Root settings object grouping all promdistill settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROMDISTILL_",
        case_sensitive=False,
    )

    DISTILL: _DistillSettings = Field(default_factory=_DistillSettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)
    REPORT: _ReportSettings = Field(default_factory=_ReportSettings)


Environment = _Environment()
