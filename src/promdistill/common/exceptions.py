# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class PromDistillError(Exception):
    """Base class for all exceptions raised by promdistill."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class MetricsParseError(PromDistillError):
    """Exception raised when metrics exposition text cannot be parsed."""
