# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promdistill.common.enums.base_enums import CaseInsensitiveStrEnum


class OutputFormat(CaseInsensitiveStrEnum):
    """Output formats for the report command."""

    TABLE = "table"
    """Rich table with one row per metric family."""

    JSON = "json"
    """The distilled metric families as a JSON document."""
