# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promdistill.common.enums.base_enums import CaseInsensitiveStrEnum
from promdistill.common.enums.prometheus_enums import PrometheusMetricType
from promdistill.common.enums.report_enums import OutputFormat

__all__ = [
    "CaseInsensitiveStrEnum",
    "OutputFormat",
    "PrometheusMetricType",
]
