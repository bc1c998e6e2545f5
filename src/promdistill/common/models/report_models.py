# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import Field

from promdistill.common.enums import PrometheusMetricType
from promdistill.common.models.base_models import DistillBaseModel


class FamilyReport(DistillBaseModel):
    """Report row summarizing one distilled metric family."""

    name: str = Field(description="Metric family name")
    type: PrometheusMetricType = Field(description="Declared type of the family")
    metrics: int = Field(ge=0, description="Number of label sets in the family")
    observations: int = Field(
        ge=0, description="Sum of count() over the metrics of the family"
    )
    total: float = Field(description="Sum of sum() over the metrics of the family")
    supported: bool = Field(
        description="False when the family type distills to unsupported metrics"
    )
