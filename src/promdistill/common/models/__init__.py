# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promdistill.common.models.base_models import DistillBaseModel
from promdistill.common.models.distilled_models import (
    DISTILLED_METRIC_TYPES,
    BaseMetric,
    CounterMetric,
    GaugeMetric,
    HistogramMetric,
    Metric,
    MetricFamily,
    MetricLabel,
    UnsupportedMetric,
)
from promdistill.common.models.report_models import FamilyReport

__all__ = [
    "DISTILLED_METRIC_TYPES",
    "BaseMetric",
    "CounterMetric",
    "DistillBaseModel",
    "FamilyReport",
    "GaugeMetric",
    "HistogramMetric",
    "Metric",
    "MetricFamily",
    "MetricLabel",
    "UnsupportedMetric",
]
