# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Distill Prometheus metric snapshots into simplified, comparable models."""

from promdistill.common.enums import PrometheusMetricType
from promdistill.common.exceptions import MetricsParseError, PromDistillError
from promdistill.common.models import (
    CounterMetric,
    GaugeMetric,
    HistogramMetric,
    Metric,
    MetricFamily,
    MetricLabel,
    UnsupportedMetric,
)
from promdistill.distiller import MetricDistiller, distill, distill_text

__all__ = [
    "CounterMetric",
    "GaugeMetric",
    "HistogramMetric",
    "Metric",
    "MetricDistiller",
    "MetricFamily",
    "MetricLabel",
    "MetricsParseError",
    "PromDistillError",
    "PrometheusMetricType",
    "UnsupportedMetric",
    "distill",
    "distill_text",
]
