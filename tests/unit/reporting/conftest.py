# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for reporting tests."""

import pytest

from promdistill.common.enums import PrometheusMetricType
from promdistill.common.models import (
    CounterMetric,
    HistogramMetric,
    MetricFamily,
    UnsupportedMetric,
)


@pytest.fixture
def distilled_families() -> list[MetricFamily]:
    """A counter, a histogram and an unsupported summary family."""
    return [
        MetricFamily(
            name="requests_total",
            type=PrometheusMetricType.COUNTER,
            description="Requests served",
            metrics=[
                CounterMetric(labels=["method|GET"], value=5.0),
                CounterMetric(labels=["method|POST"], value=None),
            ],
        ),
        MetricFamily(
            name="latency_seconds",
            type=PrometheusMetricType.HISTOGRAM,
            metrics=[
                HistogramMetric(labels=["route|/"], sample_count=4, sample_sum=1.25),
            ],
        ),
        MetricFamily(
            name="rpc_seconds",
            type=PrometheusMetricType.SUMMARY,
            metrics=[UnsupportedMetric(metric_type=PrometheusMetricType.SUMMARY)],
        ),
    ]
