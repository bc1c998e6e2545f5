# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

from typing_extensions import Self

from promdistill.common.enums.base_enums import CaseInsensitiveStrEnum


class PrometheusMetricType(CaseInsensitiveStrEnum):
    """Prometheus metric types as reported by prometheus_client metric families.

    See: https://prometheus.io/docs/concepts/metric_types/
    """

    COUNTER = "counter"
    """Counter: A cumulative metric that represents a single monotonically increasing counter."""

    GAUGE = "gauge"
    """Gauge: A metric that represents a single numerical value that can arbitrarily go up and down."""

    HISTOGRAM = "histogram"
    """Histogram: Samples observations and counts them in configurable buckets."""

    GAUGE_HISTOGRAM = "gaugehistogram"
    """Gauge histogram: A histogram whose buckets can go down (OpenMetrics)."""

    SUMMARY = "summary"
    """Summary: Similar to histogram, samples observations and provides quantiles."""

    INFO = "info"
    """Info: A gauge metric that contains various metadata via labels."""

    STATESET = "stateset"
    """StateSet: A series of related boolean values (OpenMetrics)."""

    UNKNOWN = "unknown"
    """Unknown: Untyped metric (prometheus_client uses 'unknown' instead of 'untyped')."""

    @classmethod
    def _missing_(cls, value: Any) -> Self:
        """Fall back to a case-insensitive match, then to UNKNOWN.

        'untyped' from the text exposition format lands on UNKNOWN, as does any
        type string that prometheus_client does not define.
        """
        return super()._missing_(value) or cls.UNKNOWN
