# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for distiller tests."""

from collections.abc import Callable

import pytest
from prometheus_client.metrics_core import Metric


@pytest.fixture
def make_family() -> Callable[..., Metric]:
    """Factory building a raw prometheus_client family from (name, labels, value) samples."""

    def _make_family(
        name: str,
        typ: str,
        samples: list[tuple[str, dict[str, str], float]],
        documentation: str = "",
    ) -> Metric:
        family = Metric(name, documentation, typ)
        for sample_name, labels, value in samples:
            family.add_sample(sample_name, labels, value)
        return family

    return _make_family


@pytest.fixture
def sample_counter_metrics():
    """Sample Prometheus counter metrics."""
    return """# HELP http_requests_total Total HTTP requests
# TYPE http_requests_total counter
http_requests_total{method="GET",status="200"} 1547.0
http_requests_total{method="POST",status="200"} 892.0
"""


@pytest.fixture
def sample_gauge_metrics():
    """Sample Prometheus gauge metrics."""
    return """# HELP memory_usage_bytes Current memory usage
# TYPE memory_usage_bytes gauge
memory_usage_bytes{type="heap"} 1073741824
memory_usage_bytes{type="stack"} 0
"""


@pytest.fixture
def sample_histogram_metrics():
    """Sample Prometheus histogram metrics."""
    return """# HELP http_request_duration_seconds HTTP request duration
# TYPE http_request_duration_seconds histogram
http_request_duration_seconds_bucket{method="GET",le="0.1"} 100
http_request_duration_seconds_bucket{method="GET",le="0.5"} 450
http_request_duration_seconds_bucket{method="GET",le="+Inf"} 500
http_request_duration_seconds_sum{method="GET"} 125.5
http_request_duration_seconds_count{method="GET"} 500
"""


@pytest.fixture
def sample_summary_metrics():
    """Sample Prometheus summary metrics."""
    return """# HELP rpc_duration_seconds RPC duration summary
# TYPE rpc_duration_seconds summary
rpc_duration_seconds{service="auth",quantile="0.5"} 0.1
rpc_duration_seconds{service="auth",quantile="0.9"} 0.5
rpc_duration_seconds{service="auth",quantile="0.99"} 1.0
rpc_duration_seconds_sum{service="auth"} 100.0
rpc_duration_seconds_count{service="auth"} 1000
"""


@pytest.fixture
def sample_prometheus_text(
    sample_counter_metrics,
    sample_gauge_metrics,
    sample_histogram_metrics,
    sample_summary_metrics,
):
    """All sample families concatenated into one exposition document."""
    return "".join(
        [
            sample_counter_metrics,
            sample_gauge_metrics,
            sample_histogram_metrics,
            sample_summary_metrics,
        ]
    )
