# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for distilling Prometheus text exposition."""

import logging

import pytest

from promdistill.common.enums import PrometheusMetricType
from promdistill.common.exceptions import MetricsParseError, PromDistillError
from promdistill.common.models import (
    CounterMetric,
    GaugeMetric,
    HistogramMetric,
    UnsupportedMetric,
)
from promdistill.distiller import MetricDistiller, distill_text


class TestTextParsing:
    """Tests for parsing Prometheus text format."""

    def test_parse_counter(self, sample_counter_metrics):
        families = distill_text(sample_counter_metrics)

        assert len(families) == 1
        # Note: prometheus_client parser strips _total suffix from counters
        family = families[0]
        assert family.name == "http_requests"
        assert family.type == "counter"
        assert family.description == "Total HTTP requests"
        assert family.metrics == (
            CounterMetric(labels=["method|GET", "status|200"], value=1547.0),
            CounterMetric(labels=["method|POST", "status|200"], value=892.0),
        )

    def test_parse_gauge(self, sample_gauge_metrics):
        family = distill_text(sample_gauge_metrics)[0]

        assert family.metrics == (
            GaugeMetric(labels=["type|heap"], value=1073741824.0),
            GaugeMetric(labels=["type|stack"], value=0.0),
        )

    def test_parse_histogram_drops_buckets(self, sample_histogram_metrics):
        family = distill_text(sample_histogram_metrics)[0]

        assert family.name == "http_request_duration_seconds"
        assert family.metrics == (
            HistogramMetric(labels=["method|GET"], sample_count=500, sample_sum=125.5),
        )

    def test_parse_summary_is_unsupported(self, sample_summary_metrics, caplog):
        with caplog.at_level(logging.ERROR):
            family = distill_text(sample_summary_metrics)[0]

        assert family.type == PrometheusMetricType.SUMMARY
        assert family.metrics == (
            UnsupportedMetric(
                labels=["service|auth"], metric_type=PrometheusMetricType.SUMMARY
            ),
        )
        assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1

    def test_parse_full_document_keeps_order(self, sample_prometheus_text):
        families = distill_text(sample_prometheus_text)

        assert [f.name for f in families] == [
            "http_requests",
            "memory_usage_bytes",
            "http_request_duration_seconds",
            "rpc_duration_seconds",
        ]

    def test_untyped_metric(self):
        family = distill_text("loose_metric 3\n")[0]
        assert family.type == PrometheusMetricType.UNKNOWN
        assert family.metrics == (
            UnsupportedMetric(metric_type=PrometheusMetricType.UNKNOWN),
        )

    @pytest.mark.parametrize(
        "empty_input",
        [
            "",
            "   \n  \n  ",
            "\t\t\n",
        ],
    )
    def test_empty_metrics(self, empty_input):
        assert distill_text(empty_input) == []


class TestMalformedText:
    """Tests for invalid exposition text."""

    def test_invalid_value_raises_parse_error(self):
        with pytest.raises(MetricsParseError) as exc_info:
            distill_text("# TYPE foo gauge\nfoo not_a_number\n")

        assert isinstance(exc_info.value, PromDistillError)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "invalid format" in str(exc_info.value)

    def test_parse_error_is_logged(self, caplog):
        with (
            caplog.at_level(logging.WARNING),
            pytest.raises(MetricsParseError),
        ):
            MetricDistiller().distill_text("# TYPE foo gauge\nfoo not_a_number\n")

        assert any(
            "Failed to parse Prometheus metrics" in r.getMessage()
            for r in caplog.records
        )


class TestOpenMetrics:
    """Tests for the OpenMetrics front-end."""

    def test_openmetrics_counter(self):
        text = """# TYPE jobs counter
# HELP jobs Jobs processed.
jobs_total{queue="q1"} 4.0
jobs_created{queue="q1"} 1.7e9
# EOF
"""
        family = distill_text(text, openmetrics=True)[0]

        assert family.name == "jobs"
        assert family.description == "Jobs processed."
        assert family.metrics == (CounterMetric(labels=["queue|q1"], value=4.0),)

    def test_openmetrics_requires_eof(self):
        with pytest.raises(MetricsParseError):
            distill_text("# TYPE jobs counter\njobs_total 4.0\n", openmetrics=True)
