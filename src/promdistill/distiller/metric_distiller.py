# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from prometheus_client.metrics_core import Metric as PrometheusFamily
from prometheus_client.openmetrics.parser import (
    text_string_to_metric_families as openmetrics_string_to_metric_families,
)
from prometheus_client.parser import text_string_to_metric_families

from promdistill.common.constants import (
    COUNT_SUFFIX,
    HISTOGRAM_BUCKET_LABEL,
    SUM_SUFFIX,
    SUMMARY_QUANTILE_LABEL,
    TOTAL_SUFFIX,
)
from promdistill.common.enums import PrometheusMetricType
from promdistill.common.environment import Environment
from promdistill.common.exceptions import MetricsParseError
from promdistill.common.mixins import DistillLoggerMixin
from promdistill.common.models import (
    CounterMetric,
    GaugeMetric,
    HistogramMetric,
    MetricFamily,
    MetricLabel,
    UnsupportedMetric,
)

__all__ = ["MetricDistiller", "UnsupportedCallbackT", "distill", "distill_text"]

UnsupportedCallbackT = Callable[[str, PrometheusMetricType], None]

# Labels that identify a sample within an instance rather than the instance itself
_STRUCTURAL_LABELS: dict[PrometheusMetricType, frozenset[str]] = {
    PrometheusMetricType.HISTOGRAM: frozenset({HISTOGRAM_BUCKET_LABEL}),
    PrometheusMetricType.GAUGE_HISTOGRAM: frozenset({HISTOGRAM_BUCKET_LABEL}),
    PrometheusMetricType.SUMMARY: frozenset({SUMMARY_QUANTILE_LABEL}),
}


@dataclass
class _LabelSetSamples:
    """Samples of one family that share a label set (one metric instance)."""

    labels: tuple[MetricLabel, ...]
    values: dict[str, float] = field(default_factory=dict)
    native_histogram: Any = None

    def first_value(self, *sample_names: str) -> float | None:
        """Value of the first sample name present, or None if none were set."""
        for sample_name in sample_names:
            if sample_name in self.values:
                return self.values[sample_name]
        return None


class MetricDistiller(DistillLoggerMixin):
    """Distills prometheus_client metric families into comparable MetricFamily models.

    The mapping is keyed by each family's declared type:
    - counter -> CounterMetric(labels, value)
    - gauge -> GaugeMetric(labels, value)
    - histogram -> HistogramMetric(labels, sample_count, sample_sum), buckets dropped
    - anything else -> UnsupportedMetric(metric_type), logged once per instance

    A metric instance is the set of samples that share a label set, ignoring
    `le` (histograms) and `quantile` (summaries). Fields whose sample is absent
    stay None. Distillation never raises.

    Args:
        unsupported_callback: Optional sink called with (family_name, metric_type)
            for every instance of an unsupported family.
        log_unsupported: Whether to log an error for unsupported instances.
            Defaults to Environment.DISTILL.LOG_UNSUPPORTED.
    """

    def __init__(
        self,
        unsupported_callback: UnsupportedCallbackT | None = None,
        log_unsupported: bool | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._unsupported_callback = unsupported_callback
        self._log_unsupported = (
            Environment.DISTILL.LOG_UNSUPPORTED
            if log_unsupported is None
            else log_unsupported
        )

    def distill(self, families: Iterable[PrometheusFamily]) -> list[MetricFamily]:
        """Distill families in order, one MetricFamily per input family."""
        return [self._distill_family(family) for family in families]

    def distill_text(self, text: str, openmetrics: bool = False) -> list[MetricFamily]:
        """Parse Prometheus text exposition (or OpenMetrics) and distill it.

        Args:
            text: Exposition text already held by the caller
            openmetrics: Parse with the OpenMetrics parser instead of the
                Prometheus text parser. OpenMetrics input must end with "# EOF".

        Returns:
            Distilled families in exposition order. Empty for blank input.

        Raises:
            MetricsParseError: If the text is not valid exposition format
        """
        if not text.strip():
            return []

        parser = (
            openmetrics_string_to_metric_families
            if openmetrics
            else text_string_to_metric_families
        )
        try:
            families = list(parser(text))
        except ValueError as e:
            self.warning(f"Failed to parse Prometheus metrics - invalid format: {e}")
            raise MetricsParseError(
                f"Failed to parse Prometheus metrics - invalid format: {e}"
            ) from e

        self.debug(lambda: f"Parsed {len(families)} metric families")
        return self.distill(families)

    def _distill_family(self, family: PrometheusFamily) -> MetricFamily:
        metric_type = PrometheusMetricType(family.type)
        groups = self._group_samples(family, metric_type)

        match metric_type:
            case PrometheusMetricType.COUNTER:
                metrics = [self._to_counter(family.name, g) for g in groups]
            case PrometheusMetricType.GAUGE:
                metrics = [self._to_gauge(family.name, g) for g in groups]
            case PrometheusMetricType.HISTOGRAM:
                metrics = [self._to_histogram(family.name, g) for g in groups]
            case _:
                metrics = [
                    self._to_unsupported(family.name, metric_type, g) for g in groups
                ]

        return MetricFamily(
            name=family.name,
            type=metric_type,
            description=getattr(family, "documentation", None) or "",
            metrics=metrics,
        )

    def _group_samples(
        self, family: PrometheusFamily, metric_type: PrometheusMetricType
    ) -> list[_LabelSetSamples]:
        """Group samples by label set, in the order each label set is first seen.

        When a sample name repeats within a label set, the last value wins.
        """
        ignored = _STRUCTURAL_LABELS.get(metric_type, frozenset())
        groups: dict[tuple, _LabelSetSamples] = {}

        for sample in family.samples:
            labels = [
                (name, value)
                for name, value in sample.labels.items()
                if name not in ignored
            ]
            label_key = tuple(sorted(labels))
            group = groups.get(label_key)
            if group is None:
                group = groups[label_key] = _LabelSetSamples(
                    labels=tuple(
                        MetricLabel(name=name, value=value) for name, value in labels
                    )
                )

            # Buckets and quantiles are not kept
            if ignored.intersection(sample.labels):
                continue
            group.values[sample.name] = sample.value
            native_histogram = getattr(sample, "native_histogram", None)
            if native_histogram is not None:
                group.native_histogram = native_histogram

        self.trace(
            lambda: f"Grouped {len(family.samples)} samples of {family.name!r} into {len(groups)} label sets"
        )
        return list(groups.values())

    def _to_counter(self, name: str, group: _LabelSetSamples) -> CounterMetric:
        return CounterMetric(
            labels=group.labels,
            value=group.first_value(f"{name}{TOTAL_SUFFIX}", name),
        )

    def _to_gauge(self, name: str, group: _LabelSetSamples) -> GaugeMetric:
        return GaugeMetric(labels=group.labels, value=group.first_value(name))

    def _to_histogram(self, name: str, group: _LabelSetSamples) -> HistogramMetric:
        count = group.first_value(f"{name}{COUNT_SUFFIX}")
        sample_sum = group.first_value(f"{name}{SUM_SUFFIX}")

        native = group.native_histogram
        if native is not None:
            if count is None:
                count = native.count_value
            if sample_sum is None:
                sample_sum = native.sum_value

        return HistogramMetric(
            labels=group.labels,
            sample_count=self._to_sample_count(name, count),
            sample_sum=sample_sum,
        )

    def _to_sample_count(self, name: str, count: float | None) -> int | None:
        if count is None:
            return None
        if not math.isfinite(count) or count < 0:
            self.warning(
                f"Ignoring histogram count {count} of {name!r}: not a valid observation count"
            )
            return None
        return int(count)

    def _to_unsupported(
        self,
        name: str,
        metric_type: PrometheusMetricType,
        group: _LabelSetSamples,
    ) -> UnsupportedMetric:
        if self._log_unsupported:
            self.error(
                f"Prometheus metric type not supported: {metric_type} (family={name!r})"
            )
        if self._unsupported_callback is not None:
            self._unsupported_callback(name, metric_type)
        return UnsupportedMetric(labels=group.labels, metric_type=metric_type)


def distill(
    families: Iterable[PrometheusFamily],
    unsupported_callback: UnsupportedCallbackT | None = None,
) -> list[MetricFamily]:
    """Distill prometheus_client metric families. See MetricDistiller."""
    return MetricDistiller(unsupported_callback=unsupported_callback).distill(families)


def distill_text(text: str, openmetrics: bool = False) -> list[MetricFamily]:
    """Parse exposition text and distill it. See MetricDistiller.distill_text."""
    return MetricDistiller().distill_text(text, openmetrics=openmetrics)
