# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Distilled, comparable view of a Prometheus metrics snapshot.

A snapshot distills into a list of `MetricFamily`, each holding one `Metric`
per label set. `Metric` is a closed union discriminated on `kind`:

- `CounterMetric` / `GaugeMetric`: a single optional value
- `HistogramMetric`: optional observation count and sum (buckets are dropped)
- `UnsupportedMetric`: any other family type, keeping the original type

Optional fields are None only when the source never set them. Zero-defaulting
happens in the `count()` / `sum()` accessors, never in the stored data.
"""

from typing import Annotated, Any, Literal

from pydantic import Field, model_validator

from promdistill.common.constants import LABEL_SEPARATOR
from promdistill.common.enums import PrometheusMetricType
from promdistill.common.models.base_models import DistillBaseModel

DISTILLED_METRIC_TYPES = frozenset(
    {
        PrometheusMetricType.COUNTER,
        PrometheusMetricType.GAUGE,
        PrometheusMetricType.HISTOGRAM,
    }
)
"""Family types that distill to a dedicated metric variant."""


class MetricLabel(DistillBaseModel):
    """Single label attached to a metric instance.

    Also accepts the string form `name|value` wherever a label is validated,
    e.g. `CounterMetric(labels=["method|GET"], value=1.0)`.
    """

    name: str = Field(description="Label name, kept verbatim (may be empty)")
    value: str = Field(description="Label value, kept verbatim (may be empty)")

    @model_validator(mode="before")
    @classmethod
    def _parse_string_form(cls, data: Any) -> Any:
        if isinstance(data, str):
            return cls._split(data)
        return data

    @staticmethod
    def _split(rep: str) -> dict[str, str]:
        name, separator, value = rep.partition(LABEL_SEPARATOR)
        if not separator:
            # Malformed input yields an empty label instead of an error
            return {"name": "", "value": ""}
        return {"name": name, "value": value}

    @classmethod
    def from_string(cls, rep: str) -> "MetricLabel":
        """Parse `name|value`, splitting on the first separator only.

        Never raises: a string without a separator gives an empty name and value.
        """
        return cls(**cls._split(rep))

    def __str__(self) -> str:
        return f"{self.name}{LABEL_SEPARATOR}{self.value}"


class BaseMetric(DistillBaseModel):
    """Fields and accessors shared by all metric variants."""

    labels: tuple[MetricLabel, ...] = Field(
        default=(),
        description="Labels of the instance, in source order, without deduplication",
    )

    def count(self) -> int:
        """Number of observations represented by this metric instance."""
        return 1

    def sum(self) -> float:
        """Total value represented by this metric instance."""
        return 0.0

    def label_dict(self) -> dict[str, str]:
        """Labels as a dict. Later duplicates of a name overwrite earlier ones."""
        return {label.name: label.value for label in self.labels}


class _ValueMetric(BaseMetric):
    value: float | None = Field(
        default=None,
        description="Sample value, or None if the source never set it",
    )

    def sum(self) -> float:
        return self.value if self.value is not None else 0.0


class CounterMetric(_ValueMetric):
    """Counter instance."""

    kind: Literal["counter"] = Field(default="counter", description="Variant tag")


class GaugeMetric(_ValueMetric):
    """Gauge instance."""

    kind: Literal["gauge"] = Field(default="gauge", description="Variant tag")


class HistogramMetric(BaseMetric):
    """Histogram instance reduced to its observation count and sum."""

    kind: Literal["histogram"] = Field(default="histogram", description="Variant tag")
    sample_count: int | None = Field(
        default=None,
        ge=0,
        description="Total number of observations, or None if the source never set it",
    )
    sample_sum: float | None = Field(
        default=None,
        description="Sum of all observed values, or None if the source never set it",
    )

    def count(self) -> int:
        return self.sample_count if self.sample_count is not None else 0

    def sum(self) -> float:
        return self.sample_sum if self.sample_sum is not None else 0.0


class UnsupportedMetric(BaseMetric):
    """Instance of a family whose type has no dedicated variant.

    Counts as a single observation with a sum of 0.0.
    """

    kind: Literal["unsupported"] = Field(
        default="unsupported", description="Variant tag"
    )
    metric_type: PrometheusMetricType = Field(
        description="Declared type of the family this instance came from"
    )


Metric = Annotated[
    CounterMetric | GaugeMetric | HistogramMetric | UnsupportedMetric,
    Field(discriminator="kind"),
]


class MetricFamily(DistillBaseModel):
    """One named metric with all of its label-distinguished instances."""

    name: str = Field(description="Family name as reported by the source")
    type: PrometheusMetricType = Field(description="Declared type of the family")
    description: str = Field(default="", description="HELP text of the family")
    metrics: tuple[Metric, ...] = Field(
        default=(),
        description="One metric per label set, in the order first seen in the source",
    )

    @property
    def is_supported(self) -> bool:
        """Whether the family type distills to a dedicated metric variant."""
        return self.type in DISTILLED_METRIC_TYPES

    def total_count(self) -> int:
        """Sum of `count()` over all metrics of the family."""
        return sum(metric.count() for metric in self.metrics)

    def total_sum(self) -> float:
        """Sum of `sum()` over all metrics of the family."""
        return sum((metric.sum() for metric in self.metrics), 0.0)
