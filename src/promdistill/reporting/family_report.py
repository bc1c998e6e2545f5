# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable

import orjson

from promdistill.common.models import FamilyReport, MetricFamily


def build_family_reports(families: Iterable[MetricFamily]) -> list[FamilyReport]:
    """Build one report row per distilled family, keeping the input order."""
    return [
        FamilyReport(
            name=family.name,
            type=family.type,
            metrics=len(family.metrics),
            observations=family.total_count(),
            total=family.total_sum(),
            supported=family.is_supported,
        )
        for family in families
    ]


def families_to_json(families: Iterable[MetricFamily]) -> bytes:
    """Serialize distilled families to an indented JSON document.

    Non-finite floats (NaN, +Inf) are written as null by orjson.
    """
    return orjson.dumps(
        [family.model_dump(mode="json") for family in families],
        option=orjson.OPT_INDENT_2,
    )
