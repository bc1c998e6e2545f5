# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

LABEL_SEPARATOR = "|"
"""Separator between the name and value of a label in its string form (name|value)."""

HISTOGRAM_BUCKET_LABEL = "le"
SUMMARY_QUANTILE_LABEL = "quantile"

TOTAL_SUFFIX = "_total"
COUNT_SUFFIX = "_count"
SUM_SUFFIX = "_sum"
