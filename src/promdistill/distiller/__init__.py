# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promdistill.distiller.metric_distiller import (
    MetricDistiller,
    UnsupportedCallbackT,
    distill,
    distill_text,
)

__all__ = ["MetricDistiller", "UnsupportedCallbackT", "distill", "distill_text"]
