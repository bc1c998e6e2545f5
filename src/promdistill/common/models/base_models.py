# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class DistillBaseModel(BaseModel):
    """Base model for all promdistill models.

    Models are immutable value objects: they are built once from a snapshot and
    compared by value. Unknown fields are rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
