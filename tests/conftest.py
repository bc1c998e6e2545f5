# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Shared test configuration and fixtures for all test types.

ONLY ADD FIXTURES HERE THAT ARE USED IN ALL TEST TYPES.
DO NOT ADD FIXTURES THAT ARE ONLY USED IN A SPECIFIC TEST TYPE.
"""

import pytest

from promdistill.common.environment import Environment


@pytest.fixture(autouse=True)
def log_unsupported_metrics(monkeypatch):
    """Tests count unsupported-type diagnostics, whatever the developer's environment says."""
    monkeypatch.setattr(Environment.DISTILL, "LOG_UNSUPPORTED", True)
