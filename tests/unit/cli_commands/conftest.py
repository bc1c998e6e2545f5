# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The report command installs a rich handler on the root logger; undo it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def exposition_file(tmp_path):
    path = tmp_path / "snapshot.prom"
    path.write_text(
        """# HELP jobs_total Jobs processed
# TYPE jobs_total counter
jobs_total{queue="q1"} 4
# HELP latency_seconds Latency
# TYPE latency_seconds histogram
latency_seconds_bucket{le="+Inf"} 3
latency_seconds_sum 0.75
latency_seconds_count 3
# HELP rpc_seconds RPC latency
# TYPE rpc_seconds summary
rpc_seconds_sum 1.0
rpc_seconds_count 2
""",
        encoding="utf-8",
    )
    return path
