# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from promdistill.reporting.console_report_exporter import ConsoleReportExporter
from promdistill.reporting.family_report import (
    build_family_reports,
    families_to_json,
)

__all__ = ["ConsoleReportExporter", "build_family_reports", "families_to_json"]
