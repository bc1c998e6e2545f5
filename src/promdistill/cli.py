# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for promdistill."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

import sys
from pathlib import Path

from cyclopts import App

from promdistill.cli_utils import exit_on_error
from promdistill.common.enums import OutputFormat

app = App(name="promdistill", help="Distill Prometheus metric snapshots")


@app.command(name="report")
def report(
    path: Path,
    format: OutputFormat = OutputFormat.TABLE,
    openmetrics: bool = False,
    log_level: str | None = None,
) -> None:
    """Distill a Prometheus exposition file and print a report.

    Args:
        path: File holding Prometheus text exposition (or OpenMetrics) content.
        format: 'table' prints one row per metric family, 'json' prints the distilled families.
        openmetrics: Parse the file as OpenMetrics instead of Prometheus text format.
        log_level: Log level for diagnostics. Defaults to PROMDISTILL_LOGGING_LEVEL.
    """
    with exit_on_error(title="Error Running Report Command"):
        from rich.console import Console

        from promdistill.common.environment import Environment
        from promdistill.common.logging import setup_rich_logging
        from promdistill.distiller import MetricDistiller
        from promdistill.reporting import (
            ConsoleReportExporter,
            build_family_reports,
            families_to_json,
        )

        setup_rich_logging(log_level)
        families = MetricDistiller().distill_text(
            path.read_text(encoding="utf-8"), openmetrics=openmetrics
        )

        if format == OutputFormat.JSON:
            sys.stdout.write(families_to_json(families).decode("utf-8") + "\n")
            return

        ConsoleReportExporter(title=f"Distilled Metric Families ({path.name})").export(
            build_family_reports(families),
            Console(width=Environment.REPORT.CONSOLE_WIDTH),
        )
