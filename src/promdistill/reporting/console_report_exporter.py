# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from rich.console import Console, RenderableType
from rich.table import Table

from promdistill.common.environment import Environment
from promdistill.common.mixins import DistillLoggerMixin
from promdistill.common.models import FamilyReport


class ConsoleReportExporter(DistillLoggerMixin):
    """Prints family report rows to the console as a rich table."""

    COLUMNS = ["Type", "Metrics", "Observations", "Total"]

    def __init__(
        self,
        title: str = "Distilled Metric Families",
        float_precision: int | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._title = title
        self._float_precision = (
            Environment.REPORT.FLOAT_PRECISION
            if float_precision is None
            else float_precision
        )

    def export(self, reports: list[FamilyReport], console: Console) -> None:
        if not reports:
            self.debug("No metric families to export")
            console.print("[dim]No metric families found[/dim]")
            return

        console.print(self.get_renderable(reports))
        console.file.flush()

    def get_renderable(self, reports: list[FamilyReport]) -> RenderableType:
        table = Table(title=self._title)
        table.add_column("Family", justify="left", style="cyan", no_wrap=True)
        for column in self.COLUMNS:
            table.add_column(column, justify="right", style="green")
        for report in reports:
            table.add_row(*self._format_row(report))
        return table

    def _format_row(self, report: FamilyReport) -> list[str]:
        if not report.supported:
            # Unsupported families carry no meaningful totals
            return [
                report.name,
                f"[yellow]{report.type}[/yellow]",
                f"{report.metrics:,}",
                "[dim]N/A[/dim]",
                "[dim]N/A[/dim]",
            ]
        return [
            report.name,
            str(report.type),
            f"{report.metrics:,}",
            f"{report.observations:,}",
            f"{report.total:,.{self._float_precision}f}",
        ]
