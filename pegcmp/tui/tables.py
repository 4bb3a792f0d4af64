from rich.markup import escape
from rich.table import Column, Table

from pegcmp.models import ComparisonReport, Diagnostic, DiagnosticKind
from pegcmp.tui.enums import DIAGNOSTIC_KIND_STYLE, UIStyle


class SummaryTable:
    @staticmethod
    def summary_block(report: ComparisonReport) -> Table:
        counts = report.summary()
        chips = [
            f"{kind.value}={counts[kind.value]}"
            for kind in DiagnosticKind
            if counts[kind.value] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Reference", escape(str(report.reference)))
        table.add_row("Candidate", escape(str(report.candidate)))
        table.add_row("Rules", str(counts["checked"]))
        table.add_row("Issues", "  ".join(chips))
        return table

    @staticmethod
    def diagnostics_table(diagnostics: list[Diagnostic]) -> Table:
        table = Table(
            Column(header="Rule", overflow="ellipsis", max_width=32),
            Column(header="Status", width=30),
            Column(header="Candidate", overflow="ellipsis"),
            Column(header="Reference", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for diagnostic in diagnostics:
            style = DIAGNOSTIC_KIND_STYLE.get(diagnostic.kind, UIStyle.WHITE.value)
            other = str(diagnostic.other.pos) if diagnostic.other is not None else ""
            table.add_row(
                diagnostic.name,
                f"[{style}]{diagnostic.kind.value}[/{style}]",
                escape(str(diagnostic.rule.pos)),
                escape(other),
            )
        return table
