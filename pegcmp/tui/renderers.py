from typing import Iterable, Optional, TextIO

import click
from rich.console import Console

from pegcmp.models import ComparisonReport, Diagnostic
from pegcmp.tui.enums import UIStyle
from pegcmp.tui.sections import UISection
from pegcmp.tui.tables import SummaryTable


class PegcmpConsoleUI:
    """Write diagnostics and notes to stderr.

    Diagnostic records go through ``click.echo`` so rule bodies reach the
    stream untouched; panels and notes are rendered by rich.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        verbose: bool = False,
    ) -> None:
        self.console = console or Console(stderr=True)
        self.stream = stream
        self.verbose = verbose

    def _echo(self, line: str) -> None:
        if self.stream is None:
            click.echo(line, err=True)
        else:
            click.echo(line, file=self.stream)

    def render_diagnostic(self, diagnostic: Diagnostic) -> None:
        for line in diagnostic.lines():
            self._echo(line)
        self._echo("")

    def render_diagnostics(self, diagnostics: Iterable[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            self.render_diagnostic(diagnostic)

    def render_summary(self, report: ComparisonReport) -> None:
        style = UIStyle.RED.value if report.has_differences else UIStyle.GREEN.value
        self.console.print(
            UISection.wrap("pegcmp", SummaryTable.summary_block(report), style=style)
        )
        if report.diagnostics:
            self.console.print(
                UISection.wrap(
                    "issues",
                    SummaryTable.diagnostics_table(report.diagnostics),
                    style=UIStyle.CYAN.value,
                )
            )

    def render_note(self, text: str) -> None:
        if self.verbose:
            self.console.print(
                text,
                style=UIStyle.DIM.value,
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
