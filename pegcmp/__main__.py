from pathlib import Path
from typing import Any, Optional

import click
from click.core import ParameterSource
from rich.console import Console

from pegcmp.comparator import compare
from pegcmp.config import PegcmpConfig, resolve_config
from pegcmp.constants import (
    CONFIG_ENVVAR,
    EXIT_DIFFERENCES,
    EXIT_FATAL,
    EXIT_OK,
    PROGRAM_NAME,
)
from pegcmp.errors import DuplicateRuleError, PegcmpError
from pegcmp.models import AnnotationMode, Grammar
from pegcmp.repository import GrammarRepository
from pegcmp.tui import PegcmpConsoleUI
from pegcmp.validator import validate


ANNOTATION_VALUES = [mode.value for mode in AnnotationMode]

_OVERRIDABLE = ("annotations", "fail_on_mismatch", "validate_reference", "summary")


def _explicit_overrides(ctx: click.Context, params: dict[str, Any]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name in _OVERRIDABLE:
        source = ctx.get_parameter_source(name)
        if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
            overrides[name] = params[name]
    return overrides


def _load(repository: GrammarRepository, path: Path, ui: PegcmpConsoleUI) -> Grammar:
    grammar = repository.load(path)
    ui.render_note(f"parsed {len(grammar)} rules from {path}")
    return grammar


def _check_duplicates(grammar: Grammar, ui: PegcmpConsoleUI) -> None:
    result = validate(grammar)
    if result.ok:
        return
    ui.render_diagnostics(result.diagnostics())
    raise DuplicateRuleError(grammar.path, result.conflicts)


def run(reference: Path, candidate: Path, config: PegcmpConfig, ui: PegcmpConsoleUI) -> int:
    """Compare two grammar files and return the process exit status."""
    repository = GrammarRepository(config.annotations)
    lgrammar = _load(repository, reference, ui)
    rgrammar = _load(repository, candidate, ui)

    if config.validate_reference:
        _check_duplicates(lgrammar, ui)
    _check_duplicates(rgrammar, ui)

    report = compare(lgrammar, rgrammar)
    ui.render_diagnostics(report.diagnostics)
    if config.summary:
        ui.render_summary(report)

    if report.has_differences and config.fail_on_mismatch:
        return EXIT_DIFFERENCES
    return EXIT_OK


@click.command(
    name=PROGRAM_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Compare the rules of CANDIDATE against the REFERENCE PEG grammar.",
)
@click.argument("reference", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("candidate", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_ENVVAR,
    help="YAML config file (default: ./.pegcmp.yaml when present).",
)
@click.option(
    "--annotations",
    type=click.Choice(ANNOTATION_VALUES, case_sensitive=False),
    default=AnnotationMode.REJECT.value,
    show_default=True,
    help="How to treat {...} action blocks after a sequence.",
)
@click.option(
    "--fail-on-mismatch/--no-fail-on-mismatch",
    default=False,
    help=f"Exit with status {EXIT_DIFFERENCES} when any rule differs.",
)
@click.option(
    "--validate-reference/--no-validate-reference",
    default=False,
    help="Also reject conflicting duplicate rules in REFERENCE.",
)
@click.option("--summary/--no-summary", default=False, help="Print a summary panel.")
@click.option("-v", "--verbose", is_flag=True, help="Print progress notes.")
@click.pass_context
def cli(
    ctx: click.Context,
    reference: Path,
    candidate: Path,
    config_path: Optional[Path],
    verbose: bool,
    **params: Any,
) -> None:
    ui = PegcmpConsoleUI(Console(stderr=True), verbose=verbose)
    try:
        config = resolve_config(config_path).override(**_explicit_overrides(ctx, params))
        status = run(reference, candidate, config, ui)
    except PegcmpError as exc:
        raise click.ClickException(str(exc))

    if status:
        raise click.exceptions.Exit(status)


def main() -> int:
    try:
        # Without standalone mode, click hands back Exit codes as the result.
        result = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_FATAL
    return result if isinstance(result, int) else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
