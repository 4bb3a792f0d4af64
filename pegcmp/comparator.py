"""Diff a candidate grammar against a reference grammar, rule by rule."""

from __future__ import annotations

from pegcmp.models import ComparisonReport, Diagnostic, DiagnosticKind, Grammar, Rule


def compare(reference: Grammar, candidate: Grammar) -> ComparisonReport:
    # The reference is trusted; for repeated names the last definition wins.
    rules: dict[str, Rule] = {rule.name: rule for rule in reference}

    report = ComparisonReport(reference=reference.path, candidate=candidate.path)
    for rule in candidate:
        report.checked += 1
        expected = rules.get(rule.name)
        if expected is None:
            report.diagnostics.append(Diagnostic(kind=DiagnosticKind.NOT_FOUND, rule=rule))
            continue

        # Bodies are compared byte by byte, including inner white space.
        if rule.expr != expected.expr:
            report.diagnostics.append(
                Diagnostic(kind=DiagnosticKind.MISMATCH, rule=rule, other=expected)
            )
    return report
