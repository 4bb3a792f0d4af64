"""Tests for comparing a candidate grammar against a reference."""

from pathlib import Path

from pegcmp.comparator import compare
from pegcmp.models import DiagnosticKind, Grammar
from pegcmp.peg.parser import parse_grammar


def _grammar(source: str, path: str) -> Grammar:
    return Grammar(path=Path(path), rules=parse_grammar(source, path))


def test_identical_grammars_have_no_diagnostics() -> None:
    source = "A <- 'a' B\nB <- 'b' / 'c'*\n"
    report = compare(_grammar(source, "ref.peg"), _grammar(source, "cand.peg"))
    assert report.diagnostics == []
    assert not report.has_differences
    assert report.checked == 2


def test_whitespace_and_comment_changes_are_ignored() -> None:
    reference = _grammar("A <- 'a' B\nB <- 'b'\n", "ref.peg")
    candidate = _grammar("# new header\nA <-   'a' B   # trailing\n\n\nB <- 'b'\n", "cand.peg")
    assert compare(reference, candidate).diagnostics == []


def test_inner_whitespace_changes_are_reported() -> None:
    reference = _grammar("A <- 'a' B\nB <- 'b'\n", "ref.peg")
    candidate = _grammar("A <- 'a'  B\nB <- 'b'\n", "cand.peg")
    report = compare(reference, candidate)
    assert [d.name for d in report.diagnostics] == ["A"]


def test_mismatch_carries_both_rules() -> None:
    reference = _grammar("A <- 'a' B\nB <- 'b'\n", "ref.peg")
    candidate = _grammar("A <- 'a' B\nB <- 'c'\n", "cand.peg")
    report = compare(reference, candidate)

    assert len(report.diagnostics) == 1
    diagnostic = report.diagnostics[0]
    assert diagnostic.kind == DiagnosticKind.MISMATCH
    assert diagnostic.name == "B"
    assert diagnostic.rule.expr == "'c'"
    assert diagnostic.other is not None
    assert diagnostic.other.expr == "'b'"
    assert (str(diagnostic.rule.pos), str(diagnostic.other.pos)) == (
        "cand.peg:2:1",
        "ref.peg:2:1",
    )


def test_not_found_does_not_stop_scan() -> None:
    reference = _grammar("A <- 'a'\nB <- 'b'\n", "ref.peg")
    candidate = _grammar("C <- 'x'\nA <- 'a'\nB <- 'z'\nD <- 'd'\n", "cand.peg")
    report = compare(reference, candidate)
    assert [(d.name, d.kind) for d in report.diagnostics] == [
        ("C", DiagnosticKind.NOT_FOUND),
        ("B", DiagnosticKind.MISMATCH),
        ("D", DiagnosticKind.NOT_FOUND),
    ]
    assert report.diagnostics[0].other is None
    assert report.diagnostics[0].lines() == [
        '! rule "C" not found',
        "> cand.peg:1:1",
        "> 'x'",
    ]


def test_reference_duplicates_last_definition_wins() -> None:
    reference = _grammar("B <- 'x'\nB <- 'b'\n", "ref.peg")
    candidate = _grammar("B <- 'b'\n", "cand.peg")
    assert compare(reference, candidate).diagnostics == []


def test_rules_only_in_reference_are_not_reported() -> None:
    reference = _grammar("A <- 'a'\nB <- 'b'\n", "ref.peg")
    candidate = _grammar("A <- 'a'\n", "cand.peg")
    assert compare(reference, candidate).diagnostics == []


def test_summary_counts() -> None:
    reference = _grammar("A <- 'a'\n", "ref.peg")
    candidate = _grammar("A <- 'b'\nX <- 'x'\nY <- 'y'\n", "cand.peg")
    summary = compare(reference, candidate).summary()
    assert summary["not found"] == 2
    assert summary["does not match"] == 1
    assert summary["duplicate rule does not match"] == 0
    assert summary["checked"] == 3
    assert summary["diagnostics"] == 3
