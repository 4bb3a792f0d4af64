"""Tests for duplicate rule validation."""

from pathlib import Path

from pegcmp.models import DiagnosticKind, Grammar
from pegcmp.peg.parser import parse_grammar
from pegcmp.validator import validate


def _grammar(source: str, path: str = "g.peg") -> Grammar:
    return Grammar(path=Path(path), rules=parse_grammar(source, path))


def test_unique_rules_validate() -> None:
    result = validate(_grammar("A <- 'a'\nB <- 'b'\n"))
    assert result.ok
    assert result.conflicts == []


def test_identical_duplicates_are_tolerated() -> None:
    result = validate(_grammar("A <- 'a' # one\nB <- 'b'\nA <- 'a'   # two\n"))
    assert result.ok


def test_differing_duplicate_is_one_conflict() -> None:
    result = validate(_grammar("A <- 'a'\nA <- 'b'\n"))
    assert not result.ok
    assert len(result.conflicts) == 1
    conflict = result.conflicts[0]
    assert conflict.name == "A"
    assert conflict.first.expr == "'a'"
    assert conflict.first.pos.line == 1
    assert conflict.duplicate.expr == "'b'"
    assert conflict.duplicate.pos.line == 2


def test_all_conflicts_are_collected() -> None:
    result = validate(_grammar("A <- 'a'\nA <- 'b'\nB <- 'x'\nA <- 'c'\nB <- 'y'\nA <- 'a'\n"))
    assert not result.ok
    assert [(c.name, c.duplicate.expr) for c in result.conflicts] == [
        ("A", "'b'"),
        ("A", "'c'"),
        ("B", "'y'"),
    ]


def test_conflicts_compare_against_first_definition() -> None:
    result = validate(_grammar("A <- 'a'\nA <- 'b'\nA <- 'b'\n"))
    assert len(result.conflicts) == 2
    assert all(conflict.first.pos.line == 1 for conflict in result.conflicts)


def test_conflict_diagnostic_lines() -> None:
    result = validate(_grammar("A <- 'a'\nA <- 'b'\n"))
    diagnostic = result.diagnostics()[0]
    assert diagnostic.kind == DiagnosticKind.DUPLICATE_MISMATCH
    assert diagnostic.lines() == [
        '! rule "A" duplicate rule does not match',
        "> g.peg:2:1",
        "> 'b'",
        "< g.peg:1:1",
        "< 'a'",
    ]
