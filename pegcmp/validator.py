"""Detect same-named rules whose bodies disagree."""

from __future__ import annotations

from pegcmp.models import Conflict, Grammar, Rule, ValidationResult


def validate(grammar: Grammar) -> ValidationResult:
    """Collect every duplicate rule whose body differs from the first one seen.

    Identical duplicates are accepted. Scanning never stops early.
    """
    result = ValidationResult(path=grammar.path)
    seen: dict[str, Rule] = {}
    for rule in grammar:
        first = seen.get(rule.name)
        if first is None:
            seen[rule.name] = rule
            continue
        if rule.expr != first.expr:
            result.conflicts.append(Conflict(first=first, duplicate=rule))
    return result
