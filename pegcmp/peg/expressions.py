"""Expression nodes of a parsing expression grammar.

A grammar is plain data: a mapping from rule names to trees of the nodes
below, evaluated by :py:class:`pegcmp.peg.engine.Engine`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


class Expr:
    """Base class for parsing expressions."""


@dataclass(frozen=True)
class AltExpr(Expr):
    """Ordered choice: the first alternative that matches wins."""

    alternatives: tuple[Expr, ...]


@dataclass(frozen=True)
class ConcatExpr(Expr):
    items: tuple[Expr, ...]


@dataclass(frozen=True)
class StarExpr(Expr):
    expr: Expr


@dataclass(frozen=True)
class PlusExpr(Expr):
    expr: Expr


@dataclass(frozen=True)
class MaybeExpr(Expr):
    expr: Expr


@dataclass(frozen=True)
class LookaheadExpr(Expr):
    """``!expr``: succeeds, consuming nothing, when ``expr`` fails."""

    expr: Expr


@dataclass(frozen=True)
class PositiveLookaheadExpr(Expr):
    """``&expr``: succeeds, consuming nothing, when ``expr`` matches."""

    expr: Expr


@dataclass(frozen=True)
class RuleExpr(Expr):
    name: str


@dataclass(frozen=True)
class RegexExpr(Expr):
    pattern: re.Pattern

    @classmethod
    def of(cls, pattern: str) -> RegexExpr:
        return cls(re.compile(pattern, re.DOTALL))

    @classmethod
    def literal(cls, text: str) -> RegexExpr:
        return cls.of(re.escape(text))


@dataclass(frozen=True)
class PegGrammar:
    """A start rule plus named rules.

    ``tokens`` names the rules reported as "expected" in syntax errors.
    """

    start_rule: str
    rules: dict[str, Expr]
    tokens: frozenset[str] = frozenset()

    def with_rules(self, **overrides: Expr) -> PegGrammar:
        rules = dict(self.rules)
        rules.update(overrides)
        return PegGrammar(start_rule=self.start_rule, rules=rules, tokens=self.tokens)
