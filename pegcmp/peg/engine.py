"""A backtracking PEG evaluator with packrat memoization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from pegcmp.errors import GrammarParseError
from pegcmp.peg.expressions import (
    AltExpr,
    ConcatExpr,
    Expr,
    LookaheadExpr,
    MaybeExpr,
    PegGrammar,
    PlusExpr,
    PositiveLookaheadExpr,
    RegexExpr,
    RuleExpr,
    StarExpr,
)
from pegcmp.peg.position import Cursor


@dataclass(frozen=True)
class Node:
    """A matched span. ``name`` is set on rule applications only."""

    start: Cursor
    end: Cursor
    name: Optional[str] = None
    children: tuple[Node, ...] = ()

    def text(self, source: str) -> str:
        return source[self.start.index : self.end.index]

    def named_children(self) -> Iterator[Node]:
        """Yield the nearest named descendants, in source order."""
        for child in self.children:
            if child.name is not None:
                yield child
            else:
                yield from child.named_children()

    def child(self, name: str) -> Node:
        for child in self.named_children():
            if child.name == name:
                return child
        raise KeyError(name)

    def find_all(self, name: str) -> Iterator[Node]:
        """Yield every descendant named ``name`` without entering matches."""
        for child in self.children:
            if child.name == name:
                yield child
            else:
                yield from child.find_all(name)


_MISSING = object()


class _Run:
    def __init__(self, grammar: PegGrammar, source: str) -> None:
        self.grammar = grammar
        self.source = source
        self.memo: dict[tuple[str, int], Optional[Node]] = {}
        self.farthest = Cursor()
        self.expected: set[str] = set()
        self.predicate_depth = 0
        self._dispatch: dict[type, Callable[[Expr, Cursor], Optional[Node]]] = {
            AltExpr: self._alt,
            ConcatExpr: self._concat,
            StarExpr: self._star,
            PlusExpr: self._plus,
            MaybeExpr: self._maybe,
            LookaheadExpr: self._not,
            PositiveLookaheadExpr: self._and,
            RuleExpr: self._rule,
            RegexExpr: self._regex,
        }

    def eval(self, expr: Expr, cursor: Cursor) -> Optional[Node]:
        return self._dispatch[type(expr)](expr, cursor)

    def _fail(self, name: str, cursor: Cursor) -> None:
        if self.predicate_depth:
            return
        if cursor.index > self.farthest.index:
            self.farthest = cursor
            self.expected = {name}
        elif cursor.index == self.farthest.index:
            self.expected.add(name)

    def _regex(self, expr: RegexExpr, cursor: Cursor) -> Optional[Node]:
        match = expr.pattern.match(self.source, cursor.index)
        if match is None:
            return None
        return Node(start=cursor, end=cursor.advance(match.group()))

    def _concat(self, expr: ConcatExpr, cursor: Cursor) -> Optional[Node]:
        children: list[Node] = []
        position = cursor
        for item in expr.items:
            node = self.eval(item, position)
            if node is None:
                return None
            children.append(node)
            position = node.end
        return Node(start=cursor, end=position, children=tuple(children))

    def _alt(self, expr: AltExpr, cursor: Cursor) -> Optional[Node]:
        for alternative in expr.alternatives:
            node = self.eval(alternative, cursor)
            if node is not None:
                return Node(start=cursor, end=node.end, children=(node,))
        return None

    def _repeat(self, expr: Expr, cursor: Cursor, minimum: int) -> Optional[Node]:
        children: list[Node] = []
        position = cursor
        while True:
            node = self.eval(expr, position)
            if node is None:
                break
            children.append(node)
            # An empty match would repeat forever.
            if node.end.index == position.index:
                break
            position = node.end
        if len(children) < minimum:
            return None
        return Node(start=cursor, end=position, children=tuple(children))

    def _star(self, expr: StarExpr, cursor: Cursor) -> Optional[Node]:
        return self._repeat(expr.expr, cursor, minimum=0)

    def _plus(self, expr: PlusExpr, cursor: Cursor) -> Optional[Node]:
        return self._repeat(expr.expr, cursor, minimum=1)

    def _maybe(self, expr: MaybeExpr, cursor: Cursor) -> Optional[Node]:
        node = self.eval(expr.expr, cursor)
        if node is None:
            return Node(start=cursor, end=cursor)
        return Node(start=cursor, end=node.end, children=(node,))

    def _lookahead(self, expr: Expr, cursor: Cursor) -> bool:
        self.predicate_depth += 1
        try:
            return self.eval(expr, cursor) is not None
        finally:
            self.predicate_depth -= 1

    def _not(self, expr: LookaheadExpr, cursor: Cursor) -> Optional[Node]:
        if self._lookahead(expr.expr, cursor):
            return None
        return Node(start=cursor, end=cursor)

    def _and(self, expr: PositiveLookaheadExpr, cursor: Cursor) -> Optional[Node]:
        if not self._lookahead(expr.expr, cursor):
            return None
        return Node(start=cursor, end=cursor)

    def _rule(self, expr: RuleExpr, cursor: Cursor) -> Optional[Node]:
        key = (expr.name, cursor.index)
        cached = self.memo.get(key, _MISSING)
        if cached is not _MISSING:
            return cached  # type: ignore[return-value]

        inner = self.eval(self.grammar.rules[expr.name], cursor)
        if inner is None:
            result = None
            if expr.name in self.grammar.tokens:
                self._fail(expr.name, cursor)
        else:
            result = Node(start=cursor, end=inner.end, name=expr.name, children=(inner,))
        # Failures under a predicate are not recorded, so their results are
        # not reusable outside it.
        if not self.predicate_depth:
            self.memo[key] = result
        return result


class Engine:
    """Evaluate a :py:class:`PegGrammar` against whole inputs."""

    def __init__(self, grammar: PegGrammar) -> None:
        self.grammar = grammar

    def parse(self, source: str, filename: str = "") -> Node:
        run = _Run(self.grammar, source)
        try:
            node = run.eval(RuleExpr(self.grammar.start_rule), Cursor())
        except RecursionError as exc:
            at = run.farthest
            raise GrammarParseError(
                filename,
                line=at.line,
                col=at.col,
                offset=at.offset,
                detail="expression nested too deeply",
            ) from exc
        if node is not None and node.end.index == len(source):
            return node

        at, expected = run.farthest, sorted(run.expected)
        if node is not None and node.end.index > at.index:
            at, expected = node.end, []
        raise GrammarParseError(
            filename,
            line=at.line,
            col=at.col,
            offset=at.offset,
            expected=expected,
        )
