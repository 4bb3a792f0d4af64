"""Turn grammar source text into rules."""

from __future__ import annotations

from typing import NewType

from pegcmp.errors import GrammarParseError, UnterminatedCommentError
from pegcmp.models import AnnotationMode, Rule
from pegcmp.peg.engine import Engine, Node
from pegcmp.peg.meta_grammar import ANNOTATED_GRAMMAR, GRAMMAR
from pegcmp.peg.strip import remove_spans, strip

Identifier = NewType("Identifier", str)
CanonicalText = NewType("CanonicalText", str)

_ENGINES = {
    AnnotationMode.REJECT: Engine(GRAMMAR),
    AnnotationMode.SKIP: Engine(ANNOTATED_GRAMMAR),
}


class GrammarTransformer:
    """Build rules from the parse tree of one grammar file.

    Each method handles the node of the production it is named after.
    """

    def __init__(self, source: str, filename: str) -> None:
        self.source = source
        self.filename = filename

    def grammar(self, node: Node) -> tuple[Rule, ...]:
        return tuple(self.definition(child) for child in node.find_all("Definition"))

    def definition(self, node: Node) -> Rule:
        return Rule(
            name=self.identifier(node.child("Identifier")),
            expr=self.expression(node.child("Expression")),
            text=node.text(self.source),
            pos=node.start.to_pos(self.filename),
        )

    def identifier(self, node: Node) -> Identifier:
        return Identifier(node.child("Name").text(self.source))

    def expression(self, node: Node) -> CanonicalText:
        text = node.text(self.source)
        base = node.start.index
        actions = [
            (action.start.index - base, action.end.index - base)
            for action in node.find_all("ActionBody")
        ]
        if actions:
            text = remove_spans(text, actions)
        try:
            return CanonicalText(strip(text))
        except UnterminatedCommentError as exc:
            # Offsets past a removed action are approximate.
            at = node.start.advance(text[: exc.index])
            raise GrammarParseError(
                self.filename,
                line=at.line,
                col=at.col,
                offset=at.offset,
                detail="unterminated comment",
            ) from exc


class GrammarParser:
    def __init__(self, annotations: AnnotationMode = AnnotationMode.REJECT) -> None:
        self._engine = _ENGINES[annotations]

    def parse(self, source: str, filename: str = "") -> tuple[Rule, ...]:
        tree = self._engine.parse(source, filename)
        return GrammarTransformer(source, filename).grammar(tree)


def parse_grammar(
    source: str,
    filename: str = "",
    annotations: AnnotationMode = AnnotationMode.REJECT,
) -> tuple[Rule, ...]:
    return GrammarParser(annotations).parse(source, filename)
