from pegcmp.peg.engine import Engine, Node
from pegcmp.peg.parser import GrammarParser, GrammarTransformer, parse_grammar
from pegcmp.peg.position import Cursor
from pegcmp.peg.strip import remove_spans, strip

__all__ = [
    "Cursor",
    "Engine",
    "GrammarParser",
    "GrammarTransformer",
    "Node",
    "parse_grammar",
    "remove_spans",
    "strip",
]
