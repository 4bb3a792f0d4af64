"""
The grammar of PEG grammar files, expressed as data for the engine:

    Grammar    <- Spacing Definition+ EndOfFile
    Definition <- Identifier LEFTARROW Expression
    Expression <- Sequence (SLASH Sequence)*
    Sequence   <- Prefix*
    Prefix     <- (AND / NOT)? Suffix
    Suffix     <- Primary (QUESTION / STAR / PLUS)?
    Primary    <- Identifier !LEFTARROW / OPEN Expression CLOSE
                / Literal / Class / DOT

``ANNOTATED_GRAMMAR`` additionally accepts one brace-delimited action block
at the end of each sequence.
"""

from pegcmp.peg.expressions import (
    AltExpr,
    ConcatExpr,
    LookaheadExpr,
    MaybeExpr,
    PegGrammar,
    PlusExpr,
    RegexExpr,
    RuleExpr,
    StarExpr,
)


def _token(text: str) -> ConcatExpr:
    return ConcatExpr((RegexExpr.literal(text), RuleExpr("Spacing")))


def _quoted(quote: str) -> ConcatExpr:
    return ConcatExpr(
        (
            RegexExpr.literal(quote),
            StarExpr(
                ConcatExpr((LookaheadExpr(RegexExpr.literal(quote)), RuleExpr("Char")))
            ),
            RegexExpr.literal(quote),
            RuleExpr("Spacing"),
        )
    )


TOKENS = frozenset(
    {
        "Identifier",
        "Literal",
        "Class",
        "LEFTARROW",
        "SLASH",
        "AND",
        "NOT",
        "QUESTION",
        "STAR",
        "PLUS",
        "OPEN",
        "CLOSE",
        "DOT",
        "EndOfFile",
        "Action",
    }
)

GRAMMAR = PegGrammar(
    start_rule="Grammar",
    tokens=TOKENS,
    rules={
        "Grammar": ConcatExpr(
            (
                RuleExpr("Spacing"),
                PlusExpr(RuleExpr("Definition")),
                RuleExpr("EndOfFile"),
            )
        ),
        "Definition": ConcatExpr(
            (RuleExpr("Identifier"), RuleExpr("LEFTARROW"), RuleExpr("Expression"))
        ),
        "Expression": ConcatExpr(
            (
                RuleExpr("Sequence"),
                StarExpr(ConcatExpr((RuleExpr("SLASH"), RuleExpr("Sequence")))),
            )
        ),
        "Sequence": StarExpr(RuleExpr("Prefix")),
        "Prefix": ConcatExpr(
            (
                MaybeExpr(AltExpr((RuleExpr("AND"), RuleExpr("NOT")))),
                RuleExpr("Suffix"),
            )
        ),
        "Suffix": ConcatExpr(
            (
                RuleExpr("Primary"),
                MaybeExpr(
                    AltExpr((RuleExpr("QUESTION"), RuleExpr("STAR"), RuleExpr("PLUS")))
                ),
            )
        ),
        "Primary": AltExpr(
            (
                ConcatExpr(
                    (RuleExpr("Identifier"), LookaheadExpr(RuleExpr("LEFTARROW")))
                ),
                ConcatExpr(
                    (RuleExpr("OPEN"), RuleExpr("Expression"), RuleExpr("CLOSE"))
                ),
                RuleExpr("Literal"),
                RuleExpr("Class"),
                RuleExpr("DOT"),
            )
        ),
        # Lexical syntax
        "Identifier": ConcatExpr((RuleExpr("Name"), RuleExpr("Spacing"))),
        "Name": RegexExpr.of(r"[A-Za-z_][A-Za-z0-9_]*"),
        "Literal": AltExpr((_quoted("'"), _quoted('"'))),
        "Class": ConcatExpr(
            (
                RegexExpr.literal("["),
                StarExpr(
                    ConcatExpr((LookaheadExpr(RegexExpr.literal("]")), RuleExpr("Range")))
                ),
                RegexExpr.literal("]"),
                RuleExpr("Spacing"),
            )
        ),
        "Range": AltExpr(
            (
                ConcatExpr((RuleExpr("Char"), RegexExpr.literal("-"), RuleExpr("Char"))),
                RuleExpr("Char"),
            )
        ),
        "Char": AltExpr(
            (
                RegexExpr.of(r"\\[nrt'\"\[\]\\]"),
                RegexExpr.of(r"\\[0-7]{1,3}"),
                ConcatExpr((LookaheadExpr(RegexExpr.literal("\\")), RegexExpr.of(r"."))),
            )
        ),
        "LEFTARROW": _token("<-"),
        "SLASH": _token("/"),
        "AND": _token("&"),
        "NOT": _token("!"),
        "QUESTION": _token("?"),
        "STAR": _token("*"),
        "PLUS": _token("+"),
        "OPEN": _token("("),
        "CLOSE": _token(")"),
        "DOT": _token("."),
        "Spacing": StarExpr(AltExpr((RuleExpr("Space"), RuleExpr("Comment")))),
        "Comment": ConcatExpr(
            (
                RegexExpr.literal("#"),
                RegexExpr.of(r"[^\r\n]*"),
                RuleExpr("EndOfLine"),
            )
        ),
        "Space": AltExpr((RegexExpr.of(r"[ \t]"), RuleExpr("EndOfLine"))),
        "EndOfLine": RegexExpr.of(r"\r\n|\n|\r"),
        "EndOfFile": LookaheadExpr(RegexExpr.of(r".")),
    },
)

ANNOTATED_GRAMMAR = GRAMMAR.with_rules(
    Sequence=ConcatExpr((StarExpr(RuleExpr("Prefix")), MaybeExpr(RuleExpr("Action")))),
    Action=ConcatExpr((RuleExpr("ActionBody"), RuleExpr("Spacing"))),
    ActionBody=ConcatExpr(
        (RegexExpr.literal("{"), RuleExpr("ActionCode"), RegexExpr.literal("}"))
    ),
    ActionCode=StarExpr(
        AltExpr(
            (
                RegexExpr.of(r"[^{}]+"),
                ConcatExpr(
                    (RegexExpr.literal("{"), RuleExpr("ActionCode"), RegexExpr.literal("}"))
                ),
            )
        )
    ),
)
