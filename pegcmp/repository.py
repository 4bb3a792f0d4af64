"""Load grammar files from disk."""

from __future__ import annotations

from pathlib import Path

from pegcmp.errors import GrammarReadError
from pegcmp.models import AnnotationMode, Grammar
from pegcmp.peg.parser import GrammarParser


class GrammarRepository:
    def __init__(self, annotations: AnnotationMode = AnnotationMode.REJECT) -> None:
        self._parser = GrammarParser(annotations)

    def read(self, path: Path) -> str:
        try:
            with path.open("rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise GrammarReadError(path, exc.strerror or str(exc)) from exc
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise GrammarReadError(path, f"not UTF-8 at byte {exc.start}") from exc

    def load(self, path: Path) -> Grammar:
        source = self.read(path)
        rules = self._parser.parse(source, str(path))
        return Grammar(path=path, rules=rules)
