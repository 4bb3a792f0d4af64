from pathlib import Path
from typing import Any, Sequence


class PegcmpError(Exception):
    """Base user-facing application error."""


class PegcmpFileError(PegcmpError):
    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        self.message = message
        super().__init__(f"{message}: {path}")


class GrammarReadError(PegcmpFileError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot read grammar ({detail})")


class GrammarParseError(PegcmpError):
    """Syntax error in a grammar file, reported at the farthest failure."""

    def __init__(
        self,
        path: Path | str,
        line: int,
        col: int,
        offset: int,
        expected: Sequence[str] = (),
        detail: str = "no match found",
    ) -> None:
        self.path = Path(path)
        self.line = line
        self.col = col
        self.offset = offset
        self.expected = tuple(expected)
        self.detail = detail
        message = detail
        if self.expected:
            message = f"{detail}, expected {' or '.join(self.expected)}"
        self.message = message
        super().__init__(f"{path}:{line}:{col} ({offset}): {message}")


class DuplicateRuleError(PegcmpFileError):
    def __init__(self, path: Path | str, conflicts: Sequence[Any]) -> None:
        self.conflicts = tuple(conflicts)
        count = len(self.conflicts)
        noun = "rule does" if count == 1 else "rules do"
        super().__init__(path=path, message=f"{count} duplicate {noun} not match")


class MissingConfigFileError(PegcmpFileError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(path=path, message="Missing config file")


class InvalidYamlFormatError(PegcmpFileError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(PegcmpFileError):
    def __init__(self, path: Path | str, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class UnterminatedCommentError(PegcmpError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"unterminated comment at index {index}")
