from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional


class DiagnosticKind(str, Enum):
    NOT_FOUND = "not found"
    MISMATCH = "does not match"
    DUPLICATE_MISMATCH = "duplicate rule does not match"


class AnnotationMode(str, Enum):
    REJECT = "reject"
    SKIP = "skip"


@dataclass(frozen=True)
class Pos:
    filename: str
    line: int
    col: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.col}"


@dataclass(frozen=True)
class Rule:
    name: str
    expr: str
    text: str
    pos: Pos


@dataclass(frozen=True)
class Grammar:
    """Rules of one grammar file, in source order."""

    path: Path
    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    rule: Rule
    other: Optional[Rule] = None

    @property
    def name(self) -> str:
        return self.rule.name

    def lines(self) -> list[str]:
        lines = [
            f'! rule "{self.rule.name}" {self.kind.value}',
            f"> {self.rule.pos}",
            f"> {self.rule.expr}",
        ]
        if self.other is not None:
            lines.append(f"< {self.other.pos}")
            lines.append(f"< {self.other.expr}")
        return lines


@dataclass(frozen=True)
class Conflict:
    first: Rule
    duplicate: Rule

    @property
    def name(self) -> str:
        return self.first.name

    def as_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.DUPLICATE_MISMATCH,
            rule=self.duplicate,
            other=self.first,
        )


@dataclass
class ValidationResult:
    path: Path
    conflicts: list[Conflict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.conflicts

    def diagnostics(self) -> list[Diagnostic]:
        return [conflict.as_diagnostic() for conflict in self.conflicts]


@dataclass
class ComparisonReport:
    reference: Path
    candidate: Path
    checked: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return bool(self.diagnostics)

    def summary(self) -> dict[str, int]:
        counts = {kind.value: 0 for kind in DiagnosticKind}
        for diagnostic in self.diagnostics:
            counts[diagnostic.kind.value] += 1
        counts["checked"] = self.checked
        counts["diagnostics"] = len(self.diagnostics)
        return counts
