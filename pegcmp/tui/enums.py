from enum import Enum

from pegcmp.models import DiagnosticKind


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


DIAGNOSTIC_KIND_STYLE = {
    DiagnosticKind.NOT_FOUND: UIStyle.YELLOW.value,
    DiagnosticKind.MISMATCH: UIStyle.RED.value,
    DiagnosticKind.DUPLICATE_MISMATCH: UIStyle.RED.value,
}
