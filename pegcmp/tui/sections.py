from rich.console import RenderableType
from rich.panel import Panel

from pegcmp.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body: RenderableType, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))
