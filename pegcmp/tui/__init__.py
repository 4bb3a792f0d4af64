from pegcmp.tui.renderers import PegcmpConsoleUI

__all__ = ["PegcmpConsoleUI"]
