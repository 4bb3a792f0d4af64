from typing import Final


PROGRAM_NAME: Final[str] = "pegcmp"
CONFIG_FILENAME: Final[str] = ".pegcmp.yaml"
CONFIG_ENVVAR: Final[str] = "PEGCMP_CONFIG"

EXIT_OK: Final[int] = 0
EXIT_FATAL: Final[int] = 1
EXIT_DIFFERENCES: Final[int] = 3

COMMENT_MARKER: Final[str] = "#"
LINE_BREAK: Final[str] = r"\r\n|\r|\n"
