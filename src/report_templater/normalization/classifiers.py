"""Line classification helpers for generated markdown.

Each line of a template is implicitly one of the ``LineKind`` values.  The
passes use these helpers to decide which lines they may touch.
"""

from enum import Enum

from report_templater.normalization.patterns import CODE_FENCE_RE, KEY_VALUE_RE, URL_RE
from report_templater.tables.patterns import is_separator_row, is_table_line


class LineKind(str, Enum):
    HEADING = "heading"
    KEY_VALUE = "key-value"
    TABLE_ROW = "table-row"
    TABLE_SEPARATOR = "table-separator"
    CODE_FENCE = "code-fence"
    PROSE = "prose"
    BLANK = "blank"


def is_blank(line: str) -> bool:
    return line.strip() == ""


def is_heading(line: str) -> bool:
    return line.strip().startswith("#")


def is_bold_line(line: str) -> bool:
    """Return True for lines that already open with bold markup."""
    return line.strip().startswith("**")


def is_code_fence(line: str) -> bool:
    return bool(CODE_FENCE_RE.match(line.strip()))


def has_url(line: str) -> bool:
    return bool(URL_RE.search(line))


def classify_line(line: str) -> LineKind:
    """Return the kind of a single line, ignoring code-block context."""
    if is_blank(line):
        return LineKind.BLANK
    if is_code_fence(line):
        return LineKind.CODE_FENCE
    if is_separator_row(line):
        return LineKind.TABLE_SEPARATOR
    if is_table_line(line):
        return LineKind.TABLE_ROW
    if is_heading(line):
        return LineKind.HEADING
    if KEY_VALUE_RE.match(line) or KEY_VALUE_RE.match(line.replace("**", "")):
        return LineKind.KEY_VALUE
    return LineKind.PROSE


def code_block_flags(lines: list[str]) -> list[bool]:
    """Return, per line, whether it is a fence marker or sits inside a fenced block."""
    flags: list[bool] = []
    in_code = False
    for line in lines:
        if is_code_fence(line):
            flags.append(True)
            in_code = not in_code
            continue
        flags.append(in_code)
    return flags
