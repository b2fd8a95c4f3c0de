"""Bold the label of every short 'Label: Value' line.

'Handling: Keep cool' -> '**Handling**: Keep cool'

Table regions (from a '|' line until the next blank line), fenced code,
headings, already-bolded lines and lines containing a URL pass through
unchanged, as do labels longer than ``key_value_max_words`` words.
"""

import logging

from report_templater.config import DEFAULT_CONFIG, PipelineConfig
from report_templater.normalization.classifiers import LineKind, classify_line, has_url, is_bold_line, is_heading
from report_templater.normalization.patterns import KEY_VALUE_RE

logger = logging.getLogger(__name__)

TABLE_KINDS = (LineKind.TABLE_ROW, LineKind.TABLE_SEPARATOR)


def bold_key_value(line: str, config: PipelineConfig = DEFAULT_CONFIG) -> str | None:
    """Return the bolded form of a 'Label: Value' line, or None if it does not qualify."""
    if is_heading(line) or is_bold_line(line) or has_url(line):
        return None
    match = KEY_VALUE_RE.match(line)
    if not match:
        return None
    indent, label, value = match.groups()
    label = label.strip()
    if len(label.split()) > config.key_value_max_words:
        return None
    return f"{indent}**{label}**: {value}"


def run(lines: list[str], config: PipelineConfig = DEFAULT_CONFIG) -> list[str]:
    """Bold key-value labels outside tables and code blocks."""
    out: list[str] = []
    in_table = False
    in_code = False
    changed = 0

    for line in lines:
        kind = classify_line(line)
        if kind is LineKind.CODE_FENCE:
            in_code = not in_code
            out.append(line)
            continue
        if in_code:
            out.append(line)
            continue

        if kind in TABLE_KINDS:
            in_table = True
        elif in_table and kind is LineKind.BLANK:
            in_table = False
        if in_table or kind is not LineKind.KEY_VALUE:
            out.append(line)
            continue

        bolded = bold_key_value(line, config)
        if bolded is None:
            out.append(line)
        else:
            changed += 1
            out.append(bolded)

    if changed:
        logger.info("Bolded %d key-value labels", changed)
    return out
