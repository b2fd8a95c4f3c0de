"""Put section headings and known sub-labels on lines of their own.

'## Section 7-Handling and Storage Handling: Keep container closed' becomes

    ## Section 7-Handling and Storage

    **Handling:**
    Keep container closed

and an unbolded 'Storage: Cool, dry place' at line start becomes
'**Storage:**' followed by 'Cool, dry place'.  Content lines are themselves
split again if they open with another known sub-label.
"""

import logging
import re

from report_templater.config import DEFAULT_CONFIG, PipelineConfig
from report_templater.normalization.classifiers import code_block_flags, is_bold_line
from report_templater.normalization.patterns import (
    TRAILING_LABEL_RE,
    section_heading_re,
    section_heading_split_re,
    sub_label_re,
)
from report_templater.tables.patterns import is_table_line

logger = logging.getLogger(__name__)


def _split_sub_labels(text: str, pattern: re.Pattern | None) -> list[str]:
    """Peel leading known sub-labels off *text* into bold label lines."""
    out: list[str] = []
    while pattern is not None and not is_bold_line(text):
        match = pattern.match(text.strip())
        if not match:
            break
        out.append(f"**{match.group(1)}:**")
        text = match.group(2).strip()
        if not text:
            return out
    out.append(text)
    return out


def split_heading(line: str, config: PipelineConfig = DEFAULT_CONFIG) -> list[str] | None:
    """Return the replacement lines for a heading carrying trailing prose, else None."""
    stripped = line.strip()
    if not section_heading_re(config.section_marker).match(stripped):
        return None
    match = section_heading_split_re(config.section_marker).match(stripped)
    if not match:
        return None

    out = [match.group(1).rstrip(), ""]
    rest = match.group(2).strip()
    label_match = TRAILING_LABEL_RE.match(rest)
    if not label_match:
        out.append(rest)
        return out

    out.append(f"**{label_match.group(1)}:**")
    content = label_match.group(2).strip()
    if content:
        out.extend(_split_sub_labels(content, _labels_pattern(config)))
    return out


def split_sub_label(line: str, config: PipelineConfig = DEFAULT_CONFIG) -> list[str] | None:
    """Return the replacement lines for an unbolded known sub-label line, else None."""
    pattern = _labels_pattern(config)
    if pattern is None or is_bold_line(line) or not pattern.match(line.strip()):
        return None
    return _split_sub_labels(line.strip(), pattern)


def _labels_pattern(config: PipelineConfig) -> re.Pattern | None:
    return sub_label_re(tuple(config.sub_labels)) if config.sub_labels else None


def run(lines: list[str], config: PipelineConfig = DEFAULT_CONFIG) -> list[str]:
    """Split headings and sub-labels onto their own lines; other lines pass through."""
    in_code = code_block_flags(lines)
    out: list[str] = []
    changed = 0

    for idx, line in enumerate(lines):
        replacement = None if in_code[idx] else (split_heading(line, config) or split_sub_label(line, config))
        if replacement is None:
            out.append(line)
            continue

        changed += 1
        out.extend(replacement)
        # Keep split-off prose from touching a table that follows it
        next_line = lines[idx + 1] if idx + 1 < len(lines) else ""
        if is_table_line(next_line) and out[-1].strip() and not is_bold_line(out[-1]):
            out.append("")

    if changed:
        logger.info("Split %d heading / sub-label lines", changed)
    return out
