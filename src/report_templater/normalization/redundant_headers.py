"""Remove loose text lines that echo the header of the table right below them.

The structuring model sometimes emits the table's column names as a plain
line ("NO. INCI Name CAS NO. Weight") and then the real pipe table.  A line
is deleted only when every condition holds:

  - it is not a table row, code fence, heading, or bold line (nor inside a code block)
  - it contains at least ``redundant_header_min_keywords`` lexicon keywords
  - it has at most ``redundant_header_max_tokens`` whitespace-separated tokens
  - it contains no pipe
  - apart from its keywords it is only uppercase letters, digits, spaces and . % ( ) : -
  - the next kept line is a real table header (pipe row + separator)

Lines are scanned bottom-up against the already-kept lines, so a stack of
echo lines above one table disappears in a single pass.
"""

import logging

from report_templater.config import DEFAULT_CONFIG, PipelineConfig
from report_templater.normalization.classifiers import (
    code_block_flags,
    is_blank,
    is_bold_line,
    is_code_fence,
    is_heading,
)
from report_templater.normalization.patterns import HEADER_ECHO_REST_RE
from report_templater.tables.detection import is_table_header_at
from report_templater.tables.patterns import is_table_line

logger = logging.getLogger(__name__)


def is_header_echo(line: str, config: PipelineConfig = DEFAULT_CONFIG) -> bool:
    """Return True if *line* looks like a table header written as loose text."""
    stripped = line.strip()
    if is_blank(stripped) or is_table_line(stripped) or is_code_fence(stripped):
        return False
    if is_heading(stripped) or is_bold_line(stripped) or "|" in stripped:
        return False
    if len(stripped.split()) > config.redundant_header_max_tokens:
        return False

    # Only word-like keyword hits count; a row of bare "%" values is data
    hits = [m for m in config.keyword_pattern.findall(stripped) if any(ch.isalpha() for ch in m)]
    if len(hits) < config.redundant_header_min_keywords:
        return False

    rest = config.keyword_pattern.sub(" ", stripped)
    return bool(HEADER_ECHO_REST_RE.match(rest))


def run(lines: list[str], config: PipelineConfig = DEFAULT_CONFIG) -> list[str]:
    """Return *lines* without header-echo lines sitting directly above a table."""
    in_code = code_block_flags(lines)
    kept: list[tuple[str, bool]] = []  # reversed output: (line, in_code)
    removed = 0

    for idx in range(len(lines) - 1, -1, -1):
        line = lines[idx]
        if not in_code[idx] and len(kept) >= 2 and not kept[-1][1] and not kept[-2][1]:
            following = [kept[-1][0], kept[-2][0]]
            if is_table_header_at(following, 0) and is_header_echo(line, config):
                logger.debug("Removing echoed table header: %r", line)
                removed += 1
                continue
        kept.append((line, in_code[idx]))

    if removed:
        logger.info("Removed %d redundant table-header lines", removed)
    return [line for line, _ in reversed(kept)]
