"""Find {{Name}} placeholders and group them by the heading they first appear under.

A placeholder name is any run of characters other than '}' between double
braces.  Names are unique identifiers: repeats are collapsed and only the
first occurrence decides a placeholder's section.
"""

import logging
import re

from report_templater.config import DEFAULT_CONFIG, PipelineConfig
from report_templater.normalization.classifiers import code_block_flags

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{([^}]+)\}\}")

# Level 2-4 heading; the captured text names the section
SECTION_HEADING_RE = re.compile(r"^#{2,4}\s+(.+)$")


def extract_placeholders(content: str) -> list[str]:
    """Return distinct placeholder names in first-seen order."""
    return list(dict.fromkeys(PLACEHOLDER_RE.findall(content)))


def user_placeholders(names: list[str], config: PipelineConfig = DEFAULT_CONFIG) -> list[str]:
    """Drop placeholders filled automatically at export (page counters)."""
    auto = set(config.auto_placeholders)
    return [name for name in names if name not in auto]


def placeholder_sections(content: str, config: PipelineConfig = DEFAULT_CONFIG) -> dict[str, str]:
    """Map each placeholder name to the section of its first occurrence.

    Placeholders inside a heading line belong to that heading's section;
    those before any heading fall into ``config.default_section``.  Heading
    markup inside a fenced code block does not open a section.
    """
    sections: dict[str, str] = {}
    current = config.default_section
    lines = content.split("\n")
    in_code = code_block_flags(lines)
    for idx, raw_line in enumerate(lines):
        line = raw_line.strip()
        heading = None if in_code[idx] else SECTION_HEADING_RE.match(line)
        if heading:
            current = heading.group(1).strip()
        for name in PLACEHOLDER_RE.findall(line):
            sections.setdefault(name, current)
    return sections


def group_placeholders(
    content: str,
    names: list[str] | None = None,
    config: PipelineConfig = DEFAULT_CONFIG,
) -> dict[str, list[str]]:
    """Group placeholder names by section, sections in order of first appearance.

    *names* restricts (and orders) the placeholders reported; by default every
    placeholder in *content* is included.  Names absent from *content* go to
    the default section.
    """
    sections = placeholder_sections(content, config)
    names = list(sections) if names is None else list(dict.fromkeys(names))

    groups: dict[str, list[str]] = {}
    for name in names:
        groups.setdefault(sections.get(name, config.default_section), []).append(name)

    # Sections appear in document order, not in the order of the names list
    order = list(dict.fromkeys([config.default_section] + list(sections.values())))
    ordered = {section: groups[section] for section in order if section in groups}
    logger.debug("Grouped %d placeholders into %d sections", len(names), len(ordered))
    return ordered
