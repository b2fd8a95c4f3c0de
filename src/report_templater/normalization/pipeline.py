"""Normalization pipeline for markdown produced by the structuring model.

The model's output is non-deterministic; these passes repair it into
canonical markdown.  Order matters, each pass relies on the previous ones:
  1. redundant_headers  -- drop loose lines echoing the next table's header
  2. section_headings   -- split headings / sub-labels onto their own lines
  3. key_values         -- bold 'Label: Value' labels

Every pass, and the pipeline as a whole, is idempotent, never reorders
lines, and never touches a table row.

Usage:
    python -m report_templater.normalization.pipeline template.md
"""

import logging
import sys
from typing import Callable

from report_templater.config import DEFAULT_CONFIG, PipelineConfig
from report_templater.normalization import key_values, redundant_headers, section_headings

logger = logging.getLogger(__name__)

Pass = Callable[[list[str], PipelineConfig], list[str]]

PASSES: list[tuple[str, Pass]] = [
    ("redundant_headers", redundant_headers.run),
    ("section_headings", section_headings.run),
    ("key_values", key_values.run),
]


def normalize_lines(lines: list[str], config: PipelineConfig = DEFAULT_CONFIG) -> list[str]:
    """Run every pass over a copy of *lines* and return the canonical lines."""
    output = list(lines)
    for name, step in PASSES:
        before = len(output)
        output = step(output, config)
        logger.debug("After %s: %d -> %d lines", name, before, len(output))
    return output


def normalize_markdown(content: str, config: PipelineConfig = DEFAULT_CONFIG) -> str:
    """Text-in / text-out form of the pipeline (CRLF line endings become LF)."""
    lines = content.replace("\r\n", "\n").split("\n")
    return "\n".join(normalize_lines(lines, config))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    with open(sys.argv[1], "r", encoding="utf-8") as fopen:
        sys.stdout.write(normalize_markdown(fopen.read()))
