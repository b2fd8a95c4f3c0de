"""Prefill, review, and substitute placeholder values in a finished template.

Prefill sources, in priority order, for each placeholder still empty:
  1. a key/value pair from the source data whose normalised key equals the name
  2. a key matching one of the name's configured aliases
  3. the template's own default, only for placeholders in "Section N" with N >= 2
     (earlier sections hold product- and company-specific values)
"""

import logging
import math
import re
from typing import Any

from report_templater.config import DEFAULT_CONFIG, PipelineConfig
from report_templater.placeholders.extract import PLACEHOLDER_RE

logger = logging.getLogger(__name__)

# Separators ignored when comparing keys, including full-width CJK forms
KEY_NOISE_RE = re.compile(r"[\s_\-:：()（）]")

SECTION_NUMBER_RE = re.compile(r"Section\s+(\d+)", re.IGNORECASE)


def normalize_key(value: str) -> str:
    """'Product Name:' -> 'productname'."""
    return KEY_NOISE_RE.sub("", value.lower())


def section_number(section: str | None) -> int | None:
    """Return N for a 'Section N-...' heading, else None."""
    if not section:
        return None
    match = SECTION_NUMBER_RE.search(section)
    return int(match.group(1)) if match else None


def prefill_values(
    names: list[str],
    key_values: dict[str, str] | None = None,
    defaults: dict[str, str] | None = None,
    sections: dict[str, str] | None = None,
    existing: dict[str, str] | None = None,
    config: PipelineConfig = DEFAULT_CONFIG,
) -> dict[str, str]:
    """Return a value (possibly "") for every name; non-empty *existing* values win."""
    existing = existing or {}
    defaults = defaults or {}
    sections = sections or {}

    lookup: dict[str, str] = {}
    for key, value in (key_values or {}).items():
        lookup.setdefault(normalize_key(str(key)), str(value))

    values: dict[str, str] = {}
    for name in names:
        value = existing.get(name) or lookup.get(normalize_key(name), "")
        if not value:
            for alias in config.placeholder_aliases.get(name, []):
                value = lookup.get(normalize_key(alias), "")
                if value:
                    break
        if not value:
            number = section_number(sections.get(name))
            if number is not None and number >= 2 and defaults.get(name, "").strip():
                value = defaults[name]
        values[name] = value

    logger.info("Prefilled %d/%d placeholders", sum(1 for v in values.values() if v), len(values))
    return values


def as_text(value: Any) -> str:
    """Render a supplied value as text; None becomes ""."""
    return "" if value is None else str(value)


def fill_no_data(values: dict[str, Any], config: PipelineConfig = DEFAULT_CONFIG) -> dict[str, str]:
    """Mark every blank value with ``config.no_data_value``."""
    texts = {name: as_text(value) for name, value in values.items()}
    return {name: text if text.strip() else config.no_data_value for name, text in texts.items()}


def estimate_pages(content: str, config: PipelineConfig = DEFAULT_CONFIG) -> int:
    """Rough A4 page count from the character count (never below 1)."""
    return max(1, math.ceil(len(content) / config.chars_per_page))


def fill_template(content: str, values: dict[str, Any], config: PipelineConfig = DEFAULT_CONFIG) -> str:
    """Substitute every placeholder in a single pass over the template.

    Missing or blank values become ``config.no_data_value``.  Values are
    inserted verbatim: a value that itself contains ``{{...}}`` is not
    substituted again.  The page total is estimated from the content with the
    user values in place and the page counters still unfilled.
    """
    auto = set(config.auto_placeholders)

    def user_value(name: str) -> str:
        text = as_text(values.get(name))
        return text if text.strip() else config.no_data_value

    def keep_counters(match: re.Match) -> str:
        name = match.group(1)
        return match.group(0) if name in auto else user_value(name)

    total_pages = str(estimate_pages(PLACEHOLDER_RE.sub(keep_counters, content), config))
    counters = {config.total_pages_placeholder: total_pages, config.current_page_placeholder: "1"}

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        return counters[name] if name in counters else user_value(name)

    return PLACEHOLDER_RE.sub(substitute, content)
