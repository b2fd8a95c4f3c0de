"""Heuristic mapping of a template's target columns onto source data columns.

Each target is resolved independently, in order, by the first tier that
finds a source column:

  1. exact, case-insensitive equality
  2. same keyword tier (chemical id, quantity, substance, sequence, role)
  3. case-insensitive substring containment, either direction

The result is advisory.  It always holds one entry per target; an empty
string means "unmapped" and must be shown as such for a human to resolve.
"""

import logging

from report_templater.config import DEFAULT_CONFIG, PipelineConfig

logger = logging.getLogger(__name__)


def keyword_tier(name: str, config: PipelineConfig = DEFAULT_CONFIG) -> str | None:
    """Return the name of the first lexicon tier with a keyword in *name*."""
    for tier in config.column_tiers:
        if tier.pattern.search(name):
            return tier.name
    return None


def _exact_match(target: str, sources: list[str]) -> str | None:
    target_low = target.strip().lower()
    return next((src for src in sources if src.strip().lower() == target_low), None)


def _tier_match(target: str, sources: list[str], config: PipelineConfig) -> str | None:
    tier = keyword_tier(target, config)
    if tier is None:
        return None
    return next((src for src in sources if keyword_tier(src, config) == tier), None)


def _containment_match(target: str, sources: list[str]) -> str | None:
    target_low = target.strip().lower()
    if not target_low:
        return None
    for src in sources:
        src_low = src.strip().lower()
        if src_low and (src_low in target_low or target_low in src_low):
            return src
    return None


def map_columns(
    target_headers: list[str],
    source_headers: list[str],
    config: PipelineConfig = DEFAULT_CONFIG,
) -> dict[str, str]:
    """Map every target header to a source header, or to "" when nothing fits."""
    sources = list(source_headers)
    mapping: dict[str, str] = {}
    for target in target_headers:
        match = (
            _exact_match(target, sources)
            or _tier_match(target, sources, config)
            or _containment_match(target, sources)
        )
        mapping[target] = match or ""
        logger.debug("Column %r -> %r", target, mapping[target])

    logger.info("Mapped %d/%d target columns", sum(1 for v in mapping.values() if v), len(mapping))
    return mapping


def unmapped_targets(mapping: dict[str, str]) -> list[str]:
    """Return targets left unmapped, in mapping order."""
    return [target for target, source in mapping.items() if not source]


def apply_overrides(
    mapping: dict[str, str],
    overrides: dict[str, str],
    source_headers: list[str],
) -> dict[str, str]:
    """Return a copy of *mapping* with a human's confirmed choices applied.

    An override value of "" clears a mapping.  Overrides naming an unknown
    target or source are logged and skipped.
    """
    result = dict(mapping)
    known_sources = set(source_headers)
    for target, source in overrides.items():
        if target not in result:
            logger.warning("Ignoring override for unknown target column %r", target)
            continue
        if source and source not in known_sources:
            logger.warning("Ignoring override %r -> %r: no such source column", target, source)
            continue
        result[target] = source
    return result
