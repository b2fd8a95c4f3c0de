"""Group positioned text fragments into ordered, stable lines per page.

Fragment coordinates jitter in the last decimal places depending on the
machine and the PDF library that produced them, so every comparison here is
done on rounded values with an epsilon tolerance.  Reading order is
top-to-bottom (Y descending, PDF user space) then left-to-right.

Usage:
    python -m report_templater.layout.extract fragments.json
"""

import json
import logging
import re
import sys
from concurrent.futures import ThreadPoolExecutor
from functools import cmp_to_key
from typing import Any, Iterable

from report_templater.config import DEFAULT_CONFIG, PipelineConfig
from report_templater.layout.schema import GlyphRun, PageLayout, TextLine

logger = logging.getLogger(__name__)

PAGE_MARKER = "\n\n--- Page {n} ---\n\n"

# Two or more whitespace characters; single spaces survive as column hints
MULTI_SPACE_RE = re.compile(r"\s{2,}")


# ─── Fragment Coercion ───────────────────────────────────────────────────────


def to_glyph_run(fragment: Any, page: int = 1) -> GlyphRun:
    """Build a GlyphRun from a GlyphRun, a dict, or a ``(text, x, y)`` sequence."""
    if isinstance(fragment, GlyphRun):
        return fragment
    if isinstance(fragment, dict):
        text = fragment.get("text", fragment.get("str", ""))
        return GlyphRun(text=text, x=fragment.get("x"), y=fragment.get("y"), page=page)
    if isinstance(fragment, (list, tuple)):
        padded = list(fragment) + [None] * (3 - len(fragment))
        return GlyphRun(text=padded[0], x=padded[1], y=padded[2], page=page)
    # Anything else is treated as bare text with unknown position
    return GlyphRun(text=fragment, x=None, y=None, page=page)


# ─── Sorting ─────────────────────────────────────────────────────────────────


def _round_run(run: GlyphRun, decimals: int) -> GlyphRun:
    return run.model_copy(update={"x": round(run.x, decimals), "y": round(run.y, decimals)})


def _make_comparator(epsilon: float):
    """Y descending, then X ascending; Y values closer than *epsilon* count as equal."""

    def compare(left: GlyphRun, right: GlyphRun) -> int:
        dy = right.y - left.y
        if abs(dy) >= epsilon:
            return 1 if dy > 0 else -1
        dx = left.x - right.x
        if dx == 0:
            return 0
        return 1 if dx > 0 else -1

    return compare


def sort_runs(runs: Iterable[GlyphRun], config: PipelineConfig = DEFAULT_CONFIG) -> list[GlyphRun]:
    """Round coordinates and return runs in reading order.

    A total-order pre-sort fixes the starting permutation, so the (stable)
    epsilon sort yields the same result whatever order the runs arrived in.
    """
    rounded = [_round_run(run, config.coordinate_decimals) for run in runs]
    rounded.sort(key=lambda run: (-run.y, run.x, run.text))
    rounded.sort(key=cmp_to_key(_make_comparator(config.y_epsilon)))
    return rounded


# ─── Line Grouping ───────────────────────────────────────────────────────────


def estimate_line_gap(runs: list[GlyphRun], config: PipelineConfig = DEFAULT_CONFIG) -> float:
    """Return the page's line-break threshold from its smallest real Y gap.

    Gaps at or below the noise floor are ignored; the smallest remaining gap is
    the estimated single-line spacing, clamped to [min_line_gap, max_line_gap].
    """
    gaps = [
        abs(prev.y - cur.y) for prev, cur in zip(runs, runs[1:]) if abs(prev.y - cur.y) > config.gap_noise_floor
    ]
    if not gaps:
        return config.default_line_gap
    return min(max(min(gaps), config.min_line_gap), config.max_line_gap)


def group_lines(runs: list[GlyphRun], config: PipelineConfig = DEFAULT_CONFIG) -> list[TextLine]:
    """Walk sorted runs and cut a new line whenever the Y gap reaches the threshold.

    The gap is measured from the first run of the current line.  A gap within
    ``y_epsilon`` of the threshold counts as a break.
    """
    threshold = estimate_line_gap(runs, config)
    lines: list[TextLine] = []
    current: TextLine | None = None

    for run in runs:
        if current is None or abs(current.y - run.y) > threshold - config.y_epsilon:
            current = TextLine(y=run.y, parts=[])
            lines.append(current)
        current.parts.append(run.text)

    logger.debug("Grouped %d runs into %d lines (threshold %.2f)", len(runs), len(lines), threshold)
    return lines


def clean_line_text(text: str) -> str:
    """Collapse whitespace runs to one space and trim the ends."""
    return MULTI_SPACE_RE.sub(" ", text).strip()


# ─── Page / Document Extraction ──────────────────────────────────────────────


def layout_page(fragments: Iterable[Any], number: int, config: PipelineConfig = DEFAULT_CONFIG) -> PageLayout:
    """Lay out one page's fragments as ordered TextLines."""
    runs = [to_glyph_run(fragment, page=number) for fragment in fragments or []]
    runs = [run for run in runs if run.text.strip()]
    return PageLayout(number=number, lines=group_lines(sort_runs(runs, config), config))


def page_text(page: PageLayout) -> str:
    """Join a page's lines with newlines, dropping lines that clean to nothing."""
    texts = (clean_line_text(line.text) for line in page.lines)
    return "\n".join(text for text in texts if text)


def extract_text(
    pages: Iterable[Iterable[Any]],
    config: PipelineConfig = DEFAULT_CONFIG,
    max_workers: int | None = None,
) -> str:
    """Convert pages of positioned fragments into one plain-text blob.

    Each page is prefixed with a ``--- Page N ---`` marker (1-based).  Empty
    pages keep their marker so later page numbers do not shift.  With
    *max_workers* > 1, pages are laid out in a thread pool; output order is
    always page order.
    """
    numbered = list(enumerate(pages, start=1))

    def _layout(item: tuple[int, Iterable[Any]]) -> PageLayout:
        number, fragments = item
        return layout_page(fragments, number, config)

    if max_workers and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            layouts = list(pool.map(_layout, numbered))
    else:
        layouts = [_layout(item) for item in numbered]

    logger.info("Extracted %d pages (%d lines)", len(layouts), sum(len(p.lines) for p in layouts))
    return "".join(PAGE_MARKER.format(n=page.number) + page_text(page) for page in layouts)


def load_fragments(filepath: str) -> list[list[Any]]:
    """Load a JSON list of pages, each a list of fragments."""
    with open(filepath, "r", encoding="utf-8") as fopen:
        return json.load(fopen)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    sys.stdout.write(extract_text(load_fragments(sys.argv[1])))
