"""Pydantic models for positioned text extracted from a page.

Malformed coordinates are recovered here rather than raised: a missing or
non-numeric ``x``/``y`` becomes 0.0 so that one bad fragment never aborts the
extraction of its page.
"""

import logging
import math

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)


class GlyphRun(BaseModel):
    """Smallest unit of extracted text: a string at an (x, y) position on a page."""

    text: str
    x: float = 0.0
    y: float = 0.0
    page: int = 1

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return "" if value is None else str(value)

    @field_validator("x", "y", mode="before")
    @classmethod
    def coerce_coordinate(cls, value):
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                pass
        # bool is an int subclass but never a real coordinate
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            if value is not None:
                logger.debug("Non-numeric coordinate %r replaced with 0", value)
            return 0.0
        if not math.isfinite(value):
            logger.debug("Non-finite coordinate %r replaced with 0", value)
            return 0.0
        return float(value)


class TextLine(BaseModel):
    """Fragments merged into one visual line, tagged with the line's reference Y."""

    y: float
    parts: list[str]

    @property
    def text(self) -> str:
        return " ".join(self.parts)


class PageLayout(BaseModel):
    """Ordered lines of a single page (1-based ``number``)."""

    number: int
    lines: list[TextLine]
