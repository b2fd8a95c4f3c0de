"""Shared configuration for the layout, table, normalization and placeholder steps.

A single ``PipelineConfig`` object is passed explicitly to every public
operation (``DEFAULT_CONFIG`` when the caller passes nothing).  The keyword
lexicon and the sub-label vocabulary are data, not code, so another document
family can be supported by loading a different JSON file.
"""

import json
import logging
import os
import re
from functools import cached_property
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

CONFIG_ENV_VAR = "REPORT_TEMPLATER_CONFIG"


# ─── Keyword Lexicon ─────────────────────────────────────────────────────────


class KeywordTier(BaseModel):
    """One family of column names, e.g. chemical identifiers.

    ``keywords`` are case-insensitive regex fragments.  A column name belongs
    to the first tier (in lexicon order) with a matching keyword.
    """

    name: str
    keywords: list[str]

    @cached_property
    def pattern(self) -> re.Pattern:
        return re.compile("|".join(f"(?:{kw})" for kw in self.keywords), re.IGNORECASE)


# Tier order matters: "CAS NO." must land in cas before "no" claims it.
DEFAULT_TIERS = [
    KeywordTier(name="chemical_id", keywords=[r"\bcas\b"]),
    KeywordTier(
        name="quantity",
        keywords=[r"\bweight\b", r"\bwt\b", "%", r"\bcontent\b", r"\bconcentration\b", r"\bamount\b", "含量", "浓度"],
    ),
    KeywordTier(
        name="substance",
        keywords=[r"\binci\b", r"\bname\b", r"\bingredients?\b", r"\bsubstance\b", r"\bcomponents?\b", "名称", "成分"],
    ),
    KeywordTier(name="sequence", keywords=[r"\bno\b\.?", r"\bitem\b", r"\bnumber\b", r"\bseq\b", "#", "序号"]),
    KeywordTier(name="role", keywords=[r"\bfunction\b", r"\brole\b", r"\bpurpose\b", "作用", "功能"]),
]

DEFAULT_SUB_LABELS = [
    "Handling",
    "Storage",
    "Appearance",
    "Odor",
    "pH",
    "Boiling",
    "Melting",
    "Flash",
    "Vapor",
    "Relative",
    "Solubility",
    "Auto-ignition",
    "Decomposition",
    "Viscosity",
    "Molecular",
]

DEFAULT_ALIASES = {
    "ProductName": ["产品名称", "产品名", "商品名称", "品名", "Product Name", "ProductName"],
    "CompanyName": ["公司名称", "企业名称", "生产商", "制造商", "供应商", "Company Name", "CompanyName"],
    "ClientName": ["客户名称", "客户", "委托单位", "Client Name", "ClientName"],
    "ReportDate": ["报告日期", "日期", "Report Date", "ReportDate"],
}


class PipelineConfig(BaseModel):
    """Every tunable constant of the reconstruction and normalization steps."""

    # Layout extraction
    coordinate_decimals: int = 2
    y_epsilon: float = 0.1
    gap_noise_floor: float = 0.1
    min_line_gap: float = 1.5
    max_line_gap: float = 3.5
    default_line_gap: float = 2.5

    # Shared lexicon
    column_tiers: list[KeywordTier] = Field(default_factory=lambda: [t.model_copy() for t in DEFAULT_TIERS])
    sub_labels: list[str] = Field(default_factory=lambda: list(DEFAULT_SUB_LABELS))
    section_marker: str = "Section"

    # Normalizer limits
    key_value_max_words: int = 5
    redundant_header_max_tokens: int = 8
    redundant_header_min_keywords: int = 2

    # Placeholders
    default_section: str = "Uncategorized"
    total_pages_placeholder: str = "TotalPages"
    current_page_placeholder: str = "CurrentPage"
    no_data_value: str = "No data"
    chars_per_page: int = 3000
    placeholder_aliases: dict[str, list[str]] = Field(default_factory=lambda: dict(DEFAULT_ALIASES))

    @property
    def auto_placeholders(self) -> list[str]:
        """Page counters filled at export rather than by the user."""
        return [self.total_pages_placeholder, self.current_page_placeholder]

    @cached_property
    def keyword_pattern(self) -> re.Pattern:
        """Union of every tier's keywords (used to count header-like tokens)."""
        fragments = [f"(?:{kw})" for tier in self.column_tiers for kw in tier.keywords]
        return re.compile("|".join(fragments), re.IGNORECASE)


DEFAULT_CONFIG = PipelineConfig()


def load_config(path: Path | str | None = None) -> PipelineConfig:
    """Load a PipelineConfig from JSON, falling back to the env var, then the defaults."""
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR) or None
    if path is None:
        return DEFAULT_CONFIG

    path = Path(path)
    logger.info("Loading pipeline config from %s", path)
    with open(path, "r", encoding="utf-8") as fopen:
        raw = json.load(fopen)
    return PipelineConfig.model_validate(raw)
