"""Client boundary for the external structuring model.

Sends extracted page text to an OpenAI-compatible chat endpoint and runs the
reply through the normalization pipeline.  The model makes no formatting
guarantees, so its raw output is never returned without normalization.

Settings are an explicit object passed per call; nothing here caches a
client between calls.  Retries and timeouts are left to the SDK defaults.
"""

import logging
import os
import re
import time

from dotenv import load_dotenv
from openai import OpenAI
from pydantic import BaseModel

from report_templater.config import DEFAULT_CONFIG, ROOT, PipelineConfig
from report_templater.normalization.pipeline import normalize_markdown
from report_templater.oracle.prompts import SYSTEM_PROMPT, build_analyze_prompt
from report_templater.placeholders.extract import extract_placeholders

logger = logging.getLogger(__name__)

load_dotenv(ROOT / ".env")

# Whole reply wrapped in ```markdown ... ``` despite instructions
_WRAPPING_FENCE_RE = re.compile(r"^\s*```[\w-]*\n(.*?)\n```\s*$", re.DOTALL)


class OracleSettings(BaseModel):
    """Connection settings for the structuring model."""

    base_url: str = "https://api.openai.com/v1"
    api_key: str = ""
    model: str = "gpt-4o-mini"
    temperature: float = 0.1

    @classmethod
    def from_env(cls) -> "OracleSettings":
        """Read ORACLE_BASE_URL / ORACLE_API_KEY / ORACLE_MODEL (after loading .env)."""
        defaults = cls()
        return cls(
            base_url=os.getenv("ORACLE_BASE_URL", "").rstrip("/") or defaults.base_url,
            api_key=os.getenv("ORACLE_API_KEY", ""),
            model=os.getenv("ORACLE_MODEL", "") or defaults.model,
        )

    @property
    def configured(self) -> bool:
        return bool(self.base_url and self.api_key and self.model)


class AnalysisResult(BaseModel):
    """Canonical markdown template plus the placeholders it declares."""

    content: str
    placeholders: list[str]


def build_client(settings: OracleSettings) -> OpenAI:
    return OpenAI(base_url=settings.base_url, api_key=settings.api_key)


def strip_wrapping_fence(text: str) -> str:
    """Remove a code fence wrapped around the entire reply, if present."""
    match = _WRAPPING_FENCE_RE.match(text)
    return match.group(1) if match else text


def _call_model(client: OpenAI, settings: OracleSettings, raw_text: str) -> str | None:
    """Send one analysis request; return the reply text, or None on failure."""
    t0 = time.time()
    try:
        completion = client.chat.completions.create(
            model=settings.model,
            temperature=settings.temperature,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_analyze_prompt(raw_text)},
            ],
        )
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("Structuring model call failed after %.1fs: %s", time.time() - t0, exc)
        return None

    logger.debug("Structuring model responded in %.1fs", time.time() - t0)
    content = completion.choices[0].message.content if completion.choices else None
    if not content:
        logger.warning("Structuring model returned an empty reply")
        return None
    return content


def analyze_text(
    raw_text: str,
    settings: OracleSettings,
    client: OpenAI | None = None,
    config: PipelineConfig = DEFAULT_CONFIG,
) -> AnalysisResult | None:
    """Turn extracted page text into a normalised template, or None if the model is unavailable."""
    if client is None:
        if not settings.configured:
            logger.warning("Structuring model credentials not configured")
            return None
        client = build_client(settings)

    reply = _call_model(client, settings, raw_text)
    if reply is None:
        return None

    content = normalize_markdown(strip_wrapping_fence(reply), config)
    placeholders = extract_placeholders(content)
    logger.info("Analysis complete: %d placeholders detected", len(placeholders))
    return AnalysisResult(content=content, placeholders=placeholders)
