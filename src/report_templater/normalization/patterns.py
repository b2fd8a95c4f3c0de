"""Compiled regex patterns for markdown line classification and repair.

Patterns that depend on the configured vocabulary (section marker,
sub-labels) are built by the ``*_re`` helpers and cached per configuration.
"""

import re
from functools import lru_cache

# ─── Line Structure Patterns ──────────────────────────────────────────────────

# Fence marker on a line of its own, optionally with an info string: ```python
CODE_FENCE_RE = re.compile(r"^(?:`{3,}|~{3,})[\w+.-]*$")

# Any link-like text; such lines are never rewritten
URL_RE = re.compile(r"https?://")

# "Label: Value" with a short ASCII label (indent, label, value)
KEY_VALUE_RE = re.compile(r"^(\s*)([A-Za-z][A-Za-z0-9\s\-_&,./()]{0,50}?)\s*:\s*(.+)$")

# Capitalised word + colon opening the prose that trails a section heading
TRAILING_LABEL_RE = re.compile(r"^([A-Z][a-z]+):\s*(.*)$")

# Characters allowed in an echoed table header once its keywords are removed
HEADER_ECHO_REST_RE = re.compile(r"^[A-Z0-9\s.%():\-]*$")


# ─── Vocabulary-Dependent Patterns ────────────────────────────────────────────


@lru_cache(maxsize=32)
def section_heading_re(marker: str) -> re.Pattern:
    """'## Section 7-Handling and Storage' (levels 2-4)."""
    return re.compile(rf"^#{{2,4}}\s+{re.escape(marker)}\s+\d+")


@lru_cache(maxsize=32)
def section_heading_split_re(marker: str) -> re.Pattern:
    """Heading followed on the same line by 'Label: prose' -> (heading, rest)."""
    return re.compile(rf"^(#{{2,4}}\s+{re.escape(marker)}\s+\d+[^:]*?)(\s+[A-Z][a-z]+:.*)$")


@lru_cache(maxsize=32)
def sub_label_re(labels: tuple[str, ...]) -> re.Pattern:
    """Known sub-label at line start: 'Handling: Keep container closed' -> (label, content)."""
    alternation = "|".join(re.escape(label) for label in labels)
    return re.compile(rf"^({alternation})\s*:\s*(.*)$")
