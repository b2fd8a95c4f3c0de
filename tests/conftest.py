"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def generated_markdown() -> str:
    """Markdown as the structuring model typically returns it (before normalization)."""
    return "\n".join(
        [
            "# {{CompanyName}}",
            "# Material Safety Data Sheet",
            "Report No: {{ReportNo}}",
            "Page: {{CurrentPage}} of {{TotalPages}}",
            "",
            "## Section 1-Identification",
            "Product Name: {{ProductName}}",
            "Manufacture: {{Manufacture}}",
            "",
            "NO. INCI Name CAS NO. Weight",
            "| NO. | INCI Name | CAS NO. | Weight |",
            "| --- | --- | --- | --- |",
            "| {{No1}} | {{Name1}} | {{Cas1}} | {{Weight1}} |",
            "",
            "## Section 7-Handling and Storage Handling: Keep container closed",
            "Storage: Cool, dry place",
            "See https://example.com: details",
        ]
    )


@pytest.fixture
def canonical_markdown() -> str:
    """Expected normalization of ``generated_markdown``."""
    return "\n".join(
        [
            "# {{CompanyName}}",
            "# Material Safety Data Sheet",
            "**Report No**: {{ReportNo}}",
            "**Page**: {{CurrentPage}} of {{TotalPages}}",
            "",
            "## Section 1-Identification",
            "**Product Name**: {{ProductName}}",
            "**Manufacture**: {{Manufacture}}",
            "",
            "| NO. | INCI Name | CAS NO. | Weight |",
            "| --- | --- | --- | --- |",
            "| {{No1}} | {{Name1}} | {{Cas1}} | {{Weight1}} |",
            "",
            "## Section 7-Handling and Storage",
            "",
            "**Handling:**",
            "Keep container closed",
            "**Storage:**",
            "Cool, dry place",
            "See https://example.com: details",
        ]
    )
