"""Unit tests for placeholder discovery and section grouping."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from report_templater.config import PipelineConfig
from report_templater.placeholders.extract import (
    extract_placeholders,
    group_placeholders,
    placeholder_sections,
    user_placeholders,
)


class TestExtractPlaceholders:

    def test_first_seen_order_without_repeats(self):
        assert extract_placeholders("{{B}} {{A}} {{B}}") == ["B", "A"]

    def test_names_may_contain_non_ascii(self):
        assert extract_placeholders("名称: {{产品名称}}") == ["产品名称"]

    def test_single_braces_ignored(self):
        assert extract_placeholders("{A} {{B}}") == ["B"]

    def test_no_placeholders(self):
        assert extract_placeholders("plain text") == []


class TestUserPlaceholders:

    def test_page_counters_dropped(self):
        assert user_placeholders(["CurrentPage", "ProductName", "TotalPages"]) == ["ProductName"]

    def test_custom_counter_names(self):
        config = PipelineConfig(total_pages_placeholder="Pages", current_page_placeholder="Page")
        assert user_placeholders(["Page", "Pages", "TotalPages"], config) == ["TotalPages"]


class TestGroupPlaceholders:

    def test_before_and_under_heading(self):
        content = "{{CompanyName}}\n## Section 1-Identification\n**Product Name**: {{ProductName}}"
        assert group_placeholders(content) == {
            "Uncategorized": ["CompanyName"],
            "Section 1-Identification": ["ProductName"],
        }

    def test_first_occurrence_decides_section(self):
        content = "## A\n{{X}}\n## B\n{{X}} {{Y}}"
        assert group_placeholders(content) == {"A": ["X"], "B": ["Y"]}

    def test_names_restrict_and_order(self):
        content = "## A\n{{X}}\n## B\n{{Y}}"
        groups = group_placeholders(content, names=["Y", "X", "Missing", "X"])
        assert groups == {"Uncategorized": ["Missing"], "A": ["X"], "B": ["Y"]}
        assert list(groups) == ["Uncategorized", "A", "B"]

    def test_only_levels_two_to_four_are_sections(self):
        content = "# Title {{T}}\n##### Deep\n{{D}}\n#### Four\n{{F}}"
        assert group_placeholders(content) == {"Uncategorized": ["T", "D"], "Four": ["F"]}

    def test_placeholder_in_heading_belongs_to_it(self):
        content = "## Report {{ReportNo}}\n{{A}}"
        assert group_placeholders(content) == {"Report {{ReportNo}}": ["ReportNo", "A"]}

    def test_heading_inside_code_block_ignored(self):
        content = "## Real\n```\n## Not a heading {{Y}}\n```\n{{X}}"
        assert group_placeholders(content) == {"Real": ["Y", "X"]}

    def test_every_name_listed_once(self):
        content = "{{A}}\n## S\n{{B}} {{A}}\n## T\n{{C}} {{B}}"
        groups = group_placeholders(content)
        flat = [name for names in groups.values() for name in names]
        assert sorted(flat) == ["A", "B", "C"]

    def test_custom_default_section(self):
        config = PipelineConfig(default_section="General")
        assert group_placeholders("{{A}}", config=config) == {"General": ["A"]}

    def test_empty_content(self):
        assert group_placeholders("") == {}


class TestPlaceholderSections:

    def test_section_per_name(self):
        content = "{{A}}\n### Section 2-Hazards\n{{B}}"
        assert placeholder_sections(content) == {"A": "Uncategorized", "B": "Section 2-Hazards"}
