"""Unit tests for splitting section headings and sub-labels onto their own lines."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from report_templater.config import PipelineConfig
from report_templater.normalization.section_headings import run, split_heading, split_sub_label


class TestSplitHeading:

    def test_heading_with_trailing_label(self):
        line = "## Section 7-Handling and Storage Handling: Keep container closed"
        assert split_heading(line) == [
            "## Section 7-Handling and Storage",
            "",
            "**Handling:**",
            "Keep container closed",
        ]

    def test_trailing_content_opening_with_known_label(self):
        line = "### Section 9-Properties Physical: Appearance: White powder"
        assert split_heading(line) == [
            "### Section 9-Properties",
            "",
            "**Physical:**",
            "**Appearance:**",
            "White powder",
        ]

    def test_plain_heading_untouched(self):
        assert split_heading("## Section 1-Identification") is None

    def test_level_one_heading_ignored(self):
        assert split_heading("# Section 7 Handling: Keep closed") is None

    def test_level_five_heading_ignored(self):
        assert split_heading("##### Section 7 Handling: Keep closed") is None

    def test_other_heading_ignored(self):
        assert split_heading("## Composition Note: see below") is None

    def test_custom_marker(self):
        config = PipelineConfig(section_marker="Chapter")
        assert split_heading("## Chapter 3 Notes Remark: abc", config) == [
            "## Chapter 3 Notes",
            "",
            "**Remark:**",
            "abc",
        ]


class TestSplitSubLabel:

    def test_known_label(self):
        assert split_sub_label("Storage: Cool, dry place") == ["**Storage:**", "Cool, dry place"]

    def test_chained_labels(self):
        assert split_sub_label("Handling: Storage: Cool place") == ["**Handling:**", "**Storage:**", "Cool place"]

    def test_lone_label(self):
        assert split_sub_label("Storage:") == ["**Storage:**"]

    def test_unknown_label(self):
        assert split_sub_label("Product Name: Soap") is None

    def test_bold_label_untouched(self):
        assert split_sub_label("**Storage:**") is None

    def test_label_must_open_the_line(self):
        assert split_sub_label("Keep away from Storage: heat") is None

    def test_custom_vocabulary(self):
        config = PipelineConfig(sub_labels=["Shelf life"])
        assert split_sub_label("Shelf life: 24 months", config) == ["**Shelf life:**", "24 months"]
        assert split_sub_label("Storage: Cool", config) is None

    def test_empty_vocabulary(self):
        assert split_sub_label("Storage: Cool", PipelineConfig(sub_labels=[])) is None


class TestRun:

    def test_lines_expanded_in_place(self):
        lines = ["Intro", "Storage: Cool, dry place", "Outro"]
        assert run(lines) == ["Intro", "**Storage:**", "Cool, dry place", "Outro"]

    def test_blank_inserted_before_following_table(self):
        lines = ["Storage: Cool place", "| A |", "| --- |"]
        assert run(lines) == ["**Storage:**", "Cool place", "", "| A |", "| --- |"]

    def test_no_blank_after_lone_label(self):
        lines = ["Storage:", "| A |", "| --- |"]
        assert run(lines) == ["**Storage:**", "| A |", "| --- |"]

    def test_code_block_untouched(self):
        lines = ["```", "Storage: x", "## Section 7-Handling Handling: y", "```"]
        assert run(lines) == lines

    def test_table_rows_untouched(self):
        lines = ["| Storage: x |", "| --- |"]
        assert run(lines) == lines

    def test_idempotent(self):
        lines = [
            "## Section 7-Handling and Storage Handling: Keep container closed",
            "Storage: Cool place",
            "| A |",
            "| --- |",
            "Handling: Storage: Dry",
        ]
        once = run(lines)
        assert run(once) == once
