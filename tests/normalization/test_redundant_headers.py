"""Unit tests for the redundant table-header removal pass."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from report_templater.normalization.redundant_headers import is_header_echo, run

TABLE = [
    "| NO. | INCI Name | CAS NO. | Weight |",
    "| --- | --- | --- | --- |",
    "| 1 | Aqua | 7732-18-5 | 80 |",
]


# ===========================================================================
# is_header_echo tests
# ===========================================================================


class TestIsHeaderEcho:

    def test_scattered_column_names(self):
        assert is_header_echo("NO. INCI Name CAS NO. Weight") is True

    def test_uppercase_with_punctuation(self):
        assert is_header_echo("NO. CAS NO. WEIGHT(%)") is True

    def test_data_row(self):
        assert is_header_echo("1 Aqua 7732-18-5 80") is False

    def test_mixed_case_prose(self):
        assert is_header_echo("The Name and CAS number are listed below") is False

    def test_single_keyword(self):
        assert is_header_echo("CAS") is False

    def test_percent_values_are_not_keywords(self):
        assert is_header_echo("50% 30%") is False

    def test_too_many_tokens(self):
        assert is_header_echo("NO. CAS NO. WEIGHT A B C D E") is False

    def test_pipe_row(self):
        assert is_header_echo("| NO. | CAS |") is False

    def test_heading(self):
        assert is_header_echo("## NO. CAS") is False

    def test_bold(self):
        assert is_header_echo("**NO. CAS**") is False

    def test_blank(self):
        assert is_header_echo("") is False

    def test_disallowed_punctuation(self):
        assert is_header_echo("NO., CAS; WEIGHT") is False


# ===========================================================================
# run tests
# ===========================================================================


class TestRun:

    def test_echo_before_table_removed(self):
        lines = ["Composition", "NO. INCI Name CAS NO. Weight"] + TABLE
        assert run(lines) == ["Composition"] + TABLE

    def test_table_cells_untouched(self):
        result = run(["NO. INCI Name CAS NO. Weight"] + TABLE)
        assert result == TABLE
        assert all(line.count("|") == 5 for line in result)

    def test_echo_not_followed_by_table_kept(self):
        lines = ["NO. CAS WEIGHT", "Some text"]
        assert run(lines) == lines

    def test_echo_separated_by_blank_line_kept(self):
        lines = ["NO. CAS WEIGHT", ""] + TABLE
        assert run(lines) == lines

    def test_pipe_row_without_separator_is_not_a_table(self):
        lines = ["NO. CAS WEIGHT", "| NO. | CAS | WEIGHT |", "| 1 | 2 | 3 |"]
        assert run(lines) == lines

    def test_data_row_before_table_kept(self):
        lines = ["1 Aqua 7732-18-5 80"] + TABLE
        assert run(lines) == lines

    def test_stacked_echo_lines_removed_together(self):
        lines = ["Intro", "NO. CAS", "WEIGHT INCI"] + TABLE
        assert run(lines) == ["Intro"] + TABLE

    def test_inside_code_block_kept(self):
        lines = ["```", "NO. CAS", "| NO. | CAS |", "| --- | --- |", "```"]
        assert run(lines) == lines

    def test_idempotent(self):
        lines = ["Intro", "NO. CAS", "WEIGHT INCI"] + TABLE + ["", "NO. CAS WEIGHT"] + TABLE
        once = run(lines)
        assert run(once) == once

    def test_input_not_mutated(self):
        lines = ["NO. CAS"] + TABLE
        run(lines)
        assert lines == ["NO. CAS"] + TABLE
