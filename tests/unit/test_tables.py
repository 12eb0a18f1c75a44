#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for pipe table rendering."""

import pytest

from md2html.tables import parse_table, parse_table_alignment


@pytest.mark.unit
class TestParseTableAlignment:
    """Test alignment parsing from separator lines."""

    def test_all_alignments(self):
        """Test left, center, right and unspecified columns."""
        assert parse_table_alignment("|:--|:-:|--:|---|") == ["left", "center", "right", None]

    def test_without_outer_pipes(self):
        """Test that outer pipes are optional."""
        assert parse_table_alignment(":-- | --:") == ["left", "right"]


@pytest.mark.unit
class TestParseTable:
    """Test table markup generation."""

    def test_header_and_body_with_alignment(self):
        """Test a complete table with aligned columns."""
        result = parse_table("| A | B |", "|:--|--:|", "| 1 | 2 |")
        assert result == (
            "<table>"
            '<thead><tr><th align="left">A</th><th align="right">B</th></tr></thead>'
            '<tbody><tr><td align="left">1</td><td align="right">2</td></tr></tbody>'
            "</table>"
        )

    def test_no_body_omits_tbody(self):
        """Test that a header-only table has no tbody."""
        result = parse_table("| A |", "|---|", "")
        assert result == "<table><thead><tr><th>A</th></tr></thead></table>"

    def test_short_rows_padded(self):
        """Test that missing cells render empty."""
        result = parse_table("| A | B | C |", "|---|---|---|", "| 1 |")
        assert "<tr><td>1</td><td></td><td></td></tr>" in result

    def test_long_rows_truncated(self):
        """Test that cells beyond the header width are dropped."""
        result = parse_table("| A | B |", "|---|---|", "| 1 | 2 | 3 |")
        assert "<tr><td>1</td><td>2</td></tr>" in result
        assert "3" not in result

    def test_lines_without_pipes_dropped(self):
        """Test that non-table lines in the body are not rows."""
        result = parse_table("| A |", "|---|", "| 1 |\nnot a row\n| 2 |")
        assert result.count("<tr>") == 3
        assert "not a row" not in result

    def test_header_without_outer_pipes(self):
        """Test that header cells are found without outer pipes."""
        result = parse_table("A | B", "--|--", "")
        assert "<th>A</th><th>B</th>" in result
