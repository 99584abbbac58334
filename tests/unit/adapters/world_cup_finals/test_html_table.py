"""
Tests for the HTML table parser.
"""

import pytest
from bs4 import BeautifulSoup

from worldcup_hydrator.adapters.world_cup_finals.parsers.base import (
    ParsedTable,
    ParserError,
    TableNotFoundError,
)
from worldcup_hydrator.adapters.world_cup_finals.parsers.html_table import (
    HtmlTableParser,
    clean_header_text,
)

FINALS_HEADER = ["Year", "Winners", "Score", "Runners-up"]


def _rows(count, start=1930):
    return [[str(start + 4 * i), f"Winner {i}", "1–0", f"Loser {i}"] for i in range(count)]


class TestCleanHeaderText:
    """Test header label cleanup."""

    def test_removes_reference_markers(self):
        assert clean_header_text("Winners[a]") == "Winners"

    def test_collapses_whitespace(self):
        assert clean_header_text("  Runners-up \n ") == "Runners-up"


class TestFindFinalsTable:
    """Test the first-match table locator."""

    def test_skips_table_without_keywords(self, finals_html):
        parser = HtmlTableParser()
        soup = BeautifulSoup(finals_html, "html.parser")

        table = parser.find_finals_table(soup)

        assert table is not None
        assert "sortable" in table.get("class")

    def test_matches_final_keyword_case_insensitive(self, make_table_html):
        html = make_table_html(["FINAL date", "Champion", "Result", "Opponent"], _rows(1))
        soup = BeautifulSoup(html, "html.parser")

        assert HtmlTableParser().find_finals_table(soup) is not None

    def test_ignores_tables_without_wikitable_class(self, make_table_html):
        html = make_table_html(FINALS_HEADER, _rows(2), table_class="infobox")
        soup = BeautifulSoup(html, "html.parser")

        assert HtmlTableParser().find_finals_table(soup) is None

    def test_first_matching_table_wins(self, make_table_html):
        first = make_table_html(["Year", "A", "B", "C"], [["1930", "x", "y", "z"]])
        second = make_table_html(FINALS_HEADER, _rows(3))
        soup = BeautifulSoup(first + second, "html.parser")

        table = HtmlTableParser().find_finals_table(soup)

        assert "1930" in table.get_text()
        assert "Winner 0" not in table.get_text()


class TestExtractRows:
    """Test the row window and the minimum cell filter."""

    def test_caps_rows_at_max_rows(self, make_table_html):
        html = make_table_html(FINALS_HEADER, _rows(15))

        parsed = HtmlTableParser(max_rows=10).parse({"content": html})

        assert len(parsed.rows) == 10
        assert parsed.rows[0][0] == "1930"
        assert parsed.rows[-1][0] == "1966"

    def test_short_row_uses_a_slot(self, make_table_html):
        rows = _rows(11)
        rows[1] = ["1934", "Italy", "2–1"]

        parsed = HtmlTableParser(max_rows=10).parse({"content": make_table_html(FINALS_HEADER, rows)})

        assert len(parsed.rows) == 9
        assert ["1934", "Italy", "2–1"] not in parsed.rows
        assert parsed.rows[-1][0] == str(1930 + 4 * 9)

    def test_keeps_extra_columns(self, make_table_html):
        html = make_table_html(
            FINALS_HEADER + ["Venue"],
            [["2018", "France", "4–2", "Croatia", "Luzhniki Stadium"]],
        )

        parsed = HtmlTableParser().parse({"content": html})

        assert parsed.rows == [["2018", "France", "4–2", "Croatia", "Luzhniki Stadium"]]

    def test_row_header_cells_count(self, finals_html):
        parsed = HtmlTableParser().parse({"content": finals_html})

        assert parsed.rows[0][0] == "1930"
        assert all(len(row) == 7 for row in parsed.rows)

    def test_header_only_table_gives_no_rows(self, make_table_html):
        parsed = HtmlTableParser().parse({"content": make_table_html(FINALS_HEADER, [])})

        assert parsed.rows == []


class TestParse:
    """Test the parse entry point."""

    def test_parse_fixture_page(self, finals_html):
        parsed = HtmlTableParser().parse({"content": finals_html, "url": "file:///x"})

        assert isinstance(parsed, ParsedTable)
        assert parsed.headers[:4] == ["Year", "Winners", "Score", "Runners-up"]
        assert len(parsed.rows) == 10
        assert parsed.rows[-1][0] == "1974"

    def test_cell_text_keeps_reference_markers_for_normalizer(self, finals_html):
        parsed = HtmlTableParser().parse({"content": finals_html})

        assert parsed.rows[0][1] == "Uruguay [1]"

    def test_table_not_found(self):
        html = "<html><body><p>No tables here</p></body></html>"

        with pytest.raises(TableNotFoundError) as exc_info:
            HtmlTableParser().parse({"content": html})

        assert exc_info.value.message == "Could not find the FIFA World Cup finals table"

    def test_empty_content(self):
        with pytest.raises(ParserError, match="No HTML content"):
            HtmlTableParser().parse({"content": ""})

    def test_supported_formats(self):
        assert HtmlTableParser().supported_formats == ["html"]
