"""Tests for the individual parsing strategies."""

import time

from stats_structurizer.parser import (
    parse,
    parse_flattened_table,
    parse_grouped_table,
    parse_league_table,
    parse_row_based_tables,
    parse_token_stream_tables,
)
from stats_structurizer.parser._grouped import resolve_column_groups
from stats_structurizer.parser._league import join_venue_qualifiers, parse_league_row
from stats_structurizer.parser._row_based import match_trailing_header, strip_trailing_values
from stats_structurizer.parser._tokens import content_lines, split_strongest


# ── Tokenizer ────────────────────────────────────────────────────────────────


class TestTokens:
    def test_content_lines_strips_and_skips(self):
        text = "  a\t1 \n\n   \nRead more at: https://x.io\nb"
        assert content_lines(text) == ["a\t1", "b"]

    def test_content_lines_keeps_footer_on_request(self):
        assert len(content_lines("a\nLê mais em: x", skip_footer=False)) == 2

    def test_split_strongest_prefers_tabs(self):
        assert split_strongest("Squad\t# Pl\tAge") == ["Squad", "# Pl", "Age"]

    def test_split_strongest_multi_space(self):
        assert split_strongest("Squad  # Pl  Age") == ["Squad", "# Pl", "Age"]

    def test_split_strongest_single_space_fallback(self):
        assert split_strongest("Squad MP Min") == ["Squad", "MP", "Min"]

    def test_split_strongest_mixed_tabs_and_spaces(self):
        assert split_strongest("Squad\t# Pl  Age") == ["Squad", "# Pl", "Age"]

    def test_content_lines_unstripped_keeps_edge_cells(self):
        text = "a\t1\t\r\n\n\tb\t2\nRead more at: x"
        assert content_lines(text, strip=False) == ["a\t1\t", "\tb\t2"]


# ── Flattened headers ────────────────────────────────────────────────────────


class TestFlattened:
    def test_tab_table(self, flattened_text):
        [table] = parse_flattened_table(flattened_text)
        assert table.title == "Team Stats"
        assert table.first_column_header == "Squad"
        assert table.headers == [
            "Playing Time MP", "Playing Time Min", "Performance Gls", "Per 90 Minutes Gls",
        ]
        assert table.rows[1].metric == "Aston Villa"
        assert table.rows[0].values == ["22", "1,980", "37", "1.68"]

    def test_values_rejoin_to_source(self, flattened_text):
        [table] = parse_flattened_table(flattened_text)
        data_lines = flattened_text.strip().split("\n")[1:]
        for row, line in zip(table.rows, data_lines):
            assert "\t".join(row.values) == line.split("\t", 1)[1]

    def test_empty_edge_cells_kept(self):
        text = (
            "Squad\tPerformance Gls\tPerformance Ast\tPer 90 Minutes Gls\r\n"
            "Arsenal\t37\t28\t\r\n"
            "\t32\t20\t1.45\n"
        )
        [table] = parse_flattened_table(text)
        arsenal, unnamed = table.rows
        assert arsenal.values == ["37", "28", ""]
        assert "\t".join(arsenal.values) == "37\t28\t"
        assert unnamed.metric == ""
        assert unnamed.values == ["32", "20", "1.45"]

    def test_multi_space_table(self):
        text = "Squad  Playing Time MP  Performance Gls\nArsenal  22  37\n"
        [table] = parse_flattened_table(text)
        assert table.headers == ["Playing Time MP", "Performance Gls"]
        assert table.rows[0].values == ["22", "37"]

    def test_no_header(self):
        assert parse_flattened_table("Playing Time\tPerformance\nSquad\tMP") == []


# ── Grouped headers ──────────────────────────────────────────────────────────


class TestGrouped:
    def test_standard_layout(self, standard_stats):
        [table] = parse_grouped_table(standard_stats)
        assert table.title == "Team Stats Overview"
        assert table.headers[:3] == ["# Pl", "Age", "Poss"]
        assert len(table.headers) == 20
        arsenal = table.rows[0]
        assert arsenal.metric == "Arsenal"
        assert arsenal.values[5] == "1,980"
        assert table.rows[7].metric == "Crystal Palace"

        groups = [(g.title, g.col_span, g.offset) for g in table.column_groups]
        assert groups == [
            ("Playing Time", 7, 1),
            ("Performance", 8, 0),
            ("Per 90 Minutes", 5, 0),
        ]

    def test_headers_padded_from_rows(self):
        text = (
            "Playing Time\tPerformance\n"
            "Squad MP Min Gls\n"
            "Arsenal 20 1800 30 20 5\n"
            "Chelsea 19 1700 25 18 4\n"
        )
        [table] = parse_grouped_table(text)
        assert table.headers == ["MP", "Min", "Gls", "-", "-"]
        assert table.column_groups is None
        assert len(table.rows) == 2

    def test_header_mixing_tabs_and_spaces(self):
        text = (
            "Playing Time\tPerformance\tPer 90 Minutes\n"
            "Squad\t# Pl  Age  Poss  MP\n"
            "Arsenal 24 26.6 58.3 22\n"
        )
        [table] = parse_grouped_table(text)
        assert table.first_column_header == "Squad"
        assert table.headers == ["# Pl", "Age", "Poss", "MP"]
        assert table.rows[0].values == ["24", "26.6", "58.3", "22"]

    def test_short_rows_dropped(self):
        text = "Squad\tMP\tMin\tGls\tAst\nArsenal 1 2 3\nChelsea 1 2 3 4\n"
        [table] = parse_grouped_table(text)
        assert [r.metric for r in table.rows] == ["Chelsea"]

    def test_equal_width_groups(self):
        headers = ["Squad", "Sh", "SoT", "Cmp", "Att"]
        groups = resolve_column_groups("Shooting\t\tPassing", headers)
        assert [(g.title, g.col_span, g.offset) for g in groups] == [
            ("Shooting", 2, 1),
            ("Passing", 2, 0),
        ]

    def test_unrecognized_super_line(self):
        assert resolve_column_groups("Shooting\tPassing", ["Squad", "Sh", "Cmp"]) == []

    def test_no_header_row(self):
        assert parse_grouped_table("Performance\nArsenal 1 2 3 4") == []


# ── League ───────────────────────────────────────────────────────────────────


class TestLeague:
    def test_multi_word_names(self, league_text):
        [table] = parse_league_table(league_text)
        assert table.first_column_header == "Rk"
        assert table.headers[0] == "Squad"
        first = table.rows[0]
        assert first.metric == "1"
        assert first.values[0] == "Manchester City"
        assert first.values[1:] == ["11", "8", "2", "1", "27", "8", "+19", "26", "2.36"]
        assert table.rows[1].values[0] == "Nottingham Forest"

    def test_values_rejoin_to_source(self, league_text):
        [table] = parse_league_table(league_text)
        data_lines = league_text.strip().split("\n")[1:]
        for row, line in zip(table.rows, data_lines):
            assert "\t".join(row.values) == line.split("\t", 1)[1]

    def test_space_separated_home_away_header(self):
        text = (
            "Rk Squad MP W D L GF GA GD Pts Pts/MP MP W D L GF GA GD Pts Pts/MP\n"
            "1 Manchester City 11 8 2 1 27 8 +19 26 2.36 11\n"
            "2 Nottingham Forest 11 3 2 6 12 17 -5 11 1.00 11\n"
        )
        [table] = parse(text)
        assert table.title == "League Table"
        assert table.first_column_header == "Rk"
        assert len(table.headers) == 21
        first = table.rows[0]
        assert first.metric == "1"
        assert first.values[0] == "Manchester City"
        assert first.values[1:] == ["11", "8", "2", "1", "27", "8", "+19", "26", "2.36", "11"]
        assert table.rows[1].values[0] == "Nottingham Forest"

    def test_space_header_joins_venue(self):
        text = "Rk Squad Home MP Home W Away MP Away W\n1 Real Madrid 5 4 5 3\n"
        [table] = parse_league_table(text)
        assert table.headers == ["Squad", "Home MP", "Home W", "Away MP", "Away W"]
        assert table.rows[0].values == ["Real Madrid", "5", "4", "5", "3"]

    def test_join_venue_qualifiers_leaves_unknown(self):
        assert join_venue_qualifiers(["Home", "Form", "Away", "GD"]) == ["Home", "Form", "Away GD"]

    def test_crest_removed_and_default_headers(self):
        [table] = parse_league_table("1 Club Crest Arsenal 11 9 2\n")
        assert table.rows[0].values == ["Arsenal", "11", "9", "2"]
        assert table.headers == ["Col 1", "Col 2", "Col 3", "Col 4"]

    def test_invalid_lines_dropped(self):
        assert parse_league_row("Top four qualify for Europe") is None
        assert parse_league_row("3 Arsenal") is None
        assert parse_league_row("4 Aston Villa") is None

    def test_empty_table_still_returned(self):
        [table] = parse_league_table("Rk Squad MP\nnothing here")
        assert table.rows == []
        assert table.headers == ["Squad", "MP"]


# ── Row-based ────────────────────────────────────────────────────────────────


class TestRowBased:
    def test_prefers_longest_header(self):
        assert match_trailing_header(["Casa", "Fora", "Global"]) == ["Casa", "Fora", "Global"]
        assert match_trailing_header(["Casa", "Global"]) == ["Casa", "Global"]
        assert match_trailing_header(["home", "away", "total"]) == ["Home", "Away", "Total"]
        assert match_trailing_header(["Golos", "1"]) is None

    def test_composite_values(self):
        row = strip_trailing_values("Abre marcador (qualquer altura)\t1 em 3\t33%", 2)
        assert row.metric == "Abre marcador (qualquer altura)"
        assert row.values == ["1 em 3", "33%"]

    def test_dash_and_signed_values(self):
        row = strip_trailing_values("Goal difference\t-\t+4", 2)
        assert row.values == ["-", "+4"]

    def test_partial_strip_rejected(self):
        assert strip_trailing_values("Jogos\t33%", 2) is None
        assert strip_trailing_values("12 34", 2) is None

    def test_title_is_last_unmatched_line(self):
        text = (
            "Some headline\n"
            "VfB Stuttgart\n"
            "Home Away Total\n"
            "Goals scored\t1 of 3\t2\t3\n"
        )
        [table] = parse_row_based_tables(text)
        assert table.title == "VfB Stuttgart"
        assert table.first_column_header == ""
        assert table.rows[0].values == ["1 of 3", "2", "3"]

    def test_long_whitespace_run(self):
        row = strip_trailing_values("Golos" + " " * 20000 + "1 2 3", 3)
        assert row.metric == "Golos"
        assert row.values == ["1", "2", "3"]

        started = time.perf_counter()
        [table] = parse("Casa Fora Global\nGolos" + " " * 20000 + "x\n")
        assert time.perf_counter() - started < 2.0
        assert table.rows == []

    def test_no_header(self):
        assert parse_row_based_tables("Goals 1 2 3\nCorners 4 5 6") == []


# ── Token stream ─────────────────────────────────────────────────────────────


class TestTokenStream:
    def test_title_seeded_between_tables(self):
        text = "Home Away Total Goals 1 2 3 Second Half H A T Corners 4 5 9"
        first, second = parse_token_stream_tables(text)
        assert first.title == "Untitled Table"
        assert first.rows[0].metric == "Goals"
        assert first.rows[0].values == ["1", "2", "3"]
        assert second.title == "Second Half"
        assert second.headers == ["H", "A", "T"]
        assert second.rows[0].metric == "Corners"

    def test_leading_words_become_title(self):
        [table] = parse_token_stream_tables("Match Summary Casa Fora Global Golos 1 2 3")
        assert table.title == "Match Summary"

    def test_multi_word_metric(self):
        [table] = parse_token_stream_tables("C F G Golos marcados 1 - 50%")
        assert table.rows[0].metric == "Golos marcados"
        assert table.rows[0].values == ["1", "-", "50%"]

    def test_values_before_any_metric_join_the_name(self):
        [table] = parse_token_stream_tables("Casa Fora Global 1 2 3 Golos 4 5 6")
        assert table.title == "Untitled Table"
        assert len(table.rows) == 1
        assert table.rows[0].metric == "1 2 3 Golos"
        assert table.rows[0].values == ["4", "5", "6"]

    def test_footer_cut(self):
        [table] = parse_token_stream_tables("C F G Golos 1 2 3\nLê mais em: Cantos 4 5 6")
        assert len(table.rows) == 1

    def test_no_header(self):
        assert parse_token_stream_tables("Golos 1 2 3") == []
