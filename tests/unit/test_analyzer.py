"""Test end-to-end document analysis."""

from __future__ import annotations

import logging

import pytest

from csvanalyzer import AnalyzerConfig, CSVAnalyzer, HeaderReadError, analyze_text
from csvanalyzer.serialization import dump_analysis


class TestScenarios:
    """Test the reference analysis scenarios."""

    def test_simple_integer_columns(self):
        """Test a two-column integer document."""
        analysis = CSVAnalyzer().analyze("a,b\n1,2\n3,4\n")
        assert analysis.detected_delimiter == ","
        assert analysis.row_count == 2
        assert analysis.column_count == 2
        column = analysis.get_column("a")
        assert column.type_name == "integer"
        assert column.min_value == "1"
        assert column.max_value == "3"

    def test_email_and_string_mix(self):
        """Test a half-email column."""
        analysis = CSVAnalyzer().analyze("x\nfoo@bar.com\nbad-email\n")
        column = analysis.get_column("x")
        assert column.type_name == "email"
        assert column.type_details.confidence == 0.5
        assert set(column.type_details.subtypes) == {"email", "string"}

    def test_all_empty_column(self):
        """Test a column holding only empty values."""
        analysis = CSVAnalyzer().analyze("id,note\n1,\n2,\n3,\n")
        column = analysis.get_column("note")
        assert column.total_count == 3
        assert column.null_count == column.total_count
        assert column.type_name == "null"
        assert column.type_details.confidence == 1.0
        assert column.min_length == 0
        assert column.max_length == 0

    def test_sampling_cap(self):
        """Test range uses the sample while uniqueness covers the column."""
        analyzer = CSVAnalyzer(AnalyzerConfig(sample_size=2))
        analysis = analyzer.analyze("n\n1\n2\n3\n4\n5\n")
        column = analysis.get_column("n")
        assert column.analyzed_count == 2
        assert column.min_value == "1"
        assert column.max_value == "2"
        assert column.unique_values == 5
        assert analysis.sample_size == 2

    def test_ragged_rows(self):
        """Test a short row leaves the last column shorter."""
        analysis = CSVAnalyzer().analyze("a,b,c\n1,2,3\n4,5\n")
        assert analysis.get_column("a").total_count == 2
        assert analysis.get_column("b").total_count == 2
        assert analysis.get_column("c").total_count == 1
        assert analysis.row_count == 2


class TestInvariants:
    """Test properties that hold for every column."""

    def test_counts_are_consistent(self, mixed_document):
        """Test per-column counters."""
        analysis = CSVAnalyzer().analyze(mixed_document)
        for column in analysis.columns:
            assert column.unique_values <= column.total_count
            assert column.null_count <= column.total_count
            assert column.valid_count + column.null_count == column.total_count
            assert 0.0 <= column.type_details.confidence <= 1.0

    def test_no_cap_analyzes_everything(self, mixed_document):
        """Test analyzed_count equals total_count without a cap."""
        analysis = CSVAnalyzer().analyze(mixed_document)
        for column in analysis.columns:
            assert column.analyzed_count == column.total_count

    def test_cap_larger_than_column(self, mixed_document):
        """Test a generous cap still analyzes short columns entirely."""
        analysis = CSVAnalyzer(AnalyzerConfig(sample_size=1000)).analyze(mixed_document)
        for column in analysis.columns:
            assert column.analyzed_count == column.total_count
        assert analysis.sample_size == 1000

    def test_idempotent(self, mixed_document):
        """Test repeated analysis gives identical reports."""
        analyzer = CSVAnalyzer(AnalyzerConfig(sample_size=3))
        first = dump_analysis(analyzer.analyze(mixed_document))
        second = dump_analysis(analyzer.analyze(mixed_document))
        assert first == second


class TestMixedDocument:
    """Test type inference on a realistic document."""

    def test_column_types(self, mixed_document):
        """Test each column's inferred type."""
        analysis = CSVAnalyzer().analyze(mixed_document)
        types = {column.name: column.type_name for column in analysis.columns}
        assert types == {
            "id": "integer",
            "name": "string",
            "email": "email",
            "joined": "date",
            "score": "float",
            "active": "boolean",
            "last_login": "datetime",
        }

    def test_header_order_preserved(self, mixed_document):
        """Test columns follow header order."""
        analysis = CSVAnalyzer().analyze(mixed_document)
        assert [c.name for c in analysis.columns][:3] == ["id", "name", "email"]

    def test_score_range(self, mixed_document):
        """Test the float column's numeric range."""
        score = CSVAnalyzer().analyze(mixed_document).get_column("score")
        assert (score.min_value, score.max_value) == ("2.25", "5")
        assert set(score.type_details.subtypes) == {"float", "integer"}

    def test_missing_email(self, mixed_document):
        """Test nulls are counted for the email column."""
        email = CSVAnalyzer().analyze(mixed_document).get_column("email")
        assert email.null_count == 1
        assert email.valid_count == 3
        assert email.min_value is None

    def test_semicolon_document(self, semicolon_document):
        """Test decimal commas in a semicolon document."""
        analysis = CSVAnalyzer().analyze(semicolon_document)
        assert analysis.detected_delimiter == ";"
        prix = analysis.get_column("prix")
        assert prix.type_name == "float"
        assert (prix.min_value, prix.max_value) == ("0.8", "2.75")


class TestEdgeCases:
    """Test unusual documents."""

    def test_empty_document_raises(self):
        """Test a missing header aborts analysis."""
        with pytest.raises(HeaderReadError):
            CSVAnalyzer().analyze("")

    def test_header_only(self):
        """Test a document without data rows."""
        analysis = CSVAnalyzer().analyze("a,b\n")
        assert analysis.row_count == 0
        assert analysis.column_count == 2
        for column in analysis.columns:
            assert column.type_name == "null"
            assert column.total_count == 0
            assert column.analyzed_count == 0

    def test_duplicate_headers_share_profile(self):
        """Test duplicate names report the last value of each row."""
        analysis = CSVAnalyzer().analyze("a,b,a\nx,2,10\ny,4,20\n")
        assert analysis.column_count == 3
        assert [c.name for c in analysis.columns] == ["a", "b", "a"]
        assert analysis.columns[0] == analysis.columns[2]
        assert analysis.columns[0].type_name == "integer"
        assert analysis.columns[0].total_count == 2

    def test_large_field_keeps_row(self):
        """Test a field past the csv module's default cap is analyzed."""
        big = "x" * 200_000
        analysis = CSVAnalyzer().analyze(f"id,blob\n1,{big}\n2,y\n")
        assert analysis.row_count == 2
        assert analysis.get_column("id").total_count == 2
        assert analysis.get_column("blob").max_length == 200_000

    def test_tab_document(self):
        """Test tab-separated input."""
        analysis = CSVAnalyzer().analyze("ip\thost\n10.0.0.1\texample.com\n")
        assert analysis.detected_delimiter == "\t"
        assert analysis.get_column("ip").type_name == "ip"
        assert analysis.get_column("host").type_name == "url"

    def test_pipe_wins_tie_with_comma(self):
        """Test a comma inside a pipe-delimited header."""
        analysis = CSVAnalyzer().analyze("a,b|c\n1,2|3\n")
        assert analysis.detected_delimiter == "|"
        assert [c.name for c in analysis.columns] == ["a,b", "c"]

    def test_analyze_text_helper(self):
        """Test the functional shortcut."""
        analysis = analyze_text("a\n1\n2\n3\n", sample_size=1)
        assert analysis.sample_size == 1
        assert analysis.get_column("a").analyzed_count == 1

    def test_logs_progress(self, caplog):
        """Test analysis progress is logged."""
        with caplog.at_level(logging.INFO, logger="csvanalyzer"):
            CSVAnalyzer().analyze("a\n1\n")
        assert "Analysis complete: 1 rows, 1 columns" in caplog.text
