"""Unit tests for the document field extractor and query engines."""

import logging
import sys
from unittest.mock import patch

import pytest

from pagebench.benchmark.exceptions import ConfigurationError, DependencyMissingError, QueryEvaluationError
from pagebench.benchmark.field_extractor import FieldExtractor, load_query_engine
from pagebench.benchmark.jmespath_query import JmesPathQuery
from tests.helpers import cursor_page, hal_page
from tests.test_const import (
    CURSOR_COUNT_EXPR, CURSOR_NEXT_EXPR, INVALID_EXPR, OFFSET_COUNT_EXPR, OFFSET_HAS_NEXT_EXPR,
)


class TestJmesPathQuery:
    """Test the JMESPath query engine."""

    def test_search(self):
        assert JmesPathQuery().search("a.b", {"a": {"b": 3}}) == 3

    def test_search_missing_field(self):
        assert JmesPathQuery().search("a.b", {"a": {}}) is None

    def test_validate_rejects_invalid_expression(self):
        with pytest.raises(ValueError):
            JmesPathQuery().validate(INVALID_EXPR)

    def test_type_error_becomes_query_evaluation_error(self):
        with pytest.raises(QueryEvaluationError):
            JmesPathQuery().search("length(@)", 5)


class TestLoadQueryEngine:
    """Test query engine loading."""

    def test_registered_name(self):
        assert isinstance(load_query_engine("jmespath"), JmesPathQuery)

    def test_dotted_path(self):
        engine = load_query_engine("pagebench.benchmark.jmespath_query:JmesPathQuery")
        assert isinstance(engine, JmesPathQuery)

    def test_unknown_name(self):
        with pytest.raises(DependencyMissingError):
            load_query_engine("jq")

    def test_missing_module(self):
        with pytest.raises(DependencyMissingError):
            load_query_engine("no_such_module_for_pagebench:Engine")

    def test_missing_class(self):
        with pytest.raises(DependencyMissingError):
            load_query_engine("pagebench.benchmark.field_extractor:NoSuchEngine")

    def test_engine_library_not_installed(self):
        """Test a missing jmespath install surfaces as DependencyMissingError."""
        with patch.dict(sys.modules, {"jmespath": None}):
            sys.modules.pop("pagebench.benchmark.jmespath_query", None)
            with pytest.raises(DependencyMissingError):
                load_query_engine("jmespath")


class TestFieldExtractor:
    """Test count, marker and cursor extraction."""

    def test_parse_document(self):
        assert FieldExtractor.parse_document(b'[1, 2]') == [1, 2]

    def test_parse_invalid_json_is_empty_document(self):
        assert FieldExtractor.parse_document(b'<html>oops</html>') is None

    def test_parse_empty_body(self):
        assert FieldExtractor.parse_document(b'') is None

    def test_offset_count(self, extractor):
        assert extractor.extract_count(OFFSET_COUNT_EXPR, hal_page(1, 40, False)) == 40

    def test_offset_count_without_embedded(self, extractor):
        assert extractor.extract_count(OFFSET_COUNT_EXPR, {"_links": {}}) == 0

    def test_cursor_count(self, extractor):
        assert extractor.extract_count(CURSOR_COUNT_EXPR, cursor_page(1, 7)) == 7

    def test_cursor_count_of_empty_document(self, extractor):
        assert extractor.extract_count(CURSOR_COUNT_EXPR, None) == 0

    @pytest.mark.parametrize("document", [
        {"count": None},
        {},
        {"count": "null"},
        {"count": "many"},
        {"count": True},
        {"count": 2.5},
        {"count": [1, 2]},
    ])
    def test_non_numeric_count_is_zero(self, extractor, document):
        """Test that absent or malformed counts are a soft zero."""
        assert extractor.extract_count("count", document) == 0

    def test_numeric_string_count(self, extractor):
        assert extractor.extract_count("count", {"count": " 12 "}) == 12

    def test_integral_float_count(self, extractor):
        assert extractor.extract_count("count", {"count": 100.0}) == 100

    def test_failed_evaluation_count_is_zero(self, extractor):
        assert extractor.extract_count("length(@)", 5) == 0

    def test_malformed_count_logs_warning(self, extractor, caplog):
        """Test that a present but malformed field is visible in logs."""
        with caplog.at_level(logging.DEBUG, logger="pagebench.benchmark.field_extractor"):
            extractor.extract_count("count", {"count": "many"})
            extractor.extract_count("count", {})

        levels = [record.levelno for record in caplog.records]
        assert logging.WARNING in levels
        assert logging.DEBUG in levels

    def test_has_next_present(self, extractor):
        assert extractor.extract_has_next(OFFSET_HAS_NEXT_EXPR, hal_page(1, 100, True)) is True

    @pytest.mark.parametrize("links", [{}, {"next": None}, {"next": False}, {"next": ""}])
    def test_has_next_absent(self, extractor, links):
        assert extractor.extract_has_next(OFFSET_HAS_NEXT_EXPR, {"_links": links}) is False

    def test_cursor_from_last_item(self, extractor):
        assert extractor.extract_cursor(CURSOR_NEXT_EXPR, cursor_page(101, 100)) == "200"

    def test_cursor_string_token(self, extractor):
        assert extractor.extract_cursor("next", {"next": "eyJpZCI6MTB9"}) == "eyJpZCI6MTB9"

    def test_cursor_absent(self, extractor):
        assert extractor.extract_cursor(CURSOR_NEXT_EXPR, []) is None

    def test_validate_expression_raises_configuration_error(self, extractor):
        with pytest.raises(ConfigurationError) as exc_info:
            extractor.validate_expression(INVALID_EXPR, "count_expr_a")
        assert exc_info.value.config_key == "count_expr_a"
