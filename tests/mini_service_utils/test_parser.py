"""Tests for FunctionSourceParser."""

import pytest

from mini_service_utils.errors import UnsupportedSyntaxError
from mini_service_utils.parser import FunctionSourceParser


class TestNormalisation:
    """Tests for wrapping function text into a standalone expression."""

    def test_expression_shape(self) -> None:
        """Test that function text is wrapped in parentheses."""
        assert FunctionSourceParser.normalise("a => a", "expression") == "(a => a\n)"

    def test_method_shape(self) -> None:
        """Test that method shorthand is wrapped in an object literal."""
        assert FunctionSourceParser.normalise("ping() {}", "method") == "({ping() {}\n})"

    def test_unknown_shape(self) -> None:
        """Test that unknown shapes are rejected."""
        with pytest.raises(UnsupportedSyntaxError, match="Unknown source shape"):
            FunctionSourceParser.normalise("a => a", "statement")


class TestParsing:
    """Tests for parsing normalised sources."""

    def test_parse_returns_program(self) -> None:
        """Test that parsing returns the program root node."""
        root = FunctionSourceParser().parse("(a => a)")

        assert root.type == "program"
        assert not root.has_error

    def test_parse_function_tries_every_shape(self) -> None:
        """Test that function text is parsed under every wrapper in order."""
        parsed = FunctionSourceParser().parse_function("ping(a) {}")

        assert [source.shape for source in parsed] == ["expression", "method"]
        assert parsed[0].root_node.has_error
        assert not parsed[1].root_node.has_error
        assert parsed[1].source_code == "({ping(a) {}\n})"

    def test_malformed_source_still_produces_a_tree(self) -> None:
        """Test that malformed input degrades into error nodes."""
        root = FunctionSourceParser().parse("(function (a, b) { return a +* b }")

        assert root.type == "program"
        assert root.has_error
