"""JavaScript function source parser using tree-sitter."""

from dataclasses import dataclass

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from mini_service_utils.errors import UnsupportedSyntaxError

_JAVASCRIPT = Language(tree_sitter_javascript.language())

# Constants
_DEFAULT_ENCODING = "utf-8"

# Shape name -> (prefix, suffix). The newline keeps trailing line comments
# from swallowing the closing brackets.
_WRAPPERS: dict[str, tuple[str, str]] = {
    # arrow functions, function and generator expressions
    "expression": ("(", "\n)"),
    # method shorthand lifted out of its object literal: name(a, b) {}
    "method": ("({", "\n})"),
}


@dataclass(frozen=True)
class ParsedSource:
    """A normalised function source and its syntax tree."""

    shape: str
    source_code: str
    root_node: Node


class FunctionSourceParser:
    """Parser for the source text of a single JavaScript function.

    The text is wrapped into a standalone expression before parsing so every
    function form becomes a parsable program. tree-sitter never throws on
    malformed input: syntax problems surface as ERROR or MISSING nodes, which
    callers may inspect or tolerate.
    """

    def __init__(self) -> None:
        """Initialise the parser with the JavaScript grammar."""
        self.parser = Parser()
        self.parser.language = _JAVASCRIPT

    @staticmethod
    def normalise(text: str, shape: str) -> str:
        """Wrap function text so it parses as one expression statement.

        Args:
            text: Function source text
            shape: Wrapper name ("expression" or "method")

        Returns:
            Wrapped source code

        Raises:
            UnsupportedSyntaxError: If the shape is unknown

        """
        if shape not in _WRAPPERS:
            raise UnsupportedSyntaxError(
                f"Unknown source shape: {shape}. Available: {list(_WRAPPERS)}"
            )
        prefix, suffix = _WRAPPERS[shape]
        return f"{prefix}{text}{suffix}"

    def parse(self, source_code: str) -> Node:
        """Parse source code string.

        Args:
            source_code: Source code to parse

        Returns:
            AST root node

        """
        tree = self.parser.parse(bytes(source_code, _DEFAULT_ENCODING))
        return tree.root_node

    def parse_function(self, text: str) -> list[ParsedSource]:
        """Parse function text under every supported wrapper.

        Args:
            text: Function source text

        Returns:
            One parsed source per wrapper, in preference order

        """
        results: list[ParsedSource] = []
        for shape in _WRAPPERS:
            source_code = self.normalise(text, shape)
            results.append(ParsedSource(shape, source_code, self.parse(source_code)))
        return results
