"""Utility functions for tree-sitter AST traversal."""

from tree_sitter import Node

_DEFAULT_ENCODING = "utf-8"

# Node types that never count as parameters
_TRIVIAL_NODE_TYPES = frozenset({"comment", "html_comment"})


def get_node_text(node: Node, source_code: str) -> str:
    """Get the text content of an AST node.

    Args:
        node: Tree-sitter node with start_byte and end_byte attributes
        source_code: Original source code string

    Returns:
        Text content of the node

    """
    source_bytes = source_code.encode(_DEFAULT_ENCODING)
    return source_bytes[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)


def find_child_by_type(node: Node, child_type: str) -> Node | None:
    """Find the first direct child of a specific type.

    Args:
        node: Parent node to search in
        child_type: Type of child node to find

    Returns:
        First matching child node or None

    """
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def significant_children(node: Node) -> list[Node]:
    """Return the named children of a node, skipping comments."""
    return [child for child in node.named_children if not is_trivial_node(child)]


def is_trivial_node(node: Node) -> bool:
    """Check if a node is a comment."""
    return node.type in _TRIVIAL_NODE_TYPES


def has_syntax_error(node: Node) -> bool:
    """Check if a node or any descendant is an ERROR or MISSING node."""
    return node.has_error or node.is_error or node.is_missing
