"""Parameter name extraction from JavaScript function source.

Recovers the ordered formal parameter names of a function from its source
text, without evaluating it. Supported forms, each optionally ``async``:

- ``function`` expressions, with or without a name, including generators
- "fat arrow" functions, with or without parentheses around a single parameter
- method shorthand taken out of its object literal: ``name(a, b) {}``

Parameters may be plain identifiers, have default values, be rest parameters,
or be destructured; destructured parameters get a generated ``param<N>`` name.
"""

from tree_sitter import Node

from mini_service_utils.errors import UnsupportedSyntaxError
from mini_service_utils.parser import FunctionSourceParser, ParsedSource
from mini_service_utils.signature.base import (
    find_child_by_type,
    get_node_text,
    has_syntax_error,
    significant_children,
)
from mini_service_utils.signature.models import (
    DefaultedParameter,
    FunctionSignature,
    NamedParameter,
    Parameter,
    RestParameter,
    StructuredParameter,
)

# Expression node types
ARROW_FUNCTION_TYPE = "arrow_function"
FUNCTION_TYPES = frozenset({"function_expression", "function"})
GENERATOR_FUNCTION_TYPE = "generator_function"
CALL_TYPE = "call_expression"
OBJECT_TYPE = "object"
METHOD_TYPE = "method_definition"

# Parameter node types, checked in this order
IDENTIFIER_TYPES = frozenset({"identifier", "undefined"})
DEFAULT_VALUE_TYPES = frozenset({"assignment_pattern", "assignment_expression"})
REST_TYPES = frozenset({"rest_pattern", "spread_element"})
DESTRUCTURING_TYPES = {
    "object_pattern": "object",
    "object": "object",
    "array_pattern": "array",
    "array": "array",
}


def extract_params(fn: object) -> list[str]:
    """Extract declared parameter names from a function's source.

    Args:
        fn: Function source text, or any object whose ``str()`` is the source

    Returns:
        Declared parameter names in order (might be empty)

    Raises:
        UnsupportedSyntaxError: If the value isn't a function, or uses
            unsupported syntax

    """
    return extract_signature(fn).names


def extract_signature(fn: object) -> FunctionSignature:
    """Extract the full signature of a function from its source.

    Error-free parses are preferred. When none of the normalised sources
    parses cleanly, syntax errors are tolerated as long as they stay out of
    the function head, so unusual function bodies do not prevent extraction.

    Args:
        fn: Function source text, or any object whose ``str()`` is the source

    Returns:
        FunctionSignature with one parameter per formal parameter

    Raises:
        UnsupportedSyntaxError: If the value isn't a function, or uses
            unsupported syntax

    """
    text = "" if fn is None else str(fn)
    parsed = FunctionSourceParser().parse_function(text)

    cause: UnsupportedSyntaxError | None = None
    for tolerate_errors in (False, True):
        for source in parsed:
            if not tolerate_errors and has_syntax_error(source.root_node):
                continue
            try:
                return _extract_from_source(source)
            except UnsupportedSyntaxError as e:
                cause = e

    raise UnsupportedSyntaxError(f"unsupported function {fn}") from cause


def _extract_from_source(source: ParsedSource) -> FunctionSignature:
    """Classify the single wrapped expression of a normalised source."""
    expression = _get_wrapped_expression(source.root_node)
    node_type = expression.type

    if source.shape == "method":
        if node_type != OBJECT_TYPE:
            raise UnsupportedSyntaxError(f"unexpected expression {node_type}")
        return _extract_method(expression, source.source_code)

    if node_type == ARROW_FUNCTION_TYPE:
        return _extract_arrow_function(expression, source.source_code)
    if node_type in FUNCTION_TYPES or node_type == GENERATOR_FUNCTION_TYPE:
        return _build_signature(
            "function" if node_type in FUNCTION_TYPES else "generator_function",
            expression,
            _get_formal_parameters(expression),
            source.source_code,
            name_node=expression.child_by_field_name("name"),
        )
    if node_type == CALL_TYPE:
        # Loosely recovered method shorthand: the call "arguments" are the
        # declared parameters.
        arguments = expression.child_by_field_name("arguments")
        if arguments is None or arguments.type != "arguments":
            raise UnsupportedSyntaxError("call expression without arguments")
        return _build_signature(
            "call",
            expression,
            significant_children(arguments),
            source.source_code,
            name_node=expression.child_by_field_name("function"),
        )
    raise UnsupportedSyntaxError(f"unexpected expression {node_type}")


def _get_wrapped_expression(root_node: Node) -> Node:
    """Return the expression inside the single parenthesised statement."""
    statements = significant_children(root_node)
    if len(statements) != 1 or statements[0].type != "expression_statement":
        found = [statement.type for statement in statements]
        raise UnsupportedSyntaxError(f"unexpected statements {found}")

    wrappers = significant_children(statements[0])
    if len(wrappers) != 1 or wrappers[0].type != "parenthesized_expression":
        raise UnsupportedSyntaxError("expression is not parenthesised")

    inner = significant_children(wrappers[0])
    if len(inner) != 1:
        raise UnsupportedSyntaxError(f"expected one expression, found {len(inner)}")
    return inner[0]


def _extract_arrow_function(node: Node, source_code: str) -> FunctionSignature:
    # a => {}
    single = node.child_by_field_name("parameter")
    if single is not None:
        return _build_signature(ARROW_FUNCTION_TYPE, node, [single], source_code)
    # (a, b) => {}
    return _build_signature(
        ARROW_FUNCTION_TYPE, node, _get_formal_parameters(node), source_code
    )


def _extract_method(node: Node, source_code: str) -> FunctionSignature:
    members = significant_children(node)
    if len(members) != 1 or members[0].type != METHOD_TYPE:
        raise UnsupportedSyntaxError("object is not a single method definition")
    method = members[0]
    return _build_signature(
        "method",
        method,
        _get_formal_parameters(method),
        source_code,
        name_node=method.child_by_field_name("name"),
    )


def _get_formal_parameters(node: Node) -> list[Node]:
    """Return the parameter nodes of a function, arrow or method node."""
    params_node = node.child_by_field_name("parameters")
    if params_node is None:
        params_node = find_child_by_type(node, "formal_parameters")
    if params_node is None:
        raise UnsupportedSyntaxError(f"no parameter list on {node.type}")
    if has_syntax_error(params_node):
        raise UnsupportedSyntaxError("syntax error in parameter list")
    return significant_children(params_node)


def _build_signature(
    kind: str,
    node: Node,
    param_nodes: list[Node],
    source_code: str,
    name_node: Node | None = None,
) -> FunctionSignature:
    return FunctionSignature(
        kind=kind,
        name=get_node_text(name_node, source_code) if name_node is not None else None,
        is_async=find_child_by_type(node, "async") is not None,
        parameters=[
            _classify_parameter(param_node, source_code, index + 1)
            for index, param_node in enumerate(param_nodes)
        ],
    )


def _classify_parameter(node: Node, source_code: str, position: int) -> Parameter:
    """Map a parameter node to its variant.

    A default value whose left-hand side is destructured recurses into it and
    ends up with a generated positional name.

    Args:
        node: AST node representing one formal parameter
        source_code: Normalised source code the node belongs to
        position: 1-based position of the parameter in the signature

    Returns:
        Classified parameter

    Raises:
        UnsupportedSyntaxError: If the node is not a supported parameter form

    """
    if has_syntax_error(node):
        raise UnsupportedSyntaxError(f"syntax error in parameter {position}")

    node_type = node.type
    if node_type in IDENTIFIER_TYPES:
        return NamedParameter(name=get_node_text(node, source_code), position=position)

    if node_type in DEFAULT_VALUE_TYPES:
        left = node.child_by_field_name("left")
        if left is None:
            raise UnsupportedSyntaxError(f"default value without target at {position}")
        target = _classify_parameter(left, source_code, position)
        return DefaultedParameter(name=target.name, position=position)

    if node_type in REST_TYPES:
        inner = significant_children(node)
        if len(inner) != 1:
            raise UnsupportedSyntaxError(f"rest parameter without target at {position}")
        target = _classify_parameter(inner[0], source_code, position)
        return RestParameter(name=target.name, position=position)

    if node_type in DESTRUCTURING_TYPES:
        return StructuredParameter(
            name=f"param{position}",
            position=position,
            pattern=DESTRUCTURING_TYPES[node_type],
        )

    raise UnsupportedSyntaxError(f"unexpected parameter {node_type} at {position}")
