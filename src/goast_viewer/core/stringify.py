"""Single-line rendering of Go expressions and types."""

from tree_sitter import Node

from goast_viewer.core.golang import named_children, node_text

# Kinds whose source text is already the rendering.
_VERBATIM_TYPES = frozenset(
    {
        "identifier",
        "field_identifier",
        "package_identifier",
        "type_identifier",
        "label_name",
        "blank_identifier",
        "dot",
        "int_literal",
        "float_literal",
        "imaginary_literal",
        "rune_literal",
        "interpreted_string_literal",
        "raw_string_literal",
        "true",
        "false",
        "nil",
        "iota",
    }
)


def _field(node: Node, name: str) -> Node | None:
    return node.child_by_field_name(name)


def _channel(node: Node) -> str:
    tokens = [child.type for child in node.children if not child.is_named]
    value = expr_to_string(_field(node, "value"))
    if tokens[:1] == ["<-"]:
        return f"<-chan {value}"
    if tokens[:2] == ["chan", "<-"]:
        return f"chan<- {value}"
    return f"chan {value}"


def _type_arguments(base: str, arguments: Node | None) -> str:
    if arguments is None:
        return base
    items = named_children(arguments)
    if len(items) == 1:
        return f"{base}[{expr_to_string(items[0])}]"
    return f"{base}[...]"


def _inner(node: Node) -> Node | None:
    items = named_children(node)
    return items[0] if items else None


def expr_to_string(node: Node | None) -> str:
    """Render an expression or type as one line of text.

    Returns ``""`` only for ``None``; unknown kinds render as their node kind.
    """
    if node is None:
        return ""

    kind = node.type
    if kind in _VERBATIM_TYPES:
        return node_text(node)

    if kind == "selector_expression":
        return f"{expr_to_string(_field(node, 'operand'))}.{expr_to_string(_field(node, 'field'))}"
    if kind == "qualified_type":
        return f"{expr_to_string(_field(node, 'package'))}.{expr_to_string(_field(node, 'name'))}"
    if kind == "pointer_type":
        return "*" + expr_to_string(_inner(node))
    if kind == "array_type":
        return f"[{expr_to_string(_field(node, 'length'))}]{expr_to_string(_field(node, 'element'))}"
    if kind == "implicit_length_array_type":
        return f"[...]{expr_to_string(_field(node, 'element'))}"
    if kind == "slice_type":
        return "[]" + expr_to_string(_field(node, "element"))
    if kind == "map_type":
        return f"map[{expr_to_string(_field(node, 'key'))}]{expr_to_string(_field(node, 'value'))}"
    if kind == "channel_type":
        return _channel(node)
    if kind == "function_type":
        return "func(...)"
    if kind == "interface_type":
        return "interface{}"
    if kind == "struct_type":
        return "struct{...}"
    if kind == "variadic_parameter_declaration":
        return "..." + expr_to_string(_field(node, "type"))
    if kind == "variadic_argument":
        return expr_to_string(_inner(node)) + "..."
    if kind == "generic_type":
        return _type_arguments(expr_to_string(_field(node, "type")), _field(node, "type_arguments"))
    if kind == "type_instantiation_expression":
        items = named_children(node)
        base = expr_to_string(_field(node, "type"))
        if len(items) == 2:
            return f"{base}[{expr_to_string(items[1])}]"
        return f"{base}[...]"
    if kind == "call_expression":
        return f"{callee_to_string(node)}(...)"
    if kind == "type_conversion_expression":
        return f"{expr_to_string(_field(node, 'type'))}(...)"
    if kind == "index_expression":
        return f"{expr_to_string(_field(node, 'operand'))}[{expr_to_string(_field(node, 'index'))}]"
    if kind == "binary_expression":
        left = expr_to_string(_field(node, "left"))
        right = expr_to_string(_field(node, "right"))
        return f"{left} {node_text(_field(node, 'operator'))} {right}"
    if kind == "unary_expression":
        return f"{node_text(_field(node, 'operator'))}{expr_to_string(_field(node, 'operand'))}"
    if kind == "negated_type":
        return "~" + expr_to_string(_inner(node))
    if kind == "type_elem":
        return " | ".join(expr_to_string(item) for item in named_children(node))
    if kind in ("parenthesized_expression", "parenthesized_type"):
        return f"({expr_to_string(_inner(node))})"
    if kind == "composite_literal":
        return f"{expr_to_string(_field(node, 'type'))}{{...}}"
    if kind == "literal_value":
        return "{...}"
    if kind == "literal_element":
        return expr_to_string(_inner(node))
    if kind == "func_literal":
        return "func(){...}"
    if kind == "type_assertion_expression":
        return f"{expr_to_string(_field(node, 'operand'))}.({expr_to_string(_field(node, 'type'))})"
    if kind == "keyed_element":
        items = named_children(node)
        return f"{expr_to_string(items[0])}: {expr_to_string(items[-1])}"

    return kind


def callee_to_string(call: Node) -> str:
    """Render the function part of a call, including explicit type arguments."""
    if call.type == "type_conversion_expression":
        return expr_to_string(_field(call, "type"))
    return _type_arguments(expr_to_string(_field(call, "function")), _field(call, "type_arguments"))
