"""Conversion of a Go syntax tree into display nodes.

Every statement and expression kind produces a node; kinds without a
dedicated shape fall back to a leaf so nothing disappears from the tree.
"""

from collections.abc import Callable

from tree_sitter import Node

from goast_viewer.core.golang import named_children, node_text
from goast_viewer.core.stringify import callee_to_string, expr_to_string
from goast_viewer.models import DisplayNode

EMBEDDED = "(embedded)"


def _node(label: str, level: int, children: list[DisplayNode] | None = None) -> DisplayNode:
    return DisplayNode(label=label, indent_level=level, children=children or None)


def _field(node: Node, name: str) -> Node | None:
    return node.child_by_field_name(name)


def _statements(node: Node) -> list[Node]:
    """Statements of a block or case clause, with any statement_list unwrapped."""
    result: list[Node] = []
    for child in named_children(node):
        if child.type == "statement_list":
            result.extend(named_children(child))
        else:
            result.append(child)
    return result


def _clause_statements(clause: Node) -> list[Node]:
    """Statements following the ``:`` of a case clause."""
    result: list[Node] = []
    seen_colon = False
    for child in clause.children:
        if not child.is_named:
            seen_colon = seen_colon or child.type == ":"
            continue
        if seen_colon and child.type != "comment":
            if child.type == "statement_list":
                result.extend(named_children(child))
            else:
                result.append(child)
    return result


def _expression_list(node: Node | None) -> list[Node]:
    if node is None:
        return []
    if node.type == "expression_list":
        return named_children(node)
    return [node]


# ---------------------------------------------------------------------------
# Files and declarations
# ---------------------------------------------------------------------------


def _import_specs(declaration: Node) -> list[Node]:
    specs: list[Node] = []
    for child in named_children(declaration):
        if child.type == "import_spec_list":
            specs.extend(spec for spec in named_children(child) if spec.type == "import_spec")
        elif child.type == "import_spec":
            specs.append(child)
    return specs


def file_to_nodes(root: Node, level: int) -> list[DisplayNode]:
    """Children of a ``File:`` node: package, imports, then declarations."""
    nodes: list[DisplayNode] = []
    declarations = named_children(root)

    for child in declarations:
        if child.type == "package_clause":
            name = named_children(child)
            nodes.append(_node(f"Package: {node_text(name[0]) if name else ''}", level))
            break

    imports = [
        _node(f"Import: {node_text(_field(spec, 'path'))}", level + 1)
        for child in declarations
        if child.type == "import_declaration"
        for spec in _import_specs(child)
    ]
    if imports:
        nodes.append(_node("Imports", level, imports))

    for child in declarations:
        if child.type in ("package_clause", "import_declaration"):
            continue
        nodes.extend(decl_to_nodes(child, level))

    return nodes


def decl_to_nodes(decl: Node, level: int) -> list[DisplayNode]:
    kind = decl.type
    if kind == "type_declaration":
        return _type_decl_to_nodes(decl, level)
    if kind == "const_declaration":
        return _value_decl_to_nodes(decl, level, "Const")
    if kind == "var_declaration":
        return _value_decl_to_nodes(decl, level, "Var")
    if kind in ("function_declaration", "method_declaration"):
        return [func_decl_to_node(decl, level)]
    if kind == "import_declaration":
        return []
    return [_node(f"Decl: {kind}", level)]


def _type_decl_to_nodes(decl: Node, level: int) -> list[DisplayNode]:
    nodes = []
    for spec in named_children(decl):
        if spec.type not in ("type_spec", "type_alias"):
            continue
        name = node_text(_field(spec, "name"))
        nodes.append(_node(f"Type: {name}", level, _type_shape_to_nodes(_field(spec, "type"), level + 1)))
    return nodes


def _value_specs(decl: Node) -> list[Node]:
    specs: list[Node] = []
    for child in named_children(decl):
        if child.type == "var_spec_list":
            specs.extend(named_children(child))
        else:
            specs.append(child)
    return [spec for spec in specs if spec.type in ("const_spec", "var_spec")]


def _value_decl_to_nodes(decl: Node, level: int, keyword: str) -> list[DisplayNode]:
    """A ``Const`` or ``Var`` group, or nothing when it declares no names."""
    children = []
    for spec in _value_specs(decl):
        type_node = _field(spec, "type") if keyword == "Var" else None
        for name in _names(spec):
            entry = _node(f"{keyword}: {name}", level + 1)
            if type_node is not None:
                entry.children = [_node(f"Type: {expr_to_string(type_node)}", level + 2)]
            children.append(entry)
    if not children:
        return []
    return [_node(keyword, level, children)]


def _type_shape_to_nodes(type_node: Node | None, level: int) -> list[DisplayNode]:
    if type_node is not None and type_node.type == "struct_type":
        fields = []
        for field_list in named_children(type_node):
            for field in named_children(field_list):
                if field.type == "field_declaration":
                    fields.append(_struct_field_to_node(field, level + 1))
        return [_node("StructType", level, fields)]

    if type_node is not None and type_node.type == "interface_type":
        methods = [_interface_elem_to_node(elem, level + 1) for elem in named_children(type_node)]
        return [_node("InterfaceType", level, methods)]

    return [_node(f"TypeExpr: {expr_to_string(type_node)}", level)]


def _field_to_node(names: list[str], type_text: str, tag: Node | None, level: int) -> DisplayNode:
    children = [_node(f"Type: {type_text}", level + 1)]
    if tag is not None:
        children.append(_node(f"Tag: {node_text(tag)}", level + 1))
    return _node(f"Field: {', '.join(names) if names else EMBEDDED}", level, children)


def _names(node: Node) -> list[str]:
    return [node_text(name) for name in node.children_by_field_name("name") if name.is_named]


def _struct_field_to_node(field: Node, level: int) -> DisplayNode:
    type_text = expr_to_string(_field(field, "type"))
    names = _names(field)
    if not names and any(child.type == "*" for child in field.children):
        type_text = "*" + type_text
    return _field_to_node(names, type_text, _field(field, "tag"), level)


def _interface_elem_to_node(elem: Node, level: int) -> DisplayNode:
    if elem.type in ("method_elem", "method_spec"):
        return _field_to_node(_names(elem), "func(...)", None, level)
    return _field_to_node([], expr_to_string(elem), None, level)


def _parameters_to_nodes(params: Node | None, level: int) -> list[DisplayNode]:
    if params is None:
        return []
    if params.type != "parameter_list":
        # A bare result type such as ``func f() string``.
        return [_field_to_node([], expr_to_string(params), None, level)]
    nodes = []
    for param in named_children(params):
        if param.type == "variadic_parameter_declaration":
            nodes.append(_field_to_node(_names(param), expr_to_string(param), None, level))
        else:
            nodes.append(_field_to_node(_names(param), expr_to_string(_field(param, "type")), None, level))
    return nodes


def _receiver_type(receiver: Node) -> str:
    params = named_children(receiver)
    if not params:
        return ""
    return expr_to_string(_field(params[0], "type"))


def func_decl_to_node(decl: Node, level: int) -> DisplayNode:
    name = node_text(_field(decl, "name"))
    receiver = _field(decl, "receiver")
    if receiver is not None and named_children(receiver):
        label = f"Method: ({_receiver_type(receiver)}) {name}"
    else:
        label = f"Func: {name}"

    children = []
    params = _parameters_to_nodes(_field(decl, "parameters"), level + 2)
    if params:
        children.append(_node("Params", level + 1, params))
    results = _parameters_to_nodes(_field(decl, "result"), level + 2)
    if results:
        children.append(_node("Results", level + 1, results))
    body = _field(decl, "body")
    if body is not None:
        children.append(stmt_to_node(body, level + 1))

    return _node(label, level, children)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


def _block(stmt: Node, level: int) -> DisplayNode:
    return _node("BlockStmt", level, [stmt_to_node(child, level + 1) for child in _statements(stmt)])


def _expression_stmt(stmt: Node, level: int) -> DisplayNode:
    return _node("ExprStmt", level, [expr_to_node(child, level + 1) for child in named_children(stmt)])


def _assignment(stmt: Node, level: int) -> DisplayNode:
    operator = ":=" if stmt.type == "short_var_declaration" else node_text(_field(stmt, "operator"))
    operands = _expression_list(_field(stmt, "left")) + _expression_list(_field(stmt, "right"))
    return _node(f"AssignStmt ({operator})", level, [expr_to_node(expr, level + 1) for expr in operands])


def _return(stmt: Node, level: int) -> DisplayNode:
    results = [expr for child in named_children(stmt) for expr in _expression_list(child)]
    return _node("ReturnStmt", level, [expr_to_node(expr, level + 1) for expr in results])


def _if(stmt: Node, level: int) -> DisplayNode:
    children = []
    initializer = _field(stmt, "initializer")
    if initializer is not None:
        children.append(stmt_to_node(initializer, level + 1))
    children.append(expr_to_node(_field(stmt, "condition"), level + 1))
    children.append(stmt_to_node(_field(stmt, "consequence"), level + 1))
    alternative = _field(stmt, "alternative")
    if alternative is not None:
        children.append(stmt_to_node(alternative, level + 1))
    return _node("IfStmt", level, children)


def _for(stmt: Node, level: int) -> DisplayNode:
    body = _field(stmt, "body")
    clauses = [child for child in named_children(stmt) if child.type != "block"]
    clause = clauses[0] if clauses else None
    children = []

    if clause is not None and clause.type == "range_clause":
        for expr in _expression_list(_field(clause, "left")):
            children.append(expr_to_node(expr, level + 1))
        children.append(expr_to_node(_field(clause, "right"), level + 1))
        children.append(stmt_to_node(body, level + 1))
        return _node("RangeStmt", level, children)

    if clause is not None and clause.type == "for_clause":
        initializer = _field(clause, "initializer")
        if initializer is not None:
            children.append(stmt_to_node(initializer, level + 1))
        condition = _field(clause, "condition")
        if condition is not None:
            children.append(expr_to_node(condition, level + 1))
        update = _field(clause, "update")
        if update is not None:
            children.append(stmt_to_node(update, level + 1))
    elif clause is not None:
        children.append(expr_to_node(clause, level + 1))
    children.append(stmt_to_node(body, level + 1))
    return _node("ForStmt", level, children)


def _decl_stmt(stmt: Node, level: int) -> DisplayNode:
    return _node("DeclStmt", level, decl_to_nodes(stmt, level + 1))


def _call_stmt(label: str) -> Callable[[Node, int], DisplayNode]:
    def build(stmt: Node, level: int) -> DisplayNode:
        return _node(label, level, [expr_to_node(child, level + 1) for child in named_children(stmt)])

    return build


def _case_clause(clause: Node, level: int) -> DisplayNode:
    if clause.type == "default_case":
        label, matches = "CaseClause (default)", []
    elif clause.type == "type_case":
        label = "CaseClause"
        types = [t for t in clause.children_by_field_name("type") if t.is_named]
        matches = [_node(f"Type: {expr_to_string(t)}", level + 1) for t in types]
    else:
        label = "CaseClause"
        matches = [expr_to_node(expr, level + 1) for expr in _expression_list(_field(clause, "value"))]
    body = [stmt_to_node(child, level + 1) for child in _clause_statements(clause)]
    return _node(label, level, matches + body)


def _comm_clause(clause: Node, level: int) -> DisplayNode:
    children = []
    label = "CommClause (default)"
    if clause.type == "communication_case":
        label = "CommClause"
        communication = _field(clause, "communication")
        if communication is not None:
            children.append(stmt_to_node(communication, level + 1))
    children.extend(stmt_to_node(child, level + 1) for child in _clause_statements(clause))
    return _node(label, level, children)


def _clauses_block(stmt: Node, level: int, build: Callable[[Node, int], DisplayNode]) -> DisplayNode:
    kinds = ("expression_case", "type_case", "communication_case", "default_case")
    clauses = [build(child, level + 1) for child in named_children(stmt) if child.type in kinds]
    return _node("BlockStmt", level, clauses)


def _switch(stmt: Node, level: int) -> DisplayNode:
    children = []
    initializer = _field(stmt, "initializer")
    if initializer is not None:
        children.append(stmt_to_node(initializer, level + 1))
    value = _field(stmt, "value")
    if value is not None:
        children.append(expr_to_node(value, level + 1))
    children.append(_clauses_block(stmt, level + 1, _case_clause))
    return _node("SwitchStmt", level, children)


def _type_switch(stmt: Node, level: int) -> DisplayNode:
    children = []
    initializer = _field(stmt, "initializer")
    if initializer is not None:
        children.append(stmt_to_node(initializer, level + 1))
    alias = _field(stmt, "alias")
    if alias is not None:
        names = ", ".join(expr_to_string(expr) for expr in _expression_list(alias))
        children.append(_node(f"Assign: {names}", level + 1))
    children.append(expr_to_node(_field(stmt, "value"), level + 1))
    children.append(_clauses_block(stmt, level + 1, _case_clause))
    return _node("TypeSwitchStmt", level, children)


def _select(stmt: Node, level: int) -> DisplayNode:
    return _node("SelectStmt", level, [_clauses_block(stmt, level + 1, _comm_clause)])


def _receive(stmt: Node, level: int) -> DisplayNode:
    right = expr_to_node(_field(stmt, "right"), level + 1)
    left = _expression_list(_field(stmt, "left"))
    if not left:
        return _node("ExprStmt", level, [right])
    operator = next((child.type for child in stmt.children if child.type in ("=", ":=")), "=")
    children = [expr_to_node(expr, level + 1) for expr in left]
    return _node(f"AssignStmt ({operator})", level, children + [right])


def _send(stmt: Node, level: int) -> DisplayNode:
    children = [expr_to_node(_field(stmt, "channel"), level + 1), expr_to_node(_field(stmt, "value"), level + 1)]
    return _node("SendStmt", level, children)


def _inc_dec(stmt: Node, level: int) -> DisplayNode:
    operator = "++" if stmt.type == "inc_statement" else "--"
    return _node(f"IncDecStmt ({operator})", level, [expr_to_node(child, level + 1) for child in named_children(stmt)])


def _branch(stmt: Node, level: int) -> DisplayNode:
    keyword = stmt.type.removesuffix("_statement")
    labels = named_children(stmt)
    if labels:
        return _node(f"BranchStmt ({keyword} {node_text(labels[0])})", level)
    return _node(f"BranchStmt ({keyword})", level)


def _labeled(stmt: Node, level: int) -> DisplayNode:
    label = node_text(_field(stmt, "label"))
    inner = [child for child in named_children(stmt) if child.type != "label_name"]
    return _node(f"LabeledStmt ({label})", level, [stmt_to_node(child, level + 1) for child in inner])


def _empty(stmt: Node, level: int) -> DisplayNode:
    return _node("EmptyStmt", level)


_STATEMENT_BUILDERS: dict[str, Callable[[Node, int], DisplayNode]] = {
    "block": _block,
    "expression_statement": _expression_stmt,
    "assignment_statement": _assignment,
    "short_var_declaration": _assignment,
    "return_statement": _return,
    "if_statement": _if,
    "for_statement": _for,
    "var_declaration": _decl_stmt,
    "const_declaration": _decl_stmt,
    "type_declaration": _decl_stmt,
    "defer_statement": _call_stmt("DeferStmt"),
    "go_statement": _call_stmt("GoStmt"),
    "expression_switch_statement": _switch,
    "type_switch_statement": _type_switch,
    "select_statement": _select,
    "receive_statement": _receive,
    "send_statement": _send,
    "inc_statement": _inc_dec,
    "dec_statement": _inc_dec,
    "break_statement": _branch,
    "continue_statement": _branch,
    "goto_statement": _branch,
    "fallthrough_statement": _branch,
    "labeled_statement": _labeled,
    "empty_statement": _empty,
}


def stmt_to_node(stmt: Node | None, level: int) -> DisplayNode:
    if stmt is None:
        return _node("BadStmt", level)
    build = _STATEMENT_BUILDERS.get(stmt.type)
    if build is None:
        return _node(stmt.type, level)
    return build(stmt, level)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


def _unwrap_element(node: Node) -> Node:
    """Strip the ``literal_element`` wrapper around composite literal entries."""
    if node.type == "literal_element":
        inner = named_children(node)
        if inner:
            return inner[0]
    return node


def _call(expr: Node, level: int) -> DisplayNode:
    children = [_node(f"Fun: {callee_to_string(expr)}", level + 1)]
    if expr.type == "type_conversion_expression":
        arguments = [_field(expr, "operand")]
    else:
        argument_list = _field(expr, "arguments")
        arguments = named_children(argument_list) if argument_list is not None else []
    args = [expr_to_node(arg, level + 2) for arg in arguments if arg is not None]
    if args:
        children.append(_node("Args", level + 1, args))
    return _node("CallExpr", level, children)


def _binary(expr: Node, level: int) -> DisplayNode:
    children = [expr_to_node(_field(expr, "left"), level + 1), expr_to_node(_field(expr, "right"), level + 1)]
    return _node(f"BinaryExpr ({node_text(_field(expr, 'operator'))})", level, children)


def _unary(expr: Node, level: int) -> DisplayNode:
    operator = node_text(_field(expr, "operator"))
    operand = [expr_to_node(_field(expr, "operand"), level + 1)]
    if operator == "*":
        return _node("StarExpr", level, operand)
    return _node(f"UnaryExpr ({operator})", level, operand)


def _selector(expr: Node, level: int) -> DisplayNode:
    return _node(f"SelectorExpr: {expr_to_string(expr)}", level)


def _index(expr: Node, level: int) -> DisplayNode:
    children = [expr_to_node(_field(expr, "operand"), level + 1), expr_to_node(_field(expr, "index"), level + 1)]
    return _node("IndexExpr", level, children)


def _slice(expr: Node, level: int) -> DisplayNode:
    children = [expr_to_node(_field(expr, "operand"), level + 1)]
    for name in ("start", "end", "capacity"):
        bound = _field(expr, name)
        if bound is not None:
            children.append(expr_to_node(bound, level + 1))
    return _node("SliceExpr", level, children)


def _composite(expr: Node, level: int) -> DisplayNode:
    if expr.type == "literal_value":
        label, body = "CompositeLit", expr
    else:
        label, body = f"CompositeLit: {expr_to_string(_field(expr, 'type'))}", _field(expr, "body")
    elements = named_children(body) if body is not None else []
    return _node(label, level, [expr_to_node(_unwrap_element(element), level + 1) for element in elements])


def _key_value(expr: Node, level: int) -> DisplayNode:
    parts = [_unwrap_element(part) for part in named_children(expr)]
    children = [_node(f"Key: {expr_to_string(parts[0])}", level + 1), expr_to_node(parts[-1], level + 1)]
    return _node("KeyValueExpr", level, children)


def _func_literal(expr: Node, level: int) -> DisplayNode:
    body = _field(expr, "body")
    return _node("FuncLit", level, [stmt_to_node(body, level + 1)] if body is not None else None)


def _type_assertion(expr: Node, level: int) -> DisplayNode:
    children = [expr_to_node(_field(expr, "operand"), level + 1)]
    type_node = _field(expr, "type")
    if type_node is not None:
        children.append(_node(f"Type: {expr_to_string(type_node)}", level + 1))
    return _node("TypeAssertExpr", level, children)


def _variadic(expr: Node, level: int) -> DisplayNode:
    inner = named_children(expr)
    return expr_to_node(inner[0], level) if inner else _node(expr_to_string(expr), level)


_EXPRESSION_BUILDERS: dict[str, Callable[[Node, int], DisplayNode]] = {
    "call_expression": _call,
    "type_conversion_expression": _call,
    "binary_expression": _binary,
    "unary_expression": _unary,
    "selector_expression": _selector,
    "index_expression": _index,
    "slice_expression": _slice,
    "composite_literal": _composite,
    "literal_value": _composite,
    "keyed_element": _key_value,
    "func_literal": _func_literal,
    "type_assertion_expression": _type_assertion,
    "variadic_argument": _variadic,
}


def expr_to_node(expr: Node | None, level: int) -> DisplayNode:
    build = _EXPRESSION_BUILDERS.get(expr.type) if expr is not None else None
    if build is None:
        return _node(expr_to_string(expr), level)
    return build(expr, level)
