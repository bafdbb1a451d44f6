"""
Conversion of schema type expressions into HCL type constraints.

Schema documents encode types as JSON: primitives are strings and
collections are lists headed by their kind, e.g. ["map", "string"] or
["object", {"id": "string"}].
"""

from schematree.core.types import TypeExpression

_PRIMITIVES = {"string", "number", "bool"}
_ELEMENT_COLLECTIONS = {"list", "set", "map"}
_STRUCTURAL = {"object", "tuple"}


def to_hcl_type(type_expr: TypeExpression) -> str:
    """
    Render a type expression as an HCL type constraint.

    Examples:
        "string" -> "string"
        ["list", "string"] -> "list(string)"
        ["object", {"b": "bool", "a": "number"}] -> "object({a = number, b = bool})"
        ["tuple", ["string", "number"]] -> "tuple([string, number])"
        None -> "any"
    """
    if isinstance(type_expr, str):
        return type_expr if type_expr in _PRIMITIVES else "any"
    if not isinstance(type_expr, list) or len(type_expr) < 2:
        return "any"

    kind, inner = type_expr[0], type_expr[1]
    if kind in _ELEMENT_COLLECTIONS:
        return f"{kind}({to_hcl_type(inner)})"
    if kind == "object" and isinstance(inner, dict):
        fields = ", ".join(f"{k} = {to_hcl_type(inner[k])}" for k in sorted(inner))
        return f"object({{{fields}}})"
    if kind == "tuple" and isinstance(inner, list):
        return f"tuple([{', '.join(to_hcl_type(t) for t in inner)}])"
    return "any"


def is_complex_type(type_expr: TypeExpression) -> bool:
    """Check whether a type contains an object or tuple at any depth."""
    if not isinstance(type_expr, list) or not type_expr:
        return False
    if type_expr[0] in _STRUCTURAL:
        return True
    if type_expr[0] in _ELEMENT_COLLECTIONS and len(type_expr) > 1:
        return is_complex_type(type_expr[1])
    return False


def escape_description(text: str) -> str:
    """
    Escape a description for use inside a double-quoted HCL string.

    Template sequences are escaped too, so `${...}` and `%{...}` stay
    literal text instead of becoming interpolations or directives.
    """
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("${", "$${")
        .replace("%{", "%%{")
    )
