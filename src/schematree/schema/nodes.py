"""
Tree payloads for projected schema elements.

A schema tree node is either an attribute (a leaf) or a block (a composite
whose children are its attributes and nested blocks). Each variant carries
its own path and schema object, so callers tell composites apart by type
instead of through a side table.
"""

from dataclasses import dataclass

from schematree.core.types import SchemaPath, TypeExpression
from schematree.schema.models import SchemaAttribute, SchemaBlock

_PRIMITIVE_LABELS = {"string": "string", "number": "number", "bool": "bool"}
_COLLECTION_LABELS = {"list", "set", "map", "tuple", "object"}


def type_label(type_expr: TypeExpression) -> str:
    """
    Short, stable label for a schema type, used in tree lines.

    Examples:
        "string" -> "string"
        ["list", "string"] -> "list"
        ["object", {"a": "number"}] -> "object"
        "dynamic" -> "any"
    """
    if isinstance(type_expr, str):
        return _PRIMITIVE_LABELS.get(type_expr, "any")
    if isinstance(type_expr, list) and type_expr and type_expr[0] in _COLLECTION_LABELS:
        return type_expr[0]
    return "any"


def attribute_status(attribute: SchemaAttribute) -> str:
    if attribute.required:
        return "required"
    if attribute.optional:
        return "optional"
    if attribute.computed:
        return "computed"
    return ""


@dataclass
class AttributeNode:
    """Leaf node for a schema attribute."""

    name: str
    path: SchemaPath
    attribute: SchemaAttribute
    visible: bool = True

    is_composite = False

    def view(self) -> str:
        text = self.name
        if self.attribute.type is not None:
            text += f" ({type_label(self.attribute.type)})"
        status = attribute_status(self.attribute)
        if status:
            text += f" [{status}]"
        return text


@dataclass
class BlockNode:
    """Composite node for a nested schema block."""

    name: str
    path: SchemaPath
    block: SchemaBlock
    nesting_mode: str = "single"
    visible: bool = True

    is_composite = True

    def view(self) -> str:
        return f"{self.name} [block]"


SchemaNode = AttributeNode | BlockNode
