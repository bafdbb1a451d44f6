"""
Core type definitions for schematree.

This module contains fundamental type aliases shared by the tree engine,
the schema projector and the export serializer.
"""

from typing import Any

SchemaPath = tuple[str, ...]

NodeId = str

# JSON type expression as emitted by `terraform providers schema -json`,
# e.g. "string" or ["list", "string"] or ["object", {"a": "number"}]
TypeExpression = str | list[Any] | None
