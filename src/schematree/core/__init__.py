"""
Core schematree components.

This package provides the fundamental type aliases and path helpers used by
every other part of schematree.
"""

from schematree.core.path_utils import (
    ancestor_paths,
    filter_with_selected_ancestors,
    is_descendant_path,
    path_key,
    split_key,
)
from schematree.core.types import NodeId, SchemaPath, TypeExpression

__all__ = [
    "NodeId",
    "SchemaPath",
    "TypeExpression",
    "ancestor_paths",
    "filter_with_selected_ancestors",
    "is_descendant_path",
    "path_key",
    "split_key",
]
