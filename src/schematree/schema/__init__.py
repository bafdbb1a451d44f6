"""
Schematree schema components.

This package provides the provider schema models, the projection of a schema
block into a tree graph, and path resolution back into the schema.
"""

from schematree.schema.models import (
    NestedBlock,
    ProviderSchema,
    ProviderSchemaDocument,
    ResourceSchema,
    SchemaAttribute,
    SchemaBlock,
)
from schematree.schema.nodes import AttributeNode, BlockNode, SchemaNode, type_label
from schematree.schema.projector import Projection, SchemaProjector, ViewMode
from schematree.schema.resolver import PathResolver

__all__ = [
    "AttributeNode",
    "BlockNode",
    "NestedBlock",
    "PathResolver",
    "Projection",
    "ProviderSchema",
    "ProviderSchemaDocument",
    "ResourceSchema",
    "SchemaAttribute",
    "SchemaBlock",
    "SchemaNode",
    "SchemaProjector",
    "ViewMode",
    "type_label",
]
