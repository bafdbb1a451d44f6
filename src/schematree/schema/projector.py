"""
Projection of schema blocks into browsable tree graphs.

A projection is built in a single depth-first pass and is never patched:
changing the schema or the view mode means building a new projection, which
invalidates every node id issued by the previous one.
"""

import logging
from enum import Enum

from attrs import field, frozen

from schematree.core.path_utils import path_key
from schematree.core.types import NodeId, SchemaPath
from schematree.schema.models import NestedBlock, SchemaAttribute, SchemaBlock
from schematree.schema.nodes import AttributeNode, BlockNode, SchemaNode
from schematree.structure.graph import TreeGraph

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    """Which top-level attributes a projection shows."""

    ARGUMENTS = "Arguments"  # attributes the user sets (not computed)
    ATTRIBUTES = "Attributes"  # attributes the provider computes

    def toggled(self) -> "ViewMode":
        if self is ViewMode.ARGUMENTS:
            return ViewMode.ATTRIBUTES
        return ViewMode.ARGUMENTS

    def includes(self, attribute: SchemaAttribute) -> bool:
        if self is ViewMode.ARGUMENTS:
            return not attribute.computed
        return attribute.computed


@frozen
class Projection:
    """Result of one projection pass.

    Holds the fresh graph plus the id to path mapping and its inverse. Node
    ids are the dot-joined paths, so both maps agree by construction.
    """

    graph: TreeGraph
    mode: ViewMode
    node_paths: dict[NodeId, SchemaPath] = field(factory=dict)
    path_to_node: dict[str, NodeId] = field(factory=dict)

    def node(self, node_id: NodeId) -> SchemaNode | None:
        return self.graph.get(node_id)

    def path_of(self, node_id: NodeId) -> SchemaPath | None:
        return self.node_paths.get(node_id)

    def node_for_path(self, path: SchemaPath) -> NodeId | None:
        return self.path_to_node.get(path_key(path))

    def is_composite(self, node_id: NodeId) -> bool:
        node = self.graph.get(node_id)
        return node is not None and node.is_composite

    @property
    def composites(self) -> dict[NodeId, bool]:
        """Composite flag for every node, derived from the node variants."""
        return {node_id: self.is_composite(node_id) for node_id in self.node_paths}


class SchemaProjector:
    """Builds a TreeGraph and path maps from a schema block.

    Projection rules:
    - Top-level attributes are filtered by the view mode.
    - Nested blocks always appear, whatever the mode.
    - Attributes inside nested blocks are all included, without mode filtering.

    The last rule differs from the top level on purpose and is kept as is
    until the intended behavior for nested attributes is settled.
    """

    def project(self, block: SchemaBlock, mode: ViewMode) -> Projection:
        """
        Project a schema block under a view mode.

        Params:
            block: Root schema block of the selected entity
            mode: Arguments or Attributes

        Returns:
            Projection holding a new graph and its path maps
        """
        projection = Projection(graph=TreeGraph(), mode=mode)

        for name, attribute in block.attributes.items():
            if mode.includes(attribute):
                self._add_attribute(projection, None, name, attribute, (name,))

        for name, nested in block.block_types.items():
            self._add_block(projection, None, name, nested, (name,))

        logger.debug(
            "Projected %d nodes in %s mode", len(projection.node_paths), mode.value
        )
        return projection

    def _add_attribute(
        self,
        projection: Projection,
        parent_id: NodeId | None,
        name: str,
        attribute: SchemaAttribute,
        path: SchemaPath,
    ) -> None:
        node = AttributeNode(name=name, path=path, attribute=attribute)
        self._register(projection, parent_id, node)

    def _add_block(
        self,
        projection: Projection,
        parent_id: NodeId | None,
        name: str,
        nested: NestedBlock,
        path: SchemaPath,
    ) -> None:
        """Add a block node, then all of its attributes and sub-blocks beneath it."""
        node = BlockNode(
            name=name, path=path, block=nested.block, nesting_mode=nested.nesting_mode
        )
        node_id = self._register(projection, parent_id, node)

        for attr_name, attribute in nested.block.attributes.items():
            self._add_attribute(
                projection, node_id, attr_name, attribute, path + (attr_name,)
            )

        for block_name, sub_block in nested.block.block_types.items():
            self._add_block(projection, node_id, block_name, sub_block, path + (block_name,))

    def _register(
        self, projection: Projection, parent_id: NodeId | None, node: SchemaNode
    ) -> NodeId:
        node_id = path_key(node.path)
        projection.graph.add_node(node_id, node, parent=parent_id)
        projection.node_paths[node_id] = node.path
        projection.path_to_node[node_id] = node_id
        return node_id
