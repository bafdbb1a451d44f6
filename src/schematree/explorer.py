"""
Interactive schema explorer session.

SchemaExplorer is the host for the tree engine: it receives collaborator
events (an entity and its schema were chosen, the view mode was toggled, an
export was requested), translates key presses into navigation and selection,
and renders the bounded tree view.

Every rebuild replaces the projection, its graph and its selection in one
assignment, so a half-built tree is never observable.
"""

import logging

from attrs import frozen

from schematree.config import ExplorerConfig
from schematree.core.types import NodeId, SchemaPath
from schematree.exceptions import InvalidInstanceNameError
from schematree.export.hcl_types import to_hcl_type
from schematree.export.serializer import export_arguments, export_attributes
from schematree.schema.models import SchemaBlock
from schematree.schema.nodes import AttributeNode, attribute_status
from schematree.schema.projector import Projection, SchemaProjector, ViewMode
from schematree.structure.viewport import ViewportCursor

logger = logging.getLogger(__name__)

NAVIGATION_HINT = (
    "↑/↓ or j/k to navigate, space to select, ctrl+a to select all, 'a' to toggle mode"
)


@frozen
class ExportOutcome:
    """Result of an export request.

    Arguments exports complete immediately and carry the document. Attributes
    exports first need an instance name: the outcome then has no document and
    `needs_instance_name` is set, with a suggested default.
    """

    kind: ViewMode
    document: str | None = None
    needs_instance_name: bool = False
    default_instance_name: str | None = None


class SchemaExplorer:
    """Browse one entity's schema as a selectable, scrollable tree."""

    def __init__(
        self,
        config: ExplorerConfig | None = None,
        projector: SchemaProjector | None = None,
    ):
        self.config = config or ExplorerConfig()
        self._projector = projector or SchemaProjector()
        self.width = self.config.width
        self.height = self.config.height
        self.mode = ViewMode.ARGUMENTS
        self.entity_name: str | None = None
        self.schema: SchemaBlock | None = None
        self.projection: Projection | None = None
        self.viewport = ViewportCursor(height=self._tree_height())

    def select_entity(self, name: str, block: SchemaBlock) -> None:
        """Show a newly chosen entity, starting in Arguments mode."""
        self.entity_name = name
        self.schema = block
        self.mode = ViewMode.ARGUMENTS
        self._rebuild()

    def toggle_mode(self) -> None:
        """Rebuild the same schema in the opposite view mode."""
        if self.schema is None:
            return
        self.mode = self.mode.toggled()
        self._rebuild()

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.viewport.set_height(self._tree_height())
        self.viewport.clamp(self._visible_count())

    def _tree_height(self) -> int:
        return max(self.height - self.config.reserved_lines, 1)

    def _rebuild(self) -> None:
        self.projection = self._projector.project(self.schema, self.mode)
        self.viewport.reset()
        logger.debug(
            "Rebuilt tree for %s in %s mode", self.entity_name, self.mode.value
        )

    def _visible_count(self) -> int:
        if self.projection is None:
            return 0
        return len(self.projection.graph.visible_nodes())

    def move_down(self) -> None:
        self.viewport.move_down(self._visible_count())

    def move_up(self) -> None:
        self.viewport.move_up(self._visible_count())

    def page_down(self) -> None:
        self.viewport.move_page_down(self._visible_count())

    def page_up(self) -> None:
        self.viewport.move_page_up(self._visible_count())

    def current_node(self) -> NodeId | None:
        if self.projection is None:
            return None
        return self.projection.graph.current_node(self.viewport.cursor)

    def toggle_current(self) -> None:
        """Toggle the node under the cursor, cascading when it is a block."""
        node_id = self.current_node()
        if node_id is None:
            return
        selection = self.projection.graph.selection
        if self.projection.is_composite(node_id):
            selection.toggle_cascading(node_id, self.projection.node_paths)
        else:
            selection.toggle(node_id)

    def toggle_select_all(self) -> None:
        """Select every visible node, or clear if all of them already are."""
        if self.projection is None:
            return
        graph = self.projection.graph
        visible = graph.visible_nodes()
        if visible and len(graph.selection.selected_nodes()) >= len(visible):
            graph.selection.clear()
        else:
            graph.select_all()

    def clear_selection(self) -> None:
        if self.projection is not None:
            self.projection.graph.selection.clear()

    def selected_paths(self) -> list[SchemaPath]:
        """Paths of the selected nodes, in tree order."""
        if self.projection is None:
            return []
        selection = self.projection.graph.selection
        return [
            path
            for node_id, path in self.projection.node_paths.items()
            if selection.is_selected(node_id)
        ]

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key press through the configured key map.

        Params:
            key: Key name, e.g. "j", "pgdown", " " or "ctrl+a"

        Returns:
            True if the key was bound to an action, False otherwise
        """
        action = self.config.keys.action_for(key)
        handlers = {
            "up": self.move_up,
            "down": self.move_down,
            "page_up": self.page_up,
            "page_down": self.page_down,
            "toggle": self.toggle_current,
            "select_all": self.toggle_select_all,
            "clear": self.clear_selection,
            "toggle_mode": self.toggle_mode,
        }
        handler = handlers.get(action)
        if handler is None:
            return False
        handler()
        return True

    def request_export(self) -> ExportOutcome | None:
        """
        Export the current selection in the current mode.

        Returns:
            None when nothing is loaded or selected; otherwise an outcome with
            the variables document (Arguments mode) or a request for an
            instance name (Attributes mode)
        """
        paths = self.selected_paths()
        if self.schema is None or not paths:
            logger.debug("Export requested with nothing selected")
            return None

        if self.mode is ViewMode.ARGUMENTS:
            return ExportOutcome(
                kind=self.mode, document=export_arguments(paths, self.schema)
            )
        return ExportOutcome(
            kind=self.mode,
            needs_instance_name=True,
            default_instance_name=self.config.default_instance_name,
        )

    def complete_export(self, instance_name: str) -> str:
        """
        Finish an Attributes export once an instance name is known.

        Raises:
            InvalidInstanceNameError: If instance_name is empty or blank
            InvalidEntityNameError: If no entity has been selected
        """
        if not isinstance(instance_name, str) or not instance_name.strip():
            raise InvalidInstanceNameError(instance_name)
        return export_attributes(
            self.selected_paths(), self.schema, self.entity_name, instance_name
        )

    def describe_current(self) -> str | None:
        """One-line summary of the schema element under the cursor."""
        node_id = self.current_node()
        if node_id is None:
            return None
        node = self.projection.node(node_id)
        location = ".".join(node.path)
        if isinstance(node, AttributeNode):
            attribute = node.attribute
            details = [to_hcl_type(attribute.type), attribute_status(attribute)]
            if attribute.sensitive:
                details.append("sensitive")
            text = f"{location}: {' '.join(d for d in details if d)}"
            if attribute.description:
                text += f" - {attribute.description}"
            return text
        block = node.block
        return (
            f"{location}: block ({node.nesting_mode}), "
            f"{len(block.attributes)} attributes, {len(block.block_types)} nested blocks"
        )

    def view(self) -> str:
        """Render the title, the windowed tree and the summary line."""
        title = f"Schema ({self.mode.value})"
        tree = ""
        if self.projection is not None:
            self.viewport.set_height(self._tree_height())
            self.viewport.clamp(self._visible_count())
            tree = self.projection.graph.render(
                cursor=self.viewport.cursor,
                height=self.viewport.height,
                offset=self.viewport.offset,
                style=self.config.style,
            )

        selected = len(self.selected_paths())
        if selected:
            summary = f"Selected: {selected} nodes (press 'e' to export, esc to clear)"
        else:
            summary = NAVIGATION_HINT
        return f"{title}\n{tree}\n{summary}"
