"""
Hierarchical selection state for tree graph nodes.

Selection is tracked per node id. Plain toggles touch exactly one node;
cascading toggles propagate the new state to every node whose path lies
below the toggled node's path.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from schematree.core.path_utils import is_descendant_path
from schematree.core.types import NodeId

logger = logging.getLogger(__name__)


class SelectionSet:
    """Per-node boolean selection with a cascading toggle for composite nodes.

    Only ids mapped to True count as selected. Ids are never validated against
    a graph; the owning graph purges entries for nodes it removes.
    """

    def __init__(self):
        self._selected: dict[NodeId, bool] = {}

    def __len__(self) -> int:
        return len(self.selected_nodes())

    def __contains__(self, node_id: object) -> bool:
        return self._selected.get(node_id, False)

    def is_selected(self, node_id: NodeId) -> bool:
        return self._selected.get(node_id, False)

    def toggle(self, node_id: NodeId) -> bool:
        """Flip the selection of exactly one node and return its new state."""
        state = not self.is_selected(node_id)
        self._selected[node_id] = state
        return state

    def set(self, node_id: NodeId, selected: bool) -> None:
        """Set the selection of exactly one node."""
        self._selected[node_id] = bool(selected)

    def toggle_cascading(
        self, node_id: NodeId, paths: Mapping[NodeId, Sequence[str]]
    ) -> bool:
        """
        Toggle a composite node and propagate the result to its descendants.

        The desired state is the negation of the node's current state. Every
        other node whose path is a strict descendant of the node's path is set
        to the same state; siblings and ancestors are left alone.

        Params:
            node_id: The composite node being toggled
            paths: Mapping of every node id in the graph to its schema path

        Returns:
            The new selection state of node_id
        """
        base = paths.get(node_id)
        if base is None:
            logger.debug("No path known for %s, falling back to plain toggle", node_id)
            return self.toggle(node_id)

        desired = not self.is_selected(node_id)
        self._selected[node_id] = desired
        changed = 0
        for other_id, other_path in paths.items():
            if other_id != node_id and is_descendant_path(base, other_path):
                self._selected[other_id] = desired
                changed += 1
        logger.debug(
            "Cascaded selection=%s from %s to %d descendants", desired, node_id, changed
        )
        return desired

    def select_all(self, visible_ids: Iterable[NodeId]) -> None:
        """Select every id in visible_ids."""
        for node_id in visible_ids:
            self._selected[node_id] = True

    def clear(self) -> None:
        self._selected = {}

    def discard(self, node_id: NodeId) -> None:
        """Forget any state recorded for node_id."""
        self._selected.pop(node_id, None)

    def selected_nodes(self) -> list[NodeId]:
        """Return all selected ids, in the order they were first recorded."""
        return [node_id for node_id, selected in self._selected.items() if selected]
