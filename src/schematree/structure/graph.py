"""
Ordered tree graph with visibility pruning and text rendering.

Nodes live in an arena of records addressed by dense integer indices.
Children are index lists in insertion order and the parent is an optional
index, so a graph built by single-pass insertion can never contain a cycle.
Callers address nodes by their string id.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from schematree.core.types import NodeId
from schematree.exceptions import DuplicateNodeError, InvalidNodeError
from schematree.structure.render_style import RenderStyle
from schematree.structure.selection import SelectionSet

logger = logging.getLogger(__name__)


class Renderable(Protocol):
    """Payload stored in a tree graph node."""

    visible: bool

    def view(self) -> str: ...


@dataclass
class _NodeRecord:
    node_id: NodeId
    payload: Renderable
    parent: int | None = None
    children: list[int] = field(default_factory=list)


@dataclass
class _RenderState:
    style: RenderStyle
    selection: SelectionSet
    cursor: int
    lines: list[str] = field(default_factory=list)
    # first line of each visible node, in visible order
    line_starts: list[int] = field(default_factory=list)
    node_index: int = 0


class TreeGraph:
    """Owner of tree nodes, their adjacency, visibility and rendering.

    Each graph carries its own SelectionSet so that removing a node also
    forgets its selection, and a rebuilt graph starts with no selection.
    """

    def __init__(self, selection: SelectionSet | None = None):
        self._records: list[_NodeRecord] = []
        self._index: dict[NodeId, int] = {}
        self._roots: list[int] = []
        self.selection = selection if selection is not None else SelectionSet()

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def add_node(
        self, node_id: NodeId, payload: Renderable, parent: NodeId | None = None
    ) -> None:
        """
        Attach a new node under parent, or as a root when parent is empty.

        Params:
            node_id: Unique, non-empty identifier for the node
            payload: Renderable content for the node
            parent: Identifier of an existing node, or None for a root

        Raises:
            InvalidNodeError: If node_id is not a non-empty string, or parent
                is unknown
            DuplicateNodeError: If node_id is already in the graph
        """
        if not isinstance(node_id, str):
            raise InvalidNodeError(
                node_id, f"id must be a string, got {type(node_id).__name__}"
            )
        if not node_id:
            raise InvalidNodeError(node_id, "id cannot be empty")
        if node_id in self._index:
            raise DuplicateNodeError(node_id)

        parent_index = None
        if parent:
            parent_index = self._index.get(parent)
            if parent_index is None:
                raise InvalidNodeError(node_id, f"unknown parent '{parent}'")

        index = len(self._records)
        self._records.append(
            _NodeRecord(node_id=node_id, payload=payload, parent=parent_index)
        )
        self._index[node_id] = index
        if parent_index is None:
            self._roots.append(index)
        else:
            self._records[parent_index].children.append(index)

    def remove_node(self, node_id: NodeId) -> None:
        """
        Detach a node and its subtree from the graph.

        The node is removed from its parent's children (or from the roots),
        and selection state for it and every descendant is purged. Unknown
        ids are ignored.
        """
        index = self._index.get(node_id)
        if index is None:
            return

        record = self._records[index]
        if record.parent is None:
            self._roots.remove(index)
        else:
            self._records[record.parent].children.remove(index)

        stack = [index]
        while stack:
            current = self._records[stack.pop()]
            self._index.pop(current.node_id, None)
            self.selection.discard(current.node_id)
            stack.extend(current.children)
        logger.debug("Removed node %s", node_id)

    def get(self, node_id: NodeId) -> Renderable | None:
        """Return the payload stored for node_id, or None."""
        index = self._index.get(node_id)
        return None if index is None else self._records[index].payload

    def parent_of(self, node_id: NodeId) -> NodeId | None:
        index = self._index.get(node_id)
        if index is None:
            return None
        parent = self._records[index].parent
        return None if parent is None else self._records[parent].node_id

    def children_of(self, node_id: NodeId) -> list[NodeId]:
        index = self._index.get(node_id)
        if index is None:
            return []
        return [self._records[i].node_id for i in self._records[index].children]

    def roots(self) -> list[NodeId]:
        return [self._records[i].node_id for i in self._roots]

    def visible_nodes(self) -> list[NodeId]:
        """
        Return visible node ids in depth-first pre-order.

        A node whose payload is not visible is skipped together with its
        whole subtree.
        """
        result: list[NodeId] = []
        stack = list(reversed(self._roots))
        while stack:
            record = self._records[stack.pop()]
            if not record.payload.visible:
                continue
            result.append(record.node_id)
            stack.extend(reversed(record.children))
        return result

    def current_node(self, cursor: int) -> NodeId | None:
        """Return the visible node id at the cursor index, or None."""
        visible = self.visible_nodes()
        if 0 <= cursor < len(visible):
            return visible[cursor]
        return None

    def select_all(self) -> None:
        """Select every currently visible node."""
        self.selection.select_all(self.visible_nodes())

    def render(
        self,
        cursor: int = 0,
        height: int = 0,
        offset: int = 0,
        style: RenderStyle | None = None,
        selection: SelectionSet | None = None,
    ) -> str:
        """
        Draw the visible tree as text and cut out the scroll window.

        Each visible node produces one line per payload line. The first line
        carries the indentation for every ancestor, a fork or leaf connector,
        the cursor marker and the selection marker; following lines of a
        multi-line payload continue the prefix. When height is positive and
        the content is taller than height, a window of height lines is kept:
        it starts at the first line of node `offset` and moves just enough to
        show the cursor node.

        Params:
            cursor: Index into visible_nodes() of the highlighted node
            height: Window height in lines, 0 for no windowing
            offset: Index into visible_nodes() of the first node in the window
            style: Glyph configuration, defaults to RenderStyle()
            selection: Selection to draw, defaults to the graph's own

        Returns:
            Rendered lines joined by newlines, or "" for an empty tree
        """
        state = _RenderState(
            style=style or RenderStyle(),
            selection=self.selection if selection is None else selection,
            cursor=cursor,
        )
        for position, root in enumerate(self._roots):
            self._render_node(root, self._roots, position, [], state)

        lines = state.lines
        if not lines:
            return ""
        if height > 0 and len(lines) > height:
            start = self._window_start(state, cursor, height, offset)
            lines = lines[start : start + height]
        if state.style.margin:
            lines = [state.style.margin + line for line in lines]
        return "\n".join(lines)

    @staticmethod
    def _window_start(
        state: _RenderState, cursor: int, height: int, offset: int
    ) -> int:
        """
        First line of the window for a node-based offset.

        The offset names the first visible node, so it is mapped to that
        node's first line. The window then moves just enough to hold all of
        the cursor node's lines, or its first line if the node is taller
        than the window.
        """
        starts = state.line_starts
        start = starts[min(max(offset, 0), len(starts) - 1)]
        if 0 <= cursor < len(starts):
            cursor_first = starts[cursor]
            cursor_end = (
                starts[cursor + 1] if cursor + 1 < len(starts) else len(state.lines)
            )
            if cursor_end > start + height:
                start = cursor_end - height
            if cursor_first < start:
                start = cursor_first
        return start

    def _render_node(
        self,
        index: int,
        siblings: list[int],
        position: int,
        ancestors_last: list[bool],
        state: _RenderState,
    ) -> None:
        record = self._records[index]
        if not record.payload.visible:
            return

        style = state.style
        depth = len(ancestors_last)
        is_last = self._is_last_visible(position, siblings)

        lead = []
        for level, ancestor_last in enumerate(ancestors_last):
            if style.roots_without_prefix and level == 0:
                lead.append(style.padding)
                continue
            lead.append(style.indent if ancestor_last else style.branch)
            lead.append(style.padding)
        lead = "".join(lead)

        if style.roots_without_prefix and depth == 0:
            first_prefix = next_prefix = lead
        else:
            first_prefix = lead + style.connector(is_last)
            next_prefix = lead + style.continuation(is_last)

        cursor_marker = (
            style.cursor_marker
            if state.node_index == state.cursor
            else style.no_cursor_marker
        )
        selection_marker = (
            style.selected_marker
            if state.selection.is_selected(record.node_id)
            else style.unselected_marker
        )
        state.node_index += 1
        state.line_starts.append(len(state.lines))

        text_lines = record.payload.view().rstrip("\n").split("\n")
        state.lines.append(first_prefix + cursor_marker + selection_marker + text_lines[0])
        state.lines.extend(next_prefix + line for line in text_lines[1:])
        if style.vertical_pad_multiline and len(text_lines) > 1:
            tail = style.branch if self._has_visible_children(index) else ""
            state.lines.append(next_prefix + tail)

        child_ancestors = ancestors_last + [is_last]
        for child_position, child in enumerate(record.children):
            self._render_node(
                child, record.children, child_position, child_ancestors, state
            )

    def _is_last_visible(self, position: int, siblings: list[int]) -> bool:
        return not any(
            self._records[sibling].payload.visible for sibling in siblings[position + 1 :]
        )

    def _has_visible_children(self, index: int) -> bool:
        return any(
            self._records[child].payload.visible
            for child in self._records[index].children
        )
