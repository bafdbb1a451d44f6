"""
Schematree tree engine components.

This package provides the generic ordered tree graph, its text renderer and
glyph configuration, the viewport cursor and the selection model.
"""

from schematree.structure.graph import Renderable, TreeGraph
from schematree.structure.render_style import RenderStyle
from schematree.structure.selection import SelectionSet
from schematree.structure.viewport import ViewportCursor

__all__ = [
    "Renderable",
    "RenderStyle",
    "SelectionSet",
    "TreeGraph",
    "ViewportCursor",
]
