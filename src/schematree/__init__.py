"""
Schematree - browse provider schemas as a selectable tree and export HCL

Schematree projects a provider schema block into an ordered tree with
cursor navigation and cascading selection, and turns the selection into
variable or output declarations.
"""

from importlib.metadata import version

from schematree.config import ExplorerConfig, KeyMap
from schematree.explorer import ExportOutcome, SchemaExplorer
from schematree.schema import (
    PathResolver,
    ProviderSchemaDocument,
    SchemaBlock,
    SchemaProjector,
    ViewMode,
)
from schematree.structure import RenderStyle, SelectionSet, TreeGraph, ViewportCursor

__version__ = version("schematree")

__all__ = [
    "__version__",
    "ExplorerConfig",
    "ExportOutcome",
    "KeyMap",
    "PathResolver",
    "ProviderSchemaDocument",
    "RenderStyle",
    "SchemaBlock",
    "SchemaExplorer",
    "SchemaProjector",
    "SelectionSet",
    "TreeGraph",
    "ViewMode",
    "ViewportCursor",
]
