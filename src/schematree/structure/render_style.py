"""
Glyph configuration for tree rendering.

This module provides the explicit style value handed to the tree renderer,
replacing package-level glyph constants.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RenderStyle:
    """Strings and switches controlling how a tree graph is drawn.

    Can be created from dict or YAML with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        style = RenderStyle()

        # ASCII-only connectors
        style = RenderStyle.from_dict({"fork": "|--", "leaf": "`--", "branch": "|  "})
    """

    margin: str = ""
    indent: str = "   "
    branch: str = "│  "
    fork: str = "├──"
    leaf: str = "└──"
    padding: str = ""

    cursor_marker: str = "> "
    no_cursor_marker: str = "  "
    selected_marker: str = "[x] "
    unselected_marker: str = "[ ] "

    # Add a blank continuation line after multi-line payloads
    vertical_pad_multiline: bool = False
    # Draw roots flush left, without fork/leaf connectors
    roots_without_prefix: bool = False

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> RenderStyle:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            RenderStyle instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RenderStyle:
        """Create from YAML file with partial overrides.

        Example YAML:
            fork: "|--"
            leaf: "`--"
            roots_without_prefix: true
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)

    def connector(self, is_last: bool) -> str:
        """Connector glyph for a node, leaf for the last visible sibling."""
        return self.leaf if is_last else self.fork

    def continuation(self, is_last: bool) -> str:
        """Glyph continuing a connector on the following lines of the same node."""
        return self.indent if is_last else self.branch
