"""
Configuration for the schema explorer.

Like the render style, configuration can be created from a dict or a YAML
file with partial overrides; anything not specified keeps its default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

from schematree.structure.render_style import RenderStyle


@dataclass(frozen=True)
class KeyMap:
    """Key names bound to each explorer action.

    Example YAML:
        up: [up, k]
        toggle_mode: [m]
    """

    up: tuple[str, ...] = ("up", "k")
    down: tuple[str, ...] = ("down", "j")
    page_up: tuple[str, ...] = ("pgup",)
    page_down: tuple[str, ...] = ("pgdown",)
    toggle: tuple[str, ...] = (" ",)
    select_all: tuple[str, ...] = ("ctrl+a",)
    clear: tuple[str, ...] = ("esc", "escape")
    toggle_mode: tuple[str, ...] = ("a",)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> KeyMap:
        """Create from dict; a single string is accepted in place of a list."""
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {}
        for name, keys in config.items():
            if name not in valid_fields:
                continue
            filtered[name] = (keys,) if isinstance(keys, str) else tuple(keys)
        return cls(**filtered)

    def action_for(self, key: str) -> str | None:
        """Return the action bound to key, or None if it is unbound."""
        for f in dataclass_fields(self):
            if key in getattr(self, f.name):
                return f.name
        return None


@dataclass(frozen=True)
class ExplorerConfig:
    """Sizing, defaults, glyphs and key bindings for a SchemaExplorer.

    Examples:
        # All defaults
        config = ExplorerConfig()

        # From YAML file
        config = ExplorerConfig.from_yaml("explorer.yaml")

    Example YAML:
        height: 30
        default_instance_name: this
        style:
          fork: "|--"
        keys:
          toggle_mode: [m]
    """

    width: int = 80
    height: int = 24
    # Lines taken by the title and the summary line
    reserved_lines: int = 2
    default_instance_name: str = "main"
    style: RenderStyle = field(default_factory=RenderStyle)
    keys: KeyMap = field(default_factory=KeyMap)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ExplorerConfig:
        """Create from dict, only overriding specified values.

        Nested `style` and `keys` mappings are applied as partial overrides
        of their own defaults.
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        if isinstance(filtered.get("style"), dict):
            filtered["style"] = RenderStyle.from_dict(filtered["style"])
        if isinstance(filtered.get("keys"), dict):
            filtered["keys"] = KeyMap.from_dict(filtered["keys"])
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ExplorerConfig:
        """Create from YAML file with partial overrides."""
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)
