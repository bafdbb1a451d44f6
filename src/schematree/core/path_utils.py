"""
Common path utilities for schematree.

A schema path is an ordered sequence of names locating an attribute or a
nested block within a schema hierarchy, e.g. ("network_config", "subnet_id").
This module provides the key, prefix and ancestor helpers shared by the
projector, the selection model and the export serializer.
"""

from collections.abc import Iterable, Sequence

from schematree.core.types import SchemaPath

PATH_SEPARATOR = "."


def path_key(path: Sequence[str]) -> str:
    """
    Build the string key for a path.

    Params:
        path: Path segments

    Returns:
        Dot-joined key, e.g. ("network_config", "subnet_id") -> "network_config.subnet_id"
    """
    return PATH_SEPARATOR.join(path)


def split_key(key: str) -> SchemaPath:
    """
    Split a dot-joined key back into a path.

    Examples:
        "network_config.subnet_id" -> ("network_config", "subnet_id")
        "" -> ()
    """
    if not key:
        return ()
    return tuple(key.split(PATH_SEPARATOR))


def is_descendant_path(prefix: Sequence[str], candidate: Sequence[str]) -> bool:
    """
    Check whether candidate lies strictly below prefix.

    Params:
        prefix: The ancestor path
        candidate: The path to test

    Returns:
        True if candidate starts with prefix and is strictly longer
    """
    if len(candidate) <= len(prefix):
        return False
    return tuple(candidate[: len(prefix)]) == tuple(prefix)


def ancestor_paths(path: Sequence[str]) -> list[SchemaPath]:
    """Return every strict prefix of path, shortest first."""
    return [tuple(path[:i]) for i in range(1, len(path))]


def filter_with_selected_ancestors(
    paths: Iterable[Sequence[str]],
) -> list[SchemaPath]:
    """
    Keep only the paths whose every strict prefix is also present.

    A nested attribute is exportable only while all of its parent blocks are
    selected; anything else is dropped silently.

    Params:
        paths: Selected paths, in any order

    Returns:
        Eligible paths in their input order, duplicates removed
    """
    candidates = [tuple(p) for p in paths]
    present = set(candidates)
    eligible: list[SchemaPath] = []
    seen: set[SchemaPath] = set()
    for path in candidates:
        if path in seen:
            continue
        seen.add(path)
        if all(ancestor in present for ancestor in ancestor_paths(path)):
            eligible.append(path)
    return eligible
