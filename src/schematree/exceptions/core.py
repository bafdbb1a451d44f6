"""
Exception classes for schema tree browsing and export.

This module defines specific exception types for the error conditions that
can occur while building tree graphs, resolving schema paths, and exporting
selections as declarations.
"""

from collections.abc import Sequence


class SchemaTreeError(Exception):
    """Base exception for all schematree errors."""

    pass


class InvalidNodeError(SchemaTreeError):
    """Raised when a node cannot be added to a tree graph."""

    def __init__(self, node_id: str, reason: str):
        """
        Initialize the exception.

        Params:
            node_id: The identifier of the rejected node
            reason: Why the node is invalid
        """
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Invalid node '{node_id}': {reason}")


class DuplicateNodeError(InvalidNodeError):
    """Raised when attempting to add a node id that already exists."""

    def __init__(self, node_id: str):
        """
        Initialize the exception.

        Params:
            node_id: The node id that is already present in the graph
        """
        super().__init__(node_id, "already exists in graph")


class PathNotFoundError(SchemaTreeError):
    """Raised when a schema path does not resolve to an attribute or block."""

    def __init__(self, path: Sequence[str] | None, reason: str = "not found"):
        """
        Initialize the exception.

        Params:
            path: The path that failed to resolve
            reason: Which part of the lookup failed
        """
        self.path = tuple(path) if isinstance(path, (list, tuple)) else ()
        self.reason = reason
        shown = ".".join(str(p) for p in self.path)
        super().__init__(f"Path '{shown}' {reason}")


class InvalidInstanceNameError(SchemaTreeError):
    """Raised when an attributes export is requested without a usable instance name."""

    def __init__(self, instance_name: str | None):
        """
        Initialize the exception.

        Params:
            instance_name: The rejected instance name
        """
        self.instance_name = instance_name
        super().__init__(
            f"Invalid instance name {instance_name!r}: must be a non-blank string"
        )


class InvalidEntityNameError(SchemaTreeError):
    """Raised when an attributes export has no usable entity name to reference."""

    def __init__(self, entity_name: str | None):
        """
        Initialize the exception.

        Params:
            entity_name: The rejected entity name
        """
        self.entity_name = entity_name
        super().__init__(
            f"Invalid entity name {entity_name!r}: must be a non-blank string"
        )


class EntityNotFoundError(SchemaTreeError):
    """Raised when a provider or entity is missing from a provider schema document."""

    def __init__(self, entity_kind: str, name: str, provider: str | None = None):
        """
        Initialize the exception.

        Params:
            entity_kind: What was looked up (provider, resource, data source)
            name: The missing name
            provider: Provider searched, when the entity itself is missing
        """
        self.entity_kind = entity_kind
        self.name = name
        self.provider = provider
        if provider:
            message = f"{entity_kind} {name} not found in provider {provider}"
        else:
            message = f"{entity_kind} {name} not found in schema"
        super().__init__(message)
