"""
Schematree exception classes.

This package provides all exception types used throughout schematree for
consistent error handling and reporting.
"""

from schematree.exceptions.core import (
    DuplicateNodeError,
    EntityNotFoundError,
    InvalidEntityNameError,
    InvalidInstanceNameError,
    InvalidNodeError,
    PathNotFoundError,
    SchemaTreeError,
)

__all__ = [
    "SchemaTreeError",
    "InvalidNodeError",
    "DuplicateNodeError",
    "PathNotFoundError",
    "InvalidInstanceNameError",
    "InvalidEntityNameError",
    "EntityNotFoundError",
]
