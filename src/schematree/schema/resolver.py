"""
Path resolution against schema blocks.

Paths name nested blocks for every segment but the last, which names an
attribute (or, for `resolve_block`, one more nested block).
"""

from collections.abc import Sequence

from schematree.exceptions import PathNotFoundError
from schematree.schema.models import SchemaAttribute, SchemaBlock


class PathResolver:
    """
    Schema path lookups.

    Malformed input never escapes as anything other than PathNotFoundError:
    an empty path, a missing block, a non-string segment or an unknown name
    all fail the same way.
    """

    @staticmethod
    def resolve(block: SchemaBlock | None, path: Sequence[str]) -> SchemaAttribute:
        """
        Resolve a path to the attribute it names.

        Params:
            block: Root schema block to start from
            path: Block names followed by a final attribute name

        Returns:
            The attribute found at path

        Raises:
            PathNotFoundError: If any segment is absent or the input is malformed

        Examples:
            ("ami",) -> root attribute "ami"
            ("network_config", "subnet_id") -> attribute "subnet_id" of block "network_config"
        """
        segments = PathResolver._validated(block, path)
        landed = PathResolver._walk(block, segments[:-1], segments)
        attribute = landed.attributes.get(segments[-1])
        if attribute is None:
            raise PathNotFoundError(segments, f"has no attribute '{segments[-1]}'")
        return attribute

    @staticmethod
    def find(block: SchemaBlock | None, path: Sequence[str]) -> SchemaAttribute | None:
        """Like resolve, but return None instead of raising."""
        try:
            return PathResolver.resolve(block, path)
        except PathNotFoundError:
            return None

    @staticmethod
    def resolve_block(block: SchemaBlock | None, path: Sequence[str]) -> SchemaBlock:
        """
        Resolve a path made only of nested block names.

        Raises:
            PathNotFoundError: If any segment is not a nested block
        """
        segments = PathResolver._validated(block, path)
        return PathResolver._walk(block, segments, segments)

    @staticmethod
    def _validated(block: SchemaBlock | None, path: Sequence[str]) -> tuple[str, ...]:
        if block is None:
            raise PathNotFoundError(None, "has no schema block to resolve against")
        if isinstance(path, str) or not isinstance(path, Sequence) or not path:
            raise PathNotFoundError(None, "must be a non-empty sequence of names")
        if not all(isinstance(segment, str) and segment for segment in path):
            raise PathNotFoundError(
                [str(segment) for segment in path], "contains an invalid segment"
            )
        return tuple(path)

    @staticmethod
    def _walk(
        block: SchemaBlock, segments: Sequence[str], full_path: tuple[str, ...]
    ) -> SchemaBlock:
        current = block
        for segment in segments:
            nested = current.block_types.get(segment)
            if nested is None:
                raise PathNotFoundError(full_path, f"has no nested block '{segment}'")
            current = nested.block
        return current
