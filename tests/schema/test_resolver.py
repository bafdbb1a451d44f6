"""
Tests for schema path resolution.

Focus Areas:
1. Resolution through nested blocks
2. Every malformed input fails with PathNotFoundError
"""

import pytest

from schematree.exceptions import PathNotFoundError
from schematree.schema import PathResolver


class TestResolve:
    """Test successful lookups."""

    def test_root_attribute(self, instance_block):
        attribute = PathResolver.resolve(instance_block, ("ami",))

        assert attribute.required is True

    def test_nested_attribute(self, network_block):
        attribute = PathResolver.resolve(network_block, ["network_config", "subnet_id"])

        assert attribute.optional is True

    def test_two_levels_deep(self, network_block):
        attribute = PathResolver.resolve(
            network_block, ("network_config", "dns", "hostname")
        )

        assert attribute.type == "string"

    def test_resolve_block(self, network_block):
        dns = PathResolver.resolve_block(network_block, ("network_config", "dns"))

        assert list(dns.attributes) == ["hostname"]


class TestResolveFailures:
    """Test that bad input never escapes as another exception type."""

    def test_missing_attribute(self, instance_block):
        with pytest.raises(PathNotFoundError) as exc_info:
            PathResolver.resolve(instance_block, ("missing",))

        assert exc_info.value.path == ("missing",)
        assert "has no attribute 'missing'" in str(exc_info.value)

    def test_missing_intermediate_block(self, network_block):
        with pytest.raises(PathNotFoundError) as exc_info:
            PathResolver.resolve(network_block, ("nope", "subnet_id"))

        assert "has no nested block 'nope'" in str(exc_info.value)

    def test_attribute_used_as_block(self, network_block):
        with pytest.raises(PathNotFoundError):
            PathResolver.resolve(network_block, ("name", "inner"))

    def test_block_is_not_an_attribute(self, network_block):
        with pytest.raises(PathNotFoundError):
            PathResolver.resolve(network_block, ("network_config",))

    @pytest.mark.parametrize("path", [(), [], "ami", None, 42, ("ami", ""), (1,)])
    def test_malformed_paths(self, instance_block, path):
        with pytest.raises(PathNotFoundError):
            PathResolver.resolve(instance_block, path)

    def test_missing_block(self):
        with pytest.raises(PathNotFoundError):
            PathResolver.resolve(None, ("ami",))

    def test_find_returns_none(self, instance_block):
        assert PathResolver.find(instance_block, ("missing",)) is None
        assert PathResolver.find(instance_block, ("ami",)) is not None

    def test_resolve_block_rejects_attribute(self, network_block):
        with pytest.raises(PathNotFoundError):
            PathResolver.resolve_block(network_block, ("network_config", "subnet_id"))
