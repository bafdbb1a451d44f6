"""
Shared test fixtures and utilities for the schematree test suite.
"""

import pytest

from schematree.schema.models import SchemaBlock


def make_block(data: dict) -> SchemaBlock:
    """Build a SchemaBlock from its provider-schema JSON shape."""
    return SchemaBlock.model_validate(data)


@pytest.fixture
def instance_block() -> SchemaBlock:
    """Resource block with one required argument and one computed attribute.

    Usage:
        def test_something(instance_block):
            projection = SchemaProjector().project(instance_block, ViewMode.ARGUMENTS)
    """
    return make_block(
        {
            "attributes": {
                "ami": {"type": "string", "required": True},
                "id": {"type": "string", "computed": True},
            }
        }
    )


@pytest.fixture
def network_block() -> SchemaBlock:
    """Resource block with top-level attributes and a two-level nested block."""
    return make_block(
        {
            "attributes": {
                "name": {"type": "string", "required": True, "description": "Name"},
                "tags": {"type": ["map", "string"], "optional": True},
                "arn": {"type": "string", "computed": True},
            },
            "block_types": {
                "network_config": {
                    "nesting_mode": "list",
                    "block": {
                        "attributes": {
                            "subnet_id": {"type": "string", "optional": True},
                            "private_ip": {"type": "string", "computed": True},
                        },
                        "block_types": {
                            "dns": {
                                "nesting_mode": "single",
                                "block": {
                                    "attributes": {
                                        "hostname": {
                                            "type": "string",
                                            "optional": True,
                                        }
                                    }
                                },
                            }
                        },
                    },
                },
                "timeouts": {
                    "nesting_mode": "single",
                    "block": {
                        "attributes": {"create": {"type": "string", "optional": True}}
                    },
                },
            },
        }
    )
