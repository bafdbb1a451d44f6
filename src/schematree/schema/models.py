"""
Pydantic models for provider schema documents.

These mirror the JSON emitted by `terraform providers schema -json`: a
document maps provider sources to providers, providers map entity names to
resource schemas, and every resource schema holds one recursive block of
attributes and nested block types.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from schematree.exceptions import EntityNotFoundError


class SchemaAttribute(BaseModel):
    """A single attribute of a schema block."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: Any = None
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False

    @property
    def is_argument(self) -> bool:
        """Arguments are the attributes a user may set."""
        return self.required or self.optional


class SchemaBlock(BaseModel):
    """A recursive schema block: attributes plus named nested block types."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    attributes: dict[str, SchemaAttribute] = Field(default_factory=dict)
    block_types: dict[str, "NestedBlock"] = Field(default_factory=dict)
    description: str = ""

    @property
    def nested_blocks(self) -> dict[str, "SchemaBlock"]:
        """Nested blocks by name, without their nesting metadata."""
        return {name: nested.block for name, nested in self.block_types.items()}


class NestedBlock(BaseModel):
    """A nested block type together with how it nests inside its parent."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    nesting_mode: str = "single"
    block: SchemaBlock = Field(default_factory=SchemaBlock)
    min_items: int = 0
    max_items: int = 0


SchemaBlock.model_rebuild()


class ResourceSchema(BaseModel):
    """Schema of one resource, data source or provider configuration."""

    model_config = ConfigDict(extra="ignore")

    version: int = 0
    block: SchemaBlock = Field(default_factory=SchemaBlock)


class ProviderSchema(BaseModel):
    """All entity schemas published by one provider."""

    model_config = ConfigDict(extra="ignore")

    provider: ResourceSchema | None = None
    resource_schemas: dict[str, ResourceSchema] = Field(default_factory=dict)
    data_source_schemas: dict[str, ResourceSchema] = Field(default_factory=dict)


class ProviderSchemaDocument(BaseModel):
    """Top-level provider schema document."""

    model_config = ConfigDict(extra="ignore")

    format_version: str = ""
    provider_schemas: dict[str, ProviderSchema] = Field(default_factory=dict)

    @classmethod
    def from_json(cls, text: str | bytes) -> "ProviderSchemaDocument":
        """Parse a schema document from its JSON text."""
        return cls.model_validate_json(text)

    def get_provider(self, provider_name: str) -> ProviderSchema:
        """
        Look up a provider by its source address.

        Raises:
            EntityNotFoundError: If the provider is not in the document
        """
        provider = self.provider_schemas.get(provider_name)
        if provider is None:
            raise EntityNotFoundError("provider", provider_name)
        return provider

    def get_resource_schema(
        self, provider_name: str, resource_name: str
    ) -> ResourceSchema:
        """
        Look up a resource schema.

        Raises:
            EntityNotFoundError: If the provider or the resource is missing
        """
        provider = self.get_provider(provider_name)
        resource = provider.resource_schemas.get(resource_name)
        if resource is None:
            raise EntityNotFoundError("resource", resource_name, provider_name)
        return resource

    def get_data_source_schema(
        self, provider_name: str, data_source_name: str
    ) -> ResourceSchema:
        """
        Look up a data source schema.

        Raises:
            EntityNotFoundError: If the provider or the data source is missing
        """
        provider = self.get_provider(provider_name)
        data_source = provider.data_source_schemas.get(data_source_name)
        if data_source is None:
            raise EntityNotFoundError("data source", data_source_name, provider_name)
        return data_source
