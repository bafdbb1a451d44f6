"""
Serialization of selected schema paths into HCL declarations.

Arguments become `variable` blocks and computed attributes become `output`
blocks. The text layout produced here is a fixed contract: headers, blank
lines and indentation are relied on byte for byte.

Only paths whose every ancestor path is also selected are exported, so a
nested attribute appears only while all of its enclosing blocks are
selected. Paths that do not resolve to an attribute are skipped.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence

from schematree.core.path_utils import filter_with_selected_ancestors
from schematree.core.types import SchemaPath
from schematree.exceptions import (
    InvalidEntityNameError,
    InvalidInstanceNameError,
    PathNotFoundError,
)
from schematree.export.hcl_types import escape_description, is_complex_type, to_hcl_type
from schematree.schema.models import SchemaAttribute, SchemaBlock
from schematree.schema.projector import ViewMode
from schematree.schema.resolver import PathResolver

logger = logging.getLogger(__name__)

SELECTED_ARGUMENTS_HEADER = "# Terraform Variables Generated from Selected Arguments\n\n"
SELECTED_ATTRIBUTES_HEADER = "# Terraform Outputs Generated from Selected Attributes\n\n"
NO_SELECTED_ARGUMENTS = "# No selected arguments available for variable conversion\n"
NO_SELECTED_ATTRIBUTES = (
    "# No selected computed attributes available for output conversion\n"
)

SECTION_ARGUMENTS_HEADER = "# Terraform Variables Generated from Resource Arguments\n\n"
SECTION_ATTRIBUTES_HEADER = "# Terraform Outputs Generated from Resource Attributes\n\n"
NO_SECTION_ARGUMENTS = "# No arguments available for variable conversion\n"
NO_SECTION_ATTRIBUTES = "# No computed attributes available for output conversion\n"


def eligible_paths(paths: Iterable[Sequence[str]]) -> list[SchemaPath]:
    """Paths whose ancestors are all selected, in sorted order."""
    return sorted(filter_with_selected_ancestors(paths))


def variable_block(name: str, attribute: SchemaAttribute) -> str:
    """Render one `variable` declaration for an argument."""
    description = attribute.description
    if not description:
        kind = "Required" if attribute.required else "Optional"
        description = f"{kind} argument for {name}"

    lines = [
        f'variable "{name}" {{',
        f"  type = {to_hcl_type(attribute.type)}",
        f'  description = "{escape_description(description)}"',
    ]
    if not attribute.required:
        lines.append("  default = null")
    lines.append("}")
    return "\n".join(lines) + "\n\n"


def output_block(name: str, reference: str, attribute: SchemaAttribute) -> str:
    """Render one `output` declaration, preceded by a shape comment for complex types."""
    lines = []
    if is_complex_type(attribute.type):
        lines.append(f"# {name} structure:")
        lines.append(f"# {to_hcl_type(attribute.type)}")
    lines.append(f'output "{name}" {{')
    lines.append(f"  value = {reference}")
    if attribute.description:
        lines.append(f'  description = "{escape_description(attribute.description)}"')
    if attribute.sensitive:
        lines.append("  sensitive = true")
    lines.append("}")
    return "\n".join(lines) + "\n\n"


def _resolved_attributes(
    paths: Iterable[Sequence[str]], block: SchemaBlock
) -> Iterator[tuple[SchemaPath, SchemaAttribute]]:
    for path in eligible_paths(paths):
        try:
            yield path, PathResolver.resolve(block, path)
        except PathNotFoundError as e:
            logger.debug("Skipping export of %s: %s", ".".join(path), e)


def export_arguments(paths: Iterable[Sequence[str]], block: SchemaBlock | None) -> str:
    """
    Convert selected argument paths into variable declarations.

    Params:
        paths: Selected paths, in any order
        block: Root schema block the paths were projected from

    Returns:
        The variables document, or a header plus an explanatory comment when
        no selected path is a required or optional argument
    """
    if block is None:
        return NO_SELECTED_ARGUMENTS

    parts = [SELECTED_ARGUMENTS_HEADER]
    for path, attribute in _resolved_attributes(paths, block):
        if attribute.is_argument:
            parts.append(variable_block("_".join(path), attribute))

    if len(parts) == 1:
        parts.append(NO_SELECTED_ARGUMENTS)
    logger.debug("Exported %d variables", len(parts) - 1)
    return "".join(parts)


def export_attributes(
    paths: Iterable[Sequence[str]],
    block: SchemaBlock | None,
    entity_name: str | None,
    instance_name: str | None,
) -> str:
    """
    Convert selected computed attribute paths into output declarations.

    Each output is named by the underscore-joined path and references
    `<entity_name>.<instance_name>.<dot-joined path>`.

    Params:
        paths: Selected paths, in any order
        block: Root schema block the paths were projected from
        entity_name: Resource type, e.g. "aws_instance"
        instance_name: Resource instance label, e.g. "main"

    Raises:
        InvalidEntityNameError: If entity_name is empty or blank
        InvalidInstanceNameError: If instance_name is empty or blank
    """
    if not isinstance(entity_name, str) or not entity_name.strip():
        raise InvalidEntityNameError(entity_name)
    if not isinstance(instance_name, str) or not instance_name.strip():
        raise InvalidInstanceNameError(instance_name)
    if block is None:
        return NO_SELECTED_ATTRIBUTES

    parts = [SELECTED_ATTRIBUTES_HEADER]
    for path, attribute in _resolved_attributes(paths, block):
        if attribute.computed:
            reference = f"{entity_name}.{instance_name}.{'.'.join(path)}"
            parts.append(output_block("_".join(path), reference, attribute))

    if len(parts) == 1:
        parts.append(NO_SELECTED_ATTRIBUTES)
    logger.debug("Exported %d outputs", len(parts) - 1)
    return "".join(parts)


def export_selected(
    paths: Iterable[Sequence[str]],
    block: SchemaBlock | None,
    kind: ViewMode,
    entity_name: str | None = None,
    instance_name: str | None = None,
) -> str:
    """Export selected paths as variables (Arguments) or outputs (Attributes)."""
    if kind is ViewMode.ARGUMENTS:
        return export_arguments(paths, block)
    return export_attributes(paths, block, entity_name, instance_name)


def generate_instance_name(entity_name: str) -> str:
    """
    Derive a placeholder instance label from an entity name.

    Examples:
        "aws_instance" -> "instance"
        "random" -> "example"
    """
    parts = entity_name.split("_")
    name = parts[-1] if len(parts) > 1 else ""
    return name or "example"


def export_section(entity_name: str, block: SchemaBlock | None, kind: ViewMode) -> str:
    """
    Export every top-level argument or computed attribute of an entity.

    Unlike the selection exports this ignores nested blocks and uses a
    generated instance name for output references.
    """
    if kind is ViewMode.ARGUMENTS:
        header, empty = SECTION_ARGUMENTS_HEADER, NO_SECTION_ARGUMENTS
    else:
        header, empty = SECTION_ATTRIBUTES_HEADER, NO_SECTION_ATTRIBUTES

    parts = [header]
    attributes = block.attributes if block is not None else {}
    instance_name = generate_instance_name(entity_name)
    for name in sorted(attributes):
        attribute = attributes[name]
        if kind is ViewMode.ARGUMENTS and attribute.is_argument:
            parts.append(variable_block(name, attribute))
        elif kind is ViewMode.ATTRIBUTES and attribute.computed:
            reference = f"{entity_name}.{instance_name}.{name}"
            parts.append(output_block(name, reference, attribute))

    if len(parts) == 1:
        parts.append(empty)
    return "".join(parts)
