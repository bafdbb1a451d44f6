"""
Schematree export components.

This package turns selected schema paths into HCL variable and output
declarations.
"""

from schematree.export.hcl_types import escape_description, is_complex_type, to_hcl_type
from schematree.export.serializer import (
    eligible_paths,
    export_arguments,
    export_attributes,
    export_section,
    export_selected,
    generate_instance_name,
)

__all__ = [
    "eligible_paths",
    "escape_description",
    "export_arguments",
    "export_attributes",
    "export_section",
    "export_selected",
    "generate_instance_name",
    "is_complex_type",
    "to_hcl_type",
]
