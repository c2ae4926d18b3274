"""Per-user portion scaling."""

from mealtemplates.portions.scaling import (
    build_assigned_plan,
    resolve_portion_scale,
    scale_payload,
    scale_template,
    scaled_grams,
)

__all__ = [
    "build_assigned_plan",
    "resolve_portion_scale",
    "scale_payload",
    "scale_template",
    "scaled_grams",
]
