"""Conversion of template models to JSON request bodies and back.

Wire keys are camelCase (``baseGrams``, ``mealPlanTemplate``) because that is
what the storage and assignment endpoints exchange. Deserialization goes
through the normalizer, so any historical shape is accepted.
"""

from __future__ import annotations

from typing import Any

from mealtemplates.template.models import (
    CATEGORY_KEYS,
    AssignedPlan,
    AssignmentRequest,
    CatalogEntry,
    Family,
    FoodItem,
    Section,
    Template,
)
from mealtemplates.template.normalizer import normalize_template


def item_to_dict(item: FoodItem) -> dict[str, Any]:
    data: dict[str, Any] = {"name": item.name, "baseGrams": item.base_grams}
    if item.grams is not None:
        data["grams"] = item.grams
    return data


def section_to_dict(section: Section) -> dict[str, Any]:
    """Serialize a section with its categories and derived item list."""
    return {
        "title": section.title,
        "categories": {
            key: [item_to_dict(item) for item in section.categories.get(key, [])]
            for key in CATEGORY_KEYS
        },
        "items": [item_to_dict(item) for item in section.items],
    }


def serialize_template(template: Template) -> dict[str, Any]:
    """Convert a Template to a JSON-serializable dict.

    Args:
        template: Canonical template (grams included where set)

    Returns:
        Dict keyed by family, compatible with deserialize_template()
    """
    return {
        family.value: [section_to_dict(section) for section in template.sections(family)]
        for family in Family
    }


def deserialize_template(data: Any) -> Template:
    """Read a template dict in any supported shape."""
    return normalize_template(data)


def serialize_assigned_plan(plan: AssignedPlan) -> dict[str, Any]:
    data = serialize_template(plan.template)
    data["userId"] = plan.user_id
    data["portionScale"] = plan.portion_scale
    if plan.assigned_by is not None:
        data["assignedBy"] = plan.assigned_by
    if plan.created_at is not None:
        data["createdAt"] = plan.created_at.isoformat()
    return data


def serialize_assignment_request(request: AssignmentRequest) -> dict[str, Any]:
    return {
        "mealPlanTemplate": request.meal_plan_template,
        "mealPlanType": request.meal_plan_type,
        "selectedUserIds": list(request.selected_user_ids),
    }


def serialize_catalog_entry(entry: CatalogEntry) -> dict[str, Any]:
    return {
        "name": entry.name,
        "mealPlanType": entry.meal_plan_type,
        "mealPlanTemplate": entry.template,
    }
