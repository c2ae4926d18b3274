"""Per-user portion scaling of template gram amounts.

The portion scale itself (from BMR/TDEE and the user's goal) is computed
elsewhere. Here it is only applied: every item's ``grams`` becomes
``round(baseGrams * portionScale)``, with halves rounded up.
"""

from __future__ import annotations

import copy
import math
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from mealtemplates.template.models import (
    CATEGORY_KEYS,
    AssignedPlan,
    Family,
    FoodItem,
    Template,
)
from mealtemplates.template.numbers import parse_float, round_half_up

DEFAULT_PORTION_SCALE = 1.0


def resolve_portion_scale(value: Any) -> float:
    """Usable scale for ``value``.

    Missing, non-numeric, infinite or negative scales fall back to 1.0.
    Zero is a legitimate scale.
    """
    if isinstance(value, bool):
        return DEFAULT_PORTION_SCALE
    scale = parse_float(value) if isinstance(value, str) else value
    if not isinstance(scale, (int, float)) or not math.isfinite(scale) or scale < 0:
        return DEFAULT_PORTION_SCALE
    return float(scale)


def base_grams_value(base_grams: Any) -> float:
    """Numeric base grams; blank, invalid and negative amounts count as 0."""
    number = parse_float(base_grams)
    if number is None or number < 0:
        return 0.0
    return number


def scaled_grams(base_grams: Any, portion_scale: float) -> int:
    """``round(base_grams * portion_scale)`` with the leniency above."""
    return round_half_up(base_grams_value(base_grams) * portion_scale)


def apply_portion_scale(template: Template, portion_scale: Any) -> Template:
    """Set ``grams`` on every item of ``template`` in place and return it."""
    scale = resolve_portion_scale(portion_scale)
    for _, _, section in template.iter_sections():
        for items in section.categories.values():
            for item in items:
                item.grams = scaled_grams(item.base_grams, scale)
    return template


def scale_template(template: Template, portion_scale: Any) -> Template:
    """Copy of ``template`` with ``grams`` set on every item.

    Args:
        template: Canonical template or plan
        portion_scale: Per-user multiplier (see resolve_portion_scale)

    Returns:
        New Template; the input is not modified
    """
    return apply_portion_scale(template.copy(), portion_scale)


def _scale_raw_items(items: Any, scale: float) -> list:
    scaled = []
    for item in items if isinstance(items, list) else []:
        if isinstance(item, Mapping):
            item = dict(item)
            item["grams"] = scaled_grams(item.get("baseGrams"), scale)
        scaled.append(item)
    return scaled


def scale_payload(payload: Mapping[str, Any], portion_scale: Any) -> dict[str, Any]:
    """Set ``grams`` throughout a JSON-shaped template or plan.

    Sections with ``categories`` are scaled per category and their ``items``
    rebuilt from them; sections without categories have their flat ``items``
    scaled. Keys other than the families are carried over unchanged.
    """
    scale = resolve_portion_scale(portion_scale)
    result = copy.deepcopy(dict(payload))
    for family in Family:
        sections = result.get(family.value)
        if not isinstance(sections, list):
            continue
        for section in sections:
            if not isinstance(section, dict):
                continue
            categories = section.get("categories")
            if isinstance(categories, Mapping) and categories:
                scaled_categories = {
                    key: _scale_raw_items(categories.get(key), scale) for key in CATEGORY_KEYS
                }
                section["categories"] = scaled_categories
                section["items"] = [
                    item for key in CATEGORY_KEYS for item in scaled_categories[key]
                ]
            else:
                section["items"] = _scale_raw_items(section.get("items"), scale)
    return result


def build_assigned_plan(
    template: Template,
    portion_scale: Any,
    user_id: str,
    assigned_by: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> AssignedPlan:
    """Scale ``template`` for one user and attach provenance."""
    scale = resolve_portion_scale(portion_scale)
    return AssignedPlan(
        user_id=user_id,
        template=scale_template(template, scale),
        portion_scale=scale,
        assigned_by=assigned_by,
        created_at=created_at or datetime.now(timezone.utc),
    )


def total_grams(items: list[FoodItem]) -> int:
    """Sum of ``grams`` over items, treating unscaled items as 0."""
    return sum(item.grams or 0 for item in items)
