"""Cleaned template payloads for submission.

The editor keeps placeholder rows and half-typed items around; none of that
may reach the assignment or storage endpoints. Cleaning drops every item
without a name or without a positive gram amount, trims names and turns gram
amounts into numbers. Sections are never dropped, even when nothing in them
survives: the validator reports those instead.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from mealtemplates.template.models import CATEGORY_KEYS, Family, FoodItem, Section, Template
from mealtemplates.template.normalizer import (
    SectionShape,
    detect_shape,
    normalize_template,
    raw_family_sections,
)
from mealtemplates.template.numbers import as_number, parse_float

# baseGrams given to legacy items stored as bare strings
LEGACY_ITEM_BASE_GRAMS = 100


def clean_item(item: Any) -> Optional[dict[str, Any]]:
    """Submission form of an item, or None if it must be dropped."""
    if isinstance(item, str):
        name = item.strip()
        return {"name": name, "baseGrams": LEGACY_ITEM_BASE_GRAMS} if name else None

    if isinstance(item, FoodItem):
        name, base_grams = item.name, item.base_grams
    elif isinstance(item, Mapping):
        name, base_grams = item.get("name"), item.get("baseGrams")
    else:
        return None

    if not isinstance(name, str) or not name.strip():
        return None
    grams = parse_float(base_grams)
    if grams is None or grams <= 0:
        return None
    return {"name": name.strip(), "baseGrams": as_number(grams)}


def clean_items(items: Any) -> list[dict[str, Any]]:
    if not isinstance(items, list):
        return []
    cleaned = (clean_item(item) for item in items)
    return [item for item in cleaned if item is not None]


def _format_section(section: Section) -> dict[str, Any]:
    cleaned = {key: clean_items(section.categories.get(key)) for key in CATEGORY_KEYS}
    return {
        "title": section.title,
        "categories": cleaned,
        "items": [item for key in CATEGORY_KEYS for item in cleaned[key]],
    }


def _upgrade_legacy_section(raw: Any) -> Any:
    """Give bare-string items of a legacy flat section their default grams."""
    if not isinstance(raw, Mapping) or detect_shape(raw) is not SectionShape.LEGACY:
        return raw
    items = raw.get("items")
    if not isinstance(items, list):
        return raw
    section = dict(raw)
    section["items"] = [
        {"name": item, "baseGrams": LEGACY_ITEM_BASE_GRAMS} if isinstance(item, str) else item
        for item in items
    ]
    return section


def _prepare_raw(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, Mapping):
        return {}
    return {
        family.value: [_upgrade_legacy_section(s) for s in raw_family_sections(raw, family)]
        for family in Family
    }


def format_for_assignment(template: Any) -> dict[str, Any]:
    """Cleaned request body for a template.

    Raw input goes through the normalizer first, so it gets the same section
    bounds, default titles and AI gram coercion as a template opened in the
    editor. Bare-string items of legacy flat sections count as 100 g.

    Args:
        template: Canonical Template, or raw template data in any of the
            historical shapes

    Returns:
        ``{family: [{"title", "categories", "items"}]}`` with invalid items
        removed from every category and from the derived item list
    """
    if not isinstance(template, Template):
        template = normalize_template(_prepare_raw(template))
    return {
        family.value: [_format_section(section) for section in template.sections(family)]
        for family in Family
    }
