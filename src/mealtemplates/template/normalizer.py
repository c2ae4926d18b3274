"""Normalization of raw template data into the canonical Template.

Templates reach the editor in three historical shapes:

- canonical: ``{"title", "categories": {...}, "items": [...]}``
- AI-generated: ``{"title", "protein": [...], "carbs": [...], ...}`` with the
  category lists as top-level keys
- legacy: ``{"title", "items": [...]}`` where items may be bare strings

and the template itself may use the plural array keys (``breakfasts``) or the
older single-object keys (``breakfast``). Everything here is tolerant: bad
input degrades to placeholder rows instead of raising, so old data can always
be opened and fixed in the editor.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Mapping, Union

from mealtemplates.template.categories import (
    empty_categories,
    placeholder_item,
    unproject,
)
from mealtemplates.template.models import (
    CATEGORY_KEYS,
    MAX_SECTIONS,
    Family,
    FoodItem,
    Section,
    Template,
)
from mealtemplates.template.numbers import parse_int

logger = logging.getLogger(__name__)

# baseGrams used when an AI item has no usable integer amount
AI_DEFAULT_BASE_GRAMS = 100


class SectionShape(Enum):
    """Which historical shape a raw section is in, by priority."""

    CANONICAL = "canonical"
    AI = "ai"
    LEGACY = "legacy"


def detect_shape(raw: Mapping[str, Any]) -> SectionShape:
    """Classify a raw section mapping.

    A ``categories`` mapping counts only when at least one category key holds
    a list; an empty or junk ``categories`` value falls through so the flat
    ``items`` saved next to it are not thrown away.
    """
    categories = raw.get("categories")
    if isinstance(categories, Mapping) and any(
        isinstance(categories.get(key), list) for key in CATEGORY_KEYS
    ):
        return SectionShape.CANONICAL
    if any(isinstance(raw.get(key), list) for key in CATEGORY_KEYS):
        return SectionShape.AI
    return SectionShape.LEGACY


def _normalize_base_grams(value: Any) -> Union[int, float, str]:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and not math.isfinite(value):
        return ""
    if isinstance(value, (int, float, str)):
        return value
    return ""


def _normalize_item(item: Any) -> FoodItem:
    """Canonical or legacy item: keep values, fill blanks."""
    if isinstance(item, FoodItem):
        return FoodItem(name=item.name, base_grams=_normalize_base_grams(item.base_grams))
    if isinstance(item, str):
        return FoodItem(name=item, base_grams="")
    if isinstance(item, Mapping):
        name = item.get("name")
        return FoodItem(
            name="" if name is None else str(name),
            base_grams=_normalize_base_grams(item.get("baseGrams")),
        )
    logger.debug("Replacing unreadable item %r with a placeholder", item)
    return placeholder_item()


def _normalize_ai_item(item: Any) -> FoodItem:
    """AI item: integer grams, defaulting when missing or unreadable."""
    if isinstance(item, str):
        return FoodItem(name=item, base_grams=AI_DEFAULT_BASE_GRAMS)
    if not isinstance(item, Mapping):
        logger.debug("Replacing unreadable AI item %r with a placeholder", item)
        return placeholder_item()
    name = item.get("name")
    grams = parse_int(item.get("baseGrams"))
    if grams is None or grams < 0:
        grams = AI_DEFAULT_BASE_GRAMS
    return FoodItem(name="" if name is None else str(name), base_grams=grams)


def _bucket(values: Any, normalize_item) -> list[FoodItem]:
    if isinstance(values, list) and values:
        return [normalize_item(item) for item in values]
    return [placeholder_item()]


def _section_as_raw(section: Section) -> dict[str, Any]:
    return {"title": section.title, "categories": section.categories}


def normalize_section(raw: Any, default_title: str = "") -> Section:
    """Convert one raw meal or snack into a canonical Section.

    Args:
        raw: Raw section in canonical, AI or legacy shape, or a Section
        default_title: Title to use when the raw title is absent or blank

    Returns:
        A well-formed Section; never raises
    """
    if isinstance(raw, Section):
        raw = _section_as_raw(raw)
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.debug("Section %r is not an object; using an empty section", raw)
        raw = {}

    shape = detect_shape(raw)
    if shape is SectionShape.CANONICAL:
        source = raw["categories"]
        categories = {key: _bucket(source.get(key), _normalize_item) for key in CATEGORY_KEYS}
    elif shape is SectionShape.AI:
        categories = {key: _bucket(raw.get(key), _normalize_ai_item) for key in CATEGORY_KEYS}
    else:
        items = raw.get("items")
        if isinstance(items, list):
            categories = unproject(_normalize_item(item) for item in items)
        else:
            categories = empty_categories()

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        title = default_title

    logger.debug("Normalized %s section %r", shape.value, title)
    return Section(title=title, categories=categories)


def raw_family_sections(raw: Mapping[str, Any], family: Family) -> list[Any]:
    """Raw section list for a family, preferring the plural key.

    Falls back to the legacy singular object, then to an empty list.
    """
    plural = raw.get(family.value)
    if isinstance(plural, list) and plural:
        return plural
    legacy_key = family.legacy_key
    if legacy_key is not None and raw.get(legacy_key):
        logger.debug("Upgrading legacy %r object to %r", legacy_key, family.value)
        return [raw[legacy_key]]
    return []


def normalize_template(raw: Any) -> Template:
    """Normalize a raw template into the canonical Template.

    Each family gets its sections normalized and titled ``"<Label> <n>"`` where
    blank, a single default section when it has none, and is truncated to
    MAX_SECTIONS. Normalizing an already canonical template returns an equal
    template.

    Args:
        raw: Raw template mapping (storage, AI or editor) or a Template

    Returns:
        Canonical Template
    """
    if isinstance(raw, Template):
        raw = {family.value: raw.sections(family) for family in Family}
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.debug("Template %r is not an object; using an empty template", raw)
        raw = {}

    families: dict[str, list[Section]] = {}
    for family in Family:
        sections = raw_family_sections(raw, family)
        if len(sections) > MAX_SECTIONS:
            logger.debug(
                "Truncating %s from %d to %d sections", family.value, len(sections), MAX_SECTIONS
            )
            sections = sections[:MAX_SECTIONS]
        if not sections:
            sections = [{}]
        families[family.value] = [
            normalize_section(section, family.default_title(index))
            for index, section in enumerate(sections)
        ]
    return Template(**families)


def new_template() -> Template:
    """Fresh template for the editor: one untitled, empty section per family."""
    return Template(
        **{family.value: [Section(title="", categories=empty_categories())] for family in Family}
    )
