"""Category-aware edits on a canonical template.

Every function mutates the template in place and returns True when it changed
something. Rejected edits (index out of range, a fourth section, removing the
last section of a family) return False and leave the template untouched, so
the section count of every family stays within [MIN_SECTIONS, MAX_SECTIONS].
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from mealtemplates.template.categories import empty_categories, placeholder_item
from mealtemplates.template.models import (
    MAX_SECTIONS,
    MIN_SECTIONS,
    Category,
    Family,
    FoodItem,
    Section,
    Template,
    as_category,
    as_family,
)
from mealtemplates.template.numbers import as_number, parse_float

logger = logging.getLogger(__name__)

FamilyRef = Union[Family, str]
CategoryRef = Union[Category, str]


def get_section(template: Template, family: FamilyRef, section_index: int) -> Optional[Section]:
    """Section at ``section_index``, or None when the index is out of range."""
    sections = template.sections(family)
    if 0 <= section_index < len(sections):
        return sections[section_index]
    return None


def _category_items(
    template: Template, family: FamilyRef, section_index: int, category: CategoryRef
) -> Optional[list[FoodItem]]:
    section = get_section(template, family, section_index)
    if section is None:
        return None
    return section.categories.setdefault(as_category(category), [placeholder_item()])


def _get_item(
    template: Template,
    family: FamilyRef,
    section_index: int,
    category: CategoryRef,
    item_index: int,
) -> Optional[FoodItem]:
    items = _category_items(template, family, section_index, category)
    if items is None or not 0 <= item_index < len(items):
        return None
    return items[item_index]


def coerce_base_grams(value: Any) -> Union[int, float, str]:
    """Value for a base-grams field edit: blank stays blank, junk becomes 0."""
    if value == "" or value is None:
        return ""
    number = parse_float(value)
    if number is None or number < 0:
        return 0
    return as_number(number)


def set_title(template: Template, family: FamilyRef, section_index: int, title: str) -> bool:
    section = get_section(template, family, section_index)
    if section is None:
        return False
    section.title = title
    return True


def add_item(
    template: Template,
    family: FamilyRef,
    section_index: int,
    category: CategoryRef,
    item: Optional[FoodItem] = None,
) -> bool:
    """Append an item (an empty row by default) to a category."""
    items = _category_items(template, family, section_index, category)
    if items is None:
        return False
    items.append(item if item is not None else placeholder_item())
    return True


def remove_item(
    template: Template,
    family: FamilyRef,
    section_index: int,
    category: CategoryRef,
    item_index: int,
) -> bool:
    """Remove an item; a category emptied this way gets a placeholder row back."""
    items = _category_items(template, family, section_index, category)
    if items is None or not 0 <= item_index < len(items):
        return False
    del items[item_index]
    if not items:
        items.append(placeholder_item())
    return True


def update_item_name(
    template: Template,
    family: FamilyRef,
    section_index: int,
    category: CategoryRef,
    item_index: int,
    name: str,
) -> bool:
    item = _get_item(template, family, section_index, category, item_index)
    if item is None:
        return False
    item.name = name
    return True


def update_item_base_grams(
    template: Template,
    family: FamilyRef,
    section_index: int,
    category: CategoryRef,
    item_index: int,
    value: Any,
) -> bool:
    item = _get_item(template, family, section_index, category, item_index)
    if item is None:
        return False
    item.base_grams = coerce_base_grams(value)
    return True


def add_section(template: Template, family: FamilyRef) -> bool:
    """Append an empty, untitled section unless the family is full."""
    sections = template.sections(family)
    if len(sections) >= MAX_SECTIONS:
        logger.debug("%s already has %d sections", as_family(family).value, MAX_SECTIONS)
        return False
    sections.append(Section(title="", categories=empty_categories()))
    return True


def remove_section(template: Template, family: FamilyRef, section_index: int) -> bool:
    """Remove a section unless it is the last one of its family."""
    sections = template.sections(family)
    if len(sections) <= MIN_SECTIONS or not 0 <= section_index < len(sections):
        return False
    del sections[section_index]
    return True
