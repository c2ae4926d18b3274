"""Index-based reordering of items and sections.

These are the mutations a drag-and-drop ends in: remove the element at
``from_index`` and reinsert it at ``to_index``. Nothing else moves relative
to each other and nothing is duplicated or lost.
"""

from __future__ import annotations

from typing import TypeVar

from mealtemplates.template.models import Template, as_category
from mealtemplates.template.operations import CategoryRef, FamilyRef, get_section

T = TypeVar("T")


def move(values: list[T], from_index: int, to_index: int) -> bool:
    """Splice-move one element of ``values`` in place.

    Returns False without touching the list when the indices are equal or
    either one is outside ``[0, len(values) - 1]``.
    """
    last = len(values) - 1
    if from_index == to_index or not (0 <= from_index <= last and 0 <= to_index <= last):
        return False
    values.insert(to_index, values.pop(from_index))
    return True


def reorder_item(
    template: Template,
    family: FamilyRef,
    section_index: int,
    category: CategoryRef,
    from_index: int,
    to_index: int,
) -> bool:
    """Move an item within one category of one section."""
    section = get_section(template, family, section_index)
    if section is None:
        return False
    items = section.categories.get(as_category(category))
    if items is None:
        return False
    return move(items, from_index, to_index)


def reorder_section(template: Template, family: FamilyRef, from_index: int, to_index: int) -> bool:
    """Move a section within its family (used for snacks)."""
    return move(template.sections(family), from_index, to_index)
