"""Projection between category buckets and the flat item list."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from mealtemplates.template.models import CATEGORY_KEYS, Category, FoodItem


def placeholder_item() -> FoodItem:
    """An empty input row."""
    return FoodItem(name="", base_grams="")


def empty_categories() -> dict[str, list[FoodItem]]:
    """Every category holding a single placeholder row."""
    return {key: [placeholder_item()] for key in CATEGORY_KEYS}


def project(categories: Mapping[str, Sequence[FoodItem]]) -> list[FoodItem]:
    """Concatenate the category lists in fixed category order.

    Missing keys contribute nothing. The returned list shares its item objects
    with ``categories``.
    """
    items: list[FoodItem] = []
    for key in CATEGORY_KEYS:
        items.extend(categories.get(key) or [])
    return items


def unproject(items: Iterable[FoodItem]) -> dict[str, list[FoodItem]]:
    """Bucket a flat legacy item list.

    The source category of a flat item cannot be recovered, so every item goes
    into ``protein`` and the remaining buckets get one placeholder each. This
    loses information on purpose; it is only used for legacy data that never
    had categories.
    """
    categories = empty_categories()
    items = list(items)
    if items:
        categories[Category.PROTEIN.value] = items
    return categories
