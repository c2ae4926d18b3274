"""Canonical meal-plan template model.

A template has four families of one to three sections each. Every section
sorts its foods into six fixed categories (protein, carbs, fats, meat,
chicken, fish); the flat item list is derived from them on every read.
"""

from __future__ import annotations

from mealtemplates.template.categories import project, unproject
from mealtemplates.template.clipboard import SectionClipboard
from mealtemplates.template.models import (
    CATEGORY_KEYS,
    MAX_SECTIONS,
    MIN_SECTIONS,
    AssignedPlan,
    AssignmentRequest,
    CatalogEntry,
    Category,
    ClipboardEntry,
    Family,
    FoodItem,
    Section,
    SectionKind,
    Template,
)
from mealtemplates.template.normalizer import new_template, normalize_section, normalize_template

__all__ = [
    "CATEGORY_KEYS",
    "MAX_SECTIONS",
    "MIN_SECTIONS",
    "AssignedPlan",
    "AssignmentRequest",
    "CatalogEntry",
    "Category",
    "ClipboardEntry",
    "Family",
    "FoodItem",
    "Section",
    "SectionClipboard",
    "SectionKind",
    "Template",
    "new_template",
    "normalize_section",
    "normalize_template",
    "project",
    "unproject",
]
