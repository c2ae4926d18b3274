"""Meal-plan template normalization, editing, scaling and assignment.

Raw templates from storage, AI generation or older dashboard versions are
normalized into one canonical Template, edited through an EditingSession,
scaled per user and cleaned into bulk-assignment payloads.
"""

from __future__ import annotations

from mealtemplates.errors import (
    EmptyClipboard,
    IncompatibleKind,
    MalformedInput,
    MealTemplateError,
    ValidationFailed,
)
from mealtemplates.template import (
    CATEGORY_KEYS,
    Category,
    Family,
    FoodItem,
    Section,
    SectionClipboard,
    SectionKind,
    Template,
    normalize_section,
    normalize_template,
)
from mealtemplates.portions.scaling import scale_template
from mealtemplates.template.session import EditingSession
from mealtemplates.export.assignment import assign, plan_assignment
from mealtemplates.export.payload import format_for_assignment

__version__ = "0.1.0"

__all__ = [
    "CATEGORY_KEYS",
    "Category",
    "EditingSession",
    "EmptyClipboard",
    "Family",
    "FoodItem",
    "IncompatibleKind",
    "MalformedInput",
    "MealTemplateError",
    "Section",
    "SectionClipboard",
    "SectionKind",
    "Template",
    "ValidationFailed",
    "assign",
    "format_for_assignment",
    "normalize_section",
    "normalize_template",
    "plan_assignment",
    "scale_template",
]
