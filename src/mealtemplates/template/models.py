"""Data models for meal-plan templates.

A template holds four families of sections (breakfasts, lunches, dinners,
snacks). Each section groups its food items into six fixed categories; the
flat item list that validation, preview and submission read is always derived
from those categories and is never stored on its own.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union

# Blank string is what an untouched input row holds.
BaseGrams = Union[int, float, str]

MIN_SECTIONS = 1
MAX_SECTIONS = 3

DEFAULT_MEAL_PLAN_TYPE = "Maintain Weight"


class Category(Enum):
    """Fixed food buckets within a section, in display order."""

    PROTEIN = "protein"
    CARBS = "carbs"
    FATS = "fats"
    MEAT = "meat"
    CHICKEN = "chicken"
    FISH = "fish"


CATEGORY_KEYS: tuple[str, ...] = tuple(c.value for c in Category)


class SectionKind(Enum):
    """Clipboard compatibility class of a section."""

    MEAL = "meal"
    SNACK = "snack"


class Family(Enum):
    """The four section groups of a template."""

    BREAKFASTS = "breakfasts"
    LUNCHES = "lunches"
    DINNERS = "dinners"
    SNACKS = "snacks"

    @property
    def kind(self) -> SectionKind:
        return SectionKind.SNACK if self is Family.SNACKS else SectionKind.MEAL

    @property
    def label(self) -> str:
        """Singular display label, e.g. ``Breakfast``."""
        return _FAMILY_LABELS[self]

    @property
    def legacy_key(self) -> Optional[str]:
        """Single-object key used by pre-array templates (snacks never had one)."""
        return _LEGACY_KEYS.get(self)

    def default_title(self, index: int) -> str:
        """Title given to the section at zero-based ``index`` when it has none."""
        return f"{self.label} {index + 1}"


_FAMILY_LABELS = {
    Family.BREAKFASTS: "Breakfast",
    Family.LUNCHES: "Lunch",
    Family.DINNERS: "Dinner",
    Family.SNACKS: "Snack",
}

_LEGACY_KEYS = {
    Family.BREAKFASTS: "breakfast",
    Family.LUNCHES: "lunch",
    Family.DINNERS: "dinner",
}


def as_family(family: Union[Family, str]) -> Family:
    """Accept a Family or its value (``"snacks"``)."""
    return family if isinstance(family, Family) else Family(family)


def as_category(category: Union[Category, str]) -> str:
    """Return the dict key for a Category or its value."""
    return category.value if isinstance(category, Category) else Category(category).value


@dataclass
class FoodItem:
    """One food row in a category.

    Attributes:
        name: Food name; an item with a blank name is invalid for submission
        base_grams: Unscaled portion entered by the template author, or ""
        grams: Scaled portion, only set by the portion projector
    """

    name: str = ""
    base_grams: BaseGrams = ""
    grams: Optional[int] = None

    @property
    def is_blank(self) -> bool:
        return not self.name.strip()


@dataclass
class Section:
    """One meal or snack instance, e.g. "Breakfast 2".

    Attributes:
        title: Section title shown to the user
        categories: Mapping of every category key to its ordered items
    """

    title: str = ""
    categories: dict[str, list[FoodItem]] = field(default_factory=dict)

    @property
    def items(self) -> list[FoodItem]:
        """Flat item list, always derived from the categories."""
        from mealtemplates.template.categories import project

        return project(self.categories)

    def copy(self) -> "Section":
        return copy.deepcopy(self)


@dataclass
class Template:
    """Canonical meal-plan template.

    Each family holds between MIN_SECTIONS and MAX_SECTIONS sections.
    """

    breakfasts: list[Section] = field(default_factory=list)
    lunches: list[Section] = field(default_factory=list)
    dinners: list[Section] = field(default_factory=list)
    snacks: list[Section] = field(default_factory=list)

    def sections(self, family: Union[Family, str]) -> list[Section]:
        """Return the (mutable) section list for a family."""
        return getattr(self, as_family(family).value)

    def section(self, family: Union[Family, str], index: int) -> Section:
        return self.sections(family)[index]

    def iter_sections(self):
        """Yield ``(family, index, section)`` for every section."""
        for family in Family:
            for index, section in enumerate(self.sections(family)):
                yield family, index, section

    def copy(self) -> "Template":
        return copy.deepcopy(self)


@dataclass
class ClipboardEntry:
    """Single-slot clipboard content."""

    kind: SectionKind
    section: Section


@dataclass
class AssignedPlan:
    """A template assigned to one user with scaled portions.

    Attributes:
        user_id: Identifier of the receiving user
        template: Template with ``grams`` set on every item
        portion_scale: Scale the grams were computed with
        assigned_by: Identifier of the employee who assigned the plan
        created_at: Assignment timestamp
    """

    user_id: str
    template: Template
    portion_scale: float
    assigned_by: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass
class AssignmentRequest:
    """Body handed to the assignment collaborator.

    Attributes:
        meal_plan_template: Cleaned template payload from format_for_assignment
        selected_user_ids: Users receiving the plan
        meal_plan_type: Goal label, e.g. "Maintain Weight"
    """

    meal_plan_template: dict
    selected_user_ids: list[str]
    meal_plan_type: str = DEFAULT_MEAL_PLAN_TYPE


@dataclass
class CatalogEntry:
    """A named template saved for reuse."""

    name: str
    template: dict
    meal_plan_type: str = DEFAULT_MEAL_PLAN_TYPE
