"""Daily macro totals for a template or assigned plan.

A template carries up to three rotations per family, but a user eats one of
each per day, so only the first section of every family is counted.
"""

from __future__ import annotations

from dataclasses import dataclass

from mealtemplates.data.foods import lookup_food_macros
from mealtemplates.portions.scaling import base_grams_value
from mealtemplates.template.models import Family, FoodItem, Template
from mealtemplates.template.numbers import round_half_up


@dataclass
class DailyMacros:
    """Macronutrient totals in grams for one day."""

    proteins: float
    carbs: float
    fats: float

    @property
    def all_zero(self) -> bool:
        return self.proteins == 0 and self.carbs == 0 and self.fats == 0


def _item_grams(item: FoodItem) -> float:
    if item.grams is not None:
        return float(item.grams)
    return base_grams_value(item.base_grams)


def _round2(value: float) -> float:
    return round_half_up(value * 100) / 100


def compute_daily_macros(template: Template) -> DailyMacros:
    """Sum macros over the first section of each family.

    Items use their scaled ``grams`` when set, else their base grams. Foods
    missing from the macro table, and items with no grams, add nothing.

    Args:
        template: Canonical template, scaled or not

    Returns:
        DailyMacros rounded to 2 decimals
    """
    protein = carbs = fats = 0.0
    for family in Family:
        sections = template.sections(family)
        if not sections:
            continue
        for item in sections[0].items:
            grams = _item_grams(item)
            if grams <= 0:
                continue
            macros = lookup_food_macros(item.name)
            if macros is None:
                continue
            factor = grams / 100
            protein += macros.protein * factor
            carbs += macros.carbs * factor
            fats += macros.fats * factor

    return DailyMacros(proteins=_round2(protein), carbs=_round2(carbs), fats=_round2(fats))
