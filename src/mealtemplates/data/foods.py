"""Reference food data: editor suggestions and per-100g macros.

Suggestions pair a common food with a typical portion so an employee can fill
a row in one step. The macro table is a small lookup used for daily macro
summaries; foods not in it simply contribute nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FoodSuggestion:
    """Autocomplete entry: food name and its usual portion in grams."""

    name: str
    grams: int


@dataclass(frozen=True)
class FoodMacros:
    """Macronutrients in grams per 100g of food."""

    protein: float
    carbs: float
    fats: float


FOOD_SUGGESTIONS: tuple[FoodSuggestion, ...] = (
    FoodSuggestion("Chicken Breast", 100),
    FoodSuggestion("Rice (white)", 130),
    FoodSuggestion("Oats", 40),
    FoodSuggestion("Egg", 60),
    FoodSuggestion("Cheese", 30),
    FoodSuggestion("Chickpeas", 50),
    FoodSuggestion("Salmon", 120),
    FoodSuggestion("Broccoli", 100),
    FoodSuggestion("Sweet Potato", 150),
    FoodSuggestion("Greek Yogurt", 200),
    FoodSuggestion("Banana", 120),
    FoodSuggestion("Almonds", 30),
    FoodSuggestion("Quinoa", 100),
    FoodSuggestion("Spinach", 50),
    FoodSuggestion("Tuna", 100),
    FoodSuggestion("Avocado", 100),
    FoodSuggestion("Brown Rice", 130),
    FoodSuggestion("Turkey Breast", 100),
    FoodSuggestion("Cottage Cheese", 150),
    FoodSuggestion("Apple", 150),
)

# Partial matches resolve to the first entry in table order.
FOOD_MACROS: dict[str, FoodMacros] = {
    # Proteins
    "chicken breast": FoodMacros(31, 0, 3.6),
    "chicken": FoodMacros(31, 0, 3.6),
    "chicken thigh": FoodMacros(26, 0, 10),
    "turkey breast": FoodMacros(30, 0, 1),
    "beef": FoodMacros(26, 0, 15),
    "ground beef": FoodMacros(26, 0, 20),
    "pork": FoodMacros(27, 0, 14),
    "salmon": FoodMacros(25, 0, 12),
    "tuna": FoodMacros(30, 0, 1),
    "cod": FoodMacros(18, 0, 0.7),
    "tilapia": FoodMacros(26, 0, 1.7),
    "shrimp": FoodMacros(24, 0, 0.3),
    "eggs": FoodMacros(13, 1.1, 11),
    "egg": FoodMacros(13, 1.1, 11),
    "egg white": FoodMacros(11, 0.7, 0.2),
    "greek yogurt": FoodMacros(10, 3.6, 0.4),
    "cottage cheese": FoodMacros(11, 3.4, 1),
    "protein powder": FoodMacros(80, 5, 2),
    "whey protein": FoodMacros(80, 5, 2),
    # Carbs
    "rice": FoodMacros(2.7, 28, 0.3),
    "brown rice": FoodMacros(2.6, 23, 0.9),
    "white rice": FoodMacros(2.7, 28, 0.3),
    "quinoa": FoodMacros(4.4, 22, 1.9),
    "oats": FoodMacros(17, 66, 7),
    "oatmeal": FoodMacros(17, 66, 7),
    "pasta": FoodMacros(5, 25, 1.1),
    "bread": FoodMacros(9, 49, 3.2),
    "whole wheat bread": FoodMacros(13, 41, 4.2),
    "potato": FoodMacros(2, 17, 0.1),
    "sweet potato": FoodMacros(1.6, 20, 0.1),
    "banana": FoodMacros(1, 23, 0.3),
    "apple": FoodMacros(0.3, 14, 0.2),
    "orange": FoodMacros(0.9, 12, 0.1),
    # Fats
    "avocado": FoodMacros(2, 9, 15),
    "olive oil": FoodMacros(0, 0, 100),
    "coconut oil": FoodMacros(0, 0, 100),
    "almonds": FoodMacros(21, 22, 50),
    "peanut butter": FoodMacros(25, 20, 50),
    "walnuts": FoodMacros(15, 14, 65),
    "chia seeds": FoodMacros(17, 42, 31),
    "flax seeds": FoodMacros(18, 28, 42),
    # Vegetables
    "broccoli": FoodMacros(2.8, 7, 0.4),
    "spinach": FoodMacros(2.9, 3.6, 0.4),
    "lettuce": FoodMacros(1.4, 2.9, 0.2),
    "cucumber": FoodMacros(0.7, 4, 0.1),
    "tomato": FoodMacros(0.9, 4, 0.2),
    "carrot": FoodMacros(0.9, 10, 0.2),
    "bell pepper": FoodMacros(1, 5, 0.3),
    "onion": FoodMacros(1.1, 9, 0.1),
    # Dairy
    "milk": FoodMacros(3.4, 5, 1),
    "cheese": FoodMacros(25, 1, 33),
    "mozzarella": FoodMacros(22, 2, 22),
    "cheddar": FoodMacros(25, 1, 33),
}


def suggest_foods(query: str) -> list[FoodSuggestion]:
    """Suggestions whose name contains ``query``, case-insensitively.

    Args:
        query: Text typed so far

    Returns:
        Matching suggestions in table order; empty for a blank query
    """
    needle = query.strip().lower()
    if not needle:
        return []
    return [s for s in FOOD_SUGGESTIONS if needle in s.name.lower()]


def lookup_food_macros(name: str) -> Optional[FoodMacros]:
    """Per-100g macros for a food name.

    Tries an exact (case-insensitive) match first, then the first table entry
    that contains the name or is contained in it.
    """
    if not isinstance(name, str):
        return None
    key = name.strip().lower()
    if not key:
        return None
    if key in FOOD_MACROS:
        return FOOD_MACROS[key]
    for food, macros in FOOD_MACROS.items():
        if food in key or key in food:
            return macros
    return None
