"""Pytest fixtures for mealtemplates tests."""

from __future__ import annotations

import json

import pytest

from mealtemplates.template.normalizer import normalize_template


@pytest.fixture
def legacy_raw():
    """Pre-array template: single objects per meal, string items."""
    return {
        "breakfast": {"title": "BF", "items": ["Egg", {"name": "Oats", "baseGrams": 40}]},
        "lunch": {"title": "Lunch", "items": [{"name": "Rice", "baseGrams": 130}]},
        "dinner": {"title": "", "items": []},
        "snacks": [{"title": "Fruit", "items": ["Apple"]}],
    }


@pytest.fixture
def canonical_raw():
    """Array-of-sections template with categories, as the editor saves it."""
    return {
        "breakfasts": [
            {
                "title": "Eggs and oats",
                "categories": {
                    "protein": [{"name": "Egg", "baseGrams": 60}],
                    "carbs": [{"name": "Oats", "baseGrams": 40}],
                    "fats": [],
                    "meat": [],
                    "chicken": [],
                    "fish": [],
                },
                "items": [],
            }
        ],
        "lunches": [
            {
                "title": "Chicken bowl",
                "categories": {
                    "protein": [],
                    "carbs": [{"name": "Rice (white)", "baseGrams": 130}],
                    "fats": [{"name": "Avocado", "baseGrams": 50}],
                    "meat": [],
                    "chicken": [{"name": "Chicken Breast", "baseGrams": 150}],
                    "fish": [],
                },
            }
        ],
        "dinners": [
            {
                "title": "Salmon",
                "categories": {
                    "fish": [{"name": "Salmon", "baseGrams": 120}],
                    "carbs": [{"name": "Sweet Potato", "baseGrams": 150}],
                },
            }
        ],
        "snacks": [
            {
                "title": "Yogurt",
                "categories": {"protein": [{"name": "Greek Yogurt", "baseGrams": 200}]},
            },
            {
                "title": "Nuts",
                "categories": {"fats": [{"name": "Almonds", "baseGrams": 30}]},
            },
        ],
    }


@pytest.fixture
def ai_raw():
    """AI-generated template with category arrays as top-level keys."""

    def meal(title, **categories):
        section = {"title": title}
        section.update(categories)
        return section

    return {
        "breakfasts": [
            meal("Breakfast 1", protein=[{"name": "Egg", "baseGrams": "60"}], carbs=[]),
            meal("Breakfast 2", carbs=[{"name": "Oats", "baseGrams": 40.7}]),
            meal("Breakfast 3", fats=[{"name": "Almonds"}]),
            meal("Breakfast 4", protein=[{"name": "Greek Yogurt", "baseGrams": 200}]),
        ],
        "lunches": [meal("", chicken=[{"name": "Chicken Breast", "baseGrams": 150}])],
        "dinners": [meal("Dinner 1", fish=[{"name": "Tuna", "baseGrams": "abc"}])],
        "snacks": [meal("Snack 1", carbs=[{"name": "Banana", "baseGrams": 120}])],
    }


@pytest.fixture
def template(canonical_raw):
    """Canonical template built from canonical_raw."""
    return normalize_template(canonical_raw)


@pytest.fixture
def write_json(tmp_path):
    """Write data to a JSON file under tmp_path and return its path."""

    def _write(data, name="template.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write
