"""Tests for category-aware template edits."""

from __future__ import annotations

import pytest

from mealtemplates.template.categories import empty_categories, project
from mealtemplates.template.models import MAX_SECTIONS, Family, FoodItem
from mealtemplates.template.normalizer import new_template
from mealtemplates.template.operations import (
    add_item,
    add_section,
    coerce_base_grams,
    get_section,
    remove_item,
    remove_section,
    set_title,
    update_item_base_grams,
    update_item_name,
)


def assert_items_derived(template):
    for _, _, section in template.iter_sections():
        assert section.items == project(section.categories)


class TestSectionBounds:
    """Section counts stay within one to three per family."""

    def test_add_until_full(self):
        """Scenario: a third breakfast is accepted, a fourth is not."""
        template = new_template()
        assert add_section(template, Family.BREAKFASTS)
        assert add_section(template, "breakfasts")
        assert len(template.breakfasts) == MAX_SECTIONS

        before = template.copy()
        assert add_section(template, Family.BREAKFASTS) is False
        assert template == before

    def test_added_section_is_empty_and_untitled(self):
        template = new_template()
        add_section(template, Family.SNACKS)
        assert template.snacks[1].title == ""
        assert template.snacks[1].categories == empty_categories()

    def test_cannot_remove_last_section(self):
        template = new_template()
        assert remove_section(template, Family.DINNERS, 0) is False
        assert len(template.dinners) == 1

    def test_remove_middle_section(self, template):
        set_title(template, Family.SNACKS, 0, "First")
        add_section(template, Family.SNACKS)
        set_title(template, Family.SNACKS, 2, "Third")
        assert remove_section(template, Family.SNACKS, 1)
        assert [s.title for s in template.snacks] == ["First", "Third"]

    @pytest.mark.parametrize("index", [-1, 5])
    def test_remove_out_of_range(self, template, index):
        before = template.copy()
        assert remove_section(template, Family.SNACKS, index) is False
        assert template == before


class TestItemEdits:
    """Tests for add/remove/update of items."""

    def test_add_item_appends_placeholder(self, template):
        assert add_item(template, Family.BREAKFASTS, 0, "carbs")
        assert template.breakfasts[0].categories["carbs"] == [
            FoodItem("Oats", 40),
            FoodItem("", ""),
        ]
        assert_items_derived(template)

    def test_add_given_item(self, template):
        add_item(template, Family.LUNCHES, 0, "fish", FoodItem("Tuna", 100))
        assert template.lunches[0].items[-1] == FoodItem("Tuna", 100)

    def test_remove_item(self, template):
        add_item(template, Family.BREAKFASTS, 0, "protein", FoodItem("Egg white", 30))
        assert remove_item(template, Family.BREAKFASTS, 0, "protein", 0)
        assert template.breakfasts[0].categories["protein"] == [FoodItem("Egg white", 30)]
        assert_items_derived(template)

    def test_removing_only_item_leaves_placeholder(self, template):
        """A category is never left empty by an edit."""
        assert remove_item(template, Family.BREAKFASTS, 0, "protein", 0)
        assert template.breakfasts[0].categories["protein"] == [FoodItem("", "")]

    def test_remove_item_out_of_range(self, template):
        before = template.copy()
        assert remove_item(template, Family.BREAKFASTS, 0, "protein", 3) is False
        assert remove_item(template, Family.BREAKFASTS, 2, "protein", 0) is False
        assert template == before

    def test_update_name(self, template):
        assert update_item_name(template, Family.DINNERS, 0, "fish", 0, "Cod")
        assert template.dinners[0].categories["fish"][0].name == "Cod"
        assert "Cod" in [item.name for item in template.dinners[0].items]

    def test_update_base_grams(self, template):
        assert update_item_base_grams(template, Family.DINNERS, 0, "fish", 0, "90")
        assert template.dinners[0].categories["fish"][0].base_grams == 90

    def test_update_missing_item(self, template):
        assert update_item_name(template, Family.DINNERS, 0, "fish", 9, "Cod") is False

    def test_set_title_out_of_range(self, template):
        assert set_title(template, Family.LUNCHES, 1, "Nope") is False

    def test_get_section(self, template):
        assert get_section(template, Family.SNACKS, 1).title == "Nuts"
        assert get_section(template, Family.SNACKS, 2) is None


class TestCoerceBaseGrams:
    """Tests for base-grams field coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("", ""),
            (None, ""),
            ("80", 80),
            ("12.5", 12.5),
            (40, 40),
            ("abc", 0),
            ("-5", 0),
        ],
    )
    def test_values(self, value, expected):
        assert coerce_base_grams(value) == expected
