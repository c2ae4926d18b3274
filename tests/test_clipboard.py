"""Tests for the section clipboard."""

from __future__ import annotations

import pytest

from mealtemplates.errors import EmptyClipboard, IncompatibleKind
from mealtemplates.template.clipboard import SectionClipboard
from mealtemplates.template.models import Family, SectionKind
from mealtemplates.template.operations import add_section, update_item_name


class TestCopy:
    """Tests for copying sections."""

    def test_copy_from_tags_kind(self, template):
        clipboard = SectionClipboard()
        assert clipboard.is_empty
        assert clipboard.copy_from(template, Family.LUNCHES, 0)
        assert clipboard.entry.kind is SectionKind.MEAL
        assert clipboard.entry.section == template.lunches[0]

    def test_copy_is_deep(self, template):
        """Editing the source after copying does not change the entry."""
        clipboard = SectionClipboard()
        clipboard.copy_from(template, Family.SNACKS, 0)
        update_item_name(template, Family.SNACKS, 0, "protein", 0, "Skyr")
        assert clipboard.entry.kind is SectionKind.SNACK
        assert clipboard.entry.section.categories["protein"][0].name == "Greek Yogurt"

    def test_copy_missing_section(self, template):
        clipboard = SectionClipboard()
        assert clipboard.copy_from(template, Family.LUNCHES, 2) is False
        assert clipboard.is_empty

    def test_clear(self, template):
        clipboard = SectionClipboard()
        clipboard.copy_from(template, Family.LUNCHES, 0)
        clipboard.clear()
        assert clipboard.entry is None


class TestPaste:
    """Tests for pasting sections."""

    def test_paste_meal_across_families(self, template):
        clipboard = SectionClipboard()
        clipboard.copy_from(template, Family.LUNCHES, 0)
        assert clipboard.paste(template, Family.DINNERS, 0)
        assert template.dinners[0] == template.lunches[0]
        assert template.dinners[0] is not template.lunches[0]

    def test_paste_many_times(self, template):
        """The entry survives pastes and each paste is independent."""
        clipboard = SectionClipboard()
        clipboard.copy_from(template, Family.BREAKFASTS, 0)
        add_section(template, Family.BREAKFASTS)
        assert clipboard.paste(template, Family.BREAKFASTS, 1)
        assert clipboard.paste(template, Family.DINNERS, 0)
        update_item_name(template, Family.DINNERS, 0, "protein", 0, "Tofu")
        assert template.breakfasts[1].categories["protein"][0].name == "Egg"
        assert not clipboard.is_empty

    def test_meal_into_snack_rejected(self, template):
        clipboard = SectionClipboard()
        clipboard.copy_from(template, Family.LUNCHES, 0)
        before = template.copy()
        with pytest.raises(IncompatibleKind, match="Cannot paste meal into snack section"):
            clipboard.paste(template, Family.SNACKS, 0)
        assert template == before

    def test_snack_into_meal_rejected(self, template):
        clipboard = SectionClipboard()
        clipboard.copy_from(template, Family.SNACKS, 1)
        before = template.copy()
        with pytest.raises(IncompatibleKind, match="Cannot paste snack into a meal section"):
            clipboard.paste(template, "breakfasts", 0)
        assert template == before

    def test_empty_clipboard(self, template):
        with pytest.raises(EmptyClipboard, match="No meal in clipboard"):
            SectionClipboard().paste(template, Family.LUNCHES, 0)

    def test_paste_out_of_range(self, template):
        clipboard = SectionClipboard()
        clipboard.copy_from(template, Family.SNACKS, 0)
        before = template.copy()
        assert clipboard.paste(template, Family.SNACKS, 2) is False
        assert template == before


class TestIncompatibleKind:
    """Tests for the error raised on a mismatched paste."""

    @pytest.mark.parametrize(
        "kind,family,message",
        [
            (SectionKind.MEAL, Family.SNACKS, "Cannot paste meal into snack section"),
            (SectionKind.SNACK, Family.DINNERS, "Cannot paste snack into a meal section"),
        ],
    )
    def test_message_follows_target_kind(self, kind, family, message):
        error = IncompatibleKind(kind, family)
        assert str(error) == message
        assert error.clipboard_kind is kind
        assert error.target_family is family
