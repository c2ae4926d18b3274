"""Editing session: one template, its clipboard and an optional portion scale.

The session is the single owner of the template being edited. Every edit goes
through it so that the scaled ``grams`` of each item are recomputed right
after the change; a previously computed ``grams`` value is never trusted.
"""

from __future__ import annotations

from typing import Any, Optional

from mealtemplates.data.foods import FoodSuggestion
from mealtemplates.portions.scaling import apply_portion_scale
from mealtemplates.template import operations, reorder
from mealtemplates.template.clipboard import SectionClipboard
from mealtemplates.template.models import FoodItem, Template
from mealtemplates.template.normalizer import new_template, normalize_template
from mealtemplates.template.operations import CategoryRef, FamilyRef


class EditingSession:
    """Mutable editing state for a single template.

    Args:
        template: Template to edit; a fresh empty template when omitted
        clipboard: Clipboard to use; sessions may share one
        portion_scale: When set, ``grams`` is kept in sync with it
    """

    def __init__(
        self,
        template: Optional[Template] = None,
        clipboard: Optional[SectionClipboard] = None,
        portion_scale: Optional[float] = None,
    ):
        self.template = template if template is not None else new_template()
        self.clipboard = clipboard if clipboard is not None else SectionClipboard()
        self.portion_scale = portion_scale
        self._refresh()

    @classmethod
    def from_raw(cls, raw: Any, **kwargs: Any) -> "EditingSession":
        """Open raw template data (any historical shape) for editing."""
        return cls(normalize_template(raw), **kwargs)

    def _refresh(self) -> None:
        if self.portion_scale is None:
            for _, _, section in self.template.iter_sections():
                for item in section.items:
                    item.grams = None
        else:
            apply_portion_scale(self.template, self.portion_scale)

    def _edit(self, changed: bool) -> bool:
        if changed:
            self._refresh()
        return changed

    def set_portion_scale(self, portion_scale: Optional[float]) -> None:
        self.portion_scale = portion_scale
        self._refresh()

    # Section-level edits

    def set_title(self, family: FamilyRef, section_index: int, title: str) -> bool:
        return operations.set_title(self.template, family, section_index, title)

    def add_section(self, family: FamilyRef) -> bool:
        return self._edit(operations.add_section(self.template, family))

    def remove_section(self, family: FamilyRef, section_index: int) -> bool:
        return self._edit(operations.remove_section(self.template, family, section_index))

    def reorder_section(self, family: FamilyRef, from_index: int, to_index: int) -> bool:
        return self._edit(reorder.reorder_section(self.template, family, from_index, to_index))

    # Item-level edits

    def add_item(self, family: FamilyRef, section_index: int, category: CategoryRef) -> bool:
        return self._edit(operations.add_item(self.template, family, section_index, category))

    def remove_item(
        self, family: FamilyRef, section_index: int, category: CategoryRef, item_index: int
    ) -> bool:
        return self._edit(
            operations.remove_item(self.template, family, section_index, category, item_index)
        )

    def update_item_name(
        self,
        family: FamilyRef,
        section_index: int,
        category: CategoryRef,
        item_index: int,
        name: str,
    ) -> bool:
        return operations.update_item_name(
            self.template, family, section_index, category, item_index, name
        )

    def update_item_base_grams(
        self,
        family: FamilyRef,
        section_index: int,
        category: CategoryRef,
        item_index: int,
        value: Any,
    ) -> bool:
        return self._edit(
            operations.update_item_base_grams(
                self.template, family, section_index, category, item_index, value
            )
        )

    def apply_suggestion(
        self,
        family: FamilyRef,
        section_index: int,
        category: CategoryRef,
        item_index: int,
        suggestion: FoodSuggestion,
    ) -> bool:
        """Fill an item's name and base grams from an autocomplete suggestion."""
        if not self.update_item_name(family, section_index, category, item_index, suggestion.name):
            return False
        return self.update_item_base_grams(
            family, section_index, category, item_index, suggestion.grams
        )

    def reorder_item(
        self,
        family: FamilyRef,
        section_index: int,
        category: CategoryRef,
        from_index: int,
        to_index: int,
    ) -> bool:
        return self._edit(
            reorder.reorder_item(
                self.template, family, section_index, category, from_index, to_index
            )
        )

    # Clipboard

    def copy_section(self, family: FamilyRef, section_index: int) -> bool:
        return self.clipboard.copy_from(self.template, family, section_index)

    def paste_section(self, family: FamilyRef, section_index: int) -> bool:
        """Paste the clipboard into a slot.

        Raises:
            EmptyClipboard: nothing copied yet
            IncompatibleKind: clipboard kind does not match the family
        """
        return self._edit(self.clipboard.paste(self.template, family, section_index))

    def items(self, family: FamilyRef, section_index: int) -> list[FoodItem]:
        """Flat item list of one section."""
        section = operations.get_section(self.template, family, section_index)
        return section.items if section is not None else []
