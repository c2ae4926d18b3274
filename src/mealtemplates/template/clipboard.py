"""Single-slot copy/paste of sections between slots of the same kind."""

from __future__ import annotations

import logging
from typing import Optional

from mealtemplates.errors import EmptyClipboard, IncompatibleKind
from mealtemplates.template.models import (
    ClipboardEntry,
    Section,
    SectionKind,
    Template,
    as_family,
)
from mealtemplates.template.operations import FamilyRef, get_section

logger = logging.getLogger(__name__)


class SectionClipboard:
    """Holds at most one copied section, tagged meal or snack.

    A meal can only be pasted into breakfasts, lunches or dinners and a snack
    only into snacks. The entry survives any number of pastes and is replaced
    by the next copy.
    """

    def __init__(self) -> None:
        self._entry: Optional[ClipboardEntry] = None

    @property
    def entry(self) -> Optional[ClipboardEntry]:
        return self._entry

    @property
    def is_empty(self) -> bool:
        return self._entry is None

    def clear(self) -> None:
        self._entry = None

    def copy(self, section: Section, kind: SectionKind) -> None:
        """Store a deep copy of ``section``."""
        self._entry = ClipboardEntry(kind=kind, section=section.copy())
        logger.debug("Copied %s section %r", kind.value, section.title)

    def copy_from(self, template: Template, family: FamilyRef, section_index: int) -> bool:
        """Copy a section of ``template``, taking the kind from its family.

        Returns False when there is no section at ``section_index``.
        """
        section = get_section(template, family, section_index)
        if section is None:
            return False
        self.copy(section, as_family(family).kind)
        return True

    def paste(self, template: Template, target_family: FamilyRef, target_index: int) -> bool:
        """Replace the target section with a deep copy of the clipboard entry.

        Returns False when there is no section at ``target_index``.

        Raises:
            EmptyClipboard: nothing has been copied yet
            IncompatibleKind: meal pasted into a snack slot or vice versa
        """
        family = as_family(target_family)
        if self._entry is None:
            raise EmptyClipboard()
        if self._entry.kind is not family.kind:
            raise IncompatibleKind(self._entry.kind, family)

        sections = template.sections(family)
        if not 0 <= target_index < len(sections):
            return False
        sections[target_index] = self._entry.section.copy()
        return True
