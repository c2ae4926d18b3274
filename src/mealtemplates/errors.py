"""Exceptions raised by the meal template core."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from mealtemplates.template.models import Family, SectionKind


class MealTemplateError(Exception):
    """Base class for all meal template errors."""


class MalformedInput(MealTemplateError):
    """Raw template data could not be interpreted.

    The normalizers never raise this: malformed sections degrade to
    placeholder rows so old data stays editable.
    """


class IncompatibleKind(MealTemplateError):
    """A clipboard entry was pasted into a slot of the other kind."""

    def __init__(self, clipboard_kind: "SectionKind", target_family: "Family"):
        # local import: the template package imports this module
        from mealtemplates.template.models import SectionKind

        self.clipboard_kind = clipboard_kind
        self.target_family = target_family
        if target_family.kind is SectionKind.SNACK:
            message = "Cannot paste meal into snack section"
        else:
            message = "Cannot paste snack into a meal section"
        super().__init__(message)


class EmptyClipboard(MealTemplateError):
    """Paste was requested before anything was copied."""

    def __init__(self, message: str = "No meal in clipboard"):
        super().__init__(message)


class ValidationFailed(MealTemplateError):
    """Pre-submission checks failed.

    Attributes:
        errors: Human-readable messages, one per failed check
    """

    def __init__(self, errors: list[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message or (self.errors[0] if self.errors else "Validation failed"))
