"""Pre-submission checks for templates and bulk assignments."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from mealtemplates.errors import ValidationFailed
from mealtemplates.export.payload import format_for_assignment
from mealtemplates.template.models import Family, Template


def validate_payload(payload: Mapping[str, Any]) -> list[str]:
    """Errors for a cleaned payload (see format_for_assignment).

    Every family needs at least one section; every section needs a title and
    at least one item that survived cleaning.
    """
    errors: list[str] = []
    for family in Family:
        sections = payload.get(family.value) or []
        if not sections:
            errors.append(f"{family.label} section is required")
            continue
        for index, section in enumerate(sections):
            label = f"{family.label} {index + 1}"
            if not str(section.get("title") or "").strip():
                errors.append(f"{label} title is required")
            if not section.get("items"):
                errors.append(f"{label} must have at least one valid item")
    return errors


def validate_template(template: Union[Template, Mapping[str, Any]]) -> list[str]:
    """Errors that would block saving or assigning ``template``."""
    return validate_payload(format_for_assignment(template))


def validate_user_selection(user_ids: Iterable[str]) -> list[str]:
    if not [user_id for user_id in user_ids if user_id]:
        return ["At least one user must be selected"]
    return []


def ensure_valid(
    template: Union[Template, Mapping[str, Any]],
    user_ids: Optional[Iterable[str]] = None,
) -> None:
    """Raise ValidationFailed listing every problem found.

    Args:
        template: Template to check
        user_ids: Selected users; checked only when given
    """
    errors = validate_template(template)
    if user_ids is not None:
        errors.extend(validate_user_selection(user_ids))
    if errors:
        raise ValidationFailed(errors)
