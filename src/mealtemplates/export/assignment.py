"""Bulk assignment of a template to many users.

The core stops at the request body: per-user portion scales, persistence and
the actual fan-out write belong to the assignment collaborator, which
receives an AssignmentRequest.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Protocol, Union

from mealtemplates.errors import ValidationFailed
from mealtemplates.export.payload import format_for_assignment
from mealtemplates.export.validation import validate_payload, validate_user_selection
from mealtemplates.template.models import (
    DEFAULT_MEAL_PLAN_TYPE,
    AssignmentRequest,
    CatalogEntry,
    Template,
)

logger = logging.getLogger(__name__)


class AssignmentCollaborator(Protocol):
    """Anything that can perform the per-user assignment write."""

    def assign(self, request: AssignmentRequest) -> Any:
        ...


def plan_assignment(
    template: Union[Template, Mapping[str, Any]],
    user_ids: Iterable[str],
    meal_plan_type: str = DEFAULT_MEAL_PLAN_TYPE,
) -> AssignmentRequest:
    """Validate and build the bulk assignment request.

    Args:
        template: Template being assigned
        user_ids: Selected users (duplicates are ignored)
        meal_plan_type: Goal label stored with each plan

    Returns:
        AssignmentRequest ready for the collaborator

    Raises:
        ValidationFailed: template problems or no user selected
    """
    selected = list(dict.fromkeys(user_id for user_id in user_ids if user_id))
    payload = format_for_assignment(template)
    errors = validate_payload(payload) + validate_user_selection(selected)
    if errors:
        raise ValidationFailed(errors)

    logger.info("Planned %r assignment for %d user(s)", meal_plan_type, len(selected))
    return AssignmentRequest(
        meal_plan_template=payload,
        selected_user_ids=selected,
        meal_plan_type=meal_plan_type,
    )


def assign(
    template: Union[Template, Mapping[str, Any]],
    user_ids: Iterable[str],
    collaborator: AssignmentCollaborator,
    meal_plan_type: str = DEFAULT_MEAL_PLAN_TYPE,
) -> Any:
    """Plan the assignment and hand it to ``collaborator``.

    Validation failures never reach the collaborator. Whatever the
    collaborator returns (or raises) is passed through.
    """
    request = plan_assignment(template, user_ids, meal_plan_type)
    return collaborator.assign(request)


def build_catalog_entry(
    name: str,
    template: Union[Template, Mapping[str, Any]],
    meal_plan_type: str = DEFAULT_MEAL_PLAN_TYPE,
) -> CatalogEntry:
    """Named, cleaned template for the template catalog.

    Raises:
        ValidationFailed: blank name
    """
    name = (name or "").strip()
    if not name:
        raise ValidationFailed(["Template name is required"])
    return CatalogEntry(
        name=name,
        template=format_for_assignment(template),
        meal_plan_type=meal_plan_type,
    )
