"""Authorization gate shared by every mutating operation."""

import logfire

from learnhub.domain.error import ForbiddenError
from learnhub.domain.value import Caller, UserId


def require_owner_or_admin(
    resource_owner_id: UserId, caller: Caller, action: str, resource: str
) -> None:
    """Allow the resource owner or an admin, reject everyone else.

    Args:
        resource_owner_id: Owner of the resource being acted on
        caller: Identity performing the action
        action: Verb used in the error message (e.g. "update")
        resource: Resource description used in the error message

    Raises:
        ForbiddenError: If the caller is neither owner nor admin
    """
    if caller.user_id == resource_owner_id or caller.is_admin:
        return
    logfire.warn(
        "Ownership check failed",
        user_id=caller.user_id,
        owner_id=resource_owner_id,
        action=action,
        resource=resource,
    )
    raise ForbiddenError(action, resource, caller.user_id)


def require_admin(caller: Caller, action: str, resource: str) -> None:
    """Allow admins only.

    Raises:
        ForbiddenError: If the caller is not an admin
    """
    if caller.is_admin:
        return
    logfire.warn(
        "Admin check failed", user_id=caller.user_id, action=action, resource=resource
    )
    raise ForbiddenError(action, resource, caller.user_id)
