"""Authorization policy for post and comment mutations.

A single decision function is shared by every mutating operation. The
credentials it accepts depend on the action:

- Posts accept either the hidden owner id or the legacy edit token. The
  token predates per-user hidden ids and keeps old anonymous posts editable.
- Comments accept only the owner's user id.
- Admins may delete anything but may not edit other users' content.
"""

from enum import Enum

from forum.domain.error import NotAuthorizedError


class Action(str, Enum):
    """Mutations guarded by the policy."""

    EDIT_POST = "edit_post"
    DELETE_POST = "delete_post"
    EDIT_COMMENT = "edit_comment"
    DELETE_COMMENT = "delete_comment"

    @property
    def admin_bypass(self) -> bool:
        """Whether admins skip the ownership check."""
        return self in (Action.DELETE_POST, Action.DELETE_COMMENT)

    @property
    def accepts_token(self) -> bool:
        """Whether the legacy edit token is an accepted credential."""
        return self in (Action.EDIT_POST, Action.DELETE_POST)

    @property
    def verb(self) -> str:
        return self.value.split("_", 1)[0]

    @property
    def resource(self) -> str:
        return self.value.split("_", 1)[1]


class AccessDecision(str, Enum):
    """Outcome of an authorization check."""

    ALLOWED = "allowed"
    UNAUTHORIZED = "unauthorized"


def _matches(presented: str | None, stored: str | None) -> bool:
    # Empty credentials never match, even against an empty stored value
    return bool(presented) and bool(stored) and presented == stored


def decide(
    action: Action,
    *,
    is_admin: bool,
    actor_id: str | None,
    actor_token: str | None,
    owner_id: str | None,
    resource_token: str | None,
) -> AccessDecision:
    """Decide whether an actor may perform an action on a resource.

    Args:
        action: The attempted mutation
        is_admin: Whether the actor is a verified admin
        actor_id: Hidden user id (posts) or user id (comments) of the actor
        actor_token: Edit token presented by the actor
        owner_id: Owner id stored on the resource
        resource_token: Edit token stored on the resource (posts only)

    Returns:
        ALLOWED or UNAUTHORIZED
    """
    if is_admin and action.admin_bypass:
        return AccessDecision.ALLOWED

    if _matches(actor_id, owner_id):
        return AccessDecision.ALLOWED

    if action.accepts_token and _matches(actor_token, resource_token):
        return AccessDecision.ALLOWED

    return AccessDecision.UNAUTHORIZED


def ensure_allowed(
    action: Action,
    resource_id: str,
    *,
    is_admin: bool,
    actor_id: str | None,
    actor_token: str | None,
    owner_id: str | None,
    resource_token: str | None,
) -> None:
    """Raise NotAuthorizedError unless `decide` allows the action."""
    decision = decide(
        action,
        is_admin=is_admin,
        actor_id=actor_id,
        actor_token=actor_token,
        owner_id=owner_id,
        resource_token=resource_token,
    )
    if decision is AccessDecision.UNAUTHORIZED:
        raise NotAuthorizedError(action.verb, action.resource, resource_id)
