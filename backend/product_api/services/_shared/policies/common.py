"""Ownership-based access rules shared by services."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from product_api.services._shared.errors import AuthorizationError, NotFoundError


class OwnedResource(Protocol):
    id: Any
    owner_id: Any
    active: bool


R = TypeVar("R", bound=OwnedResource)


def is_owner(*, actor_id, owner_id) -> bool:
    """Return True if the actor owns the resource."""
    return actor_id is not None and str(actor_id) == str(owner_id)


def authorize_mutation(
    resource: R | None,
    actor_id: Any,
    *,
    entity: str = "Product",
    key: Any = None,
) -> R:
    """
    Allow a mutation only on an existing, active resource owned by the actor.

    Missing and inactive resources raise the same :class:`NotFoundError`, and
    that check runs before the ownership check, so a non-owner probing a
    deleted resource learns nothing beyond "not found".

    :param resource: Loaded resource or ``None``.
    :param actor_id: Authenticated actor id.
    :param entity: Entity name used in the error.
    :param key: Identifier used in the error when ``resource`` is ``None``.
    :returns: ``resource`` when the mutation is allowed.
    :raises NotFoundError: Resource missing or inactive.
    :raises AuthorizationError: Resource active but owned by someone else.
    """
    if resource is None or not resource.active:
        raise NotFoundError(entity, key if resource is None else resource.id)
    if not is_owner(actor_id=actor_id, owner_id=resource.owner_id):
        raise AuthorizationError("You do not have permission to modify this resource.")
    return resource
