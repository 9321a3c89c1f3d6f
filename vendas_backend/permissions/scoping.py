# permissions/scoping.py

"""
SELLER SCOPING (ROW-LEVEL VISIBILITY)

Every portal identity maps to exactly one visibility rule:

1) identity is case-folded to lower case (portal usernames are case-insensitive)
2) administrator identities        -> unrestricted (see every seller)
3) identity listed in the alias map -> that seller name
4) anything else                    -> the identity itself, upper-cased

The mapping is total: an unlisted identity is never widened to "all sellers",
it is scoped to its own upper-cased name. An empty identity is an error.

Tables live in settings (SALES_ADMIN_IDENTITIES, SALES_SELLER_ALIASES).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from django.conf import settings
from rest_framework.permissions import BasePermission

DEFAULT_ADMIN_IDENTITIES = frozenset({"roberto", "rosemeire"})
DEFAULT_SELLER_ALIASES = {
    "vendas": "ISAQUE",
    "vendas2": "MIGUEL",
}

SELLER_FIELD = "vendedor"


class ScopeResolutionError(ValueError):
    pass


@dataclass(frozen=True)
class SellerScope:
    identity: str
    seller: Optional[str]
    is_admin: bool = False

    def apply(self, queryset, *, field: str = SELLER_FIELD):
        if self.is_admin:
            return queryset
        return queryset.filter(**{field: self.seller})

    def allows(self, seller: Optional[str]) -> bool:
        if self.is_admin:
            return True
        return normalize_seller(seller) == self.seller


def normalize_seller(value: Optional[str]) -> str:
    return (value or "").strip().upper()


def _admin_identities() -> set[str]:
    configured: Iterable[str] = getattr(
        settings, "SALES_ADMIN_IDENTITIES", DEFAULT_ADMIN_IDENTITIES
    )
    return {str(i).strip().lower() for i in configured if str(i).strip()}


def _seller_aliases() -> dict[str, str]:
    configured: Mapping[str, str] = getattr(
        settings, "SALES_SELLER_ALIASES", DEFAULT_SELLER_ALIASES
    )
    return {
        str(k).strip().lower(): normalize_seller(v)
        for k, v in configured.items()
        if str(k).strip()
    }


def resolve_seller_scope(identity: Optional[str]) -> SellerScope:
    key = (identity or "").strip().lower()
    if not key:
        raise ScopeResolutionError("Cannot resolve seller scope for an empty identity")

    if key in _admin_identities():
        return SellerScope(identity=key, seller=None, is_admin=True)

    seller = _seller_aliases().get(key) or key.upper()
    return SellerScope(identity=key, seller=seller)


def get_request_scope(request) -> SellerScope:
    """
    Resolve once per request and memoize on the request object.
    """
    cached = getattr(request, "seller_scope", None)
    if cached is not None:
        return cached

    user = getattr(request, "user", None)
    scope = resolve_seller_scope(getattr(user, "username", None))
    request.seller_scope = scope
    return scope


class HasSellerScope(BasePermission):
    """
    Authenticated portal identity that resolves to a seller scope.

    Usage:
        permission_classes = [IsAuthenticated, HasSellerScope]
        scope = get_request_scope(request)
    """

    message = "No seller scope for this identity"

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        try:
            get_request_scope(request)
        except ScopeResolutionError:
            return False
        return True
