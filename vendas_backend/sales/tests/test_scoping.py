# sales/tests/test_scoping.py

from django.test import SimpleTestCase, override_settings
from rest_framework.test import APIRequestFactory

from permissions.scoping import (
    HasSellerScope,
    ScopeResolutionError,
    get_request_scope,
    resolve_seller_scope,
)
from portal.authentication import PortalUser


@override_settings(
    SALES_ADMIN_IDENTITIES=["roberto", "rosemeire"],
    SALES_SELLER_ALIASES={"vendas": "ISAQUE", "vendas2": "MIGUEL"},
)
class SellerScopeTests(SimpleTestCase):
    """
    GUARANTEES:
    - Admin identities are unrestricted
    - Aliased identities map to their seller
    - Anything else is scoped to its own upper-cased name (never widened)
    """

    def test_admins_are_unrestricted(self):
        for identity in ("roberto", "Rosemeire", " ROBERTO "):
            scope = resolve_seller_scope(identity)
            self.assertTrue(scope.is_admin, identity)
            self.assertIsNone(scope.seller)

    def test_aliases(self):
        self.assertEqual(resolve_seller_scope("vendas").seller, "ISAQUE")
        self.assertEqual(resolve_seller_scope("VENDAS2").seller, "MIGUEL")
        self.assertFalse(resolve_seller_scope("vendas").is_admin)

    def test_unlisted_identity_is_its_own_seller(self):
        scope = resolve_seller_scope("carla")

        self.assertFalse(scope.is_admin)
        self.assertEqual(scope.seller, "CARLA")

    def test_empty_identity_raises(self):
        with self.assertRaises(ScopeResolutionError):
            resolve_seller_scope("  ")

    def test_allows(self):
        seller = resolve_seller_scope("vendas")
        admin = resolve_seller_scope("roberto")

        self.assertTrue(seller.allows("isaque "))
        self.assertFalse(seller.allows("MIGUEL"))
        self.assertTrue(admin.allows("MIGUEL"))

    @override_settings(SALES_SELLER_ALIASES={"vendas": "JOANA"})
    def test_alias_table_comes_from_settings(self):
        self.assertEqual(resolve_seller_scope("vendas").seller, "JOANA")
        self.assertEqual(resolve_seller_scope("vendas2").seller, "VENDAS2")


class HasSellerScopeTests(SimpleTestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def _request_for(self, user=None):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_anonymous_denied(self):
        self.assertFalse(HasSellerScope().has_permission(self._request_for(None), None))

    def test_portal_user_allowed_and_scope_memoized(self):
        request = self._request_for(PortalUser("vendas2"))

        self.assertTrue(HasSellerScope().has_permission(request, None))
        self.assertEqual(request.seller_scope.seller, "MIGUEL")
        self.assertIs(get_request_scope(request), request.seller_scope)

    def test_blank_username_denied(self):
        request = self._request_for(PortalUser(""))

        self.assertFalse(HasSellerScope().has_permission(request, None))
