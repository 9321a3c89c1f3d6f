# portal/schema.py

"""
OpenAPI description of the portal session header (drf-spectacular).
Loaded from PortalConfig.ready().
"""

from drf_spectacular.extensions import OpenApiAuthenticationExtension

from portal.authentication import SESSION_HEADER


class PortalSessionScheme(OpenApiAuthenticationExtension):
    target_class = "portal.authentication.PortalSessionAuthentication"
    name = "PortalSession"

    def get_security_definition(self, auto_schema):
        return {"type": "apiKey", "in": "header", "name": SESSION_HEADER}
