# portal/apps.py

"""
PORTAL APP CONFIG

Session authority integration:
- Every /api/* request carries an X-Session-Token issued by the external portal
- The token is verified against the portal on each request (no local session state)
"""

from django.apps import AppConfig


class PortalConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "portal"
    verbose_name = "Portal Session Authority"

    def ready(self):
        from portal import schema  # noqa: F401
