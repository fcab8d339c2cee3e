"""HTTP controllers of the API."""

from __future__ import annotations


class UserController:
    """Handles requests about users by delegating to the CRM and auth services."""

    def __init__(self, crm_service, auth_service):
        self.crm_service = crm_service
        self.auth_service = auth_service

    def get_all(self):
        """Handle ``GET`` on the user collection; responds with an empty body."""
        self.auth_service.get_all()
        return "", 200