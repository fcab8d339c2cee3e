"""Construction of the application's services and controllers."""

from __future__ import annotations

from dataclasses import dataclass

from eduva.auth import AuthService
from eduva.controllers import UserController
from eduva.crm import CrmService

CRM_BASE_URL = "path api crm"
AUTH_BASE_URL = "path api auth"


@dataclass
class AppDependencies:
    """The controllers the router needs."""

    user_controller: UserController


def build_dependencies():
    """Create the services and controllers and wire them together."""
    crm_service = CrmService(CRM_BASE_URL)
    auth_service = AuthService(AUTH_BASE_URL)
    user_controller = UserController(crm_service, auth_service)
    return AppDependencies(user_controller=user_controller)