import logging

from eduva.auth import AuthService
from eduva.controllers import UserController
from eduva.crm import CrmService
from eduva.di import AppDependencies, build_dependencies


def test_build_dependencies_wires_user_controller(caplog):
    deps = build_dependencies()
    assert isinstance(deps, AppDependencies)
    assert isinstance(deps.user_controller, UserController)
    assert isinstance(deps.user_controller.auth_service, AuthService)
    assert isinstance(deps.user_controller.crm_service, CrmService)
    with caplog.at_level(logging.INFO, logger="eduva.auth"):
        assert deps.user_controller.auth_service.get_all() is None
    assert "service auth" in caplog.messages


def test_services_use_configured_base_urls():
    deps = build_dependencies()
    assert deps.user_controller.auth_service.base_url == "path api auth"
    assert deps.user_controller.crm_service.base_url == "path api crm"


def test_each_build_creates_fresh_instances():
    first = build_dependencies()
    second = build_dependencies()
    assert first.user_controller is not second.user_controller
    assert first.user_controller.auth_service is not second.user_controller.auth_service