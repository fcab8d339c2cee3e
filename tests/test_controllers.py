import logging

from flask import Flask

from eduva.auth import AuthService
from eduva.controllers import UserController
from eduva.crm import CrmService


class RecordingAuthService:
    def __init__(self):
        self.calls = 0

    def get_all(self):
        self.calls += 1


def test_get_all_delegates_to_auth_service():
    auth = RecordingAuthService()
    controller = UserController(CrmService("crm"), auth)
    controller.get_all()
    assert auth.calls == 1


def test_get_all_returns_empty_ok_response():
    controller = UserController(CrmService("crm"), RecordingAuthService())
    body, status = controller.get_all()
    assert body == ""
    assert status == 200


def test_controller_keeps_services():
    crm = CrmService("crm")
    auth = RecordingAuthService()
    controller = UserController(crm, auth)
    assert controller.crm_service is crm
    assert controller.auth_service is auth


def test_get_all_with_real_auth_service_logs(caplog):
    controller = UserController(CrmService("crm"), AuthService("auth"))
    with caplog.at_level(logging.INFO, logger="eduva.auth"):
        controller.get_all()
    assert "service auth" in caplog.messages


def test_get_all_as_flask_view():
    auth = RecordingAuthService()
    controller = UserController(CrmService("crm"), auth)
    app = Flask(__name__)
    app.add_url_rule("/users", view_func=controller.get_all)
    response = app.test_client().get("/users")
    assert response.status_code == 200
    assert response.data == b""
    assert auth.calls == 1