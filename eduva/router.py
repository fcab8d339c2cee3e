"""URL routing of the API."""

from __future__ import annotations

from flask import Blueprint, Response, abort

from eduva.docs import swagger_info

PATH_API_V1 = "api/v1"


def _swagger(resource="index.html"):
    if resource == "doc.json":
        return Response(swagger_info.read_doc(), mimetype="application/json")
    if resource != "index.html":
        abort(404)
    return Response(f'<a href="doc.json">{swagger_info.title}</a>\n', mimetype="text/html")


def register_routes(app, deps):
    """Register the documentation routes and every API route on *app*."""
    app.add_url_rule("/swagger/", endpoint="swagger_index", view_func=_swagger)
    app.add_url_rule("/swagger/<path:resource>", endpoint="swagger", view_func=_swagger)
    register_user_routes(app, deps)


def register_user_routes(app, deps):
    """Register the user routes under ``/api/v1/user``."""
    blueprint = Blueprint("user", __name__, url_prefix=f"/{PATH_API_V1}/user")
    blueprint.add_url_rule("/", "get_all", deps.user_controller.get_all, methods=["GET"])
    app.register_blueprint(blueprint)