"""Application entry point: configuration, database and HTTP server."""

from __future__ import annotations

import argparse
import logging

from flask import Flask

from eduva.config import get_env, load_env
from eduva.db import DatabaseError, connect_database
from eduva.di import build_dependencies
from eduva.docs import swagger_info
from eduva.router import register_routes

log = logging.getLogger(__name__)


def extract_string_in_backtick(s):
    """Return the text between the first and the last backtick of *s*, or ``""``."""
    start, end = s.find("`"), s.rfind("`")
    return "" if start == -1 or start == end else s[start + 1 : end]


def server_info(host_traefik):
    """Log where the server and its documentation are reachable and return the lines."""
    lines = [
        f"Lancement du serveur : https://{host_traefik}",
        f"Lancement du Swagger : https://{host_traefik}/swagger/index.html",
    ]
    for line in lines:
        log.info(line)
    return lines


def set_swagger_opt(host_traefik):
    """Set the host announced by the Swagger document."""
    swagger_info.host = host_traefik


def create_app(deps=None):
    """Build the Flask application with every route registered."""
    app = Flask(__name__)
    register_routes(app, deps if deps is not None else build_dependencies())
    return app


def main(argv=None):
    """Load the configuration, connect the database and run the HTTP server."""
    parser = argparse.ArgumentParser(description="Eduva Core API service")
    parser.add_argument("--env-dir", default=None, help="directory holding the .env files")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    load_env(None, args.env_dir)
    app_env = get_env("APP_ENV")
    load_env(app_env, args.env_dir)
    try:
        connect_database(app_env)
        port = int(get_env("PORT"))
    except (DatabaseError, ValueError) as exc:
        log.critical("Erreur au démarrage : %s", exc)
        return 1

    host_traefik = extract_string_in_backtick(get_env("HOST_TRAEFIK"))
    set_swagger_opt(host_traefik)
    app = create_app(build_dependencies())
    server_info(host_traefik)
    try:
        app.run(host="0.0.0.0", port=port)
    except OSError as exc:
        log.error("Une erreur est survenue au lancement du serveur : %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())