"""Environment configuration loaded from dotenv files."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import dotenv_values


def load_env(app_env=None, directory=None):
    """Load ``.env`` and then ``.env.<app_env>`` from *directory* into the environment.

    Values from the environment-specific file take precedence over ``.env``.
    Variables that are already set in the process environment are kept.
    Returns the merged values read from the files.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    candidates = [base / ".env"]
    if app_env:
        candidates.append(base / f".env.{app_env}")

    values: dict[str, str] = {}
    for path in candidates:
        if path.is_file():
            values.update(
                {key: value for key, value in dotenv_values(path).items() if value is not None}
            )

    for key, value in values.items():
        os.environ.setdefault(key, value)
    return values


def get_env(key):
    """Return the environment variable *key*, or an empty string when it is not set."""
    return os.environ.get(key, "")