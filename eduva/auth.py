"""Authentication service client and its models."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

import requests
from bson import ObjectId

log = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc)


def _format_time(value):
    text = value.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


@dataclass
class User:
    """An authentication account."""

    email: str
    password: str = field(default="", repr=False)
    crm_id: str = ""
    role_ids: list[ObjectId] = field(default_factory=list)
    id: ObjectId = field(default_factory=ObjectId)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def to_dict(self):
        """Return the JSON form of the user, without the password."""
        return {
            "id": str(self.id),
            "email": self.email,
            "crm_id": self.crm_id,
            "role_ids": [str(i) for i in self.role_ids],
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


@dataclass
class Role:
    """A named set of permissions."""

    name: str
    description: str = ""
    permission_ids: list[ObjectId] = field(default_factory=list)
    id: ObjectId = field(default_factory=ObjectId)

    def to_dict(self):
        """Return the JSON form of the role."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "permission_ids": [str(i) for i in self.permission_ids],
        }


@dataclass
class Permission:
    """A single permission."""

    name: str
    description: str = ""
    id: ObjectId = field(default_factory=ObjectId)

    def to_dict(self):
        """Return the JSON form of the permission."""
        return {"id": str(self.id), "name": self.name, "description": self.description}


class AuthService:
    """Client for the authentication API."""

    def __init__(self, base_url, session=None):
        self.base_url = base_url
        self.session = session or requests.Session()

    def get_all(self):
        """Log and return the service message."""
        log.info("service auth")
        return "service auth"