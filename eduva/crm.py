"""CRM service client and its models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

import requests
from bson import ObjectId

from eduva.auth import _format_time, _now


@dataclass
class Location:
    """Postal location of an establishment."""

    address: str = ""
    city: str = ""
    zip: str = ""
    country: str = ""

    def to_dict(self):
        """Return the JSON form of the location."""
        return asdict(self)


@dataclass
class Contact:
    """Contact details of an establishment."""

    email: str = ""
    phone: str = ""
    website: str = ""

    def to_dict(self):
        """Return the JSON form of the contact."""
        return asdict(self)


@dataclass
class User:
    """A CRM profile linked to an authentication account."""

    auth_user_id: ObjectId
    first_name: str = ""
    last_name: str = ""
    type: str = ""
    establishment_id: str = ""
    is_establishment_admin: bool = False
    status: str = ""
    meta: dict[str, Any] | None = None
    id: ObjectId = field(default_factory=ObjectId)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def to_dict(self):
        """Return the JSON form of the user; ``meta`` is left out when empty."""
        data = {
            "id": str(self.id),
            "auth_user_id": str(self.auth_user_id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "type": self.type,
            "establishment_id": self.establishment_id,
            "is_establishment_admin": self.is_establishment_admin,
            "status": self.status,
        }
        if self.meta:
            data["meta"] = dict(self.meta)
        data["created_at"] = _format_time(self.created_at)
        data["updated_at"] = _format_time(self.updated_at)
        return data


@dataclass
class Establishment:
    """A school or university."""

    id: str
    name: str
    created_by_user_id: ObjectId
    type: str = ""
    location: Location = field(default_factory=Location)
    contact: Contact = field(default_factory=Contact)
    validated: bool = False
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def to_dict(self):
        """Return the JSON form of the establishment."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "location": self.location.to_dict(),
            "contact": self.contact.to_dict(),
            "validated": self.validated,
            "created_by_user_id": str(self.created_by_user_id),
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


class CrmService:
    """Client for the CRM API."""

    def __init__(self, base_url, session=None):
        self.base_url = base_url
        self.session = session or requests.Session()