"""Swagger description of the API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass
class SwaggerInfo:
    """Swagger metadata that can be adjusted before the document is served."""

    version: str = "1.0"
    host: str = ""
    base_path: str = ""
    schemes: list[str] = field(default_factory=lambda: ["https"])
    title: str = "Eduva Core"
    description: str = "API service Core d'Eduva"
    instance_name: str = "swagger"

    def read_doc(self):
        """Render the Swagger 2.0 document as a JSON string."""
        document = {
            "schemes": list(self.schemes),
            "swagger": "2.0",
            "info": {
                "description": self.description,
                "title": self.title,
                "contact": {},
                "version": self.version,
            },
            "host": self.host,
            "basePath": self.base_path,
            "paths": {},
            "securityDefinitions": {
                "BearerAuth": {
                    "type": "apiKey",
                    "name": "Authorization",
                    "in": "headers",
                }
            },
        }
        return json.dumps(document, indent=4, ensure_ascii=False)


swagger_info = SwaggerInfo()