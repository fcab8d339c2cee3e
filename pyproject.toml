[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eduva"
version = "1.0.0"
description = "Core HTTP API service for Eduva, with a Swagger description and a MongoDB connection"
requires-python = ">=3.10"
keywords = ["api", "flask", "mongodb", "swagger", "crm", "authentication"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "pymongo",
    "python-dotenv",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eduva = "eduva.app:main"

[tool.hatch.build.targets.wheel]
packages = ["eduva"]

[tool.pytest.ini_options]
addopts = "-ra"
