[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httptypes"
version = "1.3.1"
description = "Types for HTTP versions and request-target URIs: scheme, authority, port, path and query."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "uri", "authority", "request-target", "parsing"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["httptypes"]

[tool.pytest.ini_options]
addopts = "-ra"
