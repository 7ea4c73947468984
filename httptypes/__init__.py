"""Value types for HTTP versions and request-target URIs: scheme, authority, port, path and query."""

__version__ = "1.3.1"

__all__ = ["authority", "errors", "path", "port", "scheme", "uri", "version"]