"""Helpers for walking YAML documents, resolving references and building OpenAPI descriptions."""

__version__ = "0.1.0"

__all__ = [
    "context",
    "errors",
    "helpers",
    "reader",
    "naming",
    "wellknown",
    "petstore_v2",
    "petstore_v3",
    "petstore_cli",
]