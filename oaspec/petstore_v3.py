"""The OpenAPI Petstore sample, built as an OpenAPI v3 document.

The document is a plain dict in the shape the specification writes it, so it
can be dumped directly as JSON or YAML.
"""

from __future__ import annotations

from typing import Any

from oaspec.wellknown import (
    new_application_json_media_type,
    new_integer_schema,
    new_list_schema,
    new_string_schema,
)

Document = dict[str, Any]

_SCHEMAS_PREFIX = "#/components/schemas/"


def _ref(name: str) -> dict[str, str]:
    return {"$ref": _SCHEMAS_PREFIX + name}


def _error_response() -> dict[str, Any]:
    return {
        "description": "unexpected error",
        "content": new_application_json_media_type(_ref("Error")),
    }


def _list_pets() -> dict[str, Any]:
    return {
        "tags": ["pets"],
        "summary": "List all pets",
        "operationId": "listPets",
        "parameters": [
            {
                "name": "limit",
                "in": "query",
                "description": "How many items to return at one time (max 100)",
                "schema": new_integer_schema("int32"),
            }
        ],
        "responses": {
            "default": _error_response(),
            "200": {
                "description": "An paged array of pets",
                "headers": {
                    "x-next": {
                        "description": "A link to the next page of responses",
                        "schema": new_string_schema(),
                    }
                },
                "content": new_application_json_media_type(_ref("Pets")),
            },
        },
    }


def _create_pets() -> dict[str, Any]:
    return {
        "tags": ["pets"],
        "summary": "Create a pet",
        "operationId": "createPets",
        "responses": {
            "default": _error_response(),
            "201": {"description": "Null response"},
        },
    }


def _show_pet_by_id() -> dict[str, Any]:
    return {
        "tags": ["pets"],
        "summary": "Info for a specific pet",
        "operationId": "showPetById",
        "parameters": [
            {
                "name": "petId",
                "in": "path",
                "description": "The id of the pet to retrieve",
                "required": True,
                "schema": new_string_schema(),
            }
        ],
        "responses": {
            "default": _error_response(),
            "200": {
                "description": "Expected response to a valid request",
                "content": new_application_json_media_type(_ref("Pets")),
            },
        },
    }


def _schemas() -> dict[str, Any]:
    return {
        "Pet": {
            "required": ["id", "name"],
            "properties": {
                "id": new_integer_schema("int64"),
                "name": new_string_schema(),
                "tag": new_string_schema(),
            },
        },
        "Pets": new_list_schema(_ref("Pet")),
        "Error": {
            "required": ["code", "message"],
            "properties": {
                "code": new_integer_schema("int32"),
                "message": new_string_schema(),
            },
        },
    }


def build_document_v3() -> Document:
    """Return a new OpenAPI v3 description of the Petstore API."""
    return {
        "openapi": "3.0",
        "info": {
            "title": "OpenAPI Petstore",
            "version": "1.0.0",
            "license": {"name": "MIT"},
        },
        "servers": [
            {
                "url": "https://petstore.openapis.org/v1",
                "description": "Development server",
            }
        ],
        "paths": {
            "/pets": {"get": _list_pets(), "post": _create_pets()},
            "/pets/{petId}": {"get": _show_pet_by_id()},
        },
        "components": {"schemas": _schemas()},
    }