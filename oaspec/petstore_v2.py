"""The Swagger Petstore sample, built as an OpenAPI v2 document.

The document is a plain dict in the shape the specification writes it, so it
can be dumped directly as JSON or YAML.
"""

from __future__ import annotations

from typing import Any

Document = dict[str, Any]

_DEFINITIONS_PREFIX = "#/definitions/"


def _ref(name: str) -> dict[str, str]:
    return {"$ref": _DEFINITIONS_PREFIX + name}


def _error_response() -> dict[str, Any]:
    return {"description": "unexpected error", "schema": _ref("Error")}


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
                "type": "integer",
                "format": "int32",
            }
        ],
        "responses": {
            "200": {
                "description": "An paged array of pets",
                "schema": _ref("Pets"),
                "headers": {
                    "x-next": {
                        "type": "string",
                        "description": "A link to the next page of responses",
                    }
                },
            },
            "default": _error_response(),
        },
    }


def _create_pets() -> dict[str, Any]:
    return {
        "tags": ["pets"],
        "summary": "Create a pet",
        "operationId": "createPets",
        "responses": {
            "201": {"description": "Null response"},
            "default": _error_response(),
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
                "type": "string",
            }
        ],
        "responses": {
            "200": {
                "description": "Expected response to a valid request",
                "schema": _ref("Pets"),
            },
            "default": _error_response(),
        },
    }


def _definitions() -> dict[str, Any]:
    return {
        "Pet": {
            "required": ["id", "name"],
            "properties": {
                "id": {"format": "int64", "type": "integer"},
                "name": {"type": "string"},
                "tag": {"type": "string"},
            },
        },
        "Pets": {
            "type": "array",
            "items": _ref("Pet"),
        },
        "Error": {
            "required": ["code", "message"],
            "properties": {
                "code": {"format": "int32", "type": "integer"},
                "message": {"type": "string"},
            },
        },
    }


def build_document_v2() -> Document:
    """Return a new OpenAPI v2 description of the Petstore API."""
    return {
        "swagger": "2.0",
        "info": {
            "title": "Swagger Petstore",
            "version": "1.0.0",
            "license": {"name": "MIT"},
        },
        "host": "petstore.swagger.io",
        "basePath": "/v1",
        "schemes": ["http"],
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "paths": {
            "/pets": {"get": _list_pets(), "post": _create_pets()},
            "/pets/{petId}": {"get": _show_pet_by_id()},
        },
        "definitions": _definitions(),
    }