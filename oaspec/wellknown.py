"""OpenAPI v3 schemas and media types for well-known protobuf types.

A schema is a plain dict in the shape OpenAPI writes it, and a reference is
a dict holding a single "$ref" key. Named schemas are (name, schema) pairs,
and media types map a content type to its media-type object. Every call
returns new objects, so callers may change what they get back.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

Schema = dict[str, Any]
NamedSchema = tuple[str, Schema]

_SCHEMAS_PREFIX = "#/components/schemas/"

_VALUE_DESCRIPTION = (
    "Represents a dynamically typed value which can be either null, a number, "
    "a string, a boolean, a recursive struct value, or a list of values."
)
_ANY_DESCRIPTION = (
    "Contains an arbitrary serialized message along with a @type that "
    "describes the type of the serialized message."
)
_ANY_TYPE_DESCRIPTION = "The type of the serialized message."
_STATUS_DESCRIPTION = (
    "The `Status` type defines a logical error model that is suitable for "
    "different programming environments, including REST APIs and RPC APIs. "
    "It is used by [gRPC](https://github.com/grpc). Each `Status` message "
    "contains three pieces of data: error code, error message, and error "
    "details. You can find out more about this error model and how to work "
    "with it in the [API Design Guide](https://cloud.google.com/apis/design/errors)."
)
_STATUS_CODE_DESCRIPTION = (
    "The status code, which should be an enum value of "
    "[google.rpc.Code][google.rpc.Code]."
)
_STATUS_MESSAGE_DESCRIPTION = (
    "A developer-facing error message, which should be in English. Any "
    "user-facing error message should be localized and sent in the "
    "[google.rpc.Status.details][google.rpc.Status.details] field, or "
    "localized by the client."
)
_STATUS_DETAILS_DESCRIPTION = (
    "A list of messages that carry the error details.  There is a common set "
    "of message types for APIs to use."
)


def _reference(name: str) -> Schema:
    return {"$ref": _SCHEMAS_PREFIX + name}


def new_string_schema() -> Schema:
    """Schema for a string."""
    return {"type": "string"}


def new_boolean_schema() -> Schema:
    """Schema for a boolean."""
    return {"type": "boolean"}


def new_bytes_schema() -> Schema:
    """Schema for bytes, carried as a string."""
    return {"type": "string", "format": "bytes"}


def new_integer_schema(format: str) -> Schema:
    """Schema for an integer of the given format."""
    return {"type": "integer", "format": format}


def new_number_schema(format: str) -> Schema:
    """Schema for a number of the given format."""
    return {"type": "number", "format": format}


def new_enum_schema(enum_type: Optional[str], value_names: Iterable[str]) -> Schema:
    """Schema for an enum, as value names when enum_type is "string", else integers."""
    if enum_type == "string":
        return {"type": "string", "format": "enum", "enum": list(value_names)}
    return {"type": "integer", "format": "enum"}


def new_list_schema(item_schema: Optional[Schema]) -> Schema:
    """Schema for an array of items described by item_schema."""
    schema: Schema = {"type": "array"}
    if item_schema is not None:
        schema["items"] = item_schema
    return schema


def new_http_body_schema() -> Schema:
    """Schema for google.api.HttpBody, which carries raw body data."""
    return {"type": "string"}


def new_timestamp_schema() -> Schema:
    """Schema for google.protobuf.Timestamp, serialized as a string."""
    return {"type": "string", "format": "date-time"}


def new_date_schema() -> Schema:
    """Schema for google.type.Date, serialized as a string."""
    return {"type": "string", "format": "date"}


def new_date_time_schema() -> Schema:
    """Schema for google.type.DateTime, serialized as a string."""
    return {"type": "string", "format": "date-time"}


def new_field_mask_schema() -> Schema:
    """Schema for google.protobuf.FieldMask, serialized as a string."""
    return {"type": "string", "format": "field-mask"}


def new_struct_schema() -> Schema:
    """Schema for google.protobuf.Struct, equivalent to a JSON object."""
    return {"type": "object"}


def new_value_schema(name: str) -> NamedSchema:
    """Named schema for google.protobuf.Value, which may hold any JSON value."""
    return name, {"description": _VALUE_DESCRIPTION}


def new_any_schema(name: str) -> NamedSchema:
    """Named schema for google.protobuf.Any: an object with a @type property."""
    return name, {
        "type": "object",
        "description": _ANY_DESCRIPTION,
        "properties": {
            "@type": {"type": "string", "description": _ANY_TYPE_DESCRIPTION},
        },
        "additionalProperties": True,
    }


def new_status_schema(name: str, any_name: str) -> NamedSchema:
    """Named schema for google.rpc.Status, whose details refer to any_name."""
    return name, {
        "type": "object",
        "description": _STATUS_DESCRIPTION,
        "properties": {
            "code": {
                "type": "integer",
                "format": "int32",
                "description": _STATUS_CODE_DESCRIPTION,
            },
            "message": {
                "type": "string",
                "description": _STATUS_MESSAGE_DESCRIPTION,
            },
            "details": {
                "type": "array",
                "items": _reference(any_name),
                "description": _STATUS_DETAILS_DESCRIPTION,
            },
        },
    }


def new_map_field_entry_schema(value_field_schema: Optional[Schema]) -> Schema:
    """Schema for a protobuf map: an object whose values match value_field_schema."""
    schema: Schema = {"type": "object"}
    if value_field_schema is not None:
        schema["additionalProperties"] = value_field_schema
    return schema


def new_http_body_media_type() -> dict[str, Schema]:
    """Media types for google.api.HttpBody: any content type, no schema."""
    return {"*/*": {}}


def new_application_json_media_type(schema: Optional[Schema]) -> dict[str, Schema]:
    """Media types holding a single application/json entry with the schema."""
    media_type: Schema = {} if schema is None else {"schema": schema}
    return {"application/json": media_type}