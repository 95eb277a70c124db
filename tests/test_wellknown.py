import pytest

from oaspec import wellknown


def test_string_and_boolean_schemas():
    assert wellknown.new_string_schema() == {"type": "string"}
    assert wellknown.new_boolean_schema() == {"type": "boolean"}


def test_bytes_schema():
    assert wellknown.new_bytes_schema() == {"type": "string", "format": "bytes"}


@pytest.mark.parametrize("fmt", ["int32", "uint32", "fixed32"])
def test_integer_schema_keeps_format(fmt):
    assert wellknown.new_integer_schema(fmt) == {"type": "integer", "format": fmt}


@pytest.mark.parametrize("fmt", ["float", "double"])
def test_number_schema_keeps_format(fmt):
    assert wellknown.new_number_schema(fmt) == {"type": "number", "format": fmt}


def test_enum_schema_as_strings():
    schema = wellknown.new_enum_schema("string", ["RED", "GREEN"])
    assert schema["type"] == "string"
    assert schema["format"] == "enum"
    assert schema["enum"] == ["RED", "GREEN"]


@pytest.mark.parametrize("enum_type", ["integer", None])
def test_enum_schema_as_integers(enum_type):
    schema = wellknown.new_enum_schema(enum_type, ["RED", "GREEN"])
    assert schema == {"type": "integer", "format": "enum"}


def test_list_schema_wraps_item():
    item = wellknown.new_string_schema()
    schema = wellknown.new_list_schema(item)
    assert schema["type"] == "array"
    assert schema["items"] == item


def test_list_schema_without_item():
    assert wellknown.new_list_schema(None) == {"type": "array"}


def test_string_serialized_types():
    assert wellknown.new_http_body_schema() == {"type": "string"}
    assert wellknown.new_timestamp_schema()["format"] == "date-time"
    assert wellknown.new_date_schema()["format"] == "date"
    assert wellknown.new_date_time_schema()["format"] == "date-time"
    assert wellknown.new_field_mask_schema()["format"] == "field-mask"
    for factory in (
        wellknown.new_timestamp_schema,
        wellknown.new_date_schema,
        wellknown.new_date_time_schema,
        wellknown.new_field_mask_schema,
    ):
        assert factory()["type"] == "string"


def test_struct_schema():
    assert wellknown.new_struct_schema() == {"type": "object"}


def test_value_schema_has_only_description():
    name, schema = wellknown.new_value_schema("GoogleProtobufValue")
    assert name == "GoogleProtobufValue"
    assert list(schema) == ["description"]
    assert schema["description"].startswith("Represents a dynamically typed value")


def test_any_schema():
    name, schema = wellknown.new_any_schema("GoogleProtobufAny")
    assert name == "GoogleProtobufAny"
    assert schema["type"] == "object"
    assert schema["additionalProperties"] is True
    assert list(schema["properties"]) == ["@type"]
    assert schema["properties"]["@type"]["type"] == "string"


def test_status_schema_refers_to_any():
    name, schema = wellknown.new_status_schema("Status", "GoogleProtobufAny")
    assert name == "Status"
    assert list(schema["properties"]) == ["code", "message", "details"]
    code = schema["properties"]["code"]
    assert (code["type"], code["format"]) == ("integer", "int32")
    details = schema["properties"]["details"]
    assert details["type"] == "array"
    assert details["items"] == {"$ref": "#/components/schemas/GoogleProtobufAny"}


def test_map_field_entry_schema():
    value = wellknown.new_integer_schema("int32")
    schema = wellknown.new_map_field_entry_schema(value)
    assert schema == {"type": "object", "additionalProperties": value}


def test_http_body_media_type():
    assert wellknown.new_http_body_media_type() == {"*/*": {}}


def test_application_json_media_type():
    schema = {"$ref": "#/components/schemas/Pet"}
    media = wellknown.new_application_json_media_type(schema)
    assert media == {"application/json": {"schema": schema}}


def test_application_json_media_type_without_schema():
    assert wellknown.new_application_json_media_type(None) == {"application/json": {}}


def test_each_call_returns_fresh_objects():
    first = wellknown.new_any_schema("A")[1]
    first["properties"]["@type"]["type"] = "changed"
    second = wellknown.new_any_schema("A")[1]
    assert second["properties"]["@type"]["type"] == "string"
    assert first is not second