import json

import pytest
import yaml

from oaspec.petstore_v2 import build_document_v2


def _all_refs(value):
    if isinstance(value, dict):
        for key, item in value.items():
            if key == "$ref":
                yield item
            else:
                yield from _all_refs(item)
    elif isinstance(value, list):
        for item in value:
            yield from _all_refs(item)


def _operations(document):
    for path, item in document["paths"].items():
        for method, operation in item.items():
            yield path, method, operation


def test_header_fields():
    document = build_document_v2()
    assert document["swagger"] == "2.0"
    assert document["info"]["title"] == "Swagger Petstore"
    assert document["info"]["version"] == "1.0.0"
    assert document["info"]["license"] == {"name": "MIT"}
    assert document["host"] == "petstore.swagger.io"
    assert document["basePath"] == "/v1"
    assert document["schemes"] == ["http"]
    assert document["consumes"] == ["application/json"]
    assert document["produces"] == ["application/json"]


def test_paths_in_source_order():
    document = build_document_v2()
    assert list(document["paths"]) == ["/pets", "/pets/{petId}"]
    assert list(document["paths"]["/pets"]) == ["get", "post"]
    assert list(document["paths"]["/pets/{petId}"]) == ["get"]


def test_operation_ids_are_unique_and_tagged():
    document = build_document_v2()
    ids = [op["operationId"] for _, _, op in _operations(document)]
    assert ids == ["listPets", "createPets", "showPetById"]
    assert len(set(ids)) == len(ids)
    assert all(op["tags"] == ["pets"] for _, _, op in _operations(document))


def test_every_operation_has_default_error_response():
    document = build_document_v2()
    for _, _, operation in _operations(document):
        default = operation["responses"]["default"]
        assert default["description"] == "unexpected error"
        assert default["schema"] == {"$ref": "#/definitions/Error"}


def test_list_pets_parameter_and_header():
    operation = build_document_v2()["paths"]["/pets"]["get"]
    (parameter,) = operation["parameters"]
    assert parameter["name"] == "limit"
    assert parameter["in"] == "query"
    assert parameter["type"] == "integer"
    assert parameter["format"] == "int32"
    assert "required" not in parameter
    ok = operation["responses"]["200"]
    assert ok["description"] == "An paged array of pets"
    assert ok["headers"]["x-next"]["type"] == "string"


def test_create_pets_has_no_parameters():
    operation = build_document_v2()["paths"]["/pets"]["post"]
    assert "parameters" not in operation
    assert operation["responses"]["201"] == {"description": "Null response"}


def test_show_pet_path_parameter_is_required():
    operation = build_document_v2()["paths"]["/pets/{petId}"]["get"]
    (parameter,) = operation["parameters"]
    assert parameter["name"] == "petId"
    assert parameter["in"] == "path"
    assert parameter["required"] is True


def test_every_path_parameter_appears_in_its_path():
    document = build_document_v2()
    for path, _, operation in _operations(document):
        for parameter in operation.get("parameters", []):
            if parameter["in"] == "path":
                assert "{" + parameter["name"] + "}" in path


def test_definitions():
    definitions = build_document_v2()["definitions"]
    assert list(definitions) == ["Pet", "Pets", "Error"]
    assert definitions["Pet"]["required"] == ["id", "name"]
    assert list(definitions["Pet"]["properties"]) == ["id", "name", "tag"]
    assert definitions["Pets"]["items"] == {"$ref": "#/definitions/Pet"}
    assert definitions["Error"]["required"] == ["code", "message"]


def test_required_properties_are_declared():
    definitions = build_document_v2()["definitions"]
    for schema in definitions.values():
        for name in schema.get("required", []):
            assert name in schema["properties"]


def test_all_references_resolve():
    document = build_document_v2()
    refs = list(_all_refs(document))
    assert refs
    for ref in refs:
        assert ref.startswith("#/definitions/")
        assert ref.removeprefix("#/definitions/") in document["definitions"]


def test_each_call_returns_fresh_objects():
    first = build_document_v2()
    second = build_document_v2()
    assert first == second
    first["definitions"]["Pet"]["required"].append("tag")
    first["paths"]["/pets"]["get"]["responses"]["default"]["schema"]["$ref"] = "x"
    assert build_document_v2() == second
    assert second["definitions"]["Pet"]["required"] == ["id", "name"]


@pytest.mark.parametrize(
    "dump, load",
    [
        (json.dumps, json.loads),
        (yaml.safe_dump, yaml.safe_load),
    ],
)
def test_serialization_round_trip(dump, load):
    document = build_document_v2()
    assert load(dump(document)) == document