# oaspec

Building blocks for tools that read, check and produce OpenAPI descriptions.
Documents are read as PyYAML node trees; generated descriptions and schemas
are plain dicts that can be dumped straight to YAML or JSON.

## Modules

- **`oaspec.context`**: `Context` records where a tool is within a document.
  `context.description()` gives the dotted path from the root, such as
  `document.paths./pets`, and `context.child(name, node)` steps one level
  down. `new_context(name, node, parent)` creates a context that inherits the
  parent's `extension_handlers`; a context made without a parent does not
  keep the node it was given.
- **`oaspec.errors`**: `CompilerError` is an exception carrying a message and,
  optionally, a `Context`. Its text is prefixed with the context's path and,
  when the context has a node with a position, `[line,column]`.
  `ErrorGroup` collects several errors, one per line of its text, and
  `error_group_or_none(errors)` returns `None` for no errors, the error itself
  for one, and an `ErrorGroup` for more.
- **`oaspec.helpers`**: functions for YAML nodes:
  - look-ups: `map_has_key`, `map_value_for_key`, `sorted_keys_for_map`,
    `sequence_node_for_node`;
  - typed scalars, each returning `None` when the node does not fit:
    `bool_for_scalar_node`, `int_for_scalar_node` (decimal, 64-bit),
    `float_for_scalar_node`, `string_for_scalar_node` (a null scalar gives
    `""`), `string_array_for_sequence_node`;
  - key checks: `missing_keys_in_map`, `invalid_keys_in_map` (allowed
    patterns may be strings or compiled regular expressions);
  - node builders: `new_null_node`, `new_mapping_node`, `new_sequence_node`,
    `new_scalar_node_for_string`, `new_sequence_node_for_string_array`,
    `new_scalar_node_for_bool`, `new_scalar_node_for_float`,
    `new_scalar_node_for_int`;
  - small utilities: `string_items`, `string_value`, `plural_properties`,
    `string_array_contains_value`, `string_array_contains_values`, `display`;
  - `marshal(node)`, which clears the node tree's styles and returns it as
    block-style UTF-8 YAML bytes.
- **`oaspec.reader`**: `Reader` loads files from disk or, for names with a URL
  scheme, over HTTP. It keeps a cache of raw file contents and a cache of
  parsed documents and resolved references; each can be switched on and off
  (`enable_file_cache`, `disable_file_cache`, `enable_info_cache`,
  `disable_info_cache`), cleared (`clear_file_cache`, `clear_info_cache`,
  `clear_caches`) or trimmed one entry at a time (`remove_from_file_cache`,
  `remove_from_info_cache`, which do nothing while that cache is off).
  - `fetch_file(url)` raises `OSError` when the download fails or the status
    is not 200.
  - `read_bytes_for_file(name)` reads a local file or fetches a URL.
  - `read_info_from_bytes(name, data)` parses YAML into a node tree and raises
    `yaml.YAMLError` for invalid YAML.
  - `read_info_for_ref(basefile, ref)` resolves a `$ref` such as
    `common.yaml#/definitions/Pet`; relative file names are taken from the
    base file's directory. It raises `CompilerError` when a key on the path
    is missing; if the target file is not valid YAML it logs a warning and
    returns `None`.
- **`oaspec.naming`**: `singular("shelves")` gives `"shelf"`,
  `singular("libraries")` gives `"library"`; `append_unique(items, item)`
  returns a new list with the item added only if it is missing.
- **`oaspec.wellknown`**: OpenAPI v3 schemas, as dicts, for common types:
  strings, booleans, bytes, integers and numbers of a given format, enums
  (`new_enum_schema(enum_type, value_names)` lists the names when
  `enum_type` is `"string"`), lists, maps, HTTP bodies, timestamps, dates,
  date-times, field masks and structs; named `(name, schema)` pairs for
  dynamic values (`new_value_schema`), `Any` (`new_any_schema`) and status
  errors (`new_status_schema`); and media types
  (`new_application_json_media_type`, `new_http_body_media_type`). Every call
  returns fresh objects.
- **`oaspec.petstore_v2`** and **`oaspec.petstore_v3`**: `build_document_v2()`
  and `build_document_v3()` return the well-known "Petstore" sample API as
  OpenAPI v2 and v3 documents (dicts).

## Installing

```
pip install oaspec
```

## Examples

Check a mapping node for required and unknown keys:

```python
import re
import yaml

from oaspec.helpers import invalid_keys_in_map, missing_keys_in_map

node = yaml.compose("title: Pets\nx-owner: me\nsummary: hi\n")
missing_keys_in_map(node, ["title", "version"])             # ['version']
invalid_keys_in_map(node, ["title"], [re.compile(r"^x-")])  # ['summary']
```

Resolve a reference into another file:

```python
from oaspec.reader import Reader

reader = Reader()
schema = reader.read_info_for_ref("specs/api.yaml", "common.yaml#/definitions/Pet")
```

Build the sample Petstore document and write it as YAML:

```python
import yaml

from oaspec.petstore_v3 import build_document_v3

print(yaml.safe_dump(build_document_v3(), sort_keys=False))
```

## Command line

`oaspec-petstore` writes the Petstore sample description as YAML to files in
the current directory: `petstore-v2.yaml` and/or `petstore-v3.yaml`.

```
oaspec-petstore          # OpenAPI v2 (the default)
oaspec-petstore --v3     # OpenAPI v3
oaspec-petstore --v2 --v3
```

Any other option prints the usage text and exits with status 255.

## What the package does not do

- It has no object model for OpenAPI documents and no binary (protocol
  buffer) encoding of them; documents are plain dicts and YAML nodes.
- It does not compile or validate a whole OpenAPI description; it offers the
  helpers such a tool is built from.
- It does not generate OpenAPI or JSON Schema from `.proto` files and is not a
  compiler plug-in; `oaspec.wellknown` supplies only the schemas such a
  generator would use for well-known types.
- `Context.extension_handlers` is carried along, but nothing in the package
  calls extension handlers.

## Running the tests

```
pip install -e ".[test]"
pytest
```