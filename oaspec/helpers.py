"""Helpers for inspecting and building YAML nodes."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Iterable, Optional, Pattern, Sequence, Union

import yaml

_STR_TAG = "tag:yaml.org,2002:str"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"
_BOOL_TAG = "tag:yaml.org,2002:bool"
_NULL_TAG = "tag:yaml.org,2002:null"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
_MAP_TAG = "tag:yaml.org,2002:map"
_SEQ_TAG = "tag:yaml.org,2002:seq"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _is_mapping(node: Any) -> bool:
    return isinstance(node, yaml.MappingNode)


def sorted_keys_for_map(m: Optional[yaml.Node]) -> list[str]:
    """Return the keys of a mapping node in sorted order."""
    if not _is_mapping(m):
        return []
    return sorted(key.value for key, _ in m.value)


def map_has_key(m: Optional[yaml.Node], key: str) -> bool:
    """Return True if a mapping node holds the key."""
    if not _is_mapping(m):
        return False
    return any(item_key.value == key for item_key, _ in m.value)


def map_value_for_key(m: Optional[yaml.Node], key: str) -> Optional[yaml.Node]:
    """Return the value node stored under a key, or None."""
    if not _is_mapping(m):
        return None
    return next((value for item_key, value in m.value if item_key.value == key), None)


def string_items(items: Iterable[Any]) -> list[str]:
    """Return the items that are strings, in order."""
    return [item for item in items if isinstance(item, str)]


def sequence_node_for_node(node: yaml.Node) -> Optional[yaml.SequenceNode]:
    """Return the node if it is a sequence, else None."""
    return node if isinstance(node, yaml.SequenceNode) else None


def _scalar_with_tags(node: Optional[yaml.Node], *tags: str) -> Optional[str]:
    if isinstance(node, yaml.ScalarNode) and node.tag in tags:
        return node.value
    return None


def bool_for_scalar_node(node: Optional[yaml.Node]) -> Optional[bool]:
    """Return the bool held by a !!bool scalar, or None."""
    text = _scalar_with_tags(node, _BOOL_TAG)
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return None


def int_for_scalar_node(node: Optional[yaml.Node]) -> Optional[int]:
    """Return the 64-bit integer held by a decimal !!int scalar, or None."""
    text = _scalar_with_tags(node, _INT_TAG)
    if text is None or not _DECIMAL_INT.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def float_for_scalar_node(node: Optional[yaml.Node]) -> Optional[float]:
    """Return the number held by an !!int or !!float scalar, or None."""
    text = _scalar_with_tags(node, _INT_TAG, _FLOAT_TAG)
    if not text or "_" in text or text != text.strip():
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isinf(value) and "inf" not in text.lower():
        return None
    return value


def string_for_scalar_node(node: Optional[yaml.Node]) -> Optional[str]:
    """Return the text of a string-like scalar; null gives an empty string."""
    if not isinstance(node, yaml.ScalarNode):
        return None
    if node.tag in (_INT_TAG, _STR_TAG, _TIMESTAMP_TAG):
        return node.value
    if node.tag == _NULL_TAG:
        return ""
    return None


def string_array_for_sequence_node(node: yaml.Node) -> list[str]:
    """Return the string values among the items of a sequence node."""
    strings = (string_for_scalar_node(item) for item in node.value)
    return [s for s in strings if s is not None]


def missing_keys_in_map(
    m: Optional[yaml.Node], required_keys: Iterable[str]
) -> list[str]:
    """Return the required keys that the mapping lacks."""
    return [key for key in required_keys if not map_has_key(m, key)]


def invalid_keys_in_map(
    m: Optional[yaml.Node],
    allowed_keys: Sequence[str],
    allowed_patterns: Iterable[Union[str, Pattern[str]]],
) -> list[str]:
    """Return keys that are neither allowed nor matched by an allowed pattern."""
    if not _is_mapping(m):
        return []
    patterns = [re.compile(p) if isinstance(p, str) else p for p in allowed_patterns]
    allowed = set(allowed_keys)
    return [
        key.value
        for key, _ in m.value
        if key.value not in allowed
        and not any(pattern.search(key.value) for pattern in patterns)
    ]


def new_null_node() -> yaml.ScalarNode:
    """Create a null scalar node."""
    return yaml.ScalarNode(_NULL_TAG, "")


def new_mapping_node() -> yaml.MappingNode:
    """Create an empty mapping node."""
    return yaml.MappingNode(_MAP_TAG, [])


def new_sequence_node() -> yaml.SequenceNode:
    """Create an empty sequence node."""
    return yaml.SequenceNode(_SEQ_TAG, [])


def new_scalar_node_for_string(s: str) -> yaml.ScalarNode:
    """Create a string scalar node."""
    return yaml.ScalarNode(_STR_TAG, s)


def new_sequence_node_for_string_array(strings: Iterable[str]) -> yaml.SequenceNode:
    """Create a sequence node of string scalars."""
    return yaml.SequenceNode(_SEQ_TAG, [new_scalar_node_for_string(s) for s in strings])


def new_scalar_node_for_bool(b: bool) -> yaml.ScalarNode:
    """Create a bool scalar node."""
    return yaml.ScalarNode(_BOOL_TAG, "true" if b else "false")


def _format_general(f: float) -> str:
    """Format a float in the shortest general form, exponent from 1e-4 to 1e6."""
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, f) < 0 else ""
    if f == 0:
        return sign + "0"
    dec = Decimal(repr(abs(f))).normalize()
    _, digit_tuple, exponent = dec.as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = len(digits) + exponent
    exp = point - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"
    if point <= 0:
        body = "0." + "0" * -point + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]
    return sign + body


def new_scalar_node_for_float(f: float) -> yaml.ScalarNode:
    """Create a float scalar node."""
    return yaml.ScalarNode(_FLOAT_TAG, _format_general(f))


def new_scalar_node_for_int(i: int) -> yaml.ScalarNode:
    """Create an integer scalar node."""
    return yaml.ScalarNode(_INT_TAG, str(i))


def plural_properties(count: int) -> str:
    """Return "property" or "properties" to suit a count."""
    stem = "propert"
    suffix = "y" if count == 1 else "ies"
    return stem + suffix


def string_array_contains_value(array: Iterable[str], value: str) -> bool:
    """Return True if the value is in the array."""
    return value in array


def string_array_contains_values(array: Sequence[str], values: Iterable[str]) -> bool:
    """Return True if every value is in the array."""
    return all(value in array for value in values)


def string_value(item: Any) -> Optional[str]:
    """Return the item as text if it is a string or an integer, else None."""
    if isinstance(item, str):
        return item
    if isinstance(item, int) and not isinstance(item, bool):
        return str(item)
    return None


def display(node: yaml.Node) -> str:
    """Describe a node for use in error messages."""
    if isinstance(node, yaml.ScalarNode) and node.tag == _STR_TAG:
        return f"{node.value} (string)"
    return f"{node!r} ({type(node).__name__})"


def _clear_style(node: yaml.Node, seen: set[int]) -> None:
    if id(node) in seen:
        return
    seen.add(id(node))
    if isinstance(node, yaml.ScalarNode):
        node.style = None
    elif isinstance(node, yaml.SequenceNode):
        node.flow_style = None
        for item in node.value:
            _clear_style(item, seen)
    elif isinstance(node, yaml.MappingNode):
        node.flow_style = None
        for key, value in node.value:
            _clear_style(key, seen)
            _clear_style(value, seen)


def marshal(node: yaml.Node) -> bytes:
    """Serialize a node as block-style YAML, discarding its original styles."""
    _clear_style(node, set())
    return yaml.serialize(node, encoding="utf-8", allow_unicode=True)