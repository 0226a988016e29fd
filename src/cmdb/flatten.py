"""
Flatten a parsed YAML/JSON document into dot-notation key paths.

The flattener walks a generic document tree (mappings, sequences, scalars)
and writes every accepted leaf into a single-level dict keyed by its full
key path:

    >>> output = {}
    >>> flatten({"database": {"host": "db1", "port": 5432}}, "my", output)
    {'my.database.host': 'db1', 'my.database.port': 5432}

Accepted leaves are strings, numbers, booleans, and arrays whose elements
are all of one of those kinds. Everything else (null, mappings inside
arrays, mixed arrays, dates, binary data) raises BadValue and the whole
pass is abandoned.
"""

import collections.abc as _abc
import json as _json
import logging as _logging
import typing as _typing

import cmdb.config.types as types
import cmdb.errors as errors
import cmdb.keys as keys

_logger = _logging.getLogger(__name__)

# Scalar kinds accepted as leaves, or inside homogeneous arrays
STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"

ScalarKind: _typing.TypeAlias = _typing.Literal["string", "number", "boolean"]


def classify(value: _typing.Any) -> ScalarKind | None:
    """
    Return the scalar kind of a value, or None if it is not an accepted scalar.

    bool is checked before int because bool is an int subclass.
    """
    if isinstance(value, str):
        return STRING
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    return None


def _is_array(value: _typing.Any) -> bool:
    return isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes))


def _check_array(
    value: _abc.Sequence[_typing.Any],
    config: types.FlattenConfig,
) -> str | None:
    """Return the reason an array is rejected, or None if it is accepted."""
    if any(isinstance(element, _abc.Mapping) for element in value):
        return "mappings not allowed inside arrays"

    if not value:
        return None if config.empty_arrays else "empty arrays not allowed"

    kinds = {classify(element) for element in value}
    if len(kinds) != 1 or None in kinds:
        return "mismatched/unsupported element types"

    if kinds == {BOOLEAN} and not config.mixed_boolean_arrays and len(set(value)) > 1:
        return "mismatched/unsupported element types"

    return None


def key_text(key: _typing.Any) -> str:
    """
    Render a mapping key as a key path component.

    YAML allows non-string keys; booleans and null are spelled the way the
    document spells them (true, false, null), not the Python way.
    """
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, bool):
        return _json.dumps(key)
    return str(key)


def flatten(
    node: _typing.Any,
    prefix: str,
    output: dict[str, _typing.Any],
    *,
    location: str = "",
    config: types.FlattenConfig | None = None,
) -> dict[str, _typing.Any]:
    """
    Flatten a mapping into output, keyed by dot-joined paths under prefix.

    Args:
        node: Parsed document; must be a mapping.
        prefix: Key path under which all of node's keys are nested ("" for none).
        output: Dict receiving (key path, value) pairs. Returned for convenience.
        location: Source location, used to attribute errors.
        config: Accepted leaf shapes; defaults to FlattenConfig().

    Returns:
        output.

    Raises:
        BadValue: If any value does not fit the accepted leaf model, or a
            mapping contains itself (YAML aliases allow this). output may
            hold a partial result and must be discarded.
    """
    if config is None:
        config = types.FlattenConfig()

    if not isinstance(node, _abc.Mapping):
        raise errors.BadValue(location, prefix, node, "expected a mapping")

    _flatten_mapping(node, prefix, output, location, config, {id(node)})
    return output


def _flatten_mapping(
    node: _abc.Mapping[_typing.Any, _typing.Any],
    prefix: str,
    output: dict[str, _typing.Any],
    location: str,
    config: types.FlattenConfig,
    ancestors: set[int],
) -> None:
    # ancestors: ids of the mappings on the path from the root to node
    for key, value in node.items():
        full_key = keys.join(prefix, key_text(key))

        if isinstance(value, _abc.Mapping):
            if id(value) in ancestors:
                _logger.debug("Rejecting %s in %s: recursive mapping", full_key, location)
                raise errors.BadValue(location, full_key, value, "recursive mapping")
            ancestors.add(id(value))
            _flatten_mapping(value, full_key, output, location, config, ancestors)
            ancestors.discard(id(value))
            continue

        if _is_array(value):
            reason = _check_array(value, config)
        elif classify(value) is not None:
            reason = None
        else:
            # None and anything else: not allowed
            reason = "unsupported value type"

        if reason is None and full_key in output:
            reason = "duplicate key path"

        if reason is not None:
            _logger.debug("Rejecting %s in %s: %s", full_key, location, reason)
            raise errors.BadValue(location, full_key, value, reason)

        output[full_key] = value
