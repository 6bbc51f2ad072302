"""Resolution of attribute paths into span attributes.

Walks each configured path through the bindings captured for one call of a
traced function. Paths that cannot be followed (an unbound name, a missing
key, a value that has no fields) are dropped rather than reported.
"""

import dataclasses
import json
from collections.abc import Iterable, Mapping
from functools import singledispatch
from typing import Any

import structlog
from opentelemetry.util.types import AttributeValue
from pydantic import BaseModel

from otel_decorator.modules.trace.exceptions import TraceConfigurationError
from otel_decorator.modules.trace.schemas import (
    MISSING,
    AttributePath,
    AttributePathSpec,
    ResolvedAttributes,
)
from otel_decorator.modules.trace.validator import parse_attribute_path

logger = structlog.get_logger()

_PRIMITIVE_TYPES = (bool, str, int, float)


@singledispatch
def get_field(value: Any, key: str) -> Any:
    """Look up a named field on a value.

    Mappings are looked up by key; dataclasses, pydantic models and named
    tuples by field name; other objects through their instance attributes.
    Register extra types with ``@get_field.register``.

    Args:
        value: The value to descend into.
        key: The field name.

    Returns:
        The field's value, or MISSING if the value has no such field or
        does not support field lookup at all.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        if key in {f.name for f in dataclasses.fields(value)}:
            return getattr(value, key)
        return MISSING

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        if key in instance_dict:
            return instance_dict[key]

    if key in _slot_names(type(value)):
        return getattr(value, key, MISSING)

    return MISSING


@get_field.register
def _(value: Mapping, key: str) -> Any:
    if key in value:
        return value[key]
    return MISSING


@get_field.register
def _(value: BaseModel, key: str) -> Any:
    if key in type(value).model_fields:
        return getattr(value, key)
    return MISSING


@get_field.register
def _(value: tuple, key: str) -> Any:
    # Only named tuples have fields
    if key in getattr(type(value), "_fields", ()):
        return getattr(value, key)
    return MISSING


@get_field.register(str)
@get_field.register(bytes)
@get_field.register(bytearray)
@get_field.register(int)
@get_field.register(float)
@get_field.register(list)
@get_field.register(type(None))
def _(value: Any, key: str) -> Any:  # noqa: ARG001
    return MISSING


def _slot_names(cls: type) -> set[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slots)
    return names


def to_attribute_value(value: Any) -> AttributeValue | None:
    """Coerce a resolved value into an OpenTelemetry attribute value.

    Primitives pass through and homogeneous sequences of primitives become
    tuples. Mappings, dataclasses and pydantic models are JSON-encoded with
    sorted keys; anything else is rendered with str().

    Returns:
        The attribute value, or None for None (not a valid attribute value).
    """
    if value is None:
        return None

    if isinstance(value, _PRIMITIVE_TYPES):
        return value

    if isinstance(value, Mapping):
        return _to_json(value)

    if isinstance(value, BaseModel):
        return _to_json(value.model_dump(mode="json"))

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _to_json(dataclasses.asdict(value))

    if isinstance(value, list | tuple) and not hasattr(type(value), "_fields"):
        item_types = {type(item) for item in value}
        if len(item_types) <= 1 and item_types <= set(_PRIMITIVE_TYPES):
            return tuple(value)

    return str(value)


def _to_json(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True, default=str)
    except (TypeError, ValueError):
        # Keys that cannot be sorted against each other
        return str(value)


def resolve(
    bindings: Mapping[str, Any],
    include: Iterable[AttributePath | AttributePathSpec],
    result: Any = MISSING,
) -> ResolvedAttributes:
    """Resolve attribute paths against a call's bindings and result.

    The "result" root always refers to `result`, even if `bindings` holds a
    name "result" as well. Entries that cannot be resolved are skipped.

    Args:
        bindings: Values bound during the call, keyed by name.
        include: Attribute paths, validated or as raw specs.
        result: The function's return value; MISSING when the function
            raised and there is no result.

    Returns:
        Attribute name to attribute value, in the order of `include`.
    """
    attributes: ResolvedAttributes = {}

    for entry in include:
        try:
            path = (
                entry
                if isinstance(entry, AttributePath)
                else parse_attribute_path(entry)
            )
        except TraceConfigurationError as e:
            logger.debug("attribute_path_invalid", path=repr(entry), error=e.message)
            continue

        try:
            value = _walk(path, bindings, result)
            if value is MISSING:
                logger.debug("attribute_path_unresolved", attribute=path.name)
                continue
            attribute_value = to_attribute_value(value)
        except Exception as e:  # noqa: BLE001
            # Custom accessors and __str__ implementations are user code
            logger.debug(
                "attribute_path_lookup_failed",
                attribute=path.name,
                error=repr(e),
            )
            continue

        if attribute_value is not None:
            attributes[path.name] = attribute_value

    return attributes


def _walk(path: AttributePath, bindings: Mapping[str, Any], result: Any) -> Any:
    if path.is_result:
        value = result
    else:
        value = bindings.get(path.root, MISSING)

    for key in path.fields:
        if value is MISSING:
            break
        value = get_field(value, key)

    return value
