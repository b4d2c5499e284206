"""Registry of field types that can be built from JSON block definitions."""

from typing import Any, Protocol


class FieldType(Protocol):
    """A field class that knows how to build itself from JSON options."""

    @classmethod
    def from_json(cls, options: dict[str, Any]) -> Any: ...


_registry: dict[str, FieldType] = {}


def register(type_name: str, field_class: FieldType) -> None:
    """Make field_class available under type_name."""
    if not type_name:
        raise ValueError("Field type name must not be empty.")
    if type_name in _registry and _registry[type_name] is not field_class:
        raise ValueError(f"Field type {type_name!r} is already registered.")
    _registry[type_name] = field_class


def lookup(type_name: str) -> FieldType:
    """Field class registered under type_name. Raises KeyError if unknown."""
    return _registry[type_name]


def from_json(options: dict[str, Any]) -> Any:
    """Build a field from a JSON definition with a "type" key."""
    return lookup(options["type"]).from_json(options)
