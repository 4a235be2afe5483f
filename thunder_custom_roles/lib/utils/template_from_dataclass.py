from dataclasses import fields, is_dataclass
from typing import Any


def _map_dict(val: dict) -> dict:
    return {k: _map(v) for k, v in val.items()}


def _map_dataclass(val: object) -> dict:
    return {f.name: _map(getattr(val, f.name)) for f in fields(val) if getattr(val, f.name) is not None}


def _map(val: Any) -> Any:
    if isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    elif isinstance(val, list):
        return [_map(v) for v in val]
    elif isinstance(val, dict):
        return _map_dict(val)
    elif is_dataclass(val):
        return _map_dataclass(val)
    else:
        return val


def template_from_dataclass(resource: object) -> Any:
    """Generate a template fragment from a resource dataclass

    Recursively converts dataclasses to dict, leaving out any field set to ``None``.
    Plain dicts and lists (user-supplied statements, intrinsic functions) are copied as they are.

    :param resource: A resource dataclass instance
    :return: The resource in template form
    """
    return _map(resource)
