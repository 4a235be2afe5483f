from typing import Any


def set_nested(target: dict, path: list[str], value: Any) -> None:
    """Set ``value`` at ``path`` inside ``target``, creating any missing mappings along the way

    Example::

        resources = {}
        set_nested(resources, ["Resources", "MyRole"], {...})
        # {"Resources": {"MyRole": {...}}}

    :param target: Mapping to modify in place
    :param path: List of keys leading to the value
    :param value: Value to store
    """
    *parents, key = path

    for part in parents:
        # the framework may leave a block explicitly empty
        if target.get(part) is None:
            target[part] = {}
        target = target[part]

    target[key] = value
