import re

_non_alphanumeric = re.compile(r"[^0-9a-z]", re.IGNORECASE)


def normalize_name(v: str) -> str:
    """Upper-case the first letter of a string

    :param v: Any string
    :return: String with its first letter in upper case
    """
    return v[:1].upper() + v[1:]


def normalize_name_to_alphanumeric(v: str) -> str:
    """Convert a name into something safe to use inside a CloudFormation logical ID

    Dashes and underscores are spelled out so that ``my-func`` and ``my_func`` do not collide,
    everything else that isn't alphanumeric is dropped.

    Example::

        normalize_name_to_alphanumeric("my-func_name.v2")  # "MyDashfuncUnderscorenamev2"

    :param v: String to normalize
    :return: Normalized string
    """
    spelled_out = v.replace("-", "Dash").replace("_", "Underscore")
    return normalize_name(_non_alphanumeric.sub("", spelled_out))
