"""Cache key generation logic."""
import re
from typing import Any

RESERVED_CHARACTERS = re.compile(r"[{}()/\\@:]")


def standardise_key(prefix: str, key: str) -> str:
    """
    Namespace a key and strip characters reserved by cache backends.

    Example:
        >>> standardise_key("programmes", "pid:b006q2x0")
        "programmes.pid_b006q2x0"
    """
    return RESERVED_CHARACTERS.sub("_", f"{prefix}.{key}")


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def key_helper(class_name: str, function_name: str, *unique_values: Any) -> str:
    """
    Build a cache key from the calling class, function and arguments.

    Example:
        >>> key_helper("ProgrammesService", "find_by_pid", "b006q2x0", None)
        "ProgrammesService.find_by_pid.b006q2x0.null"
    """
    return ".".join([class_name, function_name] + [_render(value) for value in unique_values])
