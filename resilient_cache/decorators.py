"""
Function decorator routing calls through a cache.
"""

import functools
from typing import Any, Callable, Optional

from .cache import Cache
from .ttl import CacheTtl, Ttl


def cached(
    cache: Cache,
    ttl: Ttl = CacheTtl.NORMAL,
    *,
    null_ttl: Ttl = CacheTtl.NONE,
    key_prefix: Optional[str] = None,
) -> Callable:
    """Decorator caching a function's result with ``cache.get_or_set``.

    The key is built from ``key_prefix`` (the function's module by default),
    the function's qualified name and its arguments.

    Example:
        @cached(cache, CacheTtl.MEDIUM)
        def find_programme(pid):
            return repository.find(pid)
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            key = cache.key_helper(
                key_prefix or func.__module__,
                func.__qualname__,
                *args,
                *(f"{name}={value}" for name, value in sorted(kwargs.items()))
            )
            return cache.get_or_set(key, ttl, func, args, kwargs, null_ttl=null_ttl)

        return wrapper

    return decorator
