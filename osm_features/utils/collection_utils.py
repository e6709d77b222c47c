"""Helpers for lazily populated lookup tables."""
import threading
from typing import Callable, MutableMapping, TypeVar

K = TypeVar('K')
V = TypeVar('V')


def synchronized_get_or_create(mapping: MutableMapping[K, V], key: K,
                               create_fn: Callable[[K], V],
                               lock: threading.Lock) -> V:
    """Get the value for key, creating and storing it if missing.

    The lookup and creation happen while holding lock, so create_fn is
    called at most once per key even with concurrent callers.

    Args:
        mapping: Cache to read from and populate
        key: Lookup key
        create_fn: Factory called with key when no value is cached
        lock: Lock guarding mapping

    Returns:
        Cached or newly created value
    """
    with lock:
        if key in mapping:
            return mapping[key]
        value = create_fn(key)
        mapping[key] = value
        return value
