import re
from types import MappingProxyType
from typing import Any, Mapping

_PATH_SEGMENT = re.compile(r"[^.\[\]]+")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def freeze(obj: Any) -> Any:
    """
    Returns a deep, read-only copy of JSON-like data:
    mappings become mapping proxies, lists and tuples become tuples.
    """
    if isinstance(obj, Mapping):
        return MappingProxyType({key: freeze(value) for key, value in obj.items()})
    if isinstance(obj, (list, tuple)):
        return tuple(freeze(item) for item in obj)
    if isinstance(obj, (set, frozenset)):
        return frozenset(freeze(item) for item in obj)
    return obj


def thaw(obj: Any) -> Any:
    """Inverse of `freeze`: returns a mutable deep copy."""
    if isinstance(obj, Mapping):
        return {key: thaw(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [thaw(item) for item in obj]
    if isinstance(obj, frozenset):
        return set(thaw(item) for item in obj)
    return obj


def split_path(path: str) -> list[str]:
    """
    >>> split_path("features[0].name")
    ['features', '0', 'name']
    """
    return _PATH_SEGMENT.findall(path)


def get_path(obj: Any, path: str, default: Any = MISSING) -> Any:
    """
    Resolves a dot path ("nativeCurrency.symbol", "rpc.0", "features[0].name")
    through nested mappings and sequences.
    """
    if isinstance(obj, Mapping) and path in obj:
        return obj[path]

    segments = split_path(path)
    if not segments:
        return default

    current = obj
    for segment in segments:
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, (list, tuple)) and segment.isdigit():
            index = int(segment)
            if index >= len(current):
                return default
            current = current[index]
        else:
            return default
    return current
