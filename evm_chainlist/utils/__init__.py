from .data import MISSING, freeze, thaw, split_path, get_path
from .file import load_json5, load_yaml, load_toml
from .other import parse_int, is_int, normalize_int, equal_int, is_index_value


__all__ = [
    "MISSING",
    "freeze",
    "thaw",
    "split_path",
    "get_path",
    "load_json5",
    "load_yaml",
    "load_toml",
    "parse_int",
    "is_int",
    "normalize_int",
    "equal_int",
    "is_index_value",
]
