import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Mapping

from .chain import Chain
from .chain_list import ChainList
from .chains import Chains
from .config import Settings, get_settings
from .constants import CONFIG_FILE_SUFFIXES, REQUIRED_FIELDS
from .typing import Metadata
from .utils import load_json5, load_toml, load_yaml

logger = logging.getLogger(__name__)

_LOADERS = {
    ".json": load_json5,
    ".json5": load_json5,
    ".yml": load_yaml,
    ".yaml": load_yaml,
    ".toml": load_toml,
}


def build_chains(data: Iterable[Metadata], *, indexes: Iterable[str] = None) -> list[Chain]:
    indexes = list(indexes) if indexes is not None else None
    return [Chain(metadata, indexes=indexes) for metadata in data]


def build_chain_list(data: Iterable[Metadata], *, indexes: Iterable[str] = None) -> ChainList:
    chain_list = ChainList()
    for chain in build_chains(data, indexes=indexes):
        chain_list.add(chain)
    return chain_list


def read_config_file(filepath: Path | str) -> Any:
    """
    :return: Parsed content of a JSON, JSON5, YAML or TOML file,
        None if the format is not supported or the file can't be read
    """
    filepath = Path(filepath)
    loader = _LOADERS.get(filepath.suffix.lower())
    if loader is None:
        return None

    try:
        return loader(filepath)
    except Exception as exc:
        logger.warning(f"Failed to read chain metadata from {filepath}: {exc}")
        return None


def _is_available(metadata: Any) -> bool:
    return isinstance(metadata, Mapping) and all(metadata.get(field) is not None for field in REQUIRED_FIELDS)


def load_metadata(data_dir: Path | str, *, strict_dir: bool = False) -> list[dict]:
    """
    Reads chain metadata from every supported file of the directory.
    A file holds either one chain or a list of chains;
    entries without a name or chain ID are skipped.

    :param strict_dir: Log an unreadable directory as a warning instead of a debug message
    """
    data_dir = Path(data_dir)
    result: list[dict] = []

    try:
        filepaths = sorted(data_dir.iterdir())
    except OSError as exc:
        log = logger.warning if strict_dir else logger.debug
        log(f"Can't read chains directory {data_dir}: {exc}")
        return result

    for filepath in filepaths:
        if not filepath.is_file() or filepath.suffix.lower() not in CONFIG_FILE_SUFFIXES:
            continue

        data = read_config_file(filepath)
        if data is None:
            continue

        items = data if isinstance(data, list) else [data]
        for metadata in items:
            if _is_available(metadata):
                result.append(metadata)
            else:
                logger.debug(f"Skipping chain metadata without {' and '.join(REQUIRED_FIELDS)} in {filepath}")

    logger.debug(f"Loaded {len(result)} chains from {data_dir}")
    return result


def create_default_chains(settings: Settings = None) -> Chains:
    settings = settings or get_settings()
    if settings.disable_autoload:
        return Chains([])
    return Chains(load_metadata(settings.data_dir, strict_dir=settings.data_dir_configured))


@lru_cache
def default_chains() -> Chains:
    """:return: Process-wide registry loaded according to the EVM_CHAINLIST_* settings"""
    return create_default_chains()
