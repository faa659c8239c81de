from pathlib import Path

import pytest

from evm_chainlist.config import get_settings
from evm_chainlist.factory import default_chains
from evm_chainlist.utils import load_json5, normalize_int

DATA_DIR = Path(__file__).parent / "data"


def _load_data() -> list[dict]:
    data = [load_json5(filepath) for filepath in DATA_DIR.glob("*.json")]
    return sorted(data, key=lambda metadata: normalize_int(metadata["chainId"]))


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def data() -> list[dict]:
    """Chain metadata sorted by chain ID: Ethereum (1), Goerli (5), OP (10), Polygon (137)."""
    return _load_data()


@pytest.fixture
def ethereum(data) -> dict:
    return data[0]


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    for name in ("EVM_CHAINLIST_DATA_DIR", "EVM_CHAINLIST_DISABLE_AUTOLOAD"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    default_chains.cache_clear()
    yield
    get_settings.cache_clear()
    default_chains.cache_clear()
