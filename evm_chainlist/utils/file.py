import tomllib
from pathlib import Path
from typing import Any

import json5
import yaml


def load_json5(filepath: Path | str) -> Any:
    with open(filepath, "r", encoding="utf-8") as file:
        return json5.load(file)


def load_yaml(filepath: Path | str) -> Any:
    with open(filepath, "r", encoding="utf-8") as file:
        return yaml.safe_load(file)


def load_toml(filepath: Path | str) -> dict:
    with open(filepath, "rb") as file:
        return tomllib.load(file)
