from typing import Any

from pydantic import BaseModel, ConfigDict


class NativeCurrency(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    symbol: str | None = None
    decimals: int | None = None


class Explorer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    standard: str | None = None
    icon: str | None = None


class Feature(BaseModel):
    model_config = ConfigDict(frozen=True)

    # chainlist names are strings, but any non-null value counts
    name: Any = None
