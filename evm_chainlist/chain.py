from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .constants import REQUIRED_FIELDS
from .enums import ChainStatus
from .exceptions import ChainKeyNotFound, InvalidIndexType, MissingRequiredFields, ValidationError
from .models import Explorer, Feature, NativeCurrency
from .typing import ChainValue, Metadata
from .utils import MISSING, equal_int, freeze, get_path, is_index_value, normalize_int, thaw


class Chain:
    """
    Immutable chain record built from chainlist-style metadata.

    Every top-level metadata property is exposed as a read-only attribute
    (`chain.chainId`, `chain.nativeCurrency`), integer-like strings are
    normalized to int. A chain can be looked up by its ID, chain ID,
    network ID, name or by any of the declared index values.
    """

    def __init__(self, metadata: Metadata, *, indexes: Iterable[str] = None):
        if not isinstance(metadata, Mapping):
            raise TypeError(f"Chain metadata must be a mapping, got {type(metadata).__name__}")

        missing = [field for field in REQUIRED_FIELDS if field not in metadata]
        if missing:
            raise MissingRequiredFields(missing)

        frozen = freeze(metadata)
        fields = {key: normalize_int(value) for key, value in frozen.items()}

        chain_id = fields["chainId"]
        if isinstance(chain_id, bool) or not isinstance(chain_id, int):
            raise ValidationError(f"Invalid chainId: {metadata['chainId']!r}")

        object.__setattr__(self, "_metadata", frozen)
        object.__setattr__(self, "_fields", MappingProxyType(fields))

        # index value -> property path
        tokens: dict[str, str] = {}
        for path in indexes or ():
            value = get_path(frozen, path)
            if value is MISSING:
                continue
            if not is_index_value(value):
                raise InvalidIndexType(path, value)
            tokens[str(value)] = path
        object.__setattr__(self, "_tokens", MappingProxyType(tokens))

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in ("_fields", "_metadata", "_tokens"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(f"{self.__class__.__name__!r} object has no attribute {name!r}") from None

    def __str__(self):
        return f"{self.name}({self.chain_id})"

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id!r}, chain_id={self.chain_id})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        return self is other or (self.name == other.name and self.chain_id == other.chain_id)

    def __hash__(self):
        return hash((self.name, self.chain_id))

    @staticmethod
    def is_chain(obj: Any) -> bool:
        return isinstance(obj, Chain)

    ################################################################################
    # Identity
    ################################################################################

    @property
    def id(self) -> str:
        """
        :return: The `id` or `_id` metadata field if present, "<name>(<chainId>)" otherwise
        """
        for field in ("id", "_id"):
            value = self._fields.get(field)
            if value is not None:
                return str(value)
        return str(self)

    @property
    def name(self) -> str:
        return self._fields["name"]

    @property
    def chain_id(self) -> int:
        return self._fields["chainId"]

    @property
    def network_id(self) -> int | None:
        return self._fields.get("networkId")

    @property
    def short_name(self) -> str | None:
        return self._fields.get("shortName")

    @property
    def info_url(self) -> str | None:
        return self._fields.get("infoURL")

    @property
    def status(self) -> str:
        return self._fields.get("status", ChainStatus.ACTIVE.value)

    @property
    def native_currency(self) -> NativeCurrency | None:
        value = self._fields.get("nativeCurrency")
        if not isinstance(value, Mapping):
            return None
        return NativeCurrency.model_validate(thaw(value))

    @property
    def explorers(self) -> list[Explorer]:
        return [Explorer.model_validate(thaw(explorer)) for explorer in self._fields.get("explorers", ())]

    @property
    def metadata(self) -> Mapping[str, Any]:
        return self._metadata

    def to_dict(self) -> dict[str, Any]:
        """:return: Mutable deep copy of the metadata"""
        return thaw(self._metadata)

    ################################################################################
    # Lookup
    ################################################################################

    def _view(self) -> Mapping[str, Any]:
        if "id" in self._fields:
            return self._fields
        return {**self._fields, "id": self.id}

    def get(self, path: str, default: Any = None) -> Any:
        """
        :param path: Dot path of the property, e.g. "nativeCurrency.symbol" or "rpc.0"
        :param default: Returned if the path does not resolve
        """
        value = get_path(self._view(), path)
        return default if value is MISSING else value

    def get_or_throw(self, path: str) -> Any:
        value = get_path(self._view(), path)
        if value is MISSING:
            raise ChainKeyNotFound(path)
        return value

    def is_(self, value: ChainValue) -> bool:
        """
        Checks the value against the identity key, chain ID, network ID and name.
        Integer-like strings are compared by their numeric value.
        """
        network_id = self.network_id
        return (
            (isinstance(value, (str, int)) and not isinstance(value, bool) and self.id == str(value))
            or equal_int(self.chain_id, value)
            or (network_id is not None and equal_int(network_id, value))
            or (isinstance(value, str) and self.name == value)
        )

    def equal(self, value: "ChainValue | Chain") -> bool:
        """Same as `is_`, but also matches other chains and declared index values."""
        if value is None:
            return False

        if isinstance(value, Chain):
            return self is value or (self.name == value.name and self.chain_id == value.chain_id)

        if self.is_(value):
            return True

        path = self._tokens.get(str(value))
        if path is None:
            return False
        return bool(self.get(path))

    def indexes(self) -> list[str]:
        return list(self._tokens.values())

    def index_values(self) -> list[str]:
        return list(self._tokens.keys())

    ################################################################################
    # Status and features
    ################################################################################

    def is_testnet(self) -> bool:
        return bool(self.get("testnet", False))

    def active(self) -> bool:
        return self.status == ChainStatus.ACTIVE.value

    def inactive(self) -> bool:
        return not self.active()

    def supported_features(self) -> list[Any]:
        features = []
        for feature in self.get("features", ()) or ():
            if not isinstance(feature, Mapping):
                continue
            name = Feature.model_validate(thaw(feature)).name
            if name is not None:
                features.append(name)
        return features

    def support_feature(self, feature: str) -> bool:
        return feature in self.supported_features()
