import logging
from typing import Any, Generic, Iterable, Mapping, MutableMapping

from .chain import Chain
from .chain_list import ChainList, T
from .exceptions import ChainListNotFound, ChainNotFound, UnsupportedChainError
from .typing import ChainValue, Metadata

logger = logging.getLogger(__name__)


class Chains(Generic[T]):
    """
    Registry of all known chains plus named chain lists.

    Named lists are built from the global list and share its storage,
    so every list references the same chain instances.
    """

    def __init__(
            self,
            data: Iterable["Metadata | T"] = None,
            *,
            storage: MutableMapping[str, T] = None,
            lists: Mapping[str, list[ChainValue]] = None,
            indexes: Iterable[str] = None,
    ):
        self.storage: MutableMapping[str, T] = storage if storage is not None else {}
        self.lists: dict[str, ChainList[T]] = {}

        indexes = list(indexes) if indexes is not None else None
        chains = [item if Chain.is_chain(item) else Chain(item, indexes=indexes) for item in data or ()]
        self.global_chain_list: ChainList[T] = ChainList(chains, storage=self.storage)

        if lists is None:
            return

        if not isinstance(lists, Mapping):
            raise TypeError("`lists` must be a mapping of list name to chain values")

        for name, values in lists.items():
            if not isinstance(values, (list, tuple)) or not values:
                logger.debug(f"Skipping empty chain list '{name}'")
                continue
            self.add_chain_list(name, values)

    def __len__(self):
        return len(self.global_chain_list)

    def __contains__(self, value: "ChainValue | T") -> bool:
        return self.support(value)

    def __repr__(self):
        return f"{self.__class__.__name__}(chains={len(self)}, lists={list(self.lists)})"

    ################################################################################
    # Chain lists
    ################################################################################

    def create_chain_list(self, values: Iterable["ChainValue | T"]) -> ChainList[T]:
        """
        Builds a list of the chains matching the values.
        Values that match no chain of the global list are skipped.
        """
        chain_list = ChainList(storage=self.storage)
        for value in values:
            chain = self.global_chain_list.get(value)
            if chain is None:
                logger.debug(f"Chain '{value}' not found, skipped")
                continue
            chain_list.add(chain)
        return chain_list

    def add_chain_list(self, name: str, values: Iterable["ChainValue | T"]) -> ChainList[T]:
        """Builds a chain list and registers it under the name, replacing any previous list."""
        chain_list = self.create_chain_list(values)
        self.lists[name] = chain_list
        return chain_list

    def get_chain_list(self, name: str) -> ChainList[T] | None:
        return self.lists.get(name)

    def get_chain_list_or_throw(self, name: str) -> ChainList[T]:
        chain_list = self.lists.get(name)
        if chain_list is None:
            raise ChainListNotFound(name)
        return chain_list

    def chain_list_names(self) -> list[str]:
        return list(self.lists)

    ################################################################################
    # Chains
    ################################################################################

    def add_chain(self, chain: T):
        self.global_chain_list.add(chain)
        return self

    def get_chain(self, value: "ChainValue | T") -> T | None:
        return self.global_chain_list.get(value)

    def get_chain_or_throw(self, value: "ChainValue | T") -> T:
        chain = self.global_chain_list.get(value)
        if chain is None:
            raise ChainNotFound(value)
        return chain

    ################################################################################
    # Support
    ################################################################################

    @staticmethod
    def _parse_support_args(args: tuple) -> tuple[str | None, Any]:
        if len(args) == 1:
            return None, args[0]
        if len(args) == 2:
            return args[0], args[1]
        raise TypeError(f"Expected (value) or (list_name, value), got {len(args)} arguments")

    def _include(self, list_name: str | None, value: Any) -> bool:
        if list_name is None:
            return self.global_chain_list.include(value)
        chain_list = self.lists.get(list_name)
        return chain_list is not None and chain_list.include(value)

    def support(self, *args) -> bool:
        """
        support(value) -> is the value in the global list
        support(list_name, value) -> is the value in the named list

        A list or tuple of values is supported if every value is.
        A missing named list supports nothing.
        """
        list_name, value = self._parse_support_args(args)
        if isinstance(value, (list, tuple)):
            return all(self._include(list_name, item) for item in value)
        return self._include(list_name, value)

    def support_or_throw(self, *args) -> bool:
        """
        Same as `support`, but raises UnsupportedChainError naming
        the first unsupported value instead of returning False.
        """
        list_name, value = self._parse_support_args(args)
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if not self._include(list_name, item):
                raise UnsupportedChainError(item, list_name)
        return True
