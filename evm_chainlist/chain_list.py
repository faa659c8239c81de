from typing import Any, Callable, Generic, Iterable, Iterator, MutableMapping, TypeVar

from .chain import Chain
from .typing import ChainValue

T = TypeVar("T", bound=Chain)


class BaseChainList(Generic[T]):
    """
    Deduplicated collection of chains ordered by chain ID.

    Chains are kept in a storage mapping {chain.id: chain} that may be shared
    between several lists; each list only owns the set of IDs it contains.
    """

    def __init__(
            self,
            chains: Iterable[T] = (),
            *,
            storage: MutableMapping[str, T] = None,
    ):
        if storage is not None and not isinstance(storage, MutableMapping):
            raise TypeError("`storage` must be a mutable mapping")

        self._storage: MutableMapping[str, T] = storage if storage is not None else {}
        # dict keys as an insertion-ordered set of chain IDs
        self._members: dict[str, None] = {}
        # lookup key -> chain ID
        self._cache: dict[tuple[type, str], str] = {}
        # sorted snapshot, None when invalidated
        self._sorted: list[T] | None = None

        for index, chain in enumerate(chains):
            if not Chain.is_chain(chain):
                raise TypeError(f"Invalid chain type {type(chain).__name__} at index {index}")
            self.add(chain)

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any], mapfn: Callable[[Any, int], T] = None, **kwargs):
        """
        :param mapfn: Called with (item, index) to turn each item into a chain
        """
        if mapfn is None:
            return cls(list(iterable), **kwargs)
        return cls([mapfn(item, index) for index, item in enumerate(iterable)], **kwargs)

    @classmethod
    def of(cls, *chains: T):
        return cls(chains)

    def _invalidate(self):
        self._sorted = None
        self._cache.clear()

    @property
    def _list(self) -> list[T]:
        if self._sorted is None:
            chains = [self._storage[chain_id] for chain_id in self._members if chain_id in self._storage]
            self._sorted = sorted(chains, key=lambda chain: chain.chain_id)
        return self._sorted

    def _resolve(self, value: "ChainValue | T") -> T | None:
        if value is None:
            return None

        # chains are matched by name and chain ID, never through the cache
        if Chain.is_chain(value):
            return next((chain for chain in self._list if chain.equal(value)), None)

        key = (type(value), str(value))
        chain_id = self._cache.get(key)
        if chain_id is not None and chain_id in self._members and chain_id in self._storage:
            return self._storage[chain_id]

        for chain in self._list:
            if chain.equal(value):
                self._cache[key] = chain.id
                return chain
        return None

    def add(self, chain: T):
        if not Chain.is_chain(chain):
            return self

        if chain.id not in self._storage:
            self._storage[chain.id] = chain
        if chain.id not in self._members:
            self._members[chain.id] = None
            self._invalidate()
        return self

    def get(self, value: "ChainValue | T") -> T | None:
        """
        If several chains match the value, the one with the lowest chain ID is returned.
        """
        return self._resolve(value)

    def delete(self, value: "ChainValue | T") -> bool:
        """
        :return: True if a chain was removed, False if nothing matched the value
        """
        if Chain.is_chain(value) and value.id in self._members:
            del self._members[value.id]
            self._invalidate()
            return True

        chain = self._resolve(value)
        if chain is None:
            return False

        del self._members[chain.id]
        self._invalidate()
        return True

    def clear(self):
        """Removes all chains from the list. The shared storage is left untouched."""
        self._members.clear()
        self._invalidate()
        return self

    def include(self, value: "ChainValue | T") -> bool:
        if Chain.is_chain(value):
            return value.id in self._members
        return any(chain.equal(value) for chain in self._list)

    def to_array(self) -> list[T]:
        return list(self._list)

    def value_of(self) -> list[T]:
        return self.to_array()

    def for_each(self, fn: Callable[[T, int, list[T]], Any]):
        chains = self.to_array()
        for index, chain in enumerate(chains):
            fn(chain, index, chains)

    @property
    def length(self) -> int:
        return len(self._list)

    def __len__(self):
        return self.length

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_array())

    def __contains__(self, value: "ChainValue | T") -> bool:
        return self.include(value)

    def __repr__(self):
        return f"{self.__class__.__name__}({[str(chain) for chain in self._list]})"


class ChainList(BaseChainList[T]):
    @staticmethod
    def is_chain_list(obj: Any) -> bool:
        return isinstance(obj, ChainList)

    def get_chain_ids(self) -> list[int]:
        return [chain.chain_id for chain in self._list]

    def get_active_chains(self) -> list[T]:
        return [chain for chain in self._list if chain.active()]

    def get_inactive_chains(self) -> list[T]:
        return [chain for chain in self._list if chain.inactive()]

    def get_active_chain_ids(self) -> list[int]:
        return [chain.chain_id for chain in self.get_active_chains()]

    def get_inactive_chain_ids(self) -> list[int]:
        return [chain.chain_id for chain in self.get_inactive_chains()]

    def get_test_chains(self) -> list[T]:
        return [chain for chain in self._list if chain.is_testnet()]

    def get_non_test_chains(self) -> list[T]:
        return [chain for chain in self._list if not chain.is_testnet()]

    def get_test_chain_ids(self) -> list[int]:
        return [chain.chain_id for chain in self.get_test_chains()]

    def get_non_test_chain_ids(self) -> list[int]:
        return [chain.chain_id for chain in self.get_non_test_chains()]
