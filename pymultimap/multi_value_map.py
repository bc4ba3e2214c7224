from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import (
    Callable,
    Hashable,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    ValuesView,
)
from typing import ClassVar, Generic, Self, TypeVar

from sortedcontainers import SortedDict

from pymultimap.errors import EmptyValuesError

logger = logging.getLogger(__name__)

HashableKeyType = TypeVar("HashableKeyType", bound=Hashable)
ValueType = TypeVar("ValueType")

TargetFactory = Callable[[], MutableMapping[HashableKeyType, list[ValueType]]]


class MultiValueMap(MutableMapping[HashableKeyType, list[ValueType]], Generic[HashableKeyType, ValueType]):
    """
    A mapping that stores an ordered list of values under each key.
    """

    @abstractmethod
    def get_first(self, key: HashableKeyType) -> ValueType | None: ...

    @abstractmethod
    def add(self, key: HashableKeyType, value: ValueType) -> None: ...

    @abstractmethod
    def add_all(self, key: HashableKeyType, values: Iterable[ValueType]) -> None: ...

    @abstractmethod
    def add_all_from(self, other: Mapping[HashableKeyType, list[ValueType]]) -> None: ...

    @abstractmethod
    def set(self, key: HashableKeyType, value: ValueType) -> None: ...

    @abstractmethod
    def set_all(self, values: Mapping[HashableKeyType, ValueType]) -> None: ...

    @abstractmethod
    def to_single_value_map(self) -> dict[HashableKeyType, ValueType]: ...


class LinkedMultiValueMap(MultiValueMap[HashableKeyType, ValueType]):
    """
    Multi-value map that keeps keys in the order they were first inserted.

    All map operations are delegated to a backing mapping created by `target_factory`, `dict` by default.
    Building from `other` is a shallow copy: the value lists are shared with `other`, use `deep_copy` for
    independent lists.

    Not thread-safe, callers sharing an instance between threads must synchronize access themselves.
    """

    DEFAULT_TARGET_FACTORY: ClassVar[Callable[[], MutableMapping]] = dict

    def __init__(
        self,
        other: Mapping[HashableKeyType, list[ValueType]] | None = None,
        initial_capacity: int | None = None,
        target_factory: TargetFactory | None = None,
    ) -> None:
        # python mappings grow on demand, the capacity is only kept to be passed on to copies
        self.initial_capacity = initial_capacity
        self.target_factory: TargetFactory = target_factory or self.DEFAULT_TARGET_FACTORY
        self.target_map: MutableMapping[HashableKeyType, list[ValueType]] = self.target_factory()
        if other is not None:
            self.target_map.update(other)

    def get_first(self, key: HashableKeyType) -> ValueType | None:
        values = self.target_map.get(key)
        if values is None:
            return None
        if not values:
            raise EmptyValuesError(key)
        return values[0]

    def add(self, key: HashableKeyType, value: ValueType) -> None:
        values = self.target_map.get(key)
        if values is None:
            self.target_map[key] = values = []
        values.append(value)

    def add_all(self, key: HashableKeyType, values: Iterable[ValueType]) -> None:
        current_values = self.target_map.get(key)
        if current_values is None:
            self.target_map[key] = list(values)
        else:
            current_values.extend(values)

    def add_all_from(self, other: Mapping[HashableKeyType, list[ValueType]]) -> None:
        for key, values in other.items():
            self.add_all(key, values)

    def set(self, key: HashableKeyType, value: ValueType) -> None:
        self.target_map[key] = [value]

    def set_all(self, values: Mapping[HashableKeyType, ValueType]) -> None:
        for key, value in values.items():
            self.set(key, value)

    def to_single_value_map(self) -> dict[HashableKeyType, ValueType]:
        single_value_map: dict[HashableKeyType, ValueType] = {}
        for key, values in self.target_map.items():
            if not values:
                raise EmptyValuesError(key)
            single_value_map[key] = values[0]
        return single_value_map

    def __len__(self) -> int:
        return len(self.target_map)

    def is_empty(self) -> bool:
        return not self.target_map

    def __contains__(self, key: object) -> bool:
        return key in self.target_map

    def contains_value(self, values: object) -> bool:
        return values in self.target_map.values()

    def __getitem__(self, key: HashableKeyType) -> list[ValueType]:
        return self.target_map[key]

    def get(  # type: ignore[override]
        self, key: HashableKeyType, default: list[ValueType] | None = None
    ) -> list[ValueType] | None:
        return self.target_map.get(key, default)

    def __setitem__(self, key: HashableKeyType, values: list[ValueType]) -> None:
        self.target_map[key] = values

    def put(self, key: HashableKeyType, values: list[ValueType]) -> list[ValueType] | None:
        previous_values = self.target_map.get(key)
        self.target_map[key] = values
        return previous_values

    def __delitem__(self, key: HashableKeyType) -> None:
        del self.target_map[key]

    def remove(self, key: HashableKeyType) -> list[ValueType] | None:
        return self.target_map.pop(key, None)

    def put_all(self, other: Mapping[HashableKeyType, list[ValueType]]) -> None:
        self.target_map.update(other)

    def clear(self) -> None:
        self.target_map.clear()

    def __iter__(self) -> Iterator[HashableKeyType]:
        return iter(self.target_map)

    def keys(self) -> KeysView[HashableKeyType]:
        return self.target_map.keys()

    def values(self) -> ValuesView[list[ValueType]]:
        return self.target_map.values()

    def items(self) -> ItemsView[HashableKeyType, list[ValueType]]:
        return self.target_map.items()

    def _new(self, other: Mapping[HashableKeyType, list[ValueType]] | None = None) -> Self:
        return type(self)(other, initial_capacity=self.initial_capacity, target_factory=self.target_factory)

    def deep_copy(self) -> Self:
        """
        Copy of this map with a new list for every key. The values themselves are not copied.
        """
        logger.debug("deep copying %s with %d keys", type(self).__name__, len(self.target_map))
        copy = self._new()
        for key, values in self.target_map.items():
            copy.put(key, list(values))
        return copy

    def clone(self) -> Self:
        """
        Shallow copy of this map, reusing the value lists of this map.
        """
        logger.debug("cloning %s with %d keys", type(self).__name__, len(self.target_map))
        return self._new(self.target_map)

    __copy__ = clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.target_map.items()) == dict(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.target_map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.target_map!r})"


class SortedMultiValueMap(LinkedMultiValueMap[HashableKeyType, ValueType]):
    """
    Multi-value map that iterates its keys in sorted order. Keys must be mutually comparable.
    """

    DEFAULT_TARGET_FACTORY: ClassVar[Callable[[], MutableMapping]] = SortedDict
