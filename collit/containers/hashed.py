"""Hash containers keyed through a HashStrategy.

Storage is keyed by the normalized key only:

- StrategyDict: ``_data`` = {normalized key: (original key, value)}
- StrategySet: ``_index`` = {normalized key: original element}

The normalized key decides identity, even for keys that compare equal in
Python but normalize differently; the original key is what iteration
yields. Both containers keep a capacity hint that never drops below their
length.
"""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSet
from typing import Any, Dict, Generic, Hashable, Iterable, Iterator, Optional, Tuple, TypeVar

from collit.containers.strategy import HashStrategy, IdentityStrategy

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class StrategyDict(MutableMapping[K, V], Generic[K, V]):
    """Mapping whose key equality is defined by a HashStrategy.

    Writing a key that normalizes like an existing one replaces the value
    and the stored original key, so the last write wins in both respects.

    Example:
        >>> d = StrategyDict(CaseFoldStrategy())
        >>> d["PATH"] = "a"
        >>> d["Path"] = "b"
        >>> list(d.items())
        [('Path', 'b')]
    """

    def __init__(
        self,
        strategy: Optional[HashStrategy] = None,
        capacity: int = 0,
        items: Iterable[Tuple[K, V]] = (),
    ) -> None:
        self.strategy = strategy if strategy is not None else IdentityStrategy()
        self._capacity = max(capacity, 0)
        self._data: Dict[Hashable, Tuple[K, V]] = {}
        for key, value in items:
            self[key] = value

    @property
    def capacity(self) -> int:
        return max(self._capacity, len(self._data))

    def __setitem__(self, key: K, value: V) -> None:
        norm_key = self.strategy.normalize(key)
        self._data[norm_key] = (key, value)

    def __getitem__(self, key: K) -> V:
        return self._data[self.strategy.normalize(key)][1]

    def __delitem__(self, key: K) -> None:
        del self._data[self.strategy.normalize(key)]

    def __iter__(self) -> Iterator[K]:
        return (orig_key for orig_key, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return self.strategy.normalize(key) in self._data

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.values())
        return f"{type(self).__name__}({{{inner}}}, strategy={self.strategy!r})"


class StrategySet(MutableSet[K], Generic[K]):
    """Set whose element equality is defined by a HashStrategy.

    Adding an element equal to a stored one is a no-op; the first stored
    form is kept.
    """

    def __init__(
        self,
        strategy: Optional[HashStrategy] = None,
        capacity: int = 0,
        elements: Iterable[K] = (),
    ) -> None:
        self.strategy = strategy if strategy is not None else IdentityStrategy()
        self._capacity = max(capacity, 0)
        self._index: Dict[Hashable, K] = {}
        for element in elements:
            self.add(element)

    def _from_iterable(self, it: Iterable[K]) -> "StrategySet[K]":
        return type(self)(self.strategy, elements=it)

    @property
    def capacity(self) -> int:
        return max(self._capacity, len(self._index))

    def add(self, value: K) -> None:
        self._index.setdefault(self.strategy.normalize(value), value)

    def discard(self, value: K) -> None:
        self._index.pop(self.strategy.normalize(value), None)

    def __contains__(self, value: Any) -> bool:
        return self.strategy.normalize(value) in self._index

    def __iter__(self) -> Iterator[K]:
        return iter(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        inner = ", ".join(repr(v) for v in self._index.values())
        return f"{type(self).__name__}({{{inner}}}, strategy={self.strategy!r})"
