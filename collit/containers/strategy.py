"""Hash strategies for the custom-hasher backing stores.

A strategy maps every key to a normalized form; two keys are the same key
when their normalized forms are equal, and the normalized form is what gets
hashed. Strategies are constructed with no arguments.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Hashable, List, Type

logger = logging.getLogger("collit.containers.strategy")


class HashStrategy(ABC):
    """Base class for key hashing/equality strategies."""

    name: str = ""

    @abstractmethod
    def normalize(self, key: Hashable) -> Hashable:
        """Return the form of ``key`` used for hashing and equality."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IdentityStrategy(HashStrategy):
    """Keys hash and compare as themselves."""

    name = "identity"

    def normalize(self, key: Hashable) -> Hashable:
        return key


class CaseFoldStrategy(HashStrategy):
    """Case-insensitive string keys; other keys are left alone."""

    name = "casefold"

    def normalize(self, key: Hashable) -> Hashable:
        if isinstance(key, str):
            return key.casefold()
        return key


_STRATEGIES: Dict[str, Type[HashStrategy]] = {
    IdentityStrategy.name: IdentityStrategy,
    CaseFoldStrategy.name: CaseFoldStrategy,
}


def register_strategy(name: str, strategy_class: Type[HashStrategy]) -> None:
    """Register a strategy class under a name usable from option text.

    Args:
        name: Name used as ``hasher=<name>``.
        strategy_class: HashStrategy subclass, constructible without arguments.
    """
    if not (isinstance(strategy_class, type) and issubclass(strategy_class, HashStrategy)):
        raise TypeError(f"{strategy_class!r} is not a HashStrategy subclass")
    if name in _STRATEGIES:
        logger.warning(
            "Overwriting existing hash strategy '%s': %s -> %s",
            name,
            _STRATEGIES[name].__name__,
            strategy_class.__name__,
        )
    _STRATEGIES[name] = strategy_class
    logger.debug("Registered hash strategy '%s': %s", name, strategy_class.__name__)


def get_strategy(name: str) -> Type[HashStrategy]:
    """Look up a registered strategy class.

    Raises:
        KeyError: No strategy is registered under ``name``.
    """
    return _STRATEGIES[name]


def list_strategies() -> List[str]:
    return sorted(_STRATEGIES)
