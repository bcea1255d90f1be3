"""Backing stores used by the unordered builders when a custom hasher is selected."""

from collit.containers.hashed import StrategyDict, StrategySet
from collit.containers.strategy import (
    CaseFoldStrategy,
    HashStrategy,
    IdentityStrategy,
    get_strategy,
    list_strategies,
    register_strategy,
)

__all__ = [
    "CaseFoldStrategy",
    "HashStrategy",
    "IdentityStrategy",
    "StrategyDict",
    "StrategySet",
    "get_strategy",
    "list_strategies",
    "register_strategy",
]
