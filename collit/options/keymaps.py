"""Named key maps usable from option text (``key_map=upper``)."""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger("collit.options.keymaps")

KeyMap = Callable[[Any], Any]

_KEY_MAPS: Dict[str, KeyMap] = {
    "str": str,
    "int": int,
    "lower": lambda key: key.lower(),
    "upper": lambda key: key.upper(),
    "casefold": lambda key: key.casefold(),
    "strip": lambda key: key.strip(),
}


def register_key_map(name: str, func: KeyMap) -> None:
    """Register a unary function under ``name``."""
    if not callable(func):
        raise TypeError(f"Key map {name!r} must be callable, got {func!r}")
    if name in _KEY_MAPS:
        logger.warning("Overwriting existing key map '%s'", name)
    _KEY_MAPS[name] = func


def get_key_map(name: str) -> KeyMap:
    """Look up a key map by name.

    Raises:
        KeyError: No key map is registered under ``name``.
    """
    return _KEY_MAPS[name]


def list_key_maps() -> List[str]:
    return sorted(_KEY_MAPS)
