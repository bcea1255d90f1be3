"""Entry list normalization and arity counting.

Entries are materialized exactly once. Counting works on the materialized
tuple, so it never touches the entries themselves and an entry expression
with side effects (e.g. a generator yielding computed pairs) runs once.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Literal, Sequence, Tuple

from collit.errors import EntryShapeError

logger = logging.getLogger("collit.entries")

EntryKind = Literal["map", "set"]

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_QUOTES = ("'", '"')


def normalize_entries(entries: Iterable[Any], kind: EntryKind) -> Tuple[Any, ...]:
    """Materialize an entry list into a tuple.

    Args:
        entries: Iterable of entries. For maps this may also be a Mapping,
            whose items are taken in iteration order.
        kind: "map" for key/value pairs, "set" for bare elements.

    Returns:
        Tuple of entries; map entries are ``(key, value)`` tuples.

    Raises:
        EntryShapeError: A map entry is not a two-item pair.
    """
    if entries is None:
        return ()
    if kind == "map" and isinstance(entries, Mapping):
        return tuple(entries.items())
    if isinstance(entries, (str, bytes)):
        raise EntryShapeError(
            f"Entry list must be an iterable of entries, not {type(entries).__name__}"
        )

    items = tuple(entries)
    if kind == "set":
        return items

    pairs = []
    for index, entry in enumerate(items):
        if isinstance(entry, (tuple, list)) and len(entry) == 2:
            pairs.append((entry[0], entry[1]))
            continue
        raise EntryShapeError(
            f"Map entry #{index} must be a (key, value) pair, got {entry!r}"
        )
    return tuple(pairs)


def count_entries(entries: Sequence[Any]) -> int:
    """Return the number of entries without looking at any of them."""
    return len(entries)


def split_separated(text: str, sep: str = ",") -> List[str]:
    """Split a textual entry list on top-level separators.

    Separators nested inside brackets or quoted strings are kept. A single
    trailing separator is dropped first, so ``"a, b,"`` and ``"a, b"`` give
    the same tokens. Surrounding whitespace is stripped from every token.

    Args:
        text: Entry list text.
        sep: Single-character separator.

    Returns:
        List of tokens; empty for blank text.

    Raises:
        EntryShapeError: Empty token between two separators, or unbalanced
            brackets or quotes.
    """
    body = text.strip()
    if body.endswith(sep):
        body = body[: -len(sep)].rstrip()
    if not body:
        return []

    tokens: List[str] = []
    closers: List[str] = []
    quote = ""
    start = 0
    i = 0
    while i < len(body):
        ch = body[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in _QUOTES:
            quote = ch
        elif ch in _OPENERS:
            closers.append(_OPENERS[ch])
        elif closers and ch == closers[-1]:
            closers.pop()
        elif ch in _OPENERS.values():
            raise EntryShapeError(f"Unbalanced '{ch}' at offset {i} in {text!r}")
        elif ch == sep and not closers:
            tokens.append(body[start:i].strip())
            start = i + 1
        i += 1

    if quote or closers:
        raise EntryShapeError(f"Unterminated quote or bracket in {text!r}")
    tokens.append(body[start:].strip())

    for index, token in enumerate(tokens):
        if not token:
            raise EntryShapeError(f"Empty entry #{index} in {text!r}")
    logger.debug("Split %d token(s) from %r", len(tokens), text)
    return tokens
