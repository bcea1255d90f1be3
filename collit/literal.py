"""Textual collection literals.

A literal is an optional bracketed option prefix followed by an entry list:

    [capacity=4, hasher=any] a => 1, b => 2,

Map entries are ``key => value``; set entries are bare tokens. Tokens stay
strings unless ``literal=True``, in which case each one is read with
``ast.literal_eval`` (Python literals only, never expressions).
"""

from __future__ import annotations

import ast
import logging
from typing import Any, List, Tuple

from collit.builders import BUILDERS
from collit.entries import EntryKind, split_separated
from collit.errors import EntryShapeError, OptionError
from collit.options import parse_option_tokens

logger = logging.getLogger("collit.literal")

MAP_ARROW = "=>"


def _split_option_prefix(text: str) -> Tuple[str, str]:
    body = text.strip()
    if not body.startswith("["):
        return "", body
    depth = 0
    for i, ch in enumerate(body):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return body[1:i], body[i + 1:]
    raise EntryShapeError(f"Unterminated option prefix in {text!r}")


def _read_token(token: str, literal: bool) -> Any:
    if not literal:
        return token
    try:
        return ast.literal_eval(token)
    except (ValueError, SyntaxError) as exc:
        raise EntryShapeError(f"Token {token!r} is not a Python literal") from exc


def parse_literal(
    text: str, kind: EntryKind, literal: bool = False
) -> Tuple[List[Any], List[Tuple[str, str]]]:
    """Parse a textual literal into entries and option tokens.

    Args:
        text: Literal text.
        kind: "map" or "set".
        literal: Read tokens as Python literals instead of strings.

    Returns:
        ``(entries, option_tokens)``; map entries are ``(key, value)`` tuples.

    Raises:
        EntryShapeError: Malformed entry list or map entry.
        OptionSyntaxError: Malformed option prefix.
    """
    option_text, entry_text = _split_option_prefix(text)
    option_tokens = parse_option_tokens(option_text) if option_text.strip() else []

    entries: List[Any] = []
    for token in split_separated(entry_text):
        if kind == "set":
            entries.append(_read_token(token, literal))
            continue
        key, arrow, value = token.partition(MAP_ARROW)
        if not arrow or not key.strip() or not value.strip():
            raise EntryShapeError(f"Map entry {token!r} must be of the form key => value")
        entries.append((_read_token(key.strip(), literal), _read_token(value.strip(), literal)))

    logger.debug("Parsed %d entries and %d option token(s)", len(entries), len(option_tokens))
    return entries, option_tokens


def build_from_text(text: str, builder_name: str, literal: bool = False) -> Any:
    """Build a container from a textual literal.

    Args:
        text: Literal text, e.g. ``"[hasher=any] a => 1, b => 2"``.
        builder_name: One of ``hashmap``, ``hashset``, ``btreemap``, ``btreeset``.
        literal: Read tokens as Python literals.

    Raises:
        KeyError: Unknown builder name.
        OptionError: The option prefix is invalid, or options were given to
            an ordered builder.
        EntryShapeError: The entry list is malformed.
    """
    builder = BUILDERS[builder_name]
    entries, option_tokens = parse_literal(text, builder.entry_kind, literal=literal)
    if builder_name.startswith("btree"):
        if option_tokens:
            raise OptionError(
                f"{builder_name} takes no options, got {[name for name, _ in option_tokens]}",
                name=option_tokens[0][0],
            )
        return builder(entries)
    return builder(entries, option_tokens)
