"""Option bag resolution.

An option bag is an unordered collection of ``name=value`` tokens. Resolving
it folds the tokens, in whatever order they come, into one OptionsRecord:

1. Start from the defaults (no capacity, regular hasher, no key map).
2. Take the next token. A recognized name seen for the first time is
   recorded; a recognized name seen before is a DuplicateOptionError; any
   other name is an UnknownOptionError.
3. When the bag is empty, validate the recorded values into the record.

Any permutation of the same tokens yields the same record. Repeating a name
is an error no matter which values are involved; no occurrence wins.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from collit.entries import split_separated
from collit.errors import (
    DuplicateOptionError,
    EntryShapeError,
    InvalidOptionValueError,
    OptionSyntaxError,
    UnknownOptionError,
)
from collit.options.schema import OptionsRecord

logger = logging.getLogger("collit.options.grammar")

RECOGNIZED_OPTIONS: Tuple[str, ...] = ("capacity", "hasher", "key_map")

OptionToken = Tuple[str, Any]
OptionBag = Union[
    None, str, Mapping, Iterable[OptionToken], OptionsRecord, "OptionsBuilder"
]


def parse_option_tokens(text: str) -> List[Tuple[str, str]]:
    """Tokenize option text such as ``"[capacity=10, hasher=any,]"``.

    Surrounding brackets are optional and a trailing separator is allowed.
    Values are returned as stripped strings; coercion happens when the
    record is validated.

    Raises:
        OptionSyntaxError: A token is not of the form ``name=value``.
    """
    body = text.strip()
    if body.startswith("[") and body.endswith("]"):
        body = body[1:-1]

    try:
        raw_tokens = split_separated(body)
    except EntryShapeError as exc:
        raise OptionSyntaxError(f"Malformed option list {text!r}: {exc}") from exc

    tokens = []
    for raw in raw_tokens:
        name, eq, value = raw.partition("=")
        name = name.strip()
        if not eq or not name:
            raise OptionSyntaxError(
                f"Option {raw!r} must be of the form name=value", name=name or None
            )
        tokens.append((name, value.strip()))
    return tokens


def iter_option_tokens(bag: OptionBag) -> List[OptionToken]:
    """Flatten any supported bag form into a list of ``(name, value)`` tokens.

    Args:
        bag: None, option text, a Mapping, an iterable of pairs, an
            OptionsRecord (its explicitly set fields) or an OptionsBuilder.

    Raises:
        OptionSyntaxError: A pair in an iterable bag is not a 2-tuple with
            a string name.
    """
    if bag is None:
        return []
    if isinstance(bag, str):
        return list(parse_option_tokens(bag))
    if isinstance(bag, OptionsRecord):
        return [(name, getattr(bag, name)) for name in RECOGNIZED_OPTIONS
                if name in bag.model_fields_set]
    if isinstance(bag, OptionsBuilder):
        return bag.tokens()
    if isinstance(bag, Mapping):
        return list(bag.items())

    tokens = []
    for token in bag:
        if not (isinstance(token, tuple) and len(token) == 2 and isinstance(token[0], str)):
            raise OptionSyntaxError(f"Option token must be a (name, value) pair, got {token!r}")
        tokens.append(token)
    return tokens


def merge_option_bags(*bags: OptionBag) -> List[OptionToken]:
    """Concatenate several bags into one token list.

    Duplicates across bags are kept so that resolving the result reports
    them.
    """
    merged: List[OptionToken] = []
    for bag in bags:
        merged.extend(iter_option_tokens(bag))
    return merged


def resolve_options(bag: OptionBag = None) -> OptionsRecord:
    """Resolve an option bag into an OptionsRecord.

    Args:
        bag: Any form accepted by ``iter_option_tokens``. An OptionsRecord
            is returned unchanged.

    Returns:
        OptionsRecord with the bag's values over the defaults.

    Raises:
        UnknownOptionError: A name is not one of RECOGNIZED_OPTIONS.
        DuplicateOptionError: A recognized name occurs more than once.
        InvalidOptionValueError: A value fails validation.
        OptionSyntaxError: The bag text or a token is malformed.
    """
    if isinstance(bag, OptionsRecord):
        return bag

    resolved: Dict[str, Any] = {}
    for name, value in iter_option_tokens(bag):
        if name not in RECOGNIZED_OPTIONS:
            raise UnknownOptionError(
                f"Unknown option '{name}'. Valid options: {', '.join(RECOGNIZED_OPTIONS)}",
                name=name,
            )
        if name in resolved:
            raise DuplicateOptionError(
                f"Option '{name}' given more than once", name=name
            )
        resolved[name] = value

    try:
        record = OptionsRecord(**resolved)
    except ValidationError as exc:
        errors = exc.errors()
        field_name: Optional[str] = None
        if errors and errors[0].get("loc"):
            field_name = str(errors[0]["loc"][0])
        detail = errors[0]["msg"] if errors else str(exc)
        raise InvalidOptionValueError(
            f"Invalid value for option '{field_name}': {detail}", name=field_name
        ) from exc

    logger.debug("Resolved options %s", sorted(resolved))
    return record


class OptionsBuilder:
    """Fluent option bag with one method per option name.

    Each method may be called once per builder; a second call raises
    DuplicateOptionError immediately.

    Example:
        >>> record = OptionsBuilder().hasher("any").capacity(10).build()
        >>> record.capacity
        10
    """

    def __init__(self) -> None:
        self._tokens: List[OptionToken] = []

    def _add(self, name: str, value: Any) -> "OptionsBuilder":
        if any(existing == name for existing, _ in self._tokens):
            raise DuplicateOptionError(f"Option '{name}' already set", name=name)
        self._tokens.append((name, value))
        return self

    def capacity(self, value: int) -> "OptionsBuilder":
        return self._add("capacity", value)

    def hasher(self, value: Any) -> "OptionsBuilder":
        return self._add("hasher", value)

    def key_map(self, func: Any) -> "OptionsBuilder":
        return self._add("key_map", func)

    def tokens(self) -> List[OptionToken]:
        return list(self._tokens)

    def build(self) -> OptionsRecord:
        return resolve_options(self._tokens)
