"""Container builders.

Four builders produce a populated container from an entry list:

    build_unordered_map / hashmap    -> dict, or StrategyDict for a custom hasher
    build_unordered_set / hashset    -> set, or StrategySet for a custom hasher
    build_ordered_map   / btreemap   -> sortedcontainers.SortedDict
    build_ordered_set   / btreeset   -> sortedcontainers.SortedSet

The unordered builders take an option bag (capacity, hasher, key_map). The
bag is resolved before the entries are materialized, so an invalid bag fails
the build without consuming a single entry.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Set, Union

from sortedcontainers import SortedDict, SortedSet

from collit.containers import StrategyDict, StrategySet
from collit.entries import EntryKind, count_entries, normalize_entries
from collit.options import OptionsRecord, merge_option_bags, resolve_options
from collit.options.grammar import OptionBag

logger = logging.getLogger("collit.builders")

UnorderedMap = Union[Dict[Any, Any], StrategyDict]
UnorderedSet = Union[Set[Any], StrategySet]


def entry_kind(kind: EntryKind) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Tag a builder with the kind of entries it takes."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func.entry_kind = kind  # type: ignore[attr-defined]
        return func

    return decorator


def resolve_capacity(options: OptionsRecord, count: int) -> int:
    """Return the capacity hint: the explicit capacity if nonzero, else ``count``."""
    if options.capacity:
        if options.capacity < count:
            logger.warning(
                "Capacity hint %d is smaller than the %d entries being inserted",
                options.capacity,
                count,
            )
        return options.capacity
    return count


@entry_kind("map")
def build_unordered_map(entries: Iterable[Any], options: OptionBag = None) -> UnorderedMap:
    """Build a hash map from key/value pairs.

    Args:
        entries: Iterable of ``(key, value)`` pairs, or a Mapping.
        options: Option bag; see ``collit.options.resolve_options``.

    Returns:
        A dict for the regular hasher, a StrategyDict otherwise. Later
        entries overwrite earlier ones with the same (transformed) key.

    Raises:
        OptionError: The option bag is invalid. No entry has been consumed.
        EntryShapeError: An entry is not a key/value pair.
    """
    record = resolve_options(options)
    items = normalize_entries(entries, "map")
    capacity = resolve_capacity(record, count_entries(items))

    strategy = record.make_strategy()
    result: UnorderedMap
    if strategy is None:
        result = {}
    else:
        result = StrategyDict(strategy, capacity=capacity)

    for key, value in items:
        result[record.apply_key(key)] = value

    logger.debug(
        "Built hash map: %d entries, %d keys, capacity hint %d, hasher %s",
        len(items),
        len(result),
        capacity,
        strategy or "regular",
    )
    return result


@entry_kind("set")
def build_unordered_set(entries: Iterable[Any], options: OptionBag = None) -> UnorderedSet:
    """Build a hash set; ``key_map`` applies to every element.

    Raises:
        OptionError: The option bag is invalid. No entry has been consumed.
    """
    record = resolve_options(options)
    items = normalize_entries(entries, "set")
    capacity = resolve_capacity(record, count_entries(items))

    strategy = record.make_strategy()
    result: UnorderedSet
    if strategy is None:
        result = set()
    else:
        result = StrategySet(strategy, capacity=capacity)

    for element in items:
        result.add(record.apply_key(element))

    logger.debug(
        "Built hash set: %d entries, %d elements, capacity hint %d, hasher %s",
        len(items),
        len(result),
        capacity,
        strategy or "regular",
    )
    return result


@entry_kind("map")
def build_ordered_map(entries: Iterable[Any]) -> SortedDict:
    """Build a map iterated in ascending key order.

    Incomparable keys surface the TypeError raised by the comparison.
    """
    result = SortedDict()
    for key, value in normalize_entries(entries, "map"):
        result[key] = value
    return result


@entry_kind("set")
def build_ordered_set(entries: Iterable[Any]) -> SortedSet:
    """Build a set iterated in ascending element order."""
    result = SortedSet()
    for element in normalize_entries(entries, "set"):
        result.add(element)
    return result


# Literal-style front ends: entries are positional arguments.


@entry_kind("map")
def hashmap(*entries: Any, options: OptionBag = None, **named_options: Any) -> UnorderedMap:
    """Build a hash map from positional ``(key, value)`` pairs.

    Example:
        >>> names = hashmap((1, "one"), (2, "two"), capacity=8)
        >>> names[1]
        'one'
    """
    return build_unordered_map(entries, merge_option_bags(options, named_options))


@entry_kind("set")
def hashset(*elements: Any, options: OptionBag = None, **named_options: Any) -> UnorderedSet:
    """Build a hash set from positional elements."""
    return build_unordered_set(elements, merge_option_bags(options, named_options))


@entry_kind("map")
def btreemap(*entries: Any) -> SortedDict:
    return build_ordered_map(entries)


@entry_kind("set")
def btreeset(*elements: Any) -> SortedSet:
    return build_ordered_set(elements)


BUILDERS: Dict[str, Callable[..., Any]] = {
    "hashmap": build_unordered_map,
    "hashset": build_unordered_set,
    "btreemap": build_ordered_map,
    "btreeset": build_ordered_set,
}


def _identity(value: Any) -> Any:
    return value


def convert_args(
    builder: Callable[..., Any],
    keys: Optional[Callable[[Any], Any]] = None,
    values: Optional[Callable[[Any], Any]] = None,
) -> Callable[..., Any]:
    """Wrap a builder so every key and value is converted before insertion.

    ``keys`` applies to map keys and to set elements; ``values`` applies to
    map values and is rejected for set builders. Conversion happens while
    entries are read, ahead of ``key_map``.

    Example:
        >>> build = convert_args(hashset, keys=str)
        >>> sorted(build(1, 2))
        ['1', '2']
    """
    kind = getattr(builder, "entry_kind", None)
    if kind is None:
        raise TypeError(f"{builder!r} is not a collit builder")
    if kind == "set" and values is not None:
        raise TypeError("values conversion only applies to map builders")

    convert_key = keys or _identity
    convert_value = values or _identity
    # A wrapped literal builder hands over its base and its own conversion,
    # applied after this one, so nesting composes lazily.
    base = _LITERAL_BASES.get(builder) or getattr(builder, "_literal_base", None)
    inner_convert = getattr(builder, "_literal_convert", None)

    def convert_own(entries: Iterable[Any]) -> Iterator[Any]:
        if kind == "set":
            for element in entries:
                yield convert_key(element)
        else:
            for key, value in normalize_entries(entries, "map"):
                yield convert_key(key), convert_value(value)

    def convert(entries: Iterable[Any]) -> Iterator[Any]:
        converted = convert_own(entries)
        if inner_convert is not None:
            return inner_convert(converted)
        return converted

    @functools.wraps(builder)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if base is None:
            entries, *rest = args
            return builder(convert(entries), *rest, **kwargs)
        if base in (build_ordered_map, build_ordered_set):
            return base(convert(args), **kwargs)
        options = kwargs.pop("options", None)
        return base(convert(args), merge_option_bags(options, kwargs))

    wrapper._literal_base = base  # type: ignore[attr-defined]
    wrapper._literal_convert = convert if base is not None else None  # type: ignore[attr-defined]
    return wrapper


_LITERAL_BASES: Dict[Callable[..., Any], Callable[..., Any]] = {
    hashmap: build_unordered_map,
    hashset: build_unordered_set,
    btreemap: build_ordered_map,
    btreeset: build_ordered_set,
}
