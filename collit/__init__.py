"""Build populated collections from inline entry lists.

    >>> from collit import hashmap, btreeset
    >>> hashmap((1, "one"), (2, "two"), hasher="any", capacity=4)[2]
    'two'
    >>> list(btreeset(3, 1, 2))
    [1, 2, 3]
"""

from collit.builders import (
    BUILDERS,
    btreemap,
    btreeset,
    build_ordered_map,
    build_ordered_set,
    build_unordered_map,
    build_unordered_set,
    convert_args,
    hashmap,
    hashset,
    resolve_capacity,
)
from collit.containers import (
    CaseFoldStrategy,
    HashStrategy,
    IdentityStrategy,
    StrategyDict,
    StrategySet,
    register_strategy,
)
from collit.entries import count_entries, normalize_entries, split_separated
from collit.errors import (
    CollitError,
    DuplicateOptionError,
    EntryShapeError,
    InvalidOptionValueError,
    OptionError,
    OptionSyntaxError,
    UnknownOptionError,
)
from collit.literal import build_from_text, parse_literal
from collit.options import (
    OptionsBuilder,
    OptionsRecord,
    register_key_map,
    resolve_options,
)

__version__ = "0.1.0"

__all__ = [
    "BUILDERS",
    "CaseFoldStrategy",
    "CollitError",
    "DuplicateOptionError",
    "EntryShapeError",
    "HashStrategy",
    "IdentityStrategy",
    "InvalidOptionValueError",
    "OptionError",
    "OptionSyntaxError",
    "OptionsBuilder",
    "OptionsRecord",
    "StrategyDict",
    "StrategySet",
    "UnknownOptionError",
    "btreemap",
    "btreeset",
    "build_from_text",
    "build_ordered_map",
    "build_ordered_set",
    "build_unordered_map",
    "build_unordered_set",
    "convert_args",
    "count_entries",
    "hashmap",
    "hashset",
    "normalize_entries",
    "parse_literal",
    "register_key_map",
    "register_strategy",
    "resolve_capacity",
    "resolve_options",
]
