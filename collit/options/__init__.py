"""Option bag grammar and the resolved options record."""

from collit.options.grammar import (
    RECOGNIZED_OPTIONS,
    OptionsBuilder,
    iter_option_tokens,
    merge_option_bags,
    parse_option_tokens,
    resolve_options,
)
from collit.options.keymaps import get_key_map, list_key_maps, register_key_map
from collit.options.schema import ANY, DEFAULT_OPTIONS, REGULAR, OptionsRecord

__all__ = [
    "ANY",
    "DEFAULT_OPTIONS",
    "OptionsBuilder",
    "OptionsRecord",
    "RECOGNIZED_OPTIONS",
    "REGULAR",
    "get_key_map",
    "iter_option_tokens",
    "list_key_maps",
    "merge_option_bags",
    "parse_option_tokens",
    "register_key_map",
    "resolve_options",
]
