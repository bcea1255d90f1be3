"""Options record for the unordered builders, using Pydantic for validation.

``OptionsRecord`` is the canonical, resolved form of an option bag. Field
defaults are the "unset" state: no capacity override, the regular hasher,
and no key transform.
"""

from typing import Any, Callable, Hashable, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from collit.containers.strategy import HashStrategy, IdentityStrategy, get_strategy
from collit.options.keymaps import get_key_map, list_key_maps

REGULAR = "regular"
ANY = "any"

HasherSpec = Union[str, Type[HashStrategy]]


class OptionsRecord(BaseModel):
    """Resolved construction options.

    Attributes:
        capacity: Pre-allocation hint; None or 0 means "use the entry count".
        hasher: ``"regular"`` for the builtin hash containers, or the
            HashStrategy subclass backing a custom-hasher container.
            ``"any"`` and registered strategy names are accepted on input.
        key_map: Unary function applied to every key (or set element)
            before insertion; None is the identity.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    capacity: Optional[int] = Field(default=None, ge=0)
    hasher: HasherSpec = REGULAR
    key_map: Optional[Callable[[Any], Any]] = None

    @field_validator("capacity", mode="before")
    @classmethod
    def validate_capacity(cls, v: Any) -> Any:
        """Reject booleans, which pydantic would otherwise accept as 0/1."""
        if isinstance(v, bool):
            raise ValueError("capacity must be an integer, not a bool")
        return v

    @field_validator("hasher", mode="before")
    @classmethod
    def validate_hasher(cls, v: Any) -> Any:
        """Normalize a hasher tag into ``"regular"`` or a strategy class."""
        if isinstance(v, type) and issubclass(v, HashStrategy):
            return v
        if isinstance(v, HashStrategy):
            return type(v)
        if isinstance(v, str):
            if v == REGULAR:
                return REGULAR
            if v == ANY:
                return IdentityStrategy
            try:
                return get_strategy(v)
            except KeyError:
                raise ValueError(
                    f"Unknown hasher '{v}'. Valid hashers: '{REGULAR}', '{ANY}' "
                    "or a registered strategy name"
                ) from None
        raise ValueError(f"hasher must be a tag or a HashStrategy subclass, got {v!r}")

    @field_validator("key_map", mode="before")
    @classmethod
    def validate_key_map(cls, v: Any) -> Any:
        """Resolve a registered key map name into its function."""
        if isinstance(v, str):
            try:
                return get_key_map(v)
            except KeyError:
                raise ValueError(
                    f"Unknown key_map '{v}'. Registered key maps: {list_key_maps()}"
                ) from None
        if v is not None and not callable(v):
            raise ValueError(f"key_map must be callable, got {v!r}")
        return v

    @property
    def is_custom_hasher(self) -> bool:
        return self.hasher != REGULAR

    def make_strategy(self) -> Optional[HashStrategy]:
        """Default-construct the selected strategy, or None for the regular hasher."""
        if not self.is_custom_hasher:
            return None
        return self.hasher()

    def apply_key(self, key: Hashable) -> Hashable:
        if self.key_map is None:
            return key
        return self.key_map(key)


DEFAULT_OPTIONS = OptionsRecord()
