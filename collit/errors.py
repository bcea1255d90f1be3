"""Exception hierarchy for collection construction.

Option errors are raised while the option bag is resolved, before any entry
is materialized, so a failed build never leaves a partial container behind.
Capability errors of the backing containers (unhashable or incomparable keys)
are not wrapped and propagate as the container raised them.
"""

from typing import Optional


class CollitError(Exception):
    """Base class for all errors raised by collit."""
    pass


class OptionError(CollitError, ValueError):
    """Invalid option bag.

    Attributes:
        name: Name of the offending option, when known.
    """

    def __init__(self, message: str, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.name = name


class UnknownOptionError(OptionError):
    """An option name is not one of the recognized names."""
    pass


class DuplicateOptionError(OptionError):
    """A recognized option name occurs more than once in one bag."""
    pass


class InvalidOptionValueError(OptionError):
    """A recognized option was given a value of the wrong type or range."""
    pass


class OptionSyntaxError(OptionError):
    """A textual option token is not of the form ``name=value``."""
    pass


class EntryShapeError(CollitError, ValueError):
    """An entry does not have the shape its builder expects.

    Raised for map entries that are not key/value pairs and for empty tokens
    in a textual entry list.
    """
    pass
