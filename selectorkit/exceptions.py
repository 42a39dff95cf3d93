"""
Exception types for selectorkit.

All builder errors derive from SelectorError so callers can catch the
whole family at once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from selectorkit.models import FragmentKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base class for selector construction errors."""

    pass


class FragmentError(SelectorError):
    """A fragment could not be appended to a simple selector.

    Attributes:
        kind: Category of the rejected fragment.
        value: Literal value that was being appended.
        stage: Highest category already present, or None.
    """

    def __init__(
        self,
        message: str,
        kind: FragmentKind,
        value: str,
        stage: Optional[FragmentKind] = None,
    ):
        self.kind = kind
        self.value = value
        self.stage = stage
        super().__init__(message)


class OrderError(FragmentError):
    """A fragment category was appended out of the mandated sequence."""

    def __init__(
        self, kind: FragmentKind, value: str, stage: Optional[FragmentKind] = None
    ):
        super().__init__(ORDER_MESSAGE, kind, value, stage)


class DuplicateError(FragmentError):
    """Element, id or pseudo-element was appended a second time."""

    def __init__(
        self, kind: FragmentKind, value: str, stage: Optional[FragmentKind] = None
    ):
        super().__init__(DUPLICATE_MESSAGE, kind, value, stage)


class InvalidCombinatorError(SelectorError):
    """combine() received a token outside the recognized combinators."""

    def __init__(self, combinator: str, allowed: tuple[str, ...] = ()):
        self.combinator = combinator
        self.allowed = allowed
        choices = ", ".join(repr(c) for c in allowed)
        message = f"Unknown combinator: {combinator!r}"
        if choices:
            message += f". Expected one of: {choices}"
        super().__init__(message)


class ConfigurationError(SelectorError):
    """A configuration file, variable or profile could not be used."""

    pass


__all__ = [
    "ConfigurationError",
    "DUPLICATE_MESSAGE",
    "DuplicateError",
    "FragmentError",
    "InvalidCombinatorError",
    "ORDER_MESSAGE",
    "OrderError",
    "SelectorError",
]
