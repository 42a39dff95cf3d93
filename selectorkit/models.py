"""
Core data models for selectorkit.

This module defines the fragment categories of a simple selector, the
combinator tokens that join selectors, and the Fragment value itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class FragmentKind(IntEnum):
    """Fragment categories, valued in the order CSS requires them.

    A simple selector reads:

        element#id.class[attr]:pseudo-class::pseudo-element

    Class, attribute and pseudo-class may occur several times; the others
    at most once.
    """

    TYPE = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def repeatable(self) -> bool:
        return self in (
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
        )

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @property
    def suffix(self) -> str:
        return "]" if self is FragmentKind.ATTRIBUTE else ""

    @property
    def label(self) -> str:
        """Human readable name, as used in CSS prose."""
        return self.name.lower().replace("_", "-").replace("type", "element")


_PREFIXES = {
    FragmentKind.TYPE: "",
    FragmentKind.ID: "#",
    FragmentKind.CLASS: ".",
    FragmentKind.ATTRIBUTE: "[",
    FragmentKind.PSEUDO_CLASS: ":",
    FragmentKind.PSEUDO_ELEMENT: "::",
}


class Combinator(str, Enum):
    """CSS combinators."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class Fragment:
    """One typed piece of a simple selector."""

    kind: FragmentKind
    value: str

    def render(self) -> str:
        """Render with the CSS prefix and suffix for its kind."""
        return f"{self.kind.prefix}{self.value}{self.kind.suffix}"


__all__ = [
    "Combinator",
    "Fragment",
    "FragmentKind",
]
