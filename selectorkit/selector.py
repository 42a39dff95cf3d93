"""
Selector values for selectorkit.

Each call on a selector returns a new value, so a chain never shares state
with another chain:

    base = SimpleSelector().element("div")
    base.class_("a").stringify()   # 'div.a'
    base.class_("b").stringify()   # 'div.b'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from selectorkit.exceptions import DuplicateError, OrderError
from selectorkit.models import Fragment, FragmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimpleSelector:
    """A compound selector such as ``div#id.class[attr]:hover::before``.

    Fragments are kept in the order they were appended, which is always the
    CSS order since out of order appends are rejected.
    """

    fragments: tuple[Fragment, ...] = ()

    @property
    def stage(self) -> Optional[FragmentKind]:
        """Highest fragment category present, or None when empty."""
        if not self.fragments:
            return None
        return self.fragments[-1].kind

    def has(self, kind: FragmentKind) -> bool:
        """Check whether a fragment of the given kind is present."""
        return any(fragment.kind is kind for fragment in self.fragments)

    def values(self, kind: FragmentKind) -> list[str]:
        """Get the values of every fragment of the given kind."""
        return [f.value for f in self.fragments if f.kind is kind]

    def append(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Return a new selector with one more fragment.

        Args:
            kind: Fragment category.
            value: Literal text, inserted verbatim.

        Returns:
            New SimpleSelector; this one is left untouched.

        Raises:
            ValueError: If value is empty.
            DuplicateError: If a non-repeatable kind is already present.
            OrderError: If a later category is already present.
        """
        if not isinstance(value, str) or not value:
            raise ValueError(f"{kind.label} value cannot be empty")

        stage = self.stage
        if not kind.repeatable and self.has(kind):
            logger.debug(f"Rejected duplicate {kind.label} {value!r}")
            raise DuplicateError(kind, value, stage)
        if stage is not None and stage > kind:
            logger.debug(
                f"Rejected {kind.label} {value!r} after {stage.label}"
            )
            raise OrderError(kind, value, stage)

        return SimpleSelector(self.fragments + (Fragment(kind, value),))

    def element(self, tag: str) -> SimpleSelector:
        return self.append(FragmentKind.TYPE, tag)

    def id(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Concatenate the prefixed fragments."""
        return "".join(fragment.render() for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CompositeSelector:
    """Simple selectors joined by combinators.

    ``combinators[i]`` sits between ``segments[i]`` and ``segments[i + 1]``.
    """

    segments: tuple[SimpleSelector, ...]
    combinators: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.segments) < 2:
            raise ValueError("A composite selector needs at least two segments")
        if len(self.combinators) != len(self.segments) - 1:
            raise ValueError(
                f"Expected {len(self.segments) - 1} combinators, "
                f"got {len(self.combinators)}"
            )

    @classmethod
    def join(
        cls, left: SelectorLike, combinator: str, right: SelectorLike
    ) -> CompositeSelector:
        """Join two selectors, flattening composites on either side.

        Flattening renders the same as nesting since the join is a plain
        concatenation.
        """
        left_segments, left_combinators = _unpack(left)
        right_segments, right_combinators = _unpack(right)
        return cls(
            segments=left_segments + right_segments,
            combinators=left_combinators + (combinator,) + right_combinators,
        )

    def stringify(self) -> str:
        """Render as ``segment combinator segment ...``, one space each side."""
        parts = [self.segments[0].stringify()]
        for combinator, segment in zip(self.combinators, self.segments[1:]):
            parts.append(combinator)
            parts.append(segment.stringify())
        return " ".join(parts)

    def __str__(self) -> str:
        return self.stringify()


SelectorLike = Union[SimpleSelector, CompositeSelector]


def _unpack(
    selector: SelectorLike,
) -> tuple[tuple[SimpleSelector, ...], tuple[str, ...]]:
    if isinstance(selector, CompositeSelector):
        return selector.segments, selector.combinators
    if isinstance(selector, SimpleSelector):
        return (selector,), ()
    raise TypeError(
        f"Expected a selector, got {type(selector).__name__}"
    )


__all__ = [
    "CompositeSelector",
    "SelectorLike",
    "SimpleSelector",
]
