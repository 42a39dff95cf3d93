"""
Selector builder facade for selectorkit.

The builder starts chains and joins finished selectors. It holds options
only, never an in-progress selector, so one instance can be shared freely.

Example:
    >>> builder = SelectorBuilder()
    >>> builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    'a[href$=".png"]:focus'
    >>> builder.combine(
    ...     builder.element("div").id("main"),
    ...     "+",
    ...     builder.element("table").id("data"),
    ... ).stringify()
    'div#main + table#data'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

from selectorkit.config import BuilderOptions, load_config
from selectorkit.exceptions import InvalidCombinatorError
from selectorkit.selector import CompositeSelector, SelectorLike, SimpleSelector

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Entry point for building CSS selectors."""

    def __init__(self, options: Optional[BuilderOptions] = None):
        self.options = options or BuilderOptions()

    @classmethod
    def from_config(
        cls,
        config_file: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
        load_env: bool = True,
        profile: Optional[str] = None,
    ) -> SelectorBuilder:
        """Create a builder from a profile, file, environment and overrides.

        Logging options in the loaded configuration are applied to the
        library logger as a side effect.
        """
        config = load_config(
            config_file, overrides=overrides, load_env=load_env, profile=profile
        )
        config.logging.apply()
        return cls(config.builder)

    @property
    def combinators(self) -> tuple[str, ...]:
        """Recognized combinator tokens."""
        return tuple(self.options.combinators)

    def element(self, tag: str) -> SimpleSelector:
        return SimpleSelector().element(tag)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: SelectorLike, combinator: str, right: SelectorLike
    ) -> CompositeSelector:
        """Join two selectors with a combinator.

        Args:
            left: Selector on the left, simple or composite.
            combinator: One of the recognized tokens (' ', '+', '~', '>'
                by default).
            right: Selector on the right, simple or composite.

        Returns:
            Composite selector rendering as ``left combinator right``.

        Raises:
            InvalidCombinatorError: If the token is not recognized and the
                builder is strict.
            TypeError: If an operand is not a selector.
        """
        if combinator not in self.options.combinators:
            lenient = isinstance(combinator, str) and combinator.strip()
            if self.options.strict_combinators or not lenient:
                logger.debug(f"Rejected combinator {combinator!r}")
                raise InvalidCombinatorError(combinator, self.combinators)
            logger.warning(f"Passing through unknown combinator {combinator!r}")

        return CompositeSelector.join(left, combinator, right)

    @staticmethod
    def stringify(selector: SelectorLike) -> str:
        """Render a selector; same as ``selector.stringify()``."""
        return selector.stringify()

    def __repr__(self) -> str:
        return (
            f"SelectorBuilder(strict_combinators={self.options.strict_combinators}, "
            f"combinators={self.combinators!r})"
        )


css_selector_builder = SelectorBuilder()


__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
]
