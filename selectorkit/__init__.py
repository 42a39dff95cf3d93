"""
selectorkit: Build CSS selectors from discrete, order-checked calls.

Each simple selector follows the CSS order

    element#id.class[attr]:pseudo-class::pseudo-element

where class, attribute and pseudo-class may repeat. Out of order or
duplicated parts raise OrderError or DuplicateError. Selectors are
immutable values, so chains never interfere with each other.

Basic usage:
    from selectorkit import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

Combining:
    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.element("tr").pseudo_class("nth-of-type(even)"),
        ),
    ).stringify()
    # 'div#main + table#data ~ tr:nth-of-type(even)'

Configured builder:
    from selectorkit import SelectorBuilder

    builder = SelectorBuilder.from_config(overrides={
        "builder": {"strict_combinators": False},
    })
"""

__version__ = "0.1.0"
__license__ = "MIT"

from selectorkit.models import (
    Combinator,
    Fragment,
    FragmentKind,
)

from selectorkit.exceptions import (
    ConfigurationError,
    DuplicateError,
    FragmentError,
    InvalidCombinatorError,
    OrderError,
    SelectorError,
)

from selectorkit.selector import (
    CompositeSelector,
    SelectorLike,
    SimpleSelector,
)

from selectorkit.builder import (
    SelectorBuilder,
    css_selector_builder,
)

from selectorkit.config import (
    BuilderOptions,
    LoggingOptions,
    SelectorKitConfig,
    load_config,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Combinator",
    "Fragment",
    "FragmentKind",
    # Errors
    "DuplicateError",
    "FragmentError",
    "InvalidCombinatorError",
    "OrderError",
    "SelectorError",
    "ConfigurationError",
    # Selectors
    "CompositeSelector",
    "SelectorLike",
    "SimpleSelector",
    # Builder
    "SelectorBuilder",
    "css_selector_builder",
    # Config
    "BuilderOptions",
    "LoggingOptions",
    "SelectorKitConfig",
    "load_config",
]
