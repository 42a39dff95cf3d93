"""
Default configuration values for selectorkit.
"""

from typing import Any

from selectorkit.models import Combinator

# Builder defaults
DEFAULT_STRICT_COMBINATORS = True
DEFAULT_COMBINATORS: list[str] = list(Combinator.tokens())

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_ENABLE_HANDLER = False
LOGGER_NAME = "selectorkit"
HANDLER_NAME = "selectorkit"

# Environment variable prefix
ENV_PREFIX = "SELECTORKIT_"


def get_default_builder_config() -> dict[str, Any]:
    """Get default builder configuration as a dictionary."""
    return {
        "strict_combinators": DEFAULT_STRICT_COMBINATORS,
        "combinators": DEFAULT_COMBINATORS.copy(),
    }
