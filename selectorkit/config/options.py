"""
Configuration options classes for selectorkit.

This module provides strongly-typed option classes for the selector builder
and for library logging, with validation and type checking.
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_COMBINATORS,
    DEFAULT_ENABLE_HANDLER,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STRICT_COMBINATORS,
    HANDLER_NAME,
    LOGGER_NAME,
)


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class BuilderOptions(BaseModel):
    """Selector builder options."""

    strict_combinators: bool = Field(
        DEFAULT_STRICT_COMBINATORS,
        description="Reject combinators outside the recognized set",
    )
    combinators: list[str] = Field(
        default_factory=lambda: DEFAULT_COMBINATORS.copy(),
        description="Recognized combinator tokens",
    )

    @field_validator("combinators")
    @classmethod
    def check_combinators(cls, v: list[str]) -> list[str]:
        """Reject empty tokens and drop duplicates, keeping order."""
        if not v:
            raise ValueError("At least one combinator is required")
        seen: list[str] = []
        for token in v:
            if not token:
                raise ValueError("Combinator tokens cannot be empty")
            if token not in seen:
                seen.append(token)
        return seen

    def merge(self, other: "BuilderOptions") -> "BuilderOptions":
        """Merge with another BuilderOptions, other takes precedence."""
        data = self.model_dump(exclude_none=True)
        data.update(other.model_dump(exclude_unset=True))
        return BuilderOptions(**data)


class LoggingOptions(BaseModel):
    """Library logging options."""

    level: LogLevel = Field(LogLevel(DEFAULT_LOG_LEVEL), description="Log level")
    format: str = Field(DEFAULT_LOG_FORMAT, description="Handler format string")
    enable_handler: bool = Field(
        DEFAULT_ENABLE_HANDLER,
        description="Attach a stream handler to the library logger",
    )

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    def apply(self, logger: Optional[logging.Logger] = None) -> logging.Logger:
        """Apply the options to the library logger.

        The stream handler is named, so repeated calls update its format in
        place, and a call with ``enable_handler=False`` removes it again.

        Args:
            logger: Logger to configure, the ``selectorkit`` logger by default.

        Returns:
            The configured logger.
        """
        logger = logger or logging.getLogger(LOGGER_NAME)
        logger.setLevel(self.level.value)

        handler = next(
            (h for h in logger.handlers if h.get_name() == HANDLER_NAME), None
        )
        if not self.enable_handler:
            if handler is not None:
                logger.removeHandler(handler)
            return logger

        if handler is None:
            handler = logging.StreamHandler()
            handler.set_name(HANDLER_NAME)
            logger.addHandler(handler)
        handler.setFormatter(logging.Formatter(self.format))

        return logger

    def merge(self, other: "LoggingOptions") -> "LoggingOptions":
        """Merge with another LoggingOptions, other takes precedence."""
        data = self.model_dump(exclude_none=True)
        data.update(other.model_dump(exclude_unset=True))
        return LoggingOptions(**data)


class SelectorKitConfig(BaseModel):
    """Main configuration class combining all options."""

    builder: BuilderOptions = Field(
        default_factory=BuilderOptions, description="Builder options"
    )
    logging: LoggingOptions = Field(
        default_factory=LoggingOptions, description="Logging options"
    )
    profile: Optional[str] = Field(None, description="Configuration profile name")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectorKitConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def merge(self, other: "SelectorKitConfig") -> "SelectorKitConfig":
        """Merge with another SelectorKitConfig, other takes precedence."""
        return SelectorKitConfig(
            builder=self.builder.merge(other.builder),
            logging=self.logging.merge(other.logging),
            profile=other.profile or self.profile,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(mode="json", exclude_none=True)
