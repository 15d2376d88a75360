"""Exception hierarchy for dotpager.

Exception Hierarchy:
    DotpagerError (base)
    ├── ConfigurationError - invalid indicator configuration
    └── ObserverNotRegisteredError - unregistering an unknown page observer

The indicator itself never raises for bad selections or stale subscriptions;
these exceptions surface at the configuration boundary and from page sources.

Usage:
    from dotpager.exceptions import ConfigurationError

    raise ConfigurationError("max_visible is too small", max_visible=3)
"""

from typing import Any


class DotpagerError(Exception):
    """Base exception for all dotpager errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., offending values)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(DotpagerError):
    """Indicator configuration is invalid."""

    pass


class ObserverNotRegisteredError(DotpagerError):
    """Raised when removing an observer a page source does not know about."""

    pass
