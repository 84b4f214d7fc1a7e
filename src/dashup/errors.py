"""Error definitions for dashup helpers.

Most helpers are total and never raise. The few that can fail raise one of the
errors below, synchronously, at the call site.
"""

# ============================================================================
#                              Base error
# ============================================================================


class DashupError(Exception):
    """Base class for all dashup errors."""


# ============================================================================
#                           Argument errors
# ============================================================================


class ArgumentError(DashupError, ValueError):
    """Raised when a required argument is missing or arguments do not combine."""

    def __init__(self, function: str, reason: str) -> None:
        super().__init__(f"Bad arguments passed to {function}(): {reason}")
        self.function = function
        self.reason = reason


class UnsupportedOperatorError(DashupError, ValueError):
    """Raised when a comparison operator is outside the supported set."""

    def __init__(self, operator: str) -> None:
        super().__init__(f'Operator "{operator}" is not supported.')
        self.operator = operator


class ParseError(DashupError, ValueError):
    """Raised when a value cannot be parsed as JSON."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Value {value!r} is not valid JSON.")
        self.value = value


# ============================================================================
#                       Wiring and configuration errors
# ============================================================================


class NamespaceConflictError(DashupError):
    """Raised when a helper would replace an existing namespace entry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Namespace already defines '{name}'.")
        self.name = name


class InvalidLogLevelError(DashupError, ValueError):
    """Raised when a configured log level name is not a logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid log level: {value}")
        self.value = value
