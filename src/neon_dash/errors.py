class NeonDashError(Exception):
    """Base exception for the Neon Dash project."""


class ConfigError(NeonDashError):
    """Raised when tuning values are invalid or a config file cannot be read."""


class PersistenceError(NeonDashError):
    """Raised when the high score store fails to read or write."""


class InvariantViolation(NeonDashError):
    """Raised when an internal structural invariant is broken (e.g., obstacle size)."""
