"""
errors.py: Exceptions raised by the game core and its collaborators.
"""


class FlappyGatorError(Exception):
    """Base class for recoverable or configuration errors."""


class ConfigurationError(FlappyGatorError):
    """Canvas dimensions that leave no room to place a pipe gap."""


class TransientServiceError(FlappyGatorError):
    """The score service failed or timed out. Callers fall back to cached data."""


class InvalidTransition(FlappyGatorError):
    def __init__(self, current, action: str):
        self.current = current
        self.action = action
        super().__init__(f"Action '{action}' is not valid in state {current.value}")


class InvariantViolation(AssertionError):
    """Malformed entity or pipe data reached the core. Always a programmer error."""
