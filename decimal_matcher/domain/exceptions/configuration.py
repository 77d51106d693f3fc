from .base import DomainException


class ConfigurationError(DomainException, ValueError):
    """Raised when a matcher is constructed with unusable parameters."""

    def __init__(self, matcher: str, reason: str):
        self.matcher = matcher

        super().__init__(f"Invalid {matcher} configuration: {reason}")
