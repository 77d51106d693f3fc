from .base import DomainException
from .configuration import ConfigurationError

__all__ = [
    "ConfigurationError",
    "DomainException",
]
