class DomainException(Exception):
    """Base exception for the matcher domain."""

    pass
