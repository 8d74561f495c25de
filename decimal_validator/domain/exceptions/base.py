class DomainException(Exception):
    """Base exception for all domain errors."""

    pass
