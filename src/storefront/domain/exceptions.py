"""Domain-level exceptions.

Cart transitions themselves never raise: unknown ids and non-positive
quantities resolve to no-ops or removals.  These exceptions cover the
boundaries around the cart (catalog records, money values) so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value crossing into the domain is invalid."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
