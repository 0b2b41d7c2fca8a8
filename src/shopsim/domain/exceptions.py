"""Domain-level exceptions.

Only invariant violations are raised as exceptions.  Expected outcomes
such as an unknown product id or a full cart are returned as ``Result``
values (see ``shopsim.domain.model.result``) so callers branch on them.
The controller catches ``DomainException`` uniformly and reports it.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""
