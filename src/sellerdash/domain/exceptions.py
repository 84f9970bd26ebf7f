"""Domain-level exceptions.

Every deliberate failure is a subclass of DomainException so the CLI layer
can catch them uniformly and display user-friendly messages.

Per-record anomalies in the order ledger (missing breakdown entries, missing
book references) are *not* exceptions; they degrade to defaults inside the
aggregator.  Only data-store failures abort a dashboard build.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DataStoreError(DomainException):
    """The backing data store could not be read or returned garbage."""
