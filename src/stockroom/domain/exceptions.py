"""Domain-level exceptions.

All store failures are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each class carries an ``ErrorKind`` for callers that prefer to branch on a
value rather than on the class hierarchy.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "validation"
    INVALID_QUANTITY = "invalid_quantity"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    IO = "io"
    DECODE = "decode"
    ENCODE = "encode"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.VALIDATION


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A quantity would become negative."""

    kind = ErrorKind.INVALID_QUANTITY


class DuplicateKeyError(DomainException):
    """A record with the same id is already stored."""

    kind = ErrorKind.DUPLICATE_KEY


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class PersistenceError(DomainException):
    """Saving to or loading from a sink failed.

    Never raised by PersistentLog.save/load themselves; carried inside a
    PersistenceResult instead.
    """

    kind = ErrorKind.IO


class SinkIOError(PersistenceError):
    """The sink could not be read or written."""


class DecodeError(PersistenceError):
    """The sink content is malformed or does not match the record shape."""

    kind = ErrorKind.DECODE


class EncodeError(PersistenceError):
    """A record could not be encoded."""

    kind = ErrorKind.ENCODE
