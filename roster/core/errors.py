# roster/core/errors.py
"""
Domain errors raised by the roster services.

Routers translate these into HTTP responses; each class carries the
status code it maps to so the translation stays in one place.
"""


class RosterError(Exception):
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidRecordError(RosterError):
    """Missing or empty name, id mismatch, malformed body"""
    status_code = 400


class NotFoundError(RosterError):
    status_code = 404


class ConflictError(RosterError):
    """A student with the same key already exists"""
    status_code = 409


class ConsistencyError(RosterError):
    """Broken relationship chain or a mapping called with mismatched keys.

    Never caused by client input; it signals a bug or corrupted data.
    """
    status_code = 500
