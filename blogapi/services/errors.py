"""Errors raised by the blog use cases."""
from __future__ import annotations


class BlogError(Exception):
    code = "error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(BlogError):
    """A caller-supplied value is missing, empty or out of range."""

    code = "invalid_input"
    status_code = 400


class InvalidStateError(BlogError):
    """The stored records do not allow the requested operation."""

    code = "invalid_state"
    status_code = 409


class NotFoundError(InvalidStateError):
    """A referenced record does not exist."""

    code = "not_found"
    status_code = 404
