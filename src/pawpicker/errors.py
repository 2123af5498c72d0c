"""Failure taxonomy for the file picker.

The transport raises these; the navigator catches them and turns each one
into the message shown in place of the listing.

  - ConnectivityError: the call never reached the server, or the reply
    could not be parsed.
  - HttpError: the server answered ``browse`` with a non-2xx status.
  - ApplicationError: ``browse`` succeeded but the payload carries ``error``.
  - ReadError: ``read-file`` answered with a non-2xx status.
"""

from __future__ import annotations


class PickerError(Exception):
    """Base class for every file picker failure."""


class ConnectivityError(PickerError):
    """Server unreachable or response unparseable."""


class HttpError(PickerError):
    """Non-success HTTP status from the browse endpoint."""

    def __init__(self, status: int):
        super().__init__(f"HTTP {status}")
        self.status = status


class ApplicationError(PickerError):
    """Semantic failure reported by the server in a 2xx payload."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ReadError(PickerError):
    """The server refused or failed to read a file."""

    def __init__(self, detail: str, status: int | None = None):
        super().__init__(detail)
        self.detail = detail
        self.status = status
