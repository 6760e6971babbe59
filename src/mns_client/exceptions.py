"""
Module: exceptions.py
Description: Error types raised by the MNS client.

Every failure surfaces to the immediate caller; nothing here is
retried or suppressed. Transport failures raised by httpx
(httpx.TransportError and subclasses) propagate unchanged.
"""

from typing import Optional


class MNSClientError(Exception):
    """Top-level exception for client-side errors."""


class SignatureError(MNSClientError, ValueError):
    """Credentials or resource path cannot be signed."""


class ResponseParseError(MNSClientError):
    """A non-empty response body could not be decoded."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RequestError(MNSClientError):
    """
    The service answered with a status that carries no usable result.

    The message always starts with "{status}:{reason}". When the service
    returned an <Error> document its code, message and request id are
    attached as well.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        request_id: Optional[str] = None
    ):
        self.status_code = status_code
        self.reason = reason
        self.error_code = error_code
        self.error_message = error_message
        self.request_id = request_id

        message = f"{status_code}:{reason}"
        if error_code:
            message += f" ({error_code}: {error_message or ''})"
        super().__init__(message)
