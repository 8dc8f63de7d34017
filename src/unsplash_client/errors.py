# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers.

Transport failures are not wrapped: the injected HttpClient's own exceptions (httpx errors
for the default client) reach the caller unchanged. HTTP status codes are never turned into
exceptions here; callers inspect ``HttpResponse.status_code`` themselves.
"""

from enum import Enum


class UnsplashError(Exception):
    """Base class for errors raised by unsplash-client itself."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IllegalArgumentError(UnsplashError, ValueError):
    """A required argument was missing or empty."""


class InvalidOptionError(IllegalArgumentError):
    """Request options failed validation before any request was built."""


class UnsupportedMethodError(UnsplashError, ValueError):
    """The request builder was given an HTTP verb the API client does not issue."""

    def __init__(self, method: object):
        super().__init__(f"Unsupported HTTP method: {method!r}")
        self.method = method


class ResponseReadError(UnsplashError, OSError):
    """The response body could not be read in full."""


class JSONUnmarshallingError(UnsplashError):
    """The response body was not valid JSON or did not match the expected schema."""


class ErrorCategory(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNSUPPORTED_METHOD = "UNSUPPORTED_METHOD"
    IO = "IO"
    DECODE = "DECODE"
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map library, httpx and socket-level exceptions to an ErrorCategory.
    """
    import socket
    import ssl as ssl_module

    import httpx

    if isinstance(exc, IllegalArgumentError):
        return ErrorCategory.INVALID_ARGUMENT

    if isinstance(exc, UnsupportedMethodError):
        return ErrorCategory.UNSUPPORTED_METHOD

    if isinstance(exc, ResponseReadError):
        return ErrorCategory.IO

    if isinstance(exc, JSONUnmarshallingError):
        return ErrorCategory.DECODE

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    # httpx surfaces TLS failures as ConnectError with the ssl error as its cause.
    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)) or isinstance(
        exc.__cause__ or exc.__context__, ssl_module.SSLError
    ):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)) or isinstance(exc.__cause__, socket.gaierror):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR
