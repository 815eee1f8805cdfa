# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Exception hierarchy for review request status.

Every layer wraps the error it received with ``raise ... from err`` so the
entry point can print the full chain.
"""


class ReviewRequestStatusError(Exception):
    """Base class for every error this tool raises."""


class ConfigError(ReviewRequestStatusError):
    """Configuration is missing or invalid."""


class AuthHeaderError(ReviewRequestStatusError):
    """The token cannot be sent in an HTTP header."""


class TransportError(ReviewRequestStatusError):
    """The HTTP exchange with GitHub failed."""


class BodyDecodeError(ReviewRequestStatusError):
    """The response body was not valid JSON."""


class MalformedErrorsField(ReviewRequestStatusError):
    """The top-level ``errors`` field was present but not an array."""


class FetchError(ReviewRequestStatusError):
    """Fetching review requests failed."""


class RenderError(ReviewRequestStatusError):
    """Turning the response into menu lines failed."""


class NavigationError(ReviewRequestStatusError):
    """A path lookup into a response document failed."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class NotFound(NavigationError):
    """Some segment of the path could not be resolved."""

    def __init__(self, path: str):
        super().__init__(path, f'could not get {path}')


class TypeMismatch(NavigationError):
    """The path resolved to a value of the wrong kind."""

    def __init__(self, path: str, expected: str, actual: str):
        super().__init__(path, f'{path} was not {expected} (found {actual})')
        self.expected = expected
        self.actual = actual
