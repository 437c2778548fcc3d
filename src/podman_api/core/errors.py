"""Error types shared by the whole client.

Why a single module:
- The options core only raises `OptsSerializationError`; everything else comes
  from the transport or from parsing daemon responses.
- Callers can catch `PodmanError` to handle any failure of this library.
"""

from __future__ import annotations


class PodmanError(Exception):
    """Base error for everything raised by this library."""


class OptsSerializationError(PodmanError):
    """A JSON request body could not be encoded.

    Builders only accept JSON-representable values, so reaching this means a
    programming defect (for example a non serializable object passed as a
    nested field value).
    """


class InvalidResponseError(PodmanError):
    """The daemon answered with something this client cannot interpret."""


class FaultError(PodmanError):
    """The daemon answered with an HTTP error status."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"error {code} - {message}")
        self.code = code
        self.message = message


class TransportError(PodmanError):
    """The request never produced an HTTP response (connection, timeout...)."""


class UnsupportedSchemeError(PodmanError):
    def __init__(self, scheme: str) -> None:
        super().__init__(f"Provided scheme `{scheme}` is not supported")
        self.scheme = scheme


class MissingAuthorityError(PodmanError):
    def __init__(self) -> None:
        super().__init__("Provided URI is missing authority part after scheme")


class MalformedVersionError(PodmanError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid version - {detail}")


class StreamError(PodmanError):
    """An error record arrived inside a streamed build or pull response."""
