"""Error taxonomy for store uploads.

Every failure of an upload surfaces as exactly one of these, all deriving from
StoreClientError so callers can catch the whole family at once.
"""


class StoreClientError(Exception):
    """Base class for all store client failures."""
    pass


class ConfigurationError(StoreClientError):
    """Raised when the endpoint or a composed request URI is not a valid URI.

    Always raised before any network activity.
    """
    pass


class TransportError(StoreClientError):
    """Raised when the HTTP exchange fails below the status line (connect, DNS, TLS, timeout, I/O)."""

    def __init__(self, uri: str, cause: Exception):
        self.uri = uri
        self.cause = cause
        super().__init__(f"Transport failure talking to {uri}: {cause!r}")


class StatusError(StoreClientError):
    """Raised when the store answers with anything other than 200 OK."""

    def __init__(self, status_code: int, uri: str):
        self.status_code = status_code
        self.uri = uri
        super().__init__(f"Store at {uri} responded with status {status_code}")


class DecodeError(StoreClientError):
    """Raised when the store's response body is not a valid UTF-8 identifier."""

    def __init__(self, uri: str, cause: UnicodeDecodeError):
        self.uri = uri
        self.cause = cause
        super().__init__(f"Store at {uri} returned an identifier that is not valid UTF-8: {cause}")
