"""Error types raised while collecting country ASN statistics."""

from datetime import datetime, timezone


class RipeCountryStatError(Exception):
    """Base class for every error this package raises."""


class RipeStatError(RipeCountryStatError):
    """RIPEstat answered with an error-severity message."""

    def __init__(self, message="no message provided."):
        super().__init__(message)
        self.message = message
        self.date = datetime.now(timezone.utc)


class TransportError(RipeCountryStatError):
    """HTTP failure, non-JSON body or a payload missing expected fields."""


class ResolutionError(RipeCountryStatError):
    """An ASN's organization name could not be resolved."""


class ASNSetParseError(RipeCountryStatError, ValueError):
    """The routed / non_routed text is not a valid ASN set literal."""

    def __init__(self, text, position, reason):
        super().__init__(f"{reason} at position {position}: {text!r}")
        self.text = text
        self.position = position


class ValidationError(RipeCountryStatError, ValueError):
    """A country code is not in the country table."""
