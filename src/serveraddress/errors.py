"""errors.py: exceptions raised by serveraddress."""


class ServerAddressError(Exception):
    """Base class for every error raised by this package."""


class MalformedInputError(ServerAddressError, ValueError):
    """Raised when a host:port string or a port number can't be parsed."""


class ResolutionError(ServerAddressError, OSError):
    """Raised when a hostname can't be resolved to a numeric address.

    Attributes:
        host: the hostname that failed to resolve.
    """

    def __init__(self, host: str, reason: str = "") -> None:
        self.host = host
        message = f"cannot resolve host {host!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyIdentityError(ServerAddressError, ValueError):
    """Raised when a concrete value is read from an empty ServerAddress."""


class SerializationError(ServerAddressError, IOError):
    """Raised when a record can't be encoded or decoded."""


class TruncatedRecordError(SerializationError):
    """Raised when the stream ends before a full record was read."""
