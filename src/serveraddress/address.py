# address.py

import io
import ipaddress
from functools import total_ordering
from typing import Any, BinaryIO, NamedTuple, Sequence

from loguru import logger

from .errors import (
    EmptyIdentityError,
    MalformedInputError,
    SerializationError,
)
from .resolver import resolve_host
from .wire import read_int, read_utf, write_int, write_utf


class SocketAddress(NamedTuple):
    """A resolved (numeric host, port) pair."""
    host: str
    port: int


@total_ordering
class ServerAddress:
    """
    Identifies a server by its resolved network address.

    A ServerAddress pairs the resolved socket address of a server with a
    label of the form ``"<numeric-ip>:<port>"``. Both are set together, once,
    when the object is built, and never change afterwards. Hostnames are
    resolved at construction time, so "localhost:80" and "127.0.0.1:80" end
    up with the same label and are equal.

    Equality, ordering and hashing only look at the label. Ordering is plain
    string comparison, so "10.0.0.9:80" sorts after "10.0.0.10:80". Sorted
    data persisted elsewhere relies on this order; keep it.

    An empty ServerAddress (no host) is valid. It renders as "" and is
    written to the wire as an empty host with port 0.

    Attributes:
        MIN_PORT (int): lowest accepted port number.
        MAX_PORT (int): highest accepted port number.
    """
    __slots__ = ('_address', '_label')
    MIN_PORT: int = 0
    MAX_PORT: int = 65535


    def __init__(self,
                 host: str | None = None,
                 port: int | None = None,
    ) -> None:
        """Builds a ServerAddress from a hostname and a port.

        With no arguments this builds the empty ServerAddress.

        Args:
            host: hostname or numeric address of the server. It is resolved
                right away.
            port: port number of the server.

        Raises:
            MalformedInputError: if host is empty or contains a NUL, if port
                is missing or out of range, or if port is given without host.
            ResolutionError: if host can't be resolved.
        """
        if host is None:
            if port is not None:
                raise MalformedInputError(f"port {port!r} given without a host")
            self._assign(None)
            return
        if not host:
            raise MalformedInputError("host must not be empty")
        if "\x00" in host:
            raise MalformedInputError(f"host contains a NUL: {host!r}")
        port = self._check_port(port)
        self._assign(SocketAddress(resolve_host(host), port))


    @classmethod
    def parse(cls, host_and_port: str) -> "ServerAddress":
        """Builds a ServerAddress from a ``"host:port"`` string.

        The string is split on its first colon.

        Raises:
            MalformedInputError: if there is no colon or the port isn't an
                unsigned decimal number.
            ResolutionError: if the host can't be resolved.
        """
        host, colon, port_text = host_and_port.partition(':')
        if not colon:
            raise MalformedInputError(
                f"not a host:port pair: {host_and_port!r}")
        if not (port_text.isascii() and port_text.isdigit()):
            raise MalformedInputError(
                f"port is not a number: {host_and_port!r}")
        return cls(host, int(port_text))


    @classmethod
    def from_socket_address(cls, address: Sequence[Any]) -> "ServerAddress":
        """Builds a ServerAddress from an already resolved socket address.

        No resolution happens, so the host must already be a numeric IPv4 or
        IPv6 address; it is stored in its compressed form. ``address`` may be
        a :class:`SocketAddress` or any sockaddr tuple from the socket module;
        only its first two items (host, port) are used.

        Raises:
            MalformedInputError: if the host isn't a numeric address or the
                port is out of range.
        """
        if len(address) < 2:
            raise MalformedInputError(f"not a socket address: {address!r}")
        host, port = address[0], address[1]
        if not isinstance(host, str):
            raise MalformedInputError(f"not a numeric host: {host!r}")
        try:
            ip = ipaddress.ip_address(host)
        except ValueError as exc:
            raise MalformedInputError(f"not a numeric host: {host!r}") from exc
        instance = cls.__new__(cls)
        instance._assign(SocketAddress(str(ip), cls._check_port(port)))
        return instance


    @classmethod
    def from_address(cls, other: "ServerAddress") -> "ServerAddress":
        """Builds an independent copy of another ServerAddress.

        The copy resolves the other address's host again instead of sharing
        its fields. Hosts are numeric by then, so the label comes out the
        same.
        """
        if other.is_empty:
            return cls()
        return cls(other.bind_address, other.port)


    @staticmethod
    def _check_port(port: Any) -> int:
        if isinstance(port, bool) or not isinstance(port, int):
            raise MalformedInputError(f"port is not an integer: {port!r}")
        if not ServerAddress.MIN_PORT <= port <= ServerAddress.MAX_PORT:
            raise MalformedInputError(f"port out of range: {port}")
        return port


    def _assign(self, address: SocketAddress | None) -> None:
        # the label is derived here and nowhere else
        if address is None:
            self._address = None
            self._label = None
        else:
            self._address = address
            self._label = f"{address.host}:{address.port}"


    @property
    def is_empty(self) -> bool:
        """True if this ServerAddress has no host."""
        return self._address is None


    @property
    def bind_address(self) -> str:
        """Numeric host, e.g. ``"10.0.0.1"``."""
        if self._address is None:
            raise EmptyIdentityError("empty ServerAddress has no host")
        return self._address.host


    @property
    def port(self) -> int:
        if self._address is None:
            raise EmptyIdentityError("empty ServerAddress has no port")
        return self._address.port


    @property
    def socket_address(self) -> SocketAddress | None:
        """The resolved (host, port) pair, or None if empty."""
        return self._address


    def write(self, stream: BinaryIO) -> None:
        """Writes this address as a modified-UTF-8 host and an int32 port.

        Args:
            stream: binary stream to write to.

        Raises:
            SerializationError: if the host can't be encoded.
        """
        if self._address is None:
            write_utf(stream, "")
            write_int(stream, 0)
        else:
            write_utf(stream, self._address.host)
            write_int(stream, self._address.port)


    @classmethod
    def read(cls, stream: BinaryIO) -> "ServerAddress":
        """Reads one address written by :meth:`write`.

        A record with an empty host gives the empty ServerAddress, whatever
        its port field says. Otherwise the host is resolved again, exactly as
        the constructor does.

        Args:
            stream: binary stream to read from.

        Returns:
            ServerAddress: a new instance.

        Raises:
            SerializationError: if the record is truncated or malformed.
            ResolutionError: if the decoded host can't be resolved.
        """
        host = read_utf(stream)
        port = read_int(stream)
        if not host:
            return cls()
        logger.debug(f"decoded server address record {host}:{port}")
        try:
            return cls(host, port)
        except MalformedInputError as exc:
            raise SerializationError(f"bad address record: {exc}") from exc


    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()


    @classmethod
    def from_bytes(cls, data: bytes) -> "ServerAddress":
        """Decodes exactly one record from ``data``."""
        buffer = io.BytesIO(data)
        address = cls.read(buffer)
        leftover = len(data) - buffer.tell()
        if leftover:
            raise SerializationError(
                f"{leftover} trailing bytes after address record")
        return address


    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self).from_bytes, (self.to_bytes(),))


    def __copy__(self) -> "ServerAddress":
        return self.from_address(self)


    def __deepcopy__(self, memo: dict[int, Any]) -> "ServerAddress":
        return self.from_address(self)


    def __str__(self) -> str:
        return "" if self._label is None else self._label


    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ServerAddress):
            return NotImplemented
        return str(self) == str(other)


    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ServerAddress):
            return NotImplemented
        return str(self) < str(other)


    def __hash__(self) -> int:
        return hash(self._address) ^ hash(self._label)
