"""test_resolver.py: tests for resolve_host."""
import socket
from unittest.mock import MagicMock

import pytest

from serveraddress.errors import ResolutionError, ServerAddressError
from serveraddress.resolver import resolve_host


def test_resolves_hostname(mock_resolver: MagicMock) -> None:
    """A known hostname comes back as its numeric address."""
    assert resolve_host("localhost") == "127.0.0.1"
    mock_resolver.assert_called_once_with("localhost")


def test_numeric_host_unchanged(mock_resolver: MagicMock) -> None:
    """Numeric addresses resolve to themselves without a lookup."""
    assert resolve_host("192.168.1.20") == "192.168.1.20"
    assert resolve_host("::1") == "::1"
    assert resolve_host("fe80:0:0:0:0:0:0:0001") == "fe80::1"
    mock_resolver.assert_not_called()


def test_unknown_host_raises() -> None:
    """Resolver failures surface as ResolutionError, chained to the cause."""
    with pytest.raises(ResolutionError) as excinfo:
        resolve_host("nowhere.invalid")

    assert excinfo.value.host == "nowhere.invalid"
    assert isinstance(excinfo.value.__cause__, socket.gaierror)
    # still catchable as the broader categories
    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value, ServerAddressError)


def test_herror_raises(mock_resolver: MagicMock) -> None:
    """socket.herror is reported the same way as gaierror."""
    mock_resolver.side_effect = socket.herror(1, "Unknown host")

    with pytest.raises(ResolutionError):
        resolve_host("weird.example")


def test_invalid_label_raises(mock_resolver: MagicMock) -> None:
    """A hostname the idna codec rejects is a ResolutionError."""
    mock_resolver.side_effect = UnicodeError("label empty or too long")

    with pytest.raises(ResolutionError, match="invalid hostname"):
        resolve_host("a..b")


def test_no_retry(mock_resolver: MagicMock) -> None:
    """A failed lookup is attempted exactly once."""
    with pytest.raises(ResolutionError):
        resolve_host("nowhere.invalid")

    assert mock_resolver.call_count == 1


def test_nul_in_host_raises(mock_resolver: MagicMock) -> None:
    """A host the socket module refuses outright is a ResolutionError."""
    mock_resolver.side_effect = TypeError(
        "gethostbyname() argument 1 must be encoded string without null bytes")

    with pytest.raises(ResolutionError):
        resolve_host("a\x00b")
