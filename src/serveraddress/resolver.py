"""resolver.py: hostname resolution for ServerAddress.

Every ServerAddress constructor (and the decoder) resolves through
:func:`resolve_host`, so this is the one place to swap in a caching or
asynchronous resolver later.
"""
import ipaddress
import socket

from loguru import logger

from .errors import ResolutionError


def resolve_host(host: str) -> str:
    """Resolves a hostname to a numeric address string.

    Numeric IPv4 and IPv6 addresses are returned in their compressed form
    without asking the system resolver. Anything else is looked up with
    ``socket.gethostbyname`` (IPv4). The lookup blocks until the system
    resolver answers. There is no caching, retry or timeout here; those
    belong to the caller.

    Args:
        host: hostname or numeric address.

    Returns:
        str: the numeric address, e.g. ``"127.0.0.1"``.

    Raises:
        ResolutionError: if the system resolver can't answer for ``host``.
    """
    try:
        return str(ipaddress.ip_address(host))
    except ValueError:
        pass
    try:
        ip = socket.gethostbyname(host)
    except (socket.gaierror, socket.herror) as exc:
        raise ResolutionError(host, str(exc)) from exc
    except UnicodeError as exc:
        # the idna codec rejects labels that are empty or too long
        raise ResolutionError(host, "invalid hostname") from exc
    except (TypeError, ValueError) as exc:
        # embedded NUL
        raise ResolutionError(host, str(exc)) from exc
    logger.debug(f"resolved {host} to {ip}")
    return ip
