"""conftest.py: shared fixtures.

Resolution is faked at the socket level so no test touches real DNS.
"""
import socket
from typing import Dict, Generator
from unittest.mock import MagicMock, patch

import pytest
from loguru import logger

import serveraddress  # noqa: F401

logger.enable("serveraddress")

HOSTS: Dict[str, str] = {
    "localhost": "127.0.0.1",
    "db.example": "10.0.0.9",
    "db-alias.example": "10.0.0.9",
    "web.example": "10.0.0.10",
}


def fake_gethostbyname(host: str) -> str:
    """Stands in for socket.gethostbyname using the HOSTS table."""
    if host in HOSTS:
        return HOSTS[host]
    parts = host.split(".")
    if len(parts) == 4 and all(p.isdigit() for p in parts):
        return host
    raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")


@pytest.fixture(autouse=True)
def mock_resolver() -> Generator[MagicMock, None, None]:
    """Patches socket.gethostbyname for every test."""
    with patch("socket.gethostbyname",
               side_effect=fake_gethostbyname) as mock_lookup:
        yield mock_lookup
