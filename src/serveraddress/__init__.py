"""Canonical, comparable and serializable server addresses.

.. include:: ../../README.md
"""
from loguru import logger

from .address import ServerAddress, SocketAddress
from .errors import (
    EmptyIdentityError,
    MalformedInputError,
    ResolutionError,
    SerializationError,
    ServerAddressError,
    TruncatedRecordError,
)

logger.disable("serveraddress")

__all__=[
    'EmptyIdentityError',
    'MalformedInputError',
    'ResolutionError',
    'SerializationError',
    'ServerAddress',
    'ServerAddressError',
    'SocketAddress',
    'TruncatedRecordError',
]
