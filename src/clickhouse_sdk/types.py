"""
Value types for ClickHouse connection options.

Enumerations for the wire protocol, compression codec and connection-open
strategy, plus the small records an ``Options`` value is assembled from.
"""

from __future__ import annotations

import ssl
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import Any

# Server-side settings: booleans are sent as 0/1 integers
SettingValue = int | str
Settings = dict[str, SettingValue]


class Protocol(StrEnum):
    """Wire protocol used to talk to the server."""

    NATIVE = "native"
    HTTP = "http"

    @classmethod
    def describe(cls, value: Any) -> str:
        """Display name for ``value``, or ``""`` if it is not a protocol."""
        try:
            return str(cls(value))
        except ValueError:
            return ""


class CompressionMethod(IntEnum):
    """
    Block compression codec.

    Values are the codec bytes of the native protocol. GZIP has no native
    codec and uses a private sentinel, so transports must special-case it.
    """

    NONE = 0x02
    LZ4 = 0x82
    ZSTD = 0x90
    GZIP = 0x99

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def describe(cls, value: Any) -> str:
        """Display name for ``value``, or ``""`` if it is not a known codec."""
        try:
            return str(cls(value))
        except ValueError:
            return ""


class ConnOpenStrategy(IntEnum):
    """Order in which the pool walks the configured addresses."""

    IN_ORDER = 0
    ROUND_ROBIN = 1

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def describe(cls, value: Any) -> str:
        """Display name for ``value``, or ``""`` if it is not a strategy."""
        try:
            return str(cls(value))
        except ValueError:
            return ""

    @classmethod
    def from_name(cls, name: str) -> ConnOpenStrategy | None:
        """Look up a strategy by its DSN name (``in_order``/``round_robin``)."""
        for member in cls:
            if str(member) == name:
                return member
        return None


@dataclass
class Auth:
    """
    Credentials for a connection.

    Attributes:
        database: Database selected after connecting
        username: Login name
        password: Login password (never shown in repr)
    """

    # TODO: reject or escape control characters in username/password before
    # they reach the handshake.
    database: str = ""
    username: str = ""
    password: str = field(default="", repr=False)


@dataclass
class Compression:
    """Compression requested for data blocks."""

    method: CompressionMethod = CompressionMethod.NONE


@dataclass(frozen=True)
class TLSConfig:
    """
    TLS settings handed to the transport.

    Attributes:
        skip_verify: Disable certificate and hostname verification
    """

    skip_verify: bool = False

    def ssl_context(self) -> ssl.SSLContext:
        """Build an SSL context matching this configuration."""
        context = ssl.create_default_context()
        if self.skip_verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context


__all__ = [
    "Auth",
    "Compression",
    "CompressionMethod",
    "ConnOpenStrategy",
    "Protocol",
    "SettingValue",
    "Settings",
    "TLSConfig",
]
