"""
ClickHouse SDK - connection options for ClickHouse clients.

Resolves where and how to connect from either a DSN string or directly
built options, and fills in defaults before a transport takes over.

Supports:
- Native and HTTP(S) protocol selection from the DSN scheme
- Multi-host addresses with in-order or round-robin open strategies
- LZ4/ZSTD/GZIP compression selection
- TLS with optional verification skipping
- Arbitrary server-side settings forwarded from DSN query parameters
"""

from .dsn import coerce_setting, parse_bool, parse_dsn
from .durations import format_duration, parse_duration
from .exceptions import (
    ClickHouseError,
    DSNError,
    MalformedDSNError,
    SchemeTLSConflictError,
    SchemeTLSMissingError,
)
from .options import Options
from .types import (
    Auth,
    Compression,
    CompressionMethod,
    ConnOpenStrategy,
    Protocol,
    SettingValue,
    Settings,
    TLSConfig,
)

__version__ = "0.1.0"
__all__ = [
    # Options
    "Options",
    "parse_dsn",
    # Value types
    "Auth",
    "Compression",
    "CompressionMethod",
    "ConnOpenStrategy",
    "Protocol",
    "SettingValue",
    "Settings",
    "TLSConfig",
    # Parsing helpers
    "coerce_setting",
    "format_duration",
    "parse_bool",
    "parse_duration",
    # Exceptions
    "ClickHouseError",
    "DSNError",
    "MalformedDSNError",
    "SchemeTLSConflictError",
    "SchemeTLSMissingError",
]
