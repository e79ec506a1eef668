"""
Connection options for the ClickHouse SDK.

An ``Options`` value describes one logical connection target: where to
connect, how to authenticate, which protocol to speak and how the pool
should behave. It is built either directly or from a DSN, completed with
:meth:`Options.set_defaults`, and then treated as read-only by the
transport and pool.

Usage::

    from clickhouse_sdk import Options

    opts = Options.from_dsn("clickhouse://ch1:9000/analytics").set_defaults()

    # In a pydantic settings model, DSN strings are parsed on validation
    class AppSettings(BaseModel):
        clickhouse: Options
"""

from __future__ import annotations

import logging
import os
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from .exceptions import DSNError
from .types import Auth, Compression, ConnOpenStrategy, Protocol, Settings, TLSConfig

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "default"
DEFAULT_USERNAME = "default"
DEFAULT_DIAL_TIMEOUT = timedelta(seconds=1)
DEFAULT_MAX_IDLE_CONNS = 5
DEFAULT_CONN_MAX_LIFETIME = timedelta(hours=1)

DSN_ENV_VAR = "CLICKHOUSE_DSN"


@dataclass
class Options:
    """
    Resolved description of a ClickHouse connection target.

    Attributes:
        protocol: Wire protocol (native or HTTP)
        addr: Ordered ``host[:port]`` addresses
        auth: Database and credentials
        compression: Block compression, ``None`` when not requested
        tls: TLS settings, ``None`` for plaintext
        dial_timeout: Connect timeout (default 1 second)
        read_timeout: Read timeout, zero when unset
        max_open_conns: Pool size limit (default ``max_idle_conns + 5``)
        max_idle_conns: Idle connections kept (default 5)
        conn_max_lifetime: Recycle connections older than this (default 1 hour)
        conn_open_strategy: How the pool walks ``addr``
        settings: Server-side session settings
        debug: Emit debug messages through ``debugf``
        debugf: printf-style sink for debug messages; the package logger
            is used when unset
        dial_context: Transport hook that opens a socket to one address
        scheme: DSN scheme the options were parsed from, if any
    """

    protocol: Protocol = Protocol.NATIVE
    addr: list[str] = field(default_factory=list)
    auth: Auth = field(default_factory=Auth)
    compression: Compression | None = None
    tls: TLSConfig | None = None
    dial_timeout: timedelta = field(default_factory=timedelta)
    read_timeout: timedelta = field(default_factory=timedelta)
    max_open_conns: int = 0
    max_idle_conns: int = 0
    conn_max_lifetime: timedelta = field(default_factory=timedelta)
    conn_open_strategy: ConnOpenStrategy = ConnOpenStrategy.IN_ORDER
    settings: Settings = field(default_factory=dict)
    debug: bool = False
    debugf: Callable[..., None] | None = field(default=None, repr=False, compare=False)
    dial_context: Callable[[str], Awaitable[Any]] | None = field(default=None, repr=False, compare=False)
    scheme: str = ""

    @classmethod
    def from_dsn(cls, dsn: str) -> Options:
        """Parse options from a DSN string. See :func:`clickhouse_sdk.dsn.parse_dsn`."""
        from .dsn import parse_dsn

        return parse_dsn(dsn)

    @classmethod
    def from_env(cls, variable: str = DSN_ENV_VAR, environ: Mapping[str, str] | None = None) -> Options:
        """
        Parse options from a DSN held in an environment variable.

        Args:
            variable: Name of the variable to read
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Parsed options, or empty options if the variable is unset or blank
        """
        env = os.environ if environ is None else environ
        dsn = env.get(variable, "").strip()
        if not dsn:
            logger.debug("%s is not set, using empty options", variable)
            return cls()
        return cls.from_dsn(dsn)

    def set_defaults(self) -> Self:
        """
        Fill fields still at their zero value with defaults.

        Only unset fields are written, so calling this more than once is
        harmless. Returns ``self`` for chaining.
        """
        if not self.auth.database:
            self.auth.database = DEFAULT_DATABASE
        if not self.auth.username:
            self.auth.username = DEFAULT_USERNAME
        if not self.dial_timeout:
            self.dial_timeout = DEFAULT_DIAL_TIMEOUT
        if self.max_idle_conns <= 0:
            self.max_idle_conns = DEFAULT_MAX_IDLE_CONNS
        # Depends on max_idle_conns being resolved first
        if self.max_open_conns <= 0:
            self.max_open_conns = self.max_idle_conns + 5
        if not self.conn_max_lifetime:
            self.conn_max_lifetime = DEFAULT_CONN_MAX_LIFETIME
        return self

    def debug_log(self, fmt: str, *args: Any) -> None:
        """Send a debug message to ``debugf`` (or the logger) when ``debug`` is on."""
        if not self.debug:
            return
        if self.debugf is not None:
            self.debugf(fmt, *args)
        else:
            logger.debug(fmt, *args)

    # Pydantic integration

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        """Accept either an ``Options`` instance or a DSN string."""
        return core_schema.no_info_plain_validator_function(cls._validate)

    @classmethod
    def __get_pydantic_json_schema__(cls, _schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        """Options are described in JSON schema as a DSN string."""
        json_schema = handler(core_schema.str_schema())
        json_schema["format"] = "dsn"
        return json_schema

    @classmethod
    def _validate(cls, value: Any) -> Options:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls.from_dsn(value)
            except DSNError as e:
                raise ValueError(e.message) from e
        raise ValueError(f"expected a DSN string or Options, got {type(value).__name__}")


__all__ = [
    "DEFAULT_CONN_MAX_LIFETIME",
    "DEFAULT_DATABASE",
    "DEFAULT_DIAL_TIMEOUT",
    "DEFAULT_MAX_IDLE_CONNS",
    "DEFAULT_USERNAME",
    "DSN_ENV_VAR",
    "Options",
]
