"""
ClickHouse SDK Exceptions.

Custom exception hierarchy for the SDK.
"""

import re

_PASSWORD_RE = re.compile(r"(?<=://)([^/@:]*):[^/@]*@")


def mask_dsn(dsn: str) -> str:
    """Replace the password part of a DSN's user-info with ``***``."""
    return _PASSWORD_RE.sub(r"\1:***@", dsn, count=1)


class ClickHouseError(Exception):
    """Base exception for all ClickHouse SDK errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class DSNError(ClickHouseError):
    """Raised when a connection string cannot be turned into options."""

    def __init__(self, message: str, dsn: str | None = None, code: int | None = None):
        self.dsn = mask_dsn(dsn) if isinstance(dsn, str) else None
        super().__init__(message, code)


class MalformedDSNError(DSNError):
    """Raised when the DSN is not a valid URL or a duration parameter is invalid."""

    def __init__(
        self,
        message: str,
        dsn: str | None = None,
        param: str | None = None,
        code: int | None = None,
    ):
        self.param = param
        super().__init__(message, dsn, code)


class SchemeTLSConflictError(DSNError):
    """Raised when an ``http://`` DSN also asks for TLS via ``secure``."""

    pass


class SchemeTLSMissingError(DSNError):
    """Raised when an ``https://`` DSN does not ask for TLS via ``secure``."""

    pass
