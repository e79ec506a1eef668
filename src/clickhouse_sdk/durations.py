"""
Duration strings for connection timeouts.

DSN timeout parameters use the compact ``<number><unit>`` notation, e.g.
``"5s"``, ``"200ms"``, ``"1h30m"`` or ``"1.5h"``. Values are converted to
:class:`datetime.timedelta`, which has microsecond resolution; anything
finer is truncated toward zero.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

# Nanoseconds per unit
_UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

# Durations are bounded by a signed 64-bit nanosecond count
_MAX_NANOSECONDS = 2**63 - 1

_COMPONENT = re.compile(r"(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)")


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration string into a timedelta.

    Args:
        text: Signed sequence of decimal numbers with unit suffixes

    Returns:
        The parsed duration

    Raises:
        ValueError: If the string is empty, a number is malformed, or a
            unit is missing or unknown
    """
    original = text
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {original!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {original!r}")
        whole, frac, unit = match.group("int"), match.group("frac"), match.group("unit")
        if not whole and not frac:
            raise ValueError(f"invalid duration {original!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {original!r}")
        if unit not in _UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {original!r}")
        total += Decimal(f"{whole or '0'}.{frac or '0'}") * _UNITS[unit]
        pos = match.end()

    if total > _MAX_NANOSECONDS:
        raise ValueError(f"invalid duration {original!r}")
    micros = int(total) // 1_000
    return timedelta(microseconds=-micros if negative else micros)


def format_duration(value: timedelta) -> str:
    """Render a timedelta in the same notation ``parse_duration`` accepts."""
    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_trim(Decimal(micros) / 1_000)}ms"

    hours, rest = divmod(micros, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    seconds = _trim(Decimal(rest) / 1_000_000)
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def _trim(number: Decimal) -> str:
    text = f"{number:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


__all__ = ["format_duration", "parse_duration"]
