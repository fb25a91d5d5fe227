"""
up_functions.utils.durations

Purpose:
    Duration expressions as templates write them ("1h30m", "-1.5s", "250ms") and the
    matching canonical rendering ("1h30m0s", "1.5s", "250ms").

    A duration is a signed sequence of decimal numbers, each with an optional
    fraction and a unit suffix: ns, us (or µs), ms, s, m, h. A bare "0" is allowed.
    Values are held as integer nanoseconds.
"""

from __future__ import annotations

import re

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_MAX_NS = (1 << 63) - 1

_NUMBER = re.compile(r"(\d*)(?:\.(\d*))?")
_UNIT = re.compile(r"[^\d.]*")


def parse_duration(text: str) -> int:
    """Parse a duration expression into nanoseconds. Raises ValueError."""
    s = text
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return 0
    if not s:
        raise ValueError(f'time: invalid duration "{text}"')

    total = 0
    while s:
        num = _NUMBER.match(s)
        whole, frac = num.group(1), num.group(2) or ""
        if not whole and not frac:
            raise ValueError(f'time: invalid duration "{text}"')
        s = s[num.end():]

        unit_text = _UNIT.match(s).group(0)
        if not unit_text:
            raise ValueError(f'time: missing unit in duration "{text}"')
        if unit_text not in _UNITS:
            raise ValueError(f'time: unknown unit "{unit_text}" in duration "{text}"')
        s = s[len(unit_text):]

        unit = _UNITS[unit_text]
        total += int(whole or "0") * unit
        if frac:
            total += int(frac) * unit // 10 ** len(frac)
        if total > _MAX_NS:
            raise ValueError(f'time: invalid duration "{text}"')

    return -total if negative else total


def _fraction(value: int, unit: int) -> str:
    whole, rem = divmod(value, unit)
    if not rem:
        return str(whole)
    width = len(str(unit)) - 1
    return f"{whole}.{str(rem).rjust(width, '0').rstrip('0')}"


def format_duration(ns: int) -> str:
    """
    Canonical rendering: "72h3m0.5s", "1m30s", "1.5ms", "0s".
    Sub-second values use the largest unit that keeps an integral part.
    """
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    u = abs(ns)

    if u < SECOND:
        if u < MICROSECOND:
            return f"{sign}{u}ns"
        if u < MILLISECOND:
            return f"{sign}{_fraction(u, MICROSECOND)}µs"
        return f"{sign}{_fraction(u, MILLISECOND)}ms"

    out = f"{_fraction(u % MINUTE, SECOND)}s"
    minutes = u // MINUTE
    if minutes:
        out = f"{minutes % 60}m{out}"
        hours = minutes // 60
        if hours:
            out = f"{hours}h{out}"
    return sign + out
