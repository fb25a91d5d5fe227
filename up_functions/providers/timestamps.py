"""
up_functions.providers.timestamps

Purpose:
    Wall-clock reads, timestamp formatting/parsing and duration arithmetic.

Layouts:
    Templates name a layout either by its constant name ("RFC3339") or by its
    reference rendering ("2006-01-02T15:04:05Z07:00"), the reference instant being
    Mon Jan 2 15:04:05 MST 2006. Only the layouts in LAYOUTS are recognized.

Notes:
    - Parsed values without zone information are taken as UTC.
    - A parsed zone abbreviation belonging to the local zone takes the local offset;
      any other abbreviation is kept by name with offset zero, so it renders back
      unchanged. Numeric offsets matching the local zone take its name.
    - Kitchen and TimeOnly carry no date and parse onto 1900-01-01; year 0 is not
      representable.
    - Sub-microsecond precision is not kept.
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo

from up_functions.contracts.enums import TypeTag
from up_functions.contracts.protocol import OperationResult
from up_functions.contracts.values import Params
from up_functions.dispatch import OperationTable
from up_functions.errors import InvalidParameter, MissingParameter
from up_functions.params import get_string, require_string
from up_functions.utils.durations import format_duration, parse_duration

# Extra directives understood by TimeLayout on top of strftime:
#   %~d  day of month, space padded ("_2")
#   %~I  hour on a 12-hour clock, unpadded ("3")
#   %~f  fractional seconds with trailing zeros trimmed, "" when whole (".999999999")
#   %~Z  "Z" for UTC, otherwise +hh:mm ("Z07:00")
#   %~N  zone abbreviation, numeric offset when the zone has none ("MST")
_RFC3339 = re.compile(r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(\.\d+)?(Z|[+-]\d{2}:\d{2})")
_NUMERIC_ZONE = re.compile(r"([+-])(\d{2})(\d{2})?")
_ZONE_ABBR = re.compile(r"[A-Z][A-Za-z]{2,4}")


def _zone_rfc3339(dt: datetime) -> str:
    offset = dt.utcoffset()
    if not offset:
        return "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hh, mm = divmod(abs(minutes), 60)
    return f"{sign}{hh:02d}:{mm:02d}"


def _zone_name(dt: datetime) -> str:
    name = dt.tzname() or ""
    if not name or (name.startswith("UTC") and name != "UTC"):
        return dt.strftime("%z")
    return name


def _fraction(dt: datetime) -> str:
    if not dt.microsecond:
        return ""
    return "." + f"{dt.microsecond:06d}".rstrip("0")


def _as_local(dt: datetime) -> datetime:
    """Numeric offsets that match the local zone at that instant take the local zone's name."""
    try:
        local = dt.astimezone()
    except (OverflowError, ValueError):
        return dt
    return local if local.utcoffset() == dt.utcoffset() else dt


def _zone_for(abbr: str, naive: datetime) -> tzinfo:
    if abbr == "UTC":
        return timezone.utc
    numeric = _NUMERIC_ZONE.fullmatch(abbr)
    if numeric:
        sign, hh, mm = numeric.groups()
        offset = timedelta(hours=int(hh), minutes=int(mm or 0))
        return _as_local(naive.replace(tzinfo=timezone(-offset if sign == "-" else offset))).tzinfo
    if not _ZONE_ABBR.fullmatch(abbr):
        raise ValueError(f"unknown time zone {abbr!r}")

    try:
        local = naive.astimezone()
    except (OverflowError, ValueError):
        local = None
    if local is not None and local.tzname() == abbr:
        return local.tzinfo
    if abbr in time.tzname:
        # The local zone's other abbreviation (EDT in winter, EST in summer).
        seconds = -time.altzone if time.daylight and abbr == time.tzname[1] else -time.timezone
        return timezone(timedelta(seconds=seconds), abbr)
    # Unknown abbreviation: keep the name, assume offset zero.
    return timezone(timedelta(0), abbr)


def _parse_rfc3339(text: str) -> datetime:
    m = _RFC3339.fullmatch(text)
    if not m:
        raise ValueError(f"{text!r} is not an RFC3339 timestamp")
    date, clock, frac, zone = m.groups()
    micro = ((frac or ".")[1:] + "000000")[:6]
    if zone == "Z":
        return datetime.fromisoformat(f"{date}T{clock}.{micro}+00:00")
    return _as_local(datetime.fromisoformat(f"{date}T{clock}.{micro}{zone}"))


@dataclass(frozen=True)
class TimeLayout:
    name: str
    reference: str
    render_format: str

    def render(self, dt: datetime) -> str:
        fmt = (
            self.render_format.replace("%~d", f"{dt.day:>2}")
            .replace("%~I", str(dt.hour % 12 or 12))
            .replace("%~f", _fraction(dt))
            .replace("%~Z", _zone_rfc3339(dt))
            .replace("%~N", _zone_name(dt).replace("%", "%%"))
        )
        return dt.strftime(fmt)

    def parse(self, text: str) -> datetime:
        if "%~Z" in self.render_format:
            return _parse_rfc3339(text)
        fmt = self.render_format.replace("%~d", "%d").replace("%~I", "%I")
        if "%~N" not in fmt:
            dt = datetime.strptime(text, fmt)
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            elif dt.utcoffset():
                dt = _as_local(dt)
            return dt

        # The zone abbreviation is its own whitespace-separated field.
        fields, words = fmt.split(), text.split()
        if len(fields) != len(words):
            raise ValueError(f"time data {text!r} does not match layout {self.reference!r}")
        i = fields.index("%~N")
        abbr = words.pop(i)
        del fields[i]
        naive = datetime.strptime(" ".join(words), " ".join(fields))
        return naive.replace(tzinfo=_zone_for(abbr, naive))


LAYOUTS = (
    TimeLayout("RFC3339", "2006-01-02T15:04:05Z07:00", "%Y-%m-%dT%H:%M:%S%~Z"),
    TimeLayout("RFC3339Nano", "2006-01-02T15:04:05.999999999Z07:00", "%Y-%m-%dT%H:%M:%S%~f%~Z"),
    TimeLayout("RFC1123", "Mon, 02 Jan 2006 15:04:05 MST", "%a, %d %b %Y %H:%M:%S %~N"),
    TimeLayout("RFC1123Z", "Mon, 02 Jan 2006 15:04:05 -0700", "%a, %d %b %Y %H:%M:%S %z"),
    TimeLayout("RFC822", "02 Jan 06 15:04 MST", "%d %b %y %H:%M %~N"),
    TimeLayout("RFC822Z", "02 Jan 06 15:04 -0700", "%d %b %y %H:%M %z"),
    TimeLayout("RFC850", "Monday, 02-Jan-06 15:04:05 MST", "%A, %d-%b-%y %H:%M:%S %~N"),
    TimeLayout("ANSIC", "Mon Jan _2 15:04:05 2006", "%a %b %~d %H:%M:%S %Y"),
    TimeLayout("UnixDate", "Mon Jan _2 15:04:05 MST 2006", "%a %b %~d %H:%M:%S %~N %Y"),
    TimeLayout("Kitchen", "3:04PM", "%~I:%M%p"),
    TimeLayout("DateTime", "2006-01-02 15:04:05", "%Y-%m-%d %H:%M:%S"),
    TimeLayout("DateOnly", "2006-01-02", "%Y-%m-%d"),
    TimeLayout("TimeOnly", "15:04:05", "%H:%M:%S"),
)

_BY_KEY = {key: layout for layout in LAYOUTS for key in (layout.name, layout.reference)}

RFC3339 = _BY_KEY["RFC3339"]


def resolve_layout(key: str) -> TimeLayout:
    layout = _BY_KEY.get(key)
    if layout is None:
        raise InvalidParameter(f"unsupported time layout: {key}")
    return layout


def _layout_param(params: Params, key: str) -> TimeLayout:
    return resolve_layout(get_string(params, key, RFC3339.name))


def _parse(layout: TimeLayout, text: str) -> datetime:
    try:
        return layout.parse(text)
    except ValueError as e:
        raise InvalidParameter(f"failed to parse time: {e}") from e


def _now() -> datetime:
    return datetime.now().astimezone()


def _ts(dt: datetime) -> OperationResult:
    return OperationResult(value=RFC3339.render(dt), type=TypeTag.TS)


def _duration_param(params: Params) -> timedelta:
    text = get_string(params, "duration", "")
    if not text:
        raise MissingParameter("duration parameter required")
    try:
        ns = parse_duration(text)
    except ValueError as e:
        raise InvalidParameter(f"failed to parse duration: {e}") from e
    micro = abs(ns) // 1000
    return timedelta(microseconds=-micro if ns < 0 else micro)


def _shift(params: Params, sign: int) -> OperationResult:
    delta = _duration_param(params)
    text = get_string(params, "time", "")
    t = _parse(RFC3339, text) if text else _now()
    try:
        return _ts(t + sign * delta)
    except OverflowError as e:
        raise InvalidParameter(f"time out of range: {e}") from e


def _elapsed_ns(delta: timedelta) -> int:
    return (delta // timedelta(microseconds=1)) * 1000


def now(params: Params, context: Params) -> OperationResult:
    layout = _layout_param(params, "format")
    return OperationResult(value=layout.render(_now()), type=TypeTag.TS)


def unix(params: Params, context: Params) -> OperationResult:
    return OperationResult(value=int(time.time()), type=TypeTag.INT)


def format_time(params: Params, context: Params) -> OperationResult:
    text = require_string(params, "time")
    output = _layout_param(params, "format")
    source = _layout_param(params, "input_format")
    return OperationResult(value=output.render(_parse(source, text)), type=TypeTag.STRING)


def parse_time(params: Params, context: Params) -> OperationResult:
    text = require_string(params, "time")
    layout = _layout_param(params, "format")
    return _ts(_parse(layout, text))


def add(params: Params, context: Params) -> OperationResult:
    return _shift(params, 1)


def sub(params: Params, context: Params) -> OperationResult:
    return _shift(params, -1)


def since(params: Params, context: Params) -> OperationResult:
    t = _parse(RFC3339, require_string(params, "time"))
    return OperationResult(value=format_duration(_elapsed_ns(_now() - t)), type=TypeTag.DUR)


def until(params: Params, context: Params) -> OperationResult:
    t = _parse(RFC3339, require_string(params, "time"))
    return OperationResult(value=format_duration(_elapsed_ns(t - _now())), type=TypeTag.DUR)


OPERATIONS: OperationTable = {
    "now": now,
    "unix": unix,
    "format": format_time,
    "parse": parse_time,
    "add": add,
    "sub": sub,
    "since": since,
    "until": until,
}
