"""Clock arithmetic on RTC readings and lookup in ``name=value`` settings text."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .cstring import ascii_to_int

SECONDS_IN_YEAR = 31536000
SECONDS_IN_LEAP_YEAR = 31622400
SECONDS_IN_DAY = 86400
SECONDS_IN_HOUR = 3600
SECONDS_IN_MINUTE = 60
START_YEAR = 1970
CENTURY = 2000

SECONDS_BEFORE_MONTH = (
    0,
    2678400,
    5097600,
    7776000,
    10368000,
    13046400,
    15638400,
    18316800,
    20995200,
    23587200,
    26265600,
    28857600,
)


@dataclass(frozen=True)
class RtcTime:
    """A clock reading; ``year`` counts from 2000."""

    second: int = 0
    minute: int = 0
    hour: int = 0
    day: int = 1
    month: int = 1
    year: int = 0


def is_leap_year(year: int) -> bool:
    """Tell whether ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")


def time_calc_unix(when: RtcTime) -> int:
    """Return the seconds since 1970 that ``when`` stands for.

    In a leap year a whole extra year of seconds is counted, as the clock code does.
    """
    _check_month(when.month)
    year = when.year + CENTURY
    total = sum(
        SECONDS_IN_LEAP_YEAR if is_leap_year(y) else SECONDS_IN_YEAR
        for y in range(START_YEAR, year)
    )
    total += SECONDS_BEFORE_MONTH[when.month - 1]
    total += SECONDS_IN_YEAR if is_leap_year(year) else 0
    total += (when.day - 1) * SECONDS_IN_DAY
    total += when.hour * SECONDS_IN_HOUR
    total += when.minute * SECONDS_IN_MINUTE
    total += when.second
    return total


def _carry(value: int, base: int) -> tuple[int, int]:
    if value >= base:
        carry, value = divmod(value, base)
        return carry, value
    return 0, value


def time_add(when: RtcTime, seconds: int) -> RtcTime:
    """Return ``when`` moved forward by ``seconds``, carrying into larger fields."""
    _check_month(when.month)
    carry, second = _carry(when.second + seconds, 60)
    carry, minute = _carry(when.minute + carry, 60)
    carry, hour = _carry(when.hour + carry, 24)
    day = when.day + carry

    year_offset = when.year
    while day > (366 if is_leap_year(year_offset + CENTURY) else 365):
        day -= 366 if is_leap_year(year_offset + CENTURY) else 365
        year_offset += 1

    month = when.month
    while month < len(SECONDS_BEFORE_MONTH):
        days_in = SECONDS_BEFORE_MONTH[month] // SECONDS_IN_DAY
        if day <= days_in:
            break
        day -= days_in
        month += 1

    return replace(
        when,
        second=second,
        minute=minute,
        hour=hour,
        day=day,
        month=month,
        year=year_offset,
    )


def setting_get(settings_text: str, name: str) -> int:
    """Return the integer value of ``name`` in ``name=value`` lines.

    Only lines ending in a newline are considered; raises KeyError when absent.
    """
    key_chars: list[str] = []
    value_chars: list[str] = []
    in_value = False
    for ch in settings_text:
        if not in_value:
            if ch == "=":
                in_value = True
            else:
                key_chars.append(ch)
            continue
        if ch != "\n":
            value_chars.append(ch)
            continue
        key = "".join(key_chars)
        value = "".join(value_chars)
        key_chars.clear()
        value_chars.clear()
        in_value = False
        if key == name:
            return ascii_to_int(value.removesuffix("\r"))
    raise KeyError(f"Setting {name} not found")


def time_jet_lag(when: RtcTime, settings_text: str) -> RtcTime:
    """Shift ``when`` by the ``jetlag`` setting, in hours."""
    return time_add(when, setting_get(settings_text, "jetlag") * SECONDS_IN_HOUR)