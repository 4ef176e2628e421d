"""Cron expression parser and scheduler.

An expression has five space-separated fields::

    ┌──────── minute        0-59
    │ ┌────── hour          0-23
    │ │ ┌──── day of month  1-31
    │ │ │ ┌── month         1-12 or jan-dec
    │ │ │ │ ┌ day of week   0-6 or sun-sat (0 is Sunday)
    * * * * *

Each field is one of:

- ``*``: every value of the field;
- ``a,b,c``: a list, whose items may themselves be ranges;
- ``a-b``: an inclusive range, clamped to the field bounds;
- ``*/n``: every ``n``-th value starting at the field minimum;
- a single value.

The aliases ``@yearly``, ``@annually``, ``@monthly``, ``@weekly``, ``@daily``
and ``@hourly`` expand to their usual five-field forms.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType

from .errors import MalformedExpressionError, TokenError, ZeroIntervalError

YEARLY = "0 0 1 1 *"
ANNUALLY = "0 0 1 1 *"
MONTHLY = "0 0 1 * *"
WEEKLY = "0 0 * * 0"
DAILY = "0 0 * * *"
HOURLY = "0 * * * *"

ALIASES = MappingProxyType(
    {
        "@yearly": YEARLY,
        "@annually": ANNUALLY,
        "@monthly": MONTHLY,
        "@weekly": WEEKLY,
        "@daily": DAILY,
        "@hourly": HOURLY,
    }
)

ANY = "*"
ENUM = ","
PERIOD = "-"
INTERVAL = "/"

# Years searched by `Expr.next` and `Expr.prev` before giving up.
SEARCH_YEARS = 5

_NUMBER = re.compile(r"[0-9]+")

_DAY_NAMES = MappingProxyType(
    {
        name: num
        for num, name in enumerate(("sun", "mon", "tue", "wed", "thu", "fri", "sat"))
    }
)
_MONTH_NAMES = MappingProxyType(
    {
        name: num
        for num, name in enumerate(
            ("jan", "feb", "mar", "apr", "may", "jun",
             "jul", "aug", "sep", "oct", "nov", "dec"),
            start=1,
        )
    }
)


@dataclass(frozen=True)
class _Field:
    low: int
    high: int
    names: MappingProxyType | None = None

    def all(self, step: int = 1) -> list[int]:
        return list(range(self.low, self.high + 1, step))

    def value(self, text: str) -> int:
        """Parse one value, by name or number.

        Raises:
            ValueError: If ``text`` is neither a known name nor a number.
        """
        if self.names is not None:
            num = self.names.get(text.lower())
            if num is not None:
                return num
        if not _NUMBER.fullmatch(text):
            raise ValueError(f'invalid value "{text}"')
        return int(text)

    def checked(self, text: str) -> int:
        num = self.value(text)
        if not self.low <= num <= self.high:
            raise ValueError(f"value {num} is out of range {self.low}-{self.high}")
        return num

    def clamp(self, num: int) -> int:
        return min(max(num, self.low), self.high)


_MINUTES = _Field(0, 59)
_HOURS = _Field(0, 23)
_DAYS = _Field(1, 31)
_MONTHS = _Field(1, 12, _MONTH_NAMES)
_WEEKDAYS = _Field(0, 6, _DAY_NAMES)

_FIELDS = (_MINUTES, _HOURS, _DAYS, _MONTHS, _WEEKDAYS)


def _weekday(d: date) -> int:
    """Day of week with Sunday as 0."""
    return d.isoweekday() % 7


def _epoch(like: datetime) -> datetime:
    return datetime.fromtimestamp(0, tz=like.tzinfo)


@dataclass(frozen=True)
class Expr:
    """A parsed cron expression.

    Attributes:
        expression: The expression as parsed, with aliases expanded.
        minutes: Matching minutes, ascending.
        hours: Matching hours, ascending.
        days: Matching days of month, ascending.
        months: Matching months, ascending.
        weekdays: Matching days of week (Sunday is 0), ascending.
    """

    expression: str
    minutes: tuple[int, ...]
    hours: tuple[int, ...]
    days: tuple[int, ...]
    months: tuple[int, ...]
    weekdays: tuple[int, ...]

    def __str__(self) -> str:
        return self.expression

    def is_due(self, when: datetime | None = None) -> bool:
        """Return True if ``when`` (default: now) matches every field.

        Seconds are ignored.
        """
        t = datetime.now() if when is None else when
        return (
            t.minute in self.minutes
            and t.hour in self.hours
            and t.day in self.days
            and t.month in self.months
            and _weekday(t) in self.weekdays
        )

    def next(self, when: datetime | None = None) -> datetime:
        """Return the first matching minute strictly after ``when``.

        ``when`` defaults to now; the result carries its ``tzinfo``.

        Returns:
            datetime: The next matching moment, or the Unix epoch if nothing
            matches within `SEARCH_YEARS` years.
        """
        start = datetime.now() if when is None else when
        start_day = start.date()

        for year in range(start.year, start.year + SEARCH_YEARS):
            for month in self.months:
                if (year, month) < (start.year, start.month):
                    continue
                for day in self.days:
                    try:
                        d = date(year, month, day)
                    except ValueError:
                        continue
                    if d < start_day or _weekday(d) not in self.weekdays:
                        continue
                    for hour in self.hours:
                        for minute in self.minutes:
                            candidate = datetime(
                                year, month, day, hour, minute, tzinfo=start.tzinfo
                            )
                            if candidate > start:
                                return candidate

        return _epoch(start)

    def prev(self, when: datetime | None = None) -> datetime:
        """Return the last matching minute strictly before ``when``.

        ``when`` defaults to now; the result carries its ``tzinfo``.

        Returns:
            datetime: The previous matching moment, or the Unix epoch if
            nothing matches within `SEARCH_YEARS` years.
        """
        start = datetime.now() if when is None else when
        start_day = start.date()

        for year in range(start.year, start.year - SEARCH_YEARS - 1, -1):
            for month in reversed(self.months):
                if (year, month) > (start.year, start.month):
                    continue
                for day in reversed(self.days):
                    try:
                        d = date(year, month, day)
                    except ValueError:
                        continue
                    if d > start_day or _weekday(d) not in self.weekdays:
                        continue
                    for hour in reversed(self.hours):
                        for minute in reversed(self.minutes):
                            candidate = datetime(
                                year, month, day, hour, minute, tzinfo=start.tzinfo
                            )
                            if candidate < start:
                                return candidate

        return _epoch(start)


def _parse_period(text: str, field: _Field) -> list[int]:
    first, _, last = text.partition(PERIOD)
    low = field.clamp(field.value(first))
    high = field.clamp(field.value(last))
    if low > high:
        raise ValueError(f"range {text} is reversed")
    return list(range(low, high + 1))


def _parse_token(token: str, field: _Field) -> list[int]:
    """Expand one field token into its values.

    Raises:
        ZeroIntervalError: For a ``*/0`` interval.
        TokenError: For any other invalid token.
    """
    try:
        if token == ANY:
            return field.all()

        if ENUM in token:
            values: list[int] = []
            for item in token.split(ENUM):
                if PERIOD in item:
                    values.extend(_parse_period(item, field))
                else:
                    values.append(field.checked(item))
            return values

        if PERIOD in token:
            return _parse_period(token, field)

        if INTERVAL in token:
            step = field.value(token.partition(INTERVAL)[2])
            if step == 0:
                raise ZeroIntervalError(token)
            return field.all(step)

        return [field.checked(token)]
    except ValueError as e:
        if isinstance(e, TokenError):
            raise
        raise TokenError(token, str(e)) from e


def parse(expression: str) -> Expr:
    """Parse a cron expression.

    Returns:
        Expr: The parsed expression.

    Raises:
        MalformedExpressionError: If there are not exactly five fields.
        TokenError: If a field can't be parsed (`ZeroIntervalError` for a zero
            step).
    """
    normalized = expression.replace("\t", " ").strip()
    normalized = ALIASES.get(normalized, normalized)

    tokens = normalized.split()
    if len(tokens) != len(_FIELDS):
        raise MalformedExpressionError(expression)

    minutes, hours, days, months, weekdays = (
        tuple(sorted(set(_parse_token(token, field))))
        for token, field in zip(tokens, _FIELDS)
    )

    return Expr(
        expression=normalized,
        minutes=minutes,
        hours=hours,
        days=days,
        months=months,
        weekdays=weekdays,
    )
