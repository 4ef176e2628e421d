"""Cron expressions: parsing, scheduling and configuration validation."""

from . import validators
from .errors import (
    CronParseError,
    InvalidCronPropertyError,
    MalformedExpressionError,
    TokenError,
    ZeroIntervalError,
)
from .expr import (
    ANNUALLY,
    DAILY,
    HOURLY,
    MONTHLY,
    WEEKLY,
    YEARLY,
    Expr,
    parse,
)

__all__ = [
    "ANNUALLY",
    "DAILY",
    "HOURLY",
    "MONTHLY",
    "WEEKLY",
    "YEARLY",
    "CronParseError",
    "Expr",
    "InvalidCronPropertyError",
    "MalformedExpressionError",
    "TokenError",
    "ZeroIntervalError",
    "parse",
    "validators",
]
