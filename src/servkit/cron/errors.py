"""Errors raised while parsing or validating cron expressions."""


class CronParseError(ValueError):
    """Base class for cron expression parse errors."""


class MalformedExpressionError(CronParseError):
    """Raised when an expression does not have exactly five fields."""

    def __init__(self, expression: str) -> None:
        super().__init__("Expression must have 5 tokens")
        self.expression = expression


class TokenError(CronParseError):
    """Raised when one field of an expression can't be parsed."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f'Can\'t parse token "{token}": {reason}')
        self.token = token
        self.reason = reason


class ZeroIntervalError(TokenError):
    """Raised when an interval field has a step of zero (``*/0``)."""

    def __init__(self, token: str) -> None:
        super().__init__(token, "Interval can't be less or equals 0")


class InvalidCronPropertyError(ValueError):
    """Raised when a configuration property holds an invalid cron expression."""

    def __init__(self, prop: str, error: CronParseError) -> None:
        super().__init__(f"Property {prop} contains invalid cron expression: {error}")
        self.prop = prop
        self.error = error
