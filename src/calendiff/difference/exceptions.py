"""
Исключения пакета difference.

Оба исключения наследуют ValueError: это ошибки входных данных вызывающего,
внутри пакета они не перехватываются.
"""

from datetime import tzinfo
from typing import Any, Optional

from calendiff.core.domain.instants import zone_identifier


class TimezoneMismatch(ValueError):
    """
    Span построен из instant в разных (или неопределённых) часовых поясах.

    Атрибуты:
        from_timezone: Идентификатор пояса начала (None если не определён)
        to_timezone: Идентификатор пояса конца (None если не определён)
    """

    def __init__(
        self,
        message: str,
        from_timezone: Optional[str] = None,
        to_timezone: Optional[str] = None,
    ):
        super().__init__(message)
        self.from_timezone = from_timezone
        self.to_timezone = to_timezone

    @classmethod
    def from_timezones(cls, a: Optional[tzinfo], b: Optional[tzinfo]) -> "TimezoneMismatch":
        """
        Построение исключения по двум tzinfo.

        Если оба пояса определены, сообщение подсказывает конверсию
        второй даты в пояс первой.
        """
        a_dump = _dump_timezone(a)
        b_dump = _dump_timezone(b)

        message = (
            "Unable to reliably calculate a date difference between dates not being on the same timezone,"
            f" received {a_dump} and {b_dump}."
        )
        if a is not None and b is not None:
            message += f"\nYou can convert the second date with to.astimezone({a_dump})"

        return cls(message, zone_identifier(a), zone_identifier(b))


class InvalidUnit(ValueError):
    """Элемент списка единиц разложения не является Unit."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value

    @classmethod
    def from_value(cls, value: Any) -> "InvalidUnit":
        kind = "NULL" if value is None else type(value).__name__
        return cls(f"{kind} is not a valid Unit enum value.", value)


def _dump_timezone(zone: Optional[tzinfo]) -> str:
    return "None" if zone is None else repr(zone)
