"""
CalendarInstant - the in-memory value produced by the date/time rules.
"""

from datetime import datetime

from datetime_constraints.core.patterns import expand_pattern


def _restore(args, fold, pattern):
    return CalendarInstant(*args, fold=fold, pattern=pattern)


class CalendarInstant(datetime):
    """
    A datetime that remembers the pattern it was parsed with.

    Ordering, arithmetic and equality are plain datetime behaviour. str()
    formats with the remembered pattern, so a value parsed from
    "02-17-2005" with "%m-%d-%Y" prints back as "02-17-2005". Instances
    built from calendar fields have no pattern and print like a datetime.
    """

    def __new__(cls, *args, pattern: str | None = None, **kwargs):
        instance = super().__new__(cls, *args, **kwargs)
        instance.pattern = pattern
        return instance

    @classmethod
    def from_datetime(cls, value: datetime, pattern: str | None = None) -> "CalendarInstant":
        """Copy a datetime into a CalendarInstant carrying ``pattern``."""
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
            pattern=pattern,
        )

    def __str__(self) -> str:
        if self.pattern:
            return self.strftime(expand_pattern(self.pattern))
        return super().__str__()

    def __reduce_ex__(self, protocol):
        args = (
            self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.microsecond,
            self.tzinfo,
        )
        return (_restore, (args, self.fold, self.pattern))
