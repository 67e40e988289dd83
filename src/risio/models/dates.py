"""Publication date values (``PY``, ``Y1``, ``DA``).

RIS dates take the form ``YYYY/MM/DD/other info`` where everything after
the year is optional, e.g. ``1998///``, ``1998/03//``, ``2001``.
"""

import re
from dataclasses import dataclass

DATE_RE = re.compile(r"^(\d{4})(?:/(\d{2})?(?:/(\d{2})?(?:/(.+)?)?)?)?")


@dataclass(frozen=True)
class PublicationDate:
    """A (partial) publication date.

    Attributes
    ----------
    year : int
        Four-digit year.
    month : int | None
        Month, if given.
    day : int | None
        Day, if given.
    other_info : str | None
        Free text after the third slash (e.g., 'Spring').
    """

    year: int
    month: int | None = None
    day: int | None = None
    other_info: str | None = None

    @classmethod
    def parse(cls, text: str) -> "PublicationDate | None":
        """Parse a RIS date value.

        Parameters
        ----------
        text : str
            Raw field value.

        Returns
        -------
        PublicationDate | None
            Parsed date, or None if the value does not start with a year.
        """
        match = DATE_RE.match(text.strip())
        if not match:
            return None

        year, month, day, other = match.groups()
        return cls(
            year=int(year),
            month=int(month) if month else None,
            day=int(day) if day else None,
            other_info=other,
        )

    def __str__(self) -> str:
        month = f"{self.month:02d}" if self.month is not None else ""
        day = f"{self.day:02d}" if self.day is not None else ""
        return f"{self.year:04d}/{month}/{day}/{self.other_info or ''}"
