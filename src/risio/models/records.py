"""Record model for RIS data.

A ``Document`` is an ordered list of ``Record`` objects and a ``Record`` is
an ordered list of ``Field`` objects. The model is permissive: nothing here
validates tags or values, so malformed-but-tolerated input survives a
round trip unchanged.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from risio.models.dates import PublicationDate
from risio.models.tags import DATE_TAGS, TYPE_TAG, get_tags

__all__ = ["Field", "Record", "Document"]


@dataclass(frozen=True)
class Field:
    """A single tagged value.

    Attributes
    ----------
    tag : str
        Two-character tag (e.g., 'TY', 'AU', 'ER').
    value : str
        Free text; continuation lines are joined with ``\\n``.
    """

    tag: str
    value: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"tag": self.tag, "value": self.value}


@dataclass
class Record:
    """One bibliographic entry, fields in file order.

    Attributes
    ----------
    fields : list[Field]
        Fields in insertion order, repeats allowed.
    """

    fields: list[Field] = field(default_factory=list)

    def add(self, tag: str, value: str = "") -> "Record":
        """Append a field and return the record for chaining.

        Parameters
        ----------
        tag : str
            Field tag.
        value : str, optional
            Field value, by default empty.

        Returns
        -------
        Record
            This record.
        """
        self.fields.append(Field(tag, value))
        return self

    def get_all(self, tag: str) -> list[str]:
        """Return every value stored under ``tag``, in insertion order."""
        return [f.value for f in self.fields if f.tag == tag]

    def get(self, tag: str, default: str | None = None) -> str | None:
        """Return the first value stored under ``tag``, or ``default``."""
        for f in self.fields:
            if f.tag == tag:
                return f.value
        return default

    def values_for(self, name: str) -> list[str]:
        """Return values for all synonym tags of a well-known field.

        Parameters
        ----------
        name : str
            Field name from ``FIELD_TAGS`` (e.g., 'title', 'authors').

        Returns
        -------
        list[str]
            Values in record order; empty when the name is unknown.
        """
        tags = get_tags(name)
        return [f.value for f in self.fields if f.tag in tags]

    @property
    def reference_type(self) -> str | None:
        """Value of the ``TY`` field, if any."""
        return self.get(TYPE_TAG)

    @property
    def publication_date(self) -> PublicationDate | None:
        """First parseable date among ``PY``, ``Y1`` and ``DA``."""
        for f in self.fields:
            if f.tag in DATE_TAGS:
                parsed = PublicationDate.parse(f.value)
                if parsed is not None:
                    return parsed
        return None

    @property
    def tags(self) -> list[str]:
        """Tags in field order, repeats included."""
        return [f.tag for f in self.fields]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"fields": [f.to_dict() for f in self.fields]}

    def __contains__(self, tag: object) -> bool:
        return any(f.tag == tag for f in self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


@dataclass
class Document:
    """Ordered collection of records from one RIS source.

    Attributes
    ----------
    records : list[Record]
        Records in file order.
    """

    records: list[Record] = field(default_factory=list)

    def append(self, record: Record) -> None:
        """Append a record."""
        self.records.append(record)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"records": [r.to_dict() for r in self.records]}

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
