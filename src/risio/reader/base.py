"""Parser configuration and text-level helpers."""

import re
from dataclasses import dataclass

from risio.errors import FormatError

PARSE_MODES = ("strict", "lenient")

# strict: exactly "  - "; a bare "TT  -" is tolerated for empty values
STRICT_TAG_PATTERN = re.compile(r"^([A-Z0-9]{2})  -(?: (.*))?$")
# lenient: any run of blanks before the dash, one optional blank after it
LENIENT_TAG_PATTERN = re.compile(r"^([A-Z0-9]{2})[ \t]+-(?:[ \t](.*))?$")

UTF8_BOM = "\ufeff"


@dataclass
class ParserConfig:
    """Configuration for RIS parsing.

    Attributes
    ----------
    mode : str
        'strict' rejects any deviation from the canonical ``"  - "``
        separator, requires every record to open with ``TY`` and every
        ``ER`` to carry an empty value. 'lenient' (default) accepts
        whitespace variance around the dash and any opening tag.
    allow_empty_records : bool
        If True, an ``ER`` with no open record yields a record holding only
        that ``ER`` field instead of raising ``MalformedLineError``.
    """

    mode: str = "lenient"
    allow_empty_records: bool = False

    def __post_init__(self) -> None:
        """Validate."""
        if self.mode not in PARSE_MODES:
            raise ValueError(f"mode must be one of {PARSE_MODES}, got {self.mode!r}")

    @property
    def strict(self) -> bool:
        """Whether strict mode is active."""
        return self.mode == "strict"


def get_tag_pattern(mode: str) -> re.Pattern[str]:
    """Return the tag-line pattern for a parse mode.

    Parameters
    ----------
    mode : str
        'strict' or 'lenient'.

    Returns
    -------
    re.Pattern[str]
        Pattern with groups (tag, value); the value group may be None.
    """
    return STRICT_TAG_PATTERN if mode == "strict" else LENIENT_TAG_PATTERN


def split_lines(text: str) -> list[str]:
    """Split text into physical lines on ``\\n`` and ``\\r\\n``.

    A leading BOM is dropped. A bare ``\\r`` is not a line break and stays
    part of the line. A final terminator ends the last line rather than
    opening an empty one.

    Parameters
    ----------
    text : str
        Complete RIS content.

    Returns
    -------
    list[str]
        Lines without terminators.
    """
    text = text.removeprefix(UTF8_BOM).replace("\r\n", "\n")
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def strip_terminator(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` from a single line."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def decode_bytes(data: bytes) -> str:
    """Decode RIS bytes as UTF-8, dropping a BOM if present.

    Parameters
    ----------
    data : bytes
        Raw content.

    Returns
    -------
    str
        Decoded text.

    Raises
    ------
    FormatError
        If the content is not valid UTF-8.
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        line_number = data.count(b"\n", 0, e.start) + 1
        raise FormatError("Invalid UTF-8", line_number) from e
