"""Error taxonomy for RIS parsing and writing.

Structural failures (the data is not RIS) derive from ``FormatError``;
transport failures (the stream or file misbehaved) derive from
``RISIOError``. Both share the ``RISError`` base so callers can catch
everything from this package in one clause.
"""

__all__ = [
    "RISError",
    "FormatError",
    "MalformedLineError",
    "UnterminatedRecordError",
    "RISIOError",
]


class RISError(Exception):
    """Base class for all errors raised by risio."""


class FormatError(RISError):
    """Raised when input violates the RIS grammar."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        """Initialize format error.

        Parameters
        ----------
        message : str
            Error message.
        line_number : int | None, optional
            1-based line number where the problem was detected.
        """
        if line_number is not None:
            message = f"{message} at line {line_number}"
        super().__init__(message)
        self.line_number = line_number


class MalformedLineError(FormatError):
    """Raised for a line that is neither a tag line nor a valid continuation."""

    def __init__(self, line_number: int, line: str, reason: str = "Malformed line") -> None:
        """Initialize malformed line error.

        Parameters
        ----------
        line_number : int
            1-based line number of the offending line.
        line : str
            The offending line, without its terminator.
        reason : str, optional
            Short description of what is wrong with the line.
        """
        super().__init__(reason, line_number)
        self.line = line


class UnterminatedRecordError(FormatError):
    """Raised when a record is not closed by ``ER``."""

    def __init__(self, line_number: int, record_start: int) -> None:
        """Initialize unterminated record error.

        Parameters
        ----------
        line_number : int
            1-based line where the missing ``ER`` was noticed (a second
            ``TY``, or the last line of input).
        record_start : int
            1-based line that opened the unterminated record.
        """
        super().__init__(f"Unterminated record (opened at line {record_start})", line_number)
        self.record_start = record_start


class RISIOError(RISError):
    """Raised when reading from a source or writing to a sink fails.

    The underlying ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize I/O error.

        Parameters
        ----------
        message : str
            Error message.
        path : str | None, optional
            File involved, when known.
        """
        super().__init__(message)
        self.path = path
