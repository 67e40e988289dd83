"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from risio.models import Document, Record  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"

EXAMPLE_RIS = (
    "TY  - JOUR\n"
    "AU  - Doe, Jane\n"
    "AU  - Smith, John\n"
    "TI  - A Study\n"
    "  of Systems\n"
    "ER  - \n"
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample RIS files."""
    return FIXTURES_DIR


@pytest.fixture
def example_ris() -> str:
    """Single-record RIS text with repeated and multi-line fields."""
    return EXAMPLE_RIS


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory for terminated records with minimal boilerplate.

    ``TY`` opens and ``ER`` closes the record; extra fields go in between.
    """

    def _factory(ref_type: str = "JOUR", *fields: tuple[str, str]) -> Record:
        record = Record().add("TY", ref_type)
        for tag, value in fields:
            record.add(tag, value)
        return record.add("ER", "")

    return _factory


@pytest.fixture
def sample_document(make_record: Callable[..., Record]) -> Document:
    """Two-record document covering repeats, continuations and vendor tags."""
    return Document(
        [
            make_record(
                "JOUR",
                ("AU", "Doe, Jane"),
                ("AU", "Smith, John"),
                ("TI", "A Study\n  of Systems"),
                ("PY", "2020/05//"),
            ),
            make_record(
                "BOOK",
                ("T1", "Collected Notes"),
                ("AB", "First paragraph.\n\nSecond paragraph."),
                ("X9", "vendor extension"),
                ("KW", "ris"),
                ("KW", "parsing"),
            ),
        ]
    )
