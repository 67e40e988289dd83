"""Tests for the file and stream API."""

import io
import json
from pathlib import Path

import jsonschema
import pytest

from risio import (
    Document,
    FormatError,
    RISIOError,
    UnterminatedRecordError,
    parse_file,
    read,
    write,
    write_file,
    write_jsonl,
)

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="module")
def record_schema() -> dict:
    """Load record JSON schema."""
    with (_SCHEMAS_DIR / "record.schema.json").open() as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_read_text_stream(example_ris: str) -> None:
    """Text streams are read whole and parsed."""
    doc = read(io.StringIO(example_ris))

    assert len(doc) == 1
    assert doc[0].get_all("AU") == ["Doe, Jane", "Smith, John"]


@pytest.mark.unit
def test_read_binary_stream_with_bom(example_ris: str) -> None:
    """Binary streams are decoded as UTF-8 and a BOM is dropped."""
    data = b"\xef\xbb\xbf" + example_ris.replace("Doe", "Dö").encode("utf-8")

    doc = read(io.BytesIO(data))

    assert doc[0].get("AU") == "Dö, Jane"


@pytest.mark.unit
def test_read_invalid_utf8_is_format_error() -> None:
    """Undecodable bytes are bad data, reported with their line."""
    data = b"TY  - JOUR\nTI  - \xff\xfe\nER  - \n"

    with pytest.raises(FormatError) as exc_info:
        read(io.BytesIO(data))

    assert exc_info.value.line_number == 2
    assert not isinstance(exc_info.value, RISIOError)


class _FailingSource(io.StringIO):
    def read(self, size: int | None = -1) -> str:
        raise OSError("connection reset")


@pytest.mark.unit
def test_read_surfaces_io_errors() -> None:
    """Stream failures are RISIOError, distinct from format errors."""
    with pytest.raises(RISIOError) as exc_info:
        read(_FailingSource())

    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.unit
def test_parse_file(fixtures_dir: Path) -> None:
    """The CRLF sample file parses into two records."""
    doc = parse_file(fixtures_dir / "sample.ris")

    assert len(doc) == 2
    assert doc[0].get("TI") == "A Mathematical Theory of Communication"
    assert str(doc[0].publication_date) == "1948/07//"
    assert doc[1].values_for("authors") == ["Turing, Alan Mathison"]
    assert doc[1].get("AB") == (
        "We define computable numbers\nand show that\n\n"
        "the Entscheidungsproblem has no solution."
    )
    assert doc[1].get("ZZ") == "vendor extension"


@pytest.mark.unit
def test_parse_file_missing(tmp_path: Path) -> None:
    """A missing file is an I/O error carrying the path."""
    missing = tmp_path / "missing.ris"

    with pytest.raises(RISIOError) as exc_info:
        parse_file(missing)

    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


@pytest.mark.unit
def test_parse_file_truncated(tmp_path: Path) -> None:
    """Structural errors propagate unchanged from parse_file."""
    path = tmp_path / "truncated.ris"
    path.write_text("TY  - JOUR\nTI  - cut off", encoding="utf-8")

    with pytest.raises(UnterminatedRecordError):
        parse_file(path)


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_write_file_round_trip(tmp_path: Path, sample_document: Document) -> None:
    """write_file then parse_file returns the same document."""
    path = tmp_path / "nested" / "out.ris"

    write_file(sample_document, path)

    assert path.read_bytes() == write(sample_document).encode("utf-8")
    assert parse_file(path) == sample_document


@pytest.mark.unit
def test_write_file_into_directory_fails(tmp_path: Path, sample_document: Document) -> None:
    """Writing onto a directory path is an I/O error."""
    with pytest.raises(RISIOError):
        write_file(sample_document, tmp_path)


# ---------------------------------------------------------------------------
# JSONL export
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_write_jsonl(tmp_path: Path, sample_document: Document, record_schema: dict) -> None:
    """Each record becomes one schema-valid JSON line."""
    path = tmp_path / "records.jsonl"

    write_jsonl(sample_document, path)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    for line, record in zip(lines, sample_document, strict=True):
        data = json.loads(line)
        jsonschema.validate(instance=data, schema=record_schema)
        assert data == record.to_dict()


@pytest.mark.unit
def test_write_jsonl_keeps_unicode(tmp_path: Path, record_schema: dict) -> None:
    """Non-ASCII text is written as-is."""
    from risio import Record

    path = tmp_path / "records.jsonl"
    write_jsonl(Document([Record().add("TY", "JOUR").add("TI", "Café").add("ER")]), path)

    text = path.read_text(encoding="utf-8")
    assert "Café" in text
    jsonschema.validate(instance=json.loads(text), schema=record_schema)


@pytest.mark.unit
def test_schema_rejects_bad_tags(record_schema: dict) -> None:
    """The schema rejects tags that are not two characters."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(
            instance={"fields": [{"tag": "TITLE", "value": "x"}]},
            schema=record_schema,
        )

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance={"fields": []}, schema=record_schema)
