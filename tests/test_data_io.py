from __future__ import annotations

import io
from pathlib import Path

import pytest

from constants import EXPECTED_COLS
from data_io import DataLoadError, load_csv_text, load_uploaded_text, missing_columns, validate_columns


class TestLoadCsvText:
    def test_reads_utf8_file(self, tmp_path: Path) -> None:
        p = tmp_path / "shipments.csv"
        p.write_text("shipment_id,supplier\nSH-1,Müller GmbH\n", encoding="utf-8")
        assert load_csv_text(p) == "shipment_id,supplier\nSH-1,Müller GmbH\n"

    def test_strips_bom(self, tmp_path: Path) -> None:
        p = tmp_path / "bom.csv"
        p.write_bytes(b"\xef\xbb\xbfshipment_id\nSH-1\n")
        assert load_csv_text(p).startswith("shipment_id")

    def test_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(DataLoadError, match="Failed to load shipment data"):
            load_csv_text(tmp_path / "nope.csv")

    def test_non_utf8_raises_load_error(self, tmp_path: Path) -> None:
        p = tmp_path / "latin1.csv"
        p.write_bytes(b"supplier\n\xe9\xff\n")
        with pytest.raises(DataLoadError, match="not valid UTF-8"):
            load_csv_text(p)


class TestLoadUploadedText:
    def test_reads_upload(self) -> None:
        f = io.BytesIO(b"a,b\n1,2\n")
        f.name = "upload.csv"
        assert load_uploaded_text(f) == "a,b\n1,2\n"

    def test_unreadable_upload(self) -> None:
        with pytest.raises(DataLoadError, match="Failed to read"):
            load_uploaded_text(object())


class TestValidateColumns:
    def test_all_present(self) -> None:
        text = ",".join(EXPECTED_COLS) + "\n"
        assert validate_columns(text, EXPECTED_COLS) is None

    def test_reports_missing(self) -> None:
        assert missing_columns("shipment_id,supplier\n", ["shipment_id", "po", "supplier", "carrier"]) == ["po", "carrier"]
        msg = validate_columns("shipment_id\n", ["shipment_id", "po"])
        assert msg == "Missing expected columns: po"

    def test_empty_text_misses_everything(self) -> None:
        assert missing_columns("", ["a", "b"]) == ["a", "b"]


def test_bundled_sample_has_expected_columns() -> None:
    sample = Path(__file__).resolve().parent.parent / "data" / "shipments.csv"
    assert validate_columns(load_csv_text(sample), EXPECTED_COLS) is None
