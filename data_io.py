# data_io.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union
from constants import LOAD_ERROR_HINT
from parsing import parse_headers

logger = logging.getLogger(__name__)


class DataLoadError(RuntimeError):
    """CSV source could not be read; message is safe to show to the user."""


def _decode(raw: bytes, source: str) -> str:
    try:
        # utf-8-sig strips a BOM that would otherwise glue onto the first header
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.error("Could not decode %s as UTF-8: %s", source, e)
        raise DataLoadError(f"{source} is not valid UTF-8 text.") from e


def load_csv_text(path: Union[str, Path]) -> str:
    """Read the CSV source fresh from disk every run (no caching)."""
    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        logger.error("Failed to read %s: %s", p, e)
        raise DataLoadError(f"Failed to load shipment data from '{p}'. {LOAD_ERROR_HINT}") from e
    logger.info("Loaded %s (%d bytes)", p, len(raw))
    return _decode(raw, str(p))


def load_uploaded_text(file) -> str:
    name = getattr(file, "name", "uploaded file")
    try:
        raw = file.getvalue()
    except (OSError, AttributeError) as e:
        logger.error("Failed to read upload %s: %s", name, e)
        raise DataLoadError(f"Failed to read '{name}'. {LOAD_ERROR_HINT}") from e
    logger.info("Loaded upload %s (%d bytes)", name, len(raw))
    return _decode(raw, name)


def missing_columns(text: str, expected: Iterable[str]) -> List[str]:
    headers = set(parse_headers(text))
    return [c for c in expected if c not in headers]


def validate_columns(text: str, expected: Iterable[str]) -> Optional[str]:
    missing = missing_columns(text, expected)
    return f"Missing expected columns: {', '.join(missing)}" if missing else None
