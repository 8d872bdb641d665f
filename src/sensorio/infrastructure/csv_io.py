"""
Delimited-text (CSV) reading and writing for the sensor dataset.

The persisted format is UTF-8 CSV with a header row naming the columns
Brand, Model, Mode, Width, Height, Resolution, NativeAnamorphic and
SupportedSqueezes, in that order when written.
"""

import csv
import io
from pathlib import Path
from typing import Iterable

from ..core.errors import DatasetExportError, DatasetParseError
from ..core.models import COLUMNS, FlatRecord
from .logging_config import get_logger

logger = get_logger(__name__)


def _is_blank(row: list[str]) -> bool:
    return not row or row == [""]


def parse_sensor_csv(text: str) -> list[FlatRecord]:
    """
    Parse CSV text into flat records.

    Header cells are trimmed and mapped to columns by name, so column order
    in the input does not matter. Columns outside the known set are ignored.
    Blank lines are skipped.

    Args:
        text: The CSV payload.

    Returns:
        List of flat records in input order.

    Raises:
        DatasetParseError: If the header is missing or malformed, or a row's
            field count does not match the header.
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.reader(io.StringIO(text, newline=""))

    try:
        header = None
        for row in reader:
            if not _is_blank(row):
                header = [cell.strip() for cell in row]
                break

        if header is None:
            raise DatasetParseError("No header row found")

        duplicates = sorted({name for name in header if header.count(name) > 1})
        if duplicates:
            raise DatasetParseError(f"Duplicate columns in header: {', '.join(duplicates)}")

        missing = [name for name in COLUMNS if name not in header]
        if missing:
            raise DatasetParseError(f"Missing columns in header: {', '.join(missing)}")

        extra = [name for name in header if name not in COLUMNS]
        if extra:
            logger.debug(f"Ignoring unknown columns: {extra}")

        records = []
        row_number = 0
        for row in reader:
            if _is_blank(row):
                continue
            row_number += 1
            if len(row) != len(header):
                raise DatasetParseError(
                    f"Row {row_number}: expected {len(header)} fields but parsed {len(row)}"
                )
            records.append(FlatRecord.from_row(dict(zip(header, row))))

    except csv.Error as e:
        raise DatasetParseError(str(e)) from e

    logger.debug(f"Parsed {len(records)} records")
    return records


def load_sensor_csv(file_path: Path) -> list[FlatRecord]:
    """
    Load and parse a CSV file from disk.

    Args:
        file_path: Path to the CSV file.

    Returns:
        List of flat records.

    Raises:
        OSError: If the file cannot be read.
        DatasetParseError: If the content is malformed.
    """
    with open(file_path, 'r', encoding='utf-8', newline='') as f:
        text = f.read()
    records = parse_sensor_csv(text)
    logger.info(f"Loaded {len(records)} records from {Path(file_path).name}")
    return records


def serialize_sensor_csv(records: Iterable[FlatRecord]) -> str:
    """
    Serialize flat records to CSV text.

    The header is written in persisted column order; fields are quoted only
    when needed and lines end with CRLF.
    """
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=COLUMNS, lineterminator="\r\n")
    writer.writeheader()
    for record in records:
        writer.writerow(record.to_row())
    return buffer.getvalue()


def write_sensor_csv(records: Iterable[FlatRecord], file_path: Path) -> Path:
    """
    Write flat records to a CSV file.

    The file is written to a temporary sibling first and then moved into
    place, so a failed write leaves any existing file intact.

    Args:
        records: Records to write.
        file_path: Destination file.

    Returns:
        The written path.

    Raises:
        DatasetExportError: If the file cannot be written.
    """
    file_path = Path(file_path)
    content = serialize_sensor_csv(records)
    temp_file = file_path.with_suffix(file_path.suffix + '.tmp')
    try:
        with open(temp_file, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        temp_file.replace(file_path)
    except OSError as e:
        temp_file.unlink(missing_ok=True)
        raise DatasetExportError(f"Failed to write {file_path}: {e}") from e

    logger.info(f"Exported dataset to {file_path}")
    return file_path
