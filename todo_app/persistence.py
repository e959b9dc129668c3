"""Flat-file persistence for the to-do list.

The file is headerless CSV, one task per line, in the field order
description, completed, category. The completed flag is written as the
literal tokens "true" / "false".
"""
import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .models import TaskRecord

logger = logging.getLogger(__name__)

TRUE_TOKEN = "true"
FALSE_TOKEN = "false"
FIELD_COUNT = 3

# Descriptions are free text; the csv default of 128 KiB per field is too small.
csv.field_size_limit(2**31 - 1)


def format_completed(value):
    return TRUE_TOKEN if value else FALSE_TOKEN


def parse_completed(token) -> Optional[bool]:
    """Return the flag for a stored token, or None if the token is unknown."""
    if token == TRUE_TOKEN:
        return True
    if token == FALSE_TOKEN:
        return False
    return None


def _is_decodable(field):
    try:
        field.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _row_to_record(row) -> Optional[TaskRecord]:
    if len(row) != FIELD_COUNT or not all(_is_decodable(f) for f in row):
        return None
    description, raw_completed, category = row
    completed = parse_completed(raw_completed)
    if completed is None or not description.strip():
        return None
    return TaskRecord(description=description, completed=completed, category=category)


def load_todos(path) -> List[TaskRecord]:
    """Read every well-formed record from ``path``.

    Missing file -> empty list. Rows that do not parse, including rows with
    bytes that are not valid UTF-8, are skipped one by one.
    """
    path = Path(path)
    if not path.exists():
        return []
    records = []
    try:
        with path.open("r", newline="", encoding="utf-8", errors="surrogateescape") as handle:
            reader = csv.reader(handle)
            while True:
                try:
                    row = next(reader)
                except StopIteration:
                    break
                except csv.Error as exc:
                    logger.warning("Skipping unreadable row near line %s of %s: %s", reader.line_num, path, exc)
                    continue
                if not row:
                    continue
                record = _row_to_record(row)
                if record is None:
                    logger.warning("Skipping malformed row at line %s of %s", reader.line_num, path)
                    continue
                records.append(record)
    except OSError as exc:
        logger.error("Failed to read %s: %s", path, exc)
    logger.debug("Loaded %d task(s) from %s", len(records), path)
    return records


def save_todos(path, records: Iterable[TaskRecord]) -> bool:
    """Rewrite ``path`` with all records. Returns False if the write failed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            for record in records:
                writer.writerow(
                    [
                        record.description,
                        format_completed(record.completed),
                        record.category,
                    ]
                )
    except OSError as exc:
        logger.error("Failed to save tasks to %s: %s", path, exc)
        return False
    return True
