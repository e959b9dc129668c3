"""Data models for the to-do list.

TaskRecord mirrors one line of the CSV file: description, completed,
category. An empty category means "uncategorized".
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass
class TaskRecord:
    description: str
    completed: bool = False
    category: str = ""


class Outcome(str, Enum):
    """Result of a store mutation.

    IO_FAILURE means the change is applied in memory but the file on disk
    is stale until the next successful save.
    """

    OK = "ok"
    REJECTED_EMPTY = "rejected_empty"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    IO_FAILURE = "io_failure"


@dataclass(frozen=True)
class FilterCategory:
    """Entry of the category filter pick-list. None shows every category."""

    value: Optional[str] = None

    def __str__(self):
        return "All" if self.value is None else self.value
