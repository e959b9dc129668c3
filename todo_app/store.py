"""In-memory task list backed by the CSV file.

Every successful mutation rewrites the whole file. Rejected input and bad
indices leave both memory and disk untouched.
"""
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .models import FilterCategory, Outcome, TaskRecord
from .persistence import load_todos, save_todos

logger = logging.getLogger(__name__)


class TaskStore:
    def __init__(self, path, records=None):
        self.path = Path(path)
        self._records: List[TaskRecord] = list(records or [])

    @classmethod
    def load(cls, path):
        store = cls(path, load_todos(path))
        logger.info("TaskStore ready path=%s total=%d", store.path, len(store))
        return store

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    @property
    def records(self) -> Tuple[TaskRecord, ...]:
        return tuple(self._records)

    def _flush(self) -> Outcome:
        if save_todos(self.path, self._records):
            return Outcome.OK
        return Outcome.IO_FAILURE

    def add(self, description, category="") -> Outcome:
        description = (description or "").strip()
        if not description:
            logger.debug("Rejected empty description")
            return Outcome.REJECTED_EMPTY
        record = TaskRecord(description=description, completed=False, category=(category or "").strip())
        self._records.append(record)
        logger.debug("Task added index=%d category=%r", len(self._records) - 1, record.category)
        return self._flush()

    def toggle_completed(self, index) -> Outcome:
        if not 0 <= index < len(self._records):
            logger.debug("Toggle ignored, index %s out of range (size %d)", index, len(self._records))
            return Outcome.INDEX_OUT_OF_RANGE
        record = self._records[index]
        record.completed = not record.completed
        logger.debug("Task %d completed=%s", index, record.completed)
        return self._flush()

    def sort_by_category(self) -> Outcome:
        # list.sort is stable, ties keep insertion order
        self._records.sort(key=lambda r: r.category)
        return self._flush()

    def distinct_categories(self) -> List[str]:
        return sorted({r.category for r in self._records})

    def filtered_view(
        self, show_completed: bool, category_filter: Optional[str] = None
    ) -> Iterator[Tuple[int, TaskRecord]]:
        """Yield (store index, record) pairs visible under the given filters."""
        for index, record in enumerate(self._records):
            if record.completed and not show_completed:
                continue
            if category_filter is not None and record.category != category_filter:
                continue
            yield index, record


def category_choices(store, pending=""):
    """Categories offered when adding a task.

    A category typed in the input but not yet used by any task is offered
    as well.
    """
    choices = set(store.distinct_categories())
    if pending.strip():
        choices.add(pending)
    return sorted(choices)


def filter_choices(store):
    return [FilterCategory(None)] + [FilterCategory(c) for c in store.distinct_categories()]


def display_rows(store, show_completed, category_filter=None):
    """(store index, check mark, description, category label) for each visible task."""
    return [
        (index, "[x]" if record.completed else "[ ]", record.description, f"[{record.category}]")
        for index, record in store.filtered_view(show_completed, category_filter)
    ]
