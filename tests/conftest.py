from pathlib import Path

import pytest

from todo_app.models import TaskRecord
from todo_app.store import TaskStore


@pytest.fixture()
def csv_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.csv"


@pytest.fixture()
def store(csv_path: Path) -> TaskStore:
    """Store with a mix of categories and one completed task, not yet saved."""
    return TaskStore(
        csv_path,
        [
            TaskRecord("Buy milk", False, "Errands"),
            TaskRecord("Pay bill", True, "Finance"),
            TaskRecord("Return parcel", False, "Errands"),
            TaskRecord("Stretch", False, ""),
        ],
    )
