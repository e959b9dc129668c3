"""Desktop to-do list with category filters, a calendar and CSV storage."""

from .models import FilterCategory, Outcome, TaskRecord
from .store import TaskStore

__all__ = ["FilterCategory", "Outcome", "TaskRecord", "TaskStore"]
__version__ = "0.1.0"
