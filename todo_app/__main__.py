import logging

from .config import TODO_CSV_PATH
from .logging_setup import setup_logging
from .store import TaskStore

logger = logging.getLogger("todo_app")


def main():
    setup_logging()
    store = TaskStore.load(TODO_CSV_PATH)

    from .app import TodoApp  # tkinter is only needed once the window opens

    app = TodoApp(store)
    app.mainloop()
    logger.info("Window closed, %d task(s) in %s", len(store), store.path)


if __name__ == "__main__":
    main()
