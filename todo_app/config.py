from pathlib import Path

TODO_CSV_PATH = Path("todos.csv")

WINDOW_TITLE = "Productivity GUI - To-Do & Calendar"
WINDOW_GEOMETRY = "980x600"
WINDOW_MIN_SIZE = (760, 480)

COLOR_BG = "#050505"
NEON_GREEN = "#39ff14"
NEON_PINK = "#ff2dfd"
NEON_BLUE = "#00e5ff"
NEON_YELLOW = "#faff00"
DIM_TEXT = "#8cffc1"
ERROR_RED = "#ff4d4d"

# None keeps logs on the console only.
LOG_DIR = None
LOG_FILE_NAME = "todo_app.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
