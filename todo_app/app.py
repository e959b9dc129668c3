# To-Do & Calendar desktop window
# Requires: tkcalendar (pip install tkcalendar)

import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont
from tkinter import ttk

try:
    from tkcalendar import Calendar
except ImportError as exc:
    raise SystemExit(
        "tkcalendar is required. Install it with: pip install tkcalendar"
    ) from exc

from .config import (
    COLOR_BG,
    DIM_TEXT,
    ERROR_RED,
    NEON_BLUE,
    NEON_GREEN,
    NEON_PINK,
    NEON_YELLOW,
    WINDOW_GEOMETRY,
    WINDOW_MIN_SIZE,
    WINDOW_TITLE,
)
from .models import FilterCategory, Outcome
from .store import category_choices, display_rows, filter_choices

logger = logging.getLogger(__name__)


class TodoApp(tk.Tk):
    def __init__(self, store):
        super().__init__()
        self.title(WINDOW_TITLE)
        self.geometry(WINDOW_GEOMETRY)
        self.minsize(*WINDOW_MIN_SIZE)
        self.configure(bg=COLOR_BG)

        self.store = store
        self.show_completed = False
        self.sort_by_category = False
        self.filter_category = FilterCategory(None)
        self._row_buttons = []

        self._init_fonts()
        self._build_ui()
        self._bind_events()
        self._refresh_all(f"Loaded {len(self.store)} task(s).")

    def _init_fonts(self):
        preferred = ["Share Tech Mono", "Consolas", "Courier New"]
        available = set(tkfont.families(self))
        family = next((f for f in preferred if f in available), "Courier New")

        self.font_title = tkfont.Font(family=family, size=14, weight="bold")
        self.font_text = tkfont.Font(family=family, size=11)
        self.font_small = tkfont.Font(family=family, size=9)
        self.font_completed = tkfont.Font(family=family, size=11, overstrike=1)

    def _build_ui(self):
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)

        tasks_frame = tk.Frame(self, bg=COLOR_BG, highlightthickness=1, highlightbackground=NEON_GREEN)
        tasks_frame.grid(row=0, column=0, sticky="nsew", padx=(20, 10), pady=20)
        tasks_frame.grid_rowconfigure(1, weight=1)
        tasks_frame.grid_columnconfigure(0, weight=1)

        tk.Label(
            tasks_frame,
            text="To-Do List:",
            font=self.font_title,
            bg=COLOR_BG,
            fg=NEON_GREEN,
        ).grid(row=0, column=0, sticky="w", padx=8, pady=(6, 4))

        self.task_text = tk.Text(
            tasks_frame,
            bg=COLOR_BG,
            fg=NEON_GREEN,
            font=self.font_text,
            wrap="none",
            bd=0,
            highlightthickness=0,
        )
        self.task_text.tag_config("pending", foreground=NEON_GREEN)
        self.task_text.tag_config("completed", foreground=NEON_BLUE, font=self.font_completed)
        self.task_text.tag_config("category", foreground=NEON_YELLOW)
        self.task_text.tag_config("header", foreground=NEON_PINK)
        self.task_text.grid(row=1, column=0, sticky="nsew", padx=8)
        self.task_text.configure(state="disabled")

        task_scroll = tk.Scrollbar(tasks_frame, command=self.task_text.yview)
        task_scroll.grid(row=1, column=1, sticky="ns")
        self.task_text.configure(yscrollcommand=task_scroll.set)

        input_frame = tk.Frame(tasks_frame, bg=COLOR_BG)
        input_frame.grid(row=2, column=0, columnspan=2, sticky="ew", padx=8, pady=6)
        input_frame.grid_columnconfigure(0, weight=1)

        self.todo_var = tk.StringVar()
        self.todo_entry = tk.Entry(
            input_frame,
            textvariable=self.todo_var,
            font=self.font_text,
            bg=COLOR_BG,
            fg=NEON_GREEN,
            insertbackground=NEON_GREEN,
            relief="flat",
            highlightthickness=1,
            highlightbackground=NEON_BLUE,
        )
        self.todo_entry.grid(row=0, column=0, sticky="ew", padx=(0, 6))

        self.category_var = tk.StringVar()
        self.category_box = ttk.Combobox(input_frame, textvariable=self.category_var, width=14)
        self.category_box.grid(row=0, column=1, padx=2)

        self._create_button(input_frame, "Add", self._on_add, NEON_GREEN).grid(row=0, column=2, padx=2)

        controls = tk.Frame(tasks_frame, bg=COLOR_BG)
        controls.grid(row=3, column=0, columnspan=2, sticky="ew", padx=8, pady=(0, 6))

        self.show_completed_button = self._create_button(
            controls, "Show Completed", self._on_toggle_show_completed, NEON_YELLOW
        )
        self.show_completed_button.grid(row=0, column=0, padx=2)
        self.sort_button = self._create_button(controls, "Sort by Category", self._on_sort_by_category, NEON_BLUE)
        self.sort_button.grid(row=0, column=1, padx=2)

        self.filter_var = tk.StringVar(value=str(self.filter_category))
        self.filter_box = ttk.Combobox(controls, textvariable=self.filter_var, state="readonly", width=16)
        self.filter_box.grid(row=0, column=2, padx=2)

        self.status_label = tk.Label(
            tasks_frame,
            text="",
            font=self.font_small,
            bg=COLOR_BG,
            fg=DIM_TEXT,
            anchor="w",
        )
        self.status_label.grid(row=4, column=0, columnspan=2, sticky="ew", padx=8, pady=(0, 6))

        cal_frame = tk.Frame(self, bg=COLOR_BG, highlightthickness=1, highlightbackground=NEON_BLUE)
        cal_frame.grid(row=0, column=1, sticky="nsew", padx=(10, 20), pady=20)
        cal_frame.grid_rowconfigure(1, weight=1)
        cal_frame.grid_columnconfigure(0, weight=1)

        tk.Label(
            cal_frame,
            text="Calendar:",
            font=self.font_title,
            bg=COLOR_BG,
            fg=NEON_BLUE,
        ).grid(row=0, column=0, sticky="w", padx=8, pady=(6, 4))

        today = date.today()
        self.calendar = Calendar(
            cal_frame,
            selectmode="day",
            year=today.year,
            month=today.month,
            day=today.day,
            font=self.font_small,
            background=COLOR_BG,
            foreground=NEON_GREEN,
            bordercolor=NEON_BLUE,
            headersbackground=COLOR_BG,
            headersforeground=NEON_PINK,
            selectbackground=NEON_PINK,
            selectforeground=COLOR_BG,
            normalbackground=COLOR_BG,
            normalforeground=NEON_GREEN,
            weekendbackground=COLOR_BG,
            weekendforeground=NEON_YELLOW,
            othermonthbackground=COLOR_BG,
            othermonthforeground=NEON_BLUE,
            showweeknumbers=False,
        )
        self.calendar.grid(row=1, column=0, sticky="nsew", padx=10, pady=(0, 10))

        self.selected_date_label = tk.Label(
            cal_frame,
            text=f"Selected: {self._format_date(today)}",
            font=self.font_small,
            bg=COLOR_BG,
            fg=DIM_TEXT,
        )
        self.selected_date_label.grid(row=2, column=0, sticky="ew", pady=(2, 8))

    def _bind_events(self):
        self.todo_entry.bind("<Return>", self._on_add)
        self.category_box.bind("<KeyRelease>", self._on_category_typed)
        self.filter_box.bind("<<ComboboxSelected>>", self._on_filter_selected)
        self.calendar.bind("<<CalendarSelected>>", self._on_calendar_selected)
        self.after(100, self.todo_entry.focus_set)

    def _create_button(self, parent, text, command, accent):
        return tk.Button(
            parent,
            text=text,
            command=command,
            font=self.font_small,
            bg=COLOR_BG,
            fg=accent,
            activebackground=accent,
            activeforeground=COLOR_BG,
            relief="flat",
            bd=0,
            highlightthickness=1,
            highlightbackground=accent,
            cursor="hand2",
            padx=10,
            pady=4,
        )

    def _format_date(self, value):
        if not value:
            return "--.--"
        return value.strftime("%d.%m.%Y")

    def _set_status(self, message, tag="info"):
        colors = {"info": DIM_TEXT, "success": NEON_GREEN, "error": ERROR_RED}
        self.status_label.configure(text=message, fg=colors.get(tag, DIM_TEXT))

    def _report(self, outcome, success_message):
        if outcome is Outcome.OK:
            self._refresh_all(success_message, "success")
        elif outcome is Outcome.IO_FAILURE:
            self._refresh_all(f"Could not save to {self.store.path}; changes are kept in memory.", "error")
        elif outcome is Outcome.REJECTED_EMPTY:
            self._set_status("Task description is required.", "error")
        else:
            self._set_status("Task not found.", "error")

    def _refresh_all(self, message=None, tag="info"):
        self._update_task_view()
        self._update_choices()
        if message:
            self._set_status(message, tag)

    def _update_choices(self):
        self.category_box.configure(values=category_choices(self.store, self.category_var.get()))
        choices = filter_choices(self.store)
        if self.filter_category not in choices:
            self.filter_category = FilterCategory(None)
        self._filter_choices = choices
        self.filter_box.configure(values=[str(c) for c in choices])
        self.filter_var.set(str(self.filter_category))

    def _update_task_view(self):
        rows = display_rows(self.store, self.show_completed, self.filter_category.value)
        for button in self._row_buttons:
            button.destroy()
        self._row_buttons = []

        self.task_text.configure(state="normal")
        self.task_text.delete("1.0", "end")
        header = f"Filter: {self.filter_category}"
        self.task_text.insert("end", header + "\n", "header")
        self.task_text.insert("end", "=" * max(10, len(header)) + "\n", "header")

        for store_index, check, description, category in rows:
            accent = NEON_BLUE if check == "[x]" else NEON_GREEN
            button = self._create_button(
                self.task_text, check, lambda i=store_index: self._on_toggle_task(i), accent
            )
            button.configure(padx=4, pady=0)
            self._row_buttons.append(button)
            self.task_text.window_create("end", window=button, padx=2, pady=1)
            status_tag = "completed" if check == "[x]" else "pending"
            self.task_text.insert("end", f" {description} ", status_tag)
            self.task_text.insert("end", f"{category}\n", "category")

        if not rows:
            self.task_text.insert("end", "No tasks found.\n", "pending")
        self.task_text.configure(state="disabled")

    def _on_add(self, _event=None):
        outcome = self.store.add(self.todo_var.get(), self.category_var.get())
        if outcome in (Outcome.OK, Outcome.IO_FAILURE):
            self.todo_var.set("")
            self.category_var.set("")
        self._report(outcome, "Task added.")

    def _on_category_typed(self, _event=None):
        self.category_box.configure(values=category_choices(self.store, self.category_var.get()))

    def _on_toggle_task(self, store_index):
        self._report(self.store.toggle_completed(store_index), "Task updated.")

    def _on_toggle_show_completed(self):
        self.show_completed = not self.show_completed
        self.show_completed_button.configure(text="Hide Completed" if self.show_completed else "Show Completed")
        self._update_task_view()

    def _on_sort_by_category(self):
        self.sort_by_category = not self.sort_by_category
        self.sort_button.configure(text="Unsort" if self.sort_by_category else "Sort by Category")
        if not self.sort_by_category:
            # insertion order is not kept once sorted
            self._update_task_view()
            return
        self._report(self.store.sort_by_category(), "Sorted by category.")

    def _on_filter_selected(self, _event=None):
        index = self.filter_box.current()
        self.filter_category = self._filter_choices[index] if index >= 0 else FilterCategory(None)
        self._update_task_view()

    def _on_calendar_selected(self, _event=None):
        selected = self.calendar.selection_get()
        self.selected_date_label.configure(text=f"Selected: {self._format_date(selected)}")
        logger.debug("Calendar date selected %s", selected)
