import pytest

from todo_app.models import FilterCategory, Outcome, TaskRecord
from todo_app.persistence import load_todos
from todo_app.store import TaskStore, category_choices, display_rows, filter_choices


@pytest.mark.parametrize("description", ["", " ", "   ", "\t", "\n  \t"])
def test_add_whitespace_is_rejected(store, csv_path, description):
    before = [(r.description, r.completed, r.category) for r in store]

    assert store.add(description, "Work") is Outcome.REJECTED_EMPTY
    assert [(r.description, r.completed, r.category) for r in store] == before
    assert not csv_path.exists()


def test_add_trims_and_persists(csv_path):
    store = TaskStore(csv_path)

    assert store.add("  Buy milk  ", " Errands ") is Outcome.OK

    assert store.records == (TaskRecord("Buy milk", False, "Errands"),)
    assert load_todos(csv_path) == [TaskRecord("Buy milk", False, "Errands")]


def test_add_appends_in_insertion_order(csv_path):
    store = TaskStore(csv_path)
    store.add("first")
    store.add("second", "B")
    store.add("third", "A")

    assert [r.description for r in store] == ["first", "second", "third"]
    assert store[0].category == ""


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_toggle_flips_exactly_one_record(store, csv_path, index):
    before = [r.completed for r in store]

    assert store.toggle_completed(index) is Outcome.OK

    after = [r.completed for r in store]
    for i, (old, new) in enumerate(zip(before, after)):
        assert new == (not old if i == index else old)
    assert [r.completed for r in load_todos(csv_path)] == after


@pytest.mark.parametrize("index", [-1, -4, 4, 100])
def test_toggle_invalid_index_is_noop(store, csv_path, index):
    before = [(r.description, r.completed) for r in store]

    assert store.toggle_completed(index) is Outcome.INDEX_OUT_OF_RANGE

    assert [(r.description, r.completed) for r in store] == before
    assert not csv_path.exists()


def test_toggle_twice_restores_flag(store):
    store.toggle_completed(1)
    store.toggle_completed(1)

    assert store[1].completed is True


def test_distinct_categories_sorted_and_deduplicated(store):
    assert store.distinct_categories() == ["", "Errands", "Finance"]


def test_distinct_categories_empty_store(csv_path):
    assert TaskStore(csv_path).distinct_categories() == []


def test_sort_by_category_is_stable(csv_path):
    store = TaskStore(
        csv_path,
        [
            TaskRecord("w1", False, "Work"),
            TaskRecord("h1", False, "Home"),
            TaskRecord("w2", True, "Work"),
            TaskRecord("h2", False, "Home"),
            TaskRecord("a1", False, "Admin"),
        ],
    )

    assert store.sort_by_category() is Outcome.OK

    assert [r.description for r in store] == ["a1", "h1", "h2", "w1", "w2"]


def test_sort_by_category_is_persisted(store, csv_path):
    store.sort_by_category()

    assert load_todos(csv_path) == list(store.records)
    assert [r.category for r in load_todos(csv_path)] == ["", "Errands", "Errands", "Finance"]


def test_filtered_view_hides_completed(csv_path):
    store = TaskStore(
        csv_path,
        [TaskRecord("Buy milk", False, "Errands"), TaskRecord("Pay bill", True, "Finance")],
    )

    rows = [(i, r.description, r.category) for i, r in store.filtered_view(show_completed=False)]

    assert rows == [(0, "Buy milk", "Errands")]


def test_filtered_view_by_category_keeps_store_indices(store):
    rows = list(store.filtered_view(show_completed=True, category_filter="Errands"))

    assert [i for i, _ in rows] == [0, 2]
    assert all(r.category == "Errands" for _, r in rows)


def test_filtered_view_empty_category_filter_matches_uncategorized(store):
    rows = list(store.filtered_view(show_completed=True, category_filter=""))

    assert [(i, r.description) for i, r in rows] == [(3, "Stretch")]


def test_filtered_view_combined_filters(store):
    assert list(store.filtered_view(show_completed=False, category_filter="Finance")) == []
    assert [i for i, _ in store.filtered_view(True, "Finance")] == [1]


def test_filtered_view_is_lazy(store):
    view = store.filtered_view(show_completed=True)

    assert next(view)[0] == 0
    assert next(view)[0] == 1


def test_filtered_index_toggles_the_right_record(store):
    index, _ = list(store.filtered_view(False, "Errands"))[1]

    store.toggle_completed(index)

    assert store[2].completed is True
    assert store[0].completed is False


def test_io_failure_keeps_memory_state(tmp_path):
    # a directory cannot be opened for writing
    store = TaskStore(tmp_path)

    assert store.add("Buy milk") is Outcome.IO_FAILURE
    assert store.records == (TaskRecord("Buy milk"),)
    assert store.toggle_completed(0) is Outcome.IO_FAILURE
    assert store[0].completed is True


def test_load_restores_saved_store(store, csv_path):
    store.add("New one", "Work")

    reloaded = TaskStore.load(csv_path)

    assert reloaded.records == store.records


def test_load_missing_file_gives_empty_store(csv_path):
    assert len(TaskStore.load(csv_path)) == 0


def test_category_choices_include_pending_input(store):
    assert category_choices(store, "Work") == ["", "Errands", "Finance", "Work"]
    assert category_choices(store, "Errands") == ["", "Errands", "Finance"]
    assert category_choices(store, "   ") == ["", "Errands", "Finance"]


def test_filter_choices_start_with_all(store):
    choices = filter_choices(store)

    assert choices[0] == FilterCategory(None)
    assert [str(c) for c in choices] == ["All", "", "Errands", "Finance"]


def test_filter_choices_empty_store(csv_path):
    assert filter_choices(TaskStore(csv_path)) == [FilterCategory(None)]


def test_rows_around_invalid_utf8_survive_next_save(csv_path):
    csv_path.write_bytes(b"Buy milk,false,Errands\nbad \xff byte,false,x\nWalk dog,true,\n")
    store = TaskStore.load(csv_path)

    assert store.add("New") is Outcome.OK

    assert load_todos(csv_path) == [
        TaskRecord("Buy milk", False, "Errands"),
        TaskRecord("Walk dog", True, ""),
        TaskRecord("New", False, ""),
    ]


def test_display_rows_carry_toggle_mark_and_store_index(store):
    assert display_rows(store, show_completed=True, category_filter="Finance") == [
        (1, "[x]", "Pay bill", "[Finance]")
    ]
    assert display_rows(store, show_completed=False) == [
        (0, "[ ]", "Buy milk", "[Errands]"),
        (2, "[ ]", "Return parcel", "[Errands]"),
        (3, "[ ]", "Stretch", "[]"),
    ]


def test_display_row_index_toggles_its_record(store):
    index, _, _, _ = display_rows(store, False, "Errands")[1]

    store.toggle_completed(index)

    assert display_rows(store, True, "Errands")[1] == (2, "[x]", "Return parcel", "[Errands]")
