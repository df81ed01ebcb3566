import pytest

from libstock.records import RecordStore, file_operations_menu


def make_io(lines):
    feed = iter(lines)
    out = []

    def read_line():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read_line, out.append, out


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path / "inventory.txt")


def test_add_and_lines_round_trip(store):
    store.add("101|Book Title|5")
    store.add("102|Other|1")
    assert store.lines() == ["101|Book Title|5", "102|Other|1"]
    assert store.read() == "101|Book Title|5\n102|Other|1\n"


def test_update_replaces_matching_record(store):
    store.add("101|Old|5")
    store.add("102|Keep|1")
    assert store.update("101", "101|New|9") is True
    assert store.lines() == ["101|New|9", "102|Keep|1"]


def test_update_missing_id_leaves_file(store):
    store.add("101|Old|5")
    assert store.update("999", "999|X|1") is False
    assert store.lines() == ["101|Old|5"]


def test_update_removes_temp_file(store):
    store.add("1|a")
    store.update("1", "1|b")
    assert not store.temp_path.exists()
    assert store.temp_path.name == "temp.txt"


def test_delete_removes_all_matches(store):
    store.add("1|a")
    store.add("2|b")
    store.add("1|c")
    assert store.delete("1") is True
    assert store.lines() == ["2|b"]


def test_delete_not_found(store):
    store.add("1|a")
    assert store.delete("3") is False
    assert store.lines() == ["1|a"]


def test_leading_separators_are_skipped(store):
    store.add("|7|x")
    assert store.delete("7") is True
    assert store.lines() == []


def test_line_without_separator_keeps_newline_in_id(store):
    store.add("101")
    assert store.delete("101") is False
    assert store.lines() == ["101"]


def test_id_must_match_whole_field(store):
    store.add("10|a")
    assert store.update("1", "1|b") is False
    assert store.lines() == ["10|a"]


def test_missing_file_raises(store):
    with pytest.raises(FileNotFoundError):
        store.read()
    with pytest.raises(FileNotFoundError):
        store.update("1", "1|a")
    with pytest.raises(FileNotFoundError):
        store.delete("1")


def test_menu_add_read_update_delete(store):
    read_line, write, out = make_io(
        ["1", "5|Dune|2", "1", "6|Emma|4", "3", "5", "5|Dune|8", "4", "6", "2", "5"]
    )
    file_operations_menu(store, read_line, write)
    text = "".join(out)
    assert store.lines() == ["5|Dune|8"]
    assert "Data added successfully." in text
    assert "Record updated successfully." in text
    assert "Record deleted successfully." in text
    assert text.endswith("Returning to Main Menu...\n")


def test_menu_reports_missing_record_and_invalid_choice(store):
    store.add("1|a")
    read_line, write, out = make_io(["9", "4", "42", "5"])
    file_operations_menu(store, read_line, write)
    text = "".join(out)
    assert "Invalid choice! Please try again." in text
    assert "Record not found." in text
    assert store.lines() == ["1|a"]


def test_menu_stops_at_end_of_input(store):
    read_line, write, out = make_io(["1", "3|x"])
    file_operations_menu(store, read_line, write)
    assert store.lines() == ["3|x"]