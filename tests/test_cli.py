import io

from libstock.catalog import Category, CategoryRegistry, Supplier, SupplierRegistry
from libstock.cli import catalog_main, main
from libstock.inventory import Book, Inventory
from libstock.users import User, UserStore


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def _args(tmp_path):
    return ["--data-dir", str(tmp_path)]


def test_main_exit(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "6\n")
    code = main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "===== Library Inventory System =====" in out
    assert out.endswith("Exiting program.\n")


def test_main_invalid_choice(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "9\n6\n")
    code = main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Invalid choice. Please try again.\n" in out


def test_main_end_of_input(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "")
    code = main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Exiting program." not in out


def test_main_users(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "4\n1\n1\n7 bob bob@example.com staff\n5\n3\n6\n")
    code = main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "User/Transaction Module (Role 4)" in out
    assert UserStore(tmp_path / "users.txt").load() == [
        User(7, "bob", "bob@example.com", "staff")
    ]


def test_main_inventory(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "2\n1\n12\nDune\n2\n7\n6\n")
    code = main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Inventory Module (Role 2)" in out
    assert Inventory(tmp_path / "inventory.txt").books() == [Book(12, "Dune", 2)]


def test_main_file_operations(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "5\n1\n1|x|2\n5\n6\n")
    code = main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Data added successfully.\n" in out
    assert (tmp_path / "inventory.txt").read_text() == "1|x|2\n"


def test_catalog_add_and_view_category(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "1\n1\n3\nFiction\n2\n5\n3\n")
    code = catalog_main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Added.\n" in out
    assert "ID: 3 | Name: Fiction\n" in out
    assert CategoryRegistry(tmp_path / "categories.txt").categories() == [
        Category(3, "Fiction")
    ]


def test_catalog_update_category_not_found(monkeypatch, capsys, tmp_path):
    registry = CategoryRegistry(tmp_path / "categories.txt")
    registry.add(Category(1, "Poetry"))
    _feed(monkeypatch, "1\n3\n9\n5\n3\n")
    code = catalog_main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "ID not found.\n" in out
    assert "New Name:" not in out
    assert registry.categories() == [Category(1, "Poetry")]


def test_catalog_update_category(monkeypatch, capsys, tmp_path):
    registry = CategoryRegistry(tmp_path / "categories.txt")
    registry.add(Category(1, "Poetry"))
    _feed(monkeypatch, "1\n3\n1\nDrama\n5\n3\n")
    code = catalog_main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Updated.\n" in out
    assert registry.categories() == [Category(1, "Drama")]


def test_catalog_update_without_file_is_silent(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "1\n3\n5\n3\n")
    code = catalog_main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Category ID to update" not in out
    assert not (tmp_path / "categories.txt").exists()


def test_catalog_add_and_view_supplier(monkeypatch, capsys, tmp_path):
    _feed(monkeypatch, "2\n1\n4\nAcme\next-12\nsales@example.com\n2\n5\n3\n")
    code = catalog_main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "ID: 4 | Name: Acme | Phone: ext-12 | Email: sales@example.com\n" in out
    assert SupplierRegistry(tmp_path / "suppliers.txt").suppliers() == [
        Supplier(4, "Acme", "ext-12", "sales@example.com")
    ]


def test_catalog_delete_supplier(monkeypatch, capsys, tmp_path):
    registry = SupplierRegistry(tmp_path / "suppliers.txt")
    registry.add(Supplier(4, "Acme", "ext-12", "sales@example.com"))
    _feed(monkeypatch, "2\n4\n4\n5\n3\n")
    code = catalog_main(_args(tmp_path))
    out = capsys.readouterr().out
    assert code == 0
    assert "Deleted.\n" in out
    assert registry.suppliers() == []