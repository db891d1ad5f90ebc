import pytest

from practicals.adapters.fs.filestore import FileSystemStore


@pytest.fixture
def store(tmp_path):
    return FileSystemStore(str(tmp_path / "store"))


def test_creates_base_dir(tmp_path):
    FileSystemStore(str(tmp_path / "new" / "dir"))
    assert (tmp_path / "new" / "dir").is_dir()


def test_save_and_read(store):
    store.save("test.txt", b"hello world")
    assert store.get("test.txt") == b"hello world"
    assert store.read_text("test.txt") == "hello world"


def test_overwrite(store):
    store.save("overwrite.txt", b"v1")
    store.save("overwrite.txt", b"v2")
    assert store.get("overwrite.txt") == b"v2"


def test_delete(store):
    store.save("zombie.txt", b"brains")
    assert store.delete("zombie.txt") is True
    assert store.delete("zombie.txt") is False
    with pytest.raises(FileNotFoundError):
        store.get("zombie.txt")


def test_path_traversal(store):
    with pytest.raises(ValueError):
        store.save("../hack.txt", b"bad")

    with pytest.raises(ValueError):
        store.get("/etc/passwd")

    with pytest.raises(ValueError):
        store.stat("..")


def test_stat_reports_size(store):
    store.save("a.log", b"12345")
    info = store.stat("a.log")
    assert info.name == "a.log"
    assert info.size == 5
    assert info.modified.tzinfo is not None


def test_stat_missing(store):
    with pytest.raises(FileNotFoundError):
        store.stat("missing.log")


def test_list_files_skips_directories(store, tmp_path):
    store.save("one.txt", b"1")
    store.save("two.log", b"22")
    (tmp_path / "store" / "subdir").mkdir()
    names = sorted(f.name for f in store.list_files())
    assert names == ["one.txt", "two.log"]


def test_path_for_and_exists(store):
    store.save("x.pdf", b"%PDF")
    assert store.exists("x.pdf")
    assert store.path_for("x.pdf").is_file()
    assert not store.exists("y.pdf")
