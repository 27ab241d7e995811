import os
import zipfile

import pytest

from anttools.archive import add_file_to_zip, create, unzip


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "test.txt").write_text("first file")
    (tmp_path / "test2.txt").write_text("second file")
    return tmp_path


def test_create_stores_files_under_given_names(workdir):
    files = ["test.txt", "test2.txt"]
    create("done.zip", files)
    with zipfile.ZipFile("done.zip") as archive:
        assert archive.namelist() == files
        assert all(i.compress_type == zipfile.ZIP_DEFLATED for i in archive.infolist())
        assert archive.read("test.txt") == b"first file"


def test_zip_then_unzip_round_trip(workdir):
    files = ["test.txt", "test2.txt"]
    create("done.zip", files)
    extracted = unzip("done.zip", "done")
    assert extracted == [os.path.join("done", "test.txt"), os.path.join("done", "test2.txt")]
    assert (workdir / "done" / "test.txt").read_text() == "first file"
    assert (workdir / "done" / "test2.txt").read_text() == "second file"


def test_create_missing_file_raises(workdir):
    with pytest.raises(FileNotFoundError):
        create("done.zip", ["test.txt", "missing.txt"])


def test_add_file_to_open_archive(workdir):
    with zipfile.ZipFile("one.zip", "w") as archive:
        add_file_to_zip(archive, "test2.txt")
    with zipfile.ZipFile("one.zip") as archive:
        assert archive.read("test2.txt") == b"second file"


def test_unzip_rejects_path_outside_destination(workdir):
    with zipfile.ZipFile("evil.zip", "w") as archive:
        archive.writestr("../evil.txt", "bad")
    with pytest.raises(ValueError, match="illegal file path"):
        unzip("evil.zip", "out")
    assert not (workdir / "evil.txt").exists()


def test_unzip_creates_directories(workdir):
    with zipfile.ZipFile("tree.zip", "w") as archive:
        archive.writestr("sub/", "")
        archive.writestr("sub/inner/a.txt", "content")
    extracted = unzip("tree.zip", "out")
    assert extracted == [os.path.join("out", "sub"), os.path.join("out", "sub", "inner", "a.txt")]
    assert (workdir / "out" / "sub").is_dir()
    assert (workdir / "out" / "sub" / "inner" / "a.txt").read_text() == "content"