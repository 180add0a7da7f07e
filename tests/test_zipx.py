import os
import zipfile

import pytest

from gox.zipx import compress, uncompress

CONTENTS = {
    os.path.join("testdata", "a", "a.txt"): "a text",
    os.path.join("testdata", "b", "b.txt"): "b text",
    os.path.join("testdata", "中国", "你好.txt"): "你好",
}


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    for relative, text in CONTENTS.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _relative_files():
    return ["./" + relative.replace(os.sep, "/") for relative in CONTENTS]


def test_compress_compact_directory(workdir):
    compress("./a.zip", _relative_files(), zipfile.ZIP_DEFLATED, True)
    with zipfile.ZipFile("a.zip") as archive:
        assert sorted(archive.namelist()) == ["a.txt", "b.txt", "你好.txt"]
        assert archive.read("你好.txt").decode("utf-8") == "你好"
        assert archive.getinfo("a.txt").compress_type == zipfile.ZIP_DEFLATED


def test_compress_keeps_directories(workdir):
    compress("./a.zip", _relative_files(), zipfile.ZIP_DEFLATED, False)
    with zipfile.ZipFile("a.zip") as archive:
        assert sorted(archive.namelist()) == sorted(
            ["testdata/a/a.txt", "testdata/b/b.txt", "testdata/中国/你好.txt"]
        )
        assert archive.read("testdata/b/b.txt") == b"b text"


def test_compress_stored_method(workdir):
    compress("./a.zip", _relative_files(), zipfile.ZIP_STORED, True)
    with zipfile.ZipFile("a.zip") as archive:
        assert {info.compress_type for info in archive.infolist()} == {zipfile.ZIP_STORED}


def test_compress_missing_files(workdir):
    missing = [f"{i}-not-exists.file" for i in range(101)]
    with pytest.raises(FileNotFoundError):
        compress("./a.zip", missing, zipfile.ZIP_DEFLATED, True)
    with zipfile.ZipFile("a.zip") as archive:
        assert archive.namelist() == []


def test_compress_unsupported_method(workdir):
    with pytest.raises(ValueError):
        compress("./a.zip", _relative_files(), 99, True)


def test_uncompress_round_trip(workdir):
    compress("./a.zip", _relative_files(), zipfile.ZIP_DEFLATED, False)
    archive_path = workdir / "a.zip"
    target = workdir / "a"
    uncompress(archive_path, target)
    for relative, text in CONTENTS.items():
        assert (target / relative).read_text(encoding="utf-8") == text


def test_uncompress_creates_nested_destination(workdir):
    compress("./a.zip", _relative_files(), zipfile.ZIP_DEFLATED, True)
    archive_path = workdir / "a.zip"
    target = workdir / "out" / "deep" / "er"
    uncompress(archive_path, target)
    assert sorted(entry.name for entry in target.iterdir()) == ["a.txt", "b.txt", "你好.txt"]


def test_uncompress_directory_entries(tmp_path):
    archive_path = tmp_path / "dirs.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        archive.writestr("empty/", b"")
        archive.writestr("x/y/z.txt", b"zz")
    target = tmp_path / "out"
    uncompress(archive_path, target)
    assert (target / "empty").is_dir()
    assert (target / "x" / "y" / "z.txt").read_bytes() == b"zz"


def test_uncompress_missing_archive(tmp_path):
    with pytest.raises(FileNotFoundError):
        uncompress(tmp_path / "missing.zip", tmp_path / "out")


def test_uncompress_rejects_escaping_entry(tmp_path):
    archive_path = tmp_path / "bad.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        archive.writestr(zipfile.ZipInfo("../evil.txt"), b"evil")
    with pytest.raises(ValueError):
        uncompress(archive_path, tmp_path / "out")
    assert not (tmp_path / "evil.txt").exists()