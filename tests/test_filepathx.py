import os

import pytest

from gox.filepathx import WalkOption, dirs, ext, files, generate_dir_names

CHINESE_1 = "中文_ZH (1).txt"
CHINESE_9 = "中文_ZH (9).txt"


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "testdata"
    (root / "1" / "1.1" / "1.1").mkdir(parents=True)
    (root / "1" / "1.1" / "1.1.1").mkdir()
    (root / "2").mkdir()
    (root / "0.txt").write_text("0")
    (root / "1" / CHINESE_1).write_text("a")
    (root / "1" / "1.1" / "1.1.txt").write_text("b")
    (root / "1" / "1.1" / "1.1" / CHINESE_1).write_text("c")
    (root / "1" / "1.1" / "1.1.1" / CHINESE_9).write_text("d")
    (root / "2" / "2.txt").write_text("e")
    return root


def _names(paths):
    return sorted(os.path.basename(path) for path in paths)


def test_dirs_missing_root():
    assert dirs("/a/b", WalkOption()) == []


def test_dirs_filter_func(tree):
    opt = WalkOption(filter_func=lambda path: os.path.basename(path) == "2", recursive=True)
    assert _names(dirs(str(tree), opt)) == ["2"]


def test_dirs_only(tree):
    opt = WalkOption(only=["2"], recursive=True)
    assert _names(dirs(str(tree), opt)) == ["2"]


def test_dirs_except(tree):
    opt = WalkOption(exclude=["2"], recursive=True)
    assert _names(dirs(str(tree), opt)) == sorted(["1", "1.1", "1.1", "1.1.1"])


def test_dirs_recursive(tree):
    opt = WalkOption(recursive=True)
    assert _names(dirs(str(tree), opt)) == sorted(["1", "1.1", "1.1", "2", "1.1.1"])


def test_dirs_not_recursive_gives_full_paths(tree):
    result = dirs(str(tree), WalkOption())
    assert sorted(result) == [os.path.join(str(tree), "1"), os.path.join(str(tree), "2")]


def test_dirs_walk_order_is_depth_first(tree):
    result = dirs(str(tree), WalkOption(recursive=True))
    expected = [
        os.path.join(str(tree), "1"),
        os.path.join(str(tree), "1", "1.1"),
        os.path.join(str(tree), "1", "1.1", "1.1"),
        os.path.join(str(tree), "1", "1.1", "1.1.1"),
        os.path.join(str(tree), "2"),
    ]
    assert result == expected


def test_files_missing_root():
    assert files("/a/b", WalkOption()) == []


def test_files_filter_func(tree):
    opt = WalkOption(filter_func=lambda path: os.path.basename(path) == "2.txt", recursive=True)
    assert _names(files(str(tree), opt)) == ["2.txt"]


def test_files_only(tree):
    opt = WalkOption(only=["2.txt"], recursive=True)
    assert _names(files(str(tree), opt)) == ["2.txt"]


def test_files_only_ignores_case_unless_asked(tree):
    assert _names(files(str(tree), WalkOption(only=["2.TXT"], recursive=True))) == ["2.txt"]
    assert files(str(tree), WalkOption(only=["2.TXT"], recursive=True, case_sensitive=True)) == []


def test_files_except(tree):
    opt = WalkOption(exclude=["2.txt"], recursive=True)
    assert _names(files(str(tree), opt)) == sorted(["1.1.txt", CHINESE_1, CHINESE_1, CHINESE_9, "0.txt"])


def test_files_except_case_sensitive(tree):
    opt = WalkOption(exclude=["2.TXT"], recursive=True, case_sensitive=True)
    assert "2.txt" in _names(files(str(tree), opt))


def test_files_recursive(tree):
    opt = WalkOption(recursive=True)
    assert _names(files(str(tree), opt)) == sorted(
        ["1.1.txt", "2.txt", CHINESE_1, CHINESE_1, CHINESE_9, "0.txt"]
    )


def test_files_not_recursive(tree):
    assert _names(files(str(tree), WalkOption())) == ["0.txt"]


def test_files_deep_directory(tree):
    root = tree / "1" / "1.1" / "1.1"
    assert _names(files(str(root), WalkOption())) == [CHINESE_1]


def test_files_relative_root_keeps_dot_prefix(tree, monkeypatch):
    monkeypatch.chdir(tree.parent)
    result = files("./testdata/1/1.1/1.1", WalkOption())
    expected = "." + os.sep + os.path.join("testdata", "1", "1.1", "1.1", CHINESE_1)
    assert result == [expected]


def test_files_default_option(tree):
    assert _names(files(str(tree))) == ["0.txt"]


@pytest.mark.parametrize(
    "s, n, level, case_sensitive, expected",
    [
        ("abc", 0, 1, True, ["abc"]),
        ("abc", 1, 1, True, ["a"]),
        ("abc", 1, 2, True, ["a", "b"]),
        ("abc", 1, 3, True, ["a", "b", "c"]),
        ("abc", 2, 1, True, ["ab"]),
        ("abc", 2, 2, True, ["ab", "c"]),
        (" a b c ", 2, 2, True, ["ab", "c"]),
        (" a b cdefghijklmn ", 2, 3, True, ["ab", "cd", "ef"]),
        (" a", 12, 3, True, ["a"]),
        (" a中文$b", 12, 3, True, ["ab"]),
    ],
)
def test_generate_dir_names(s, n, level, case_sensitive, expected):
    assert generate_dir_names(s, n, level, case_sensitive) == expected


def test_generate_dir_names_lowers_case():
    assert generate_dir_names("ABcd", 2, 0, False) == ["ab"]


def test_generate_dir_names_empty():
    assert generate_dir_names("", 2, 2, True) == []
    assert generate_dir_names("$中文", 2, 2, True) == []


def test_ext_missing_path():
    assert ext("/a/b", None) == ""


def test_ext_from_url_path():
    assert ext("https://www.example.com/images/photo.jpg", None) == ".jpg"


def test_ext_empty_input():
    assert ext("", None) == ""


@pytest.mark.parametrize(
    "name, content, expected",
    [
        ("2.txt", b"hello world", ".txt"),
        ("data.dat", b"hello world", ".txt"),
        ("1.jpg", b"\xff\xd8\xff\xe0\x00\x10JFIF", ".jpg"),
        ("picture", b"\x89PNG\r\n\x1a\n" + b"\x00" * 16, ".png"),
        ("1.pdf", b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n", ".pdf"),
        ("anim", b"GIF89a\x01\x00\x01\x00", ".gif"),
        ("page", b"  <html><body>hi</body></html>", ".htm"),
        ("song", b"MThd\x00\x00\x00\x06\x00\x01", ".mid"),
        ("book.xlsx", b"PK\x03\x04\x14\x00\x06\x00", ".zip"),
        ("blob.bin", b"\x00\x01\x02\x03junk", ".bin"),
    ],
)
def test_ext_from_file_content(tmp_path, name, content, expected):
    path = tmp_path / name
    path.write_bytes(content)
    assert ext(str(path), None) == expected


def test_ext_from_data_only():
    assert ext("", b"%PDF-1.7") == ".pdf"
    assert ext("", b'<?xml version="1.0"?><a/>') == ".xml"


def test_ext_data_overrides_path():
    assert ext("report.doc", b"\x89PNG\r\n\x1a\n\x00\x00") == ".png"


def test_ext_directory_falls_back_to_name(tmp_path):
    folder = tmp_path / "d.ext"
    folder.mkdir()
    assert ext(str(folder), None) == ".ext"