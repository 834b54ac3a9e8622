from pathlib import Path

from quagga.concatenate import apply_file_template


def test_apply_file_template():
    item_template = "File: <file-path>\nContent:\n<file-content>\n---"
    files = [(Path("file1.txt"), "Hello"), (Path("file2.txt"), "World!")]

    result = apply_file_template(item_template, files)

    assert len(result) == 2
    assert result[0] == "File: file1.txt\nContent:\nHello\n---"
    assert result[1] == "File: file2.txt\nContent:\nWorld!\n---"


def test_apply_file_template_no_files():
    assert apply_file_template("File: <file-path>", []) == []


def test_apply_file_template_repeated_tags():
    result = apply_file_template("<file-path>|<file-path>|<file-content>", [("a.txt", "x")])
    assert result == ["a.txt|a.txt|x"]


def test_apply_file_template_content_is_not_rescanned_for_path_tag():
    result = apply_file_template("<file-path>: <file-content>", [("a.txt", "<file-path>")])
    assert result == ["a.txt: <file-path>"]


def test_apply_file_template_without_tags():
    result = apply_file_template("static", [("a.txt", "one"), ("b.txt", "two")])
    assert result == ["static", "static"]