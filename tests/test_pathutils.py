from ogbcore.pathutils import (
    get_directory_of,
    get_file_extension,
    get_file_name_excluding_extension,
    get_file_name_including_extension,
)


def test_extension_includes_dot():
    assert get_file_extension("dir/file.txt") == ".txt"


def test_extension_missing():
    assert get_file_extension("dir/file") == ""


def test_extension_dot_in_directory_only():
    assert get_file_extension("dir.d/file") == ""
    assert get_file_extension("dir.d\\file") == ""


def test_extension_empty_path():
    assert get_file_extension("") == ""


def test_extension_is_suffix():
    path = "a/b/archive.tar.gz"
    ext = get_file_extension(path)
    assert path.endswith(ext)
    assert ext.startswith(".")
    assert ext.count(".") == 1


def test_name_including_extension():
    assert get_file_name_including_extension("a/b/file.txt") == "file.txt"


def test_name_with_other_separators():
    for path in ("C:file.bin", "a\\b\\file.bin"):
        name = get_file_name_including_extension(path)
        assert path.endswith(name)
        assert not any(sep in name for sep in "/\\:")
        assert len(name) > 0


def test_name_without_separator_is_whole_path():
    assert get_file_name_including_extension("plain.txt") == "plain.txt"


def test_name_with_trailing_separator_is_whole_path():
    assert get_file_name_including_extension("dir/") == "dir/"


def test_name_empty():
    assert get_file_name_including_extension("") == ""


def test_name_excluding_extension_drops_last_only():
    assert get_file_name_excluding_extension("dir/archive.tar.gz") == "archive.tar"


def test_name_excluding_extension_keeps_leading_dot():
    assert get_file_name_excluding_extension("home/.bashrc") == ".bashrc"


def test_name_excluding_extension_without_extension():
    assert get_file_name_excluding_extension("dir/README") == "README"


def test_directory_of():
    path = "a/b/c.txt"
    directory = get_directory_of(path)
    assert path.startswith(directory)
    assert path[len(directory)] == "/"
    assert "c.txt" not in directory


def test_directory_of_without_separator():
    assert get_directory_of("file.txt") == ""


def test_directory_of_root_file():
    assert get_directory_of("/file.txt") == ""


def test_directory_of_empty():
    assert get_directory_of("") == ""