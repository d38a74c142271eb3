import pytest

from minidrive.remote_paths import (
    join_remote_path,
    normalize_remote,
    remote_parent_directory,
    resolve_remote_path,
)

SAMPLE_PATHS = [
    "docs",
    "docs/",
    "./docs/./notes.txt",
    "a//b///c",
    "a/b/../c",
    "a/b/../..",
    "../x/..",
    "/abs/../root/file.bin",
    "/..",
    "uploads/file.bin",
]


@pytest.mark.parametrize("path", ["", ".", "./", "a/..", "a/b/../../"])
def test_normalize_to_current_directory(path):
    assert normalize_remote(path) == "."


def test_normalize_keeps_simple_name():
    assert normalize_remote("docs") == "docs"


def test_normalize_resolves_parent_reference():
    assert normalize_remote("a/b/../c") == "a/c"


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_normalize_is_idempotent(path):
    once = normalize_remote(path)
    assert normalize_remote(once) == once


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_normalize_removes_redundant_parts(path):
    result = normalize_remote(path)
    assert "//" not in result
    assert "/./" not in result
    assert not result.startswith("./") or result == "."


@pytest.mark.parametrize("path", ["/abs/../root/file.bin", "/..", "/x/y"])
def test_normalize_keeps_absolute_paths_absolute(path):
    assert normalize_remote(path).startswith("/")


def test_resolve_empty_returns_cwd():
    assert resolve_remote_path("docs/reports", "") == "docs/reports"


def test_resolve_from_current_directory():
    assert resolve_remote_path(".", "notes.txt") == "notes.txt"


def test_resolve_absolute_ignores_cwd():
    assert resolve_remote_path("docs", "/abs/x/../y") == normalize_remote("/abs/x/../y")


def test_resolve_parent_of_cwd():
    assert resolve_remote_path("docs", "..") == "."


def test_resolve_relative_matches_join():
    assert resolve_remote_path("docs", "reports/q1") == join_remote_path("docs", "reports/q1")


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_resolve_result_is_normalized(path):
    resolved = resolve_remote_path("base/dir", path)
    assert normalize_remote(resolved) == resolved


@pytest.mark.parametrize("relative", ["", "."])
def test_join_with_current_returns_root_unchanged(relative):
    assert join_remote_path("a//b", relative) == "a//b"


def test_join_nested_relative():
    assert join_remote_path("docs", "a/b") == "docs/a/b"


def test_join_escaping_root_normalizes():
    assert join_remote_path("docs", "..") == "."


@pytest.mark.parametrize("path", ["notes.txt", "./notes.txt", "a/../notes.txt"])
def test_parent_of_top_level_entry_is_none(path):
    assert remote_parent_directory(normalize_remote(path)) is None


def test_parent_of_unnormalized_current_prefix_is_none():
    assert remote_parent_directory("./notes.txt") is None


def test_parent_of_nested_entry():
    assert remote_parent_directory(join_remote_path("uploads", "file.bin")) == "uploads"


@pytest.mark.parametrize("root", ["docs", "docs/deep/tree", "/abs"])
def test_parent_inverts_join(root):
    child = join_remote_path(root, "entry.bin")
    assert remote_parent_directory(child) == normalize_remote(root)


def test_parent_ignores_duplicate_separators():
    assert remote_parent_directory("uploads//file.bin") == "uploads"