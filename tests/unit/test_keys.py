"""Tests for key sanitizing and path spec parsing."""

import re

import pytest

from localcache.core.keys import archive_name, parse_restore_keys, resolve_paths, sanitize_key


class TestSanitizeKey:
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("linux-node-abc123", "linux_node_abc123"),
            ("Linux.Node/v1:hash", "Linux_Node_v1_hash"),
            ("plain123", "plain123"),
            ("", ""),
            ("a b\tc\n", "a_b_c_"),
            ("ключ-ü", "______"),
        ],
    )
    def test_replaces_unsafe_characters(self, key: str, expected: str) -> None:
        assert sanitize_key(key) == expected

    @pytest.mark.parametrize("key", ["x", "../../etc/passwd", "日本語 key!", "~$%^&*()"])
    def test_output_is_safe_and_same_length(self, key: str) -> None:
        result = sanitize_key(key)
        assert re.fullmatch(r"[A-Za-z0-9_]*", result)
        assert len(result) == len(key)

    def test_distinct_keys_can_collide(self) -> None:
        assert sanitize_key("a-b") == sanitize_key("a.b")

    def test_archive_name_appends_suffix(self) -> None:
        assert archive_name("linux-node-abc123") == "linux_node_abc123.tar.zst"


class TestResolvePaths:
    def test_single_path(self) -> None:
        assert resolve_paths("/path/to/file") == ["/path/to/file"]

    def test_multiple_lines_keep_order(self) -> None:
        raw = "/path/to/file1\n/path/to/file2\n/path/to/file3"
        assert resolve_paths(raw) == ["/path/to/file1", "/path/to/file2", "/path/to/file3"]

    def test_drops_empty_and_whitespace_lines(self) -> None:
        raw = "/path/to/file1\n\n   \n\t\n/path/to/file2\n"
        assert resolve_paths(raw) == ["/path/to/file1", "/path/to/file2"]

    def test_trims_surrounding_whitespace(self) -> None:
        assert resolve_paths("  node_modules  \r\n  .venv\t") == ["node_modules", ".venv"]

    def test_empty_input(self) -> None:
        assert resolve_paths("") == []
        assert resolve_paths("\n\n") == []


class TestParseRestoreKeys:
    def test_none_and_empty(self) -> None:
        assert parse_restore_keys(None) == []
        assert parse_restore_keys("") == []

    def test_parses_like_paths(self) -> None:
        assert parse_restore_keys("linux-node-\n\n  linux-  \n") == ["linux-node-", "linux-"]
