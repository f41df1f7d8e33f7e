"""Tests for the inspector module."""

import os
from datetime import datetime

from logfiles.inspector import (
    current_target,
    get_rotated_files,
    list_log_files,
    parse_rotation_timestamp,
)


def _touch(directory, name):
    (directory / name).write_text("")


class TestListLogFiles:
    def test_discovers_program_files_and_tag_links(self, tmp_path):
        _touch(tmp_path, "myprog.INFO")
        _touch(tmp_path, "myprog.INFO.20240101-100000")
        _touch(tmp_path, "myprog.ERROR")
        _touch(tmp_path, "other.INFO")
        _touch(tmp_path, "notes.md")
        os.symlink("myprog.INFO", tmp_path / "INFO")
        os.symlink("other.WARNING", tmp_path / "WARNING")

        assert list_log_files(str(tmp_path), "myprog") == [
            "INFO",
            "myprog.ERROR",
            "myprog.INFO",
            "myprog.INFO.20240101-100000",
        ]

    def test_empty_directory(self, tmp_path):
        assert list_log_files(str(tmp_path), "myprog") == []

    def test_missing_directory(self, tmp_path):
        assert list_log_files(str(tmp_path / "nope"), "myprog") == []


class TestGetRotatedFiles:
    def test_returns_only_rotated_files_sorted(self, tmp_path):
        _touch(tmp_path, "myprog.INFO")
        _touch(tmp_path, "myprog.INFO.20240102-090000")
        _touch(tmp_path, "myprog.INFO.20240101-100000")
        _touch(tmp_path, "myprog.ERROR.20240101-100000")
        _touch(tmp_path, "myprog.INFO.garbage")

        assert get_rotated_files(str(tmp_path), "myprog", "INFO") == [
            "myprog.INFO.20240101-100000",
            "myprog.INFO.20240102-090000",
        ]


class TestParseRotationTimestamp:
    def test_valid_name(self):
        ts = parse_rotation_timestamp("myprog.INFO.20240101-100005", "myprog", "INFO")
        assert ts == datetime(2024, 1, 1, 10, 0, 5)

    def test_current_file(self):
        assert parse_rotation_timestamp("myprog.INFO", "myprog", "INFO") is None

    def test_other_tag(self):
        assert parse_rotation_timestamp("myprog.ERROR.20240101-100005", "myprog", "INFO") is None

    def test_bad_timestamp(self):
        assert parse_rotation_timestamp("myprog.INFO.not-a-time", "myprog", "INFO") is None


class TestCurrentTarget:
    def test_symlink(self, tmp_path):
        os.symlink("myprog.INFO", tmp_path / "INFO")
        assert current_target(str(tmp_path), "INFO") == "myprog.INFO"

    def test_regular_file(self, tmp_path):
        _touch(tmp_path, "INFO")
        assert current_target(str(tmp_path), "INFO") is None

    def test_missing(self, tmp_path):
        assert current_target(str(tmp_path), "INFO") is None
