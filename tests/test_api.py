"""Tests for the process-wide create/open functions."""

import os

import pytest

import logfiles
from logfiles.config import Config


class TestDefaultManager:
    def test_built_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        monkeypatch.setenv("LOG_PROGRAM", "envprog")
        f, filename = logfiles.create_log_file("INFO")
        f.close()
        assert filename == str(tmp_path / "envprog.INFO")

    def test_same_manager_returned(self):
        assert logfiles.get_manager() is logfiles.get_manager()

    def test_resolves_once_per_process(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "first"))
        first = logfiles.get_manager().log_dirs()
        monkeypatch.setenv("LOG_DIR", str(tmp_path / "second"))
        assert logfiles.get_manager().log_dirs() == first == (str(tmp_path / "first"),)

    def test_configure_replaces_manager(self, tmp_path):
        manager = logfiles.configure(Config(log_dir=str(tmp_path), program="myprog"))
        assert logfiles.get_manager() is manager
        assert manager.program == "myprog"
        assert manager.log_dirs() == (str(tmp_path),)

    def test_program_defaults_to_argv0(self, tmp_path, monkeypatch):
        monkeypatch.setattr("sys.argv", ["/opt/bin/server"])
        manager = logfiles.configure(Config(log_dir=str(tmp_path)))
        assert manager.program == "server"


class TestCreateThenOpen:
    def test_round_trip(self, tmp_path):
        logfiles.configure(Config(log_dir=str(tmp_path), program="myprog"))
        f, filename = logfiles.create_log_file("ERROR")
        f.close()
        with logfiles.open_existing_log_file("ERROR") as f:
            f.write("disk full\n")
        with open(filename) as fh:
            assert fh.read() == "disk full\n"
        assert os.readlink(tmp_path / "ERROR") == "myprog.ERROR"

    def test_open_without_create(self, tmp_path):
        logfiles.configure(Config(log_dir=str(tmp_path), program="myprog"))
        with pytest.raises(logfiles.NotFoundError) as exc_info:
            logfiles.open_existing_log_file("ERROR")
        assert exc_info.value.tag == "ERROR"
