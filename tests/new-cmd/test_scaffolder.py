"""Tests for scaffold_project: directory tree and file writing."""

import os
from unittest.mock import patch

import pytest

from cppm.errors import FilesystemError, ProjectAlreadyExists
from cppm.language_variant import LanguageVariant
from cppm.new_cmd.project_files import render_project_files
from cppm.new_cmd.scaffolder import ensure_project_absent, scaffold_project
from cppm.project_layout import ProjectLayout


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _scaffold(layout, variant=LanguageVariant.CPP):
    scaffold_project(layout, render_project_files(layout, variant))


@pytest.mark.unit
class TestScaffoldCreatesProject:

    def test_creates_the_four_directories(self, in_tmp_dir):
        _scaffold(ProjectLayout("demo"))

        for name in ("src", "include", "build", "bin"):
            assert (in_tmp_dir / "demo" / name).is_dir()

    def test_writes_rendered_files(self, in_tmp_dir):
        layout = ProjectLayout("demo")
        files = render_project_files(layout, LanguageVariant.CPP)

        scaffold_project(layout, files)

        for rendered in files:
            with open(rendered.target_path, encoding="utf-8") as f:
                assert f.read() == rendered.content

    def test_custom_directory_names(self, in_tmp_dir):
        _scaffold(ProjectLayout("demo", "source", "headers", "out", "dist"), LanguageVariant.C)

        assert sorted(os.listdir(in_tmp_dir / "demo")) == [
            ".gitignore", "CMakeLists.txt", "dist", "headers", "out", "source",
        ]
        assert (in_tmp_dir / "demo" / "source" / "main.c").is_file()

    def test_nested_directory_names_are_created(self, in_tmp_dir):
        _scaffold(ProjectLayout("demo", src_dir_name="code/src"))

        assert (in_tmp_dir / "demo" / "code" / "src" / "main.cpp").is_file()


@pytest.mark.unit
class TestExistingProject:

    def test_existing_directory_is_left_untouched(self, in_tmp_dir):
        (in_tmp_dir / "demo").mkdir()
        (in_tmp_dir / "demo" / "notes.txt").write_text("keep me")

        with pytest.raises(ProjectAlreadyExists) as exc_info:
            _scaffold(ProjectLayout("demo"))

        assert exc_info.value.name == "demo"
        assert os.listdir(in_tmp_dir / "demo") == ["notes.txt"]
        assert (in_tmp_dir / "demo" / "notes.txt").read_text() == "keep me"

    def test_existing_file_is_left_untouched(self, in_tmp_dir):
        (in_tmp_dir / "demo").write_text("a file")

        with pytest.raises(ProjectAlreadyExists):
            _scaffold(ProjectLayout("demo"))

        assert (in_tmp_dir / "demo").read_text() == "a file"

    def test_dangling_symlink_counts_as_existing(self, in_tmp_dir):
        os.symlink(in_tmp_dir / "missing", in_tmp_dir / "demo")

        with pytest.raises(ProjectAlreadyExists):
            ensure_project_absent(ProjectLayout("demo"))


@pytest.mark.unit
class TestFilesystemFailures:

    def test_directory_creation_failure_is_reported(self, in_tmp_dir):
        with patch("cppm.new_cmd.scaffolder.os.makedirs", side_effect=PermissionError("denied")):
            with pytest.raises(FilesystemError) as exc_info:
                _scaffold(ProjectLayout("demo"))

        assert exc_info.value.operation == "create directory 'demo/src'"
        assert isinstance(exc_info.value.cause, PermissionError)

    def test_write_failure_is_reported_without_rollback(self, in_tmp_dir):
        layout = ProjectLayout("demo")
        files = render_project_files(layout, LanguageVariant.CPP)
        # A directory where main.cpp should go makes the last write fail.
        os.makedirs("demo/src/main.cpp")

        with patch("cppm.new_cmd.scaffolder.ensure_project_absent"):
            with pytest.raises(FilesystemError) as exc_info:
                scaffold_project(layout, files)

        assert exc_info.value.operation == "write 'demo/src/main.cpp'"
        assert (in_tmp_dir / "demo" / "CMakeLists.txt").is_file()
        assert (in_tmp_dir / "demo" / "bin").is_dir()
