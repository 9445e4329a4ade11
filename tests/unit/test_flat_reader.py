"""Tests for the flat-file project reader."""
import pytest

from planner.errors import FileAccessError, ParseError
from planner.readers.flat_reader import FlatFileProjectReader


class TestFlatFileProjectReader:

    def test_load_sample_files(self, input_dir):
        project = FlatFileProjectReader().load(str(input_dir / "tasks.txt"), str(input_dir / "resources.txt"))
        assert list(project.tasks) == [1, 2]
        assert project.get_task(2).dependencies == [1]
        assert list(project.resources) == ["Alice", "Bob"]
        assert project.get_resource("Bob").task_allocations == {2: 100, 1: 25}
        assert project.project_name == "tasks"

    def test_missing_tasks_file(self, input_dir):
        with pytest.raises(FileAccessError) as exc_info:
            FlatFileProjectReader().load(str(input_dir / "nope.txt"), str(input_dir / "resources.txt"))
        assert exc_info.value.file_path.endswith("nope.txt")

    def test_missing_resources_file(self, input_dir):
        with pytest.raises(FileAccessError):
            FlatFileProjectReader().load(str(input_dir / "tasks.txt"), str(input_dir / "nope.txt"))

    def test_file_access_error_is_os_error(self, tmp_path):
        with pytest.raises(OSError):
            FlatFileProjectReader().read_tasks(str(tmp_path / "missing.txt"))

    def test_malformed_line_aborts_with_location(self, tmp_path):
        tasks_file = tmp_path / "tasks.txt"
        tasks_file.write_text(
            "1, Design, 20240101+0900, 20240101+1700\n"
            "two, Review, 20240101+1600, 20240101+1800\n"
            "3, Build, 20240102+0900, 20240104+1700\n",
            encoding="utf-8",
        )
        with pytest.raises(ParseError) as exc_info:
            FlatFileProjectReader().read_tasks(str(tasks_file))
        assert exc_info.value.line_number == 2
        assert exc_info.value.file_path == str(tasks_file)
        assert "línea 2" in str(exc_info.value)

    def test_malformed_allocation_aborts(self, input_dir):
        (input_dir / "resources.txt").write_text("Alice, 1:50\nBob, 2-100\n", encoding="utf-8")
        with pytest.raises(ParseError) as exc_info:
            FlatFileProjectReader().load(str(input_dir / "tasks.txt"), str(input_dir / "resources.txt"))
        assert exc_info.value.line_number == 2

    def test_blank_lines_and_crlf(self, tmp_path):
        tasks_file = tmp_path / "tasks.txt"
        tasks_file.write_bytes(
            b"1, Design, 20240101+0900, 20240101+1700\r\n\r\n2, Review, 20240101+1600, 20240101+1800\r\n"
        )
        tasks = FlatFileProjectReader().read_tasks(str(tasks_file))
        assert [t.title for t in tasks] == ["Design", "Review"]

    def test_title_may_contain_unicode_line_separators(self, tmp_path):
        tasks_file = tmp_path / "tasks.txt"
        tasks_file.write_text(
            "1, Design\u2028Phase\x85A, 20240101+0900, 20240101+1700\n"
            "2, Review, 20240101+1600, 20240101+1800\n",
            encoding="utf-8",
        )
        tasks = FlatFileProjectReader().read_tasks(str(tasks_file))
        assert [t.title for t in tasks] == ["Design\u2028Phase\x85A", "Review"]

    def test_duplicate_keys_last_wins(self, tmp_path):
        (tmp_path / "tasks.txt").write_text(
            "1, Design, 20240101+0900, 20240101+1700\n"
            "1, Redesign, 20240101+0900, 20240101+1000\n",
            encoding="utf-8",
        )
        (tmp_path / "resources.txt").write_text("Alice, 1:50\nAlice, 1:100\n", encoding="utf-8")
        project = FlatFileProjectReader().load(str(tmp_path / "tasks.txt"), str(tmp_path / "resources.txt"))
        assert project.get_task(1).title == "Redesign"
        assert project.get_resource("Alice").task_allocations == {1: 100}

    def test_verbose_prints_progress(self, input_dir, capsys):
        FlatFileProjectReader(verbose=True).load(str(input_dir / "tasks.txt"), str(input_dir / "resources.txt"))
        out = capsys.readouterr().out
        assert "Info (FlatReader): 2 tareas leídas" in out
