from pathlib import Path

import pytest

from snippetdocs.errors import DirectoryCreationError
from snippetdocs.pipeline.writer import DocumentWriter, ensure_directory
from snippetdocs.settings import Settings

XML = '<?xml version="1.0" encoding="UTF-8"?>\n<section>\n<title>Ünïcode & co</title>\n</section>\n'


def test_write_creates_directory_and_file(tmp_path: Path):
    out_dir = tmp_path / "src" / "docbkx" / "snippets"
    writer = DocumentWriter(Settings(working_dir=tmp_path))
    path = writer.write(out_dir, "DemoTests.xml", XML)
    assert path == out_dir / "DemoTests.xml"
    assert out_dir.is_dir()
    assert path.read_text(encoding="utf-8") == XML


def test_write_overwrites_existing_file(tmp_path: Path):
    writer = DocumentWriter(Settings(working_dir=tmp_path))
    writer.write(tmp_path, "DemoTests.xml", "old")
    path = writer.write(tmp_path, "DemoTests.xml", XML)
    assert path.read_text(encoding="utf-8") == XML


def test_relative_output_dir_uses_working_dir(tmp_path: Path):
    writer = DocumentWriter(Settings(working_dir=tmp_path))
    path = writer.write(Path("out/snippets"), "A.xml", XML)
    assert path == tmp_path / "out" / "snippets" / "A.xml"
    assert path.exists()


def test_output_dir_that_is_a_file_raises(tmp_path: Path):
    blocker = tmp_path / "snippets"
    blocker.write_text("not a directory", encoding="utf-8")
    writer = DocumentWriter(Settings(working_dir=tmp_path))
    with pytest.raises(DirectoryCreationError) as exc_info:
        writer.write(blocker, "A.xml", XML)
    assert exc_info.value.directory == blocker


def test_parent_that_is_a_file_raises(tmp_path: Path):
    blocker = tmp_path / "docbkx"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(DirectoryCreationError) as exc_info:
        ensure_directory(blocker / "snippets")
    assert isinstance(exc_info.value.cause, OSError)


def test_snippet_file_name():
    assert DocumentWriter(Settings()).snippet_file_name("DemoTests") == "DemoTests.xml"
    assert DocumentWriter(Settings(document_extension=".dbk")).snippet_file_name("A") == "A.dbk"


def test_write_failure_propagates_os_error(tmp_path: Path):
    (tmp_path / "DemoTests.xml").mkdir()
    writer = DocumentWriter(Settings(working_dir=tmp_path))
    with pytest.raises(IsADirectoryError):
        writer.write(tmp_path, "DemoTests.xml", XML)
