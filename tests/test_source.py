from pathlib import Path

import pytest

from minigo.errors import EmptySourceError, SourceError, SourceNotFoundError
from minigo.source import read_source


def test_reads_source_text(tmp_path: Path) -> None:
    path = tmp_path / "main.go"
    path.write_text("var x int\n", encoding="utf-8")
    assert read_source(path) == "var x int\n"
    assert read_source(str(path)) == "var x int\n"


#the error names the path the file was expected at
def test_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "Resources" / "source.go"
    with pytest.raises(SourceNotFoundError) as excinfo:
        read_source(path)
    assert excinfo.value.path == str(path)
    assert str(path) in str(excinfo.value)


@pytest.mark.parametrize("content", ["", "   ", "\n\t \r\n"])
def test_blank_file_is_rejected(tmp_path: Path, content: str) -> None:
    path = tmp_path / "blank.go"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(EmptySourceError) as excinfo:
        read_source(path)
    assert isinstance(excinfo.value, SourceError)


def test_directory_is_not_a_source(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError):
        read_source(tmp_path)
