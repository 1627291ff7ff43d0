"""
runner 模块测试
文件读取与输出
"""

import io

import pytest

from minigrep.config import SearchConfig
from minigrep.errors import FileReadError, MinigrepError
from minigrep.output import write_matches
from minigrep.runner import read_contents, run


POEM = "Rust:\nsafe, fast, productive.\nPick three.\n"


@pytest.fixture
def poem(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


class TestReadContents:
    def test_reads_whole_file(self, poem):
        assert read_contents(poem, "utf-8") == POEM

    def test_universal_newlines(self, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"one\r\ntwo\rthree\n")
        assert read_contents(path, "utf-8") == "one\ntwo\nthree\n"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.txt"
        with pytest.raises(FileReadError) as excinfo:
            read_contents(missing)
        error = excinfo.value
        assert error.path == str(missing)
        assert isinstance(error.__cause__, FileNotFoundError)
        assert "No such file" in str(error)

    def test_directory(self, tmp_path):
        with pytest.raises(FileReadError):
            read_contents(tmp_path)

    def test_undecodable(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")
        with pytest.raises(FileReadError) as excinfo:
            read_contents(path, "utf-8")
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_is_minigrep_error(self, tmp_path):
        with pytest.raises(MinigrepError):
            read_contents(tmp_path / "nope.txt")


class TestRun:
    def test_writes_matches(self, poem):
        out = io.StringIO()
        matches = run(SearchConfig("duct", str(poem)), encoding="utf-8", out=out)
        assert matches == ["safe, fast, productive."]
        assert out.getvalue() == "safe, fast, productive.\n"

    def test_case_insensitive_keeps_casing(self, poem):
        out = io.StringIO()
        run(SearchConfig("rUsT", str(poem), case_insensitive=True), encoding="utf-8", out=out)
        assert out.getvalue() == "Rust:\n"

    def test_zero_matches(self, poem):
        out = io.StringIO()
        assert run(SearchConfig("zzz", str(poem)), encoding="utf-8", out=out) == []
        assert out.getvalue() == ""

    def test_no_output_on_failure(self, tmp_path):
        out = io.StringIO()
        with pytest.raises(FileReadError):
            run(SearchConfig("a", str(tmp_path / "nope.txt")), out=out)
        assert out.getvalue() == ""

    def test_defaults_to_stdout(self, poem, capsys):
        run(SearchConfig("three", str(poem)), encoding="utf-8")
        assert capsys.readouterr().out == "Pick three.\n"


class TestWriteMatches:
    def test_verbatim(self):
        out = io.StringIO()
        write_matches(["[red]x[/red]", "  padded  ", ""], out)
        assert out.getvalue() == "[red]x[/red]\n  padded  \n\n"
