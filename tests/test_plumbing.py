#
#  This file is part of vcproj2cmake
#
#  Copyright (C) 2009-2026 the vcproj2cmake authors
#
#  Permission is hereby granted, free of charge, to any person obtaining a copy
#  of this software and associated documentation files (the "Software"), to
#  deal in the Software without restriction, including without limitation the
#  rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
#  sell copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
#
#  THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
#  IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
#  FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
#  AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
#  LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
#  FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
#  IN THE SOFTWARE.
#

"""
Misc tests of vcproj2cmake's internals and the command line driver.
"""

import os.path
import pytest

import v2c.io
import v2c.error
import v2c.version
from v2c.error import Position, Error, BackupError, error_context
from v2c.utils import OrderedSet, normalize_path, file_extension, escape_char

import vcproj2cmake

import projects
projects_dir = os.path.dirname(projects.__file__)


def write_output(filename, text):
    f = v2c.io.OutputFile(filename)
    f.write(text)
    f.commit()


def test_file_io_create(tmpdir):
    p = tmpdir.join("sub", "textfile")
    created = v2c.io.num_created
    write_output(str(p), "one\ntwo\n")
    assert p.read("rb") == b"one\ntwo\n"
    assert v2c.io.num_created == created + 1
    assert not tmpdir.join("sub", "textfile.backup").check()


def test_file_io_backup(tmpdir):
    p = tmpdir.join("textfile")
    p.write("old\n")
    modified = v2c.io.num_modified
    write_output(str(p), "new\n")
    assert p.read() == "new\n"
    assert tmpdir.join("textfile.backup").read() == "old\n"
    assert v2c.io.num_modified == modified + 1


def test_file_io_no_backup(tmpdir, monkeypatch):
    monkeypatch.setattr(v2c.io, "backup", False)
    p = tmpdir.join("textfile")
    p.write("old\n")
    write_output(str(p), "new\n")
    assert p.read() == "new\n"
    assert not tmpdir.join("textfile.backup").check()


def test_file_io_backup_failure(tmpdir):
    p = tmpdir.join("textfile")
    p.write("old\n")
    tmpdir.mkdir("textfile.backup").join("something").write("x")
    with pytest.raises(BackupError):
        write_output(str(p), "new\n")
    assert p.read() == "old\n"


def test_file_io_dry_run(tmpdir, monkeypatch):
    monkeypatch.setattr(v2c.io, "dry_run", True)
    p = tmpdir.join("textfile")
    write_output(str(p), "new\n")
    assert not p.check()


def test_file_io_diff_only(tmpdir, monkeypatch, capsys):
    monkeypatch.setattr(v2c.io, "diff_only", True)
    p = tmpdir.join("textfile")
    p.write("one\ntwo\n")
    write_output(str(p), "one\nthree\n")
    assert p.read() == "one\ntwo\n"
    out = capsys.readouterr().out
    assert "-two\n" in out
    assert "+three\n" in out


def test_normalize_path():
    assert normalize_path(".\\src\\main.cpp") == "src/main.cpp"
    assert normalize_path("..\\inc") == "../inc"
    assert normalize_path("./a") == "a"
    assert normalize_path(".") == "."
    assert normalize_path("a\\.\\b") == "a/./b"
    assert normalize_path("/usr/include") == "/usr/include"


def test_file_extension():
    assert file_extension("a/b.cpp") == "cpp"
    assert file_extension("a.b/c") == ""
    assert file_extension("Makefile") == ""


def test_escape_char():
    assert escape_char('say "hi"', '"') == 'say \\"hi\\"'


def test_ordered_set():
    s = OrderedSet(["b", "a", "b", "c"])
    assert list(s) == ["b", "a", "c"]
    s.add("a")
    s.discard("b")
    s.add("b")
    assert list(s) == ["a", "c", "b"]
    assert "c" in s
    assert len(s) == 3


def test_error_position():
    assert str(Error("oops")) == "oops"
    assert str(Error("oops", Position("p.vcproj", 3))) == "p.vcproj:3: oops"
    assert str(Position("p.vcproj")) == "p.vcproj"


def test_error_context():
    pos = Position("p.vcproj", 42)
    with pytest.raises(Error) as excinfo:
        with error_context(pos):
            raise Error("oops")
    assert excinfo.value.pos == pos

    other = Position("q.vcproj", 1)
    with pytest.raises(Error) as excinfo:
        with error_context(pos):
            raise Error("oops", other)
    assert excinfo.value.pos == other


def test_warning_uses_context(caplog):
    pos = Position("p.vcproj", 5)
    with error_context(pos):
        v2c.error.warning("something odd about %s", "x")
    records = [r for r in caplog.records if r.name == "v2c.error"]
    assert records[-1].getMessage() == "something odd about x"
    assert records[-1].pos == pos


@pytest.fixture
def cli_flags(monkeypatch):
    # main() sets these globally, make sure they are restored afterwards
    for flag in ("dry_run", "diff_only", "backup"):
        monkeypatch.setattr(v2c.io, flag, getattr(v2c.io, flag))


def test_cli_convert(tmpdir, cli_flags):
    out = tmpdir.join("CMakeLists.txt")
    vcproj2cmake.main([os.path.join(projects_dir, "simple.vcproj"), str(out)])
    with open(os.path.join(projects_dir, "simple.cmake"), "rt") as f:
        assert out.read() == f.read()


def test_cli_dry_run(tmpdir, cli_flags):
    out = tmpdir.join("CMakeLists.txt")
    vcproj2cmake.main(["--dry-run", os.path.join(projects_dir, "simple.vcproj"), str(out)])
    assert not out.check()


def test_cli_dump_model(tmpdir, cli_flags, capsys):
    out = tmpdir.join("CMakeLists.txt")
    vcproj2cmake.main(["--dump-model", os.path.join(projects_dir, "logical.vcproj"), str(out)])
    assert "project docs {" in capsys.readouterr().out
    assert not out.check()


def test_cli_bad_arguments(cli_flags):
    with pytest.raises(SystemExit) as excinfo:
        vcproj2cmake.main([])
    assert excinfo.value.code == 3
    with pytest.raises(SystemExit) as excinfo:
        vcproj2cmake.main(["a", "b", "c", "d"])
    assert excinfo.value.code == 3


def test_cli_unsupported_type(tmpdir, cli_flags, caplog):
    vcproj = tmpdir.join("bad.vcproj")
    vcproj.write("""\
<?xml version="1.0" encoding="Windows-1252"?>
<VisualStudioProject Name="bad">
  <Configurations>
    <Configuration Name="Debug|Win32" ConfigurationType="3"/>
  </Configurations>
  <Files>
    <File RelativePath="a.cpp"/>
  </Files>
</VisualStudioProject>
""")
    out = tmpdir.join("CMakeLists.txt")
    with pytest.raises(SystemExit) as excinfo:
        vcproj2cmake.main([str(vcproj), str(out)])
    assert excinfo.value.code == 1
    assert any("project type 3" in r.getMessage() for r in caplog.records)
    assert not out.check()


def test_cli_missing_input(tmpdir, cli_flags):
    with pytest.raises(SystemExit) as excinfo:
        vcproj2cmake.main([str(tmpdir.join("nothere.vcproj"))])
    assert excinfo.value.code == 1


def test_version():
    assert v2c.version.get_version()
    assert v2c.__version__ == v2c.version.VERSION


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        vcproj2cmake.main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("vcproj2cmake ")
