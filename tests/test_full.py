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

import os, os.path
import pytest
from glob import glob

import v2c.parser, v2c.error
import v2c.dumper
from v2c.converter import Converter

from indir import in_directory

def do_get_testdir():
    import projects
    return os.path.dirname(projects.__file__)

@pytest.fixture(scope='session')
def testdir():
    return do_get_testdir()

def project_filenames(ext):
    """
    This function returns the list of all .vcproj files under tests/projects
    directory that have a matching file with extension *ext* present.
    """
    return [os.path.splitext(str(f))[0] + ".vcproj"
            for f in glob("%s/*.%s" % (do_get_testdir(), ext))]


def _read_expected(filename):
    with open(filename, "rt") as f:
        return f.read()


@pytest.mark.parametrize('project_file', project_filenames("model"))
def test_model(testdir, project_file):
    """
    Parses the project and compares resulting model with a copy saved in
    .model file.
    """
    assert project_file.startswith(testdir)
    model_file = os.path.splitext(project_file)[0] + '.model'

    f = project_file[len(testdir)+1:]
    with in_directory(testdir):
        try:
            as_text = v2c.dumper.dump_project(v2c.parser.parse_file(f))
        except v2c.error.Error as e:
            as_text = "ERROR:\n%s" % str(e).replace("\\", "/")

    print("""
created model:
---
%s
---
""" % as_text)

    expected = _read_expected(model_file).strip()
    assert as_text == expected


@pytest.mark.parametrize('project_file', project_filenames("cmake"))
def test_full(testdir, project_file):
    """
    Fully converts the project and compares the script with a copy saved in
    .cmake file.
    """
    cmake_file = os.path.splitext(project_file)[0] + '.cmake'

    f = project_file[len(testdir)+1:]
    with in_directory(testdir):
        project = v2c.parser.parse_file(f)
        as_text = Converter(authoritative="").convert(project, os.path.dirname(f))

    print("""
created script:
---
%s
---
""" % as_text)

    assert as_text == _read_expected(cmake_file)


def test_process_file(tmpdir, testdir):
    output = tmpdir.join("CMakeLists.txt")
    c = Converter(authoritative="")
    c.process_file(os.path.join(testdir, "simple.vcproj"), str(output))
    assert output.read() == _read_expected(os.path.join(testdir, "simple.cmake"))
    assert not tmpdir.join("CMakeLists.txt.backup").check()


def test_process_file_keeps_backup(tmpdir, testdir):
    output = tmpdir.join("CMakeLists.txt")
    output.write("# hand-written\n")
    Converter(authoritative="").process_file(os.path.join(testdir, "simple.vcproj"), str(output))
    assert tmpdir.join("CMakeLists.txt.backup").read() == "# hand-written\n"
    assert output.read().startswith("#\n# TEMPORARY Build file")


def test_dumping_converter(tmpdir, testdir):
    import io
    out = io.StringIO()
    output = tmpdir.join("CMakeLists.txt")
    c = v2c.dumper.DumpingConverter(stream=out, authoritative="")
    c.process_file(os.path.join(testdir, "logical.vcproj"), str(output))
    assert out.getvalue().strip() == _read_expected(os.path.join(testdir, "logical.model")).strip()
    assert not output.check()


def test_multiple_platforms(testdir):
    with open(os.path.join(testdir, "simple.vcproj"), "rt") as f:
        text = f.read()
    configs = text[text.index("<Configurations>"):text.index("</Configurations>")]
    text = text.replace(configs, configs + configs.replace("|Win32", "|x64")[len("<Configurations>"):])
    project = v2c.parser.parse(text, "simple.vcproj")
    assert len(project.configurations) == 4

    script = Converter(authoritative="").convert(project, testdir)
    assert script.count('\nif(CMAKE_CONFIGURATION_TYPES OR CMAKE_BUILD_TYPE STREQUAL "Release")') == 1
    assert script.count("add_executable( hello WIN32 ${SOURCES} )") == 2
    with open(os.path.join(testdir, "simple.cmake"), "rt") as f:
        assert script == f.read()
