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
Helpers for dumping the project model into human-readable form.
"""

import sys

from v2c.converter import Converter
from v2c.model import TargetType


def dump_project(project):
    """
    Returns string with dumped, human-readable description of 'project',
    which is an instance of v2c.model.Project.
    """
    out = "project %s {\n" % project.name
    out += "  type = %s\n" % TargetType.names[project.target_type]
    if project.keyword is not None:
        out += "  keyword = %s\n" % project.keyword
    if project.scc_project_name is not None:
        out += "  scc = %s\n" % project.scc_project_name
    out += "  files {\n"
    out += _indent(_indent(dump_group(project.files)))
    out += "  }\n"
    for cfg in project.configurations:
        out += _indent(dump_configuration(cfg))
    out += "}\n"
    return out.strip()


def dump_group(group):
    """
    Returns string with dumped v2c.model.SourceGroup and its subgroups.
    """
    out = "group \"%s\" {\n" % group.name
    for sub in group.children:
        out += _indent(dump_group(sub))
    for f in group.files:
        out += "  %s\n" % f
    out += "}\n"
    return out


def dump_configuration(cfg):
    out = "configuration %s {\n" % cfg.name
    out += "  type = %s\n" % TargetType.names[cfg.target_type]
    if cfg.mfc_mode:
        out += "  mfc = %d\n" % cfg.mfc_mode
    if cfg.atl_level:
        out += "  atl = %d\n" % cfg.atl_level
    for name in ("include_dirs", "defines", "compiler_flags", "link_deps"):
        values = getattr(cfg, name)
        if values:
            out += "  %s = %s\n" % (name, " ".join(values))
    out += "}\n"
    return out


class DumpingConverter(Converter):
    """
    Converter that prints the parsed model instead of writing any output.
    """
    def __init__(self, stream=None, **kwargs):
        super(DumpingConverter, self).__init__(**kwargs)
        self.stream = stream

    def generate(self, project, project_dir, output):
        stream = self.stream or sys.stdout
        stream.write(dump_project(project) + "\n")


def _indent(text):
    lines = text.split("\n")
    out = ""
    for x in lines:
        if x != "":
            x = "  %s" % x
            out += "%s\n" % x
    return out
