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
This module contains :class:`Converter`, which ties together reading of the
project file, mapping tables and CMake script generation.
"""

import os.path

import logging
logger = logging.getLogger("v2c.converter")

import v2c.config
from v2c.cmake import CMakeGenerator
from v2c.io import OutputFile
from v2c.mappings import load_mappings
from v2c.parser import parse_file


class Converter(object):
    """
    The converter translates one ``.vcproj`` file into a ``CMakeLists.txt``.

    :class:`Converter` provides both high-level interface for single-call
    usage (see :meth:`process_file`) and methods for the individual steps,
    which are mostly useful for the test suite.

    .. attribute:: master_dir

       Directory of the master (root) project of the conversion tree, or
       :const:`None`. Shared mapping files and CMake modules are looked up
       there.

    .. attribute:: authoritative

       Name of the authoritative configuration, or empty string to choose it
       automatically.
    """

    Generator = CMakeGenerator

    def __init__(self, master_dir=None, authoritative=None):
        self.master_dir = master_dir
        if authoritative is None:
            authoritative = v2c.config.authoritative_config
        self.authoritative = authoritative

    def load_mappings(self, project_dir):
        """
        Loads mapping tables for a project in *project_dir*. Returns a
        dictionary with keyword arguments for :attr:`Generator`.
        """
        def load(filename):
            return load_mappings(filename, root_dir=self.master_dir, project_dir=project_dir)
        return dict(include_map=load(v2c.config.include_mappings_file),
                    define_map=load(v2c.config.define_mappings_file),
                    dependency_map=load(v2c.config.dependency_mappings_file))

    def convert(self, project, project_dir=None):
        """
        Returns text of the CMake script for parsed *project*.
        """
        mappings = self.load_mappings(project_dir)
        gen = self.Generator(project,
                             master_dir=self.master_dir,
                             authoritative=self.authoritative,
                             **mappings)
        return gen.generate()

    def generate(self, project, project_dir, output):
        """
        Writes the script for *project* into file *output*.
        """
        text = self.convert(project, project_dir)
        f = OutputFile(output)
        f.write(text)
        f.commit()
        logger.info("wrote %s", output)

    def process_file(self, filename, output=None):
        """
        Converts project file *filename*. If *output* isn't given,
        ``CMakeLists.txt`` in the same directory is written.
        """
        project_dir = os.path.dirname(filename)
        if output is None:
            output = os.path.join(project_dir, v2c.config.default_output)
        project = parse_file(filename)
        self.generate(project, project_dir, output)
        return project
