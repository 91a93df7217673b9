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
In-memory model of a parsed Visual Studio project: the tree of source file
groups and the list of configurations with their compiler and linker
settings. The model is built by :mod:`v2c.parser` and consumed by
:mod:`v2c.cmake`; it isn't modified once built.
"""

import logging
logger = logging.getLogger("v2c.model")

from v2c.utils import memoized_property


# Name used for the root group when the <Files> element has none
ROOT_GROUP_NAME = "COMMON"


class TargetType(object):
    """
    Values of the ``ConfigurationType`` attribute that we can convert.
    """
    NONE            = 0
    EXECUTABLE      = 1
    SHARED_LIBRARY  = 2
    STATIC_LIBRARY  = 4

    names = {
        NONE           : "none",
        EXECUTABLE     : "executable",
        SHARED_LIBRARY : "shared library",
        STATIC_LIBRARY : "static library",
    }

    @classmethod
    def is_valid(cls, value):
        return value in cls.names


class MfcMode(object):
    """Values of the ``UseOfMFC`` attribute."""
    OFF     = 0
    STATIC  = 1
    SHARED  = 2

    #: Defines implied by using MFC in a shared DLL.
    shared_defines = ["_AFXEXT", "_AFXDLL"]


class SourceGroup(object):
    """
    A group of source files, corresponding to a ``<Filter>`` (or the
    top-level ``<Files>``) element of the project.

    .. attribute:: name

       Name of the group, as shown in the IDE.

    .. attribute:: children

       Nested groups, in document order.

    .. attribute:: files

       Normalized paths of the files that are compiled, in document order.

    .. attribute:: source_pos

       :class:`v2c.error.Position` of the element, or :const:`None`.
    """
    def __init__(self, name, source_pos=None):
        self.name = name
        self.children = []
        self.files = []
        self.source_pos = source_pos

    def is_empty(self):
        """
        Returns true if the group contributes nothing to the output, i.e.
        neither it nor any of its descendants have any files.
        """
        return not self.files and all(c.is_empty() for c in self.children)

    def all_files(self):
        """Yields all files in this group and its subgroups."""
        for c in self.children:
            for f in c.all_files():
                yield f
        for f in self.files:
            yield f

    def __repr__(self):
        return "SourceGroup(%r)" % self.name


class Configuration(object):
    """
    Class representing a configuration of the project.

    .. attribute:: name

       Name of the configuration without the platform part, e.g. ``Debug``
       for ``Debug|Win32``.

    .. attribute:: target_type

       One of :class:`TargetType` values.

    .. attribute:: mfc_mode

       One of :class:`MfcMode` values.

    .. attribute:: atl_level

       Value of ``UseOfATL``.

    .. attribute:: defines

       Preprocessor definitions, including the implied MFC ones.

    .. attribute:: include_dirs

       Additional include directories, sorted.

    .. attribute:: compiler_flags

       Additional compiler options, in the original order.

    .. attribute:: link_deps

       Names of libraries to link with, without the ``.lib`` extension.
    """
    def __init__(self, name, target_type=TargetType.NONE, mfc_mode=MfcMode.OFF,
                 atl_level=0, source_pos=None):
        self.name = name
        self.target_type = target_type
        self.mfc_mode = mfc_mode
        self.atl_level = atl_level
        self.defines = []
        self.include_dirs = []
        self.compiler_flags = []
        self.link_deps = []
        self.source_pos = source_pos

    def __repr__(self):
        return "Configuration(%r)" % self.name


class Project(object):
    """
    The whole project, i.e. the contents of one ``.vcproj`` file.

    .. attribute:: name

       Name of the project; used as the name of the CMake target.

    .. attribute:: files

       Root :class:`SourceGroup`.

    .. attribute:: configurations

       List of :class:`Configuration` objects, in document order.

    .. attribute:: keyword

       Value of the ``Keyword`` attribute or :const:`None`.

    .. attribute:: scc_project_name, scc_local_path, scc_provider

       Source control integration settings or :const:`None`.
    """
    def __init__(self, name, source_pos=None):
        self.name = name
        self.files = SourceGroup(ROOT_GROUP_NAME)
        self.configurations = []
        self.keyword = None
        self.scc_project_name = None
        self.scc_local_path = None
        self.scc_provider = None
        self.source_pos = source_pos

    def has_sources(self):
        return not self.files.is_empty()

    def get_configuration(self, name):
        for c in self.configurations:
            if c.name == name:
                return c
        return None

    def distinct_configurations(self):
        """
        Returns the first configuration of every name, in document order.

        Names don't include the platform, so ``Debug|Win32`` and
        ``Debug|x64`` are both ``Debug``. CMake selects configurations by
        name only and can't have more than one of them active.
        """
        seen = set()
        result = []
        for c in self.configurations:
            if c.name not in seen:
                seen.add(c.name)
                result.append(c)
        return result

    def authoritative_config_name(self, designated=None):
        """
        Returns the name of the configuration used for settings that CMake
        can't express per configuration.

        If *designated* names an existing configuration, it is used.
        Otherwise the configuration following the first one is picked, or the
        only one if there is just one.
        """
        if designated:
            if self.get_configuration(designated) is None:
                logger.warning("authoritative configuration \"%s\" not found in project %s",
                               designated, self.name)
            return designated
        configs = self.distinct_configurations()
        if len(configs) > 1:
            return configs[1].name
        elif configs:
            return configs[0].name
        return None

    @memoized_property
    def target_type(self):
        """
        Type of the target this project creates: CMake maps one target name
        to exactly one type, so the first configuration with a real target
        type decides. :const:`TargetType.NONE` if no configuration has one.
        """
        for c in self.configurations:
            if c.target_type != TargetType.NONE:
                return c.target_type
        return TargetType.NONE
