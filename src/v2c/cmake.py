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
Generation of CMake scripts from the project model.

The generated ``CMakeLists.txt`` mirrors the structure of the project file:
a list variable per source group, a conditional block per configuration and
optional ``include()`` hooks at fixed points, so that hand-written content
can be added without touching the generated file.
"""

from contextlib import contextmanager

import logging
logger = logging.getLogger("v2c.cmake")

import v2c.config
from v2c.error import UnsupportedError, error_context, warning
from v2c.mappings import ALL, MappingTable, resolve
from v2c.model import TargetType
from v2c.utils import normalize_path, escape_char, escape_backslash


# Hook includes, in the order in which they appear in the output. They are
# all optional, the hook files may or may not exist.
HOOK_PRE_PROJECT        = "${V2C_CONFIG_DIR}/hook_pre.txt"
HOOK_POST_PROJECT       = "${V2C_HOOK_PROJECT}"
HOOK_POST_SOURCES       = "${V2C_HOOK_POST_SOURCES}"
HOOK_POST_DEFINITIONS   = "${V2C_HOOK_POST_DEFINITIONS}"
HOOK_POST_TARGET        = "${V2C_HOOK_POST_TARGET}"
HOOK_POST               = "${V2C_HOOK_POST}"

# Module included right after project() to set up defaults shared by all
# converted projects of a tree.
MASTER_PROJECT_DEFAULTS = "MasterProjectDefaults_vcproj2cmake"

# Variables that hooks may fill with additional sources and libraries.
EXTRA_SOURCES_VAR = "V2C_SOURCES"
EXTRA_LIBS_VAR = "V2C_LIBS"

HEADER = """\
#
# TEMPORARY Build file, AUTO-GENERATED by vcproj2cmake
# DO NOT CHECK INTO VERSION CONTROL OR APPLY "PERMANENT" MODIFICATIONS!!
#
"""


class ScriptWriter(object):
    """
    Accumulates lines of the generated script, keeping track of the current
    indentation level.

    .. attribute:: depth

       Current indentation, in spaces.
    """

    #: Number of spaces added by each nesting level
    indent_step = 2

    def __init__(self):
        self.lines = []
        self.depth = 0

    def line(self, text=""):
        """Writes a single line, indented. Empty *text* writes blank line."""
        if text:
            self.lines.append(" " * self.depth + text)
        else:
            self.lines.append("")

    def new_line(self, text):
        """Writes *text* preceded by a blank line."""
        self.line()
        self.line(text)

    def raw(self, text):
        """Writes (possibly multi-line) text without any indentation."""
        self.lines.extend(text.rstrip("\n").split("\n"))

    @contextmanager
    def indented(self):
        self.depth += self.indent_step
        try:
            yield
        finally:
            self.depth -= self.indent_step

    @contextmanager
    def condition(self, cond):
        """
        Wraps the content written within the ``with`` block in
        ``if(cond) ... endif(cond)``.
        """
        self.line("if(%s)" % cond)
        with self.indented():
            yield
        self.line("endif(%s)" % cond)

    def text(self):
        return "\n".join(self.lines) + "\n"


class CMakeFormatter(object):
    """
    Formats individual CMake statements. Knows nothing about the project,
    only about CMake syntax.
    """
    def var_ref(self, name):
        return "${%s}" % name

    def quote_arg(self, arg):
        """Quotes *arg* if it contains whitespace."""
        if any(c.isspace() for c in arg):
            return '"%s"' % arg
        return arg

    def include_optional(self, filename):
        return "include(%s OPTIONAL)" % filename

    def set_var(self, name, value):
        return "set(%s %s)" % (name, value)

    def config_name_upper(self, config_name):
        """Returns configuration name suitable for per-config properties."""
        return config_name.upper().replace(" ", "_")

    def set_target_property(self, target, prop, value):
        return 'set_property(TARGET %s PROPERTY %s "%s")' % (target, prop, value)

    def append_target_property(self, target, prop):
        return "set_property(TARGET %s APPEND PROPERTY %s" % (target, prop)

    def build_type_condition(self, config_name, authoritative):
        """
        Returns condition under which settings of configuration
        *config_name* are used.

        With single-configuration generators, CMAKE_BUILD_TYPE selects it.
        Multi-configuration generators don't have CMAKE_BUILD_TYPE, and since
        some settings can't be set per configuration, only the authoritative
        configuration is used there.
        """
        cond = 'CMAKE_BUILD_TYPE STREQUAL "%s"' % config_name
        if authoritative:
            cond = "CMAKE_CONFIGURATION_TYPES OR " + cond
        return cond

    def create_target(self, target, target_type, sources):
        """
        Returns the statement creating *target* of given type from
        *sources*, or :const:`None` for projects that don't build anything.
        """
        if target_type == TargetType.EXECUTABLE:
            return "add_executable( %s WIN32 %s )" % (target, sources)
        elif target_type == TargetType.SHARED_LIBRARY:
            return "add_library( %s SHARED %s )" % (target, sources)
        elif target_type == TargetType.STATIC_LIBRARY:
            return "add_library( %s STATIC %s )" % (target, sources)
        elif target_type == TargetType.NONE:
            # some sort of logical collection of files, nothing to build
            return None
        raise UnsupportedError("project type %s not supported" % target_type)


class CMakeGenerator(object):
    """
    Writes CMake script for a :class:`v2c.model.Project`.

    :param project:         The project to convert.
    :param include_map:     :class:`v2c.mappings.MappingTable` for include
                            directories.
    :param define_map:      Mapping table for preprocessor definitions.
    :param dependency_map:  Mapping table for linked libraries.
    :param master_dir:      Directory of the master project or :const:`None`.
    :param authoritative:   Name of the authoritative configuration; see
                            :attr:`v2c.config.authoritative_config`.
    """

    Formatter = CMakeFormatter

    def __init__(self, project, include_map=None, define_map=None, dependency_map=None,
                 master_dir=None, authoritative=None):
        self.project = project
        self.include_map = include_map if include_map is not None else MappingTable()
        self.define_map = define_map if define_map is not None else MappingTable()
        self.dependency_map = dependency_map if dependency_map is not None else MappingTable()
        self.master_dir = master_dir
        if authoritative is None:
            authoritative = v2c.config.authoritative_config
        self.authoritative = project.authoritative_config_name(authoritative)
        self.fmt = self.Formatter()
        self.target = None

    def generate(self):
        """Returns the text of the script."""
        w = ScriptWriter()
        self.target = None
        self.write_preamble(w)
        self.write_project(w)
        sources = self.write_sources(w)
        configs = self.project.distinct_configurations()
        for cfg in self.project.configurations:
            if cfg not in configs:
                warning("configuration %s for another platform ignored, only the first one "
                        "of the same name is converted", cfg.name, pos=cfg.source_pos)
        for cfg in configs:
            with error_context(cfg):
                self.write_configuration(w, cfg, sources)
        self.write_target_properties(w)
        w.new_line(self.fmt.include_optional(HOOK_POST))
        return w.text()

    def write_preamble(self, w):
        w.raw(HEADER)
        w.line()
        w.line("# >= 2.6 due to crucial set_property(... COMPILE_DEFINITIONS_* ...)")
        w.line("cmake_minimum_required(VERSION 2.6)")
        with w.condition("COMMAND cmake_policy"):
            with w.condition("POLICY CMP0005"):
                w.line("cmake_policy(SET CMP0005 NEW) # automatic quoting of brackets")
            w.line()
            w.line("# we do want the includer to be affected by our updates,")
            w.line("# since it might define project-global settings.")
            with w.condition("POLICY CMP0011"):
                w.line("cmake_policy(SET CMP0011 OLD)")

        w.new_line("list(APPEND CMAKE_MODULE_PATH %s)" % self.module_path())
        # make the config dir available to hooks as well
        w.new_line(self.fmt.set_var("V2C_CONFIG_DIR", v2c.config.config_dir_local))
        # may be used e.g. to skip the whole file on unsupported platforms
        w.new_line(self.fmt.include_optional(HOOK_PRE_PROJECT))

    def module_path(self):
        """
        Returns directory with CMake modules of the topmost project of the
        conversion tree.
        """
        if self.master_dir is None:
            return v2c.config.module_path_fallback
        return "%s/%s" % (self.master_dir.replace("\\", "/").rstrip("/"),
                          normalize_path(v2c.config.module_path_local))

    def write_project(self, w):
        w.new_line("project( %s )" % self.project.name)
        w.line()
        w.line("# global settings shared by all sub projects of a master project")
        w.line("# (compiler flags, paths, platform stuff, hook include variables")
        w.line("# such as V2C_HOOK_PROJECT); it must come after project() since")
        w.line("# compiler information depends on a valid project. It should also")
        w.line("# reset V2C_LIBS, V2C_SOURCES etc. which are used below.")
        w.line(self.fmt.include_optional(MASTER_PROJECT_DEFAULTS))
        w.line("# hook e.g. for invoking Find scripts as expected by the")
        w.line("# _LIBRARIES / _INCLUDE_DIRS mappings of your mapping files")
        w.line(self.fmt.include_optional(HOOK_POST_PROJECT))

    def write_sources(self, w):
        """
        Writes source lists of all groups and returns list of variables to
        use for the target's sources. The list is empty if the project
        doesn't have any sources.
        """
        sources = []
        if self.project.has_sources():
            self.write_file_list(w, self.project.files, None, sources)
            # allow hooks to add (generated, ...) files right before the
            # target is created
            sources.append(EXTRA_SOURCES_VAR)
        else:
            warning("%s: no source files at all (header-based project?)",
                    self.project.name, pos=self.project.source_pos)
        w.new_line(self.fmt.include_optional(HOOK_POST_SOURCES))
        return sources

    def write_file_list(self, w, group, parent_source_group, sources_for_parent):
        """
        Writes variables with the files of *group*, recursively.

        Each group with files gets ``SOURCES_files_<tag>`` with its own files
        and each non-empty group gets ``SOURCES_<tag>`` with the lists of its
        children followed by its own. The name of the latter is appended to
        *sources_for_parent*.
        """
        if parent_source_group is None:
            this_source_group = ""
        elif parent_source_group == "":
            this_source_group = group.name
        else:
            this_source_group = "%s\\\\%s" % (parent_source_group, group.name)

        sub_sources = []
        with w.indented():
            for sub in group.children:
                self.write_file_list(w, sub, this_source_group, sub_sources)

        group_tag = this_source_group.replace(" ", "_").replace("\\", "_")

        files_var = None
        if group.files:
            files_var = "SOURCES_files_%s" % group_tag
            w.new_line("set(%s" % files_var)
            for f in group.files:
                w.line("  %s" % self.fmt.quote_arg(f))
            w.line(")")
            if parent_source_group is not None:
                w.line('source_group("%s" FILES %s)' %
                       (this_source_group, self.fmt.var_ref(files_var)))

        if files_var or sub_sources:
            sources_var = "SOURCES_%s" % group_tag
            w.new_line("set(%s" % sources_var)
            with w.indented():
                for s in sub_sources:
                    w.line(self.fmt.var_ref(s))
                if files_var:
                    w.line(self.fmt.var_ref(files_var))
            w.line(")")
            sources_for_parent.append(sources_var)

    def write_build_attributes(self, w, command, values, mapping):
        """
        Writes *command* (e.g. ``include_directories(``) with *values*
        translated using *mapping*, once for each platform group; groups
        other than :const:`v2c.mappings.ALL` are wrapped in ``if()``.
        """
        defs = resolve(values, mapping)
        for platform, items in defs.items():
            w.line()
            if platform == ALL:
                self._write_command(w, command, items)
            else:
                with w.condition(platform):
                    self._write_command(w, command, items)

    def _write_command(self, w, command, items):
        w.line(command)
        for x in items:
            w.line("  %s" % x)
        w.line(")")

    def write_configuration(self, w, cfg, sources):
        name = self.project.name
        cond = self.fmt.build_type_condition(cfg.name, cfg.name == self.authoritative)

        w.new_line("if(%s)" % cond)
        with w.indented():
            # there's no CMAKE_ATL_FLAG in CMake, but hooks may test for it
            if cfg.mfc_mode > 0:
                w.new_line(self.fmt.set_var("CMAKE_MFC_FLAG", cfg.mfc_mode))
            if cfg.atl_level > 0:
                w.new_line(self.fmt.set_var("CMAKE_ATL_FLAG", cfg.atl_level))

            # CMake doesn't have per-configuration include directories, see
            # build_type_condition()
            self.write_build_attributes(w, "include_directories(",
                                        cfg.include_dirs, self.include_map)

            w.new_line("# hook include after all definitions have been made")
            w.line("# (but _before_ target is created using the source list!)")
            w.line(self.fmt.include_optional(HOOK_POST_DEFINITIONS))

            if sources:
                w.new_line("set(SOURCES")
                with w.indented():
                    for s in sources:
                        w.line(self.fmt.var_ref(s))
                w.line(")")

                create = self.fmt.create_target(name, cfg.target_type,
                                                self.fmt.var_ref("SOURCES"))
                if create:
                    w.line(create)
                    if self.target is None:
                        logger.debug("target %s is %s", name,
                                     TargetType.names[cfg.target_type])
                    self.target = name
                    deps = cfg.link_deps + [self.fmt.var_ref(EXTRA_LIBS_VAR)]
                    self.write_build_attributes(w, "target_link_libraries(%s" % name,
                                                deps, self.dependency_map)

            w.new_line("# e.g. to be used for tweaking target properties etc.")
            w.line(self.fmt.include_optional(HOOK_POST_TARGET))
        w.line("endif(%s)" % cond)

        if self.target is not None:
            w.line()
            with w.condition("TARGET %s" % self.target):
                self.write_compile_definitions(w, cfg)
                self.write_compile_flags(w, cfg)

    def write_compile_definitions(self, w, cfg):
        prop = "COMPILE_DEFINITIONS_%s" % self.fmt.config_name_upper(cfg.name)
        # APPEND so that hooks can add their own definitions
        self.write_build_attributes(w, self.fmt.append_target_property(self.target, prop),
                                    cfg.defines, self.define_map)

    def write_compile_flags(self, w, cfg):
        if not cfg.compiler_flags:
            return
        prop = "COMPILE_FLAGS_%s" % self.fmt.config_name_upper(cfg.name)
        # the original flags are for MSVC only
        w.line()
        with w.condition("MSVC"):
            self._write_command(w, self.fmt.append_target_property(self.target, prop),
                                cfg.compiler_flags)

    def write_target_properties(self, w):
        """
        Writes properties that aren't configuration-specific.
        """
        if self.target is None:
            return
        p = self.project
        t = self.target
        w.line()
        w.line(self.fmt.set_target_property(t, "PROJECT_LABEL", p.name))
        if p.keyword is not None:
            w.line(self.fmt.set_target_property(t, "VS_KEYWORD", p.keyword))

        # keep source control integration
        if p.scc_project_name is not None:
            w.line()
            w.line(self.fmt.set_target_property(t, "VS_SCC_PROJECTNAME",
                                                escape_char(p.scc_project_name, '"')))
            if p.scc_local_path:
                w.line(self.fmt.set_target_property(t, "VS_SCC_LOCALPATH",
                                                    escape_char(escape_backslash(p.scc_local_path), '"')))
            if p.scc_provider:
                w.line(self.fmt.set_target_property(t, "VS_SCC_PROVIDER",
                                                    escape_char(p.scc_provider, '"')))
