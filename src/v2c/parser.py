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
Reading of Visual Studio 2003-2008 ``.vcproj`` files into the
:mod:`v2c.model` representation.

The project file is an XML document of the form::

    <VisualStudioProject Name="foo" Keyword="Win32Proj" ...>
      <Configurations>
        <Configuration Name="Debug|Win32" ConfigurationType="1" UseOfMFC="0">
          <Tool Name="VCCLCompilerTool" PreprocessorDefinitions="WIN32;_DEBUG"/>
          <Tool Name="VCLinkerTool" AdditionalDependencies="ws2_32.lib"/>
        </Configuration>
      </Configurations>
      <Files>
        <Filter Name="Source Files">
          <File RelativePath=".\\foo.cpp"/>
        </Filter>
      </Files>
    </VisualStudioProject>
"""

import posixpath
import re

from lxml import etree

import logging
logger = logging.getLogger("v2c.parser")

from v2c.error import ParserError, UnsupportedError, Position, error_context, warning
from v2c.model import (Project, SourceGroup, Configuration, TargetType, MfcMode,
                       ROOT_GROUP_NAME)
from v2c.utils import normalize_path, file_extension, escape_char


ROOT_ELEMENT = "VisualStudioProject"

COMPILER_TOOL = "VCCLCompilerTool"
LINKER_TOOL = "VCLinkerTool"
CUSTOM_BUILD_TOOL = "VCCustomBuildTool"

# Files with these extensions are never compiled.
NON_SOURCE_EXTENSIONS = frozenset(["h", "H", "lex", "y", "ico", "bmp", "txt"])

# Files generated by MIDL from .idl files.
IDL_GENERATED_RE = re.compile(r"_(i|p)\.c$")

LIBRARY_EXTENSION = "lib"


def _is_true(value):
    return value is not None and value.lower() == "true"


def _is_false(value):
    return value is not None and value.lower() == "false"


def _int_attr(element, name):
    """
    Returns integer value of attribute *name*, 0 if it isn't set.
    """
    value = element.get(name)
    if value is None or not value.strip():
        return 0
    try:
        return int(value)
    except ValueError:
        raise ParserError("attribute %s has non-integer value \"%s\"" % (name, value),
                          pos=Position.of_element(element))


def _split_list(value, separators=";"):
    """
    Splits attribute *value* on any of *separators*, strips the items and
    removes empty ones.
    """
    if not value:
        return []
    items = re.split("[%s]" % re.escape(separators), value)
    return [x.strip() for x in items if x.strip()]


# ---------------------------------------------------------------------------
# files and filters
# ---------------------------------------------------------------------------

def is_file_excluded(path, file_node):
    """
    Checks if the ``<File>`` element *file_node* with normalized *path*
    should be left out of the build. Returns a short reason string or
    :const:`None` if the file is compiled.
    """
    pos = Position.of_element(file_node)

    if file_extension(path) in NON_SOURCE_EXTENSIONS:
        return "not a source file"

    for file_config in file_node.iterfind("FileConfiguration"):
        if _is_true(file_config.get("ExcludedFromBuild")):
            return "excluded from build"

    for tool in file_node.iterfind("FileConfiguration/Tool"):
        if tool.get("Name") == CUSTOM_BUILD_TOOL:
            return "custom build step"

    if IDL_GENERATED_RE.search(path):
        # FIXME: should be platform-dependent, these are needed on Windows
        warning("%s: IDL generated file, skipping", path, pos=pos)
        return "IDL generated file"

    if file_extension(path) == LIBRARY_EXTENSION:
        # Libraries listed as files are dependencies, not sources.
        warning("%s: library registered as a source file, skipping", path, pos=pos)
        return "library"

    return None


def parse_file_entry(file_node):
    """
    Returns normalized path of the file described by *file_node* if it is
    compiled, :const:`None` otherwise.
    """
    path = normalize_path(file_node.get("RelativePath", ""))
    reason = is_file_excluded(path, file_node)
    if reason:
        logger.debug("skipping %s (%s)", path, reason)
        return None
    return path


def parse_filter(node):
    """
    Parses ``<Filter>`` or ``<Files>`` element *node* recursively into a
    :class:`v2c.model.SourceGroup`.

    Returns :const:`None` if the filter is marked as not being under source
    control, those contain generated files that aren't part of the project's
    sources.
    """
    pos = Position.of_element(node)
    name = node.get("Name") or ROOT_GROUP_NAME

    if _is_false(node.get("SourceControlFiles")):
        warning("%s: SourceControlFiles set to false, listing generated files? skipping",
                name, pos=pos)
        return None

    logger.info("parsing files group %s", name)
    group = SourceGroup(name, source_pos=pos)

    for subfilter in node.iterfind("Filter"):
        sub = parse_filter(subfilter)
        if sub is not None:
            group.children.append(sub)

    for file_node in node.iterfind("File"):
        path = parse_file_entry(file_node)
        if path is not None:
            group.files.append(path)

    return group


# ---------------------------------------------------------------------------
# configurations
# ---------------------------------------------------------------------------

def config_name(config_node):
    """Returns configuration name without platform, e.g. Debug."""
    return config_node.get("Name", "").split("|")[0]


def parse_include_dirs(value):
    """
    Parses ``AdditionalIncludeDirectories`` into a sorted list of normalized
    paths.
    """
    return sorted(normalize_path(x) for x in _split_list(value, ",;"))


def parse_defines(value):
    """
    Parses ``PreprocessorDefinitions`` into a sorted list of ``NAME`` or
    ``NAME=VALUE`` strings, with parentheses in values escaped for CMake.
    """
    defines = []
    for d in sorted(_split_list(value)):
        name, sep, setting = d.partition("=")
        if not setting:
            defines.append(name)
        else:
            setting = escape_char(escape_char(setting, "("), ")")
            defines.append("%s=%s" % (name, setting))
    return defines


def parse_dependencies(value):
    """
    Parses ``AdditionalDependencies`` of the linker into bare library names.
    """
    deps = []
    for lib in (value or "").split():
        lib = posixpath.basename(lib.replace("\\", "/"))
        if lib.lower().endswith("." + LIBRARY_EXTENSION):
            lib = lib[:-len(LIBRARY_EXTENSION)-1]
        deps.append(lib)
    return deps


def parse_configuration(config_node):
    """
    Extracts settings of one ``<Configuration>`` element into
    :class:`v2c.model.Configuration`.

    Raises :exc:`v2c.error.UnsupportedError` if the configuration type isn't
    one we know how to convert.
    """
    pos = Position.of_element(config_node)
    name = config_name(config_node)

    with error_context(pos):
        target_type = _int_attr(config_node, "ConfigurationType")
        if not TargetType.is_valid(target_type):
            raise UnsupportedError("project type %d of configuration \"%s\" not supported" %
                                   (target_type, name))

        cfg = Configuration(name,
                            target_type=target_type,
                            mfc_mode=_int_attr(config_node, "UseOfMFC"),
                            atl_level=_int_attr(config_node, "UseOfATL"),
                            source_pos=pos)

    for compiler in config_node.iterfind('Tool[@Name="%s"]' % COMPILER_TOOL):
        cfg.include_dirs += parse_include_dirs(compiler.get("AdditionalIncludeDirectories"))
        cfg.defines += parse_defines(compiler.get("PreprocessorDefinitions"))
        # These are MSVC-specific, so they're only passed through as they are.
        cfg.compiler_flags += _split_list(compiler.get("AdditionalOptions"))

    if cfg.mfc_mode == MfcMode.SHARED:
        cfg.defines += MfcMode.shared_defines

    for linker in config_node.iterfind('Tool[@Name="%s"]' % LINKER_TOOL):
        cfg.link_deps += parse_dependencies(linker.get("AdditionalDependencies"))

    logger.debug("configuration %s: type %s, %d defines, %d include dirs, %d libraries",
                 cfg.name, TargetType.names[cfg.target_type],
                 len(cfg.defines), len(cfg.include_dirs), len(cfg.link_deps))
    return cfg


# ---------------------------------------------------------------------------
# whole project
# ---------------------------------------------------------------------------

def parse_project(root):
    """
    Creates :class:`v2c.model.Project` from the root element of the parsed
    document.
    """
    pos = Position.of_element(root)
    if root.tag != ROOT_ELEMENT:
        raise ParserError("not a Visual Studio project (root element is <%s>)" % root.tag,
                          pos=pos)

    name = root.get("Name")
    if not name:
        raise ParserError("project doesn't have a name", pos=pos)

    project = Project(name, source_pos=pos)
    project.keyword = root.get("Keyword")
    project.scc_project_name = root.get("SccProjectName")
    project.scc_local_path = root.get("SccLocalPath")
    project.scc_provider = root.get("SccProvider")

    for config_node in root.iterfind("Configurations/Configuration"):
        project.configurations.append(parse_configuration(config_node))

    files = root.find("Files")
    if files is not None:
        project.files = parse_filter(files) or SourceGroup(ROOT_GROUP_NAME)

    return project


def parse_document(doc):
    """Like :func:`parse_project`, but takes the whole lxml document."""
    return parse_project(doc.getroot())


def parse(text, filename=None):
    """
    Parses project file from string *text*. *filename* is only used for
    error messages.
    """
    xml_parser = None
    if isinstance(text, str):
        # the declared encoding (usually Windows-1252) no longer applies
        xml_parser = etree.XMLParser(encoding="utf-8")
        text = text.encode("utf-8")
    try:
        root = etree.fromstring(text, xml_parser, base_url=filename)
    except etree.XMLSyntaxError as e:
        raise ParserError(e.msg, pos=Position(filename, e.lineno))
    return parse_project(root)


def parse_file(filename):
    """
    Reads and parses project file *filename*. I/O errors are propagated as
    :exc:`IOError`.
    """
    logger.info("reading %s", filename)
    with open(filename, "rb") as f:
        try:
            doc = etree.parse(f, base_url=filename)
        except etree.XMLSyntaxError as e:
            raise ParserError(e.msg, pos=Position(filename, e.lineno))
    return parse_document(doc)
