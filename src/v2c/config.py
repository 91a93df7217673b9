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

#  Configuration holder
#
#  These settings are shared by the whole conversion run. The command line
#  driver may override them before running the converter.

import posixpath

# Local config directory as created in every project which needs specific
# settings (possibly required in the root project only). Mapping files and
# hook includes are looked for here.
config_dir_local = "./cmake/vcproj2cmake"

# Directory where local CMake modules reside, relative to the master project.
module_path_local = "./cmake/Modules"

# Used for CMAKE_MODULE_PATH when no master project directory is known. We
# can't use PROJECT_SOURCE_DIR there, project() isn't declared yet.
module_path_fallback = "${CMAKE_CURRENT_SOURCE_DIR}/../../cmake/Modules"

# Mapping files, relative to the project (or master project) directory:
include_mappings_file = posixpath.join(config_dir_local, "include_mappings.txt")
define_mappings_file = posixpath.join(config_dir_local, "define_mappings.txt")
dependency_mappings_file = posixpath.join(config_dir_local, "dependency_mappings.txt")

# CMake can express some settings (include directories, target type, link
# libraries) only globally and not per configuration. Such settings are
# taken from this configuration ("Debug", "Release", ...). If empty, the
# configuration following the first one in the project file is used.
authoritative_config = ""

# Name of the output file when none is given, created next to the input.
default_output = "CMakeLists.txt"
