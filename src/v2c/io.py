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
Helper classes for vcproj2cmake I/O. Manages writing of output, keeping a
backup of the previous version, dry runs and diffs.
"""

import os
import os.path
import sys
from difflib import unified_diff

import logging
logger = logging.getLogger("v2c.io")

from v2c.error import BackupError


# Set to true to prevent any output from being written
dry_run = False

# Set to true to show diff with the existing file instead of updating it
diff_only = False

# Set to false to overwrite existing output without keeping a .backup copy
backup = True

# Extension appended to the name of the previous version of the output
BACKUP_SUFFIX = ".backup"

# Number of created files
num_created = 0
# Number of modified files
num_modified = 0


class OutputFile(object):
    """
    File to be written by vcproj2cmake.

    Example usage:

    ::

      f = io.OutputFile("CMakeLists.txt")
      f.write(body)
      f.commit()

    Notice the need to explicitly call commit(). Nothing touches the disk
    before that, so a failed conversion never leaves a half-written file.
    """
    def __init__(self, filename, charset="utf-8"):
        """
        Creates output file.

        :param filename: Name of the output file. Should be either relative
                         to CWD or absolute.
        :param charset:  Charset used to encode the text.
        """
        self.filename = filename
        self.charset = charset
        self.text = ""

    def write(self, text):
        """
        Appends text to the output. Note that the changes don't take effect
        until you call commit().
        """
        self.text += text

    def _read_old(self):
        try:
            with open(self.filename, "r", encoding=self.charset) as f:
                return f.read()
        except IOError:
            return None

    def commit(self):
        """
        Writes the text to disk. If the file already exists, it is renamed to
        a ``.backup`` sibling first; :exc:`v2c.error.BackupError` is raised if
        that isn't possible, the old content is never silently lost.
        """
        try:
            rel_fn = os.path.relpath(self.filename)
        except ValueError:
            # This can happen under Windows if the filename is on a different
            # drive from the current directory.
            rel_fn = self.filename

        old = self._read_old()

        if diff_only:
            for line in unified_diff(old.splitlines(True) if old is not None else [],
                                     self.text.splitlines(True),
                                     os.path.normpath(os.path.join("old", rel_fn)),
                                     os.path.normpath(os.path.join("new", rel_fn))):
                sys.stdout.write(line)
            return

        global num_created, num_modified
        if old is None and not os.path.exists(self.filename):
            status = "A"
            num_created += 1
        else:
            status = "U"
            num_modified += 1

        logger.info("%s\t%s", status, rel_fn)

        if dry_run:
            return # nothing to do, just pretending to write output

        if status == "U" and backup:
            backup_fn = self.filename + BACKUP_SUFFIX
            try:
                os.replace(self.filename, backup_fn)
            except OSError as e:
                raise BackupError("cannot rename %s to %s: %s" %
                                  (rel_fn, backup_fn, e.strerror))
            logger.debug("previous version saved as %s", backup_fn)

        dirname = os.path.dirname(self.filename)
        if dirname and not os.path.isdir(dirname):
            os.makedirs(dirname)
        with open(self.filename, "w", encoding=self.charset, newline="\n") as f:
            f.write(self.text)
