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
This module contains helper classes for simple handling of errors. In
particular, the :exc:`Error` class keeps track of the position in the input
project file where the error occurred or to which it relates to.
"""

import threading

import logging
logger = logging.getLogger("v2c.error")


class Position(object):
    """
    Location of an error in the input file.

    All of its attributes are optional and may be None. Convert the object
    to string to get human-readable output.

    .. attribute:: filename

       Name of the source file.

    .. attribute:: line

       Line number.
    """
    def __init__(self, filename=None, line=None):
        self.filename = filename
        self.line = line

    @staticmethod
    def of_element(element, filename=None):
        """
        Returns position of an lxml element, using the document URL when
        *filename* isn't given.
        """
        if filename is None:
            filename = element.getroottree().docinfo.URL
        return Position(filename, element.sourceline)

    def __eq__(self, other):
        return (self.filename == other.filename and
                self.line == other.line)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __str__(self):
        hdr = []
        if self.filename:
            hdr.append(self.filename)
        if self.line is not None:
            hdr.append(str(self.line))
        return ":".join(hdr)


class Error(Exception):
    """
    Base class for all vcproj2cmake errors.

    When converted to string, the message is formatted in the usual way of
    compilers, as ``file:line: error``.

    .. attribute:: msg

        Error message to show to the user.

    .. attribute:: pos

        :class:`Position` object with location of the error. May be
        :const:`None`.
    """
    def __init__(self, msg, pos=None):
        super(Error, self).__init__(msg)
        self.msg = msg
        self.pos = pos

    def __str__(self):
        if self.pos:
            return "%s: %s" % (self.pos, self.msg)
        else:
            return self.msg


class ParserError(Error):
    """
    Exception class for errors encountered when reading the input project,
    e.g. malformed XML or a document that isn't a Visual Studio project.
    """
    pass


class UnsupportedError(Error):
    """
    Exception class for project settings that can't be converted, e.g. an
    unknown configuration type. Generating output anyway would produce a
    silently wrong CMake script.
    """
    pass


class BackupError(Error):
    """
    Exception raised when an existing output file can't be moved out of the
    way before it is overwritten.
    """
    pass


class _LocalContextStack(threading.local):
    """
    Helper class for keeping track of :class:`error_context` instances.
    """
    stack = []

    def push(self, ctx):
        if not self.stack:
            self.stack = [ctx]
        else:
            self.stack.append(ctx)

    def pop(self):
        self.stack.pop()

    @property
    def pos(self):
        for c in reversed(self.stack):
            p = c.pos
            if p: return p
        return None


_context_stack = _LocalContextStack()


class error_context(object):
    """
    Error context for adding positional information to exceptions thrown
    without one. The context is typically a model object (configuration,
    source group) that remembers where in the project file it came from.

    Usage:

    .. code-block:: python

       with error_context(config):
          ...do something that may throw...

    .. attribute:: pos

        :class:`Position` object with location of the error. May be
        :const:`None`.
    """
    def __init__(self, context):
        self.context = context

    def __enter__(self):
        _context_stack.push(self)

    def __exit__(self, exc_type, exc_value, traceback):
        _context_stack.pop()
        if exc_value is not None:
            if isinstance(exc_value, Error) and exc_value.pos is None:
                exc_value.pos = self.pos

    @property
    def pos(self):
        c = self.context
        if isinstance(c, Position):
            return c
        elif hasattr(c, "source_pos"):
            return c.source_pos
        elif hasattr(c, "pos"):
            return c.pos
        else:
            return None


def warning(msg, *args, **kwargs):
    """
    Logs a warning.

    The function takes position arguments similarly to logging module's
    functions. It also accepts optional *pos* argument with position
    information as :class:`Position`.

    Uses active :class:`error_context` instances to decorate the warning with
    position information if not provided.

    Usage:

    .. code-block:: python

       v2c.error.warning("%s: skipping IDL generated file", f, pos=pos)
    """
    text = msg % args if args else msg
    e = {}
    try:
        e["pos"] = kwargs["pos"]
    except KeyError:
        e["pos"] = _context_stack.pos
    logger.warning(text, extra=e)
