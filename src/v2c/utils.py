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
Misc. helpers for other vcproj2cmake code.
"""

import posixpath
from collections.abc import MutableSet


class OrderedSet(MutableSet):
    """
    Set class that preserves insertion order during iteration.
    """
    def __init__(self, data=None):
        self._list = list()
        self._set = set()
        if data:
            self.update(data)

    def __contains__(self, x):
        return x in self._set

    def __len__(self):
        return len(self._list)

    def __iter__(self):
        return iter(self._list)

    def __repr__(self):
        return "OrderedSet(%r)" % self._list

    def add(self, x):
        if x not in self._set:
            self._set.add(x)
            self._list.append(x)

    def discard(self, x):
        if x in self._set:
            self._set.remove(x)
            self._list.remove(x)

    def update(self, other):
        for i in other:
            self.add(i)


class memoized_property(object):
    """
    Decorator for lazily evaluated properties.

    Use as the `@property` decorator. The method will only be called once,
    though. Subsequent uses of the property will use the previously returned
    value.
    """
    def __init__(self, func):
        self.func = func

    def __get__(self, obj, ownerClass=None):
        if obj is None:
            return self
        x = self.func(obj)
        setattr(obj, self.func.__name__, x)
        return x


def normalize_path(p):
    """
    Converts a Windows path from the project file into Unix form: backslashes
    become slashes and a leading ``./`` component is removed. A lone ``.`` is
    kept as it is.

    >>> normalize_path(".\\\\src\\\\main.cpp")
    'src/main.cpp'
    """
    elems = p.replace("\\", "/").split("/")
    if elems[0] == "." and len(elems) > 1:
        elems.pop(0)
    return "/".join(elems)


def file_extension(p):
    """Returns extension of *p* without the dot, or empty string."""
    ext = posixpath.splitext(p)[1]
    return ext[1:] if ext else ""


def escape_char(text, char):
    """Prefixes every occurrence of *char* in *text* with a backslash."""
    return text.replace(char, "\\" + char)


def escape_backslash(text):
    """Doubles all backslashes in *text*."""
    return text.replace("\\", "\\\\")
