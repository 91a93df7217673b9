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
Mapping tables translate values found in the project file (include
directories, preprocessor definitions, library names) into what should be
used in the CMake script, possibly differently on each platform.

A mapping file contains one rule per line::

    # comment
    token:[PLATFORM1][|PLATFORM2=REPLACEMENT2][|...]

e.g. ``ws2_32:WIN32`` links with ``ws2_32`` only on Windows, and
``Vc7/atlmfc/src/mfc:WIN32|UNIX=${MFC_INCLUDE}`` keeps the path on Windows
and uses a variable elsewhere. An alternative without platform, like in
``foo:=bar``, applies everywhere. Tokens that are not found literally are
matched against the keys used as regular expressions.
"""

import os.path
import re

import logging
logger = logging.getLogger("v2c.mappings")

from v2c.error import Position, warning
from v2c.utils import OrderedSet


#: Name of the platform group used for unconditional values.
ALL = "ALL"


class MappingTable(object):
    """
    Table of mapping rules, keyed by the (case-sensitive) token.

    Literal lookup is tried first; if it fails, the keys are tried as regular
    expressions matching the whole token, in the order in which they were
    loaded, and the first match wins.

    .. attribute:: rules

       Dictionary of token to rule string. The rule is :const:`None` for
       malformed lines, which are treated as if the token wasn't there.
    """
    def __init__(self, rules=None):
        self.rules = {}
        self._patterns = None
        if rules:
            for token, rule in rules.items():
                self.add(token, rule)

    def __len__(self):
        return len(self.rules)

    def __contains__(self, token):
        return token in self.rules

    def add(self, token, rule):
        """Adds a rule, replacing existing rule for the same token."""
        self.rules[token] = rule
        self._patterns = None

    def load(self, filename):
        """
        Reads rules from *filename*, overriding rules for tokens already
        present. Returns false if the file doesn't exist.
        """
        if not os.path.isfile(filename):
            warning("mapping file %s not available", filename)
            return False

        logger.debug("loading mappings from %s", filename)
        with open(filename, "r") as f:
            for lineno, line in enumerate(f, 1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                token, sep, rule = line.partition(":")
                if not sep:
                    warning("malformed mapping \"%s\" ignored", line,
                            pos=Position(filename, lineno))
                    self.add(token.strip(), None)
                else:
                    self.add(token.strip(), rule.strip())
        return True

    @property
    def patterns(self):
        """
        List of ``(compiled regex, rule)`` pairs for regular expression
        matching, in load order.
        """
        if self._patterns is None:
            self._patterns = []
            for key, rule in self.rules.items():
                if rule is None:
                    continue
                try:
                    self._patterns.append((re.compile(key), rule))
                except re.error as e:
                    warning("mapping key \"%s\" is not a valid regular expression (%s), "
                            "only literal matches are possible", key, e)
        return self._patterns

    def lookup(self, token):
        """
        Returns the rule for *token* or :const:`None` if there's none.
        """
        rule = self.rules.get(token)
        if rule is not None:
            return rule
        for regex, rule in self.patterns:
            if regex.fullmatch(token):
                logger.debug("mapping key \"%s\" matched \"%s\"", regex.pattern, token)
                return rule
        return None


def load_mappings(filename, root_dir=None, project_dir=None):
    """
    Loads mapping table from *filename*.

    If *root_dir* (the master project directory) is given, shared rules from
    it are read first and then overridden by the project's own rules.
    Relative *filename* is interpreted relative to *project_dir*, or to the
    current directory if that's not given.

    Missing files are not an error, the resulting table is simply empty.
    """
    table = MappingTable()
    if root_dir:
        table.load(os.path.join(root_dir, filename))
    if project_dir:
        filename = os.path.join(project_dir, filename)
    table.load(filename)
    return table


def parse_rule(token, rule):
    """
    Parses mapping *rule* for *token* into a list of ``(platform,
    replacement)`` pairs. Platform is :const:`ALL` for unconditional
    alternatives; replacement defaults to *token* itself.

    >>> parse_rule("FOO", "WIN32|UNIX=X")
    [('WIN32', 'FOO'), ('UNIX', 'X')]
    """
    result = []
    for alt in rule.split("|"):
        platform, _, replacement = alt.partition("=")
        platform = platform.strip()
        if not replacement:
            # "UNIX=" is the same as "UNIX"
            replacement = token
        if not platform:
            platform = ALL
        result.append((platform, replacement))
    return result


class PlatformDefs(object):
    """
    Values grouped by the platform they apply to. Each group preserves the
    order in which values were added and contains no duplicates. Groups are
    kept in the order of their creation.
    """
    def __init__(self):
        self._groups = {}

    def add(self, platform, value):
        try:
            group = self._groups[platform]
        except KeyError:
            group = self._groups[platform] = OrderedSet()
        group.add(value)

    def __getitem__(self, platform):
        return list(self._groups[platform])

    def __contains__(self, platform):
        return platform in self._groups

    def __iter__(self):
        return iter(self._groups)

    def __len__(self):
        return len(self._groups)

    def __bool__(self):
        return bool(self._groups)

    def items(self):
        for platform, group in self._groups.items():
            yield (platform, list(group))

    def __repr__(self):
        return "PlatformDefs(%r)" % dict(self.items())


def resolve(tokens, table):
    """
    Applies mapping *table* to *tokens*, returning :class:`PlatformDefs`.

    Every token ends up in at least one group: tokens without a rule go to
    :const:`ALL` unchanged, tokens with a rule go to every group named by it
    (possibly several at once).
    """
    defs = PlatformDefs()
    for token in tokens:
        rule = table.lookup(token)
        if rule is None:
            defs.add(ALL, token)
            continue
        for platform, replacement in parse_rule(token, rule):
            defs.add(platform, replacement)
    return defs
