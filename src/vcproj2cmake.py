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
Command line driver:

    vcproj2cmake <input.vcproj> [<output CMakeLists.txt>] [<master project directory>]
"""

import sys
import logging
from optparse import OptionParser, OptionGroup

# This is needed to initialize colored output on Windows. It must be done
# before any stdout is done.
import clint.packages.colorama
clint.packages.colorama.init()
from clint.textui import colored


class V2cFormatter(logging.Formatter):

    def __init__(self):
        logging.Formatter.__init__(self, fmt=logging.BASIC_FORMAT)
        self.format_warning = colored.yellow
        self.format_error = colored.red

    def format(self, record):
        level = record.levelno
        if level == logging.ERROR or level == logging.WARNING or level == logging.INFO:
            msg = ""
            if hasattr(record, "pos") and record.pos:
                msg = "%s: " % record.pos
            if level != logging.INFO:
                msg += "%s: " % record.levelname.lower()
            msg += record.getMessage()
            if level == logging.ERROR:
                msg = str(self.format_error(msg))
            elif level == logging.WARNING:
                msg = str(self.format_warning(msg))
            return msg
        else:
            return logging.Formatter.format(self, record)

logger = logging.getLogger()


# OptionParser only allows a string version argument; importing v2c.version
# this early would import v2c before logging is set up.
class V2cOptionParser(OptionParser):
    def get_version(self):
        import v2c.version
        return "vcproj2cmake %s" % v2c.version.get_version()


def create_parser():
    parser = V2cOptionParser(
            version="vcproj2cmake",
            usage="%prog [options] input.vcproj [CMakeLists.txt] [master project directory]")
    parser.add_option(
            "-q", "--quiet",
            action="store_true", dest="quiet", default=False,
            help="only show warnings and errors")
    parser.add_option(
            "-c", "--authoritative-config",
            action="store", dest="authoritative", default=None,
            metavar="CONFIG",
            help="take settings that CMake can't set per configuration from CONFIG "
                 "[default: the second configuration of the project]")
    parser.add_option(
            "", "--dry-run",
            action="store_true", dest="dry_run", default=False,
            help="don't write any files, just pretend to do it")
    parser.add_option(
            "", "--diff-only",
            action="store_true", dest="diff_only", default=False,
            help="only output diffs instead of modifying the files, implies --dry-run")
    parser.add_option(
            "", "--no-backup",
            action="store_false", dest="backup", default=True,
            help="don't keep the previous output as .backup file")

    debug_group = OptionGroup(parser, "Debug Options")
    debug_group.add_option(
            "", "--debug",
            action="store_true", dest="debug", default=False,
            help="show debug log")
    debug_group.add_option(
            "", "--dump-model",
            action="store_true", dest="dump", default=False,
            help="dump parsed project to stdout instead of generating output")
    parser.add_option_group(debug_group)
    return parser


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    options, args = create_parser().parse_args(argv)

    if not 1 <= len(args) <= 3:
        sys.stderr.write("incorrect number of arguments, input .vcproj file required\n")
        sys.exit(3)

    if not any(isinstance(h.formatter, V2cFormatter) for h in logger.handlers):
        log_handler = logging.StreamHandler()
        log_handler.setFormatter(V2cFormatter())
        logger.addHandler(log_handler)

    if options.debug:
        log_level = logging.DEBUG
    elif options.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logger.setLevel(log_level)

    # note: we intentionally import v2c this late so that the logging
    # module is already initialized
    import v2c.error
    import v2c.io
    from v2c.converter import Converter
    from v2c.dumper import DumpingConverter

    input_file = args[0]
    output_file = args[1] if len(args) > 1 else None
    master_dir = args[2] if len(args) > 2 else None

    try:
        v2c.io.dry_run = options.dry_run or options.diff_only
        v2c.io.diff_only = options.diff_only
        v2c.io.backup = options.backup
        if options.dump:
            conv = DumpingConverter(master_dir=master_dir, authoritative=options.authoritative)
        else:
            conv = Converter(master_dir=master_dir, authoritative=options.authoritative)
        conv.process_file(input_file, output_file)

    except KeyboardInterrupt:
        if options.debug:
            raise
        else:
            sys.exit(2)
    except IOError as e:
        if options.debug:
            raise
        else:
            logging.error(e)
            sys.exit(1)
    except v2c.error.Error as e:
        if options.debug:
            raise
        else:
            logging.error(e.msg, extra={"pos":e.pos})
            sys.exit(1)


if __name__ == "__main__":
    main()
