# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .diffing.myers import shortest_edit_trace, backtrack_edit_script
from .diffing.sequences import script_to_entries
from .log import error, info
from .prettyprint import pretty_print_diff, pretty_print_trace
from .utils import EXPLICIT_MISSING_FILE, read_lines, setup_std_streams


_description = "Compute the line-by-line difference between two text files."


def main_diff(args):
    """Main handler of diff CLI"""
    output = getattr(args, 'out', None)
    return _handle_diff(args.base, args.remote, output, args)


def _handle_diff(base, remote, output, args):
    """Handles diffs of files, either as filenames or file-like objects"""
    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing:
    for fn in (base, remote):
        if (isinstance(fn, str) and not os.path.exists(fn) and
                fn != EXPLICIT_MISSING_FILE):
            error("Missing file %s", fn)
            return 1

    try:
        a = read_lines(base)
        b = read_lines(remote)
    except OSError as e:
        error("Could not read input: %s", e)
        return 1

    trace = shortest_edit_trace(a, b)
    d = script_to_entries(backtrack_edit_script(a, b, trace), a, b)

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")
    config = prettyprint_config_from_args(args, out=Printer())

    if getattr(args, 'show_trace', False):
        pretty_print_trace(trace, config)

    # Output as JSON to file, or print to stdout:
    if output:
        with open(output, "w") as df:
            json.dump(d, df, indent=2, separators=(",", ": "))
        info("Wrote diff of %d entries to %s", len(d), output)
    else:
        pretty_print_diff(d, config)

    return 0


def _build_arg_parser(prog="myersdiff"):
    """Creates an argument parser for the myersdiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument("base", help="The base (old) filename.")
    parser.add_argument("remote", help="The remote (new) filename.")

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file as JSON. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
