# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .diff_format import DiffOp, MyersDiffFormatError


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color} '.format(color=colorama.Fore.RESET),
        REMOVE = '{color}-'.format(color=colorama.Fore.RED),
        ADD    = '{color}+'.format(color=colorama.Fore.GREEN),
        INFO   = '{color}'.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = ' ',
        REMOVE = '-',
        ADD    = '+',
        INFO   = '',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_diff_entry(e, config=DefaultConfig):
    "Format a single diff entry as a line of text, without line ending."
    if e.op == DiffOp.INSERT:
        prefix = config.ADD
    elif e.op == DiffOp.DELETE:
        prefix = config.REMOVE
    elif e.op == DiffOp.MATCH:
        prefix = config.KEEP
    else:
        raise MyersDiffFormatError("Unknown diff op '{}'.".format(e.op))
    return "{}{}{}".format(prefix, e.value, config.RESET)


def pretty_print_diff(diff, config=DefaultConfig):
    "Pretty-print a line-by-line diff, one line per entry."
    for e in diff:
        config.out.write(format_diff_entry(e, config) + "\n")


def pretty_print_trace(trace, config=DefaultConfig):
    """Pretty-print the furthest reaching points of each level of a search trace.

    Diagonals the search did not reach before finishing are left out.
    """
    for d, V in enumerate(trace):
        config.out.write("{}d = {}:{}\n".format(config.INFO, d, config.RESET))
        for k in range(-d, d+1, 2):
            x = V[d+k]
            if x is None:
                continue
            config.out.write("  k = {:2d}: ({}, {})\n".format(k, x, x - k))
