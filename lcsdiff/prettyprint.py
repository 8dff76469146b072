# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .diff_format import DiffOp
from .diff_utils import count_ops


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'EQUAL',
    'DELETE',
    'INSERT',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        EQUAL  = '',
        DELETE = colorama.Fore.RED,
        INSERT = colorama.Fore.GREEN,
        INFO   = colorama.Fore.BLUE + colorama.Style.BRIGHT,
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        EQUAL  = '',
        DELETE = '',
        INSERT = '',
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

    def color_for(self, op):
        consts = col_const[self.use_color]
        if op == DiffOp.INSERT:
            return consts.INSERT
        elif op == DiffOp.DELETE:
            return consts.DELETE
        return consts.EQUAL

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_entry(e, config=DefaultConfig):
    "Format a single diff entry, wrapping changes in color escapes."
    color = config.color_for(e.op)
    if not color:
        return str(e)
    return "%s%s%s" % (color, e, config.RESET)


def pretty_print_diff_header(old_name, new_name, config=DefaultConfig):
    config.out.write("%s## diff %s %s%s\n" % (
        config.INFO, old_name, new_name, config.RESET))


def pretty_print_diff_summary(diff, config=DefaultConfig):
    counts = count_ops(diff)
    config.out.write("%s## %d inserted, %d deleted, %d unchanged%s\n" % (
        config.INFO, counts[DiffOp.INSERT], counts[DiffOp.DELETE],
        counts[DiffOp.EQUAL], config.RESET))


def pretty_print_diff(diff, config=DefaultConfig):
    """Pretty-print a diff in the +/- convention.

    Inserted text is prefixed with '+' and deleted text with '-',
    unchanged text is written as is.
    """
    text = "".join(format_entry(e, config) for e in diff)
    config.out.write(text)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict of printable values without wrapper keys

    Instead of {'key': 'value', 'section': {'key': 'value'}}, do

        key: value
        section:
          key: value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        if isinstance(v, dict):
            pretty_print_key(k, prefix, config)
            pretty_print_dict(v, (), prefix+IND, config)
        else:
            pretty_print_key_value(k, v, prefix, config)
