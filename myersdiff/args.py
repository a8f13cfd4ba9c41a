# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from traitlets import TraitError

from ._version import __version__
from .config import MyersDiff, build_config
from .log import init_logging, set_log_level


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from config files.

    `config_class` names the settings, see config.build_config.
    """

    def __init__(self, *args, config_class=MyersDiff, **kwargs):
        self.config_class = config_class
        super(ConfigBackedParser, self).__init__(*args, **kwargs)

    def effective_config(self):
        try:
            return build_config(self.config_class)
        except TraitError as e:
            self.error(str(e))

    def parse_known_args(self, args=None, namespace=None):
        self.set_defaults(**self.effective_config())
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is only reached when the option is given
        init_logging(level=getattr(logging, default or 'INFO'))
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_log_level(getattr(logging, values))


class ConfigHelpAction(argparse.Action):
    """Print the effective config of the parser to stderr and exit with status 1."""

    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print('%s:' % parser.config_class.__name__, file=sys.stderr)
        for key, value in parser.effective_config().items():
            print('  %s: %s' % (key, json.dumps(value)), file=sys.stderr)
        sys.exit(1)


def add_generic_args(parser):
    """Adds the --version, --config and --log-level options."""
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=MyersDiff.log_level.values,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_prettyprint_args(parser):
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help="prevent use of ANSI color code escapes for text output",
    )
    parser.add_argument(
        '--show-trace',
        dest='show_trace',
        action="store_true",
        default=False,
        help="print the furthest reaching points of the edit graph search "
             "before the diff",
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
