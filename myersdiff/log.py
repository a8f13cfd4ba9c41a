# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'


class MyersDiffFormatError(ValueError):
    "A diff entry or diff does not have the expected form."


logger = logging.getLogger('myersdiff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error


def init_logging(level=logging.INFO):
    """Log to stderr at `level`. Used by the command line entry point."""
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.captureWarnings(True)
    set_log_level(level)


def set_log_level(level):
    # The root logger too, so captured warnings follow the same level
    logger.setLevel(level)
    logging.getLogger().setLevel(level)
