# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
import os

from pytest import fixture, skip

from myersdiff.log import logger


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def reset_log():
    # Restore default log levels after test
    yield
    logger.setLevel(logging.NOTSET)
    logging.getLogger().setLevel(logging.WARNING)


@fixture
def no_config_files(tmpdir, monkeypatch):
    """Run in an empty directory, without any user config on the search path"""
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmpdir.join('jupyter')))
    monkeypatch.setenv('JUPYTER_NO_CONFIG', '1')
    with tmpdir.as_cwd():
        yield str(tmpdir)
