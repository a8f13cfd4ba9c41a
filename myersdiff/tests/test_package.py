# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from subprocess import check_output
import sys


def test_pkg_import_no_cli():
    # Test that importing myersdiff does not import the command line app,
    # as that pulls in traitlets and jupyter_core
    out = check_output([
        sys.executable, '-c',
        'import sys, myersdiff; print("myersdiff.diffapp" in sys.modules)'])
    assert out.decode('utf8').strip() == 'False'


def test_pkg_exports():
    import myersdiff
    major, minor = myersdiff.__version__.split(".")[:2]
    assert major.isdigit() and minor.isdigit()
    for name in myersdiff.__all__:
        assert hasattr(myersdiff, name)
