# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .myers import shortest_edit_script
from .sequences import diff_sequence, diff_lines

# The general entry point
diff = diff_sequence

__all__ = ["diff", "diff_sequence", "diff_lines", "shortest_edit_script"]
