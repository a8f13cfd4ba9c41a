# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import MyersDiffFormatError


class DiffEntry(dict):
    """For internal usage in myersdiff library.

    Minimal class providing attribute access to diff entry keys.

    Being a dict, a list of entries can be passed to json.dump as is.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        return self[name]

    def __setattr__(self, name, value):
        self[name] = value


class DiffOp:
    "Collection of valid values for the op field in diff entries."
    MATCH = "match"
    INSERT = "insert"
    DELETE = "delete"

    OPS = (MATCH, INSERT, DELETE)


def op_match(value):
    "Create a diff entry for a value present unchanged in both sequences."
    return DiffEntry(op=DiffOp.MATCH, value=value)

def op_insert(value):
    "Create a diff entry for a value present only in the new sequence."
    return DiffEntry(op=DiffOp.INSERT, value=value)

def op_delete(value):
    "Create a diff entry for a value present only in the old sequence."
    return DiffEntry(op=DiffOp.DELETE, value=value)


def count_edits(diff):
    "Count the entries of a diff (or ops of an edit script) that are not matches."
    n = 0
    for e in diff:
        op = e.op if isinstance(e, DiffEntry) else e
        if op != DiffOp.MATCH:
            n += 1
    return n


def is_valid_diff(diff):
    """Checks wheter a diff (list of diff entries) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
        result = True
    except MyersDiffFormatError:
        result = False
        raise
    return result


def validate_diff(diff):
    """Check wheter a diff (list of diff entries) is well formed.

    Raises a MyersDiffFormatError if not well formed.
    """
    if not isinstance(diff, list):
        raise MyersDiffFormatError("Diff must be a list.")
    for e in diff:
        validate_diff_entry(e)


def validate_diff_entry(e):
    """Check that e is a well formed diff entry.

    Raises a MyersDiffFormatError if not well formed.
    """
    if not isinstance(e, DiffEntry):
        raise MyersDiffFormatError("Diff entry '{}' is not a diff type.".format(e))
    if "op" not in e:
        raise MyersDiffFormatError("Diff entry '{}' has no op.".format(e))
    if e.op not in DiffOp.OPS:
        raise MyersDiffFormatError("Unknown diff op '{}'.".format(e.op))
    if "value" not in e:
        raise MyersDiffFormatError(
            "Diff entry with op '{}' has no value.".format(e.op))
    # Values are opaque, anything with a defined equality will do


def to_diffentry_dicts(di):
    "Convert dict objects (e.g. a diff loaded from json) to DiffEntry objects with attribute access."
    if isinstance(di, list):
        return [to_diffentry_dicts(v) for v in di]
    elif isinstance(di, dict):
        # Values are left alone, they are opaque elements
        return DiffEntry(di)
    else:
        return di
