# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DiffFormatError


class DiffEntry(dict):
    """A single edit operation: an op paired with the text it covers.

    Minimal dict subclass providing attribute access to the entry keys,
    so entries compare structurally and serialize to json as-is.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value

    def __str__(self):
        return DiffOp.PREFIXES.get(self.get("op"), "") + self.get("text", "")


class DiffOp:
    "Collection of valid values for the op field in diff entries."
    INSERT = "insert"
    DELETE = "delete"
    EQUAL = "equal"

    # Prefixes used when rendering entries as text
    PREFIXES = {
        INSERT: "+",
        DELETE: "-",
        EQUAL: "",
    }


def op_insert(text):
    "Create a diff entry inserting text from the new sequence."
    return DiffEntry(op=DiffOp.INSERT, text=text)

def op_delete(text):
    "Create a diff entry deleting text from the old sequence."
    return DiffEntry(op=DiffOp.DELETE, text=text)

def op_equal(text):
    "Create a diff entry for text common to both sequences."
    return DiffEntry(op=DiffOp.EQUAL, text=text)


class EditScriptBuilder(object):
    """Accumulates diff entries for one diff computation.

    With `reverse=True` entries are expected to arrive back to front,
    as produced by a backtrace, and are flipped once in `validated()`.
    """

    # Valid values for the op field in edit script entries
    OPS = (
        DiffOp.INSERT,
        DiffOp.DELETE,
        DiffOp.EQUAL,
        )

    def __init__(self, reverse=False):
        self._diff = []
        self._reverse = reverse

    def validated(self):
        if self._reverse:
            return self._diff[::-1]
        return list(self._diff)

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, DiffEntry)
        assert "op" in entry
        assert entry.op in EditScriptBuilder.OPS
        assert "text" in entry

        self._diff.append(entry)

    def insert(self, text):
        self.append(op_insert(text))

    def delete(self, text):
        self.append(op_delete(text))

    def equal(self, text):
        self.append(op_equal(text))

    def __len__(self):
        return len(self._diff)


def is_valid_diff(diff):
    """Checks wheter a diff (list of diff entries) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
        result = True
    except DiffFormatError:
        result = False
    return result


def validate_diff(diff):
    """Check wheter a diff (list of diff entries) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, list):
        raise DiffFormatError("Diff must be a list.")
    for e in diff:
        validate_diff_entry(e)


def validate_diff_entry(e):
    """Check that e is a well formed diff entry.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(e, DiffEntry):
        raise DiffFormatError("Diff entry '{}' is not a diff type.".format(e))

    extra = set(e.keys()) - {"op", "text"}
    if extra:
        raise DiffFormatError(
            "Diff entry has unexpected keys {}.".format(sorted(extra)))

    op = e.get("op")
    if op not in EditScriptBuilder.OPS:
        raise DiffFormatError("Unknown diff op '{}'.".format(op))

    text = e.get("text")
    if not isinstance(text, str):
        msg = "Diff entry text '{}' of type '{}' is not a string."
        raise DiffFormatError(msg.format(text, type(text)))
