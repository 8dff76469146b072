# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .diff_format import DiffOp, DiffEntry, validate_diff
from .log import DiffFormatError


_old_ops = (DiffOp.EQUAL, DiffOp.DELETE)
_new_ops = (DiffOp.EQUAL, DiffOp.INSERT)


def render_diff(diff):
    """Render a diff as text, prefixing inserts with '+' and deletes with '-'.

    E.g. the diff of "A" and "B" renders as "-A+B".
    """
    return "".join(str(e) for e in diff)


def reconstruct_old(diff):
    "Join the text of the equal and delete entries of a diff."
    return "".join(e.text for e in diff if e.op in _old_ops)


def reconstruct_new(diff):
    "Join the text of the equal and insert entries of a diff."
    return "".join(e.text for e in diff if e.op in _new_ops)


def _overlaps(existing, new):
    """Check whether the last existing entry has the same op as the new entry.
    """
    if not existing:
        return False
    return existing[-1].op == new.op


def merge_adjacent(diff):
    """Join neighbouring diff entries with the same op into one entry.

    The backtrace emits one entry per character; this is only
    a presentation concern and does not reorder entries.
    """
    merged = []
    for e in diff:
        if _overlaps(merged, e):
            merged[-1] = DiffEntry(op=e.op, text=merged[-1].text + e.text)
        else:
            merged.append(DiffEntry(e))
    return merged


def count_ops(diff):
    "Count the number of characters covered by each op."
    counts = {op: 0 for op in DiffOp.PREFIXES}
    for e in diff:
        counts[e.op] += len(e.text)
    return counts


def to_clean_dicts(di):
    "Recursively convert dict-like objects to straight python dicts."
    if isinstance(di, dict):
        return {k: to_clean_dicts(v) for k, v in di.items()}
    elif isinstance(di, list):
        return [to_clean_dicts(v) for v in di]
    else:
        return di


def to_diffentry_dicts(di):
    "Recursively convert dict objects to DiffEntry objects with attribute access."
    if isinstance(di, dict):
        return DiffEntry(**{k: to_diffentry_dicts(v) for k, v in di.items()})
    elif isinstance(di, list):
        return [to_diffentry_dicts(v) for v in di]
    else:
        return di


def to_json(diff, **kwargs):
    """Serialize a diff to a json array of {"op": ..., "text": ...} objects.

    Keyword arguments are passed on to json.dumps.
    """
    return json.dumps(to_clean_dicts(list(diff)), **kwargs)


def from_json(text):
    """Parse a json serialized diff back into diff entries.

    Raises a DiffFormatError if the json is not a well formed diff.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise DiffFormatError("Diff is not valid json: %s" % e) from e
    if not isinstance(data, list):
        raise DiffFormatError("Diff must be a json array.")
    if not all(isinstance(e, dict) for e in data):
        raise DiffFormatError("Diff entries must be json objects.")
    diff = to_diffentry_dicts(data)
    validate_diff(diff)
    return diff
