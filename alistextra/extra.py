"""
Helpers for building, reshaping and querying insertion-ordered dicts.

Nothing in here mutates its arguments: every function returns a fresh dict.
Functions that take a set of keys accept any iterable (an OrderedSet, a list, dict.keys()...).
"""

import logging
from functools import reduce

log = logging.getLogger(__name__)

def _merge_into(combine, dct, key, value):
    """In-place insert_dedupe, only ever used on dicts we built ourselves."""
    if key in dct:
        dct[key] = combine(dct[key], value)
    else:
        dct[key] = value
    return dct

def _insert(dct, key, value):
    dct[key] = value
    return dct

# Construction from lists

def group_by(keyfun, xs):
    """Returns a dict d such that for every k, d[k] is the list of xs with keyfun(x) equal to k, in the order they appear in xs."""
    ret = {}
    for x in xs:
        ret.setdefault(keyfun(x), []).append(x)
    return ret

def filter_group_by(keyfun, xs):
    """Like group_by, but keyfun may return None to drop the element altogether."""
    ret = {}
    for x in xs:
        k = keyfun(x)
        if k is not None:
            ret.setdefault(k, []).append(x)
    return ret

def from_list_by(keyfun, xs):
    """Build a dict keyed by keyfun(x). If two elements share a key the later one wins."""
    return reduce(lambda acc, x: _insert(acc, keyfun(x), x), xs, {})

def from_list_dedupe(combine, pairs):
    """Build a dict from (key, value) pairs, merging repeated keys with combine(accumulated, new)."""
    return reduce(lambda acc, kv: _merge_into(combine, acc, kv[0], kv[1]), pairs, {})

def from_list_dedupe_by(combine, keyfun, xs):
    """from_list_by + from_list_dedupe: key every x with keyfun and merge collisions with combine."""
    return reduce(lambda acc, x: _merge_into(combine, acc, keyfun(x), x), xs, {})

def frequencies(xs):
    """Count the occurrences of every distinct element of xs."""
    return from_list_dedupe(lambda a, b: a + b, ((x, 1) for x in xs))

# Mutation and filtering

def remove_when(pred, dct):
    """Drop the entries for which pred(key, value) is true."""
    return {k: v for k, v in dct.items() if not pred(k, v)}

def remove_many(keys, dct):
    """Remove every key in keys from dct. Keys that dct doesn't have are ignored."""
    ret = dict(dct)
    for k in keys:
        ret.pop(k, None)
    return ret

def keep_only(keys, dct):
    """
    Keep only the entries whose key is in keys. Keys missing from dct are skipped.

    Note that the result is ordered like keys, not like dct.
    """
    return {k: dct[k] for k in keys if k in dct}

def insert_dedupe(combine, key, value, dct):
    """Insert value at key, or store combine(old, value) if key is already there."""
    return _merge_into(combine, dict(dct), key, value)

def map_keys(keyfun, dct):
    """Apply keyfun to every key. When two keys map to the same new key the later entry wins."""
    return reduce(lambda acc, kv: _insert(acc, keyfun(kv[0]), kv[1]), dct.items(), {})

def map_values(f, dct):
    """Replace every value v with f(v). Keys and their order are untouched."""
    return {k: f(v) for k, v in dct.items()}

def filter_map(f, dct):
    """Replace every value with f(key, value), dropping the entries where f returned None."""
    ret = {}
    for k, v in dct.items():
        new = f(k, v)
        if new is not None:
            ret[k] = new
    return ret

def invert(dct):
    """
    Swap keys and values.

    Values don't have to be unique, so this can lose entries: the key seen last wins.
    """
    ret = reduce(lambda acc, kv: _insert(acc, kv[1], kv[0]), dct.items(), {})
    if len(ret) < len(dct):
        log.debug("invert collapsed %d entries into %d", len(dct), len(ret))
    return ret

def update_if_exists(key, f, dct):
    """Replace dct[key] with f(dct[key]) if key is present, otherwise return an unchanged copy."""
    ret = dict(dct)
    if key in ret:
        ret[key] = f(ret[key])
    return ret

def upsert(key, value, f, dct):
    """Store f(dct[key]) if key is present, otherwise insert value."""
    return insert_dedupe(lambda old, _: f(old), key, value, dct)

def union_with(combine, left, right):
    """All entries of both dicts. Keys found in both get combine(left_value, right_value)."""
    return reduce(lambda acc, kv: _merge_into(combine, acc, kv[0], kv[1]), right.items(), dict(left))

# Queries

def find(pred, dct):
    """Return the first (key, value) pair that satisfies pred, or None if couldn't find one."""
    return next(((k, v) for k, v in dct.items() if pred(k, v)), None)

def any_item(pred, dct):
    """True if at least one entry satisfies pred(key, value)."""
    return any(pred(k, v) for k, v in dct.items())

def all_items(pred, dct):
    """True if every entry satisfies pred(key, value). Vacuously true for an empty dict."""
    return all(pred(k, v) for k, v in dct.items())
