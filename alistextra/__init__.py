"""
Helpers for insertion-ordered dicts used as association lists.
"""

from ordered_set import OrderedSet

from alistextra.extra import (
    all_items,
    any_item,
    filter_group_by,
    filter_map,
    find,
    frequencies,
    from_list_by,
    from_list_dedupe,
    from_list_dedupe_by,
    group_by,
    insert_dedupe,
    invert,
    keep_only,
    map_keys,
    map_values,
    remove_many,
    remove_when,
    union_with,
    update_if_exists,
    upsert,
)
