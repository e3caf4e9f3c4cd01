"""
Field tree normalisation.

Log events may name fields either with dotted keys (``"http.request.method"``)
or with nested mappings (``{"http": {"request": {"method": ...}}}``). Both
spellings are folded into one nested tree so that records from different call
sites line up under the same common-schema paths.

Merge rules, applied mapping by mapping in ascending precedence:

- a mapping value is deep-merged into whatever subtree already sits at its path;
- any other value (scalar, list, opaque object) replaces what was there;
- when a dotted path runs through a field already bound to a non-mapping value,
  the new branch replaces that value (last writer wins at the conflict point).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from .errors import KeyFormatError

logger = logging.getLogger(__name__)

SEPARATOR = "."

FieldTree = Dict[str, Any]


def split_key(key: Any) -> List[str]:
    """Split a field name into its path segments."""
    if not isinstance(key, str):
        raise KeyFormatError(f"field names must be strings, got {type(key).__name__}")
    if key == "":
        raise KeyFormatError("field name must not be empty")
    segments = key.split(SEPARATOR)
    if any(segment == "" for segment in segments):
        raise KeyFormatError(f"field name has an empty path segment: {key!r}")
    return segments


def merge_into(tree: FieldTree, mapping: Mapping[str, Any]) -> FieldTree:
    """
    Fold ``mapping`` into ``tree`` in place and return ``tree``.

    ``mapping`` itself is left untouched; nested mappings are copied into
    fresh dicts rather than linked into the tree.
    """
    for key, value in mapping.items():
        segments = split_key(key)
        node = _walk(tree, segments[:-1], key)
        leaf = segments[-1]
        if isinstance(value, Mapping):
            subtree = node.get(leaf)
            if not isinstance(subtree, dict):
                if leaf in node:
                    _report_conflict(key, node[leaf])
                subtree = node[leaf] = {}
            merge_into(subtree, value)
        else:
            node[leaf] = value
    return tree


def to_nested(*mappings: Mapping[str, Any]) -> FieldTree:
    """
    Merge ``mappings`` (lowest precedence first) into a single nested tree.

    Normalising a tree that is already nested returns an equal tree.
    """
    tree: FieldTree = {}
    for mapping in mappings:
        merge_into(tree, mapping)
    return tree


def _walk(tree: FieldTree, path: List[str], key: str) -> FieldTree:
    node = tree
    for segment in path:
        child = node.get(segment)
        if not isinstance(child, dict):
            if segment in node:
                _report_conflict(key, child)
            child = node[segment] = {}
        node = child
    return node


def _report_conflict(key: str, replaced: Any) -> None:
    logger.debug("field %r replaces non-object value %r with a nested object", key, replaced)


__all__ = ["SEPARATOR", "FieldTree", "split_key", "merge_into", "to_nested"]
