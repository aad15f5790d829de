"""Rebuild hierarchical snapshot trees from flat storage listings.

A git storage backend answers a recursive tree request with one flat list of
entries, breadth first. ``build_hierarchy`` turns that list back into nested
``SnapshotTree`` nodes in a single pass, using a path-keyed lookup table of
the directories seen so far. ``flatten_hierarchy`` goes the other way.
"""

import logging
from collections import deque
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import quote, unquote

from .constants import APP_TREE_PREFIX
from .errors import InvalidEntryNameError, OrderingViolationError, UnrecognizedEntryKindError
from .models import EntryKind, FlatEntry, FlatTree, SnapshotTree

logger = logging.getLogger(__name__)


def build_hierarchy(
    flat_tree: Union[FlatTree, Mapping],
    blobs_sha_to_path_cache: Optional[Dict[str, str]] = None,
    remove_app_tree_prefix: bool = False,
) -> SnapshotTree:
    """
    Build a tree hierarchy from a flat tree listing.

    Args:
        flat_tree: Flat listing; its ``sha`` becomes the root id. Entries must
            be ordered so every directory precedes its contents.
        blobs_sha_to_path_cache: Caller-owned map from blob sha to blob path,
            filled in place ("/" + path). A fresh map is used when omitted.
            When two paths share a sha, the later entry wins.
        remove_app_tree_prefix: Remove a leading ``.app/`` from entry paths

    Returns:
        The root SnapshotTree

    Raises:
        OrderingViolationError: If an entry's parent directory has not been seen
        InvalidEntryNameError: If a name's percent-escapes are not valid UTF-8
        UnrecognizedEntryKindError: If an entry is not a blob, tree or commit
    """
    if not isinstance(flat_tree, FlatTree):
        flat_tree = FlatTree.model_validate(flat_tree)
    if blobs_sha_to_path_cache is None:
        blobs_sha_to_path_cache = {}

    root = SnapshotTree(id=flat_tree.sha)
    lookup: Dict[str, SnapshotTree] = {"": root}

    for entry in flat_tree.tree:
        entry_path = entry.path
        if remove_app_tree_prefix and entry_path.startswith(APP_TREE_PREFIX):
            entry_path = entry_path[len(APP_TREE_PREFIX):]
        entry_path_dir, _, entry_path_base = entry_path.rpartition("/")

        # Breadth-first input: the parent directory was registered already
        node = lookup.get(entry_path_dir)
        if node is None:
            raise OrderingViolationError(entry_path, entry_path_dir)

        try:
            name = unquote(entry_path_base, errors="strict")
        except UnicodeDecodeError as e:
            raise InvalidEntryNameError(entry_path, entry_path_base) from e
        if entry.type == EntryKind.TREE:
            new_tree = SnapshotTree(id=entry.sha)
            node.trees[name] = new_tree
            lookup[entry_path] = new_tree
        elif entry.type == EntryKind.BLOB:
            node.blobs[name] = entry.sha
            blobs_sha_to_path_cache[entry.sha] = f"/{entry_path}"
        elif entry.type == EntryKind.COMMIT:
            node.commits[name] = entry.sha
        else:
            raise UnrecognizedEntryKindError(entry.path, entry.type)

    logger.debug(
        "Built hierarchy %s from %d entries (%d trees)",
        flat_tree.sha, len(flat_tree.tree), len(lookup) - 1,
    )
    return root


def flatten_hierarchy(snapshot: SnapshotTree, encode_names: bool = True) -> FlatTree:
    """
    Flatten a snapshot tree into a breadth-first listing.

    Within a node, blobs come first, then commits, then subtrees. Every tree
    entry precedes the entries beneath it, so the result can be fed back to
    ``build_hierarchy``. A node whose id is ``None`` (root or subtree) is
    listed with an empty sha, so it comes back with ``id == ""``.

    Args:
        snapshot: Root of the hierarchy
        encode_names: Percent-encode each path segment

    Returns:
        FlatTree whose sha is the root id ("" when the root has none)
    """
    def segment(name: str) -> str:
        return quote(name, safe="") if encode_names else name

    entries: List[FlatEntry] = []
    queue = deque([("", snapshot)])
    while queue:
        prefix, node = queue.popleft()
        for name, sha in node.blobs.items():
            entries.append(FlatEntry(path=prefix + segment(name), sha=sha, type=EntryKind.BLOB))
        for name, sha in node.commits.items():
            entries.append(FlatEntry(path=prefix + segment(name), sha=sha, type=EntryKind.COMMIT))
        for name, subtree in node.trees.items():
            path = prefix + segment(name)
            entries.append(FlatEntry(path=path, sha=subtree.id or "", type=EntryKind.TREE))
            queue.append((path + "/", subtree))

    return FlatTree(sha=snapshot.id or "", tree=entries)
