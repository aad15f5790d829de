"""Rebuild and build git-style document snapshot trees."""

from .classify import get_git_mode, get_git_type
from .constants import FileMode, SummaryType, TreeEntryType
from .errors import (
    InvalidEntryNameError,
    OrderingViolationError,
    SnapshotTreeError,
    UnrecognizedEntryKindError,
    UnrecognizedVariantError,
    UnsupportedSummaryError,
)
from .hierarchy import build_hierarchy, flatten_hierarchy
from .models import (
    EntryKind,
    FlatEntry,
    FlatTree,
    SnapshotTree,
    SummaryAttachment,
    SummaryBlob,
    SummaryHandle,
    SummaryTree,
    Tree,
)
from .tree_entries import (
    add_blob_to_tree,
    attachment_tree_entry,
    blob_tree_entry,
    convert_summary_tree_to_tree,
    tree_tree_entry,
)

__all__ = [
    "InvalidEntryNameError",
    "EntryKind",
    "FileMode",
    "FlatEntry",
    "FlatTree",
    "OrderingViolationError",
    "SnapshotTree",
    "SnapshotTreeError",
    "SummaryAttachment",
    "SummaryBlob",
    "SummaryHandle",
    "SummaryTree",
    "SummaryType",
    "Tree",
    "TreeEntryType",
    "UnrecognizedEntryKindError",
    "UnrecognizedVariantError",
    "UnsupportedSummaryError",
    "add_blob_to_tree",
    "attachment_tree_entry",
    "blob_tree_entry",
    "build_hierarchy",
    "convert_summary_tree_to_tree",
    "flatten_hierarchy",
    "get_git_mode",
    "get_git_type",
    "tree_tree_entry",
]
