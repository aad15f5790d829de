"""Builders for storage tree entries."""

import base64
import json
import logging
from typing import Any

from .constants import DEFAULT_ENCODING
from .errors import UnsupportedSummaryError
from .models import (
    Attachment,
    AttachmentTreeEntry,
    Blob,
    BlobTreeEntry,
    SummaryAttachment,
    SummaryBlob,
    SummaryHandle,
    SummaryTree,
    Tree,
    TreeTreeEntry,
)

logger = logging.getLogger(__name__)


def blob_tree_entry(path: str, contents: str, encoding: str = DEFAULT_ENCODING) -> BlobTreeEntry:
    """Create a blob entry.

    Args:
        path: Path of the entry
        contents: Blob contents
        encoding: Encoding of contents; defaults to utf-8
    """
    return BlobTreeEntry(path=path, value=Blob(contents=contents, encoding=encoding))


def tree_tree_entry(path: str, value: Tree) -> TreeTreeEntry:
    """Create a tree entry holding ``value`` as its subtree."""
    return TreeTreeEntry(path=path, value=value)


def attachment_tree_entry(path: str, id: str) -> AttachmentTreeEntry:
    """Create an attachment entry pointing at external blob ``id``."""
    return AttachmentTreeEntry(path=path, value=Attachment(id=id))


def add_blob_to_tree(tree: Tree, blob_name: str, content: Any) -> None:
    """Append ``content`` serialized as JSON to ``tree`` as a utf-8 blob."""
    tree.entries.append(blob_tree_entry(blob_name, json.dumps(content), DEFAULT_ENCODING))


def convert_summary_tree_to_tree(summary: SummaryTree) -> Tree:
    """
    Convert an in-memory summary tree into a storage tree.

    String blobs are stored as utf-8, byte blobs as base64. Handles point into
    a previous snapshot and cannot be stored without it.

    Args:
        summary: Summary tree to convert

    Returns:
        Tree with one entry per summary key, in key order

    Raises:
        UnsupportedSummaryError: If the summary contains a handle
    """
    return _convert(summary, "")


def _convert(summary: SummaryTree, prefix: str) -> Tree:
    entries = []
    for key, value in summary.tree.items():
        if isinstance(value, SummaryBlob):
            if isinstance(value.content, bytes):
                contents = base64.b64encode(value.content).decode("ascii")
                entries.append(blob_tree_entry(key, contents, "base64"))
            else:
                entries.append(blob_tree_entry(key, value.content))
        elif isinstance(value, SummaryTree):
            entries.append(tree_tree_entry(key, _convert(value, f"{prefix}/{key}")))
        elif isinstance(value, SummaryAttachment):
            entries.append(attachment_tree_entry(key, value.id))
        elif isinstance(value, SummaryHandle):
            raise UnsupportedSummaryError(
                f"{prefix}/{key}", f"handle to '{value.handle}' needs a base snapshot"
            )
        else:
            raise UnsupportedSummaryError(f"{prefix}/{key}", f"unknown summary object {value!r}")

    logger.debug("Converted summary tree %s with %d entries", prefix or "/", len(entries))
    return Tree(entries=entries, unreferenced=summary.unreferenced)
