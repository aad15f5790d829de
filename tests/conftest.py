"""Shared test fixtures."""

import pytest

from snapshot_tree.constants import ENV_REMOVE_APP_PREFIX
from snapshot_tree.models import FlatTree, SnapshotTree


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep config overrides from the outer environment out of tests."""
    monkeypatch.delenv(ENV_REMOVE_APP_PREFIX, raising=False)


@pytest.fixture
def scenario_listing():
    """Small breadth-first listing with a blob, a subtree and a commit."""
    return FlatTree(
        sha="R0",
        tree=[
            {"path": "dir", "sha": "T1", "type": "tree"},
            {"path": "dir/file.txt", "sha": "B1", "type": "blob"},
            {"path": "dir/sub", "sha": "T2", "type": "tree"},
            {"path": "dir/sub/mod", "sha": "C1", "type": "commit"},
        ],
    )


@pytest.fixture
def deep_snapshot():
    """Hand-built hierarchy, four levels deep, mixed children."""
    return SnapshotTree(
        id="root",
        blobs={"header": "b-header", "with space": "b-space"},
        commits={"vendor": "c-vendor"},
        trees={
            ".channels": SnapshotTree(
                id="t-channels",
                blobs={".component": "b-component"},
                trees={
                    "root": SnapshotTree(
                        id="t-root",
                        blobs={".attributes": "b-attrs", "100%": "b-percent"},
                        trees={
                            "leaf": SnapshotTree(
                                id="t-leaf",
                                blobs={"body": "b-body"},
                                commits={"pinned": "c-pinned"},
                            ),
                        },
                    ),
                },
            ),
            ".protocol": SnapshotTree(
                id="t-protocol",
                blobs={"quorum": "b-quorum", "a/b": "b-slash"},
            ),
        },
    )
