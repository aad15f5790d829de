"""Data models for snapshot-tree.

Three families of models live here:

1. The flat listing a git storage backend returns for a recursive tree
   request (``FlatTree`` / ``FlatEntry``), and the hierarchical
   ``SnapshotTree`` rebuilt from it.
2. Summary objects: the in-memory representation of content that is about
   to be persisted (``SummaryTree``, ``SummaryBlob``, ``SummaryHandle``,
   ``SummaryAttachment``).
3. Storage tree entries (``BlobTreeEntry``, ``TreeTreeEntry``,
   ``AttachmentTreeEntry``) collected into a ``Tree``.
"""

from enum import Enum
from typing import Annotated, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    field_validator,
)

from .constants import DEFAULT_ENCODING, FileMode, SummaryType, TreeEntryType


# ============= Flat listing =============

class EntryKind(str, Enum):
    """Kind of object a flat listing entry points at."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"


class FlatEntry(BaseModel):
    """One entry of a flat, breadth-first tree listing.

    Git listings also carry ``mode``, ``size`` and ``url``; those are ignored.
    """

    path: str   # "/"-separated, segments may be percent-encoded
    sha: str    # content id, computed by the storage backend
    type: EntryKind


class FlatTree(BaseModel):
    """Recursive tree listing as returned by the storage backend."""

    sha: str
    url: Optional[str] = None
    tree: List[FlatEntry] = Field(default_factory=list)


# ============= Hierarchical snapshot =============

class SnapshotTree(BaseModel):
    """
    Hierarchical snapshot of a document's persisted state.

    Each node exclusively owns its subtrees. ``blobs`` and ``commits`` map
    entry names to content ids.
    """

    id: Optional[str] = None
    blobs: Dict[str, str] = Field(default_factory=dict)
    trees: Dict[str, "SnapshotTree"] = Field(default_factory=dict)
    commits: Dict[str, str] = Field(default_factory=dict)


# ============= Summary objects =============

class _SummaryObject(BaseModel):
    """Common base: every variant pins its own ``type`` value."""

    model_config = ConfigDict(populate_by_name=True)

    kind: ClassVar[SummaryType]
    type: SummaryType

    @field_validator("type")
    @classmethod
    def _check_type(cls, v: SummaryType) -> SummaryType:
        if v != cls.kind:
            raise ValueError(f"{cls.__name__} requires type {cls.kind.name}, got {v.name}")
        return v


class SummaryBlob(_SummaryObject):
    kind: ClassVar[SummaryType] = SummaryType.BLOB
    type: SummaryType = SummaryType.BLOB
    content: Union[str, bytes]


class SummaryHandle(_SummaryObject):
    """Reference to an object already stored in a previous snapshot."""

    kind: ClassVar[SummaryType] = SummaryType.HANDLE
    type: SummaryType = SummaryType.HANDLE
    handle_type: SummaryType = Field(alias="handleType")
    handle: str  # path of the referenced object in the previous snapshot


class SummaryAttachment(_SummaryObject):
    """Blob whose bytes live outside the snapshot, referenced by id."""

    kind: ClassVar[SummaryType] = SummaryType.ATTACHMENT
    type: SummaryType = SummaryType.ATTACHMENT
    id: str


class SummaryTree(_SummaryObject):
    kind: ClassVar[SummaryType] = SummaryType.TREE
    type: SummaryType = SummaryType.TREE
    tree: Dict[str, "SummaryObject"] = Field(default_factory=dict)
    unreferenced: Optional[bool] = None


def _summary_tag(value) -> Optional[str]:
    raw = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    try:
        return SummaryType(raw).name
    except ValueError:
        return None


SummaryObject = Annotated[
    Union[
        Annotated[SummaryTree, Tag(SummaryType.TREE.name)],
        Annotated[SummaryBlob, Tag(SummaryType.BLOB.name)],
        Annotated[SummaryHandle, Tag(SummaryType.HANDLE.name)],
        Annotated[SummaryAttachment, Tag(SummaryType.ATTACHMENT.name)],
    ],
    Discriminator(_summary_tag),
]


# ============= Storage tree entries =============

class Blob(BaseModel):
    model_config = ConfigDict(frozen=True)

    contents: str
    encoding: str = DEFAULT_ENCODING


class Attachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # id of the external blob


class BlobTreeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    mode: Literal[FileMode.FILE] = FileMode.FILE
    type: Literal[TreeEntryType.BLOB] = TreeEntryType.BLOB
    value: Blob


class TreeTreeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    mode: Literal[FileMode.DIRECTORY] = FileMode.DIRECTORY
    type: Literal[TreeEntryType.TREE] = TreeEntryType.TREE
    value: "Tree"


class AttachmentTreeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    mode: Literal[FileMode.FILE] = FileMode.FILE
    type: Literal[TreeEntryType.ATTACHMENT] = TreeEntryType.ATTACHMENT
    value: Attachment


TreeEntry = Annotated[
    Union[BlobTreeEntry, TreeTreeEntry, AttachmentTreeEntry],
    Field(discriminator="type"),
]


class Tree(BaseModel):
    """Storage tree: an ordered list of entries."""

    entries: List[TreeEntry] = Field(default_factory=list)
    id: Optional[str] = None
    unreferenced: Optional[bool] = None


SnapshotTree.model_rebuild()
SummaryTree.model_rebuild()
TreeTreeEntry.model_rebuild()
