"""Constants for snapshot-tree."""

from enum import Enum, IntEnum


class FileMode(str, Enum):
    """Git file modes used by tree entries."""
    FILE = "100644"
    EXECUTABLE = "100755"
    DIRECTORY = "040000"
    SYMLINK = "120000"


class TreeEntryType(str, Enum):
    """Tags of the entries a storage tree is made of."""
    BLOB = "Blob"
    TREE = "Tree"
    ATTACHMENT = "Attachment"


class SummaryType(IntEnum):
    """Wire values of the summary object variants."""
    TREE = 1
    BLOB = 2
    HANDLE = 3
    ATTACHMENT = 4


# Legacy prefix older documents stored their app content under
APP_TREE_PREFIX = ".app/"

DEFAULT_ENCODING = "utf-8"

# Project config directory and files
SNAPSHOT_TREE_DIR = ".snapshot-tree"
CONFIG_FILE = "config.yaml"

# Environment overrides
ENV_REMOVE_APP_PREFIX = "SNAPSHOT_TREE_REMOVE_APP_PREFIX"
