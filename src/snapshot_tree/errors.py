"""Custom exceptions for snapshot-tree.

Every failure here is a programming or input-contract error: the operation
aborts at the point of detection and nothing is retried.
"""


class SnapshotTreeError(RuntimeError):
    """Base class for all snapshot-tree errors."""
    pass


# Summary Errors
class UnrecognizedVariantError(SnapshotTreeError):
    """Summary object type outside the known variant set."""

    def __init__(self, value, message: str | None = None):
        self.value = value
        super().__init__(message or f"Unknown type: {value!r}")


class UnsupportedSummaryError(SnapshotTreeError):
    """Summary object that has no storage tree representation."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot convert summary entry '{path}': {reason}")


# Hierarchy Errors
class HierarchyError(SnapshotTreeError):
    """Base class for errors raised while building a hierarchy."""
    pass


class OrderingViolationError(HierarchyError):
    """Entry seen before the tree entry of its parent directory."""

    def __init__(self, path: str, parent: str):
        self.path = path
        self.parent = parent
        super().__init__(
            f"No tree entry for parent directory '{parent}' of '{path}'. "
            f"The flat listing must be breadth-first: directories before their contents."
        )


class InvalidEntryNameError(HierarchyError):
    """Entry name whose percent-escapes do not decode as UTF-8."""

    def __init__(self, path: str, name: str):
        self.path = path
        self.name = name
        super().__init__(f"Entry name '{name}' of '{path}' is not valid percent-encoded UTF-8")


class UnrecognizedEntryKindError(HierarchyError):
    """Flat entry whose kind is not blob, tree or commit."""

    def __init__(self, path: str, kind):
        self.path = path
        self.kind = kind
        super().__init__(f"Unrecognized entry type {kind!r} for '{path}'")


# Configuration Errors
class ConfigError(SnapshotTreeError):
    """Configuration file could not be read."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Invalid configuration in {path}: {reason}")
