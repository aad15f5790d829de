"""Map summary objects onto the storage mode/type vocabulary."""

from typing import Literal, NoReturn

from .constants import FileMode, SummaryType
from .errors import UnrecognizedVariantError


def unreachable_case(value, message: str | None = None) -> NoReturn:
    """Fail for a variant the caller's branches do not cover."""
    raise UnrecognizedVariantError(value, message)


def _resolved_type(value) -> SummaryType:
    """Return the type a summary object ultimately stands for.

    Handles resolve to the type of the object they point at. A handle cannot
    point at another handle, so the chain is followed exactly once.
    """
    summary_type = value.type
    if summary_type == SummaryType.HANDLE:
        summary_type = value.handle_type
        if summary_type == SummaryType.HANDLE:
            unreachable_case(summary_type, "Handle cannot reference another handle")
    return summary_type


def get_git_mode(value) -> FileMode:
    """
    Take a summary object and return its git mode.

    Args:
        value: Summary object (tree, blob, handle or attachment)

    Returns:
        FileMode.FILE for blobs and attachments, FileMode.DIRECTORY for trees

    Raises:
        UnrecognizedVariantError: If the object's type is not a known variant
    """
    summary_type = _resolved_type(value)
    if summary_type in (SummaryType.BLOB, SummaryType.ATTACHMENT):
        return FileMode.FILE
    elif summary_type == SummaryType.TREE:
        return FileMode.DIRECTORY
    unreachable_case(summary_type)


def get_git_type(value) -> Literal["blob", "tree"]:
    """
    Take a summary object and return its git object type.

    Args:
        value: Summary object (tree, blob, handle or attachment)

    Returns:
        "blob" for blobs and attachments, "tree" for trees

    Raises:
        UnrecognizedVariantError: If the object's type is not a known variant
    """
    summary_type = _resolved_type(value)
    if summary_type in (SummaryType.BLOB, SummaryType.ATTACHMENT):
        return "blob"
    elif summary_type == SummaryType.TREE:
        return "tree"
    unreachable_case(summary_type)
