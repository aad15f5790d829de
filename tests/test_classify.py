"""Tests for the summary object classifier."""

from types import SimpleNamespace

import pytest

from snapshot_tree.classify import get_git_mode, get_git_type, unreachable_case
from snapshot_tree.constants import FileMode, SummaryType
from snapshot_tree.errors import UnrecognizedVariantError
from snapshot_tree.models import SummaryAttachment, SummaryBlob, SummaryHandle, SummaryTree


def handle(handle_type):
    return SummaryHandle(handle_type=handle_type, handle="/previous/path")


class TestClassifier:
    """Test mode/type classification of every known variant."""

    @pytest.mark.parametrize("value,mode,git_type", [
        (SummaryBlob(content="text"), FileMode.FILE, "blob"),
        (SummaryBlob(content=b"\x00\x01"), FileMode.FILE, "blob"),
        (SummaryAttachment(id="att-1"), FileMode.FILE, "blob"),
        (SummaryTree(), FileMode.DIRECTORY, "tree"),
        (handle(SummaryType.BLOB), FileMode.FILE, "blob"),
        (handle(SummaryType.ATTACHMENT), FileMode.FILE, "blob"),
        (handle(SummaryType.TREE), FileMode.DIRECTORY, "tree"),
    ])
    def test_known_variants(self, value, mode, git_type):
        assert get_git_mode(value) == mode
        assert get_git_type(value) == git_type

    def test_mode_values(self):
        """Modes are git's octal mode strings."""
        assert get_git_mode(SummaryBlob(content="")).value == "100644"
        assert get_git_mode(SummaryTree()).value == "040000"

    def test_every_summary_type_covered(self):
        """Each non-handle type, directly or behind a handle, classifies."""
        for summary_type in SummaryType:
            if summary_type == SummaryType.HANDLE:
                continue
            value = handle(summary_type)
            assert (get_git_mode(value), get_git_type(value)) in {
                (FileMode.FILE, "blob"),
                (FileMode.DIRECTORY, "tree"),
            }


class TestClassifierErrors:
    """Test that unknown variants fail loudly."""

    def test_unknown_type(self):
        value = SimpleNamespace(type=99)

        with pytest.raises(UnrecognizedVariantError) as exc_info:
            get_git_mode(value)
        assert exc_info.value.value == 99

        with pytest.raises(UnrecognizedVariantError):
            get_git_type(value)

    def test_handle_to_unknown_type(self):
        value = SimpleNamespace(type=SummaryType.HANDLE, handle_type="mystery")

        with pytest.raises(UnrecognizedVariantError):
            get_git_mode(value)
        with pytest.raises(UnrecognizedVariantError):
            get_git_type(value)

    def test_handle_to_handle(self):
        """Handle chains are not followed."""
        value = handle(SummaryType.HANDLE)

        with pytest.raises(UnrecognizedVariantError, match="another handle"):
            get_git_mode(value)
        with pytest.raises(UnrecognizedVariantError):
            get_git_type(value)

    def test_unreachable_case_message(self):
        with pytest.raises(UnrecognizedVariantError, match="Unknown type: 'x'"):
            unreachable_case("x")
