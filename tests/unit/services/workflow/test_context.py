"""
Tests unitaires pour WorkflowContext.
"""

import dataclasses

import pytest

from src.services.workflow import WorkflowContext
from src.utils.constants import ACCEPTED_FILE_TYPES


class TestInitial:
    """Tests pour WorkflowContext.initial."""

    def test_initial_context(self):
        context = WorkflowContext.initial("/library", "/library-4k")

        assert context.base_path == "/library"
        assert context.destination_path == "/library-4k"
        assert context.directories_to_check == ()
        assert context.dirs_to_evaluate == ()
        assert context.dirs_to_report == ()
        assert context.dirs_to_move == ()
        assert context.files_to_email == ()
        assert context.processed_files == ()

    def test_accepted_file_types(self):
        """Les types acceptes sont fixes a la creation."""
        context = WorkflowContext.initial("/library", "/library-4k")

        assert context.accepted_file_types == frozenset({
            "mp4", "mkv", "avi", "mov", "m4v", "mpg", "mpeg", "wmv", "flv", "ts", "mts",
        })
        assert context.accepted_file_types is ACCEPTED_FILE_TYPES

    def test_paths_are_converted_to_str(self, tmp_path):
        context = WorkflowContext.initial(tmp_path / "a", tmp_path / "b")

        assert context.base_path == str(tmp_path / "a")
        assert context.destination_path == str(tmp_path / "b")


class TestWithUpdates:
    """Tests pour WorkflowContext.with_updates."""

    def test_returns_new_context(self):
        context = WorkflowContext.initial("/library", "/library-4k")

        updated = context.with_updates(dirs_to_move=["A/1.mp4"])

        assert updated is not context
        assert updated.dirs_to_move == ("A/1.mp4",)
        assert context.dirs_to_move == ()

    def test_sequences_become_tuples(self):
        context = WorkflowContext.initial("/library", "/library-4k")

        updated = context.with_updates(directories_to_check=["A", "B"])

        assert isinstance(updated.directories_to_check, tuple)

    @pytest.mark.parametrize(
        "field_name", ["base_path", "destination_path", "accepted_file_types"]
    )
    def test_fixed_fields_cannot_change(self, field_name: str):
        context = WorkflowContext.initial("/library", "/library-4k")

        with pytest.raises(ValueError):
            context.with_updates(**{field_name: ["x"]})

    def test_unknown_field_raises(self):
        context = WorkflowContext.initial("/library", "/library-4k")

        with pytest.raises(TypeError):
            context.with_updates(unknown=["x"])

    def test_context_is_frozen(self):
        context = WorkflowContext.initial("/library", "/library-4k")

        with pytest.raises(dataclasses.FrozenInstanceError):
            context.dirs_to_report = ("x",)


class TestAsDict:
    """Tests pour WorkflowContext.as_dict."""

    def test_snapshot_uses_plain_types(self):
        context = WorkflowContext.initial("/library", "/library-4k").with_updates(
            dirs_to_report=("B",)
        )

        snapshot = context.as_dict()

        assert snapshot["base_path"] == "/library"
        assert snapshot["dirs_to_report"] == ["B"]
        assert snapshot["accepted_file_types"] == sorted(ACCEPTED_FILE_TYPES)
