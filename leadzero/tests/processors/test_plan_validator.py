"""Unit tests for the rename plan validator."""

import pytest

from leadzero.errors import (
    AmbiguousPrefixesError,
    AmbiguousSuffixesError,
    ConflictingFilesError,
    ValidationError,
)
from leadzero.processors.directory_scanner import scan
from leadzero.processors.plan_builder import build_plan
from leadzero.processors.plan_validator import (
    check_unambiguous_affixes,
    find_conflicting_targets,
    suffixes_differ_only_in_case,
    validate_plan,
)
from leadzero.tests import fixtures


def plan_for(directory, filenames):
    fixtures.create_files(directory, filenames)
    return build_plan(scan(directory).valid)


class TestValidatePlan:
    """Tests for validate_plan."""

    def test_paris_directory_is_valid(self, tmp_path):
        plan = plan_for(tmp_path, fixtures.PARIS_FILENAMES + [fixtures.INVALID_FILENAME])

        validate_plan(plan, tmp_path)

    def test_empty_plan_is_valid(self, tmp_path):
        validate_plan(build_plan([]), tmp_path)

    def test_ambiguous_prefixes(self, tmp_path):
        """Test that prefixes differing in case only are still rejected."""
        plan = plan_for(tmp_path, ["img (1).jpg", "IMG (2).jpg"])

        with pytest.raises(AmbiguousPrefixesError) as exc_info:
            validate_plan(plan, tmp_path)

        assert exc_info.value.prefixes == {"img (", "IMG ("}

    def test_mixed_case_extension_is_tolerated(self, tmp_path):
        plan = plan_for(tmp_path, ["img (1).jpg", "img (2).JPG", "img (3).jpg"])

        validate_plan(plan, tmp_path)

    def test_different_suffixes(self, tmp_path):
        plan = plan_for(tmp_path, ["img (1).jpg", "img (2).png"])

        with pytest.raises(AmbiguousSuffixesError) as exc_info:
            validate_plan(plan, tmp_path)

        assert exc_info.value.suffixes == {").jpg", ").png"}

    def test_three_case_variants_of_suffix_are_rejected(self, tmp_path):
        plan = plan_for(tmp_path, ["img (1).jpg", "img (2).JPG", "img (3).Jpg"])

        with pytest.raises(AmbiguousSuffixesError):
            validate_plan(plan, tmp_path)

    def test_already_named_files_count_for_affixes(self, tmp_path):
        """Test that files needing no rename still take part in the prefix check."""
        plan = plan_for(tmp_path, ["img (1).jpg", "photo (10).jpg"])

        with pytest.raises(AmbiguousPrefixesError):
            validate_plan(plan, tmp_path)

    def test_conflicting_files(self, tmp_path):
        """Test that an existing target file stops validation."""
        plan = plan_for(tmp_path, ["paris (1).jpg", "paris (001).jpg", "paris (100).jpg"])

        with pytest.raises(ConflictingFilesError) as exc_info:
            validate_plan(plan, tmp_path)

        assert exc_info.value.paths == [tmp_path / "paris (001).jpg"]
        assert "paris (001).jpg" in str(exc_info.value)

    def test_same_number_value_planned_onto_one_target(self, tmp_path):
        """Test that two files renamed to the same new name are reported as a conflict."""
        plan = plan_for(tmp_path, ["a (1).jpg", "a (001).jpg", "a (10).jpg"])

        with pytest.raises(ConflictingFilesError) as exc_info:
            validate_plan(plan, tmp_path)

        assert exc_info.value.paths == [tmp_path / "a (01).jpg"]
        assert not (tmp_path / "a (01).jpg").exists()

    def test_all_conflicts_are_reported(self, tmp_path):
        plan = plan_for(tmp_path, ["a (1).jpg", "a (01).jpg", "a (2).jpg", "a (02).jpg", "a (10).jpg"])

        with pytest.raises(ConflictingFilesError) as exc_info:
            validate_plan(plan, tmp_path)

        assert {p.name for p in exc_info.value.paths} == {"a (01).jpg", "a (02).jpg"}

    def test_validation_errors_share_base_class(self, tmp_path):
        plan = plan_for(tmp_path, ["img (1).jpg", "IMG (2).jpg"])

        with pytest.raises(ValidationError):
            validate_plan(plan, tmp_path)

    def test_validation_does_not_touch_files(self, tmp_path):
        filenames = ["img (1).jpg", "img (2).png", "img (10).jpg"]
        plan = plan_for(tmp_path, filenames)

        with pytest.raises(AmbiguousSuffixesError):
            validate_plan(plan, tmp_path)

        assert fixtures.filenames_in(tmp_path) == set(filenames)


class TestHelpers:
    """Tests for the individual checks."""

    def test_find_conflicting_targets_empty(self, tmp_path):
        plan = plan_for(tmp_path, fixtures.PARIS_FILENAMES)

    def test_find_conflicting_targets_reports_duplicates_once(self, tmp_path):
        plan = plan_for(tmp_path, ["a (1).jpg", "a (01).jpg", "a (001).jpg", "a (100).jpg"])

        assert find_conflicting_targets(plan, tmp_path) == [tmp_path / "a (001).jpg"]

        assert find_conflicting_targets(plan, tmp_path) == []

    @pytest.mark.parametrize(
        "suffixes,expected",
        [
            ({").jpg", ").JPG"}, True),
            ({").jpg", ").Jpg"}, True),
            ({").jpg", ").png"}, False),
            ({").jpg"}, False),
            ({").jpg", ").JPG", ").Jpg"}, False),
        ],
    )
    def test_suffixes_differ_only_in_case(self, suffixes, expected):
        assert suffixes_differ_only_in_case(suffixes) is expected

    def test_check_unambiguous_affixes_without_directory(self, tmp_path):
        plan = plan_for(tmp_path, ["x (1).jpg", "y (2).jpg"])

        with pytest.raises(AmbiguousPrefixesError):
            check_unambiguous_affixes(plan)
