# SPDX-License-Identifier: MIT
"""Tests for the dependency rewriting steps."""

from __future__ import annotations

import copy

import pytest

from applint_codemod import (
    ESLINT,
    STYLELINT,
    SUCCESSOR_PACKAGE,
    SUCCESSOR_VERSION,
    find_deprecated_dependencies,
    find_deprecated_dependency,
    needs_upgrade,
    prune_dependencies,
    replace_deprecated_dependency,
    upgrade_dev_dependency,
)


class TestFindDeprecatedDependency:
    """Tests for deprecated package detection."""

    def test_no_dependencies(self) -> None:
        assert find_deprecated_dependency({}) is None

    def test_no_deprecated_package(self) -> None:
        manifest = {"devDependencies": {"eslint": "^8.0.0", SUCCESSOR_PACKAGE: "^1.0.0"}}
        assert find_deprecated_dependency(manifest) is None

    def test_found_in_dependencies(self) -> None:
        assert find_deprecated_dependency({"dependencies": {"@ice/spec": "^1.0.0"}}) == "@ice/spec"

    def test_found_in_dev_dependencies(self) -> None:
        manifest = {"devDependencies": {"@iceworks/spec": "^1.0.0"}}
        assert find_deprecated_dependency(manifest) == "@iceworks/spec"

    def test_dependencies_searched_first(self) -> None:
        """Packages in dependencies come before dev-only packages."""
        manifest = {
            "devDependencies": {"@ice/spec": "^1.0.0"},
            "dependencies": {"react": "^17.0.0", "@iceworks/spec": "^1.0.0"},
        }
        assert find_deprecated_dependency(manifest) == "@iceworks/spec"
        assert find_deprecated_dependencies(manifest) == ["@iceworks/spec", "@ice/spec"]

    def test_same_package_in_both_sections(self) -> None:
        manifest = {
            "dependencies": {"@ice/spec": "^1.0.0"},
            "devDependencies": {"@ice/spec": "^2.0.0"},
        }
        assert find_deprecated_dependencies(manifest) == ["@ice/spec"]


class TestReplaceDeprecatedDependency:
    """Tests for successor package injection."""

    def test_nothing_to_replace_returns_input(self) -> None:
        """Without a deprecated package the successor is not added."""
        manifest = {"devDependencies": {"eslint": "^8.0.0"}}
        assert replace_deprecated_dependency(manifest, None) is manifest

    def test_replaces_dev_dependency(self) -> None:
        manifest = {"devDependencies": {"@ice/spec": "^1.0.0", "typescript": "^4.0.0"}}
        result = replace_deprecated_dependency(manifest, "@ice/spec")
        assert result["devDependencies"] == {
            "typescript": "^4.0.0",
            SUCCESSOR_PACKAGE: SUCCESSOR_VERSION,
        }

    def test_removes_from_both_sections(self) -> None:
        manifest = {
            "dependencies": {"@ice/spec": "^1.0.0", "react": "^17.0.0"},
            "devDependencies": {"@ice/spec": "^1.0.0"},
        }
        result = replace_deprecated_dependency(manifest, "@ice/spec")
        assert result["dependencies"] == {"react": "^17.0.0"}
        assert result["devDependencies"] == {SUCCESSOR_PACKAGE: SUCCESSOR_VERSION}

    def test_emptied_dependencies_left_for_pruning(self) -> None:
        """An emptied section stays until pruning removes it."""
        result = replace_deprecated_dependency({"dependencies": {"@ice/spec": "^1.0.0"}}, "@ice/spec")
        assert result["dependencies"] == {}
        assert result["devDependencies"] == {SUCCESSOR_PACKAGE: SUCCESSOR_VERSION}

    def test_existing_successor_is_reset(self) -> None:
        """A stale successor range is set to the fixed version in place."""
        manifest = {
            "devDependencies": {SUCCESSOR_PACKAGE: "^0.9.0", "@ice/spec": "^1.0.0", "jest": "^29.0.0"}
        }
        result = replace_deprecated_dependency(manifest, "@ice/spec")
        assert list(result["devDependencies"].items()) == [
            (SUCCESSOR_PACKAGE, SUCCESSOR_VERSION),
            ("jest", "^29.0.0"),
        ]

    def test_input_not_modified(self) -> None:
        manifest = {
            "dependencies": {"@ice/spec": "^1.0.0"},
            "devDependencies": {"@ice/spec": "^1.0.0"},
        }
        original = copy.deepcopy(manifest)
        replace_deprecated_dependency(manifest, "@ice/spec")
        assert manifest == original


class TestNeedsUpgrade:
    """Tests for the major-version upgrade decision."""

    @pytest.mark.parametrize(
        "current, expected",
        [
            (None, True),
            ("^7.0.0", True),
            ("~7.32.0", True),
            (">=6.0.0", True),
            ("*", True),
            ("latest", True),
            ("workspace:*", True),
            (8, True),
            ("1\u0660.0.0", True),
            ("^8.0.0", False),
            ("^8.5.0", False),
            ("8.x", False),
            ("^9.0.0", False),
            (">=8.0.0 <10", False),
        ],
    )
    def test_eslint_target(self, current, expected) -> None:
        assert needs_upgrade(current, "^8.0.0") is expected

    def test_unparsable_target_forces_overwrite(self) -> None:
        assert needs_upgrade("^8.0.0", "next") is True


class TestUpgradeDevDependency:
    """Tests for upgrade_dev_dependency function."""

    def test_adds_missing_tool(self) -> None:
        result = upgrade_dev_dependency({}, "eslint", "^8.0.0")
        assert result == {"devDependencies": {"eslint": "^8.0.0"}}

    def test_upgrades_older_major(self) -> None:
        manifest = {"devDependencies": {"eslint": "^7.0.0", "jest": "^29.0.0"}}
        result = upgrade_dev_dependency(manifest, "eslint", "^8.0.0")
        assert list(result["devDependencies"].items()) == [
            ("eslint", "^8.0.0"),
            ("jest", "^29.0.0"),
        ]
        assert manifest["devDependencies"]["eslint"] == "^7.0.0"

    @pytest.mark.parametrize("installed", ["^8.5.0", "^9.0.0", "8.0.0"])
    def test_keeps_same_or_newer_major(self, installed) -> None:
        manifest = {"devDependencies": {"eslint": installed}}
        assert upgrade_dev_dependency(manifest, "eslint", "^8.0.0") is manifest

    def test_overwrites_unparsable_range(self) -> None:
        manifest = {"devDependencies": {"stylelint": "latest"}}
        result = upgrade_dev_dependency(manifest, "stylelint", "^14.0.0")
        assert result["devDependencies"] == {"stylelint": "^14.0.0"}

    def test_runtime_dependency_does_not_count(self) -> None:
        """Only devDependencies are consulted for the installed range."""
        manifest = {"dependencies": {"eslint": "^8.0.0"}}
        result = upgrade_dev_dependency(manifest, "eslint", "^8.0.0")
        assert result["dependencies"] == {"eslint": "^8.0.0"}
        assert result["devDependencies"] == {"eslint": "^8.0.0"}


class TestPruneDependencies:
    """Tests for prune_dependencies function."""

    def test_empty_section_is_removed(self) -> None:
        result = prune_dependencies(
            {"name": "demo", "dependencies": {"eslint-plugin-x": "^1.0.0"}},
            ESLINT.removed_dependency_pattern,
        )
        assert result == {"name": "demo"}

    def test_sections_pruned_independently(self) -> None:
        manifest = {
            "dependencies": {"react": "^17.0.0", "eslint-config-ali": "^13.0.0"},
            "devDependencies": {"eslint-plugin-react": "^7.0.0"},
        }
        result = prune_dependencies(manifest, ESLINT.removed_dependency_pattern)
        assert result == {"dependencies": {"react": "^17.0.0"}}

    def test_tool_itself_is_kept(self) -> None:
        manifest = {"devDependencies": {"eslint": "^8.0.0", "stylelint": "^14.0.0"}}
        assert prune_dependencies(manifest, ESLINT.removed_dependency_pattern) == manifest
        assert prune_dependencies(manifest, STYLELINT.removed_dependency_pattern) == manifest

    def test_pattern_matches_anywhere_in_name(self) -> None:
        """Scoped plugins match; names merely ending in the tool name do not."""
        manifest = {
            "devDependencies": {
                "@typescript-eslint/eslint-plugin": "^5.0.0",
                "@typescript-eslint/parser": "^5.0.0",
                "babel-eslint": "^10.0.0",
            }
        }
        result = prune_dependencies(manifest, ESLINT.removed_dependency_pattern)
        assert result["devDependencies"] == {
            "@typescript-eslint/parser": "^5.0.0",
            "babel-eslint": "^10.0.0",
        }

    def test_consecutive_matches_all_removed(self) -> None:
        manifest = {
            "devDependencies": {
                "stylelint-scss": "^3.0.0",
                "stylelint-config-standard": "^22.0.0",
                "stylelint-order": "^4.0.0",
                "stylelint": "^14.0.0",
            }
        }
        result = prune_dependencies(manifest, STYLELINT.removed_dependency_pattern)
        assert result["devDependencies"] == {"stylelint": "^14.0.0"}

    def test_existing_empty_section_is_removed(self) -> None:
        result = prune_dependencies({"dependencies": {}}, ESLINT.removed_dependency_pattern)
        assert "dependencies" not in result

    def test_absent_sections_stay_absent(self) -> None:
        assert prune_dependencies({"name": "demo"}, ESLINT.removed_dependency_pattern) == {
            "name": "demo"
        }

    def test_section_position_preserved(self) -> None:
        manifest = {
            "name": "demo",
            "dependencies": {"react": "^17.0.0", "eslint-plugin-x": "^1.0.0"},
            "scripts": {},
        }
        result = prune_dependencies(manifest, ESLINT.removed_dependency_pattern)
        assert list(result) == ["name", "dependencies", "scripts"]
