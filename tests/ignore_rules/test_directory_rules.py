"""Unit tests for exact directory-name ignore rules."""

import pytest

from repo2tree.ignore_rules.directory_rules import DirectoryNameRule
from repo2tree.types import TreeEntry


def test_matches_directory_name_at_any_depth():
    rule = DirectoryNameRule("node_modules")
    assert rule.matches(TreeEntry("node_modules", "node_modules", True))
    assert rule.matches(TreeEntry("node_modules", "web/client/node_modules", True))


def test_matching_is_case_insensitive():
    rule = DirectoryNameRule("Build")
    assert rule.matches(TreeEntry("BUILD", "BUILD", True))
    assert rule.matches(TreeEntry("build", "src/build", True))


def test_files_are_never_matched():
    rule = DirectoryNameRule("build")
    assert not rule.matches(TreeEntry("build", "build", False))


def test_only_the_name_is_compared():
    rule = DirectoryNameRule("dist")
    assert not rule.matches(TreeEntry("distribution", "dist/distribution", True))


def test_surrounding_slashes_are_dropped():
    rule = DirectoryNameRule("/dist/", "build artifacts")
    assert rule.directory_name == "dist"
    assert rule.annotation == "build artifacts"
    assert rule.matches(TreeEntry("dist", "packages/dist", True))


@pytest.mark.parametrize(
    "pattern,valid",
    [
        ("node_modules", True),
        ("/dist/", True),
        ("*.egg-info", False),
        ("build?", False),
        ("src/generated", False),
        ("/", False),
    ],
)
def test_is_valid(pattern, valid):
    assert DirectoryNameRule(pattern).is_valid is valid
