"""Tests for the filter chain — ignore / only options and their composition."""

import itertools

import pytest

from gitclean.git.models import FileStatus
from gitclean.status.filters import FILTERS, FileFilter, active_filters, apply_filters
from gitclean.status.options import CheckOptions

FLAG_NAMES = [
    "include_submodules",
    "ignore_untracked",
    "ignore_staged",
    "ignore_unstaged",
    "only_untracked",
    "only_staged",
    "only_unstaged",
]

STAGED = FileStatus(path="staged", index="M", working_tree="")
UNSTAGED = FileStatus(path="unstaged", index="", working_tree="M")
UNTRACKED = FileStatus(path="untracked", index="?", working_tree="?")
PARTIAL = FileStatus(path="partial", index="M", working_tree="M")
SUBMODULE = FileStatus(path="sub", index="", working_tree="m", is_submodule=True)
UNTRACKED_SUBMODULE = FileStatus(path="newsub", index="?", working_tree="?", is_submodule=True)

ALL = [STAGED, UNSTAGED, UNTRACKED, PARTIAL, SUBMODULE, UNTRACKED_SUBMODULE]


class TestIgnoreOptions:
    def test_no_options_keeps_everything_but_submodules(self):
        assert apply_filters(ALL, CheckOptions()) == [STAGED, UNSTAGED, UNTRACKED, PARTIAL]

    def test_ignore_untracked(self):
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], CheckOptions(ignore_untracked=True)) == [
            STAGED,
            UNSTAGED,
        ]

    def test_ignore_unstaged(self):
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], CheckOptions(ignore_unstaged=True)) == [
            STAGED,
            UNTRACKED,
        ]

    def test_ignore_staged(self):
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], CheckOptions(ignore_staged=True)) == [
            UNSTAGED,
            UNTRACKED,
        ]

    def test_ignore_unstaged_and_untracked(self):
        opts = CheckOptions(ignore_unstaged=True, ignore_untracked=True)
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], opts) == [STAGED]

    def test_ignore_staged_and_unstaged(self):
        opts = CheckOptions(ignore_staged=True, ignore_unstaged=True)
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], opts) == [UNTRACKED]

    def test_partially_staged_dropped_by_ignore_staged(self):
        assert apply_filters([PARTIAL], CheckOptions(ignore_staged=True)) == []

    def test_partially_staged_dropped_by_ignore_unstaged(self):
        assert apply_filters([PARTIAL], CheckOptions(ignore_unstaged=True)) == []

    def test_partially_staged_kept_by_ignore_untracked(self):
        assert apply_filters([PARTIAL], CheckOptions(ignore_untracked=True)) == [PARTIAL]


class TestOnlyOptions:
    def test_only_untracked(self):
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], CheckOptions(only_untracked=True)) == [
            UNTRACKED
        ]

    def test_only_staged(self):
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], CheckOptions(only_staged=True)) == [STAGED]

    def test_only_unstaged(self):
        assert apply_filters([STAGED, UNSTAGED, UNTRACKED], CheckOptions(only_unstaged=True)) == [
            UNSTAGED
        ]

    def test_only_staged_drops_partially_staged(self):
        assert apply_filters([PARTIAL], CheckOptions(only_staged=True)) == []

    def test_only_staged_equals_ignore_unstaged_and_untracked(self):
        only = apply_filters(ALL, CheckOptions(only_staged=True))
        ignore = apply_filters(ALL, CheckOptions(ignore_unstaged=True, ignore_untracked=True))
        assert only == ignore

    def test_contradictory_options_are_not_an_error(self):
        assert apply_filters([STAGED], CheckOptions(only_staged=True, ignore_staged=True)) == []


class TestSubmoduleFilter:
    def test_included_on_request(self):
        result = apply_filters(ALL, CheckOptions(include_submodules=True))
        assert SUBMODULE in result
        assert UNTRACKED_SUBMODULE in result

    def test_excluded_before_untracked_clause(self):
        result = apply_filters(ALL, CheckOptions(only_untracked=True))
        assert result == [UNTRACKED]

    def test_lowercase_submodule_code_not_seen_as_unstaged(self):
        # "m" is not the regular "M" code, so the unstaged clause keeps it
        result = apply_filters([SUBMODULE], CheckOptions(include_submodules=True, ignore_unstaged=True))
        assert result == [SUBMODULE]


class TestChainProperties:
    @pytest.mark.parametrize(
        "flags", [dict(zip(FLAG_NAMES, bits)) for bits in itertools.product([False, True], repeat=7)]
    )
    def test_idempotent_and_narrowing(self, flags):
        opts = CheckOptions(**flags)
        first = apply_filters(ALL, opts)
        assert apply_filters(ALL, opts) == first
        assert apply_filters(first, opts) == first
        # enabling any further ignore/only option never grows the result
        for name in FLAG_NAMES[1:]:
            if not flags[name]:
                narrower = apply_filters(ALL, CheckOptions(**{**flags, name: True}))
                assert len(narrower) <= len(first)
                assert all(f in first for f in narrower)

    def test_order_preserved(self):
        result = apply_filters(list(reversed(ALL)), CheckOptions(include_submodules=True))
        assert result == list(reversed(ALL))

    def test_active_filters_by_name(self):
        names = [c.name for c in active_filters(CheckOptions(only_staged=True))]
        assert names == ["submodules", "untracked", "unstaged"]

    def test_submodule_clause_runs_first(self):
        assert FILTERS[0].name == "submodules"

    def test_extra_clause_composes(self):
        no_docs = FileFilter(
            name="docs",
            enabled=lambda options: True,
            keep=lambda f: not f.path.endswith(".md"),
        )
        docs = FileStatus(path="README.md", index="M", working_tree="")
        result = apply_filters([docs, STAGED], CheckOptions(), filters=FILTERS + (no_docs,))
        assert result == [STAGED]
