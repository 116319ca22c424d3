# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_flags.py

import itertools

import pytest

from sgit.core.commands import CommitFlags, ResetScope, StagingMode
from sgit.core.flags import resolve_reset_scope, resolve_staging
from sgit.system.exceptions import UsageError


class TestResolveStaging:
    """Commit flags collapse to exactly one staging mode."""

    def test_no_flags_commits_only_staged(self):
        assert resolve_staging(CommitFlags()) is StagingMode.STAGED_ONLY

    def test_explicit_staged_is_the_default(self):
        assert resolve_staging(CommitFlags(staged=True)) is StagingMode.STAGED_ONLY

    def test_all_includes_untracked(self):
        assert resolve_staging(CommitFlags(all=True)) is StagingMode.ALL_INCLUDING_UNTRACKED

    def test_unstaged_means_tracked_only(self):
        assert resolve_staging(CommitFlags(unstaged=True)) is StagingMode.UNSTAGED_TRACKED

    def test_push_and_amend_do_not_change_mode(self):
        flags = CommitFlags(push=True, amend=True, no_verify=True)
        assert resolve_staging(flags) is StagingMode.STAGED_ONLY

    @pytest.mark.parametrize(
        "staged,push,amend,no_verify",
        list(itertools.product([False, True], repeat=4)),
    )
    def test_all_with_unstaged_always_fails(self, staged, push, amend, no_verify):
        flags = CommitFlags(
            all=True, unstaged=True, staged=staged,
            push=push, amend=amend, no_verify=no_verify,
        )
        with pytest.raises(UsageError, match="--all and --unstaged") as exc_info:
            resolve_staging(flags)
        assert exc_info.value.flags == ("--all", "--unstaged")

    @pytest.mark.parametrize("other", ["all", "unstaged"])
    def test_staged_conflicts_with_staging_flags(self, other):
        flags = CommitFlags(staged=True, **{other: True})
        with pytest.raises(UsageError, match=f"--staged cannot be combined with --{other}"):
            resolve_staging(flags)

    def test_never_returns_none_mode(self):
        for all_, unstaged in [(False, False), (True, False), (False, True)]:
            mode = resolve_staging(CommitFlags(all=all_, unstaged=unstaged))
            assert mode is not StagingMode.NONE


class TestResolveResetScope:
    def test_no_flag_returns_none(self):
        assert resolve_reset_scope() is None

    @pytest.mark.parametrize("scope", list(ResetScope))
    def test_single_flag(self, scope):
        assert resolve_reset_scope(**{scope.value: True}) is scope

    def test_multiple_flags_rejected(self):
        with pytest.raises(UsageError, match="only one reset scope") as exc_info:
            resolve_reset_scope(staged=True, untracked=True)
        assert exc_info.value.flags == ("--staged", "--untracked")
