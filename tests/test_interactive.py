# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_interactive.py

"""
Tests for the interactive workflow menu.

A scripted prompter replays canned answers so the selection logic can be
checked without a terminal.
"""

import io
from unittest.mock import patch

import pytest
import typer
from rich.console import Console

from sgit.cli.interactive import (
    WORKFLOWS,
    TyperPrompter,
    select_reset_scope,
    select_workflow,
)
from sgit.core.commands import (
    Branch,
    Commit,
    CommitFlags,
    Diff,
    Init,
    Log,
    Pull,
    Push,
    ResetScope,
    Stage,
    Status,
    Unstage,
)
from sgit.system.exceptions import AbortedError, UsageError


class ScriptedPrompter:
    def __init__(self, *answers):
        self.answers = list(answers)
        self.questions = []

    def _next(self, message):
        self.questions.append(message)
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def choose(self, message, options):
        return self._next(message)

    def text(self, message, default=None):
        return self._next(message)

    def confirm(self, message, default=False):
        return self._next(message)


def menu_index(verb: str) -> int:
    return [name for name, _ in WORKFLOWS].index(verb)


class TestSelectWorkflow:
    def test_menu_order_mirrors_verbs(self):
        assert [name for name, _ in WORKFLOWS] == [
            "init", "stage", "unstage", "commit", "status",
            "log", "diff", "branch", "push", "pull",
        ]

    def test_init(self):
        assert select_workflow(ScriptedPrompter(menu_index("init"))) == Init()

    def test_stage_everything(self):
        prompter = ScriptedPrompter(menu_index("stage"), True)
        assert select_workflow(prompter) == Stage(paths=(".",))

    def test_stage_specific_paths(self):
        prompter = ScriptedPrompter(menu_index("stage"), False, 'a.txt "my file.txt"')
        assert select_workflow(prompter) == Stage(paths=("a.txt", "my file.txt"))

    def test_unstage_blank_paths_means_everything(self):
        prompter = ScriptedPrompter(menu_index("unstage"), False, "")
        assert select_workflow(prompter) == Unstage(paths=(".",))

    @pytest.mark.parametrize("scope,expected_flags", [
        (0, CommitFlags(staged=True, push=True)),
        (1, CommitFlags(unstaged=True, push=True)),
        (2, CommitFlags(all=True, push=True)),
    ])
    def test_commit_scopes(self, scope, expected_flags):
        prompter = ScriptedPrompter(menu_index("commit"), scope, "Add feature", True)
        assert select_workflow(prompter) == Commit(message="Add feature", flags=expected_flags)

    def test_commit_without_push(self):
        prompter = ScriptedPrompter(menu_index("commit"), 0, "msg", False)
        assert select_workflow(prompter).flags.push is False

    def test_commit_empty_message(self):
        prompter = ScriptedPrompter(menu_index("commit"), 0, "  ")
        with pytest.raises(UsageError, match="commit message cannot be empty"):
            select_workflow(prompter)

    def test_status_and_log(self):
        assert select_workflow(ScriptedPrompter(menu_index("status"), True)) == Status(short=True)
        assert select_workflow(ScriptedPrompter(menu_index("log"), False)) == Log(short=False)

    def test_diff(self):
        prompter = ScriptedPrompter(menu_index("diff"), True, " src/app.py ")
        assert select_workflow(prompter) == Diff(path="src/app.py", staged=True)

        prompter = ScriptedPrompter(menu_index("diff"), False, "")
        assert select_workflow(prompter) == Diff()

    def test_branch_switch(self):
        prompter = ScriptedPrompter(menu_index("branch"), 1)
        command = select_workflow(prompter, branches=lambda: (["main", "feature"], "main"))
        assert command == Branch(switch="feature")
        assert prompter.questions[-1] == "Select a branch to checkout"

    def test_branch_already_current(self):
        prompter = ScriptedPrompter(menu_index("branch"), 0)
        with pytest.raises(AbortedError, match="Already on branch 'main'"):
            select_workflow(prompter, branches=lambda: (["main", "feature"], "main"))

    def test_branch_create(self):
        # Last entry is "Create new branch..."
        prompter = ScriptedPrompter(menu_index("branch"), 2, " new login page ")
        command = select_workflow(prompter, branches=lambda: (["main", "feature"], "main"))
        assert command == Branch(create="new-login-page")

    def test_branch_create_without_branch_listing(self):
        prompter = ScriptedPrompter(menu_index("branch"), 0, "first")
        assert select_workflow(prompter) == Branch(create="first")

    def test_on_verb_runs_before_follow_up_questions(self):
        seen = []
        prompter = ScriptedPrompter(menu_index("commit"), AbortedError())
        with pytest.raises(AbortedError):
            select_workflow(prompter, on_verb=seen.append)
        assert seen == ["commit"]

    def test_push_and_pull_blank_means_git_defaults(self):
        assert select_workflow(ScriptedPrompter(menu_index("push"), "", "")) == Push()
        assert select_workflow(ScriptedPrompter(menu_index("pull"), "upstream", "")) == Pull(remote="upstream")
        assert select_workflow(ScriptedPrompter(menu_index("pull"), "", "dev")) == Pull(branch="dev")

    def test_cancel_propagates(self):
        with pytest.raises(AbortedError):
            select_workflow(ScriptedPrompter(AbortedError()))

    def test_asks_exactly_once_per_question(self):
        prompter = ScriptedPrompter(menu_index("commit"), 2, "msg", False)
        select_workflow(prompter)
        assert prompter.answers == []
        assert len(prompter.questions) == 4


class TestSelectResetScope:
    def test_choice_maps_to_scope(self):
        assert select_reset_scope(ScriptedPrompter(0)) is ResetScope.ALL
        assert select_reset_scope(ScriptedPrompter(4)) is ResetScope.UNTRACKED


class TestTyperPrompter:
    def make(self):
        return TyperPrompter(Console(file=io.StringIO(), width=120))

    def test_choose_is_one_based(self):
        prompter = self.make()
        with patch("sgit.cli.interactive.typer.prompt", return_value=3):
            assert prompter.choose("Pick", ["a", "b", "c"]) == 2
        assert "3) c" in prompter.console.file.getvalue()

    @pytest.mark.parametrize("method,args", [
        ("choose", ("Pick", ["a"])),
        ("text", ("Message",)),
    ])
    def test_prompt_abort_becomes_aborted_error(self, method, args):
        prompter = self.make()
        with patch("sgit.cli.interactive.typer.prompt", side_effect=typer.Abort()):
            with pytest.raises(AbortedError):
                getattr(prompter, method)(*args)

    def test_confirm_abort_becomes_aborted_error(self):
        prompter = self.make()
        with patch("sgit.cli.interactive.typer.confirm", side_effect=typer.Abort()):
            with pytest.raises(AbortedError):
                prompter.confirm("Sure?")

    def test_text_with_blank_default(self):
        prompter = self.make()
        with patch("sgit.cli.interactive.typer.prompt", return_value="") as mock_prompt:
            assert prompter.text("Remote", default="") == ""
        mock_prompt.assert_called_once_with("Remote", default="", show_default=False)
