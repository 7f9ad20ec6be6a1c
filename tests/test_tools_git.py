"""Tests pour GitCommands."""

from unittest.mock import MagicMock

import pytest

from linux_shell_utils.commands import (
    CapturedExecutor,
    CommandSettings,
    StreamingExecutor,
)
from linux_shell_utils.errors import InvalidArgError
from linux_shell_utils.logging.base import Logger
from linux_shell_utils.tools import GitCommands


@pytest.fixture
def settings():
    return CommandSettings(logger=MagicMock(spec=Logger))


@pytest.fixture
def streaming():
    return MagicMock(spec=StreamingExecutor)


@pytest.fixture
def git(streaming):
    return GitCommands(streaming, MagicMock(spec=CapturedExecutor))


class TestGitCommands:
    """Tests pour GitCommands."""

    def test_clone(self, git, streaming, settings):
        git.clone(settings, "https://example.org/repo.git")
        streaming.run.assert_called_once_with(
            settings, ["git", "clone", "https://example.org/repo.git"]
        )

    def test_clone_repertoire(self, git, streaming, settings):
        git.clone(settings, "https://example.org/repo.git", "dest")
        streaming.run.assert_called_once_with(
            settings,
            ["git", "clone", "https://example.org/repo.git", "dest"],
        )

    def test_add(self, git, streaming, settings):
        git.add(settings, ".")
        streaming.run.assert_called_once_with(settings, ["git", "add", "."])

    def test_commit_message_avec_espaces(self, git, streaming, settings):
        """Le message reste un seul argument, espaces compris."""
        git.commit(settings, "Corrige le parseur")
        streaming.run.assert_called_once_with(
            settings, ["git", "commit", "-m", "Corrige le parseur"]
        )

    def test_push(self, git, streaming, settings):
        git.push(settings, "origin", "main")
        streaming.run.assert_called_once_with(
            settings, ["git", "push", "origin", "main"]
        )

    def test_pull(self, git, streaming, settings):
        git.pull(settings, "origin", "main")
        streaming.run.assert_called_once_with(
            settings, ["git", "pull", "origin", "main"]
        )

    @pytest.mark.parametrize("call, name", [
        (lambda g, s: g.clone(s, ""), "url"),
        (lambda g, s: g.add(s, ""), "path"),
        (lambda g, s: g.commit(s, ""), "message"),
        (lambda g, s: g.push(s, "", "main"), "remote"),
        (lambda g, s: g.pull(s, "origin", ""), "branch"),
    ])
    def test_arguments_vides(self, git, streaming, settings, call, name):
        with pytest.raises(InvalidArgError, match=name):
            call(git, settings)
        streaming.run.assert_not_called()
