"""GitRepository: wraps GitPython for the init, stage, commit, remote and push steps."""

import os
from contextlib import contextmanager

from git import Repo
from git.exc import GitError
from git.remote import PushInfo

from ginit.errors import VcsError, VcsFailure
from ginit.workspace.inspector import VCS_METADATA_DIR

DEFAULT_BRANCH = "master"


@contextmanager
def git_errors(action):
    """Re-raise GitPython failures as VcsError(COMMAND_FAILED)."""
    try:
        yield
    except GitError as exc:
        raise VcsError(VcsFailure.COMMAND_FAILED, f"git {action} failed: {exc}") from exc


class GitRepository:
    """Drives git in a single working directory.

    Holds no state beyond the on-disk repository: every call reopens it.

    Args:
        root: The working directory to turn into a repository.
    """

    def __init__(self, root, initial_branch=DEFAULT_BRANCH):
        self._root = root
        self._initial_branch = initial_branch

    def _repo(self):
        return Repo(self._root)

    def init_repo(self):
        if os.path.isdir(os.path.join(self._root, VCS_METADATA_DIR)):
            raise VcsError(
                VcsFailure.ALREADY_INITIALIZED,
                "This directory is already a git repository.",
            )
        with git_errors("init"):
            Repo.init(self._root, initial_branch=self._initial_branch)

    def stage_all(self):
        with git_errors("add"):
            self._repo().git.add(all=True)

    def stage_path(self, path):
        with git_errors("add"):
            self._repo().git.add(path)

    def commit(self, message):
        """Commit the staged content.

        Raises:
            VcsError(NOTHING_TO_COMMIT): The index is empty or identical to HEAD.
            VcsError(COMMAND_FAILED): git could not read the index or write the commit.
        """
        with git_errors("commit"):
            repo = self._repo()
            if not self._has_staged_changes(repo):
                raise VcsError(VcsFailure.NOTHING_TO_COMMIT, "Nothing to commit.")
            return repo.index.commit(message).hexsha

    def add_remote(self, name, url):
        with git_errors("remote add"):
            self._repo().create_remote(name, url)

    def push(self, remote_name, branch):
        """Push branch to the named remote.

        Raises:
            VcsError(PUSH_REJECTED): git failed or the remote refused the update.
        """
        try:
            results = self._repo().remote(remote_name).push(branch)
        except (GitError, ValueError) as exc:
            raise VcsError(VcsFailure.PUSH_REJECTED, f"Push to {remote_name} failed: {exc}") from exc
        for info in results:
            if info.flags & (PushInfo.ERROR | PushInfo.REJECTED | PushInfo.REMOTE_REJECTED):
                raise VcsError(
                    VcsFailure.PUSH_REJECTED,
                    f"Push to {remote_name} rejected: {info.summary.strip()}",
                )

    @staticmethod
    def _has_staged_changes(repo):
        if not repo.head.is_valid():
            return len(repo.index.entries) > 0
        return len(repo.index.diff("HEAD")) > 0
