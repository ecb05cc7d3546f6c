"""Shared fixtures and utilities for init and auth tests."""

import os
import sys

import pytest

# Ensure tests/init-cmd/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_repository import FakeGitRepository  # noqa: E402
from fake_hosting_client import FakeHostingClient  # noqa: E402
from fake_prompt_session import FakePromptSession  # noqa: E402

from ginit.credentials.credential_store import CredentialStore  # noqa: E402
from ginit.init_cmd.initializer import InitCollaborators  # noqa: E402
from ginit.workspace.inspector import WorkspaceInspector  # noqa: E402

VALID_TOKEN = "gho_valid-token"


def snapshot(directory):
    """Return the set of names in directory, for before/after comparisons."""
    return set(os.listdir(directory))


def write_files(directory, *names):
    for name in names:
        with open(os.path.join(directory, name), "w") as f:
            f.write(f"// {name}\n")


@pytest.fixture
def workspace(tmp_path):
    path = tmp_path / "myrepo"
    path.mkdir()
    return path


@pytest.fixture
def store(tmp_path):
    credential_store = CredentialStore(str(tmp_path / "config"))
    credential_store.save(VALID_TOKEN)
    return credential_store


@pytest.fixture
def collaborators(workspace, store):
    """InitCollaborators with a real inspector and store, fake remote and git."""
    return InitCollaborators(
        inspector=WorkspaceInspector(str(workspace)),
        credential_store=store,
        hosting_client=FakeHostingClient(),
        git_repo=FakeGitRepository(),
        prompts=FakePromptSession(),
    )
