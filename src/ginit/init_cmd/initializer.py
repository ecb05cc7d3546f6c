"""RepositoryInitializer: sequences preflight, remote creation and local wiring.

The steps run strictly in order and are never retried or rolled back:

1. preflight checks (token, existing .git, something to commit)
2. authenticate with the stored token
3. describe the repository (prompts, or defaults when non-interactive)
4. create the remote repository
5. write scaffold files, then init/stage/commit/remote/push
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from ginit.errors import PreflightError, PreflightFailure
from ginit.github.github_client import RepositoryDescriptor
from ginit.scaffold.scaffold_files import ScaffoldPlan, write_scaffold_files

INITIAL_COMMIT_MESSAGE = "Initial commit"
REMOTE_NAME = "origin"
PUSH_BRANCH = "master"


@dataclass
class InitOptions:
    interactive: bool = False
    force: bool = False
    name: Optional[str] = None
    description: Optional[str] = None
    private: bool = False


@dataclass
class InitResult:
    clone_url: str
    with_files: bool
    html_url: str = ""

    @property
    def file_status(self) -> str:
        return "with files" if self.with_files else "without files"


@dataclass
class InitCollaborators:
    """Bundles the injected collaborators used by RepositoryInitializer."""

    inspector: object
    credential_store: object
    hosting_client: object
    git_repo: object
    prompts: object = None
    status: Callable[[str], None] = field(default=lambda message: None)


class RepositoryInitializer:
    """Turns the inspected directory into a git repository pushed to a new remote."""

    def __init__(self, collaborators: InitCollaborators, opts: InitOptions):
        self._c = collaborators
        self._opts = opts

    def run(self) -> InitResult:
        token = self.preflight()
        self._c.hosting_client.authenticate_token(token)

        descriptor, scaffold = self.describe_repository()

        self._c.status("Creating repository...")
        created = self._c.hosting_client.create_repository(descriptor)

        self._c.status("Setting up the repository...")
        write_scaffold_files(scaffold, descriptor.name, self._c.inspector)
        with_files = self.wire_local_repo(created.clone_url)
        return InitResult(
            clone_url=created.clone_url, with_files=with_files, html_url=created.html_url,
        )

    def preflight(self) -> str:
        """Run every precondition before any side effect and return the token."""
        token = self._c.credential_store.load()
        if not token:
            raise PreflightError(
                PreflightFailure.UNAUTHORIZED,
                "Unauthorized. Please ensure you are logged in using `ginit auth`.",
            )
        if self._c.inspector.has_vcs_metadata():
            raise PreflightError(
                PreflightFailure.ALREADY_INITIALIZED,
                "This directory is already a git repository. Exiting.",
            )
        if not (self._c.inspector.has_files() or self._opts.interactive or self._opts.force):
            raise PreflightError(
                PreflightFailure.NOTHING_TO_COMMIT,
                "This directory has no files to commit. "
                "Try running in interactive or force modes.",
            )
        return token

    def describe_repository(self):
        default_name = self._opts.name or self._c.inspector.default_repo_name()
        if not self._opts.interactive:
            descriptor = RepositoryDescriptor(
                name=default_name,
                description=self._opts.description,
                visibility="private" if self._opts.private else "public",
            )
            return descriptor, ScaffoldPlan()

        prompts = self._c.prompts
        answers = prompts.ask_repository(default_name, self._opts.description)
        descriptor = RepositoryDescriptor(
            name=answers.name,
            description=answers.description,
            visibility=answers.visibility,
        )

        wanted = prompts.ask_scaffold()
        plan = ScaffoldPlan(readme=wanted.want_readme, gitignore=wanted.want_ignore)
        if wanted.want_ignore:
            entries = self._c.inspector.list_ignorable_entries()
            if entries:
                plan.ignore_entries = prompts.ask_ignore_entries(entries).ignore
        return descriptor, plan

    def wire_local_repo(self, clone_url: str) -> bool:
        """Initialize git and point it at the remote; commit and push only with files."""
        git_repo = self._c.git_repo
        with_files = self._c.inspector.has_files()
        git_repo.init_repo()
        if with_files:
            git_repo.stage_all()
            git_repo.commit(INITIAL_COMMIT_MESSAGE)
            git_repo.add_remote(REMOTE_NAME, clone_url)
            git_repo.push(REMOTE_NAME, PUSH_BRANCH)
        else:
            git_repo.add_remote(REMOTE_NAME, clone_url)
        return with_files
