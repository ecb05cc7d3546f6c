"""Click entry point for the ginit CLI."""

import sys

import click
import requests

from ginit import __version__
from ginit.credentials.credential_store import CredentialStore
from ginit.errors import AuthFailure, GinitError, VcsError
from ginit.github.github_client import DEFAULT_API_URL, GitHubClient
from ginit.init_cmd.auth import TOKENS_URL, authenticate_user
from ginit.init_cmd.initializer import (
    InitCollaborators,
    InitOptions,
    RepositoryInitializer,
)
from ginit.prompts.prompt_session import PromptSession
from ginit.vcs.git_repository import GitRepository
from ginit.workspace.inspector import WorkspaceInspector

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = """\b
Examples:
  ginit auth     # Sign into github
  ginit          # Initialize current directory as git repository
  ginit -i       # Enter interactive mode
"""


def _fail(message):
    click.secho(message, fg="red")
    sys.exit(1)


def run_auth(store, client):
    try:
        authenticate_user(PromptSession(), client, store, status=click.echo)
    except GinitError as exc:
        click.secho(exc.message, fg="red")
        if exc.kind is AuthFailure.TOKEN_ALREADY_EXISTS:
            click.echo("Try revoking your ginit access token and then trying again.")
            click.echo(f"  url: {TOKENS_URL}")
        sys.exit(1)
    except requests.RequestException as exc:
        _fail(str(exc))
    click.secho("Successfully authenticated.", fg="green")


def run_init(store, client, opts):
    inspector = WorkspaceInspector()
    collaborators = InitCollaborators(
        inspector=inspector,
        credential_store=store,
        hosting_client=client,
        git_repo=GitRepository(inspector.root),
        prompts=PromptSession() if opts.interactive else None,
        status=click.echo,
    )
    try:
        result = RepositoryInitializer(collaborators, opts).run()
    except VcsError as exc:
        click.secho(exc.message, fg="red")
        click.echo("The remote repository was created and has not been removed.")
        sys.exit(1)
    except (GinitError, requests.RequestException) as exc:
        _fail(getattr(exc, "message", str(exc)))
    click.secho(f"Repository initialized {result.file_status}.", fg="green")
    if result.html_url:
        click.echo(f"  url: {result.html_url}")


@click.command(context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.argument(
    "command", required=False, default="init",
    type=click.Choice(["auth", "init"]),
)
@click.option("-i", "--interactive", is_flag=True, help="Enter interactive mode.")
@click.option("-f", "--force", is_flag=True, help="Force initialization.")
@click.option("--name", default=None, help="Repository name (default: directory name).")
@click.option("--description", default=None, help="Repository description.")
@click.option("--private", is_flag=True, help="Create a private repository.")
@click.option("--api-url", envvar="GINIT_API_URL", default=DEFAULT_API_URL,
              show_default=True, help="GitHub API base URL.")
@click.option("--config-dir", envvar="GINIT_CONFIG_DIR", default=None,
              help="Directory holding the stored access token.")
@click.version_option(__version__, "-v", "--version", prog_name="ginit")
def main(command, interactive, force, name, description, private, api_url, config_dir):
    """Create a GitHub repository and initialize the current directory.

    COMMAND is 'auth' (sign into github) or 'init' (the default).
    """
    store = CredentialStore(config_dir)
    client = GitHubClient(api_url)
    if command == "auth":
        run_auth(store, client)
    else:
        opts = InitOptions(
            interactive=interactive, force=force,
            name=name, description=description, private=private,
        )
        run_init(store, client, opts)
