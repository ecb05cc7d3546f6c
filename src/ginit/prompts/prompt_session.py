"""PromptSession: the fixed question groups asked in interactive mode."""

from dataclasses import dataclass, field
from typing import List, Optional

from ginit.errors import InputError, InputFailure
from ginit.prompts.menu import PromptConfig, get_user_choice, get_user_choices, read_answer

VISIBILITIES = ["public", "private"]

PRESELECTED_IGNORES = ("node_modules", "bower_components", ".DS_Store", "*.log")


@dataclass
class Credentials:
    username: str
    password: str


@dataclass
class RepositoryAnswers:
    name: str
    description: Optional[str]
    visibility: str


@dataclass
class ScaffoldAnswers:
    want_readme: bool
    want_ignore: bool


@dataclass
class IgnoreAnswers:
    ignore: List[str] = field(default_factory=list)


def require_non_empty(value: str) -> str:
    if not value:
        raise InputError(InputFailure.REQUIRED, "Input required")
    return value


class PromptSession:
    """Asks the interactive questions, one blocking group at a time.

    Args:
        config: PromptConfig supplying input functions and the output stream.
    """

    def __init__(self, config: Optional[PromptConfig] = None):
        self._config = config or PromptConfig()

    def ask_credentials(self) -> Credentials:
        username = self._ask_required(
            "Enter your Github username or e-mail address")
        password = self._ask_required(
            "Enter your password", read_fn=self._config.password_fn)
        return Credentials(username=username, password=password)

    def ask_repository(self, default_name: str,
                       default_description: Optional[str] = None) -> RepositoryAnswers:
        name = self._ask_required(
            "Enter a name for the repository", default=default_name)
        description = self._ask_text(
            "Enter a description for the repository (optional)",
            default=default_description,
        )
        choice = get_user_choice("Public or private:", 1, VISIBILITIES, config=self._config)
        return RepositoryAnswers(
            name=name,
            description=description or None,
            visibility=VISIBILITIES[choice - 1],
        )

    def ask_scaffold(self) -> ScaffoldAnswers:
        return ScaffoldAnswers(
            want_readme=self._confirm("Do you want to create a README.md?"),
            want_ignore=self._confirm("Do you want to create a .gitignore?"),
        )

    def ask_ignore_entries(self, entries: List[str]) -> IgnoreAnswers:
        """Multi-select over the workspace entries to list in .gitignore."""
        if not entries:
            return IgnoreAnswers()
        defaults = [i + 1 for i, e in enumerate(entries) if e in PRESELECTED_IGNORES]
        chosen = get_user_choices(
            "Select the files and/or folders you wish to ignore:",
            defaults, entries, config=self._config,
        )
        return IgnoreAnswers(ignore=[entries[i - 1] for i in chosen])

    def _ask_text(self, message, default=None, read_fn=None):
        suffix = f" [{default}]: " if default else ": "
        answer = read_answer(message + suffix, self._config, read_fn).strip()
        return answer or (default or "")

    def _ask_required(self, message, default=None, read_fn=None):
        while True:
            answer = self._ask_text(message, default=default, read_fn=read_fn)
            try:
                return require_non_empty(answer)
            except InputError as exc:
                print(exc.message, file=self._config.output)

    def _confirm(self, message, default=True):
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = read_answer(f"{message} {hint}: ", self._config).strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            print("Please answer y or n.", file=self._config.output)
