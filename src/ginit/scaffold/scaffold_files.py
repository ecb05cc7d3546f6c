"""Scaffold files written into the workspace before the initial commit."""

from dataclasses import dataclass, field
from typing import List

import jinja2

from ginit.workspace.inspector import IGNORE_FILE

README_FILE = "README.md"

_templates = jinja2.Environment(loader=jinja2.PackageLoader("ginit.scaffold"))


@dataclass
class ScaffoldPlan:
    """Which scaffold files to create, decided while describing the repository."""

    readme: bool = False
    gitignore: bool = False
    ignore_entries: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.readme or self.gitignore)


def readme_content(name: str) -> str:
    return _templates.get_template("README.md.j2").render(name=name)


def gitignore_content(entries: List[str]) -> str:
    return _templates.get_template("gitignore.j2").render(entries=entries)


def write_scaffold_files(plan: ScaffoldPlan, repo_name: str, inspector) -> List[str]:
    """Create the planned files through the workspace inspector.

    Returns:
        Names of the files written, in creation order.
    """
    if plan.is_empty:
        return []
    written = []
    if plan.readme:
        inspector.write_file(README_FILE, readme_content(repo_name))
        written.append(README_FILE)
    if plan.gitignore:
        inspector.write_file(IGNORE_FILE, gitignore_content(plan.ignore_entries))
        written.append(IGNORE_FILE)
    return written
