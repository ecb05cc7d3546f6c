"""WorkspaceInspector: read-only questions about the directory being initialized.

Every query is total: filesystem errors (missing path, permission denied,
not a directory) answer False or an empty list instead of raising.
"""

import os
from typing import List, Optional

VCS_METADATA_DIR = ".git"
IGNORE_FILE = ".gitignore"


class WorkspaceInspector:
    """Inspects a workspace root directory.

    Args:
        root: Directory to inspect. Defaults to the current working directory.
    """

    def __init__(self, root: Optional[str] = None):
        self._root = root or os.getcwd()

    @property
    def root(self) -> str:
        return self._root

    def has_vcs_metadata(self) -> bool:
        return self._is_directory(os.path.join(self._root, VCS_METADATA_DIR))

    def has_files(self, path: str = ".") -> bool:
        try:
            return len(os.listdir(self._resolve(path))) > 0
        except OSError:
            return False

    def default_repo_name(self) -> str:
        return os.path.basename(os.path.abspath(self._root))

    def list_ignorable_entries(self, path: str = ".") -> List[str]:
        """Return directory entries that may be offered for .gitignore selection."""
        try:
            entries = os.listdir(self._resolve(path))
        except OSError:
            return []
        return sorted(e for e in entries if e not in (VCS_METADATA_DIR, IGNORE_FILE))

    def write_file(self, name: str, content: str) -> str:
        """Write a scaffold file into the workspace root and return its path."""
        file_path = os.path.join(self._root, name)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
        return file_path

    def _resolve(self, path):
        return os.path.join(self._root, path)

    @staticmethod
    def _is_directory(path):
        try:
            return os.path.isdir(path)
        except (OSError, ValueError):
            return False
