"""CredentialStore: persists the GitHub access token between invocations."""

import json
import os
import tempfile
from typing import Optional

import platformdirs

APP_NAME = "ginit"
CONFIG_FILE = "config.json"
NAMESPACE = "github"


def default_config_dir() -> str:
    return platformdirs.user_config_dir(APP_NAME)


def atomic_write(file_path: str, content: str) -> None:
    """Write content to file atomically using temp file + rename."""
    dir_name = os.path.dirname(os.path.abspath(file_path))
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise


class CredentialStore:
    """Stores a single token under the ``github`` record of a JSON preferences file.

    Args:
        config_dir: Directory holding config.json. Defaults to the per-user
            config directory for the application.
    """

    def __init__(self, config_dir: Optional[str] = None):
        self._config_dir = config_dir or default_config_dir()

    @property
    def config_file(self) -> str:
        return os.path.join(self._config_dir, CONFIG_FILE)

    def load(self) -> Optional[str]:
        """Return the stored token, or None if never authenticated."""
        prefs = self._read_prefs()
        record = prefs.get(NAMESPACE)
        if not isinstance(record, dict):
            return None
        return record.get("token") or None

    def save(self, token: str) -> None:
        """Persist token, replacing any previously stored one."""
        prefs = self._read_prefs()
        prefs[NAMESPACE] = {"token": token}
        os.makedirs(self._config_dir, exist_ok=True)
        atomic_write(self.config_file, json.dumps(prefs, indent=2) + "\n")

    def _read_prefs(self):
        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                prefs = json.load(f)
        except (OSError, ValueError):
            return {}
        return prefs if isinstance(prefs, dict) else {}
