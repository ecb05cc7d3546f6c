"""GitHubClient: wraps the GitHub REST API calls used by auth and init."""

from dataclasses import dataclass
from typing import List, Optional

import requests

from ginit import __version__
from ginit.errors import AuthError, AuthFailure, RepoError, RepoFailure

DEFAULT_API_URL = "https://api.github.com"
REQUEST_TIMEOUT = 30

TOKEN_SCOPES = ["user", "public_repo", "repo", "repo:status"]
TOKEN_NOTE = "ginit: cli for easy git init-ing"
TOKEN_FINGERPRINT = f"ginit v{__version__}"


@dataclass
class RepositoryDescriptor:
    """The remote repository to create."""

    name: str
    description: Optional[str] = None
    visibility: str = "public"

    @property
    def private(self) -> bool:
        return self.visibility == "private"

    def to_payload(self):
        payload = {"name": self.name, "private": self.private}
        if self.description:
            payload["description"] = self.description
        return payload


@dataclass
class CreatedRepository:
    clone_url: str
    html_url: str = ""


class GitHubClient:
    """Wraps GitHub API requests for token exchange and repository creation.

    All requests go through _post() for consistency. Nothing is retried.

    Args:
        api_url: Base URL of the GitHub API.
        session: Optional requests.Session, injectable for tests.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL, session=None):
        self._api_url = api_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _post(self, path, payload):
        return self._session.post(
            f"{self._api_url}{path}", json=payload, timeout=REQUEST_TIMEOUT,
        )

    def authenticate_basic(self, username: str, password: str) -> None:
        self._session.auth = (username, password)

    def authenticate_token(self, token: str) -> None:
        self._session.auth = None
        self._session.headers["Authorization"] = f"token {token}"

    def create_token(
        self,
        scopes: List[str] = TOKEN_SCOPES,
        note: str = TOKEN_NOTE,
        fingerprint: str = TOKEN_FINGERPRINT,
    ) -> str:
        """Exchange basic credentials for a long-lived OAuth token."""
        response = self._post("/authorizations", {
            "scopes": list(scopes),
            "note": note,
            "fingerprint": fingerprint,
        })
        if response.status_code == 401:
            raise AuthError(AuthFailure.UNAUTHORIZED, "Couldn't log you in. Please try again.")
        if response.status_code == 422:
            raise AuthError(AuthFailure.TOKEN_ALREADY_EXISTS, "You already have an access token.")
        response.raise_for_status()
        token = response.json().get("token")
        if not token:
            raise AuthError(AuthFailure.UNAUTHORIZED, "GitHub did not return an access token.")
        return token

    def create_repository(self, descriptor: RepositoryDescriptor) -> CreatedRepository:
        response = self._post("/user/repos", descriptor.to_payload())
        if response.status_code == 401:
            raise RepoError(
                RepoFailure.UNAUTHORIZED,
                "Unauthorized. Please ensure you are logged in using `ginit auth`.",
            )
        if response.status_code == 422:
            raise RepoError(
                RepoFailure.NAME_CONFLICT,
                f"A repository named '{descriptor.name}' already exists on this account.",
            )
        response.raise_for_status()
        data = response.json()
        return CreatedRepository(clone_url=data["ssh_url"], html_url=data.get("html_url", ""))
