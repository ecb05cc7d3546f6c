"""Sign into GitHub and store the resulting access token."""

from ginit.github.github_client import TOKEN_FINGERPRINT, TOKEN_NOTE, TOKEN_SCOPES

TOKENS_URL = "https://github.com/settings/tokens"


def authenticate_user(prompts, hosting_client, credential_store, status=None) -> str:
    """Prompt for credentials, exchange them for a token and persist it.

    Returns:
        The new token.

    Raises:
        AuthError: Bad credentials, or a token with the same fingerprint exists.
    """
    credentials = prompts.ask_credentials()
    if status:
        status("Authenticating you, please wait...")
    hosting_client.authenticate_basic(credentials.username, credentials.password)
    token = hosting_client.create_token(TOKEN_SCOPES, TOKEN_NOTE, TOKEN_FINGERPRINT)
    credential_store.save(token)
    return token
