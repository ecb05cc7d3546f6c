"""Error taxonomy shared by the hosting client, git driver and orchestrator."""

from enum import Enum


class GinitError(Exception):
    """Base class for failures reported to the user as a single red line.

    Args:
        kind: Enum member identifying the failure.
        message: Human-readable text shown by the command layer.
    """

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message


class AuthFailure(Enum):
    UNAUTHORIZED = "unauthorized"
    TOKEN_ALREADY_EXISTS = "token_already_exists"


class RepoFailure(Enum):
    UNAUTHORIZED = "unauthorized"
    NAME_CONFLICT = "name_conflict"


class VcsFailure(Enum):
    ALREADY_INITIALIZED = "already_initialized"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    PUSH_REJECTED = "push_rejected"
    COMMAND_FAILED = "command_failed"


class PreflightFailure(Enum):
    UNAUTHORIZED = "unauthorized"
    ALREADY_INITIALIZED = "already_initialized"
    NOTHING_TO_COMMIT = "nothing_to_commit"


class InputFailure(Enum):
    REQUIRED = "required"


class AuthError(GinitError):
    pass


class RepoError(GinitError):
    pass


class VcsError(GinitError):
    pass


class PreflightError(GinitError):
    pass


class InputError(GinitError):
    pass
