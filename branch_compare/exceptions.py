"""Error hierarchy shared by the gateway, the services and the HTTP layer.

Each error knows the HTTP status it maps to and a short machine-readable
code, so the API layer never has to inspect messages.
"""

from typing import Optional


class BranchCompareError(Exception):
    """Base class for all application errors."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class ValidationError(BranchCompareError):
    status_code = 400
    code = "validation_error"


class NotFoundError(BranchCompareError):
    status_code = 404
    code = "not_found"


class RepositoryNotFoundError(NotFoundError):
    code = "repository_not_found"

    def __init__(self, message: str = "Repository not found", detail: Optional[str] = None):
        super().__init__(message, detail)


class ComparisonNotFoundError(NotFoundError):
    code = "comparison_not_found"

    def __init__(self, message: str = "Comparison not found", detail: Optional[str] = None):
        super().__init__(message, detail)


class GitOperationError(BranchCompareError):
    """A git command failed or produced output we could not use."""

    status_code = 500
    code = "git_operation_failed"


class NotAGitRepositoryError(GitOperationError):
    status_code = 400
    code = "not_a_git_repository"


class DestinationExistsError(GitOperationError):
    status_code = 400
    code = "destination_exists"


class CloneFailedError(GitOperationError):
    code = "clone_failed"


class MalformedGitOutputError(GitOperationError):
    code = "malformed_git_output"


class DirectoryBrowseError(BranchCompareError):
    code = "browse_failed"


class InternalError(BranchCompareError):
    pass
