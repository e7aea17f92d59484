"""Git gateway protocol interface."""

from typing import List, Protocol, runtime_checkable

from ..models import DiffSummary
from ..schemas import FileContent


@runtime_checkable
class GitGatewayProtocol(Protocol):
    """Protocol for git operations against a repository on disk."""

    async def verify_repository(self, path: str) -> None:
        """Raise NotAGitRepositoryError unless `path` is a git working directory."""
        ...

    async def is_repository(self, path: str) -> bool:
        """Non-raising variant of verify_repository."""
        ...

    async def clone(self, url: str, dest_path: str) -> None:
        """Clone `url` into `dest_path`, which must not exist yet."""
        ...

    async def list_branches(self, path: str) -> List[str]:
        """Local branch names, without remote-tracking refs."""
        ...

    async def diff_summary(
        self, path: str, source_ref: str, target_ref: str
    ) -> DiffSummary:
        """Per-file counts of the three-dot diff source...target."""
        ...

    async def show_file(self, path: str, ref: str, file_path: str) -> FileContent:
        """Content of `file_path` at `ref`; exists=False when absent."""
        ...

    async def file_diff(
        self, path: str, source_ref: str, target_ref: str, file_path: str
    ) -> str:
        """Patch text of the three-dot diff restricted to `file_path`."""
        ...
