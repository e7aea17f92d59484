import asyncio
import logging
from pathlib import Path
from typing import List, Type

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..exceptions import (
    BranchCompareError,
    CloneFailedError,
    DestinationExistsError,
    GitOperationError,
    NotAGitRepositoryError,
    RepositoryNotFoundError,
)
from ..models import DiffSummary
from ..schemas import FileContent
from .diff_parsing import DEFAULT_REMOTE_NAMES, normalize_branch_names, parse_numstat

logger = logging.getLogger(__name__)


def decode_output(raw: bytes) -> str:
    """Decode git stdout as UTF-8; undecodable bytes become U+FFFD."""
    return raw.decode("utf-8", errors="replace")


class GitGateway:
    """Runs git operations against repositories on disk through GitPython.

    GitPython blocks while the git subprocess runs, so every public method
    hands the work to a worker thread and is awaited by the caller.
    """

    def __init__(self, github_token: str = ""):
        self.github_token = github_token

    # --- public API ---

    async def verify_repository(self, path: str) -> None:
        await asyncio.to_thread(self._verify_repository, path)

    async def is_repository(self, path: str) -> bool:
        try:
            await self.verify_repository(path)
        except NotAGitRepositoryError:
            return False
        return True

    async def clone(self, url: str, dest_path: str) -> None:
        await asyncio.to_thread(self._clone, url, dest_path)

    async def list_branches(self, path: str) -> List[str]:
        return await asyncio.to_thread(self._list_branches, path)

    async def diff_summary(
        self, path: str, source_ref: str, target_ref: str
    ) -> DiffSummary:
        return await asyncio.to_thread(self._diff_summary, path, source_ref, target_ref)

    async def show_file(self, path: str, ref: str, file_path: str) -> FileContent:
        return await asyncio.to_thread(self._show_file, path, ref, file_path)

    async def file_diff(
        self, path: str, source_ref: str, target_ref: str, file_path: str
    ) -> str:
        return await asyncio.to_thread(
            self._file_diff, path, source_ref, target_ref, file_path
        )

    # --- blocking implementations ---

    def _open(
        self, path: str, error: Type[BranchCompareError] = RepositoryNotFoundError
    ) -> Repo:
        try:
            return Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise error(f"Not a git repository: {path}", detail=str(e)) from e

    def _verify_repository(self, path: str) -> None:
        with self._open(path, NotAGitRepositoryError) as repo:
            try:
                repo.git.status()
            except GitCommandError as e:
                raise NotAGitRepositoryError(
                    f"Not a git repository: {path}", detail=e.stderr
                ) from e

    def _build_clone_url(self, url: str) -> str:
        """Build clone URL with token for private repositories."""
        if self.github_token and url.startswith("https://github.com/"):
            repo_part = url.replace("https://github.com/", "", 1)
            return f"https://{self.github_token}@github.com/{repo_part}"
        return url

    def _redact(self, text: str) -> str:
        if self.github_token:
            return text.replace(self.github_token, "***")
        return text

    def _clone(self, url: str, dest_path: str) -> None:
        dest = Path(dest_path)
        if dest.exists():
            raise DestinationExistsError(f"Destination already exists: {dest_path}")

        dest.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Cloning %s into %s", url, dest)
        try:
            repo = Repo.clone_from(self._build_clone_url(url), dest)
        except GitCommandError as e:
            reason = self._redact(str(e.stderr or "").strip())
            logger.warning("Clone of %s failed: %s", url, reason)
            raise CloneFailedError(f"Failed to clone repository: {reason}") from e
        repo.close()
        logger.info("Repository cloned to %s", dest)

    def _list_branches(self, path: str) -> List[str]:
        with self._open(path) as repo:
            try:
                output = repo.git.branch("--all", "--format=%(refname)")
            except GitCommandError as e:
                logger.warning("Listing branches of %s failed: %s", path, e.stderr)
                raise GitOperationError(
                    "Failed to fetch branches", detail=e.stderr
                ) from e
            remote_names = set(DEFAULT_REMOTE_NAMES)
            remote_names.update(remote.name for remote in repo.remotes)
        return normalize_branch_names(output.splitlines(), remote_names)

    def _diff_summary(self, path: str, source_ref: str, target_ref: str) -> DiffSummary:
        with self._open(path) as repo:
            try:
                output = repo.git.diff(
                    "--numstat",
                    "-z",
                    f"{source_ref}...{target_ref}",
                    stdout_as_string=False,
                )
            except GitCommandError as e:
                logger.warning(
                    "Diff %s...%s in %s failed: %s", source_ref, target_ref, path, e.stderr
                )
                raise GitOperationError(
                    "Failed to compare branches", detail=e.stderr
                ) from e
        return parse_numstat(decode_output(output))

    def _show_file(self, path: str, ref: str, file_path: str) -> FileContent:
        with self._open(path) as repo:
            try:
                content = repo.git.show(
                    f"{ref}:{file_path}",
                    stdout_as_string=False,
                    strip_newline_in_stdout=False,
                )
            except GitCommandError:
                # Missing at this ref
                return FileContent(content="", exists=False)
        return FileContent(content=decode_output(content), exists=True)

    def _file_diff(
        self, path: str, source_ref: str, target_ref: str, file_path: str
    ) -> str:
        with self._open(path) as repo:
            try:
                patch = repo.git.diff(
                    f"{source_ref}...{target_ref}",
                    "--",
                    file_path,
                    stdout_as_string=False,
                    strip_newline_in_stdout=False,
                )
            except GitCommandError as e:
                logger.warning("Diff of %s in %s failed: %s", file_path, path, e.stderr)
                raise GitOperationError(
                    "Failed to fetch file diff", detail=e.stderr
                ) from e
        return decode_output(patch)
