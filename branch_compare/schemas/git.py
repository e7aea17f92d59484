from enum import Enum
from typing import List, Optional

from .base import CamelModel


class FileStatus(str, Enum):
    """Enum for file change statuses."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    UNCHANGED = "unchanged"  # only produced when legacy classification is off


class GitFile(CamelModel):
    """One changed file in a branch comparison."""

    path: str
    status: FileStatus
    additions: int = 0
    deletions: int = 0


class DiffResult(CamelModel):
    files: List[GitFile]
    total_additions: int
    total_deletions: int
    comparison_id: Optional[int] = None


class FileContent(CamelModel):
    content: str
    exists: bool


class FileDiff(CamelModel):
    diff: str


class ThreeWayView(CamelModel):
    """Source, target and merge-preview contents of one file.

    `merged` is not the result of a merge: it is the target content,
    flagged by `merged_is_preview`.
    """

    source_branch: str
    target_branch: str
    file_path: str
    source: FileContent
    target: FileContent
    merged: FileContent
    merged_is_preview: bool = True
