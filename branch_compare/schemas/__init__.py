"""Schemas for the application."""

from .app_schemas import (
    AddRepositoryRequest,
    BrowseRequest,
    BrowseResult,
    CloneRepositoryRequest,
    CompareRequest,
    DirectoryEntry,
    ErrorResponse,
)
from .git import DiffResult, FileContent, FileDiff, FileStatus, GitFile, ThreeWayView

__all__ = [
    "AddRepositoryRequest",
    "BrowseRequest",
    "BrowseResult",
    "CloneRepositoryRequest",
    "CompareRequest",
    "DiffResult",
    "DirectoryEntry",
    "ErrorResponse",
    "FileContent",
    "FileDiff",
    "FileStatus",
    "GitFile",
    "ThreeWayView",
]
