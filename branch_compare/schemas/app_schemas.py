"""Request and response bodies of the HTTP API."""

from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class AddRepositoryRequest(CamelModel):
    path: str = Field(min_length=1)
    name: Optional[str] = None


class CloneRepositoryRequest(CamelModel):
    url: str = Field(min_length=1)
    local_path: str = Field(min_length=1)
    name: Optional[str] = None


class BrowseRequest(CamelModel):
    dir_path: Optional[str] = None


class CompareRequest(CamelModel):
    source_branch: str = Field(min_length=1)
    target_branch: str = Field(min_length=1)


class DirectoryEntry(CamelModel):
    name: str
    path: str
    is_git_repo: bool = False


class BrowseResult(CamelModel):
    current_path: str
    parent: str
    directories: List[DirectoryEntry]


class ErrorResponse(CamelModel):
    error: str
    code: str
