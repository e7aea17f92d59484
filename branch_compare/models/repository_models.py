"""Records kept by the repository registry."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from ..schemas.base import CamelModel
from ..schemas.git import DiffResult


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Repository(CamelModel):
    id: int
    name: str
    path: str
    last_accessed: datetime = Field(default_factory=utcnow)


class Comparison(CamelModel):
    id: int
    repository_id: Optional[int] = None
    source_branch: str
    target_branch: str
    changed_files: DiffResult
    created_at: datetime = Field(default_factory=utcnow)
