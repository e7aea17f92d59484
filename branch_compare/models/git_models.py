"""Git-related model classes."""

from typing import List, Optional

from pydantic import BaseModel, Field


class DiffStat(BaseModel):
    """Per-file line counts from `git diff --numstat`."""

    path: str
    previous_path: Optional[str] = None  # set for renames and copies
    insertions: int = Field(ge=0)
    deletions: int = Field(ge=0)
    binary: bool = False  # numstat reports "-" for both counts


class DiffSummary(BaseModel):
    files: List[DiffStat]

    @property
    def insertions(self) -> int:
        return sum(f.insertions for f in self.files)

    @property
    def deletions(self) -> int:
        return sum(f.deletions for f in self.files)
