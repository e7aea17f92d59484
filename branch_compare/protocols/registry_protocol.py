"""Registry protocol interface."""

from typing import List, Optional, Protocol, runtime_checkable

from ..models import Comparison, Repository
from ..schemas import DiffResult


@runtime_checkable
class RegistryProtocol(Protocol):
    """Catalog of known repositories and past comparisons."""

    def list_repositories(self) -> List[Repository]: ...

    def add(self, name: str, path: str) -> Repository: ...

    def get(self, repository_id: int) -> Optional[Repository]: ...

    def get_by_path(self, path: str) -> Optional[Repository]: ...

    def touch(self, repository_id: int) -> None: ...

    def record_comparison(
        self,
        repository_id: Optional[int],
        source_branch: str,
        target_branch: str,
        result: DiffResult,
    ) -> Comparison: ...

    def get_comparison(self, comparison_id: int) -> Optional[Comparison]: ...

    def list_comparisons(self, repository_id: int) -> List[Comparison]: ...
