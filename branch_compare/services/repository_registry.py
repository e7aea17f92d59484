import logging
import threading
from typing import Dict, List, Optional

from ..models import Comparison, Repository
from ..models.repository_models import utcnow
from ..schemas import DiffResult

logger = logging.getLogger(__name__)


class RepositoryRegistry:
    """In-memory catalog of repositories and comparisons.

    Ids come from two independent counters that only ever grow. Every method
    returns copies, so callers cannot change stored records behind the lock.
    """

    def __init__(self):
        self._repositories: Dict[int, Repository] = {}
        self._comparisons: Dict[int, Comparison] = {}
        self._next_repository_id = 1
        self._next_comparison_id = 1
        self._lock = threading.Lock()

    def list_repositories(self) -> List[Repository]:
        with self._lock:
            return [repo.model_copy() for repo in self._repositories.values()]

    def add(self, name: str, path: str) -> Repository:
        with self._lock:
            existing = self._find_by_path(path)
            if existing is not None:
                existing.last_accessed = utcnow()
                logger.info("Repository already registered: id=%s, path=%s", existing.id, path)
                return existing.model_copy()

            repository = Repository(id=self._next_repository_id, name=name, path=path)
            self._next_repository_id += 1
            self._repositories[repository.id] = repository
        logger.info("Repository registered: id=%s, path=%s", repository.id, path)
        return repository.model_copy()

    def get(self, repository_id: int) -> Optional[Repository]:
        with self._lock:
            repository = self._repositories.get(repository_id)
            return repository.model_copy() if repository else None

    def get_by_path(self, path: str) -> Optional[Repository]:
        with self._lock:
            repository = self._find_by_path(path)
            return repository.model_copy() if repository else None

    def touch(self, repository_id: int) -> None:
        with self._lock:
            repository = self._repositories.get(repository_id)
            if repository is not None:
                repository.last_accessed = utcnow()

    def record_comparison(
        self,
        repository_id: Optional[int],
        source_branch: str,
        target_branch: str,
        result: DiffResult,
    ) -> Comparison:
        with self._lock:
            comparison = Comparison(
                id=self._next_comparison_id,
                repository_id=repository_id,
                source_branch=source_branch,
                target_branch=target_branch,
                changed_files=result.model_copy(deep=True),
            )
            self._next_comparison_id += 1
            self._comparisons[comparison.id] = comparison
        logger.info(
            "Comparison recorded: id=%s, repository=%s, %s...%s",
            comparison.id,
            repository_id,
            source_branch,
            target_branch,
        )
        return comparison.model_copy(deep=True)

    def get_comparison(self, comparison_id: int) -> Optional[Comparison]:
        with self._lock:
            comparison = self._comparisons.get(comparison_id)
            return comparison.model_copy(deep=True) if comparison else None

    def list_comparisons(self, repository_id: int) -> List[Comparison]:
        with self._lock:
            return [
                c.model_copy(deep=True)
                for c in self._comparisons.values()
                if c.repository_id == repository_id
            ]

    def _find_by_path(self, path: str) -> Optional[Repository]:
        for repository in self._repositories.values():
            if repository.path == path:
                return repository
        return None
