"""Turns git diff summaries into recorded branch comparisons."""

import logging
from typing import List

from ..exceptions import ComparisonNotFoundError, RepositoryNotFoundError
from ..models import Comparison, DiffSummary
from ..protocols.git_gateway_protocol import GitGatewayProtocol
from ..protocols.registry_protocol import RegistryProtocol
from ..schemas import DiffResult, GitFile
from .diff_parsing import classify_file_status

logger = logging.getLogger(__name__)


def build_diff_result(summary: DiffSummary, legacy_status: bool = True) -> DiffResult:
    files = [
        GitFile(
            path=stat.path,
            status=classify_file_status(stat.insertions, stat.deletions, legacy_status),
            additions=stat.insertions,
            deletions=stat.deletions,
        )
        for stat in summary.files
    ]
    return DiffResult(
        files=files,
        total_additions=sum(f.additions for f in files),
        total_deletions=sum(f.deletions for f in files),
    )


class ComparisonService:
    """Compares two branches of a registered repository and records the result."""

    def __init__(
        self,
        registry: RegistryProtocol,
        git_gateway: GitGatewayProtocol,
        legacy_zero_change_status: bool = True,
    ):
        self.registry = registry
        self.git_gateway = git_gateway
        self.legacy_zero_change_status = legacy_zero_change_status

    async def compare(
        self, repository_id: int, source_branch: str, target_branch: str
    ) -> DiffResult:
        repository = self.registry.get(repository_id)
        if repository is None:
            raise RepositoryNotFoundError()

        summary = await self.git_gateway.diff_summary(
            repository.path, source_branch, target_branch
        )
        result = build_diff_result(summary, self.legacy_zero_change_status)

        comparison = self.registry.record_comparison(
            repository.id, source_branch, target_branch, result
        )
        logger.info(
            "Compared %s...%s in %s: %d files, +%d -%d",
            source_branch,
            target_branch,
            repository.path,
            len(result.files),
            result.total_additions,
            result.total_deletions,
        )
        return result.model_copy(update={"comparison_id": comparison.id})

    def get_comparison(self, comparison_id: int) -> Comparison:
        comparison = self.registry.get_comparison(comparison_id)
        if comparison is None:
            raise ComparisonNotFoundError()
        return comparison

    def list_comparisons(self, repository_id: int) -> List[Comparison]:
        if self.registry.get(repository_id) is None:
            raise RepositoryNotFoundError()
        return self.registry.list_comparisons(repository_id)
