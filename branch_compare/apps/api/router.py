import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from branch_compare.dependencies import (
    get_comparison_service,
    get_directory_browser,
    get_repository_service,
)
from branch_compare.exceptions import BranchCompareError, InternalError
from branch_compare.models import Comparison, Repository
from branch_compare.schemas import (
    AddRepositoryRequest,
    BrowseRequest,
    BrowseResult,
    CloneRepositoryRequest,
    CompareRequest,
    DiffResult,
    ErrorResponse,
    FileContent,
    FileDiff,
    ThreeWayView,
)
from branch_compare.services import ComparisonService, DirectoryBrowser, RepositoryService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["branch-compare"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("/repositories", response_model=List[Repository])
async def list_repositories(service: RepositoryService = Depends(get_repository_service)):
    """List every registered repository."""
    try:
        return service.list_repositories()
    except Exception as e:
        raise InternalError("Failed to fetch repositories") from e


@router.post("/repositories", response_model=Repository)
async def add_repository(
    request: AddRepositoryRequest,
    service: RepositoryService = Depends(get_repository_service),
):
    """Register a local repository; re-adding a known path returns the same record."""
    try:
        return await service.add_repository(request.path, request.name)
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Adding repository %s failed", request.path)
        raise InternalError("Failed to add repository") from e


@router.post("/repositories/clone", response_model=Repository)
async def clone_repository(
    request: CloneRepositoryRequest,
    service: RepositoryService = Depends(get_repository_service),
):
    """Clone a remote repository to a local path and register it."""
    try:
        return await service.clone_repository(request.url, request.local_path, request.name)
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Cloning into %s failed", request.local_path)
        raise InternalError(f"Failed to clone repository: {e}") from e


@router.post("/browse", response_model=BrowseResult)
async def browse_directory(
    request: Optional[BrowseRequest] = None,
    browser: DirectoryBrowser = Depends(get_directory_browser),
):
    """List subdirectories and flag the git repositories among them."""
    try:
        return await browser.browse(request.dir_path if request else None)
    except BranchCompareError:
        raise
    except Exception as e:
        raise InternalError("Failed to browse directory") from e


@router.get("/repositories/{repository_id}/branches", response_model=List[str])
async def list_branches(
    repository_id: int,
    service: RepositoryService = Depends(get_repository_service),
):
    try:
        return await service.list_branches(repository_id)
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Listing branches of repository %s failed", repository_id)
        raise InternalError("Failed to fetch branches") from e


@router.post("/repositories/{repository_id}/compare", response_model=DiffResult)
async def compare_branches(
    repository_id: int,
    request: CompareRequest,
    service: ComparisonService = Depends(get_comparison_service),
):
    """Compare target against its merge-base with source and record the result."""
    try:
        return await service.compare(
            repository_id, request.source_branch, request.target_branch
        )
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Comparing branches of repository %s failed", repository_id)
        raise InternalError("Failed to compare branches") from e


@router.get("/repositories/{repository_id}/file", response_model=FileContent)
async def get_file_content(
    repository_id: int,
    branch: str = Query(min_length=1),
    file_path: str = Query(alias="filePath", min_length=1),
    service: RepositoryService = Depends(get_repository_service),
):
    """File content at a branch; a missing file is reported with exists=false."""
    try:
        return await service.get_file(repository_id, branch, file_path)
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Reading %s@%s failed", file_path, branch)
        raise InternalError("Failed to fetch file content") from e


@router.get("/repositories/{repository_id}/diff", response_model=FileDiff)
async def get_file_diff(
    repository_id: int,
    source_branch: str = Query(alias="sourceBranch", min_length=1),
    target_branch: str = Query(alias="targetBranch", min_length=1),
    file_path: str = Query(alias="filePath", min_length=1),
    service: RepositoryService = Depends(get_repository_service),
):
    try:
        diff = await service.get_file_diff(
            repository_id, source_branch, target_branch, file_path
        )
        return FileDiff(diff=diff)
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Diffing %s failed", file_path)
        raise InternalError("Failed to fetch file diff") from e


@router.get("/repositories/{repository_id}/preview", response_model=ThreeWayView)
async def get_three_way_view(
    repository_id: int,
    source_branch: str = Query(alias="sourceBranch", min_length=1),
    target_branch: str = Query(alias="targetBranch", min_length=1),
    file_path: str = Query(alias="filePath", min_length=1),
    service: RepositoryService = Depends(get_repository_service),
):
    """Source, target and merge-preview columns for one file."""
    try:
        return await service.get_three_way_view(
            repository_id, source_branch, target_branch, file_path
        )
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Building preview of %s failed", file_path)
        raise InternalError("Failed to fetch file content") from e


@router.get(
    "/repositories/{repository_id}/comparisons", response_model=List[Comparison]
)
async def list_comparisons(
    repository_id: int,
    service: ComparisonService = Depends(get_comparison_service),
):
    try:
        return service.list_comparisons(repository_id)
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Listing comparisons of repository %s failed", repository_id)
        raise InternalError("Failed to fetch comparisons") from e


@router.get("/comparisons/{comparison_id}", response_model=Comparison)
async def get_comparison(
    comparison_id: int,
    service: ComparisonService = Depends(get_comparison_service),
):
    try:
        return service.get_comparison(comparison_id)
    except BranchCompareError:
        raise
    except Exception as e:
        logger.exception("Fetching comparison %s failed", comparison_id)
        raise InternalError("Failed to fetch comparison") from e
