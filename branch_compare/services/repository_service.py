"""Repository registration and per-file lookups."""

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

from ..exceptions import DestinationExistsError, NotAGitRepositoryError, RepositoryNotFoundError
from ..models import Repository
from ..protocols.git_gateway_protocol import GitGatewayProtocol
from ..protocols.registry_protocol import RegistryProtocol
from ..schemas import FileContent, ThreeWayView

logger = logging.getLogger(__name__)


def default_name(path: str) -> str:
    return os.path.basename(os.path.normpath(path))


class RepositoryService:
    """Registers repositories and serves branch, file and diff lookups for them."""

    def __init__(self, registry: RegistryProtocol, git_gateway: GitGatewayProtocol):
        self.registry = registry
        self.git_gateway = git_gateway

    def list_repositories(self) -> List[Repository]:
        return self.registry.list_repositories()

    def get_repository(self, repository_id: int) -> Repository:
        repository = self.registry.get(repository_id)
        if repository is None:
            raise RepositoryNotFoundError()
        return repository

    async def add_repository(self, path: str, name: Optional[str] = None) -> Repository:
        await self.git_gateway.verify_repository(path)
        return self.registry.add(name or default_name(path), path)

    async def clone_repository(
        self, url: str, local_path: str, name: Optional[str] = None
    ) -> Repository:
        """Clone `url` into `local_path` and register it.

        An existing directory is accepted when it is already registered or is a
        valid repository, in which case nothing is cloned.
        """
        name = name or default_name(local_path)
        if Path(local_path).exists():
            existing = self.registry.get_by_path(local_path)
            if existing is not None:
                self.registry.touch(existing.id)
                return self.registry.get(existing.id) or existing
            try:
                await self.git_gateway.verify_repository(local_path)
            except NotAGitRepositoryError as e:
                raise DestinationExistsError(
                    "Directory already exists and is not a valid git repository",
                    detail=local_path,
                ) from e
            logger.info("Registering existing repository at %s instead of cloning", local_path)
            return self.registry.add(name, local_path)

        await self.git_gateway.clone(url, local_path)
        return self.registry.add(name, local_path)

    async def list_branches(self, repository_id: int) -> List[str]:
        repository = self.get_repository(repository_id)
        return await self.git_gateway.list_branches(repository.path)

    async def get_file(self, repository_id: int, branch: str, file_path: str) -> FileContent:
        repository = self.get_repository(repository_id)
        return await self.git_gateway.show_file(repository.path, branch, file_path)

    async def get_file_diff(
        self, repository_id: int, source_branch: str, target_branch: str, file_path: str
    ) -> str:
        repository = self.get_repository(repository_id)
        return await self.git_gateway.file_diff(
            repository.path, source_branch, target_branch, file_path
        )

    async def get_three_way_view(
        self, repository_id: int, source_branch: str, target_branch: str, file_path: str
    ) -> ThreeWayView:
        repository = self.get_repository(repository_id)
        source, target = await asyncio.gather(
            self.git_gateway.show_file(repository.path, source_branch, file_path),
            self.git_gateway.show_file(repository.path, target_branch, file_path),
        )
        return ThreeWayView(
            source_branch=source_branch,
            target_branch=target_branch,
            file_path=file_path,
            source=source,
            target=target,
            merged=target.model_copy(),
        )
